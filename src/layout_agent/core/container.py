"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from ..agents.pipeline import LayoutPipeline
from ..clients.layout import LayoutClient
from .config import Settings, get_settings


class CoreModule(Module):
    """Core dependencies."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        """Provide application settings."""
        return self.settings

    @singleton
    @provider
    def provide_layout_pipeline(self, settings: Settings) -> LayoutPipeline:
        """Provide the pipeline, with a remote client only when a key is configured."""
        client = LayoutClient.create(
            settings.openai_api_key,
            model=settings.openai_model,
            url=settings.openai_url,
            request_timeout=settings.request_timeout,
            resource_timeout=settings.resource_timeout,
        )
        return LayoutPipeline(client=client)


def create_container(settings: Settings | None = None) -> Injector:
    """Create configured injector."""
    return Injector([CoreModule(settings or get_settings())])

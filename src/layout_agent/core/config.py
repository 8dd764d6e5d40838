"""Configuration Management."""

import os
from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

OPENAI_CHAT_URL = "https://api.openai.com/v1/chat/completions"


class Settings(BaseSettings):
    """Application settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="LAYOUT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Remote layout service (disabled when the key is empty)
    openai_api_key: str = Field(
        default_factory=lambda: os.getenv("OPENAI_API_KEY", ""), description="OpenAI API key"
    )
    openai_model: str = Field(default="gpt-4o-mini", description="Chat completion model")
    openai_url: str = Field(default=OPENAI_CHAT_URL, description="Chat completions endpoint")
    request_timeout: float = Field(default=30.0, gt=0, description="Per-request timeout (seconds)")
    resource_timeout: float = Field(
        default=60.0, gt=0, description="Overall timeout for one remote resolution (seconds)"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    @property
    def remote_enabled(self) -> bool:
        """Whether a credential for the remote layout service is configured."""
        return bool(self.openai_api_key.strip())


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

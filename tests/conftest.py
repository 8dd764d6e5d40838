"""Pytest configuration and fixtures."""

import os
from typing import Any, Callable

import pytest

from layout_agent.agents.pipeline import LayoutPipeline
from layout_agent.clients.layout import LayoutClient
from layout_agent.core import get_settings
from layout_agent.models.state import LayoutState

TEST_URL = "https://llm.test/v1/chat/completions"


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    # Remote resolution stays off unless a test builds its own client
    os.environ['LAYOUT_OPENAI_API_KEY'] = ''
    os.environ['LAYOUT_LOG_LEVEL'] = 'DEBUG'


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings."""
    get_settings.cache_clear()
    return get_settings()


@pytest.fixture
def default_state():
    """Freshly initialized form state."""
    return LayoutState.default()


# ============================================================================
# Client / Pipeline Fixtures
# ============================================================================

@pytest.fixture
def layout_client():
    """Layout client pointed at the mocked endpoint."""
    return LayoutClient("test-api-key", url=TEST_URL)


@pytest.fixture
def pipeline():
    """Pipeline without a remote client."""
    return LayoutPipeline()


@pytest.fixture
def remote_pipeline(layout_client):
    """Pipeline with a remote client (requests must be mocked with respx)."""
    return LayoutPipeline(client=layout_client)


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def chat_completion() -> Callable[[str], dict[str, Any]]:
    """Build a chat completion envelope around a content string."""

    def _build(content: str) -> dict[str, Any]:
        return {
            "id": "chatcmpl-test",
            "object": "chat.completion",
            "model": "gpt-4o-mini",
            "choices": [
                {
                    "index": 0,
                    "message": {"role": "assistant", "content": content},
                    "finish_reason": "stop",
                }
            ],
        }

    return _build

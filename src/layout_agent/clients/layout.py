"""Remote Layout Service Client"""

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx
from returns.result import Failure, Result, Success

from ..core import JSONParseError, decode_json_object, get_logger
from ..core.config import OPENAI_CHAT_URL
from ..models.instruction import LAYOUT_INSTRUCTION_SCHEMA

logger = get_logger(__name__)

# Keeps the model "on the rails"
SYSTEM_PROMPT = """\
You convert natural-language UI requests into STRICT JSON that matches the provided JSON Schema.
Do not add backticks or commentary. Only return the JSON object.
For color references always use hexadecimal."""


class ErrorKind(str, Enum):
    """Why a remote resolution failed."""

    NETWORK = "network"
    DECODE = "decode"
    ENCODE = "encode"


@dataclass(frozen=True)
class LayoutClientError:
    """Remote call failure (for Result pattern)."""

    kind: ErrorKind
    message: str
    body: str | None = None


class LayoutClient:
    """
    Client for the natural-language-to-instruction service.

    Sends the prompt to an OpenAI-compatible chat completions endpoint with
    a structured-output schema and hands back the raw candidate document.
    Validating that document is the caller's job.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        url: str = OPENAI_CHAT_URL,
        request_timeout: float = 30.0,
        resource_timeout: float = 60.0,
    ) -> None:
        """
        Initialize layout client.

        Args:
            api_key: Bearer credential (must be non-empty, see `create`)
            model: Chat completion model name
            url: Chat completions endpoint
            request_timeout: Connect/read/write timeout in seconds
            resource_timeout: Upper bound for the whole exchange in seconds
        """
        self.model = model
        self.url = url
        self.request_timeout = request_timeout
        self.resource_timeout = resource_timeout
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(request_timeout),
            headers={"Authorization": f"Bearer {api_key}"},
        )

        logger.info("client_init", url=self.url, model=self.model)

    @classmethod
    def create(cls, api_key: str | None, **options: Any) -> "LayoutClient | None":
        """Build a client, or None when no credential is configured."""
        if not api_key or not api_key.strip():
            logger.info("remote_disabled", reason="no_api_key")
            return None
        return cls(api_key.strip(), **options)

    def build_request(self, prompt: str) -> dict[str, Any]:
        """Chat completion body for one prompt."""
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            "temperature": 0,
            "response_format": {
                "type": "json_schema",
                "json_schema": LAYOUT_INSTRUCTION_SCHEMA,
            },
        }

    async def request_instruction(self, prompt: str) -> Result[str, LayoutClientError]:
        """
        Ask the remote service for an instruction document.

        Args:
            prompt: User prompt, sent verbatim as the user message

        Returns:
            Success with the raw document text, or Failure with a network,
            decode or encode error
        """
        try:
            response = await asyncio.wait_for(
                self._client.post(self.url, json=self.build_request(prompt)),
                timeout=self.resource_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning("remote_timeout", timeout=self.resource_timeout)
            return Failure(
                LayoutClientError(ErrorKind.NETWORK, f"No response within {self.resource_timeout}s")
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("http_error", error=str(e))
            return Failure(LayoutClientError(ErrorKind.NETWORK, str(e) or type(e).__name__))
        except UnicodeEncodeError as e:
            logger.warning("request_encode_error", error=str(e))
            return Failure(LayoutClientError(ErrorKind.ENCODE, f"Prompt cannot be sent: {e}"))

        logger.debug("remote_response", status=response.status_code, body=response.text)
        return self.extract_content(response.text)

    @staticmethod
    def extract_content(body: str) -> Result[str, LayoutClientError]:
        """Pull `choices[0].message.content` out of a chat completion body."""
        try:
            root = decode_json_object(body)
        except JSONParseError as e:
            logger.warning("unexpected_response", error=str(e))
            return Failure(LayoutClientError(ErrorKind.DECODE, f"Unexpected response: {e}", body))

        choices = root.get("choices")
        first = choices[0] if isinstance(choices, list) and choices else None
        message = first.get("message") if isinstance(first, dict) else None
        content = message.get("content") if isinstance(message, dict) else None

        if not isinstance(content, str):
            logger.warning("unexpected_response", error="missing message content")
            return Failure(
                LayoutClientError(ErrorKind.DECODE, f"Unexpected response: {body}", body)
            )

        return Success(content)

    async def aclose(self) -> None:
        """Close HTTP client"""
        await self._client.aclose()

    async def __aenter__(self) -> "LayoutClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()


__all__ = ["ErrorKind", "LayoutClient", "LayoutClientError", "SYSTEM_PROMPT"]

"""Layout Pipeline - prompt text to an applied instruction."""

import asyncio
from dataclasses import dataclass, replace
from enum import Enum

from ..clients.layout import LayoutClient
from ..core import LogContext, get_logger
from ..instructions import QUICK_ACTIONS, match_prompt, merge_instruction, parse_instruction
from ..models.instruction import LayoutInstruction
from ..models.state import LayoutState

logger = get_logger(__name__)


class Outcome(str, Enum):
    """How a prompt was resolved."""

    RESET = "reset"
    PATTERN = "pattern"
    DOCUMENT = "document"
    REMOTE = "remote"
    DISCARDED = "discarded"


@dataclass(frozen=True)
class Resolution:
    """Result of handling one prompt. Discarded prompts leave the state as it was."""

    outcome: Outcome
    instruction: LayoutInstruction | None = None
    reason: str | None = None

    @property
    def applied(self) -> bool:
        return self.outcome is not Outcome.DISCARDED

    @classmethod
    def discarded(cls, reason: str) -> "Resolution":
        return cls(Outcome.DISCARDED, reason=reason)


class LayoutPipeline:
    """
    Owns the form state and resolves prompts against it.

    Resolution order per prompt: reset keyword, canned phrase, pasted JSON
    document, remote service. All state changes happen on the event loop
    that calls `handle`; the remote exchange is awaited and its result is
    merged onto whatever the state is when it arrives.
    """

    def __init__(self, client: LayoutClient | None = None, state: LayoutState | None = None) -> None:
        self.client = client
        self._state = state or LayoutState.default()
        self._pending: set[asyncio.Task] = set()

        logger.info("initialized", remote="enabled" if client else "disabled")

    @property
    def state(self) -> LayoutState:
        return self._state

    @property
    def quick_actions(self) -> tuple[str, ...]:
        return QUICK_ACTIONS

    @property
    def remote_enabled(self) -> bool:
        return self.client is not None

    def reset(self) -> None:
        """Restore the default style (entered text included)."""
        self._state = LayoutState.default()
        logger.info("state_reset")

    def set_text(self, name: str | None = None, email: str | None = None) -> None:
        """Update the user-editable entries."""
        updates = {}
        if name is not None:
            updates["name"] = name
        if email is not None:
            updates["email"] = email
        self._state = replace(self._state, **updates)

    def apply(self, instruction: LayoutInstruction) -> LayoutState:
        """Merge an instruction onto the current state."""
        self._state = merge_instruction(self._state, instruction)
        return self._state

    async def handle(self, prompt: str) -> Resolution:
        """
        Resolve and apply one prompt.

        Never raises for bad input or remote failures: those come back as a
        DISCARDED resolution with the state untouched.

        Args:
            prompt: Raw prompt text

        Returns:
            Resolution describing which strategy applied
        """
        text = prompt.strip()
        if not text:
            return Resolution.discarded("empty")

        with LogContext(prompt=text[:50]):
            resolution = self._resolve_local(text)
            if resolution is None:
                resolution = await self._resolve_remote(text)

            logger.info(
                "prompt_resolved", outcome=resolution.outcome.value, reason=resolution.reason
            )
            return resolution

    def submit(self, prompt: str) -> asyncio.Task:
        """
        Schedule `handle` without waiting for it.

        Late results still apply (last write wins). Must be called with a
        running event loop.
        """
        task = asyncio.get_running_loop().create_task(self.handle(prompt))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def drain(self) -> None:
        """Wait for every submitted prompt to finish."""
        if self._pending:
            await asyncio.gather(*self._pending)

    def _resolve_local(self, text: str) -> Resolution | None:
        if text.lower().startswith("reset"):
            self.reset()
            return Resolution(Outcome.RESET)

        canned = match_prompt(text).value_or(None)
        if canned is not None:
            self.apply(canned)
            return Resolution(Outcome.PATTERN, canned)

        if text.startswith("{"):
            pasted = parse_instruction(text).value_or(None)
            if pasted is not None:
                self.apply(pasted)
                return Resolution(Outcome.DOCUMENT, pasted)
            # Malformed paste still gets a chance with the remote service
            logger.debug("paste_rejected")

        return None

    async def _resolve_remote(self, text: str) -> Resolution:
        if self.client is None:
            return Resolution.discarded("remote_disabled")

        result = await self.client.request_instruction(text)
        content = result.value_or(None)
        if content is None:
            error = result.failure()
            logger.warning("remote_failed", kind=error.kind.value, error=error.message)
            return Resolution.discarded(error.kind.value)

        parsed = parse_instruction(content)
        instruction = parsed.value_or(None)
        if instruction is None:
            logger.warning("remote_failed", kind="invalid_document", error=parsed.failure().message)
            return Resolution.discarded("invalid_document")

        # Back on the loop: merge onto the state as it is now
        self.apply(instruction)
        return Resolution(Outcome.REMOTE, instruction)

    async def aclose(self) -> None:
        await self.drain()
        if self.client is not None:
            await self.client.aclose()


__all__ = ["LayoutPipeline", "Outcome", "Resolution"]

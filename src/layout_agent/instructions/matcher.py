"""Canned prompt table - known phrases to instruction documents."""

from dataclasses import dataclass

from returns.maybe import Maybe, Nothing, Some

from ..core import get_logger
from ..models.instruction import LayoutInstruction
from .parser import parse_instruction

logger = get_logger(__name__)


@dataclass(frozen=True)
class CannedPrompt:
    """Phrases that resolve locally, with the document they stand for."""

    phrases: tuple[str, ...]
    document: str

    @property
    def example(self) -> str:
        return self.phrases[0]

    def instruction(self) -> LayoutInstruction:
        # Payloads go through the same parser as any other document
        return parse_instruction(self.document).unwrap()


CANNED_PROMPTS: tuple[CannedPrompt, ...] = (
    CannedPrompt(
        phrases=("make the background green", "background green", "green background"),
        document="""
        {
          "background": { "color": "#10B981" },
          "title": { "color": "#FFFFFF" }
        }
        """,
    ),
    CannedPrompt(
        phrases=("make inputs light pink", "inputs light pink"),
        document='{ "fields": { "color": "#FFB6C1" } }',
    ),
    CannedPrompt(
        phrases=("increase spacing", "bigger spacing", "make space bigger"),
        document='{ "layout": { "spacing": 32 } }',
    ),
    CannedPrompt(
        phrases=("make the save button outlined and bigger", "big outlined save"),
        # fontSize appears twice; the last occurrence (26) is the effective one
        document=(
            '{ "button": { "outline": true, "fontSize": 18, "padding": 12, '
            '"accentColor": "#064E3B", "fontSize": 26 } }'
        ),
    ),
)

# Offered to the user as one-tap actions
QUICK_ACTIONS: tuple[str, ...] = tuple(entry.example for entry in CANNED_PROMPTS)


def match_prompt(prompt: str) -> Maybe[LayoutInstruction]:
    """
    Look a prompt up in the canned table.

    Args:
        prompt: Raw prompt text (trimmed and lower-cased before comparing)

    Returns:
        Some(instruction) for a known phrase, Nothing otherwise
    """
    normalized = prompt.strip().lower()
    for entry in CANNED_PROMPTS:
        if normalized in entry.phrases:
            logger.debug("canned_match", phrase=entry.example)
            return Some(entry.instruction())
    return Nothing


__all__ = ["CannedPrompt", "CANNED_PROMPTS", "QUICK_ACTIONS", "match_prompt"]

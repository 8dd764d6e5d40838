"""Instruction resolution building blocks: parser, canned prompts, merge."""

from .parser import ParseError, parse_instruction
from .matcher import CANNED_PROMPTS, QUICK_ACTIONS, CannedPrompt, match_prompt
from .merge import merge_instruction

__all__ = [
    "ParseError",
    "parse_instruction",
    "CannedPrompt",
    "CANNED_PROMPTS",
    "QUICK_ACTIONS",
    "match_prompt",
    "merge_instruction",
]

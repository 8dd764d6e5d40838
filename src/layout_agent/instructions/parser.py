"""Instruction document parser - JSON text to validated LayoutInstruction."""

from dataclasses import dataclass

import pydantic
from returns.result import Failure, Result, Success

from ..core import JSONParseError, decode_json_object, get_logger
from ..models.instruction import LayoutInstruction

logger = get_logger(__name__)


@dataclass(frozen=True)
class ParseError:
    """Candidate document rejected (for Result pattern)."""

    message: str
    field: str | None = None


def _error_location(error: pydantic.ValidationError) -> str | None:
    errors = error.errors()
    if not errors:
        return None
    return ".".join(str(part) for part in errors[0]["loc"]) or None


def parse_instruction(text: str) -> Result[LayoutInstruction, ParseError]:
    """
    Decode and validate a partial layout instruction.

    The document must be a single JSON object whose keys and leaf types
    match the instruction schema exactly; unknown keys are rejected.

    Args:
        text: Candidate document (pasted by the user, canned, or remote)

    Returns:
        Success with the instruction, or Failure describing the rejection
    """
    try:
        document = decode_json_object(text)
    except JSONParseError as e:
        logger.debug("document_rejected", reason="json", error=str(e))
        return Failure(ParseError(str(e)))

    try:
        instruction = LayoutInstruction.model_validate(document)
    except pydantic.ValidationError as e:
        location = _error_location(e)
        logger.debug("document_rejected", reason="schema", field=location, errors=e.error_count())
        return Failure(ParseError(f"Document does not match schema: {e.errors()[0]['msg']}", location))

    return Success(instruction)


__all__ = ["ParseError", "parse_instruction"]

"""Fast JSON decoding and encoding with multiple backends."""

from typing import Any
import json

import msgspec
import orjson


class JSONParseError(Exception):
    """JSON parsing failed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


_decoder = msgspec.json.Decoder()


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def decode_json_object(text: str) -> dict[str, Any]:
    """
    Decode a JSON document that must be an object.

    No extraction or repair is attempted: the whole text has to be a single
    well-formed JSON object. Duplicate keys resolve to the last occurrence.

    Args:
        text: Raw JSON text

    Returns:
        Decoded dictionary

    Raises:
        JSONParseError: If the text is empty, malformed, or not an object
    """
    text = text.strip()
    if not text:
        raise JSONParseError("Empty document")

    # Lone surrogates have no UTF-8 form
    try:
        data = text.encode("utf-8")
    except UnicodeError as e:
        raise JSONParseError(f"Invalid text: {e}", e) from e

    try:
        result = _decoder.decode(data)
    except msgspec.DecodeError as e:
        # msgspec's verdict stands; the standard library only words the message
        try:
            json.loads(text, parse_constant=_reject_constant)
        except ValueError as stdlib_error:
            raise JSONParseError(f"Invalid JSON: {stdlib_error}", e) from stdlib_error
        raise JSONParseError(f"Invalid JSON: {e}", e) from e

    if not isinstance(result, dict):
        raise JSONParseError(f"Expected object, got {type(result).__name__}")
    return result


def safe_json_dumps(obj: Any, **kwargs: Any) -> str:
    """
    Encode object to JSON string using fastest available library.

    Args:
        obj: Object to encode
        **kwargs: Additional arguments (indent, etc.)

    Returns:
        JSON string
    """
    indent = kwargs.get("indent", 0)

    # Use orjson for compact output (fastest)
    if indent == 0:
        try:
            return orjson.dumps(obj).decode("utf-8")
        except (TypeError, ValueError):
            # Fallback for edge cases (e.g., integers outside 64-bit range)
            pass

    if indent == 2:
        try:
            return orjson.dumps(obj, option=orjson.OPT_INDENT_2).decode("utf-8")
        except (TypeError, ValueError):
            pass

    # Use stdlib for other indents or as fallback (most compatible)
    return json.dumps(obj, indent=indent if indent > 0 else None)


__all__ = ["JSONParseError", "decode_json_object", "safe_json_dumps"]

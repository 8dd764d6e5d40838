"""Color values and loose color reference resolution."""

import string
from dataclasses import dataclass, replace

from returns.maybe import Maybe, Nothing, Some

_HEX_DIGITS = frozenset(string.hexdigits)


@dataclass(frozen=True)
class Color:
    """Normalized RGBA color (8-bit channels, alpha 0.0 - 1.0)."""

    red: int
    green: int
    blue: int
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"Alpha out of range: {self.alpha}")

    @property
    def hex(self) -> str:
        """`#RRGGBB` encoding (alpha is not part of it)."""
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"

    @property
    def is_opaque(self) -> bool:
        return self.alpha >= 1.0

    def with_alpha(self, alpha: float) -> "Color":
        return replace(self, alpha=alpha)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Build from a known-good hex string; raises ValueError otherwise."""
        color = resolve_hex(value).value_or(None)
        if color is None:
            raise ValueError(f"Not a 6-digit hex color: {value!r}")
        return color


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)

# System palette of the original iOS app
NAMED_COLORS: dict[str, Color] = {
    "white": WHITE,
    "black": BLACK,
    "red": Color(0xFF, 0x3B, 0x30),
    "green": Color(0x34, 0xC7, 0x59),
    "blue": Color(0x00, 0x7A, 0xFF),
    "gray": Color(0x8E, 0x8E, 0x93),
    "grey": Color(0x8E, 0x8E, 0x93),
}


def resolve_hex(text: str) -> Maybe[Color]:
    """
    Parse `#RRGGBB` / `RRGGBB` (case-insensitive).

    Returns:
        Some(color) with alpha 1.0, or Nothing for any other input
    """
    digits = text[1:] if text.startswith("#") else text
    if len(digits) != 6 or not all(ch in _HEX_DIGITS for ch in digits):
        return Nothing
    return Some(Color(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)))


def resolve_color(text: str) -> Maybe[Color]:
    """
    Resolve a loosely-typed color reference.

    Accepts a 6-digit hex string (`#` optional) or one of the named colors
    (white, black, red, green, blue, gray/grey). Never raises: anything else
    resolves to Nothing, which callers treat as "keep the previous value".

    Examples:
        >>> resolve_color(" #10b981 ").unwrap().hex
        '#10B981'
        >>> resolve_color("Grey").unwrap().hex
        '#8E8E93'
    """
    value = text.strip()
    if value.startswith("#"):
        return resolve_hex(value)

    named = NAMED_COLORS.get(value.lower())
    if named is not None:
        return Some(named)

    return resolve_hex(value)


__all__ = ["Color", "WHITE", "BLACK", "NAMED_COLORS", "resolve_color", "resolve_hex"]

"""Runtime UI state for the profile form."""

from dataclasses import dataclass, field
from typing import Any

from .color import BLACK, WHITE, Color


def _color_value(color: Color) -> str | dict[str, Any]:
    if color.is_opaque:
        return color.hex
    return {"hex": color.hex, "alpha": color.alpha}


@dataclass(frozen=True)
class FieldStyle:
    """Text-entry field style."""

    color: Color
    text_color: Color
    corner_radius: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "color": _color_value(self.color),
            "textColor": _color_value(self.text_color),
            "cornerRadius": self.corner_radius,
        }


@dataclass(frozen=True)
class ButtonStyle:
    """Save button style."""

    outline: bool
    font_size: float
    padding: float
    accent_color: Color
    color: Color

    def to_dict(self) -> dict[str, Any]:
        return {
            "outline": self.outline,
            "fontSize": self.font_size,
            "padding": self.padding,
            "accentColor": _color_value(self.accent_color),
            "color": _color_value(self.color),
        }


def _default_field() -> FieldStyle:
    return FieldStyle(color=WHITE, text_color=BLACK, corner_radius=8.0)


def _default_button() -> ButtonStyle:
    return ButtonStyle(
        outline=False,
        font_size=16.0,
        padding=10.0,
        accent_color=WHITE,
        color=BLACK.with_alpha(0.2),
    )


@dataclass(frozen=True)
class LayoutState:
    """
    Complete, always-renderable style state of the form.

    Instances are immutable; merges produce a new state so a reader never
    observes a half-applied instruction.
    """

    background: Color = Color(0x1E, 0x63, 0xC6)
    title_text: str = "My Profile"
    title_color: Color = WHITE
    title_size: float = 24.0
    stack_spacing: float = 14.0

    # User-editable entries, never driven by instructions
    name: str = ""
    email: str = ""

    name_field: FieldStyle = field(default_factory=_default_field)
    email_field: FieldStyle = field(default_factory=_default_field)
    save_button: ButtonStyle = field(default_factory=_default_button)

    @classmethod
    def default(cls) -> "LayoutState":
        return cls()

    def to_dict(self) -> dict[str, Any]:
        """Plain snapshot for the rendering layer."""
        return {
            "background": _color_value(self.background),
            "title": {
                "text": self.title_text,
                "color": _color_value(self.title_color),
                "fontSize": self.title_size,
            },
            "layout": {"spacing": self.stack_spacing},
            "entries": {"name": self.name, "email": self.email},
            "fields": {
                "name": self.name_field.to_dict(),
                "email": self.email_field.to_dict(),
            },
            "button": self.save_button.to_dict(),
        }


__all__ = ["FieldStyle", "ButtonStyle", "LayoutState"]

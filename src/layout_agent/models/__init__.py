"""
Models package - colors, partial instructions and UI state.
"""

from .color import Color, NAMED_COLORS, resolve_color
from .instruction import (
    BackgroundSpec,
    ButtonSpec,
    FieldSpec,
    LayoutInstruction,
    LayoutSpec,
    TitleSpec,
    LAYOUT_INSTRUCTION_SCHEMA,
)
from .state import ButtonStyle, FieldStyle, LayoutState

__all__ = [
    # Colors
    "Color",
    "NAMED_COLORS",
    "resolve_color",
    # Instructions
    "BackgroundSpec",
    "TitleSpec",
    "FieldSpec",
    "ButtonSpec",
    "LayoutSpec",
    "LayoutInstruction",
    "LAYOUT_INSTRUCTION_SCHEMA",
    # State
    "FieldStyle",
    "ButtonStyle",
    "LayoutState",
]

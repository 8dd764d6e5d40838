"""
Layout Agent - restyle a fixed profile form from natural language.
"""

from .agents import LayoutPipeline, Outcome, Resolution
from .models import Color, LayoutInstruction, LayoutState, resolve_color

__version__ = "0.1.0"

__all__ = [
    "LayoutPipeline",
    "Outcome",
    "Resolution",
    "Color",
    "LayoutInstruction",
    "LayoutState",
    "resolve_color",
]

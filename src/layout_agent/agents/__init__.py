"""Agents package."""

from .pipeline import LayoutPipeline, Outcome, Resolution

__all__ = ["LayoutPipeline", "Outcome", "Resolution"]

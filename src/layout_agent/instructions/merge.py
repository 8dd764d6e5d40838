"""State merge engine - apply a partial instruction onto the UI state."""

from dataclasses import replace

from ..core import get_logger
from ..models.color import Color, resolve_color
from ..models.instruction import ButtonSpec, FieldSpec, LayoutInstruction
from ..models.state import ButtonStyle, FieldStyle, LayoutState

logger = get_logger(__name__)


def _color(requested: str | None, current: Color, target: str) -> Color:
    """Resolve a requested color, keeping the current one when it does not resolve."""
    if requested is None:
        return current
    resolved = resolve_color(requested).value_or(None)
    if resolved is None:
        logger.debug("color_unresolved", target=target, value=requested)
        return current
    return resolved


def _number(requested: float | None, current: float) -> float:
    return current if requested is None else float(requested)


def merge_field_style(style: FieldStyle, spec: FieldSpec, target: str = "fields") -> FieldStyle:
    return replace(
        style,
        color=_color(spec.color, style.color, f"{target}.color"),
        text_color=_color(spec.text_color, style.text_color, f"{target}.textColor"),
        corner_radius=_number(spec.corner_radius, style.corner_radius),
    )


def merge_button_style(style: ButtonStyle, spec: ButtonSpec) -> ButtonStyle:
    # spec.text is part of the schema but the label is fixed
    return replace(
        style,
        outline=style.outline if spec.outline is None else spec.outline,
        font_size=_number(spec.font_size, style.font_size),
        padding=_number(spec.padding, style.padding),
        accent_color=_color(spec.accent_color, style.accent_color, "button.accentColor"),
        color=_color(spec.color, style.color, "button.color"),
    )


def merge_instruction(state: LayoutState, instruction: LayoutInstruction) -> LayoutState:
    """
    Apply a partial instruction.

    Only the leaves present in the instruction change; everything else is
    carried over untouched. Colors that fail to resolve keep their previous
    value without aborting the rest of the merge. Applying the same
    instruction twice gives the same state as applying it once.

    Args:
        state: Current state (not modified)
        instruction: Decoded partial instruction

    Returns:
        New state with the instruction applied
    """
    updates: dict = {}

    if instruction.background is not None:
        updates["background"] = _color(
            instruction.background.color, state.background, "background.color"
        )

    if instruction.title is not None:
        title = instruction.title
        if title.text is not None:
            updates["title_text"] = title.text
        updates["title_color"] = _color(title.color, state.title_color, "title.color")
        updates["title_size"] = _number(title.font_size, state.title_size)

    # Both text-entry fields always move together
    if instruction.fields is not None:
        updates["name_field"] = merge_field_style(state.name_field, instruction.fields)
        updates["email_field"] = merge_field_style(state.email_field, instruction.fields)

    if instruction.button is not None:
        updates["save_button"] = merge_button_style(state.save_button, instruction.button)

    if instruction.layout is not None:
        updates["stack_spacing"] = _number(instruction.layout.spacing, state.stack_spacing)

    return replace(state, **updates)


__all__ = ["merge_instruction", "merge_field_style", "merge_button_style"]

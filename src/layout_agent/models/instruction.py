"""Partial layout instruction models.

Every field is optional at every level: a missing section or leaf means
"no change requested", never "reset". Unknown keys are rejected so that a
pasted document, a canned phrase payload and a remote response all go through
the same contract as the JSON schema sent to the remote service.
"""

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr

Number = Union[StrictInt, StrictFloat]


class InstructionSection(BaseModel):
    """Base section with strict configuration."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    def requested(self) -> dict[str, Any]:
        """Leaves present in the document, keyed by attribute name."""
        return self.model_dump(exclude_none=True)


class BackgroundSpec(InstructionSection):
    color: StrictStr | None = None


class TitleSpec(InstructionSection):
    text: StrictStr | None = None
    color: StrictStr | None = None
    font_size: Number | None = Field(default=None, alias="fontSize")


class FieldSpec(InstructionSection):
    """Style applied to both text-entry fields."""

    color: StrictStr | None = None
    text_color: StrictStr | None = Field(default=None, alias="textColor")
    corner_radius: Number | None = Field(default=None, alias="cornerRadius")


class ButtonSpec(InstructionSection):
    """Save button style. `text` is accepted but never applied."""

    text: StrictStr | None = None
    color: StrictStr | None = None
    outline: StrictBool | None = None
    font_size: Number | None = Field(default=None, alias="fontSize")
    padding: Number | None = None
    accent_color: StrictStr | None = Field(default=None, alias="accentColor")


class LayoutSpec(InstructionSection):
    spacing: Number | None = None


class LayoutInstruction(InstructionSection):
    """Complete partial-update document."""

    background: BackgroundSpec | None = None
    title: TitleSpec | None = None
    fields: FieldSpec | None = None
    button: ButtonSpec | None = None
    layout: LayoutSpec | None = None

    @property
    def is_empty(self) -> bool:
        """True when the document requests no change at all."""
        return not any(self.requested().values())

    def to_document(self) -> dict[str, Any]:
        """Serializable form using the wire (camelCase) keys."""
        return self.model_dump(by_alias=True, exclude_none=True)


def _section(**properties: str) -> dict[str, Any]:
    return {
        "type": "object",
        "additionalProperties": False,
        "properties": {name: {"type": kind} for name, kind in properties.items()},
    }


# Output shape sent with every remote request (OpenAI `json_schema` response format)
LAYOUT_INSTRUCTION_SCHEMA: dict[str, Any] = {
    "name": "layout_instruction",
    "schema": {
        "type": "object",
        "additionalProperties": False,
        "properties": {
            "background": _section(color="string"),
            "title": _section(text="string", color="string", fontSize="number"),
            "fields": _section(color="string", textColor="string", cornerRadius="number"),
            "button": _section(
                text="string",
                color="string",
                outline="boolean",
                fontSize="number",
                padding="number",
                accentColor="string",
            ),
            "layout": _section(spacing="number"),
        },
    },
}


__all__ = [
    "BackgroundSpec",
    "TitleSpec",
    "FieldSpec",
    "ButtonSpec",
    "LayoutSpec",
    "LayoutInstruction",
    "LAYOUT_INSTRUCTION_SCHEMA",
]

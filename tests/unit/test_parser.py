"""Instruction parser and schema tests."""

import pytest
from pydantic import ValidationError
from returns.result import Failure, Success

from layout_agent.instructions.parser import ParseError, parse_instruction
from layout_agent.models.instruction import (
    LAYOUT_INSTRUCTION_SCHEMA,
    BackgroundSpec,
    ButtonSpec,
    FieldSpec,
    LayoutInstruction,
    LayoutSpec,
    TitleSpec,
)


# ============================================================================
# Accepted documents
# ============================================================================

@pytest.mark.unit
def test_parse_full_document():
    """Test every section and leaf."""
    text = """
    {
      "background": {"color": "#111111"},
      "title": {"text": "Hello", "color": "white", "fontSize": 30},
      "fields": {"color": "#FFB6C1", "textColor": "#222222", "cornerRadius": 4.5},
      "button": {"text": "Go", "color": "red", "outline": true, "fontSize": 20,
                 "padding": 8, "accentColor": "#064E3B"},
      "layout": {"spacing": 20}
    }
    """
    instruction = parse_instruction(text).unwrap()

    assert instruction.background.color == "#111111"
    assert instruction.title.text == "Hello"
    assert instruction.title.font_size == 30
    assert instruction.fields.text_color == "#222222"
    assert instruction.fields.corner_radius == 4.5
    assert instruction.button.outline is True
    assert instruction.button.accent_color == "#064E3B"
    assert instruction.button.text == "Go"
    assert instruction.layout.spacing == 20


@pytest.mark.unit
def test_parse_partial_document():
    """Absent sections and leaves stay None."""
    instruction = parse_instruction('{"button": {"outline": true, "fontSize": 18}}').unwrap()

    assert instruction.background is None
    assert instruction.title is None
    assert instruction.button.padding is None
    assert instruction.button.color is None
    assert instruction.button.font_size == 18


@pytest.mark.unit
def test_parse_empty_object():
    """An empty object is valid and requests nothing."""
    instruction = parse_instruction("{}").unwrap()
    assert instruction.is_empty


@pytest.mark.unit
def test_parse_empty_sections_request_nothing():
    instruction = parse_instruction('{"title": {}, "layout": {}}').unwrap()
    assert instruction.is_empty


@pytest.mark.unit
def test_parse_duplicate_keys_last_wins():
    """Duplicate keys resolve to the last occurrence."""
    instruction = parse_instruction('{"button": {"fontSize": 18, "fontSize": 26}}').unwrap()
    assert instruction.button.font_size == 26


@pytest.mark.unit
def test_parse_null_section_is_no_change():
    instruction = parse_instruction('{"background": null}').unwrap()
    assert instruction.background is None


@pytest.mark.unit
def test_to_document_uses_wire_keys():
    instruction = parse_instruction('{"fields": {"textColor": "#000000"}}').unwrap()
    assert instruction.to_document() == {"fields": {"textColor": "#000000"}}


# ============================================================================
# Rejected documents
# ============================================================================

@pytest.mark.unit
@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        '{"button":',
        "not json",
        "[]",
        '"string"',
        "42",
        "null",
    ],
)
def test_parse_rejects_malformed(text):
    """Malformed or non-object input is a ParseError, never an exception."""
    result = parse_instruction(text)
    assert isinstance(result, Failure)
    assert isinstance(result.failure(), ParseError)


@pytest.mark.unit
@pytest.mark.parametrize(
    "text",
    [
        '{"layout": {"spacing": NaN}}',
        '{"layout": {"spacing": Infinity}}',
        '{"button": {"fontSize": -Infinity}}',
        '{"fields": {"cornerRadius": 1e400}}',
    ],
)
def test_parse_rejects_non_finite_numbers(text):
    """Only finite numbers are renderable."""
    result = parse_instruction(text)
    assert isinstance(result, Failure)
    assert isinstance(result.failure(), ParseError)


@pytest.mark.unit
def test_parse_rejects_lone_surrogate():
    result = parse_instruction('{"title": {"text": "caf\udce9"}}')
    assert isinstance(result.failure(), ParseError)


@pytest.mark.unit
@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_instruction_model_rejects_non_finite(value):
    with pytest.raises(ValidationError):
        LayoutInstruction.model_validate({"layout": {"spacing": value}})


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, field",
    [
        ('{"layout": {"spacing": "32"}}', "layout.spacing"),
        ('{"button": {"outline": 1}}', "button.outline"),
        ('{"button": {"padding": true}}', "button.padding"),
        ('{"background": {"color": 123}}', "background.color"),
        ('{"title": "big"}', "title"),
    ],
)
def test_parse_rejects_wrong_leaf_type(text, field):
    """Leaf types are strict: no coercion."""
    error = parse_instruction(text).failure()
    assert error.field is not None
    assert error.field.startswith(field)


@pytest.mark.unit
@pytest.mark.parametrize(
    "text",
    [
        '{"header": {"color": "#FFFFFF"}}',
        '{"title": {"weight": "bold"}}',
        '{"button": {"font_size": 20}}',
    ],
)
def test_parse_rejects_unknown_keys(text):
    """Unknown keys are rejected at every level."""
    assert isinstance(parse_instruction(text), Failure)


@pytest.mark.unit
def test_parse_success_type():
    assert isinstance(parse_instruction('{"layout": {"spacing": 1}}'), Success)


# ============================================================================
# Schema
# ============================================================================

def _wire_keys(model) -> set[str]:
    return {info.alias or name for name, info in model.model_fields.items()}


@pytest.mark.unit
def test_schema_matches_models():
    """The remote schema lists exactly the keys the models accept."""
    schema = LAYOUT_INSTRUCTION_SCHEMA["schema"]
    sections = {
        "background": BackgroundSpec,
        "title": TitleSpec,
        "fields": FieldSpec,
        "button": ButtonSpec,
        "layout": LayoutSpec,
    }

    assert LAYOUT_INSTRUCTION_SCHEMA["name"] == "layout_instruction"
    assert schema["additionalProperties"] is False
    assert set(schema["properties"]) == _wire_keys(LayoutInstruction) == set(sections)

    for name, model in sections.items():
        section = schema["properties"][name]
        assert section["additionalProperties"] is False
        assert set(section["properties"]) == _wire_keys(model)
        assert "required" not in section


@pytest.mark.unit
def test_schema_leaf_types():
    button = LAYOUT_INSTRUCTION_SCHEMA["schema"]["properties"]["button"]["properties"]
    assert button["outline"] == {"type": "boolean"}
    assert button["fontSize"] == {"type": "number"}
    assert button["text"] == {"type": "string"}

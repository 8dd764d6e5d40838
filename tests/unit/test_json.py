"""JSON helper tests."""

import json

import pytest
from hypothesis import given, strategies as st

from layout_agent.core import JSONParseError, decode_json_object, safe_json_dumps


def test_decode_object():
    assert decode_json_object('  {"layout": {"spacing": 32}} ') == {"layout": {"spacing": 32}}


def test_decode_duplicate_keys_last_wins():
    assert decode_json_object('{"a": 1, "a": 2}') == {"a": 2}


@pytest.mark.parametrize("text", ["", "{", "[1, 2]", "true", "```json\n{}\n```", "{} trailing"])
def test_decode_rejects(text):
    """No extraction or repair: the text is the document."""
    with pytest.raises(JSONParseError):
        decode_json_object(text)


def test_safe_json_dumps():
    obj = {"title": "Test", "items": [1, 2, 3]}
    assert json.loads(safe_json_dumps(obj)) == obj


def test_safe_json_dumps_with_indent():
    obj = {"title": "Test"}
    result = safe_json_dumps(obj, indent=2)
    assert json.loads(result) == obj
    assert "\n" in result


@given(st.dictionaries(st.text(min_size=1), st.integers(-(2**53), 2**53)))
def test_json_roundtrip(data):
    """Property test: encode then decode gives the object back."""
    assert decode_json_object(safe_json_dumps(data)) == data


@pytest.mark.parametrize("token", ["NaN", "Infinity", "-Infinity"])
def test_decode_rejects_non_standard_constants(token):
    with pytest.raises(JSONParseError, match="Invalid JSON"):
        decode_json_object(f'{{"layout": {{"spacing": {token}}}}}')


def test_decode_rejects_lone_surrogate():
    with pytest.raises(JSONParseError) as exc_info:
        decode_json_object('{"title": {"text": "caf\udce9"}}')
    assert isinstance(exc_info.value.original, UnicodeEncodeError)

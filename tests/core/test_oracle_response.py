"""Unit tests for OracleResponse validation."""

import json

import pytest
from pydantic import ValidationError

from book_oracle.core import OracleResponse


def test_well_formed_payload_matches_fixture(oracle_payload, oracle_response):
    """Decoding the provider payload yields the hand-built response."""
    parsed = OracleResponse.from_json(json.dumps(oracle_payload))
    assert parsed == oracle_response


def test_serialization_uses_wire_names(oracle_response, oracle_payload):
    assert json.loads(oracle_response.to_json()) == oracle_payload


def test_fields_are_exposed_in_snake_case(oracle_payload):
    parsed = OracleResponse.from_json(json.dumps(oracle_payload))
    assert parsed.book_context.title == "T"
    assert parsed.reflection.quote == "Q"
    assert parsed.tiny_step == "Step"


def test_empty_object_is_rejected():
    with pytest.raises(ValidationError):
        OracleResponse.from_json("{}")


def test_non_json_is_rejected():
    with pytest.raises(ValidationError):
        OracleResponse.from_json("Here is a book for you: Stoner")


@pytest.mark.parametrize("missing", ["empathy", "bookContext", "reflection", "tinyStep"])
def test_missing_top_level_field_is_rejected(oracle_payload, missing):
    del oracle_payload[missing]
    with pytest.raises(ValidationError):
        OracleResponse.from_json(json.dumps(oracle_payload))


@pytest.mark.parametrize(
    "section, field",
    [("bookContext", "title"), ("bookContext", "author"), ("bookContext", "summary"),
     ("reflection", "quote"), ("reflection", "analysis")],
)
def test_missing_nested_field_is_rejected(oracle_payload, section, field):
    del oracle_payload[section][field]
    with pytest.raises(ValidationError):
        OracleResponse.from_json(json.dumps(oracle_payload))


def test_blank_string_is_rejected(oracle_payload):
    oracle_payload["tinyStep"] = "   "
    with pytest.raises(ValidationError):
        OracleResponse.from_json(json.dumps(oracle_payload))


def test_non_string_value_is_not_coerced(oracle_payload):
    oracle_payload["bookContext"]["title"] = 1984
    with pytest.raises(ValidationError):
        OracleResponse.from_json(json.dumps(oracle_payload))


def test_title_author_and_quote_are_kept_verbatim(oracle_payload):
    """Chinese answers still carry English title, author and quote untouched."""
    oracle_payload["empathy"] = "被同龄人甩在身后的感觉很沉重。"
    oracle_payload["bookContext"] = {
        "title": "Stoner",
        "author": "John Williams",
        "summary": "斯通纳一生默默无闻。",
    }
    oracle_payload["reflection"]["quote"] = "He was forty-three years old."
    parsed = OracleResponse.from_json(json.dumps(oracle_payload))
    assert parsed.book_context.title == "Stoner"
    assert parsed.book_context.author == "John Williams"
    assert parsed.reflection.quote == "He was forty-three years old."


def test_surrounding_whitespace_is_preserved(oracle_payload):
    oracle_payload["reflection"]["quote"] = "  Stay, illusion!  "
    parsed = OracleResponse.from_json(json.dumps(oracle_payload))
    assert parsed.reflection.quote == "  Stay, illusion!  "


@pytest.mark.parametrize("blank", ["", "\n\t "])
def test_empty_or_whitespace_title_is_rejected(oracle_payload, blank):
    oracle_payload["bookContext"]["title"] = blank
    with pytest.raises(ValidationError):
        OracleResponse.from_json(json.dumps(oracle_payload))

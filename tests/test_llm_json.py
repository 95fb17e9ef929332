"""Tests for JSON extraction from model output."""

import pytest

from cookify.services.llm_json import JsonKind, ParseError, extract_json, find_balanced


def test_extracts_array_from_code_fence() -> None:
    text = 'Sure!\n```json\n[{"title": "Soup"}]\n```\nEnjoy.'

    result = extract_json(text, JsonKind.ARRAY)

    assert result.ok
    assert result.value == [{"title": "Soup"}]


def test_extracts_first_balanced_object_only() -> None:
    text = 'Result: {"foods": [{"name": "egg"}]} and also {"other": 1}'

    result = extract_json(text, JsonKind.OBJECT)

    assert result.unwrap() == {"foods": [{"name": "egg"}]}


def test_brackets_inside_strings_are_ignored() -> None:
    text = '[{"title": "Rice ] bowl", "note": "say \\"hi\\" ["}]'

    assert find_balanced(text, JsonKind.ARRAY) == text


def test_missing_json_is_an_error() -> None:
    result = extract_json("I cannot help with that.", JsonKind.ARRAY)

    assert not result.ok
    with pytest.raises(ParseError):
        result.unwrap()


def test_invalid_json_is_an_error() -> None:
    result = extract_json("[{'title': 'single quotes'}]", JsonKind.ARRAY)

    assert not result.ok
    assert "invalid JSON" in (result.error or "")


def test_unterminated_region_is_an_error() -> None:
    assert not extract_json('{"foods": [', JsonKind.OBJECT).ok


def test_empty_response_is_an_error() -> None:
    assert not extract_json("", JsonKind.OBJECT).ok
    assert not extract_json(None, JsonKind.ARRAY).ok

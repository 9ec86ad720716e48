"""Tests for the exception hierarchy and input helpers."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from catalog_filters import (
    CatalogFilterError,
    FieldNotFoundError,
    FilterParseError,
    OperatorNotFoundError,
    parse_bool,
    to_field_list,
)
from catalog_filters.utils import get_field_value

# -- Exceptions --------------------------------------------------------------


def test_all_errors_share_a_base():
    for exc in (
        FilterParseError(),
        OperatorNotFoundError("x", ["gte"]),
        FieldNotFoundError("x", "Model", ["y"]),
    ):
        assert isinstance(exc, CatalogFilterError)


def test_base_to_dict():
    assert CatalogFilterError("boom").to_dict() == {
        "error": "CatalogFilterError",
        "message": "boom",
    }


def test_filter_parse_error_message_lists_fields():
    exc = FilterParseError({"minPrice": ["must be >= 0"], "partTime": ["bad"]})
    assert str(exc) == "minPrice: must be >= 0, partTime: bad"
    assert exc.to_dict() == {
        "error": "FILTER_PARSE_ERROR",
        "message": str(exc),
        "errors": {"minPrice": ["must be >= 0"], "partTime": ["bad"]},
    }


def test_filter_parse_error_from_string_and_none():
    assert FilterParseError("nope").errors == {"__root__": ["nope"]}
    assert str(FilterParseError()) == "Invalid filter parameters"


def test_operator_not_found_suggestions():
    exc = OperatorNotFoundError("startWith", ["startsWith", "endsWith", "gte"])
    assert "startsWith" in exc.suggestions
    assert "Did you mean" in str(exc)
    assert exc.to_dict()["valid_operators"] == ["endsWith", "gte", "startsWith"]


def test_operator_not_found_without_match():
    exc = OperatorNotFoundError("zzz", ["gte"])
    assert exc.suggestions == []
    assert "Did you mean" not in str(exc)


def test_field_not_found_preview_is_truncated():
    fields = [f"field{i:02d}" for i in range(20)]
    exc = FieldNotFoundError("other", "Wide", fields)
    assert str(exc).endswith(", ...")
    assert exc.to_dict()["model"] == "Wide"


# -- Helpers -----------------------------------------------------------------


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, []),
        ("", []),
        ([], []),
        ("title", ["title"]),
        (["a", "", "b"], ["a", "", "b"]),
        (("a", "b"), ["a", "b"]),
    ],
)
def test_to_field_list(value, expected):
    assert to_field_list(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (True, True),
        (False, False),
        (1, True),
        (0, False),
        ("true", True),
        (" Yes ", True),
        ("on", True),
        ("false", False),
        ("0", False),
        ("OFF", False),
    ],
)
def test_parse_bool(value, expected):
    assert parse_bool(value) is expected


@pytest.mark.parametrize("value", ["maybe", "", 2, None])
def test_parse_bool_rejects(value):
    with pytest.raises(ValueError, match="as a boolean"):
        parse_bool(value)


def test_get_field_value():
    assert get_field_value({"a": 1}, "a") == 1
    assert get_field_value({"a": 1}, "b") is None
    assert get_field_value(SimpleNamespace(a=2), "a") == 2
    assert get_field_value(SimpleNamespace(), "a") is None

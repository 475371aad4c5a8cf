"""Tests for JsonKind and kind_of dispatch."""

from __future__ import annotations

from typing import Any

import pytest

from json_field_filter.values import JsonKind, copy_value, kind_of


class TestJsonKind:
    def test_has_exactly_six_members(self) -> None:
        assert len(JsonKind) == 6

    def test_values_are_lowercased(self) -> None:
        assert JsonKind.OBJECT == "object"
        assert JsonKind.ARRAY == "array"
        assert JsonKind.STRING == "string"
        assert JsonKind.NUMBER == "number"
        assert JsonKind.BOOLEAN == "boolean"
        assert JsonKind.NULL == "null"


class TestKindOf:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ({}, JsonKind.OBJECT),
            ({"a": 1}, JsonKind.OBJECT),
            ([], JsonKind.ARRAY),
            ([1, "a"], JsonKind.ARRAY),
            ("", JsonKind.STRING),
            (0, JsonKind.NUMBER),
            (1.5, JsonKind.NUMBER),
            (None, JsonKind.NULL),
        ],
    )
    def test_classification(self, value: Any, expected: JsonKind) -> None:
        assert kind_of(value) is expected

    @pytest.mark.parametrize("value", [True, False])
    def test_bool_is_boolean_not_number(self, value: bool) -> None:
        # bool subclasses int, so it must be classified first
        assert kind_of(value) is JsonKind.BOOLEAN

    @pytest.mark.parametrize("value", [(1, 2), {1, 2}, b"bytes", object()])
    def test_unsupported_types_raise(self, value: Any) -> None:
        with pytest.raises(TypeError, match="Unsupported JSON value type"):
            kind_of(value)


class TestCopyValue:
    def test_copy_is_deep(self) -> None:
        original = {"a": [{"b": 1}]}
        copied = copy_value(original)
        assert copied == original
        copied["a"][0]["b"] = 2  # type: ignore[index]
        assert original["a"][0]["b"] == 1

"""Unit tests for the public API functions."""

from __future__ import annotations

import pytest

from json_field_filter import (
    ExclusionFilter,
    FilterType,
    InclusionFilter,
    Node,
    PathParseError,
    apply_exclusion,
    apply_inclusion,
    filter_json,
    parse_paths,
    select_filter,
)


class TestApplyInclusion:
    def test_flat_object(self) -> None:
        assert apply_inclusion({"a": 1, "b": 2, "c": 3}, "a,b") == {"a": 1, "b": 2}

    def test_nested_object(self) -> None:
        source = {"x": {"y": {"z": 5}, "w": 10}, "v": 20}
        assert apply_inclusion(source, "x(y)") == {"x": {"y": {"z": 5}}}

    def test_nested_arrays(self) -> None:
        source = [[[{"name": "john", "type": 0}]]]
        assert apply_inclusion(source, "name") == [[[{"name": "john"}]]]

    def test_malformed_expression(self) -> None:
        with pytest.raises(PathParseError):
            apply_inclusion({"a": 1}, "a(b")


class TestApplyExclusion:
    def test_flat_object(self) -> None:
        assert apply_exclusion({"a": 1, "b": 2, "c": 3}, "a,b") == {"c": 3}

    def test_nested_object(self) -> None:
        source = {"x": {"y": {"z": 5}, "w": 10}, "v": 20}
        assert apply_exclusion(source, "x(y)") == {"x": {"w": 10}, "v": 20}

    def test_explicit_empty_sub_paths(self) -> None:
        source = {"prop": {"key1": "value1", "key2": "value2"}}
        assert apply_exclusion(source, "prop()") == source


class TestFilterJson:
    def test_defaults_to_inclusion(self) -> None:
        assert filter_json({"a": 1, "b": 2}, "a") == {"a": 1}

    def test_exclusion_by_enum(self) -> None:
        assert filter_json({"a": 1, "b": 2}, "a", FilterType.EXCLUSION) == {"b": 2}

    def test_exclusion_by_string(self) -> None:
        assert filter_json({"a": 1, "b": 2}, "a", "exclusion") == {"b": 2}


class TestSelectFilter:
    def test_inclusion(self) -> None:
        assert isinstance(select_filter(FilterType.INCLUSION), InclusionFilter)

    def test_exclusion(self) -> None:
        assert isinstance(select_filter(FilterType.EXCLUSION), ExclusionFilter)

    def test_none_raises(self) -> None:
        with pytest.raises(ValueError):
            select_filter(None)

    def test_selected_filter_reuses_its_parse_cache(self) -> None:
        selected = select_filter(FilterType.INCLUSION)
        docs = [{"a": i, "b": -i} for i in range(3)]
        assert [selected.apply(doc, "a") for doc in docs] == [{"a": 0}, {"a": 1}, {"a": 2}]


class TestParsePaths:
    def test_returns_merged_root(self) -> None:
        root = parse_paths("a(b(c),b(d))")
        assert isinstance(root, Node)
        assert str(root) == "ROOT(a(b(c,d)))"

    def test_no_global_state_between_calls(self) -> None:
        assert parse_paths("a") == parse_paths("a")

    def test_single_definition_shared_with_tree_package(self) -> None:
        from json_field_filter import api, tree

        assert api.parse_paths is tree.parse_paths

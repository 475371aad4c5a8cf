"""JSON field filter - include or exclude fields of a JSON value by path expression."""

from __future__ import annotations

from json_field_filter.api import (
    apply_exclusion,
    apply_inclusion,
    filter_json,
    parse_paths,
    select_filter,
)
from json_field_filter.config import ParserConfig
from json_field_filter.errors import PathParseError
from json_field_filter.filters import ExclusionFilter, InclusionFilter
from json_field_filter.selector import FilterType, create_filter
from json_field_filter.tree import Node, NodeMerger, PathParser

__version__: str = "0.1.0"
__all__: list[str] = [
    "ExclusionFilter",
    "FilterType",
    "InclusionFilter",
    "Node",
    "NodeMerger",
    "ParserConfig",
    "PathParseError",
    "PathParser",
    "apply_exclusion",
    "apply_inclusion",
    "create_filter",
    "filter_json",
    "parse_paths",
    "select_filter",
]

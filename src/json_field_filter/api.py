"""Public API functions for json-field-filter.

Each call creates fresh filter and parser objects to guarantee zero global
state between calls.  Hold on to a filter from ``select_filter`` to reuse its
parse cache across many documents.
"""

from __future__ import annotations

from json_field_filter.filters import ExclusionFilter, InclusionFilter
from json_field_filter.protocols import JsonFilter
from json_field_filter.selector import FilterType, create_filter
from json_field_filter.tree.parser import parse_paths
from json_field_filter.values import JsonValue

__all__ = [
    "apply_exclusion",
    "apply_inclusion",
    "filter_json",
    "parse_paths",
    "select_filter",
]


def apply_inclusion(source: JsonValue, expression: str | None) -> JsonValue:
    """Return a copy of ``source`` holding only the paths in ``expression``.

    Args:
        source:     Any JSON value (dict, list, str, int, float, bool, None).
        expression: Path expression, e.g. ``"name,address(city)"``.

    Returns:
        A new JSON value; ``source`` is not modified.

    Raises:
        PathParseError: If ``expression`` is malformed.
    """
    return InclusionFilter().apply(source, expression)


def apply_exclusion(source: JsonValue, expression: str | None) -> JsonValue:
    """Return a copy of ``source`` with the paths in ``expression`` removed.

    Args:
        source:     Any JSON value (dict, list, str, int, float, bool, None).
        expression: Path expression, e.g. ``"password,profile(ssn)"``.

    Returns:
        A new JSON value; ``source`` is not modified.

    Raises:
        PathParseError: If ``expression`` is malformed.
    """
    return ExclusionFilter().apply(source, expression)


def filter_json(
    source: JsonValue,
    expression: str | None,
    filter_type: FilterType | str = FilterType.INCLUSION,
) -> JsonValue:
    """Apply the filter selected by ``filter_type`` to ``source``."""
    return create_filter(filter_type).apply(source, expression)


def select_filter(filter_type: FilterType | str | None) -> JsonFilter:
    """Return a new filter for ``filter_type`` (see ``create_filter``)."""
    return create_filter(filter_type)

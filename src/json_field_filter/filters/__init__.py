"""filters subpackage -- the inclusion and exclusion tree walks.

Example::

    from json_field_filter.filters import ExclusionFilter, InclusionFilter

    InclusionFilter().apply({"a": 1, "b": 2, "c": 3}, "a,b")   # {"a": 1, "b": 2}
    ExclusionFilter().apply({"a": 1, "b": 2, "c": 3}, "a,b")   # {"c": 3}
"""

from __future__ import annotations

from json_field_filter.filters.exclusion import ExclusionFilter
from json_field_filter.filters.inclusion import InclusionFilter

__all__ = ["ExclusionFilter", "InclusionFilter"]

"""FilterType StrEnum and the ``create_filter`` dispatch table."""

from __future__ import annotations

import logging
from enum import StrEnum, auto

from json_field_filter.filters import ExclusionFilter, InclusionFilter
from json_field_filter.protocols import JsonFilter
from json_field_filter.tree.parser import PathParser

__all__ = ["FilterType", "create_filter"]

logger = logging.getLogger(__name__)


class FilterType(StrEnum):
    """Which filtering strategy to apply.

    - INCLUSION -> "inclusion" : keep only the named paths
    - EXCLUSION -> "exclusion" : remove the named paths
    """

    INCLUSION = auto()
    EXCLUSION = auto()


_FILTERS: dict[FilterType, type[InclusionFilter] | type[ExclusionFilter]] = {
    FilterType.INCLUSION: InclusionFilter,
    FilterType.EXCLUSION: ExclusionFilter,
}


def create_filter(
    filter_type: FilterType | str | None,
    parser: PathParser | None = None,
) -> JsonFilter:
    """Return a new filter for ``filter_type``.

    Args:
        filter_type: A ``FilterType`` member or its string value
            (case-insensitive, e.g. ``"Exclusion"``).
        parser: Optional parser handed to the filter.

    Returns:
        An ``InclusionFilter`` or ``ExclusionFilter``.

    Raises:
        ValueError: If ``filter_type`` is None or not a known filter type.
    """
    if filter_type is None:
        msg = "The filter type can't be None."
        raise ValueError(msg)

    try:
        resolved = (
            filter_type
            if isinstance(filter_type, FilterType)
            else FilterType(str(filter_type).lower())
        )
    except ValueError:
        msg = f"Unknown filter type: {filter_type!r}"
        raise ValueError(msg) from None

    logger.debug("Creating %s filter", resolved)
    return _FILTERS[resolved](parser)

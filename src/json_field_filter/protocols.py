"""JsonFilter Protocol: the structural interface shared by all filters.

Any class with a conformant ``apply`` method passes ``isinstance`` checks --
no inheritance required.

Example::

    from json_field_filter.protocols import JsonFilter

    class KeepEverything:
        def apply(self, source, expression):
            return source

    assert isinstance(KeepEverything(), JsonFilter)  # structural conformance
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from json_field_filter.values import JsonValue


@runtime_checkable
class JsonFilter(Protocol):
    """Structural protocol for path-expression filters.

    ``apply`` must return a newly allocated JSON value and must never mutate
    ``source``.
    """

    def apply(self, source: JsonValue, expression: str | None) -> JsonValue: ...

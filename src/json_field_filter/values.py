"""JsonKind StrEnum and kind dispatch for native Python JSON values.

The filters operate on the values ``json.loads`` produces: ``dict`` (object),
``list`` (array), ``str``, ``int``/``float`` (number), ``bool`` and ``None``.
Anything else is rejected with ``TypeError``.
"""

from __future__ import annotations

import copy
from enum import StrEnum, auto
from typing import Any

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


class JsonKind(StrEnum):
    """The six kinds of JSON value.

    - OBJECT  -> "object"
    - ARRAY   -> "array"
    - STRING  -> "string"
    - NUMBER  -> "number"
    - BOOLEAN -> "boolean"
    - NULL    -> "null"
    """

    OBJECT = auto()
    ARRAY = auto()
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()


def kind_of(value: Any) -> JsonKind:
    """Classify a Python value as one of the JSON kinds.

    Args:
        value: Any value (expected to be JSON-compatible).

    Returns:
        The matching ``JsonKind``.

    Raises:
        TypeError: If value is not a valid JSON type.
    """
    # bool MUST be checked before int -- bool subclasses int in Python
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if value is None:
        return JsonKind.NULL
    if isinstance(value, dict):
        return JsonKind.OBJECT
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER

    msg = f"Unsupported JSON value type: {type(value)!r}"
    raise TypeError(msg)


def copy_value(value: JsonValue) -> JsonValue:
    """Return a deep copy of a JSON value."""
    return copy.deepcopy(value)

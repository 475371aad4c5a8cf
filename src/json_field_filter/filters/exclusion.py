"""ExclusionFilter: removes the fields named by a path expression.

Walk rules (``apply_node``):

- null                    -> null
- no node                 -> deep copy (nothing to exclude here)
- terminal node           -> null, which tells the parent object to drop
                             the key entirely
- object, explicit list   -> copy of the object where each listed key is
                             filtered by its child and removed when the
                             result is null
- array                   -> every element filtered by the *same* node;
                             length and order are preserved
- string/number/boolean   -> copied verbatim

Null doubles as the removal marker, so a listed key whose value *is* null
is always removed, even when the path gave it sub-paths (``{"a": null}``
with ``a(b)`` becomes ``{}``).

Example::

    ExclusionFilter().apply({"x": {"y": {"z": 5}, "w": 10}, "v": 20}, "x(y)")
    # {"x": {"w": 10}, "v": 20}
"""

from __future__ import annotations

from typing import Any

from json_field_filter.tree.merger import NodeMerger
from json_field_filter.tree.nodes import Node
from json_field_filter.tree.parser import PathParser
from json_field_filter.values import JsonKind, JsonValue, copy_value, kind_of

__all__ = ["ExclusionFilter"]


class ExclusionFilter:
    """Builds a new JSON value with the paths named by an expression removed.

    The source value is never mutated.  Instances hold no state besides their
    ``PathParser`` (and its cache), so one filter may be shared freely.
    """

    def __init__(self, parser: PathParser | None = None) -> None:
        """Initialise the filter.

        Args:
            parser: Parser used for ``apply``.  Defaults to a fresh
                ``PathParser()``.
        """
        self._parser = parser if parser is not None else PathParser()
        self._merger = NodeMerger()

    def apply(self, source: JsonValue, expression: str | None) -> JsonValue:
        """Remove the fields of ``source`` named by ``expression``.

        Args:
            source:     Any JSON value (dict, list, str, int, float, bool, None).
            expression: Path expression such as ``"a,b(c)"``.  ``""`` removes
                        nothing; None names the whole document, so the
                        result is None.

        Returns:
            A newly allocated, filtered JSON value.

        Raises:
            PathParseError: If ``expression`` is malformed.
            TypeError: If ``source`` contains a non-JSON value.
        """
        # Parsed trees are already merged
        return self._walk(source, self._parser.parse(expression))

    def apply_node(self, source: JsonValue, node: Node | None) -> JsonValue:
        """Filter ``source`` by a ``Node`` tree such as ``PathParser.parse`` returns.

        The tree is merged first, so duplicate sibling keys in a hand-built
        tree behave exactly as they would in a parsed expression.
        """
        return self._walk(source, self._merger.merge(node))

    def _walk(self, source: JsonValue, node: Node | None) -> JsonValue:
        kind = kind_of(source)

        if kind is JsonKind.NULL:
            return None
        if node is None:
            return copy_value(source)
        if node.is_terminal:
            return None
        if kind is JsonKind.OBJECT:
            return self._filter_object(source, node.children)  # type: ignore[arg-type]
        if kind is JsonKind.ARRAY:
            return [self._walk(item, node) for item in source]  # type: ignore[union-attr]

        return copy_value(source)

    def _filter_object(
        self, source: dict[str, Any], children: tuple[Node, ...]
    ) -> dict[str, Any]:
        # Keys are unique among merged siblings
        by_key = {child.key: child for child in children}
        filtered: dict[str, Any] = {}

        # Walk the source so surviving keys keep their original order
        for key, value in source.items():
            child = by_key.get(key)
            if child is None:
                filtered[key] = copy_value(value)
                continue
            result = self._walk(value, child)
            if result is not None:
                filtered[key] = result

        return filtered

"""InclusionFilter: keeps only the fields named by a path expression.

Walk rules (``apply_node``):

- null                    -> null
- object, terminal node   -> deep copy of the whole object
- object, explicit list   -> new object holding only the listed keys that
                             exist in the source, each filtered by its child
- array                   -> every element filtered by the *same* node;
                             length and order are preserved
- string/number/boolean   -> copied verbatim

Example::

    InclusionFilter().apply({"x": {"y": {"z": 5}, "w": 10}, "v": 20}, "x(y)")
    # {"x": {"y": {"z": 5}}}
"""

from __future__ import annotations

from typing import Any

from json_field_filter.tree.merger import NodeMerger
from json_field_filter.tree.nodes import Node
from json_field_filter.tree.parser import PathParser
from json_field_filter.values import JsonKind, JsonValue, copy_value, kind_of

__all__ = ["InclusionFilter"]


class InclusionFilter:
    """Builds a new JSON value containing only the paths named by an expression.

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
        """Keep only the fields of ``source`` named by ``expression``.

        Args:
            source:     Any JSON value (dict, list, str, int, float, bool, None).
            expression: Path expression such as ``"a,b(c)"``.  None keeps
                        everything; ``""`` keeps no object fields.

        Returns:
            A newly allocated, filtered JSON value.

        Raises:
            PathParseError: If ``expression`` is malformed.
            TypeError: If ``source`` contains a non-JSON value.
        """
        # Parsed trees are already merged
        return self._walk(source, self._parser.parse(expression))

    def apply_node(self, source: JsonValue, node: Node) -> JsonValue:
        """Filter ``source`` by a ``Node`` tree such as ``PathParser.parse`` returns.

        The tree is merged first, so duplicate sibling keys in a hand-built
        tree behave exactly as they would in a parsed expression.
        """
        return self._walk(source, self._merger.merge(node))

    def _walk(self, source: JsonValue, node: Node) -> JsonValue:
        kind = kind_of(source)

        if kind is JsonKind.NULL:
            return None
        if kind is JsonKind.OBJECT:
            return self._filter_object(source, node)  # type: ignore[arg-type]
        if kind is JsonKind.ARRAY:
            return [self._walk(item, node) for item in source]  # type: ignore[union-attr]

        return copy_value(source)

    def _filter_object(self, source: dict[str, Any], node: Node) -> dict[str, Any]:
        if node.is_terminal:
            # Terminal path: take everything below this point
            return copy_value(source)  # type: ignore[return-value]

        filtered: dict[str, Any] = {}
        for child in node.children:
            if child.key in source:
                filtered[child.key] = self._walk(source[child.key], child)
        return filtered

"""Node dataclass for parsed path expressions.

A ``Node`` is one path segment plus its children.  The children field is
tri-state:

- ``None``      -> no sub-paths were written (``a``).  The node is *terminal*
                   and selects the whole value at its key.
- ``()``        -> an explicit, empty sub-path list (``a()``).
- ``(n1, ...)`` -> explicit sub-paths (``a(b,c)``).

``None`` and ``()`` mean different things to the filters and must never be
conflated; always test with ``is None`` rather than truthiness.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

__all__ = ["ROOT_KEY", "Node"]

# Key of the implicit node wrapping every parsed expression
ROOT_KEY = "ROOT"


@dataclass(frozen=True, slots=True)
class Node:
    """An immutable node in a parsed path tree.

    Attributes:
        key:      The path segment name (``ROOT_KEY`` for the implicit root).
        children: ``None`` when no sub-paths were specified, otherwise a tuple
                  of child nodes (possibly empty).  Any iterable passed here is
                  stored as a tuple so nodes stay hashable.
    """

    key: str
    children: tuple[Node, ...] | None = None

    def __post_init__(self) -> None:
        if self.children is not None and not isinstance(self.children, tuple):
            children: Iterable[Node] = self.children
            object.__setattr__(self, "children", tuple(children))

    @property
    def is_terminal(self) -> bool:
        """True when no sub-paths were specified for this node."""
        return self.children is None

    def __str__(self) -> str:
        """Render the node back to path-expression syntax, e.g. ``a(b(c),d)``."""
        if self.children is None:
            return self.key
        return f"{self.key}({','.join(str(child) for child in self.children)})"

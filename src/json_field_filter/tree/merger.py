"""NodeMerger: consolidates sibling nodes that share a key.

Merging rules for one list of siblings, walked in order:

- A terminal occurrence (``children is None``) records the key as terminal
  only if the key has not been seen yet.
- An occurrence with explicit children turns the key into an accumulating
  list (discarding an earlier terminal state) and appends its children.

One node per distinct key is emitted in first-seen order, and the
accumulated children lists are merged recursively.  For example
``a(b(c),b(d))`` and ``a(b(c,d))`` merge to the same tree, while ``a,a(b)``
merges to ``a(b)``.
"""

from __future__ import annotations

from typing import overload

from json_field_filter.tree.nodes import Node

__all__ = ["NodeMerger", "merge_nodes"]


class NodeMerger:
    """Recursively merges duplicate sibling keys in a ``Node`` tree.

    Stateless and pure: the input tree is never modified and new ``Node``
    instances are always returned.

    Example::

        merger = NodeMerger()
        tree = Node("a", (Node("b", (Node("c"),)), Node("b", (Node("d"),))))
        str(merger.merge(tree))   # "a(b(c,d))"
    """

    @overload
    def merge(self, node: Node) -> Node: ...

    @overload
    def merge(self, node: None) -> None: ...

    def merge(self, node: Node | None) -> Node | None:
        """Return a copy of ``node`` whose sibling keys are unique at every level.

        Args:
            node: Root of the tree to merge, or None.

        Returns:
            The merged tree, or None when ``node`` is None.
        """
        if node is None:
            return None
        return Node(node.key, self._merge_children(node.children))

    def _merge_children(
        self, children: tuple[Node, ...] | None
    ) -> tuple[Node, ...] | None:
        if children is None:
            return None

        # key -> None (terminal so far) or the accumulated grandchildren
        grouped: dict[str, list[Node] | None] = {}

        for child in children:
            if child.is_terminal:
                if child.key not in grouped:
                    grouped[child.key] = None
                continue

            accumulated = grouped.get(child.key)
            if accumulated is None:
                accumulated = []
                grouped[child.key] = accumulated
            accumulated.extend(child.children)

        return tuple(
            Node(key, self._merge_children(None if acc is None else tuple(acc)))
            for key, acc in grouped.items()
        )


def merge_nodes(node: Node | None) -> Node | None:
    """Merge ``node`` with a fresh ``NodeMerger``."""
    return NodeMerger().merge(node)

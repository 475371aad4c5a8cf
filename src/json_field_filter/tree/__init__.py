"""Tree subpackage for path-expression parsing primitives.

Re-exports the public API for the tree module:
- Node: frozen dataclass for one path segment and its (optional) children
- ROOT_KEY: key of the implicit node wrapping every parsed expression
- NodeMerger: consolidates sibling nodes that share a key
- PathParser: parses a path expression into a merged Node tree
"""

from json_field_filter.tree.merger import NodeMerger, merge_nodes
from json_field_filter.tree.nodes import ROOT_KEY, Node
from json_field_filter.tree.parser import PathParser, parse_paths, split_top_level

__all__ = [
    "ROOT_KEY",
    "Node",
    "NodeMerger",
    "PathParser",
    "merge_nodes",
    "parse_paths",
    "split_top_level",
]

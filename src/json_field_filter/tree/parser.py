"""PathParser: turns a path expression such as ``a,b(c,d(e))`` into a Node tree.

Grammar::

    segment-list := segment (',' segment)*
    segment      := key ('(' segment-list ')')?
    key          := [A-Za-z0-9_\\s]*            (surrounding whitespace trimmed)

Parsing proceeds in two steps per nesting level:

1. ``split_top_level`` scans left to right with a parenthesis-depth counter
   and splits on commas only at depth 0.
2. Each trimmed token must match ``_NODE_PATTERN`` in its entirety.  The
   parenthesised content (if any) is fed back into step 1.

The resulting raw tree is wrapped in a ``ROOT_KEY`` node and normalised by
``NodeMerger`` before it is returned.
"""

from __future__ import annotations

import logging
import re
import threading

from cachetools import LRUCache

from json_field_filter.config import ParserConfig
from json_field_filter.errors import PathParseError
from json_field_filter.tree.merger import NodeMerger
from json_field_filter.tree.nodes import ROOT_KEY, Node

__all__ = ["PathParser", "parse_paths", "split_top_level"]

logger = logging.getLogger(__name__)

# Group 1: the key.  Group 3: the content between the outermost parentheses.
# Nested parentheses in group 3 are validated when group 3 is parsed in turn.
_NODE_PATTERN = re.compile(r"([a-zA-Z0-9_\s]*)(\(([a-zA-Z0-9,()_\s]*)\))?", re.ASCII)

# str.strip() with no argument also drops Unicode spaces such as U+00A0, which
# the ASCII grammar must reject.
_WHITESPACE = " \t\n\r\f\v"


def split_top_level(expression: str) -> list[str]:
    """Split ``expression`` on commas that are not inside parentheses.

    Every token is stripped of surrounding ASCII whitespace.  At least one token is
    always returned, so ``""`` yields ``[""]`` and ``"a,"`` yields
    ``["a", ""]``.

    Args:
        expression: The text of one segment list.

    Returns:
        The top-level tokens in order of appearance.
    """
    tokens: list[str] = []
    depth = 0
    start = 0

    for i, char in enumerate(expression):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif char == "," and depth == 0:
            tokens.append(expression[start:i].strip(_WHITESPACE))
            start = i + 1

    tokens.append(expression[start:].strip(_WHITESPACE))
    return tokens


class PathParser:
    """Parses path expressions into merged ``Node`` trees.

    Parsed trees are immutable, so each parser keeps its own LRU cache of
    expression -> tree.  Two parsers never share cache state, and the cache
    never changes the result of ``parse``.  Cache access is guarded by a lock,
    so one parser may be shared between threads.

    Example::

        parser = PathParser()
        root = parser.parse("a,b(c)")
        str(root)                 # "ROOT(a,b(c))"
        root.children[0].children  # None -> "a" is terminal
    """

    def __init__(self, config: ParserConfig | None = None) -> None:
        """Initialise the parser.

        Args:
            config: Cache size and nesting limits.  Defaults to
                ``ParserConfig()``.
        """
        self._config: ParserConfig = config if config is not None else ParserConfig()
        self._merger = NodeMerger()
        self._cache: LRUCache[str | None, Node] = LRUCache(
            maxsize=self._config.max_cache_size
        )
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> ParserConfig:
        """The configuration this parser was built with."""
        return self._config

    @property
    def max_cache_size(self) -> int:
        """The maximum number of parsed expressions the cache can hold."""
        return int(self._cache.maxsize)

    @property
    def cache_size(self) -> int:
        """The number of parsed expressions currently cached."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, expression: str | None) -> Node:
        """Parse a path expression into a merged tree rooted at ``ROOT_KEY``.

        Args:
            expression: The path expression, or None when no expression was
                given at all.  None yields a terminal root (``ROOT``) while
                ``""`` yields a root with an empty children tuple (``ROOT()``).

        Returns:
            The merged root ``Node``.

        Raises:
            TypeError: If expression is neither a str nor None.
            PathParseError: If any token does not match the grammar, or the
                nesting is deeper than ``config.max_depth``.
        """
        if expression is not None and not isinstance(expression, str):
            msg = f"Path expression must be a str or None, got {type(expression)!r}"
            raise TypeError(msg)

        with self._lock:
            cached = self._cache.get(expression)
        if cached is not None:
            logger.debug("Path expression cache hit: %r", expression)
            return cached

        logger.debug("Parsing path expression: %r", expression)
        raw = Node(ROOT_KEY, self._parse_segments(expression, depth=0))
        merged = self._merger.merge(raw)
        with self._lock:
            self._cache[expression] = merged
        return merged

    # ------------------------------------------------------------------
    # Recursive descent
    # ------------------------------------------------------------------

    def _parse_segments(
        self, expression: str | None, depth: int
    ) -> tuple[Node, ...] | None:
        if expression is None:
            return None
        # Empty tokens ("", "a()", "a(,b)") contribute no segment
        return tuple(
            self._parse_segment(token, depth)
            for token in split_top_level(expression)
            if token
        )

    def _parse_segment(self, token: str, depth: int) -> Node:
        match = _NODE_PATTERN.fullmatch(token)
        if match is None:
            raise PathParseError(token)

        content = match.group(3)
        if content is not None and depth >= self._config.max_depth:
            raise PathParseError(
                token, f"nesting deeper than {self._config.max_depth} levels"
            )

        key = match.group(1).strip(_WHITESPACE)
        return Node(key, self._parse_segments(content, depth + 1))


def parse_paths(expression: str | None) -> Node:
    """Parse ``expression`` with a fresh ``PathParser``."""
    return PathParser().parse(expression)

"""ParserConfig frozen dataclass for path-expression parsing.

ParserConfig holds the infrastructure limits of a ``PathParser``: the size
of its per-instance parse cache and the deepest parenthesis nesting it will
accept.  Neither setting changes what a valid expression means.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ParserConfig"]


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Immutable configuration for ``PathParser``.

    Attributes:
        max_cache_size: Maximum number of parsed expressions held in the
            parser's LRU cache (>= 1).  Defaults to 512.
        max_depth: Maximum parenthesis nesting depth of an expression (>= 1).
            Deeper expressions are rejected with ``PathParseError``.
            Defaults to 100.
    """

    max_cache_size: int = 512
    max_depth: int = 100

    def __post_init__(self) -> None:
        if self.max_cache_size < 1:
            msg = f"max_cache_size must be >= 1, got {self.max_cache_size}"
            raise ValueError(msg)
        if self.max_depth < 1:
            msg = f"max_depth must be >= 1, got {self.max_depth}"
            raise ValueError(msg)

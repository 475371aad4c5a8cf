"""Exception types raised by json-field-filter."""

from __future__ import annotations

__all__ = ["PathParseError"]


class PathParseError(ValueError):
    """A path expression (or one of its tokens) does not match the grammar.

    Attributes:
        token: The offending token text, as it appeared after trimming.
    """

    def __init__(self, token: str, reason: str = "does not match the grammar") -> None:
        self.token = token
        super().__init__(f"Invalid path expression token ({reason}): '{token}'.")

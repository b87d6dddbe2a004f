"""
Exceptions raised by protab.

Lookups that miss are not errors: registries return None and the loader
treats that as "create it".
"""

from typing import Optional


class ProtabError(Exception):
    """Base class for everything protab raises on purpose."""


class ParseError(ProtabError):
    """The grammar rejected the input text."""

    def __init__(self, message: str, source: str = "<string>",
                 line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.source = source
        self.line = line
        self.column = column

    def __str__(self):
        if self.line is None or self.line < 1:
            return f"{self.source}: error: {self.message}"
        return f"{self.source}:{self.line}:{self.column}: error: {self.message}"


class ArgumentCountExceeded(ProtabError, ValueError):
    """A predicate application has more arguments than the loader allows."""

    def __init__(self, predicate: str, count: int, limit: int):
        super().__init__(
            f"{predicate}: {count} arguments exceeds the limit of {limit}"
        )
        self.predicate = predicate
        self.count = count
        self.limit = limit

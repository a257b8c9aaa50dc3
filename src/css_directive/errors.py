"""Error hierarchy for css_directive."""

from __future__ import annotations


class CSSDirectiveError(Exception):
    """Base error for all css_directive errors."""


class ParseError(CSSDirectiveError):
    """Raised when CSS source (or a synthesized fragment) cannot be parsed."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        source: str | None = None,
    ):
        self.message = message
        self.line = line
        self.column = column
        self.source = source
        super().__init__(message)

    def __str__(self) -> str:
        if self.line is None:
            return self.message if self.source is None else f"{self.source}: {self.message}"
        where = f"{self.line}:{self.column}"
        if self.source is not None:
            where = f"{self.source}:{where}"
        return f"{where}: {self.message}"


class UtilityDefinitionError(CSSDirectiveError):
    """Raised when utility definitions handed to a resolver are malformed."""

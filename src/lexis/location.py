"""Source position resolution for error messages and debugging.

Provides PositionResolver, which turns absolute character offsets back into
1-based line and column numbers, and SourceLocation, a small value object
for formatting those positions.

Thread Safety:
Both classes are immutable after construction and safe to share.

"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lexis.tokens import Token

# Bare and CR-prefixed line breaks
_LINE_BREAK = re.compile(r"\r?\n")


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages.

    All positions are 1-indexed (lineno and col_offset start at 1).

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column (1-indexed)
        offset: Absolute 0-based offset in the source
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=2, col_offset=3, offset=5)
            >>> str(loc)
            '2:3'

            >>> str(SourceLocation(1, 1, 0, "query.dsl"))
            'query.dsl:1:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location as "file:line:col" or "line:col"."""
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"


class PositionResolver:
    """Resolves offsets in the original input to line/column pairs.

    Usage:
            >>> resolver = PositionResolver("ab\\ncd")
            >>> resolver.where(None)
            (2, 3)
            >>> resolver.where(0)
            (1, 1)

    """

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        self._text = text

    @property
    def text(self) -> str:
        """The original input."""
        return self._text

    def until(self, position: int) -> str:
        """Return the original input up to (not including) ``position``."""
        return self._text[:position]

    def where(self, position: int | None) -> tuple[int, int]:
        """Resolve an offset to a 1-based ``(line, column)`` pair.

        Args:
            position: Absolute offset, or None for the end of the text

        Returns:
            Line is the number of line segments before the offset; column
            follows the last character of the final segment.
        """
        text = self._text if position is None else self.until(position)
        lines = _LINE_BREAK.split(text) if text else [""]
        return len(lines), len(lines[-1]) + 1

    def where_token(self, token: Token) -> tuple[int, int]:
        """Resolve the start of ``token``."""
        return self.where(token.position)

    def locate(self, position: int | None, source_file: str | None = None) -> SourceLocation:
        """Resolve an offset into a SourceLocation.

        Args:
            position: Absolute offset, or None for the end of the text
            source_file: Optional file label for formatting

        Returns:
            SourceLocation for the offset
        """
        lineno, col_offset = self.where(position)
        offset = len(self._text) if position is None else position
        return SourceLocation(lineno, col_offset, offset, source_file)

"""Source location tracking for stream positions.

Provides SourceLocation dataclass describing where a stream's front sits in
its backing buffer. Lexers built on streams use it for error messages.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position in a backing buffer.

    All line and column numbers are 1-indexed; ``offset`` is the 0-based
    index of the character unit in the buffer.

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column offset (1-indexed, counted in character units)
        offset: Absolute offset in the backing buffer
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=2, col_offset=5, offset=9)
            >>> str(loc)
            '2:5'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.txt:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    def with_file(self, source_file: str) -> SourceLocation:
        """Return a copy of this location attributed to ``source_file``."""
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset,
            offset=self.offset,
            source_file=source_file,
        )

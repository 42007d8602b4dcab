"""Source positions for tokens and error messages.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """A span of source text.

    Lines and columns are 1-indexed; the end position is the position
    immediately after the last character of the span. Offsets are 0-based
    indexes into the source string.

    Examples:
            >>> loc = SourceLocation(2, 5, source_file="prims.apl")
            >>> str(loc)
            'prims.apl:2:5'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format as ``file:line:col`` or ``line:col``."""
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

"""Exception classes for aplex."""

from __future__ import annotations


class AplexError(Exception):
    """Base exception for all aplex errors."""

    pass


class LexError(AplexError):
    """No token rule matches the remaining source text.

    Fatal for the tokenization session: the lexer does not resynchronize,
    and callers must abort.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lexical error with optional location.

        Args:
            message: Error description
            lineno: Line number where scanning failed (1-indexed)
            col_offset: Column where scanning failed (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")

"""Token and TokenType definitions for the aplex lexer.

The lexer produces a stream of Token objects that a downstream parser
consumes. Each Token has a type, the exact source text it matched, and
its start/end position.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aplex.location import SourceLocation


class TokenType(Enum):
    """Token kinds produced by the lexer.

    Each member's value is its kind tag. Named categories use a lowercase
    word; single-character punctuation uses the character itself.

    """

    # Stream structure
    EOF = "eof"
    NEWLINE = "newline"  # \n, \r (runs)
    SEPARATOR = "separator"  # ◇ ⋄

    # Literals
    NUMBER = "number"  # 1, ¯2.5e3, 0x1F, 1j2, ¯
    STRING = "string"  # 'a' "b" 'it''s'
    EMBEDDED = "embedded"  # «...»

    # Names and primitives
    SYMBOL = "symbol"  # +, ⍴, ∘., ⎕IO, name

    # Punctuation
    LPAREN = "("
    RPAREN = ")"
    LBRACKET = "["
    RBRACKET = "]"
    LBRACE = "{"
    RBRACE = "}"
    COLON = ":"
    SEMICOLON = ";"
    ARROW = "←"

    # Whitespace and comments, only emitted when LexConfig.keep_trivia is set
    TRIVIA = "trivia"

    @classmethod
    def from_tag(cls, tag: str) -> TokenType:
        """Resolve a kind tag (e.g. ``"number"`` or ``"("``) to its member.

        Raises:
            ValueError: If the tag names no token kind.
        """
        return cls(tag)


OPENERS = frozenset({TokenType.LPAREN, TokenType.LBRACKET, TokenType.LBRACE})
CLOSERS = frozenset({TokenType.RPAREN, TokenType.RBRACKET, TokenType.RBRACE})


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token kind (from TokenType enum)
        value: The exact source text matched, delimiters included
        lineno: Start line number (1-indexed)
        col: Start column (1-indexed)
        end_lineno: Line of the position just after the last character
        end_col: Column of the position just after the last character
        offset: Absolute start position in source
        end_offset: Absolute end position in source
        source_file: Optional source file path

    """

    type: TokenType
    value: str
    lineno: int
    col: int
    end_lineno: int
    end_col: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def kind(self) -> str:
        """Kind tag of this token (``"number"``, ``"("``, ...)."""
        return self.type.value

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from aplex.location import SourceLocation

        loc = SourceLocation(
            lineno=self.lineno,
            col_offset=self.col,
            offset=self.offset,
            end_offset=self.end_offset,
            end_lineno=self.end_lineno,
            end_col_offset=self.end_col,
            source_file=self.source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.lineno}:{self.col})"

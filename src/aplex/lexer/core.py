"""Pull-based lexer for APL-family source.

Each call to ``next_token()`` matches the ordered rule table at the
current position, advances line/column bookkeeping over the match,
updates the bracket stack, and either returns a token or keeps scanning
(discarded whitespace/comments, swallowed newlines).

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator
from typing import NoReturn

from aplex.config import get_lex_config
from aplex.errors import LexError
from aplex.lexer.brackets import BracketStackMixin
from aplex.lexer.rules import match_rule
from aplex.tokens import Token, TokenType
from aplex.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(BracketStackMixin):
    """Scanner turning APL-family source into classified tokens.

    Usage:
            >>> lexer = Lexer("x←1 2\\n")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(SYMBOL, 'x', 1:1)
        Token(ARROW, '←', 1:2)
        Token(NUMBER, '1', 1:3)
        Token(NUMBER, '2', 1:5)
        Token(NEWLINE, '\\n', 1:6)
        Token(EOF, '', 2:1)

    Once the source is exhausted, ``next_token()`` keeps returning an equal
    EOF token; callers stop when they see it.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_lineno",
        "_col",
        "_source_file",
        "_keep_trivia",
        "_bracket_stack",  # Open (, [, { markers; seeded with the top level
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Program text to tokenize
            source_file: Optional source file path for tokens and errors
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._source_file = source_file
        self._keep_trivia = get_lex_config().keep_trivia
        self._reset_brackets()

    @property
    def lineno(self) -> int:
        """Line where the next token starts (1-indexed)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column where the next token starts (1-indexed)."""
        return self._col

    @property
    def offset(self) -> int:
        """Number of source characters consumed so far."""
        return self._pos

    @property
    def bracket_depth(self) -> int:
        """Open brackets, counting the implicit top-level block."""
        return len(self._bracket_stack)

    @property
    def at_end(self) -> bool:
        """True once every source character has been consumed."""
        return self._pos >= self._source_len

    def next_token(self) -> Token:
        """Return the next token in source order.

        Raises:
            LexError: If no rule matches at the current position.
        """
        while True:
            if self._pos >= self._source_len:
                return self._make_eof()

            start_pos = self._pos
            start_lineno = self._lineno
            start_col = self._col

            found = match_rule(self._source, start_pos)
            if found is None:
                self._fail()
            rule, match = found
            value = match.group()
            self._commit(value)
            token_type = rule.resolve(value)

            if token_type is TokenType.TRIVIA and not self._keep_trivia:
                continue
            self._track_bracket(token_type)
            if token_type is TokenType.NEWLINE and not self._newline_significant():
                continue

            return Token(
                type=token_type,
                value=value,
                lineno=start_lineno,
                col=start_col,
                end_lineno=self._lineno,
                end_col=self._col,
                offset=start_pos,
                end_offset=self._pos,
                source_file=self._source_file,
            )

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF token.

        Raises:
            LexError: If the source contains text no rule matches.
        """
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    def _commit(self, text: str) -> None:
        """Advance position over ``text``, which starts at the current position.

        Only ``\\n`` starts a new line; ``\\r`` occupies a column.
        """
        newline_count = text.count("\n")
        if newline_count > 0:
            last_nl = text.rfind("\n")
            self._lineno += newline_count
            self._col = len(text) - last_nl  # chars after last newline + 1
        else:
            self._col += len(text)
        self._pos += len(text)

    def _make_eof(self) -> Token:
        """Create the EOF token at the current (final) position."""
        return Token(
            type=TokenType.EOF,
            value="",
            lineno=self._lineno,
            col=self._col,
            end_lineno=self._lineno,
            end_col=self._col,
            offset=self._pos,
            end_offset=self._pos,
            source_file=self._source_file,
        )

    def _fail(self) -> NoReturn:
        """Raise LexError for the character at the current position."""
        char = self._source[self._pos]
        logger.debug(
            "No token rule matches %r at %d:%d", char, self._lineno, self._col
        )
        raise LexError(
            f"Lexical error: unexpected {char!r}",
            lineno=self._lineno,
            col_offset=self._col,
            source_file=self._source_file,
        )

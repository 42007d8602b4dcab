"""Bracket stack mixin: decides whether a newline is significant.

The stack starts with one brace marker standing for the implicit top-level
block. Openers push, closers pop whatever is on top. Newlines count only
while the innermost open construct is a brace (or the top level); inside
parentheses and square brackets they are swallowed.

Nesting errors are left to the parser. A closer that does not match its
opener, or that arrives with nothing left to pop, is logged and otherwise
ignored.
"""

from __future__ import annotations

from aplex.tokens import CLOSERS, OPENERS, TokenType
from aplex.utils.logger import get_logger

logger = get_logger(__name__)

_CLOSER_FOR: dict[TokenType, TokenType] = {
    TokenType.LPAREN: TokenType.RPAREN,
    TokenType.LBRACKET: TokenType.RBRACKET,
    TokenType.LBRACE: TokenType.RBRACE,
}


class BracketStackMixin:
    """Mixin owning the bracket stack of a Lexer."""

    _bracket_stack: list[TokenType]
    _lineno: int
    _col: int

    def _reset_brackets(self) -> None:
        """Seed the stack with the implicit top-level block."""
        self._bracket_stack = [TokenType.LBRACE]

    def _track_bracket(self, token_type: TokenType) -> None:
        """Push on an opener, pop on a closer, ignore everything else."""
        if token_type in OPENERS:
            self._bracket_stack.append(token_type)
        elif token_type in CLOSERS:
            if not self._bracket_stack:
                logger.debug(
                    "Unbalanced %r before %d:%d ignored",
                    token_type.value,
                    self._lineno,
                    self._col,
                )
                return
            opener = self._bracket_stack.pop()
            if _CLOSER_FOR[opener] is not token_type:
                logger.debug(
                    "%r closes %r before %d:%d",
                    token_type.value,
                    opener.value,
                    self._lineno,
                    self._col,
                )

    def _newline_significant(self) -> bool:
        """True when the innermost open construct is a brace block.

        An empty stack (the implicit block was popped by a stray closer)
        makes newlines insignificant.
        """
        return bool(self._bracket_stack) and self._bracket_stack[-1] is TokenType.LBRACE

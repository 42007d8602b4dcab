"""Lexer for APL-family source.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, TOKEN_RULES
├── core.py              # Lexer class (scan loop + position tracking)
├── rules.py             # Ordered TokenRule table
└── brackets.py          # Bracket stack / newline significance mixin

Usage:
    >>> from aplex.lexer import Lexer
    >>> [t.kind for t in Lexer("(1\\n2)").tokenize()]
    ['(', 'number', 'number', ')', 'eof']

"""

from aplex.lexer.core import Lexer
from aplex.lexer.rules import TOKEN_RULES, TokenRule, match_rule

__all__ = ["Lexer", "TOKEN_RULES", "TokenRule", "match_rule"]

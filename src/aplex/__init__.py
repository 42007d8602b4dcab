"""
aplex — Lexical tokenizer for APL-family source

Turns source text into positioned, classified tokens for a parser.
Newlines inside parentheses and square brackets are swallowed; at the
top level and inside braces they are emitted as statement breaks.

Quick Start:
    >>> from aplex import tokenize
    >>> [(t.kind, t.value) for t in tokenize("x←¯1.5 2")]
    [('symbol', 'x'), ('←', '←'), ('number', '¯1.5'), ('number', '2'), ('eof', '')]

    >>> # Pull tokens one at a time
    >>> from aplex import Lexer
    >>> lexer = Lexer("{⍵+1}")
    >>> lexer.next_token().kind
    '{'

Installation:
    pip install aplex              # zero runtime dependencies
"""

from aplex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from aplex.errors import AplexError, LexError
from aplex.lexer import TOKEN_RULES, Lexer, TokenRule
from aplex.location import SourceLocation
from aplex.serialization import (
    token_from_dict,
    token_to_dict,
    tokens_from_json,
    tokens_to_json,
)
from aplex.tokens import Token, TokenType

__version__ = "0.1.0"


def tokenize(
    source: str,
    *,
    source_file: str | None = None,
    config: LexConfig | None = None,
) -> list[Token]:
    """Tokenize a whole program.

    Args:
        source: Program text
        source_file: Optional source file path for token locations and errors
        config: Optional LexConfig for this call; the previous config is
            restored afterwards

    Returns:
        All tokens in source order, ending with the EOF token

    Raises:
        LexError: If the source contains text no token rule matches

    Example:
        >>> [t.kind for t in tokenize("1\\n2")]
        ['number', 'newline', 'number', 'eof']
    """
    if config is None:
        return list(Lexer(source, source_file=source_file).tokenize())
    with lex_config_context(config):
        return list(Lexer(source, source_file=source_file).tokenize())


__all__ = [
    # Core API
    "tokenize",
    "Lexer",
    "Token",
    "TokenType",
    "TokenRule",
    "TOKEN_RULES",
    "SourceLocation",
    # Errors
    "AplexError",
    "LexError",
    # Configuration
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Serialization
    "token_to_dict",
    "token_from_dict",
    "tokens_to_json",
    "tokens_from_json",
    # Version
    "__version__",
]

"""Ordered token rules for the aplex lexer.

Rules are tried top to bottom against the remaining source; the first rule
whose pattern matches at the current position wins, regardless of match
length. The order is significant: e.g. ``¯`` must reach the number rule
before the symbol fallback, which explicitly refuses it.

Every pattern is anchored with ``Pattern.match(source, pos)``, never
searched, and every pattern consumes at least one character.

"""

from __future__ import annotations

import re
from dataclasses import dataclass

from aplex.tokens import TokenType

# Numeral body shared by the real and imaginary parts. A bare high-minus is
# the placeholder numeral.
_NUMERAL = r"(?:0x[0-9a-f]+|[0-9]*\.?[0-9]+(?:e[+¯]?[0-9]+)?|¯)"

# Characters a comment or a string escape cannot run past.
_LINE_END = r"\n\r\u2028\u2029"

# Case-insensitive matching is restricted to ASCII so that only a-z/A-Z
# count as letters in names, hex digits and exponent markers.
_ASCII_NOCASE = re.IGNORECASE | re.ASCII


@dataclass(frozen=True, slots=True)
class TokenRule:
    """A (kind, pattern) pair.

    Attributes:
        name: Short rule name, used in debug output
        pattern: Compiled pattern, matched at the scan position
        token_type: Kind of the produced token; None means the kind is the
            matched punctuation character itself

    """

    name: str
    pattern: re.Pattern[str]
    token_type: TokenType | None

    def resolve(self, text: str) -> TokenType:
        """Token kind for a successful match of ``text``."""
        if self.token_type is None:
            return TokenType.from_tag(text)
        return self.token_type


TOKEN_RULES: tuple[TokenRule, ...] = (
    # Horizontal whitespace and ⍝/# line comments, in any mix
    TokenRule("trivia", re.compile(rf"(?:[ \t]+|[⍝#][^{_LINE_END}]*)+"), TokenType.TRIVIA),
    TokenRule("newline", re.compile(r"[\n\r]+"), TokenType.NEWLINE),
    TokenRule("separator", re.compile(r"[◇⋄]"), TokenType.SEPARATOR),
    TokenRule(
        "number",
        re.compile(rf"¯?{_NUMERAL}(?:j¯?{_NUMERAL})?", _ASCII_NOCASE),
        TokenType.NUMBER,
    ),
    TokenRule(
        "string",
        re.compile(
            rf"""(?:'(?:[^\\']|\\[^{_LINE_END}])*'|"(?:[^\\"]|\\[^{_LINE_END}])*")+"""
        ),
        TokenType.STRING,
    ),
    TokenRule("punctuation", re.compile(r"[()\[\]{}:;←]"), None),
    TokenRule("embedded", re.compile(r"«[^»]*»"), TokenType.EMBEDDED),
    TokenRule(
        "symbol",
        re.compile(r"""∘\.|⎕?[a-z_][0-9a-z_]*|[^¯'":«»]""", _ASCII_NOCASE),
        TokenType.SYMBOL,
    ),
)


def match_rule(source: str, pos: int) -> tuple[TokenRule, re.Match[str]] | None:
    """Find the first rule matching ``source`` at ``pos``.

    Returns:
        (rule, match) for the winning rule, or None if no rule matches.
    """
    for rule in TOKEN_RULES:
        match = rule.pattern.match(source, pos)
        if match is not None:
            return rule, match
    return None

"""End-to-end tokenization scenarios.

Each test pins the (kind, value) sequence produced for a small program.
"""

import pytest

from aplex import Lexer, LexError, tokenize


def kinds_values(source: str) -> list[tuple[str, str]]:
    return [(t.kind, t.value) for t in tokenize(source)]


class TestBasicScenarios:
    """Small programs covering each rule family."""

    def test_numbers_separated_by_spaces(self) -> None:
        assert kinds_values("1 2 3") == [
            ("number", "1"),
            ("number", "2"),
            ("number", "3"),
            ("eof", ""),
        ]

    def test_newline_inside_parens_is_suppressed(self) -> None:
        assert kinds_values("(1\n2)") == [
            ("(", "("),
            ("number", "1"),
            ("number", "2"),
            (")", ")"),
            ("eof", ""),
        ]

    def test_newline_at_top_level_is_emitted(self) -> None:
        assert kinds_values("1\n2") == [
            ("number", "1"),
            ("newline", "\n"),
            ("number", "2"),
            ("eof", ""),
        ]

    def test_single_quoted_string(self) -> None:
        assert kinds_values("'ab'") == [("string", "'ab'"), ("eof", "")]

    def test_comment_line_keeps_its_newline(self) -> None:
        assert kinds_values("⍝ comment\n1") == [
            ("newline", "\n"),
            ("number", "1"),
            ("eof", ""),
        ]

    def test_unterminated_quote_after_high_minus(self) -> None:
        lexer = Lexer("¯'")
        assert lexer.next_token().value == "¯"
        with pytest.raises(LexError) as exc_info:
            lexer.next_token()
        assert exc_info.value.lineno == 1
        assert exc_info.value.col_offset == 2


class TestRealisticPrograms:
    """Programs mixing several token kinds."""

    def test_assignment_and_reduction(self) -> None:
        assert kinds_values("sum←+/⍳10") == [
            ("symbol", "sum"),
            ("←", "←"),
            ("symbol", "+"),
            ("symbol", "/"),
            ("symbol", "⍳"),
            ("number", "10"),
            ("eof", ""),
        ]

    def test_dfn_with_guard(self) -> None:
        assert kinds_values("{⍵=0:1 ◇ ⍵×∇⍵-1}") == [
            ("{", "{"),
            ("symbol", "⍵"),
            ("symbol", "="),
            ("number", "0"),
            (":", ":"),
            ("number", "1"),
            ("separator", "◇"),
            ("symbol", "⍵"),
            ("symbol", "×"),
            ("symbol", "∇"),
            ("symbol", "⍵"),
            ("symbol", "-"),
            ("number", "1"),
            ("}", "}"),
            ("eof", ""),
        ]

    def test_indexing_with_semicolon(self) -> None:
        assert kinds_values("m[1;2]") == [
            ("symbol", "m"),
            ("[", "["),
            ("number", "1"),
            (";", ";"),
            ("number", "2"),
            ("]", "]"),
            ("eof", ""),
        ]

    def test_outer_product_and_system_name(self) -> None:
        assert kinds_values("⎕IO←0 ◇ a∘.×b") == [
            ("symbol", "⎕IO"),
            ("←", "←"),
            ("number", "0"),
            ("separator", "◇"),
            ("symbol", "a"),
            ("symbol", "∘."),
            ("symbol", "×"),
            ("symbol", "b"),
            ("eof", ""),
        ]

    def test_multiline_dfn_keeps_newlines(self) -> None:
        source = "f←{\n  a←⍵\n  a+1\n}\n"
        kinds = [t.kind for t in tokenize(source)]
        assert kinds == [
            "symbol", "←", "{", "newline",
            "symbol", "←", "symbol", "newline",
            "symbol", "symbol", "number", "newline",
            "}", "newline", "eof",
        ]  # fmt: skip

    def test_embedded_block(self) -> None:
        assert kinds_values("x←«alert(1)»") == [
            ("symbol", "x"),
            ("←", "←"),
            ("embedded", "«alert(1)»"),
            ("eof", ""),
        ]

    def test_empty_source(self) -> None:
        assert kinds_values("") == [("eof", "")]

    def test_only_whitespace_and_comments(self) -> None:
        assert kinds_values("  \t# note") == [("eof", "")]

"""Tests for ContextVar-based lexer configuration.

Validates thread isolation, context manager behavior, and the effect of
trivia retention on the token stream.
"""

from threading import Thread

import pytest

from aplex import (
    LexConfig,
    Lexer,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)


class TestLexConfigDataclass:
    """Test LexConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        assert LexConfig().keep_trivia is False

    def test_immutability(self) -> None:
        config = LexConfig()
        with pytest.raises(AttributeError):
            config.keep_trivia = True  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = LexConfig.from_dict({"keep_trivia": True, "unknown_key": "ignored"})
        assert config.keep_trivia is True

    def test_from_empty_dict(self) -> None:
        assert LexConfig.from_dict({}) == LexConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        """Reset config after each test."""
        reset_lex_config()

    def test_default_config(self) -> None:
        assert get_lex_config().keep_trivia is False

    def test_set_and_get(self) -> None:
        set_lex_config(LexConfig(keep_trivia=True))
        assert get_lex_config().keep_trivia is True

    def test_reset(self) -> None:
        set_lex_config(LexConfig(keep_trivia=True))
        reset_lex_config()
        assert get_lex_config().keep_trivia is False

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with lex_config_context(LexConfig(keep_trivia=True)):
                assert get_lex_config().keep_trivia is True
                raise RuntimeError("boom")
        assert get_lex_config().keep_trivia is False

    def test_thread_isolation(self) -> None:
        set_lex_config(LexConfig(keep_trivia=True))
        seen: list[bool] = []

        def worker() -> None:
            seen.append(get_lex_config().keep_trivia)

        thread = Thread(target=worker)
        thread.start()
        thread.join()

        assert seen == [False]
        assert get_lex_config().keep_trivia is True


class TestKeepTrivia:
    """Test trivia retention in the token stream."""

    def test_trivia_emitted(self) -> None:
        with lex_config_context(LexConfig(keep_trivia=True)):
            tokens = list(Lexer("1 ⍝ one\n2").tokenize())
        assert [(t.kind, t.value) for t in tokens] == [
            ("number", "1"),
            ("trivia", " ⍝ one"),
            ("newline", "\n"),
            ("number", "2"),
            ("eof", ""),
        ]

    def test_trivia_does_not_affect_newline_suppression(self) -> None:
        with lex_config_context(LexConfig(keep_trivia=True)):
            tokens = list(Lexer("(1 \n2)").tokenize())
        assert [t.kind for t in tokens] == ["(", "number", "trivia", "number", ")", "eof"]

    def test_config_read_at_construction(self) -> None:
        lexer = Lexer("1 2")
        with lex_config_context(LexConfig(keep_trivia=True)):
            tokens = list(lexer.tokenize())
        assert [t.kind for t in tokens] == ["number", "number", "eof"]

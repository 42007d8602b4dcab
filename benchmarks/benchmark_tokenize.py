"""Tokenizer throughput.

Usage:
    pytest benchmarks/benchmark_tokenize.py --benchmark-only
"""

from __future__ import annotations

import pytest

from aplex import LexConfig, tokenize


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_tokenize(benchmark, large_program: str) -> None:
    tokens = benchmark(tokenize, large_program)
    assert tokens[-1].kind == "eof"


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_tokenize_keep_trivia(benchmark, large_program: str) -> None:
    config = LexConfig(keep_trivia=True)
    tokens = benchmark(tokenize, large_program, config=config)
    assert any(t.kind == "trivia" for t in tokens)

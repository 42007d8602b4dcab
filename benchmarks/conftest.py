"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_program() -> str:
    """Generate a large program (~100KB) mixing every token kind."""
    sections = []
    for i in range(400):
        sections.append(f"""
⍝ Section {i}
v{i}←¯1.5 2e3 0x{i:x} 3j¯4 ◇ s{i}←'it''s {i}'
f{i}←{{
  (⍺×⍵)+⍳{i}   # dyadic
  m[1;2]∘.×⎕IO
}}
js{i}←«console.log({i})»
""")
    return "\n".join(sections)

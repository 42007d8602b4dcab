"""Tokenize a small program and print one token per line."""

from aplex import tokenize

for token in tokenize("avg←{(+/⍵)÷≢⍵}\navg 1 2 3 ¯4.5\n"):
    print(f"{token.lineno}:{token.col}\t{token.kind}\t{token.value!r}")

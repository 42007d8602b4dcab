"""Token serialization — JSON-compatible records for token streams.

Tokens are written in the record layout downstream tools expect:
``type`` (the kind tag), ``value``, ``startLine``, ``startCol``,
``endLine``, ``endCol``. Offsets and source file are not part of the
record.

All JSON output is deterministic (sorted keys).

Example:
    from aplex import tokenize
    from aplex.serialization import tokens_to_json, tokens_from_json

    tokens = tokenize("1 2 3")
    restored = tokens_from_json(tokens_to_json(tokens))
    assert [t.kind for t in restored] == [t.kind for t in tokens]

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from aplex.tokens import Token, TokenType

_POSITION_KEYS = ("startLine", "startCol", "endLine", "endCol")


def token_to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to its record dict."""
    return {
        "type": token.kind,
        "value": token.value,
        "startLine": token.lineno,
        "startCol": token.col,
        "endLine": token.end_lineno,
        "endCol": token.end_col,
    }


def token_from_dict(data: dict[str, Any]) -> Token:
    """Rebuild a token from a record dict (as produced by token_to_dict).

    Raises:
        ValueError: If ``type`` is missing or unknown, or a position is missing.

    """
    tag = data.get("type")
    if tag is None:
        msg = "Missing 'type' field in serialized token"
        raise ValueError(msg)
    try:
        token_type = TokenType.from_tag(tag)
    except ValueError:
        msg = f"Unknown token type: {tag!r}"
        raise ValueError(msg) from None

    missing = [key for key in _POSITION_KEYS if key not in data]
    if missing:
        msg = f"Missing position field(s) in serialized token: {', '.join(missing)}"
        raise ValueError(msg)

    return Token(
        type=token_type,
        value=data.get("value", ""),
        lineno=data["startLine"],
        col=data["startCol"],
        end_lineno=data["endLine"],
        end_col=data["endCol"],
    )


def tokens_to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token sequence to a JSON array string."""
    return json.dumps(
        [token_to_dict(t) for t in tokens],
        sort_keys=True,
        ensure_ascii=False,
        indent=indent,
    )


def tokens_from_json(json_str: str) -> list[Token]:
    """Deserialize a JSON array string to tokens.

    Raises:
        ValueError: If the JSON is not an array of token records.

    """
    data = json.loads(json_str)
    if not isinstance(data, list):
        msg = "Serialized token stream must be a JSON array"
        raise ValueError(msg)
    return [token_from_dict(item) for item in data]

"""Token stream serialization — JSON hand-off for downstream tools.

The tree builder and the HTML code generator live outside this package.
They receive the token sequence either in-process or as JSON produced
here. Output is deterministic (sorted keys).

Example:
    from owl import tokenize
    from owl.serialization import tokens_to_json, tokens_from_json

    tokens = tokenize('p { "Hello" }')
    assert tokens_from_json(tokens_to_json(tokens)) == tokens

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from owl.tokens import Token, TokenType


def token_to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    The ``value`` key is present only for text-carrying tokens.
    """
    result: dict[str, Any] = {"type": token.type.name, "lineno": token.lineno}
    if token.has_value:
        result["value"] = token.value
    return result


def token_from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from token_to_dict output.

    Raises:
        ValueError: On an unknown token type or a value on a
            payload-less token.
    """
    try:
        token_type = TokenType[data["type"]]
    except KeyError:
        raise ValueError(f"Unknown token type: {data.get('type')!r}") from None
    return Token(token_type, int(data["lineno"]), data.get("value", ""))


def tokens_to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token sequence to a JSON array."""
    return json.dumps(
        [token_to_dict(t) for t in tokens],
        indent=indent,
        sort_keys=True,
        ensure_ascii=False,
    )


def tokens_from_json(json_str: str) -> list[Token]:
    """Deserialize a token sequence from tokens_to_json output."""
    data = json.loads(json_str)
    if not isinstance(data, list):
        raise ValueError("Expected a JSON array of tokens")
    return [token_from_dict(item) for item in data]

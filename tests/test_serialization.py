"""Tests for owl.serialization — token stream JSON hand-off."""

import json

import pytest

from owl import tokenize
from owl.serialization import token_from_dict, token_to_dict, tokens_from_json, tokens_to_json
from owl.tokens import Token, TokenType


class TestTokenDict:
    def test_structural_token_has_no_value_key(self) -> None:
        assert token_to_dict(Token(TokenType.EOF, 3)) == {"type": "EOF", "lineno": 3}

    def test_text_token_keeps_value(self) -> None:
        data = token_to_dict(Token(TokenType.CONTENT, 1, ""))
        assert data == {"type": "CONTENT", "lineno": 1, "value": ""}

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown token type"):
            token_from_dict({"type": "BANG", "lineno": 1})

    def test_value_on_structural_type(self) -> None:
        with pytest.raises(ValueError):
            token_from_dict({"type": "COMMA", "lineno": 1, "value": ","})


class TestTokenStreamJson:
    def test_round_trip_of_scanned_document(self) -> None:
        tokens = tokenize('page {\n  title; "Owl\\t\\{x\\}"\n  link(href = "a.html")\n}')
        assert tokens_from_json(tokens_to_json(tokens)) == tokens

    def test_output_is_deterministic(self) -> None:
        tokens = tokenize("a = b")
        assert tokens_to_json(tokens) == tokens_to_json(list(tokens))

    def test_non_ascii_kept(self) -> None:
        payload = tokens_to_json(tokenize('"café"'))
        assert "café" in payload
        assert json.loads(payload)[0]["value"] == "café"

    def test_rejects_non_array(self) -> None:
        with pytest.raises(ValueError, match="array"):
            tokens_from_json('{"type": "EOF"}')

"""Unit tests for labscan.serializer.serializer — TokenSerializer."""
from __future__ import annotations

import json

import pytest
import yaml

from labscan.grammar.tokens import Token, TokenKind
from labscan.lexer import tokenize
from labscan.serializer import TokenSerializer


@pytest.fixture()
def serializer() -> TokenSerializer:
    return TokenSerializer()


@pytest.fixture()
def tokens() -> list[Token]:
    return tokenize("do { a[i] = a[i] * -1.5; } while (i >= 0);")


class TestToDict:
    def test_document_shape(self, serializer: TokenSerializer) -> None:
        data = serializer.to_dict([Token(TokenKind.IDENTIFIER, "x"), Token(TokenKind.EQUALS, "=")])
        assert data == {
            "kind": "TokenStream",
            "tokens": [
                {"kind": "identifier", "text": "x"},
                {"kind": "equals", "text": "="},
            ],
        }

    def test_empty_stream(self, serializer: TokenSerializer) -> None:
        assert serializer.to_dict([]) == {"kind": "TokenStream", "tokens": []}


class TestFromDict:
    def test_restores_tokens(self, serializer: TokenSerializer, tokens: list[Token]) -> None:
        assert serializer.from_dict(serializer.to_dict(tokens)) == tokens

    def test_rejects_wrong_discriminator(self, serializer: TokenSerializer) -> None:
        with pytest.raises(ValueError, match="TokenStream"):
            serializer.from_dict({"kind": "AgentSpec", "tokens": []})

    def test_rejects_non_list_tokens(self, serializer: TokenSerializer) -> None:
        with pytest.raises(ValueError, match="must be a list"):
            serializer.from_dict({"kind": "TokenStream", "tokens": "x"})

    def test_rejects_unknown_kind(self, serializer: TokenSerializer) -> None:
        with pytest.raises(ValueError):
            serializer.from_dict({"kind": "TokenStream", "tokens": [{"kind": "comment", "text": "#"}]})

    def test_missing_tokens_key_is_empty(self, serializer: TokenSerializer) -> None:
        assert serializer.from_dict({"kind": "TokenStream"}) == []


class TestJson:
    def test_json_is_valid(self, serializer: TokenSerializer, tokens: list[Token]) -> None:
        data = json.loads(serializer.to_json(tokens))
        assert data["tokens"][0] == {"kind": "do", "text": "do"}

    def test_json_round_trip(self, serializer: TokenSerializer, tokens: list[Token]) -> None:
        assert serializer.from_json(serializer.to_json(tokens)) == tokens


class TestYaml:
    def test_yaml_keeps_key_order(self, serializer: TokenSerializer) -> None:
        text = serializer.to_yaml([Token(TokenKind.NUMBER, "7")])
        assert text.index("kind: TokenStream") < text.index("tokens:")

    def test_yaml_is_valid(self, serializer: TokenSerializer, tokens: list[Token]) -> None:
        data = yaml.safe_load(serializer.to_yaml(tokens))
        assert len(data["tokens"]) == len(tokens)

    def test_yaml_round_trip(self, serializer: TokenSerializer, tokens: list[Token]) -> None:
        assert serializer.from_yaml(serializer.to_yaml(tokens)) == tokens

"""Token stream serialization to and from JSON and YAML.

The serialized form is a plain dict with a ``"kind"`` discriminator::

    {
        "kind": "TokenStream",
        "tokens": [
            {"kind": "identifier", "text": "x"},
            {"kind": "equals", "text": "="},
        ],
    }

Token kinds are written with their canonical spelling, so the output
can be compared directly against the ``kind(text)`` display format.

Usage
-----
::

    from labscan.serializer import TokenSerializer

    serializer = TokenSerializer()
    json_text = serializer.to_json(tokens)
    assert serializer.from_json(json_text) == tokens
"""
from __future__ import annotations

import json

import yaml

from labscan.grammar.tokens import Token, TokenKind

_STREAM_KIND = "TokenStream"


class TokenSerializer:
    """Converts between token lists and plain Python dicts."""

    # ------------------------------------------------------------------
    # Serialization (tokens → dict)
    # ------------------------------------------------------------------

    def to_dict(self, tokens: list[Token]) -> dict[str, object]:
        """Serialize a token list to a JSON-compatible dict."""
        return {
            "kind": _STREAM_KIND,
            "tokens": [{"kind": t.kind.value, "text": t.text} for t in tokens],
        }

    # ------------------------------------------------------------------
    # Deserialization (dict → tokens)
    # ------------------------------------------------------------------

    def from_dict(self, data: dict[str, object]) -> list[Token]:
        """Deserialize a token list from a plain dict.

        Raises
        ------
        ValueError
            If ``data`` is not a token stream or names an unknown kind.
        """
        if not isinstance(data, dict) or data.get("kind") != _STREAM_KIND:
            raise ValueError(f"Expected a {_STREAM_KIND!r} document")
        entries = data.get("tokens", [])
        if not isinstance(entries, list):
            raise ValueError("'tokens' must be a list")
        return [
            Token(kind=TokenKind.from_name(str(entry["kind"])), text=str(entry["text"]))
            for entry in entries
        ]

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, tokens: list[Token], indent: int = 2) -> str:
        """Serialize a token list to a JSON string."""
        return json.dumps(self.to_dict(tokens), indent=indent, ensure_ascii=False)

    def from_json(self, text: str) -> list[Token]:
        """Deserialize a token list from a JSON string."""
        data: dict[str, object] = json.loads(text)
        return self.from_dict(data)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, tokens: list[Token]) -> str:
        """Serialize a token list to a YAML string."""
        return yaml.dump(self.to_dict(tokens), default_flow_style=False, allow_unicode=True, sort_keys=False)

    def from_yaml(self, text: str) -> list[Token]:
        """Deserialize a token list from a YAML string."""
        data: dict[str, object] = yaml.safe_load(text)
        return self.from_dict(data)

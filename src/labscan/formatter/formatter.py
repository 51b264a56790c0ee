"""Token stream formatter: token list → display text or source text.

Two renderings are provided:

- ``format_tokens`` lists every token as ``kind(text)`` separated by
  single spaces and starts a new line after each ``terminator``,
  ``blockBegin`` and ``blockEnd`` token, so each statement and each
  block boundary sits on its own line.  With ``indent`` set, lines
  inside a block are indented by nesting depth.
- ``reconstruct`` joins the token texts with single spaces.  The result
  is a program equivalent to the scanned one up to whitespace, and
  scanning it again yields the same tokens.

Usage
-----
::

    from labscan.formatter import TokenFormatter
    from labscan.lexer import tokenize

    print(TokenFormatter().format(tokenize(source)))
"""
from __future__ import annotations

from labscan.grammar.tokens import Token, TokenKind

_LINE_BREAK_AFTER: frozenset[TokenKind] = frozenset({
    TokenKind.TERMINATOR,
    TokenKind.BLOCK_BEGIN,
    TokenKind.BLOCK_END,
})


class TokenFormatter:
    """Renders a token list one statement per line.

    Parameters
    ----------
    indent:
        String prepended once per nesting level to lines inside a block.
        The default ``""`` produces flush-left output.
    """

    def __init__(self, indent: str = "") -> None:
        self._indent = indent

    def format(self, tokens: list[Token]) -> str:
        """Return the display text for ``tokens``.

        The text ends with a newline when the last token is a line-break
        kind; an empty list formats as ``""``.
        """
        lines: list[str] = []
        current: list[str] = []
        depth = 0
        line_depth = 0

        for token in tokens:
            if token.kind is TokenKind.BLOCK_END:
                depth = max(depth - 1, 0)
            if not current:
                line_depth = depth
            current.append(str(token))
            if token.kind is TokenKind.BLOCK_BEGIN:
                depth += 1
            if token.kind in _LINE_BREAK_AFTER:
                lines.append(self._indent * line_depth + " ".join(current) + "\n")
                current = []

        if current:
            lines.append(self._indent * line_depth + " ".join(current))
        return "".join(lines)


def format_tokens(tokens: list[Token], indent: str = "") -> str:
    """Format ``tokens`` with a default ``TokenFormatter``."""
    return TokenFormatter(indent=indent).format(tokens)


def reconstruct(tokens: list[Token]) -> str:
    """Return the token texts joined by single spaces."""
    return " ".join(token.text for token in tokens)

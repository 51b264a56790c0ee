"""Pattern-table scanner: a declarative alternative to the grammar engine.

The source is scanned left to right.  At each offset the ordered
pattern table is tried and the first pattern that matches wins; its
text becomes a token of the pattern's kind, or is dropped for
whitespace.  The table order resolves overlaps: keywords before
identifiers, ``>=`` before ``>``, relational ``==`` before ``=``.

This engine checks spelling only, not structure, so it accepts token
runs that the grammar engine rejects.  For every valid program the two
engines produce the same tokens.  The one context rule it needs for
that is the sign of a number: ``-1`` is a signed number only when the
previous token cannot end an operand, otherwise the ``-`` is an
arithmetic operator.
"""
from __future__ import annotations

import logging
import re
from typing import Final

from labscan.grammar.tokens import OPERAND_END_KINDS, Token, TokenKind
from labscan.lexer.base import Tokenizer, tokenizer_registry
from labscan.lexer.errors import LexError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Character classes
# ---------------------------------------------------------------------------

_LETTER: Final[str] = "[A-Za-z_]"
_DIGIT: Final[str] = "[0-9]"
_WORD_END: Final[str] = f"(?!{_LETTER}|{_DIGIT})"
_UNSIGNED: Final[str] = f"(?:0|[1-9]{_DIGIT}*(?:\\.{_DIGIT}+)?){_WORD_END}"

_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"[ \t\r\n]+")
_SIGNED_NUMBER: Final[re.Pattern[str]] = re.compile(
    f"[+-][1-9]{_DIGIT}*(?:\\.{_DIGIT}+)?{_WORD_END}"
)

# ---------------------------------------------------------------------------
# Token table, in match priority order
# ---------------------------------------------------------------------------

TOKEN_PATTERNS: Final[list[tuple[TokenKind, re.Pattern[str]]]] = [
    (TokenKind.TERMINATOR, re.compile(";")),
    (TokenKind.DO, re.compile(f"do{_WORD_END}")),
    (TokenKind.WHILE, re.compile(f"while{_WORD_END}")),
    (TokenKind.IDENTIFIER, re.compile(f"{_LETTER}(?:{_LETTER}|{_DIGIT})*")),
    (TokenKind.NUMBER, re.compile(_UNSIGNED)),
    (TokenKind.BLOCK_BEGIN, re.compile(r"\{")),
    (TokenKind.BLOCK_END, re.compile(r"\}")),
    (TokenKind.INDEXER_BEGIN, re.compile(r"\[")),
    (TokenKind.INDEXER_END, re.compile(r"\]")),
    (TokenKind.PAR_BEGIN, re.compile(r"\(")),
    (TokenKind.PAR_END, re.compile(r"\)")),
    (TokenKind.REL_OP, re.compile(r">=|<=|>|<|==|!=")),
    (TokenKind.EQUALS, re.compile("=")),
    (TokenKind.ARITHM_OP, re.compile(r"[-+*/]")),
]


@tokenizer_registry.register("pattern")
class PatternScanner(Tokenizer):
    """Table-driven scanner built on compiled regular expressions.

    Parameters
    ----------
    source:
        The complete program text.
    """

    name = "pattern"

    def scan(self) -> list[Token]:
        """Scan the whole source and return its tokens.

        Raises
        ------
        LexError
            ``Unexpected token`` at the first offset no pattern matches.
        """
        source = self._source
        tokens: list[Token] = []
        pos = 0
        while pos < len(source):
            skipped = _WHITESPACE.match(source, pos)
            if skipped is not None:
                pos = skipped.end()
                continue
            token = self._match_at(pos, tokens[-1] if tokens else None)
            if token is None:
                raise LexError.at("Unexpected token", source, pos)
            tokens.append(token)
            pos += len(token.text)
        logger.debug("Pattern scan produced %d token(s)", len(tokens))
        return tokens

    def _match_at(self, pos: int, previous: Token | None) -> Token | None:
        """Return the token starting at ``pos``, or None if nothing matches."""
        if previous is None or previous.kind not in OPERAND_END_KINDS:
            match = _SIGNED_NUMBER.match(self._source, pos)
            if match is not None:
                return Token(kind=TokenKind.NUMBER, text=match.group())
        for kind, pattern in TOKEN_PATTERNS:
            match = pattern.match(self._source, pos)
            if match is not None:
                return Token(kind=kind, text=match.group())
        return None

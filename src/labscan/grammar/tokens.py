"""Token definitions for the labscan toy language.

Defines the closed token vocabulary produced by both scanning engines.
Every token kind is a member of the ``TokenKind`` enum whose value is
the kind's canonical spelling (``blockBegin``, ``relOp`` ...), and every
scanned token is a ``Token`` dataclass carrying its kind and the exact
source text it was matched from.

Tokens carry no position information: the stream is flat and ordered,
and block structure is implicit in the ``blockBegin`` / ``blockEnd``
pairs.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Exhaustive enumeration of token kinds."""

    # -----------------------------------------------------------------
    # Words
    # -----------------------------------------------------------------
    IDENTIFIER = "identifier"
    DO = "do"
    WHILE = "while"

    # -----------------------------------------------------------------
    # Literals
    # -----------------------------------------------------------------
    NUMBER = "number"

    # -----------------------------------------------------------------
    # Delimiters
    # -----------------------------------------------------------------
    TERMINATOR = "terminator"
    BLOCK_BEGIN = "blockBegin"
    BLOCK_END = "blockEnd"
    INDEXER_BEGIN = "indexerBegin"
    INDEXER_END = "indexerEnd"
    PAR_BEGIN = "parBegin"
    PAR_END = "parEnd"
    EQUALS = "equals"

    # -----------------------------------------------------------------
    # Operators
    # -----------------------------------------------------------------
    REL_OP = "relOp"
    ARITHM_OP = "arithmOp"

    @classmethod
    def from_name(cls, name: str) -> TokenKind:
        """Look up a kind by its canonical spelling.

        Raises
        ------
        ValueError
            If ``name`` is not a known token kind.
        """
        return cls(name)


# Mapping from keyword text to its TokenKind.  Every other identifier
# is emitted as ``TokenKind.IDENTIFIER``.
KEYWORDS: dict[str, TokenKind] = {
    "do": TokenKind.DO,
    "while": TokenKind.WHILE,
}

# Kinds that may end an operand; a following ``+`` or ``-`` is an
# arithmetic operator rather than the sign of a number.
OPERAND_END_KINDS: frozenset[TokenKind] = frozenset({
    TokenKind.IDENTIFIER,
    TokenKind.NUMBER,
    TokenKind.INDEXER_END,
    TokenKind.PAR_END,
})


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token.

    Parameters
    ----------
    kind:
        The ``TokenKind`` variant for this token.
    text:
        The exact source text the token was matched from.
    """

    kind: TokenKind
    text: str

    def __str__(self) -> str:
        return f"{self.kind.value}({self.text})"

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r})"

    @property
    def is_keyword(self) -> bool:
        """Return True if this token is ``do`` or ``while``."""
        return self.kind in (TokenKind.DO, TokenKind.WHILE)


def classify_word(word: str) -> TokenKind:
    """Return the token kind for an identifier-shaped word."""
    return KEYWORDS.get(word, TokenKind.IDENTIFIER)

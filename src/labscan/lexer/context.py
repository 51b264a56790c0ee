"""Per-scan mutable state threaded through the grammar rules."""
from __future__ import annotations

from labscan.grammar.tokens import Token, TokenKind
from labscan.lexer.cursor import Cursor
from labscan.lexer.errors import ErrorState


class ScanContext:
    """Cursor, token sink and error slot owned by exactly one scan.

    A fresh context is built for every call to ``GrammarScanner.scan``
    and dropped afterwards, so no state survives between scans.

    Parameters
    ----------
    source:
        The complete source text to scan.
    """

    __slots__ = ("cursor", "tokens", "errors")

    def __init__(self, source: str) -> None:
        self.cursor: Cursor = Cursor(source)
        self.tokens: list[Token] = []
        self.errors: ErrorState = ErrorState(source)

    @property
    def last_kind(self) -> TokenKind | None:
        """Kind of the most recently emitted token, or None."""
        return self.tokens[-1].kind if self.tokens else None

    def emit(self, kind: TokenKind, text: str) -> bool:
        """Append a token.  Always returns True."""
        self.tokens.append(Token(kind=kind, text=text))
        return True

    def fail(self, message: str) -> bool:
        """Record an error at the cursor.  Always returns False."""
        return self.errors.record(message, self.cursor.position)

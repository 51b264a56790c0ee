"""Lexical error type and the first-error-wins error slot.

Both scanning engines report problems through ``LexError``.  The
grammar scanner does not raise at the point of detection: it records
the problem in an ``ErrorState`` and keeps going, and only the first
recorded problem is ever surfaced.  Later mismatches are usually
consequences of the first one and carry no new information.
"""
from __future__ import annotations


class LexError(Exception):
    """Raised when the source text is not a valid program.

    The string form is ``"<message>, line <L>, column <C>."``.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    line:
        1-based line number where the error occurred.
    col:
        1-based column number of the offending character.
    offset:
        0-based offset in the source where the error occurred.
    """

    def __init__(self, message: str, line: int, col: int, offset: int) -> None:
        super().__init__(f"{message}, line {line}, column {col}.")
        self.lex_message = message
        self.line = line
        self.col = col
        self.offset = offset

    @classmethod
    def at(cls, message: str, source: str, offset: int) -> LexError:
        """Build an error located at ``offset`` within ``source``."""
        line, col = locate(source, offset)
        return cls(message, line, col, offset)


def locate(source: str, offset: int) -> tuple[int, int]:
    """Return the 1-based ``(line, column)`` of ``offset`` in ``source``.

    ``offset`` may equal ``len(source)`` to point just past the last
    character.
    """
    prefix = source[: max(offset, 0)]
    line = prefix.count("\n") + 1
    col = len(prefix) - (prefix.rfind("\n") + 1) + 1
    return line, col


class ErrorState:
    """Holds at most one ``LexError`` for a single scan.

    Parameters
    ----------
    source:
        The text being scanned, used to compute line and column.
    """

    __slots__ = ("_source", "_error")

    def __init__(self, source: str) -> None:
        self._source = source
        self._error: LexError | None = None

    @property
    def error(self) -> LexError | None:
        """The first recorded error, or None."""
        return self._error

    @property
    def has_error(self) -> bool:
        return self._error is not None

    def record(self, message: str, offset: int) -> bool:
        """Record an error at ``offset`` unless one is already held.

        Always returns False so a grammar rule can ``return
        state.record(...)`` as its failing branch.
        """
        if self._error is None:
            self._error = LexError.at(message, self._source, offset)
        return False

    def raise_if_set(self) -> None:
        """Raise the held error, if any."""
        if self._error is not None:
            raise self._error

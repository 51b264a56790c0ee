"""Whitespace-skipping character cursor.

The cursor owns the source text and a single current character.  Every
advance silently skips whitespace, so the grammar rules only ever look
at significant characters.  Rules that must not span whitespace (the
characters of one identifier or number) use the step count returned by
``advance`` to notice that whitespace was skipped.

End of input is a sticky sentinel: once the cursor has moved past the
last character its position is ``len(text)``, ``current`` is ``""`` and
further advances are no-ops that report zero steps.  Running off the
end is never an error at this level; the scanner decides afterwards
whether the whole input was consumed.
"""
from __future__ import annotations

from labscan.lexer.chars import is_whitespace


class Cursor:
    """Forward-only cursor over a source string.

    Parameters
    ----------
    text:
        The complete source text.  The cursor starts *before* the first
        character (``position == -1``); call ``advance`` once to prime it.
    """

    __slots__ = ("text", "position", "current")

    def __init__(self, text: str) -> None:
        self.text: str = text
        self.position: int = -1
        self.current: str = ""

    @property
    def at_end(self) -> bool:
        """Return True once every character of the input has been consumed."""
        return self.position >= len(self.text)

    def advance(self) -> int:
        """Move to the next non-whitespace character.

        Returns
        -------
        int
            The number of raw characters stepped over, counting the
            skipped whitespace.  ``1`` means the new current character
            immediately follows the previous one; ``0`` means the cursor
            was already at the end of input.
        """
        start = self.position
        end = len(self.text)
        while self.position < end:
            self.position += 1
            if self.position == end:
                self.current = ""
                break
            self.current = self.text[self.position]
            if not is_whitespace(self.current):
                break
        return self.position - start

    def accept(self, expected: str) -> bool:
        """Consume the current character if it equals ``expected``.

        A failed accept leaves the cursor untouched.
        """
        if self.current and self.current == expected:
            self.advance()
            return True
        return False

    def accept_sequence(self, expected: str) -> bool:
        """Consume ``expected`` if it appears verbatim at the cursor.

        The characters must be contiguous in the source; whitespace
        between them does not match.  A failed attempt leaves the cursor
        untouched.
        """
        if self.position < 0 or not expected:
            return False
        if not self.text.startswith(expected, self.position):
            return False
        for _ in expected:
            self.advance()
        return True

    def slice(self, start: int, end: int) -> str:
        """Return the source text from ``start`` through ``end`` inclusive."""
        return self.text[start : end + 1]

    def __repr__(self) -> str:
        return f"Cursor(position={self.position}, current={self.current!r})"

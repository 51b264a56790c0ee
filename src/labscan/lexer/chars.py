"""Character classes used by the scanners.

All predicates take a single character.  The cursor uses the empty
string as its end-of-input sentinel, and ``""`` belongs to no class.
"""
from __future__ import annotations

from typing import Final

_WHITESPACE: Final[frozenset[str]] = frozenset(" \t\r\n")


def is_digit(ch: str) -> bool:
    """Return True for ``0`` through ``9``."""
    return len(ch) == 1 and "0" <= ch <= "9"


def is_nonzero_digit(ch: str) -> bool:
    """Return True for ``1`` through ``9``."""
    return len(ch) == 1 and "1" <= ch <= "9"


def is_letter(ch: str) -> bool:
    """Return True for ASCII letters and the underscore."""
    return len(ch) == 1 and ("A" <= ch <= "Z" or "a" <= ch <= "z" or ch == "_")


def is_whitespace(ch: str) -> bool:
    """Return True for space, tab, carriage return and line feed."""
    return ch in _WHITESPACE

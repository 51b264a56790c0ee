"""labscan — lexical scanner for a small do-while toy language.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import labscan

    tokens = labscan.tokenize("do { x = x + 1; } while (x < 10);")
    print(labscan.format(tokens))

    # The declarative engine gives the same tokens for valid programs
    assert labscan.tokenize(source, engine="pattern") == tokens

    labscan.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from labscan.grammar.tokens import Token, TokenKind
from labscan.lexer.base import DEFAULT_ENGINE
from labscan.lexer.errors import LexError

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from labscan.lexer.base import Tokenizer


def tokenize(source: str, engine: str = DEFAULT_ENGINE) -> list[Token]:
    """Tokenize a source string.

    Parameters
    ----------
    source:
        Complete program text.
    engine:
        Name of a registered scanning engine: ``"grammar"`` (default,
        validates program structure) or ``"pattern"`` (table-driven).

    Returns
    -------
    list[Token]
        The token stream in source order.

    Raises
    ------
    labscan.LexError
        If the source is not lexically valid.
    """
    from labscan.lexer.base import tokenize as _tokenize

    return _tokenize(source, engine=engine)


def format(tokens: list[Token], indent: str = "") -> str:  # noqa: A001
    """Render tokens as ``kind(text)`` items, one statement per line."""
    from labscan.formatter.formatter import format_tokens

    return format_tokens(tokens, indent=indent)


def reconstruct(tokens: list[Token]) -> str:
    """Return a program text that scans back to ``tokens``."""
    from labscan.formatter.formatter import reconstruct as _reconstruct

    return _reconstruct(tokens)


def engines() -> list[str]:
    """Return the names of all registered scanning engines."""
    from labscan.lexer import tokenizer_registry

    return tokenizer_registry.list_plugins()


def get_engine(name: str) -> type["Tokenizer"]:
    """Return the ``Tokenizer`` class registered as ``name``."""
    from labscan.lexer import tokenizer_registry

    return tokenizer_registry.get(name)


__all__ = [
    "__version__",
    "Token",
    "TokenKind",
    "LexError",
    "tokenize",
    "format",
    "reconstruct",
    "engines",
    "get_engine",
]

"""Shared ``Tokenizer`` interface and the registry of scanning engines.

Each scanning strategy subclasses ``Tokenizer`` and registers itself in
``tokenizer_registry`` under a short engine name.  Engines are
independent: they share no state and are expected to produce the same
token sequence for every valid program.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from labscan.grammar.tokens import Token
from labscan.plugins.registry import PluginRegistry

# Entry-point group through which installed packages can add engines.
TOKENIZER_ENTRYPOINT_GROUP = "labscan.tokenizers"

DEFAULT_ENGINE = "grammar"


class Tokenizer(ABC):
    """Converts one source string into a flat list of tokens.

    Parameters
    ----------
    source:
        The complete program text.
    """

    name: ClassVar[str] = ""

    def __init__(self, source: str) -> None:
        self._source = source

    @property
    def source(self) -> str:
        return self._source

    @abstractmethod
    def scan(self) -> list[Token]:
        """Scan the whole source.

        Raises
        ------
        labscan.lexer.LexError
            If the source is not lexically valid.
        """


tokenizer_registry: PluginRegistry[Tokenizer] = PluginRegistry(
    Tokenizer, "tokenizers", entrypoint_group=TOKENIZER_ENTRYPOINT_GROUP
)


def tokenize(source: str, engine: str = DEFAULT_ENGINE) -> list[Token]:
    """Tokenize ``source`` with the engine registered as ``engine``.

    Parameters
    ----------
    source:
        Program text.
    engine:
        Registered engine name, ``"grammar"`` (default) or ``"pattern"``.

    Returns
    -------
    list[Token]
        The token stream in source order.

    Raises
    ------
    labscan.lexer.LexError
        If the source is not lexically valid.
    labscan.plugins.registry.PluginNotFoundError
        If no engine is registered under ``engine``.

    Example
    -------
    ::

        from labscan.lexer import tokenize
        tokens = tokenize("do { x = x + 1; } while (x < 10);")
    """
    return tokenizer_registry.create(engine, source).scan()

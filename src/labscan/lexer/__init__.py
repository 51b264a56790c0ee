"""labscan lexer module.

Exports the two scanning engines, the shared ``Tokenizer`` interface,
the engine registry and the ``tokenize`` convenience function.
Importing this package registers the built-in ``grammar`` and
``pattern`` engines.
"""
from __future__ import annotations

from labscan.lexer.base import (
    DEFAULT_ENGINE,
    TOKENIZER_ENTRYPOINT_GROUP,
    Tokenizer,
    tokenize,
    tokenizer_registry,
)
from labscan.lexer.errors import ErrorState, LexError, locate
from labscan.lexer.pattern import PatternScanner
from labscan.lexer.scanner import GrammarScanner, scan

__all__ = [
    "Tokenizer",
    "GrammarScanner",
    "PatternScanner",
    "tokenizer_registry",
    "tokenize",
    "scan",
    "LexError",
    "ErrorState",
    "locate",
    "DEFAULT_ENGINE",
    "TOKENIZER_ENTRYPOINT_GROUP",
]

"""labscan grammar module.

Exports token definitions and formal grammar constants.
"""
from __future__ import annotations

from labscan.grammar.grammar import (
    ARITHMETIC_OPERATORS,
    FULL_GRAMMAR,
    GRAMMAR_BLOCK,
    GRAMMAR_EXPRESSION,
    GRAMMAR_LITERALS,
    RELATIONAL_OPERATORS,
)
from labscan.grammar.tokens import KEYWORDS, OPERAND_END_KINDS, Token, TokenKind, classify_word

__all__ = [
    # Token types
    "TokenKind",
    "Token",
    "KEYWORDS",
    "OPERAND_END_KINDS",
    "classify_word",
    # Grammar constants
    "FULL_GRAMMAR",
    "GRAMMAR_BLOCK",
    "GRAMMAR_EXPRESSION",
    "GRAMMAR_LITERALS",
    "RELATIONAL_OPERATORS",
    "ARITHMETIC_OPERATORS",
]

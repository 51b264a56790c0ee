"""Unit tests for labscan.grammar.grammar — EBNF constants and operator tables."""
from __future__ import annotations

from labscan.grammar.grammar import (
    ARITHMETIC_OPERATORS,
    FULL_GRAMMAR,
    GRAMMAR_BLOCK,
    GRAMMAR_EXPRESSION,
    GRAMMAR_LITERALS,
    RELATIONAL_OPERATORS,
)


class TestGrammarConstants:
    def test_block_grammar_names_statements(self) -> None:
        for rule in ("block", "statement", "do_while_loop", "while_clause", "assignment"):
            assert rule in GRAMMAR_BLOCK

    def test_expression_grammar_names_rules(self) -> None:
        for rule in ("variable", "indexer", "condition", "expression", "rel_op", "arithm_op"):
            assert rule in GRAMMAR_EXPRESSION

    def test_literal_grammar(self) -> None:
        assert "IDENT" in GRAMMAR_LITERALS
        assert "NUMBER" in GRAMMAR_LITERALS

    def test_full_grammar_contains_every_section(self) -> None:
        for section in (GRAMMAR_BLOCK, GRAMMAR_EXPRESSION, GRAMMAR_LITERALS):
            assert section in FULL_GRAMMAR


class TestOperatorTables:
    def test_two_character_relational_operators_first(self) -> None:
        assert RELATIONAL_OPERATORS.index(">=") < RELATIONAL_OPERATORS.index(">")
        assert RELATIONAL_OPERATORS.index("<=") < RELATIONAL_OPERATORS.index("<")

    def test_arithmetic_operators(self) -> None:
        assert sorted(ARITHMETIC_OPERATORS) == sorted("+-/*")

"""Unit tests for the scanner building blocks: character classes, the
cursor, the error slot and the rule combinators.
"""
from __future__ import annotations

import pytest

from labscan.grammar.tokens import TokenKind
from labscan.lexer.chars import is_digit, is_letter, is_nonzero_digit, is_whitespace
from labscan.lexer.combinators import first_of, literal, optional, sequence
from labscan.lexer.context import ScanContext
from labscan.lexer.cursor import Cursor
from labscan.lexer.errors import ErrorState, LexError, locate


def _primed(text: str) -> Cursor:
    cursor = Cursor(text)
    cursor.advance()
    return cursor


def _context(text: str) -> ScanContext:
    ctx = ScanContext(text)
    ctx.cursor.advance()
    return ctx


# ---------------------------------------------------------------------------
# Character classes
# ---------------------------------------------------------------------------


class TestCharClasses:
    @pytest.mark.parametrize("ch", list("0123456789"))
    def test_digits(self, ch: str) -> None:
        assert is_digit(ch)

    def test_zero_is_not_nonzero_digit(self) -> None:
        assert not is_nonzero_digit("0")
        assert all(is_nonzero_digit(ch) for ch in "123456789")

    @pytest.mark.parametrize("ch", ["a", "z", "A", "Z", "_"])
    def test_letters(self, ch: str) -> None:
        assert is_letter(ch)

    @pytest.mark.parametrize("ch", ["1", "-", " ", "é", "$"])
    def test_non_letters(self, ch: str) -> None:
        assert not is_letter(ch)

    @pytest.mark.parametrize("ch", [" ", "\t", "\r", "\n"])
    def test_whitespace(self, ch: str) -> None:
        assert is_whitespace(ch)

    def test_end_sentinel_is_in_no_class(self) -> None:
        for predicate in (is_digit, is_nonzero_digit, is_letter, is_whitespace):
            assert not predicate("")


# ---------------------------------------------------------------------------
# Cursor
# ---------------------------------------------------------------------------


class TestCursor:
    def test_starts_before_first_character(self) -> None:
        cursor = Cursor("abc")
        assert cursor.position == -1
        assert cursor.current == ""

    def test_prime_skips_leading_whitespace(self) -> None:
        cursor = Cursor("  \n\tx")
        assert cursor.advance() == 5
        assert cursor.position == 4
        assert cursor.current == "x"

    def test_single_step_reports_one(self) -> None:
        cursor = _primed("ab")
        assert cursor.advance() == 1
        assert cursor.current == "b"

    def test_step_count_includes_skipped_whitespace(self) -> None:
        cursor = _primed("a   b")
        assert cursor.advance() == 4
        assert cursor.current == "b"

    def test_end_of_input_is_sticky(self) -> None:
        cursor = _primed("a  ")
        assert cursor.advance() == 3
        assert cursor.at_end
        assert cursor.current == ""
        assert cursor.advance() == 0
        assert cursor.position == 3

    def test_empty_input_reaches_end_on_prime(self) -> None:
        cursor = Cursor("")
        cursor.advance()
        assert cursor.at_end

    def test_current_matches_text_at_position(self) -> None:
        cursor = _primed(" a b  c ")
        while not cursor.at_end:
            assert cursor.current == cursor.text[cursor.position]
            cursor.advance()

    def test_accept_consumes_on_match(self) -> None:
        cursor = _primed("{ }")
        assert cursor.accept("{")
        assert cursor.current == "}"

    def test_failed_accept_leaves_cursor_untouched(self) -> None:
        cursor = _primed("{")
        assert not cursor.accept("}")
        assert cursor.position == 0
        assert cursor.current == "{"

    def test_accept_never_matches_at_end(self) -> None:
        cursor = _primed("")
        assert not cursor.accept("")

    def test_accept_sequence_requires_contiguous_text(self) -> None:
        cursor = _primed("> =")
        assert not cursor.accept_sequence(">=")
        assert cursor.position == 0

    def test_accept_sequence_consumes_all_characters(self) -> None:
        cursor = _primed(">= 1")
        assert cursor.accept_sequence(">=")
        assert cursor.current == "1"

    def test_slice_is_inclusive(self) -> None:
        assert Cursor("while").slice(1, 3) == "hil"


# ---------------------------------------------------------------------------
# Error locations and the error slot
# ---------------------------------------------------------------------------


class TestLocate:
    @pytest.mark.parametrize("text, offset, expected", [
        ("", 0, (1, 1)),
        ("x=1a;", 3, (1, 4)),
        ("x==1;", 2, (1, 3)),
        ("x=1;\ny=2;", 5, (2, 1)),
        ("x=1;\ny=2a;", 8, (2, 4)),
        ("a\n\n\nb", 4, (4, 1)),
        ("abc", 3, (1, 4)),
    ])
    def test_line_and_column(self, text: str, offset: int, expected: tuple[int, int]) -> None:
        assert locate(text, offset) == expected


class TestErrorState:
    def test_starts_empty(self) -> None:
        state = ErrorState("x")
        assert state.error is None
        assert not state.has_error

    def test_record_returns_false(self) -> None:
        assert ErrorState("x=1a;").record("Boom", 3) is False

    def test_record_formats_message(self) -> None:
        state = ErrorState("x=1a;")
        state.record("Unexpected letter 'a' in number", 3)
        assert str(state.error) == "Unexpected letter 'a' in number, line 1, column 4."

    def test_first_error_wins(self) -> None:
        state = ErrorState("abc\ndef")
        state.record("first", 1)
        state.record("second", 5)
        assert state.error is not None
        assert state.error.lex_message == "first"
        assert (state.error.line, state.error.col, state.error.offset) == (1, 2, 1)

    def test_raise_if_set(self) -> None:
        state = ErrorState("abc")
        state.raise_if_set()
        state.record("Unexpected token", 0)
        with pytest.raises(LexError, match="Unexpected token, line 1, column 1."):
            state.raise_if_set()


# ---------------------------------------------------------------------------
# Scan context and combinators
# ---------------------------------------------------------------------------


class TestScanContext:
    def test_emit_appends_and_returns_true(self) -> None:
        ctx = _context("x")
        assert ctx.emit(TokenKind.IDENTIFIER, "x") is True
        assert ctx.last_kind is TokenKind.IDENTIFIER

    def test_last_kind_is_none_when_empty(self) -> None:
        assert _context("").last_kind is None

    def test_fail_records_at_cursor(self) -> None:
        ctx = _context("  ?")
        assert ctx.fail("Unexpected token") is False
        assert ctx.errors.error is not None
        assert ctx.errors.error.col == 3


class TestCombinators:
    def test_literal_emits_on_match(self) -> None:
        ctx = _context("{")
        assert literal("{", TokenKind.BLOCK_BEGIN)(ctx)
        assert [t.text for t in ctx.tokens] == ["{"]
        assert ctx.cursor.at_end

    def test_two_character_literal(self) -> None:
        ctx = _context("!=")
        assert literal("!=", TokenKind.REL_OP)(ctx)
        assert ctx.tokens[0].text == "!="

    def test_sequence_stops_at_first_failure(self) -> None:
        ctx = _context("( ]")
        rule = sequence(literal("(", TokenKind.PAR_BEGIN), literal(")", TokenKind.PAR_END))
        assert not rule(ctx)
        assert [t.kind for t in ctx.tokens] == [TokenKind.PAR_BEGIN]
        assert ctx.cursor.current == "]"

    def test_first_of_tries_alternatives_in_order(self) -> None:
        ctx = _context("*")
        rule = first_of(
            literal("+", TokenKind.ARITHM_OP),
            literal("*", TokenKind.ARITHM_OP),
        )
        assert rule(ctx)
        assert ctx.tokens[0].text == "*"

    def test_optional_succeeds_when_rule_does_not_start(self) -> None:
        ctx = _context("x")
        assert optional(literal(";", TokenKind.TERMINATOR))(ctx)
        assert ctx.tokens == []
        assert ctx.cursor.position == 0

    def test_optional_fails_after_partial_match(self) -> None:
        ctx = _context("+;")
        tail = sequence(literal("+", TokenKind.ARITHM_OP), literal("1", TokenKind.NUMBER))
        assert not optional(tail)(ctx)
        assert ctx.cursor.current == ";"

    def test_first_of_commits_to_consuming_alternative(self) -> None:
        ctx = _context("[)")
        rule = first_of(
            sequence(literal("[", TokenKind.INDEXER_BEGIN), literal("]", TokenKind.INDEXER_END)),
            literal(")", TokenKind.PAR_END),
        )
        assert not rule(ctx)
        assert [t.kind for t in ctx.tokens] == [TokenKind.INDEXER_BEGIN]

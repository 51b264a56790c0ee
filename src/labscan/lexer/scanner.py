"""Grammar-driven scanner: produces tokens while validating structure.

The scanner is a recursive-descent recognizer over the language grammar
(see ``labscan.grammar.grammar``).  Each rule is a function of the
``ScanContext`` that either matches, consuming characters and emitting
tokens, or fails.  A rule that fails on its first character consumes
nothing, which lets ``first_of`` try alternatives without rewinding.
Once a rule has matched its leading character it is committed.

Whitespace is skipped by the cursor between any two characters, except
inside identifiers and numbers: those must be contiguous, which the
rules check through the step count returned by ``Cursor.advance``.

Error policy
------------
Problems are recorded in the context's error slot and scanning carries
on; only the first recorded problem survives.  ``GrammarScanner.scan``
is fail-fast towards its caller: if anything was recorded it raises
``LexError`` and the partial token list is discarded.

Error messages:
    - ``Unexpected token``: scanning stopped before the end of input.
    - ``Unexpected end of input``: a statement was cut off by the end
      of the text.
    - ``Expected non-zero digit in number``: a sign with no digit after it.
    - ``Expected at least one digit after period in number``
    - ``Unexpected letter 'c' in number``: a letter directly after a
      number.  The number token is still emitted.
"""
from __future__ import annotations

import logging
from typing import Callable

from labscan.grammar.grammar import ARITHMETIC_OPERATORS, RELATIONAL_OPERATORS
from labscan.grammar.tokens import Token, TokenKind, classify_word
from labscan.lexer.base import Tokenizer, tokenizer_registry
from labscan.lexer.chars import is_digit, is_letter, is_nonzero_digit
from labscan.lexer.combinators import first_of, literal, optional, sequence
from labscan.lexer.context import ScanContext
from labscan.lexer.cursor import Cursor

logger = logging.getLogger(__name__)

_SIGNS = ("+", "-")

# ---------------------------------------------------------------------------
# Delimiters and operators
# ---------------------------------------------------------------------------

block_begin = literal("{", TokenKind.BLOCK_BEGIN)
block_end = literal("}", TokenKind.BLOCK_END)
indexer_begin = literal("[", TokenKind.INDEXER_BEGIN)
indexer_end = literal("]", TokenKind.INDEXER_END)
par_begin = literal("(", TokenKind.PAR_BEGIN)
par_end = literal(")", TokenKind.PAR_END)
equals = literal("=", TokenKind.EQUALS)
terminator = literal(";", TokenKind.TERMINATOR)

arithm_op = first_of(*(literal(op, TokenKind.ARITHM_OP) for op in ARITHMETIC_OPERATORS))

# Two-character spellings come first so ">=" is not read as ">" then "=".
rel_op = first_of(*(literal(op, TokenKind.REL_OP) for op in RELATIONAL_OPERATORS))


# ---------------------------------------------------------------------------
# Literals
# ---------------------------------------------------------------------------


def _run(cursor: Cursor, predicate: Callable[[str], bool]) -> int:
    """Consume a contiguous run of characters, the current one included.

    Returns the offset of the last character of the run.  The cursor is
    left on the next significant character.
    """
    while True:
        end = cursor.position
        if cursor.advance() != 1 or not predicate(cursor.current):
            return end


def _adjacent(cursor: Cursor, end: int) -> bool:
    """Return True if the current character directly follows ``end``."""
    return cursor.position == end + 1


def _is_word_char(ch: str) -> bool:
    return is_letter(ch) or is_digit(ch)


def identifier(ctx: ScanContext) -> bool:
    """Identifier := Letter (Letter | Digit)*

    ``do`` and ``while`` are emitted as their own kinds.
    """
    cursor = ctx.cursor
    if not is_letter(cursor.current):
        return False
    start = cursor.position
    end = _run(cursor, _is_word_char)
    word = cursor.slice(start, end)
    return ctx.emit(classify_word(word), word)


def number(ctx: ScanContext) -> bool:
    """Number := "0" | [+-]? NonZeroDigit Digit* ("." Digit+)?

    A character that cannot start a number is a plain mismatch.  A sign
    commits the rule, so a sign without a digit is an error.
    """
    cursor = ctx.cursor
    start = cursor.position
    if cursor.current == "0":
        end = start
        cursor.advance()
    else:
        if cursor.current in _SIGNS:
            if cursor.advance() != 1 or not is_nonzero_digit(cursor.current):
                return ctx.fail("Expected non-zero digit in number")
        elif not is_nonzero_digit(cursor.current):
            return False
        end = _run(cursor, is_digit)
        if _adjacent(cursor, end) and cursor.current == ".":
            if cursor.advance() != 1 or not is_digit(cursor.current):
                return ctx.fail("Expected at least one digit after period in number")
            end = _run(cursor, is_digit)
    if _adjacent(cursor, end) and is_letter(cursor.current):
        ctx.fail(f"Unexpected letter {cursor.current!r} in number")
    return ctx.emit(TokenKind.NUMBER, cursor.slice(start, end))


def while_keyword(ctx: ScanContext) -> bool:
    """The ``while`` keyword.  Any other identifier is consumed and fails."""
    return identifier(ctx) and ctx.last_kind is TokenKind.WHILE


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------


def expression(ctx: ScanContext) -> bool:
    """Expression := (Variable | Number) (ArithmOp Expression)?"""
    return _expression(ctx)


def condition(ctx: ScanContext) -> bool:
    """Condition := Expression RelOp Expression"""
    return _condition(ctx)


def variable(ctx: ScanContext) -> bool:
    """Variable := Identifier Indexer?"""
    return _variable(ctx)


def indexer(ctx: ScanContext) -> bool:
    """Indexer := "[" Expression "]" """
    return _indexer(ctx)


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


def block(ctx: ScanContext) -> bool:
    """Block := Statement*

    Never fails: the loop ends at the first statement that does not
    match.  A statement that gave up after consuming input records an
    error at the point where it stopped.
    """
    cursor = ctx.cursor
    while True:
        start = cursor.position
        if statement(ctx):
            continue
        if cursor.position != start:
            _unexpected(ctx)
        return True


def statement(ctx: ScanContext) -> bool:
    """Statement := "do" DoWhileLoop | Identifier Assignment"""
    if not identifier(ctx):
        return False
    kind = ctx.last_kind
    if kind is TokenKind.DO:
        return do_while_loop(ctx)
    if kind is TokenKind.IDENTIFIER:
        return assignment(ctx)
    return False


def do_while_loop(ctx: ScanContext) -> bool:
    """DoWhileLoop := "{" Block "}" While [";"]"""
    return _do_while_loop(ctx)


def assignment(ctx: ScanContext) -> bool:
    """Assignment := Indexer? "=" Expression ";" """
    return _assignment(ctx)


def _unexpected(ctx: ScanContext) -> bool:
    if ctx.cursor.at_end:
        return ctx.fail("Unexpected end of input")
    return ctx.fail("Unexpected token")


# Composite rules.  Built after the functions above so that recursive
# references resolve to those functions.
_indexer = sequence(indexer_begin, expression, indexer_end)
_variable = sequence(identifier, optional(indexer))
_expression = sequence(first_of(variable, number), optional(sequence(arithm_op, expression)))
_condition = sequence(expression, rel_op, expression)
_while_clause = sequence(while_keyword, par_begin, condition, par_end)
_do_while_loop = sequence(block_begin, block, block_end, _while_clause, optional(terminator))
_assignment = sequence(optional(indexer), equals, expression, terminator)


# ---------------------------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------------------------


@tokenizer_registry.register("grammar")
class GrammarScanner(Tokenizer):
    """Recursive-descent scanner that validates program structure.

    Parameters
    ----------
    source:
        The complete program text.
    """

    name = "grammar"

    def scan(self) -> list[Token]:
        """Scan the whole source and return its tokens.

        Returns
        -------
        list[Token]
            Tokens in source order.  Whitespace produces no tokens.

        Raises
        ------
        LexError
            On the first lexical problem found.  Partial tokens are
            discarded.
        """
        ctx = ScanContext(self._source)
        ctx.cursor.advance()
        block(ctx)
        if not ctx.cursor.at_end:
            ctx.fail("Unexpected token")

        if ctx.errors.has_error:
            logger.debug("Grammar scan failed after %d token(s): %s", len(ctx.tokens), ctx.errors.error)
            ctx.errors.raise_if_set()
        logger.debug(
            "Grammar scan produced %d token(s) from %d character(s)",
            len(ctx.tokens),
            len(self._source),
        )
        return ctx.tokens


def scan(source: str) -> list[Token]:
    """Scan ``source`` with the grammar-driven engine.

    Raises
    ------
    LexError
        If the source is not a valid program.

    Example
    -------
    ::

        from labscan.lexer.scanner import scan
        tokens = scan("x = 1;")
    """
    return GrammarScanner(source).scan()

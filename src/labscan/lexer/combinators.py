"""Rule combinators for the grammar scanner.

A rule is any callable that takes the ``ScanContext`` and returns True
when it matched (consuming input and emitting tokens) or False when it
did not.  The combinators below compose rules without ever rewinding
the cursor: the grammar is deterministic on one character of lookahead,
so an alternative either fails on its first character without consuming
anything or commits to the match.

Usage
-----
::

    assignment = sequence(optional(indexer), equals, expression, terminator)
    operand = first_of(variable, number)
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from labscan.grammar.tokens import TokenKind
    from labscan.lexer.context import ScanContext

Rule = Callable[["ScanContext"], bool]


def sequence(*rules: Rule) -> Rule:
    """Match every rule in order, stopping at the first failure."""

    def match(ctx: ScanContext) -> bool:
        return all(rule(ctx) for rule in rules)

    return match


def first_of(*rules: Rule) -> Rule:
    """Match the first rule that succeeds.

    An alternative that consumed input before failing is committed: the
    remaining alternatives are not tried and the whole rule fails.
    """

    def match(ctx: ScanContext) -> bool:
        start = ctx.cursor.position
        for rule in rules:
            if rule(ctx):
                return True
            if ctx.cursor.position != start:
                return False
        return False

    return match


def optional(rule: Rule) -> Rule:
    """Try ``rule``; succeed if it matched or did not start.

    A rule that fails after consuming input has committed, so the
    optional fails too.
    """

    def match(ctx: ScanContext) -> bool:
        start = ctx.cursor.position
        return rule(ctx) or ctx.cursor.position == start

    return match


def literal(text: str, kind: TokenKind) -> Rule:
    """Match ``text`` verbatim and emit it as a ``kind`` token."""
    if len(text) == 1:

        def match(ctx: ScanContext) -> bool:
            return ctx.cursor.accept(text) and ctx.emit(kind, text)

    else:

        def match(ctx: ScanContext) -> bool:
            return ctx.cursor.accept_sequence(text) and ctx.emit(kind, text)

    return match

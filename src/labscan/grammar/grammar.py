"""Formal grammar of the labscan toy language.

This module documents the language as EBNF-style string constants.
The grammar is implemented by the hand-written recursive-descent
scanner in ``labscan.lexer.scanner``, which validates program structure
while it produces tokens; these constants are the reference text for
that implementation and for tooling that wants to display it.

Grammar notation used here:
    ``::=``     production rule
    ``|``       alternation
    ``( )``     grouping
    ``[ ]``     optional (zero or one)
    ``{ }``     zero or more repetitions
"""
from __future__ import annotations

# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------

GRAMMAR_BLOCK = """
block         ::= { statement }

statement     ::= 'do' do_while_loop
                | IDENT assignment

do_while_loop ::= '{' block '}' while_clause [ ';' ]
while_clause  ::= 'while' '(' condition ')'

assignment    ::= [ indexer ] '=' expression ';'
"""

# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------

GRAMMAR_EXPRESSION = """
variable   ::= IDENT [ indexer ]
indexer    ::= '[' expression ']'

condition  ::= expression rel_op expression
expression ::= ( variable | NUMBER ) [ arithm_op expression ]

rel_op     ::= '>=' | '<=' | '>' | '<' | '==' | '!='
arithm_op  ::= '+' | '-' | '/' | '*'
"""

# ---------------------------------------------------------------------------
# Literals
# ---------------------------------------------------------------------------

GRAMMAR_LITERALS = """
IDENT  ::= letter { letter | digit }
NUMBER ::= '0'
         | [ '+' | '-' ] nonzero_digit { digit } [ '.' digit { digit } ]

letter        ::= 'A'..'Z' | 'a'..'z' | '_'
digit         ::= '0'..'9'
nonzero_digit ::= '1'..'9'
"""

# ---------------------------------------------------------------------------
# Full grammar as one string (for documentation / tooling consumers)
# ---------------------------------------------------------------------------

FULL_GRAMMAR: str = "\n".join([
    "# labscan Grammar (EBNF-like notation)",
    "# =====================================",
    "",
    "# Statements",
    GRAMMAR_BLOCK,
    "# Expressions",
    GRAMMAR_EXPRESSION,
    "# Literals",
    GRAMMAR_LITERALS,
])

# Relational operators, two-character spellings first.
RELATIONAL_OPERATORS: list[str] = [">=", "<=", ">", "<", "==", "!="]

ARITHMETIC_OPERATORS: list[str] = ["+", "-", "/", "*"]

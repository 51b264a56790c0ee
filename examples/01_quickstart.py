#!/usr/bin/env python3
"""Example: Quickstart — labscan

Minimal working example: scan a program, print its token stream,
check that both engines agree, and show how a lexical error is reported.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install labscan
"""
from __future__ import annotations

import labscan

SOURCE = """
total = 0;
i = 1;
do {
  total = total + values[i] * -2.5;
  i = i + 1;
} while (i <= n);
"""


def main() -> None:
    print(f"labscan version: {labscan.__version__}")

    # Step 1: Scan with the default grammar engine
    tokens = labscan.tokenize(SOURCE)
    print(f"Scanned {len(tokens)} tokens")

    # Step 2: Print the token stream, one statement per line
    print(labscan.format(tokens, indent="  "))

    # Step 3: Every engine produces the same tokens for a valid program
    for engine in labscan.engines():
        same = labscan.tokenize(SOURCE, engine=engine) == tokens
        print(f"  {engine:<8} agrees: {same}")

    # Step 4: Lexical errors carry line and column
    try:
        labscan.tokenize("x = 1;\ny = 2z;")
    except labscan.LexError as exc:
        print(f"Lex error: {exc} (line={exc.line}, col={exc.col})")


if __name__ == "__main__":
    main()

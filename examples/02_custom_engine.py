#!/usr/bin/env python3
"""Example: Custom engine — labscan

Register an additional scanning engine and compare it against the
built-in ones.  Installed packages can do the same through the
``labscan.tokenizers`` entry-point group.

Usage:
    python examples/02_custom_engine.py
"""
from __future__ import annotations

import labscan
from labscan.grammar import Token, classify_word
from labscan.lexer import Tokenizer, tokenizer_registry


@tokenizer_registry.register("words")
class WordScanner(Tokenizer):
    """Treats every whitespace-separated word as a single token."""

    name = "words"

    def scan(self) -> list[Token]:
        return [Token(classify_word(word), word) for word in self.source.split()]


def main() -> None:
    source = "do { x = x + 1 ; } while ( x < 10 ) ;"
    reference = labscan.tokenize(source)
    for engine in labscan.engines():
        tokens = labscan.tokenize(source, engine=engine)
        status = "agrees" if tokens == reference else "differs"
        print(f"{engine:<8} {len(tokens):>3} tokens  {status}")


if __name__ == "__main__":
    main()

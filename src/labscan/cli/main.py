"""CLI entry point for labscan.

Invoked as::

    labscan [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m labscan.cli.main

Commands
--------
scan        Tokenize a source file and print the token stream
compare     Tokenize with every engine and check that they agree
grammar     Print the language grammar
engines     List registered scanning engines
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from labscan.lexer.base import DEFAULT_ENGINE

if TYPE_CHECKING:
    from labscan.grammar.tokens import Token

console = Console()
err_console = Console(stderr=True)

_DEFAULT_INPUT = "input.txt"


def _read_source(path: str) -> str:
    """Read a source file, exiting on error."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        err_console.print(f"[red]Error:[/red] File {escape(path)} could not be located.")
        sys.exit(1)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] Cannot read {escape(path)}: {escape(str(exc))}")
        sys.exit(1)


def _scan_or_exit(source: str, path: str, engine: str) -> list[Token]:
    """Tokenize source, printing the lexical error and exiting on failure."""
    from labscan.lexer import LexError, tokenize

    try:
        return tokenize(source, engine=engine)
    except LexError as exc:
        err_console.print(f"[red]Lex error[/red] in {escape(path)} ({engine}): {escape(str(exc))}")
        sys.exit(1)


def _print_stream(tokens: list[Token], indent: str) -> None:
    from labscan.formatter import format_tokens

    console.print(format_tokens(tokens, indent=indent), end="", markup=False, highlight=False, soft_wrap=True)


def _engine_choices() -> list[str]:
    from labscan.lexer import tokenizer_registry

    return tokenizer_registry.list_plugins()


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="labscan")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log scanner activity to stderr")
def cli(verbose: bool) -> None:
    """Lexical scanner for the do-while toy language."""
    from labscan.lexer import tokenizer_registry

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    tokenizer_registry.load_entrypoints()


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from labscan import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]labscan[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# engines command
# ---------------------------------------------------------------------------


@cli.command(name="engines")
def engines_command() -> None:
    """List all registered scanning engines."""
    from labscan.lexer import DEFAULT_ENGINE, tokenizer_registry

    table = Table(title="Scanning engines")
    table.add_column("Name", style="bold")
    table.add_column("Class")
    table.add_column("Default")
    for name, cls in tokenizer_registry.items():
        table.add_row(name, cls.__qualname__, "yes" if name == DEFAULT_ENGINE else "")
    console.print(table)


# ---------------------------------------------------------------------------
# grammar command
# ---------------------------------------------------------------------------


@cli.command(name="grammar")
def grammar_command() -> None:
    """Print the language grammar."""
    from labscan.grammar import FULL_GRAMMAR

    console.print(FULL_GRAMMAR, markup=False, highlight=False)


# ---------------------------------------------------------------------------
# scan command
# ---------------------------------------------------------------------------


@cli.command(name="scan")
@click.argument("file", type=click.Path(exists=False), default=_DEFAULT_INPUT, required=False)
@click.option(
    "--engine",
    "-e",
    default=DEFAULT_ENGINE,
    show_default=True,
    help="Scanning engine (see `labscan engines`).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json", "yaml"], case_sensitive=False),
    default="text",
    help="Token stream output format",
)
@click.option("--indent", default="", help="Indent string for lines inside blocks (text format)")
@click.option("--output", "-o", default=None, help="Output file path (defaults to stdout)")
def scan_command(file: str, engine: str, output_format: str, indent: str, output: str | None) -> None:
    """Tokenize a source file and print the token stream.

    FILE is the path to the program to scan (default: input.txt).
    """
    from labscan.formatter import format_tokens
    from labscan.serializer import TokenSerializer

    if engine not in _engine_choices():
        err_console.print(
            f"[red]Error:[/red] Unknown engine {escape(engine)!r}. "
            f"Available: {', '.join(_engine_choices())}"
        )
        sys.exit(2)

    source = _read_source(file)
    tokens = _scan_or_exit(source, file, engine)
    output_format = output_format.lower()

    if output_format == "text":
        if output:
            Path(output).write_text(format_tokens(tokens, indent=indent), encoding="utf-8")
            console.print(f"[green]Token stream written to[/green] {escape(output)}")
        else:
            _print_stream(tokens, indent)
        return

    serializer = TokenSerializer()
    text = serializer.to_json(tokens) if output_format == "json" else serializer.to_yaml(tokens)
    if output:
        Path(output).write_text(text, encoding="utf-8")
        console.print(f"[green]Token stream written to[/green] {escape(output)}")
    else:
        console.print(Syntax(text, output_format, line_numbers=True))


# ---------------------------------------------------------------------------
# compare command
# ---------------------------------------------------------------------------


@cli.command(name="compare")
@click.argument("file", type=click.Path(exists=False), default=_DEFAULT_INPUT, required=False)
def compare_command(file: str) -> None:
    """Tokenize with every registered engine and check that they agree.

    FILE is the path to the program to scan (default: input.txt).
    """
    source = _read_source(file)
    streams: dict[str, list[Token]] = {}
    for engine in _engine_choices():
        streams[engine] = _scan_or_exit(source, file, engine)
        console.print(f"[bold]{escape(engine)}[/bold]")
        _print_stream(streams[engine], "")
        console.print()

    reference_name, reference = next(iter(streams.items()))
    mismatched = [name for name, tokens in streams.items() if tokens != reference]
    if mismatched:
        console.print(
            f"[red]MISMATCH[/red] {', '.join(mismatched)} disagree(s) with {reference_name}"
        )
        sys.exit(1)
    console.print(f"[green]OK[/green] {len(streams)} engine(s) agree on {len(reference)} token(s)")


if __name__ == "__main__":
    cli()

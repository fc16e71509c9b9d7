"""CLI service layer for prdiff.

Shared consoles, exit codes, invocation context and input reading for the
CLI commands.
"""
from __future__ import annotations

import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from prdiff.config import PrDiffConfig
from prdiff.exceptions import InputError
from prdiff.git import DiffParser, PatchParser

# Exit codes
EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_INVALID_ARG = 2

STDIN_MARKER = "-"

console = Console(stderr=False)  # stdout for normal output
error_console = Console(stderr=True)  # stderr for errors


def _escape_rich(text: str) -> str:
    """Escape markup-like brackets so Rich prints them literally."""
    return escape(text)


class CLIContext:
    """Invocation-scoped context for CLI state."""

    def __init__(self, config: PrDiffConfig):
        self.config = config

    def create_diff_parser(self) -> DiffParser:
        return DiffParser(warn_on_parse_error=self.config.warn_on_parse_error)

    def create_patch_parser(self) -> PatchParser:
        return PatchParser(warn_on_parse_error=self.config.warn_on_parse_error)


def get_cli_context(ctx: typer.Context) -> CLIContext:
    """Get the CLIContext stored by the main callback."""
    if isinstance(ctx.obj, CLIContext):
        return ctx.obj
    # Commands invoked without the callback (tests calling the command directly)
    return CLIContext(PrDiffConfig())


def read_input(source: str, encoding: str = "utf-8") -> str:
    """Read diff/patch text from a file path or ``-`` for stdin.

    Bytes are decoded without newline translation so the parser sees the
    text exactly as served.

    Raises:
        InputError: If the file cannot be read or decoded.
    """
    try:
        if source == STDIN_MARKER:
            stream = getattr(sys.stdin, "buffer", None)
            if stream is None:
                return sys.stdin.read()
            data = stream.read()
        else:
            data = Path(source).read_bytes()
        return data.decode(encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise InputError(f"Cannot read {source!r}: {e}") from e


def resolve_input(source: str | None, encoding: str = "utf-8") -> str:
    """Read input for a command, defaulting to stdin when it is piped.

    Raises:
        typer.Exit: If no source was given and stdin is a terminal, or the
            input cannot be read.
    """
    if source is None:
        if sys.stdin.isatty():
            error_console.print(
                "[red]Error: Provide a file path, '-' for stdin, or pipe input[/red]"
            )
            raise typer.Exit(code=EXIT_INVALID_ARG)
        source = STDIN_MARKER

    try:
        return read_input(source, encoding=encoding)
    except InputError as e:
        error_console.print(f"[red]Error reading input:[/red] {_escape_rich(str(e))}")
        raise typer.Exit(code=EXIT_ERROR)

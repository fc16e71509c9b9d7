"""CLI entry point for prdiff."""

from __future__ import annotations

import logging

import typer
from rich.table import Table

from prdiff import __version__
from prdiff.cli_services import (
    EXIT_ERROR,
    EXIT_SUCCESS,
    CLIContext,
    _escape_rich,
    console,
    error_console,
    get_cli_context,
    resolve_input,
)
from prdiff.config import get_config
from prdiff.exceptions import ConfigError
from prdiff.logging_setup import configure_logging
from prdiff.models import DiffDocument, PatchDocument

app = typer.Typer(
    name="prdiff",
    help="Parse pull request diffs and patches into per-file hunks",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

_SOURCE_HELP = "Diff file to read. Use '-' or pipe input for stdin."


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log parser details to stderr (overrides PRDIFF_LOG_LEVEL)",
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        help="Show version information",
        is_flag=True,
    ),
):
    """prdiff - structured views of git diffs and patches."""
    if version:
        console.print(f"prdiff version {__version__}")
        raise typer.Exit(code=EXIT_SUCCESS)

    try:
        config = get_config()
    except ConfigError as e:
        error_console.print(f"[red]Error:[/red] {_escape_rich(str(e))}")
        raise typer.Exit(code=EXIT_ERROR)

    configure_logging(logging.DEBUG if verbose else config.log_level)
    ctx.obj = CLIContext(config=config)

    if ctx.invoked_subcommand is None:
        console.print("[bold]prdiff[/bold] - diff and patch parser")
        console.print("Use --help for usage information")
        raise typer.Exit(code=EXIT_SUCCESS)


def _change_label(change_type: str) -> str:
    colors = {
        "added": "green",
        "deleted": "red",
        "renamed": "cyan",
        "modified": "yellow",
        "unknown": "magenta",
    }
    return f"[{colors[change_type]}]{change_type}[/{colors[change_type]}]"


def _display_path(path: str | None) -> str:
    if path is None:
        return "[dim]?[/dim]"
    if path == "":
        return "[dim]-[/dim]"
    return _escape_rich(path)


def _render_document(document: DiffDocument | PatchDocument) -> None:
    """Print a per-file table and a git-style summary line."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Change")
    table.add_column("Source")
    table.add_column("Target")
    table.add_column("Hunks", justify="right")
    table.add_column("+", justify="right")
    table.add_column("-", justify="right")

    for file_diff in document.files:
        table.add_row(
            _change_label(file_diff.change_type),
            _display_path(file_diff.source_file),
            _display_path(file_diff.target_file),
            str(len(file_diff.hunks)),
            str(file_diff.lines_added),
            str(file_diff.lines_removed),
        )

    console.print(table)
    console.print(
        f"{len(document.files)} file(s) changed, "
        f"{document.lines_added} insertion(s)(+), "
        f"{document.lines_removed} deletion(s)(-)"
    )


def _emit_json(document: DiffDocument | PatchDocument, indent: int) -> None:
    # Built-in print: Rich would interpret brackets in file content
    print(document.model_dump_json(indent=indent, exclude={"raw_text"}))


@app.command()
def diff(
    ctx: typer.Context,
    source: str | None = typer.Argument(None, help=_SOURCE_HELP),
    json_output: bool = typer.Option(
        False, "--json", help="Print the parsed document as JSON"
    ),
) -> None:
    """Parse a unified diff (git diff / a pull request's .diff)."""
    cli_ctx = get_cli_context(ctx)
    raw = resolve_input(source, encoding=cli_ctx.config.encoding)
    document = cli_ctx.create_diff_parser().parse(raw)

    if json_output:
        _emit_json(document, cli_ctx.config.json_indent)
        return
    _render_document(document)


@app.command()
def patch(
    ctx: typer.Context,
    source: str | None = typer.Argument(None, help=_SOURCE_HELP),
    json_output: bool = typer.Option(
        False, "--json", help="Print the parsed document as JSON"
    ),
    show_header: bool = typer.Option(
        False, "--show-header", help="Print the commit header before the table"
    ),
) -> None:
    """Parse a format-patch document (git format-patch / a pull request's .patch)."""
    cli_ctx = get_cli_context(ctx)
    raw = resolve_input(source, encoding=cli_ctx.config.encoding)
    document = cli_ctx.create_patch_parser().parse(raw)

    if json_output:
        _emit_json(document, cli_ctx.config.json_indent)
        return
    if show_header:
        console.print(_escape_rich(document.header.rstrip("\n")), highlight=False)
    _render_document(document)


@app.command()
def files(
    ctx: typer.Context,
    source: str | None = typer.Argument(None, help=_SOURCE_HELP),
    is_patch: bool = typer.Option(
        False, "--patch", "-p", help="Treat input as a format-patch document"
    ),
) -> None:
    """List changed file paths, one per line."""
    cli_ctx = get_cli_context(ctx)
    raw = resolve_input(source, encoding=cli_ctx.config.encoding)
    if is_patch:
        document = cli_ctx.create_patch_parser().parse(raw)
    else:
        document = cli_ctx.create_diff_parser().parse(raw)

    for path in document.changed_files:
        print(path)


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()

"""Command-line interface for md-compose."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from mdcompose import __version__
from mdcompose.config import get_settings
from mdcompose.core.engine import FormatEngine
from mdcompose.formatting.ir import (
    AuxiliaryField,
    FormatAction,
    Range,
    TransformResult,
    UnknownActionError,
)
from mdcompose.inputs import AuxiliaryInput, ConsoleInput, ScriptedInput, get_provider
from mdcompose.offsets import OffsetError, range_from_utf16, range_to_utf16

app = typer.Typer(
    name="mdcompose",
    help="Apply selection-aware Markdown formatting to a document.",
    add_completion=False,
)
console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"md-compose v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Selection-aware Markdown formatting engine."""


def read_document(path: str, encoding: str) -> str:
    """Read the document from a file, or from stdin when path is '-'.

    Bytes are decoded without newline translation so offsets and line
    endings match what the host sees.
    """
    if path == "-":
        return typer.get_binary_stream("stdin").read().decode(encoding)
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"File not found: {file_path}")
    return file_path.read_bytes().decode(encoding)


def build_inputs(
    answers: dict[AuxiliaryField, Optional[str]],
    interactive: bool,
    provider: str,
) -> AuxiliaryInput:
    """Pick the auxiliary input provider for this invocation.

    Answers given on the command line take precedence, then --interactive,
    then the configured provider.
    """
    given = {field: value for field, value in answers.items() if value is not None}
    if given:
        return ScriptedInput(given)
    if interactive:
        return ConsoleInput(console)
    return get_provider(provider)()


def render_result(
    result: TransformResult,
    as_json: bool,
    utf16: bool,
) -> str:
    """Format the result for output."""
    if not as_json:
        return result.document
    selection: Optional[Range] = None
    if utf16:
        selection = range_to_utf16(result.document, result.selection)
    return json.dumps(result.as_dict(selection), ensure_ascii=False) + "\n"


@app.command("apply")
def apply_command(
    action: str = typer.Argument(
        ...,
        help="Format action (see 'mdcompose actions')",
    ),
    path: str = typer.Argument(
        "-",
        help="Markdown file to format, or '-' to read stdin",
    ),
    start: int = typer.Option(
        0,
        "--start",
        "-s",
        min=0,
        help="Selection start offset",
    ),
    end: Optional[int] = typer.Option(
        None,
        "--end",
        "-e",
        min=0,
        help="Selection end offset (default: same as --start)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the new document to this file",
    ),
    in_place: bool = typer.Option(
        False,
        "--in-place",
        "-i",
        help="Overwrite the input file",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the document and new selection as JSON",
    ),
    utf16: bool = typer.Option(
        False,
        "--utf16",
        help="Offsets are UTF-16 code units (as reported by browsers)",
    ),
    url: Optional[str] = typer.Option(None, "--url", help="Link or image URL"),
    alt: Optional[str] = typer.Option(None, "--alt", help="Image alt text"),
    width: Optional[str] = typer.Option(None, "--width", help="Image width"),
    columns: Optional[str] = typer.Option(None, "--columns", help="Table columns"),
    rows: Optional[str] = typer.Option(None, "--rows", help="Table rows"),
    interactive: bool = typer.Option(
        False,
        "--interactive",
        help="Prompt for link, image and table values on the terminal",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
) -> None:
    """
    Apply a format action to a selection of a Markdown document.

    Examples:

        mdcompose apply bold notes.md --start 4 --end 9

        mdcompose apply h2 notes.md -s 120 --in-place

        mdcompose apply link notes.md -s 4 -e 9 --url https://example.com

        mdcompose apply table notes.md -s 0 --columns 3 --rows 1 --json
    """
    settings = get_settings()

    if in_place and path == "-":
        console.print("[red]Error:[/red] --in-place needs a file, not stdin")
        raise typer.Exit(1)
    if in_place and as_json:
        console.print("[red]Error:[/red] --in-place cannot be combined with --json")
        raise typer.Exit(1)

    try:
        format_action = FormatAction.parse(action)
        document = read_document(path, settings.encoding)

        if end is None:
            end = start
        if utf16:
            selection = range_from_utf16(document, start, end)
        else:
            selection = Range(start, end)

        inputs = build_inputs(
            {
                AuxiliaryField.LINK_URL: url,
                AuxiliaryField.IMAGE_URL: url,
                AuxiliaryField.IMAGE_ALT: alt,
                AuxiliaryField.IMAGE_WIDTH: width,
                AuxiliaryField.TABLE_COLUMNS: columns,
                AuxiliaryField.TABLE_ROWS: rows,
            },
            interactive,
            settings.input_provider,
        )

        if verbose:
            console.print(
                f"[blue]Action:[/blue] {format_action.value} ({format_action.label})"
            )
            console.print(f"[blue]Selection:[/blue] {selection.start}-{selection.end}")

        result = FormatEngine().apply(
            format_action, document, selection.start, selection.end, inputs
        )
        rendered = render_result(result, as_json, utf16)
    except (UnknownActionError, OffsetError, FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[red]Error formatting {path}:[/red] {e}")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)

    if verbose:
        if result.applied:
            console.print(
                f"[green]Applied:[/green] selection "
                f"{result.selection.start}-{result.selection.end}"
            )
        else:
            console.print("[yellow]No change:[/yellow] required input was not given")

    target = Path(path) if in_place else output
    if target is not None:
        target.write_bytes(rendered.encode(settings.encoding))
        if verbose:
            console.print(f"[green]Written:[/green] {target}")
    else:
        typer.echo(rendered.encode(settings.encoding), nl=False)


@app.command("actions")
def actions_command() -> None:
    """List the supported format actions."""
    table = Table(title="Format actions")
    table.add_column("Action", style="bold")
    table.add_column("Label")
    table.add_column("Strategy")
    table.add_column("Token")

    for format_action in FormatAction:
        table.add_row(
            format_action.value,
            format_action.label,
            format_action.strategy.value,
            repr(format_action.token) if format_action.token else "",
        )

    Console().print(table)


if __name__ == "__main__":
    app()

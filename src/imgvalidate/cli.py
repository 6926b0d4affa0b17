# src/imgvalidate/cli.py
from __future__ import annotations
import json
import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from . import __version__
from .commands import greet as greet_cmd
from .config import ValidatorConfig
from .hashutil import DEFAULT_CHUNK_SIZE
from .models.schema import ValidationFailure, to_wire
from .validator import validate as validate_file

app = typer.Typer(
    add_completion=False, help="imgvalidate: SHA-256 content validation for files"
)

console = Console()


def _abort(msg: str, code: int = 1) -> None:
    """
    Print an error message and exit the program.
    """
    console.print(f"[bold red]Error:[/bold red] {escape(msg)}", highlight=False)
    raise typer.Exit(code=code)


def _setup_logging(verbose: bool) -> None:
    """
    Route library logging through rich, on the same console as the output.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command("validate")
def validate(
    path: str = typer.Argument(..., help="Path to the file to validate"),
    chunk_size: int = typer.Option(
        DEFAULT_CHUNK_SIZE, "--chunk-size", min=1, help="Bytes read per chunk"
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print the validation record as JSON"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Less verbose output"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """
    Hash a file with SHA-256 and report whether it could be fully read.
    Exits with code 1 when the file is invalid.
    """
    _setup_logging(verbose)
    res = validate_file(path, ValidatorConfig(chunk_size=chunk_size))

    if as_json:
        # plain echo so rich never wraps or styles machine output
        typer.echo(json.dumps(to_wire(res), ensure_ascii=False))
        if isinstance(res, ValidationFailure):
            raise typer.Exit(code=1)
        return

    if isinstance(res, ValidationFailure):
        _abort(res.error)

    if quiet:
        typer.echo(res.hash)
        return

    console.print(
        Panel.fit(
            f"[green]Valid[/green]\n"
            f"File: [bold]{escape(path)}[/bold]\n"
            f"SHA-256: {res.hash}\n"
            f"Timestamp: {escape(res.timestamp or '-')}\n"
            f"GPS: {escape(res.gps or '-')}",
            title=f"imgvalidate v{__version__}",
        )
    )


@app.command("greet")
def greet(name: str = typer.Argument(..., help="Name to greet")) -> None:
    """
    Print the backend greeting.
    """
    typer.echo(greet_cmd(name))


@app.command("version")
def version() -> None:
    """
    Show version information.
    """
    console.print(f"imgvalidate version {__version__}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()

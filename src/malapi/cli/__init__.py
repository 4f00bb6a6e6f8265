"""Command-line interface for malapi.

This package provides the Typer app and global console for all CLI commands and
user-facing output.

- app: The Typer application object, used by the ``malapi`` entry point.
- console: Rich Console instance for consistent, styled output.
- Commands live in :mod:`malapi.cli.commands` and register themselves on
  ``app`` when this package is imported.
"""

import os

import typer
from rich.console import Console
from rich.traceback import install

# Install rich traceback handler for all CLI commands
install(show_locals=False)

console = Console()

app = typer.Typer(
    name="malapi",
    help="Query the MyAnimeList API from the command line.",
    add_completion=False,
)


@app.callback()
def callback(
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Log every request. Can also be set with MALAPI_DEBUG=1.",
    ),
) -> None:
    """Top-level CLI callback adding global options."""
    if debug:
        os.environ["MALAPI_DEBUG"] = "1"


@app.command()
def version() -> None:
    """Show the version of malapi."""
    from malapi.__about__ import __version__

    console.print(f"malapi version: [bold]{__version__}[/bold]")


def main() -> None:
    """Main entry point for the CLI."""
    app()


from malapi.cli import commands  # noqa: E402,F401

__all__ = ["app", "console", "main"]

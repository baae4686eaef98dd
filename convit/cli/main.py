"""Main CLI callback."""

from typing import Optional

import typer

from convit import __version__
from convit.cli.utils import configure_logging


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"convit {__version__}")
        raise typer.Exit()


def main_command(
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug logging (same as setting DEBUG=1)",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Write conventional commit messages."""
    configure_logging(debug)

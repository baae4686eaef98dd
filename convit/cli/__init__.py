"""CLI entry point for convit.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from convit.cli.config import config_app
from convit.cli.commit import commit_command
from convit.cli.generate import generate_command
from convit.cli.main import main_command

# Main application
app = typer.Typer(
    name="convit",
    help="Write conventional commit messages",
    add_completion=False,
    no_args_is_help=True,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands
app.command("commit")(commit_command)
app.command("generate")(generate_command)

# Global options (--debug, --version)
app.callback()(main_command)


def main() -> None:
    """Run the convit application."""
    app()


__all__ = [
    "app",
    "main",
    "config_app",
    "commit_command",
    "generate_command",
    "main_command",
]

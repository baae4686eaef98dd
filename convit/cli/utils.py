"""Shared utility functions for CLI commands."""

import logging
import os

import typer

from convit import global_config
from convit.config import ConvitConfig


def configure_logging(debug: bool = False) -> None:
    """Configure logging for the CLI.

    Debug output is enabled by --debug or the DEBUG environment variable.
    """
    enabled = debug or bool(os.environ.get("DEBUG"))
    logging.basicConfig(
        level=logging.DEBUG if enabled else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def load_config_or_exit() -> ConvitConfig:
    """Load the configuration, exiting with an error if it is invalid."""
    try:
        return global_config.load_config()
    except global_config.GlobalConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(1)

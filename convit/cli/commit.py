"""CLI command for writing a commit message by hand."""

import typer

from convit.cli.utils import load_config_or_exit
from convit.cli.prompts import prompt_for_message, prompt_for_scope
from convit.commit_types import EmptyMessageError, format_conventional_commit
from convit.git import GitError, commit_with_message


def commit_command() -> None:
    """Write a commit message.

    Prompts for the commit type, an optional scope and the message, then
    commits the staged changes.
    """
    config = load_config_or_exit()

    try:
        scope = prompt_for_scope(config)
        message = prompt_for_message(config)

        output = commit_with_message(format_conventional_commit(scope, message))
        typer.echo(output)

    except EmptyMessageError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(0)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)

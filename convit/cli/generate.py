"""CLI command for generating a commit message with an LLM."""

import functools

import typer

from convit.cli.prompts import confirm_message, prompt_for_message, revise_message
from convit.cli.utils import load_config_or_exit
from convit.commit_types import EmptyMessageError
from convit.generator import generate_commit_message
from convit.git import EmptyOrMalformedDiffError, GitError
from convit.llm import (
    GenerationMode,
    LLMError,
    MissingAPIKeyError,
    RequestTimeoutError,
    get_provider,
)


def generate_command(
    partial: bool = typer.Option(
        False,
        "--partial",
        help="Only generate the commit type and scope",
    ),
) -> None:
    """Write a commit message with the help of AI."""
    config = load_config_or_exit()

    try:
        provider = get_provider(config.generate_model)

        partial_message = None
        mode = GenerationMode.FULL
        if partial:
            partial_message = prompt_for_message(config)
            mode = GenerationMode.SCOPE_ONLY

        typer.echo("Generating your commit message...", err=True)
        generate_commit_message(
            mode,
            partial_message,
            config=config,
            provider=provider,
            confirm=confirm_message,
            revise_message=functools.partial(revise_message, config),
        )
        typer.echo("Commit successful!", err=True)

    except EmptyOrMalformedDiffError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(0)
    except EmptyMessageError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(0)
    except MissingAPIKeyError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except RequestTimeoutError as e:
        typer.echo(f"Timed out: {e}", err=True)
        raise typer.Exit(1)
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)
    except LLMError as e:
        typer.echo(f"LLM error: {e}", err=True)
        raise typer.Exit(1)

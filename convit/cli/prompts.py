"""Interactive prompts used by the CLI commands."""

from typing import Sequence

import typer

from convit.commit_types import (
    COMMIT_TYPES,
    CommitType,
    build_scope,
    normalize_message,
)
from convit.config import ConvitConfig


def select_commit_type(commit_types: Sequence[CommitType] = COMMIT_TYPES) -> CommitType:
    """Let the user pick an entry from the commit type catalogue.

    Args:
        commit_types: The catalogue to choose from.

    Returns:
        The selected entry.
    """
    typer.echo("Select the type of commit:")
    for i, ct in enumerate(commit_types, 1):
        typer.echo(f"  {i:2d}. {ct.label}")

    while True:
        choice = typer.prompt(f"Type (1-{len(commit_types)})", type=int)
        if 1 <= choice <= len(commit_types):
            return commit_types[choice - 1]
        typer.echo("Invalid choice, try again.", err=True)


def prompt_for_scope(config: ConvitConfig, commit_types: Sequence[CommitType] = COMMIT_TYPES) -> str:
    """Prompt for the commit type and an optional scope.

    The scope question is skipped when the picked entry already carries a
    sub-type or when optional scopes are disabled in the configuration.

    Returns:
        The header prefix, e.g. `feat` or `feat(parser)`.
    """
    commit_type = select_commit_type(commit_types)

    scope = ""
    if config.prompt_for_optional_sub_type and not commit_type.sub_type:
        scope = typer.prompt(
            "Provide an optional scope (leave empty for none)",
            default="",
            show_default=False,
        )

    return build_scope(commit_type, scope)


def prompt_for_message(config: ConvitConfig) -> str:
    """Prompt for the commit message.

    Raises:
        EmptyMessageError: If the message is empty.
    """
    message = typer.prompt("Enter your commit message", default="", show_default=False)
    return normalize_message(message, config.lower_case_first_letter)


def revise_message(config: ConvitConfig, previous: str) -> str:
    """Offer to change the partial message before regenerating.

    Raises:
        EmptyMessageError: If the revised message is empty.
    """
    message = typer.prompt("Adjust your commit message (enter to keep)", default=previous)
    return normalize_message(message, config.lower_case_first_letter)


def confirm_message(message: str) -> bool:
    """Show a generated message and ask whether to commit it."""
    typer.echo("")
    typer.echo("=" * 60)
    typer.echo(message)
    typer.echo("=" * 60)
    typer.echo("")

    accepted = typer.confirm("Do you want to commit this message?", default=True)
    if not accepted:
        typer.echo("Regenerating your commit message...", err=True)
    return accepted

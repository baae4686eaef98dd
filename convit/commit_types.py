"""Conventional commit type catalogue and message helpers."""

from dataclasses import dataclass
from typing import Optional


class EmptyMessageError(ValueError):
    """Raised when a commit message is empty."""

    pass


@dataclass(frozen=True)
class CommitType:
    """A commit type the user can pick or the model can choose from."""

    type: str
    description: str
    sub_type: Optional[str] = None

    @property
    def value(self) -> str:
        """The type as it appears in a commit header, e.g. chore(deps)."""
        if self.sub_type:
            return f"{self.type}({self.sub_type})"
        return self.type

    @property
    def label(self) -> str:
        return f"{self.value}: {self.description}"


COMMIT_TYPES: tuple[CommitType, ...] = (
    CommitType("chore", "Changes that don't change source code or tests"),
    CommitType("feat", "Adds or removes a new feature"),
    CommitType("fix", "Fixes a bug"),
    CommitType(
        "refactor",
        "A code change that neither fixes a bug nor adds a feature, eg. renaming a variable, remove dead code, etc.",
    ),
    CommitType("docs", "Documentation only changes"),
    CommitType("style", "Changes the style of the code eg. linting"),
    CommitType("perf", "Improves the performance of the code"),
    CommitType("test", "Adding missing tests or correcting existing tests"),
    CommitType(
        "build",
        "Changes that affect the build system or external dependencies (example scopes: gulp, broccoli, npm)",
    ),
    CommitType("ci", "Changes to CI configuration files and scripts"),
    CommitType("revert", "Reverts a previous commit"),
    CommitType("chore", "Release / Version tags", sub_type="release"),
    CommitType("chore", "Add, remove or update dependencies", sub_type="deps"),
    CommitType("chore", "Add, remove or update development dependencies", sub_type="dev-deps"),
    CommitType("chore", "Add or update types.", sub_type="types"),
)


def normalize_message(message: str, lower_case_first_letter: bool = True) -> str:
    """Validate a user typed commit message.

    Args:
        message: The raw message.
        lower_case_first_letter: Lowercase the first character.

    Returns:
        The cleaned message.

    Raises:
        EmptyMessageError: If the message is empty.
    """
    message = message.strip()
    if not message:
        raise EmptyMessageError("Message cannot be empty")

    if lower_case_first_letter:
        message = message[:1].lower() + message[1:]

    return message


def build_scope(commit_type: CommitType, scope: Optional[str] = None) -> str:
    """Combine a catalogue entry and an optional scope into a header prefix.

    A scope is only applied to entries without a sub-type of their own.
    """
    scope = (scope or "").strip()
    if scope and not commit_type.sub_type:
        return f"{commit_type.type}({scope})"
    return commit_type.value


def format_conventional_commit(scope: str, message: str) -> str:
    """Combine scope and message into a conventional commit title."""
    return f"{scope}: {message}"

"""Prompt assembly.

Turns the filtered diff, the commit type catalogue and an optional user
message into the system/user prompt pair sent to a provider.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from convit.commit_types import CommitType
from convit.git.diff import DiffSegment, join_segments
from convit.llm.prompts import EXAMPLES_HEADER, FULL_SUFFIX, SHORT_SUFFIX


class GenerationMode(str, Enum):
    """What the model is asked to produce."""

    FULL = "full"
    SCOPE_ONLY = "scope-only"


@dataclass(frozen=True)
class PromptPair:
    """The system instruction and user content sent to a provider."""

    system: str
    user: str


@dataclass(frozen=True)
class GenerationRequest:
    """A single generation attempt."""

    prompt: PromptPair
    timeout: float
    partial_message: Optional[str] = None


def format_commit_type_examples(commit_types: Sequence[CommitType]) -> str:
    """List every catalogue entry as `- {type}: {description}`."""
    examples = EXAMPLES_HEADER
    for ct in commit_types:
        examples += f"- {ct.type}: {ct.description}\n"
    return examples


def build_system_message(
    base_instruction: str,
    commit_types: Sequence[CommitType],
    mode: GenerationMode,
) -> str:
    """Build the system message for the given mode.

    Args:
        base_instruction: The configured base instruction.
        commit_types: The commit type catalogue.
        mode: Full generation or type/scope only.

    Returns:
        The instruction, the type examples and the mode suffix.
    """
    examples = format_commit_type_examples(commit_types)
    suffix = FULL_SUFFIX if mode == GenerationMode.FULL else SHORT_SUFFIX

    return f"{base_instruction}\n\n{examples}\n\n{suffix}"


def build_user_message(
    diff: str,
    mode: GenerationMode,
    partial_message: Optional[str] = None,
) -> str:
    """Build the user message for the given mode.

    Args:
        diff: The filtered diff text.
        mode: Full generation or type/scope only.
        partial_message: The user's message, required in scope-only mode.

    Returns:
        The diff alone, or the message followed by the diff.

    Raises:
        ValueError: If scope-only mode is used without a message.
    """
    if mode == GenerationMode.FULL:
        return diff

    if partial_message is None:
        raise ValueError("A partial message is required in scope-only mode")

    return f"message: {partial_message}\n\ndiff: {diff}"


def assemble_prompt(
    segments: Sequence[DiffSegment],
    commit_types: Sequence[CommitType],
    base_instruction: str,
    mode: GenerationMode,
    partial_message: Optional[str] = None,
) -> PromptPair:
    """Assemble the prompt pair for a generation request.

    Pure: identical inputs always yield an identical PromptPair.

    Args:
        segments: The diff segments left after filtering.
        commit_types: The commit type catalogue.
        base_instruction: The configured base instruction.
        mode: Full generation or type/scope only.
        partial_message: The user's message, required in scope-only mode.

    Returns:
        The assembled PromptPair.
    """
    mode = GenerationMode(mode)
    system = build_system_message(base_instruction, commit_types, mode)
    user = build_user_message(join_segments(segments), mode, partial_message)
    return PromptPair(system=system, user=user)

"""Staged changes and commit execution.

Contains:
- get_staged_diff: Get the staged diff as text
- commit_with_message: Create a commit with the given message
"""

from convit.git.exceptions import NoStagedChangesError
from convit.git.runner import _run_git_command


def get_staged_diff() -> str:
    """Get the staged diff.

    Returns:
        The output of `git diff --cached`.

    Raises:
        NoStagedChangesError: If there are no staged changes.
        GitError: If the git command fails.
    """
    diff = _run_git_command(["diff", "--cached"], strip=False)

    if not diff.strip():
        raise NoStagedChangesError(
            "No staged changes found. Stage your changes first with: git add <files>"
        )

    return diff


def commit_with_message(message: str) -> str:
    """Commit the staged changes.

    Args:
        message: The full commit message.

    Returns:
        The output of `git commit`.

    Raises:
        GitError: If the commit fails.
    """
    return _run_git_command(["commit", "-m", message])

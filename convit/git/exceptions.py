"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- EmptyOrMalformedDiffError: Raised when a diff has no per-file changes
- NoStagedChangesError: Raised when there are no staged changes
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class EmptyOrMalformedDiffError(GitError):
    """Raised when a diff is empty or contains no per-file change blocks."""

    pass


class NoStagedChangesError(EmptyOrMalformedDiffError):
    """Raised when there are no staged changes."""

    pass

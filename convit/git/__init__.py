"""Git collaborator module for convit.

This package provides:
- exceptions: GitError, EmptyOrMalformedDiffError, NoStagedChangesError
- runner: _run_git_command
- staged: get_staged_diff, commit_with_message
- diff: DiffSegment, split_diff_into_chunks, remove_lock_files, prepare_diff
"""

# Exceptions
from convit.git.exceptions import (
    GitError,
    EmptyOrMalformedDiffError,
    NoStagedChangesError,
)

# Runner utilities
from convit.git.runner import _run_git_command

# Staged changes
from convit.git.staged import (
    get_staged_diff,
    commit_with_message,
)

# Diff preprocessing
from convit.git.diff import (
    DiffSegment,
    FILES_TO_IGNORE,
    split_diff_into_chunks,
    remove_lock_files,
    prepare_diff,
    join_segments,
)


__all__ = [
    # Exceptions
    "GitError",
    "EmptyOrMalformedDiffError",
    "NoStagedChangesError",
    # Runner
    "_run_git_command",
    # Staged
    "get_staged_diff",
    "commit_with_message",
    # Diff
    "DiffSegment",
    "FILES_TO_IGNORE",
    "split_diff_into_chunks",
    "remove_lock_files",
    "prepare_diff",
    "join_segments",
]

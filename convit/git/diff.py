"""Git diff preprocessing.

Contains:
- DiffSegment: The part of a diff belonging to one changed file
- split_diff_into_chunks: Split a raw diff into per-file segments
- remove_lock_files: Drop segments of auto-generated files, keeping order
- prepare_diff: Split, filter and re-join a raw diff
- FILES_TO_IGNORE: Default header patterns of files to drop
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional, Sequence

from convit.git.exceptions import EmptyOrMalformedDiffError

logger = logging.getLogger(__name__)

# Marker git puts at the start of every per-file change block
DIFF_FILE_MARKER = "diff --git"

# Lock files and debug logs inflate the token count without telling the
# model anything about the kind of change
FILES_TO_IGNORE = [
    "package-lock.json",
    "yarn.lock",
    "npm-debug.log",
    "yarn-debug.log",
    "yarn-error.log",
    ".pnpm-debug.log",
    "Cargo.lock",
    "Gemfile.lock",
    "mix.lock",
    "Pipfile.lock",
    "composer.lock",
    "go.sum",
]


@dataclass(frozen=True)
class DiffSegment:
    """The lines of a diff that belong to a single changed file."""

    lines: tuple[str, ...]

    @classmethod
    def from_text(cls, text: str) -> "DiffSegment":
        return cls(lines=tuple(text.split("\n")))

    @property
    def header(self) -> str:
        """The first line of the segment, holding the file paths."""
        return self.lines[0] if self.lines else ""

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def split_diff_into_chunks(diff: str) -> list[DiffSegment]:
    """Split a raw diff into one segment per changed file.

    Anything before the first marker is dropped, the marker itself is
    stripped and every chunk is trimmed.

    Args:
        diff: The raw output of `git diff`.

    Returns:
        The segments in the order the files appear in the diff.

    Raises:
        EmptyOrMalformedDiffError: If the diff contains no file marker.
    """
    if DIFF_FILE_MARKER not in diff:
        raise EmptyOrMalformedDiffError(
            "The diff is empty or does not contain any file changes."
        )

    chunks = diff.split(DIFF_FILE_MARKER)[1:]
    return [DiffSegment.from_text(chunk.strip()) for chunk in chunks]


def _should_ignore(segment: DiffSegment, patterns: Sequence[str]) -> bool:
    """Check whether a segment's header contains any of the patterns.

    Args:
        segment: The segment to check.
        patterns: Substrings to look for in the header.

    Returns:
        True if the segment should be dropped.
    """
    header = segment.header
    for pattern in patterns:
        if pattern in header:
            logger.debug("Ignoring %s (matched %s)", header, pattern)
            return True

    logger.debug("Using %s", header)
    return False


def remove_lock_files(
    segments: Sequence[DiffSegment],
    patterns: Optional[Sequence[str]] = None,
    max_workers: Optional[int] = None,
) -> list[DiffSegment]:
    """Drop the segments of auto-generated files.

    Every segment is checked on its own worker. Each result is stored at
    the segment's original index, so the output keeps the input order.

    Args:
        segments: The segments produced by split_diff_into_chunks.
        patterns: Header substrings to drop. Defaults to FILES_TO_IGNORE.
        max_workers: Size of the worker pool (executor default if None).

    Returns:
        The segments matching none of the patterns, in input order.
    """
    if not segments:
        return []

    patterns = tuple(FILES_TO_IGNORE if patterns is None else patterns)
    keep: list[bool] = [False] * len(segments)

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(_should_ignore, segment, patterns): index
            for index, segment in enumerate(segments)
        }
        for future, index in futures.items():
            keep[index] = not future.result()

    return [segment for segment, kept in zip(segments, keep) if kept]


def prepare_diff(diff: str, patterns: Optional[Sequence[str]] = None) -> str:
    """Split the diff in chunks and remove any lock files to save on tokens.

    Args:
        diff: The raw output of `git diff`.
        patterns: Header substrings to drop. Defaults to FILES_TO_IGNORE.

    Returns:
        The remaining segments joined by newlines.

    Raises:
        EmptyOrMalformedDiffError: If the diff contains no file marker.
    """
    segments = remove_lock_files(split_diff_into_chunks(diff), patterns)
    return join_segments(segments)


def join_segments(segments: Sequence[DiffSegment]) -> str:
    """Join segments back into a single diff text."""
    return "\n".join(segment.text for segment in segments)

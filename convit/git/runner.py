"""Git command runner.

Contains:
- _run_git_command: Run a git command and return its output
"""

import logging
import subprocess

from convit.git.exceptions import GitError

logger = logging.getLogger(__name__)


def _run_git_command(args: list[str], strip: bool = True) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        strip: Strip surrounding whitespace from the output.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails.
    """
    logger.debug("Running git command: git %s", " ".join(args))
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise GitError(f"Git command failed: git {' '.join(args)}\n{stderr}") from e
    except FileNotFoundError as e:
        raise GitError("Git is not installed or not in PATH.") from e

    return result.stdout.strip() if strip else result.stdout

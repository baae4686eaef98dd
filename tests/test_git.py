"""Tests for convit.git runner and staged helpers."""

import subprocess
from unittest.mock import MagicMock

import pytest

from convit.git import (
    EmptyOrMalformedDiffError,
    GitError,
    NoStagedChangesError,
    _run_git_command,
    commit_with_message,
    get_staged_diff,
)


class TestRunGitCommand:
    """Tests for _run_git_command function."""

    def test_successful_command(self, mocker):
        """Test successful git command execution."""
        mock_result = MagicMock()
        mock_result.stdout = "output\n"
        mock_result.returncode = 0

        mocker.patch("subprocess.run", return_value=mock_result)

        result = _run_git_command(["status"])
        assert result == "output"

    def test_keeps_whitespace_when_asked(self, mocker):
        """Test that strip=False returns the raw output."""
        mock_result = MagicMock()
        mock_result.stdout = " output\n"
        mocker.patch("subprocess.run", return_value=mock_result)

        assert _run_git_command(["diff"], strip=False) == " output\n"

    def test_failed_command_raises_error(self, mocker):
        """Test that failed command raises GitError."""
        mocker.patch(
            "subprocess.run",
            side_effect=subprocess.CalledProcessError(1, "git", stderr="fatal: bad\n")
        )

        with pytest.raises(GitError) as exc_info:
            _run_git_command(["invalid"])

        assert "Git command failed: git invalid" in str(exc_info.value)
        assert "fatal: bad" in str(exc_info.value)

    def test_git_not_found_raises_error(self, mocker):
        """Test that missing git raises GitError."""
        mocker.patch("subprocess.run", side_effect=FileNotFoundError())

        with pytest.raises(GitError) as exc_info:
            _run_git_command(["status"])

        assert "not installed" in str(exc_info.value)


class TestGetStagedDiff:
    """Tests for get_staged_diff function."""

    def test_returns_diff(self, mocker, sample_diff):
        """Test that the staged diff is returned unchanged."""
        mock_run = mocker.patch("convit.git.staged._run_git_command", return_value=sample_diff)

        assert get_staged_diff() == sample_diff
        mock_run.assert_called_once_with(["diff", "--cached"], strip=False)

    def test_empty_diff_raises(self, mocker):
        """Test that no staged changes raises NoStagedChangesError."""
        mocker.patch("convit.git.staged._run_git_command", return_value="\n")

        with pytest.raises(NoStagedChangesError) as exc_info:
            get_staged_diff()

        assert "No staged changes" in str(exc_info.value)

    def test_no_staged_changes_is_empty_diff_error(self):
        """Test the exception hierarchy."""
        assert issubclass(NoStagedChangesError, EmptyOrMalformedDiffError)
        assert issubclass(EmptyOrMalformedDiffError, GitError)


class TestCommitWithMessage:
    """Tests for commit_with_message function."""

    def test_runs_git_commit(self, mocker):
        """Test that git commit is called with the message."""
        mock_run = mocker.patch("convit.git.staged._run_git_command", return_value="[main abc123] feat: x")

        output = commit_with_message("feat: x")

        mock_run.assert_called_once_with(["commit", "-m", "feat: x"])
        assert output == "[main abc123] feat: x"

    def test_failure_propagates(self, mocker):
        """Test that a failed commit raises GitError."""
        mocker.patch("convit.git.staged._run_git_command", side_effect=GitError("hook failed"))

        with pytest.raises(GitError):
            commit_with_message("feat: x")

"""Tests for convit.commit_types module."""

import pytest

from convit.commit_types import (
    COMMIT_TYPES,
    CommitType,
    EmptyMessageError,
    build_scope,
    format_conventional_commit,
    normalize_message,
)


class TestCommitType:
    """Tests for the CommitType catalogue entries."""

    def test_value_without_sub_type(self):
        """Test that a plain type is its own value."""
        assert CommitType("feat", "Adds a feature").value == "feat"

    def test_value_with_sub_type(self):
        """Test that a sub-type is rendered in parentheses."""
        assert CommitType("chore", "Deps", sub_type="deps").value == "chore(deps)"

    def test_label(self):
        """Test the menu label."""
        assert CommitType("fix", "Fixes a bug").label == "fix: Fixes a bug"

    def test_catalogue_contents(self):
        """Test that the catalogue has the expected entries."""
        values = [ct.value for ct in COMMIT_TYPES]

        assert len(COMMIT_TYPES) == 15
        assert values[:3] == ["chore", "feat", "fix"]
        assert "chore(deps)" in values
        assert "chore(release)" in values


class TestNormalizeMessage:
    """Tests for normalize_message function."""

    def test_lowercases_first_letter(self):
        """Test that the first letter is lowercased."""
        assert normalize_message("Add retry logic") == "add retry logic"

    def test_keeps_case_when_disabled(self):
        """Test that the message is kept when lowercasing is off."""
        assert normalize_message("Add API", lower_case_first_letter=False) == "Add API"

    def test_only_first_letter(self):
        """Test that the rest of the message is untouched."""
        assert normalize_message("Bump SDK to V2") == "bump SDK to V2"

    def test_strips_whitespace(self):
        """Test that surrounding whitespace is removed."""
        assert normalize_message("  fix it \n") == "fix it"

    @pytest.mark.parametrize("message", ["", "   ", "\n"])
    def test_empty_message_raises(self, message):
        """Test that empty messages raise EmptyMessageError."""
        with pytest.raises(EmptyMessageError) as exc_info:
            normalize_message(message)

        assert "cannot be empty" in str(exc_info.value)


class TestBuildScope:
    """Tests for build_scope and format_conventional_commit functions."""

    def test_no_scope(self):
        """Test a type without scope."""
        assert build_scope(CommitType("feat", "x")) == "feat"

    def test_with_scope(self):
        """Test a type with a user scope."""
        assert build_scope(CommitType("feat", "x"), "parser") == "feat(parser)"

    def test_blank_scope_is_ignored(self):
        """Test that a blank scope is treated as none."""
        assert build_scope(CommitType("fix", "x"), "  ") == "fix"

    def test_sub_type_wins(self):
        """Test that entries with a sub-type keep it."""
        assert build_scope(CommitType("chore", "x", sub_type="deps"), "api") == "chore(deps)"

    def test_format_conventional_commit(self):
        """Test combining scope and message."""
        assert format_conventional_commit("feat(parser)", "add arrays") == "feat(parser): add arrays"

"""Tests for line sequence helpers."""

import pytest

from hother.tagblocks import join_lines, split_lines


class TestSplitLines:
    """Test split_lines."""

    def test_split(self):
        """Test splitting on an exact separator."""
        assert split_lines("a\nb\nc", "\n") == ["a", "b", "c"]

    def test_keeps_inner_blank_lines(self):
        """Test blank lines in the middle are kept."""
        assert split_lines("a\n\nb", "\n") == ["a", "", "b"]

    def test_drops_trailing_empty_entries(self):
        """Test trailing separators do not create blank lines."""
        assert split_lines("a\nb\n\n", "\n") == ["a", "b"]

    def test_multi_char_separator(self):
        """Test a CRLF separator."""
        assert split_lines("a\r\nb", "\r\n") == ["a", "b"]
        assert split_lines("a\nb", "\r\n") == ["a\nb"]

    def test_empty_and_none(self):
        """Test empty and missing input."""
        assert split_lines("", "\n") == []
        assert split_lines(None) is None

    def test_empty_separator(self):
        """Test an empty separator is rejected."""
        with pytest.raises(ValueError):
            split_lines("a", "")


class TestJoinLines:
    """Test join_lines."""

    def test_join(self):
        """Test items are joined with the separator."""
        assert join_lines(["a", "b"], "\n") == "a\nb"

    def test_converts_items(self):
        """Test non-string items are converted with str()."""
        assert join_lines([1, True, None], ", ") == "1, True, None"

    def test_trims_trailing_separators(self):
        """Test trailing empty items leave no separators behind."""
        assert join_lines(["a", "", ""], "\n") == "a"

    def test_empty_and_none(self):
        """Test empty and missing input."""
        assert join_lines([], "\n") == ""
        assert join_lines(None) is None

    def test_round_trip(self, lb):
        """Test join then split returns the lines."""
        lines = ["a", "", "b"]
        assert split_lines(join_lines(lines), lb) == lines

"""
Unit tests for line normalization (comparerows/core/compare/normalizer.py)
"""

import pytest

from comparerows.core.compare.normalizer import normalize, normalize_line, split_lines
from comparerows.core.models import ComparisonOptions


ALL_OPTIONS = [
    ComparisonOptions(),
    ComparisonOptions(trim=True),
    ComparisonOptions(ignorecase=True),
    ComparisonOptions(trim=True, ignorecase=True),
    ComparisonOptions(trim=True, ignorecase=True, contains=True),
]


class TestSplitLines:
    """Tests for splitting file content into rows."""

    def test_drops_blank_and_whitespace_lines(self):
        assert split_lines("a\n\n  \nb\n", "\n") == ["a", "b"]

    def test_keeps_surrounding_whitespace_of_rows(self):
        assert split_lines(" a \n\tb", "\n") == [" a ", "\tb"]

    def test_empty_content(self):
        assert split_lines("", "\n") == []

    def test_custom_separator(self):
        assert split_lines("a\r\nb\r\n", "\r\n") == ["a", "b"]

    def test_carriage_return_kept_with_lf_separator(self):
        """Rows keep a trailing CR when the file uses another separator."""
        assert split_lines("a\r\nb", "\n") == ["a\r", "b"]


class TestNormalize:
    """Tests for normalize()."""

    def test_no_options_returns_equal_values(self):
        lines = [" Apple ", "BANANA"]
        assert normalize(lines) == lines
        assert normalize(lines, ComparisonOptions()) == lines

    def test_contains_alone_does_not_transform(self):
        lines = [" Apple "]
        assert normalize(lines, ComparisonOptions(contains=True)) == lines

    def test_trim(self):
        assert normalize([" Apple ", "\tpear\t"], ComparisonOptions(trim=True)) == ["Apple", "pear"]

    def test_ignorecase(self):
        assert normalize([" Apple "], ComparisonOptions(ignorecase=True)) == [" apple "]

    def test_trim_then_ignorecase(self):
        options = ComparisonOptions(trim=True, ignorecase=True)
        assert normalize([" Apple ", "CHERRY"], options) == ["apple", "cherry"]

    def test_preserves_length_and_order(self):
        lines = ["b", " B ", "a", "b"]
        result = normalize(lines, ComparisonOptions(trim=True, ignorecase=True))
        assert result == ["b", "b", "a", "b"]

    def test_does_not_mutate_input(self):
        lines = [" X "]
        normalize(lines, ComparisonOptions(trim=True))
        assert lines == [" X "]

    @pytest.mark.parametrize("options", ALL_OPTIONS)
    def test_idempotent(self, options):
        lines = ["  Mixed Case  ", "ÉCOLE", "tab\there", "plain"]
        once = normalize(lines, options)
        assert normalize(once, options) == once

    def test_normalize_line(self):
        assert normalize_line("  HeLLo ", ComparisonOptions(trim=True, ignorecase=True)) == "hello"

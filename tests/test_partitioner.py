"""
Unit tests for row partitioning (comparerows/core/compare/partitioner.py)

Tests covering:
- Equality in exact and contains modes
- End-to-end comparison scenarios
- Ordering, completeness and multiplicity of results
"""

import pytest

from comparerows.core.compare import RowPartitioner, compare_lines, partition, rows_match
from comparerows.core.models import ComparisonOptions, PartitionResult


CONTAINS = ComparisonOptions(contains=True)


class TestRowsMatch:
    """Tests for rows_match()."""

    def test_exact_match(self):
        assert rows_match("abc", "abc")
        assert not rows_match("abc", "ABC")

    def test_substring_does_not_match_by_default(self):
        assert not rows_match("ab", "abc")
        assert not rows_match("ab", "abc", ComparisonOptions())

    def test_contains_is_symmetric(self):
        assert rows_match("ab", "abc", CONTAINS)
        assert rows_match("abc", "ab", CONTAINS)

    def test_contains_requires_overlap(self):
        assert not rows_match("abc", "xyz", CONTAINS)


class TestCompareScenarios:
    """End-to-end scenarios over raw rows."""

    def test_default_options(self):
        result = compare_lines(["apple", "banana"], ["banana", "cherry"])
        assert result == PartitionResult(common=["banana"], diff_a=["apple"], diff_b=["cherry"])

    def test_trim_and_ignorecase(self):
        options = ComparisonOptions(trim=True, ignorecase=True)
        result = compare_lines([" Apple "], ["apple"], options)
        assert result == PartitionResult(common=["apple"], diff_a=[], diff_b=[])

    def test_contains(self):
        result = compare_lines(["app"], ["application"], CONTAINS)
        assert result == PartitionResult(common=["application"], diff_a=[], diff_b=[])

    def test_empty_first_file(self):
        result = compare_lines([], ["x"])
        assert result == PartitionResult(common=[], diff_a=[], diff_b=["x"])

    def test_both_empty(self):
        assert compare_lines([], []) == PartitionResult()

    def test_case_differs_without_ignorecase(self):
        result = compare_lines(["Apple"], ["apple"])
        assert result.common == []
        assert result.diff_a == ["Apple"]
        assert result.diff_b == ["apple"]

    def test_results_hold_normalized_values(self):
        result = compare_lines(["  Keep  "], ["other"], ComparisonOptions(trim=True))
        assert result.diff_a == ["Keep"]


class TestPartitionProperties:
    """Invariants of partition()."""

    @pytest.mark.parametrize("options", [ComparisonOptions(), CONTAINS])
    def test_results_are_sorted(self, options):
        a = ["pear", "Apple", "fig", "banana", "fig"]
        b = ["zucchini", "fig", "apple", "Banana", "kiwi", "Apple"]
        result = partition(a, b, options)
        for rows in (result.common, result.diff_a, result.diff_b):
            assert all(x <= y for x, y in zip(rows, rows[1:]))

    def test_sort_is_by_code_point(self):
        result = partition([], ["b", "B", "a", "A", "é"])
        assert result.diff_b == ["A", "B", "a", "b", "é"]

    @pytest.mark.parametrize("options", [ComparisonOptions(), CONTAINS])
    def test_every_row_of_b_is_common_or_different(self, options):
        a = ["alpha", "beta", "gamma"]
        b = ["beta", "delta", "alphabet", "beta", "eps"]
        result = partition(a, b, options)
        assert sorted(result.common + result.diff_b) == sorted(b)
        assert not set(result.common) & set(result.diff_b)

    def test_default_common_is_verbatim_membership(self):
        a = ["one", "two ", "Three"]
        b = ["one", "two", "three", "Three"]
        result = partition(a, b)
        assert result.common == sorted(row for row in b if row in a)

    def test_common_is_collected_from_second_file_only(self):
        """Matched rows of the first file are not added to common."""
        result = partition(["app"], ["application", "apply"], CONTAINS)
        assert result.common == ["application", "apply"]
        assert "app" not in result.common
        assert result.diff_a == []

    def test_duplicates_keep_multiplicity(self):
        result = partition(["x", "x", "y"], ["x", "z", "z"])
        assert result.common == ["x"]
        assert result.diff_a == ["y"]
        assert result.diff_b == ["z", "z"]

    def test_duplicate_matches_from_second_file_repeat_in_common(self):
        result = partition(["x"], ["x", "x"])
        assert result.common == ["x", "x"]

    def test_unmatched_duplicates_of_first_file_repeat(self):
        result = partition(["y", "y"], [])
        assert result.diff_a == ["y", "y"]

    def test_exact_and_contains_agree_without_substrings(self):
        a = ["red", "green", "blue"]
        b = ["green", "cyan", "blue", "pink"]
        assert partition(a, b) == partition(a, b, CONTAINS)

    def test_partitioner_without_options_is_exact(self):
        result = RowPartitioner().partition(["ab"], ["abc"])
        assert result.common == []
        assert result.diff_a == ["ab"]
        assert result.diff_b == ["abc"]

    def test_inputs_are_not_mutated(self):
        a = ["b", "a"]
        b = ["c", "a"]
        partition(a, b)
        assert a == ["b", "a"]
        assert b == ["c", "a"]

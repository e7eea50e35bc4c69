"""
Set partitioning of rows.

Classifies every row of two files as common or unique to its side under
configurable equality (exact or substring containment), then sorts each
result set.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from comparerows.core.compare.normalizer import normalize
from comparerows.core.models import ComparisonOptions, PartitionResult


def rows_match(row1: str, row2: str, options: Optional[ComparisonOptions] = None) -> bool:
    """
    Check whether two normalized rows are considered equal.

    In contains mode either row may be a substring of the other.
    """
    if options and options.contains:
        return row1 == row2 or row1 in row2 or row2 in row1
    return row1 == row2


class RowPartitioner:
    """
    Partitions two sequences of normalized rows.

    Rows of the second sequence are split into common and different rows.
    Rows of the first sequence only contribute their different rows; a
    matched row of the first sequence is not added to the common set.
    """

    def __init__(self, options: Optional[ComparisonOptions] = None):
        self.options = options or ComparisonOptions()

    def partition(
        self,
        lines_a: Sequence[str],
        lines_b: Sequence[str]
    ) -> PartitionResult:
        """
        Partition rows of both sides.

        Args:
            lines_a: Normalized rows of the first file
            lines_b: Normalized rows of the second file

        Returns:
            PartitionResult with each list sorted ascending
        """
        in_a = self._matcher(lines_a)
        in_b = self._matcher(lines_b)

        common: list[str] = []
        diff_b: list[str] = []
        for row in lines_b:
            if in_a(row):
                common.append(row)
            else:
                diff_b.append(row)

        diff_a = [row for row in lines_a if not in_b(row)]

        logging.debug(
            f"RowPartitioner - {len(lines_a)}/{len(lines_b)} rows ({self.options.describe()}): "
            f"{len(common)} common, {len(diff_a)} + {len(diff_b)} different"
        )

        return PartitionResult(
            common=sorted(common),
            diff_a=sorted(diff_a),
            diff_b=sorted(diff_b),
        )

    def _matcher(self, others: Sequence[str]) -> Callable[[str], bool]:
        """Build a membership test against the other side."""
        if not self.options.contains:
            # Exact equality reduces to set membership
            lookup = frozenset(others)
            return lookup.__contains__
        return lambda row: any(rows_match(other, row, self.options) for other in others)


def partition(
    lines_a: Sequence[str],
    lines_b: Sequence[str],
    options: Optional[ComparisonOptions] = None
) -> PartitionResult:
    """Partition two sequences of normalized rows."""
    return RowPartitioner(options).partition(lines_a, lines_b)


def compare_lines(
    raw_a: Sequence[str],
    raw_b: Sequence[str],
    options: Optional[ComparisonOptions] = None
) -> PartitionResult:
    """Normalize both sides and partition them."""
    return partition(normalize(raw_a, options), normalize(raw_b, options), options)

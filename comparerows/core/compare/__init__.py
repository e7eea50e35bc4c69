"""
Compare module for row comparison operations.

Provides:
- Line normalization (trim, ignore case)
- Set partitioning into common and different rows
"""

from comparerows.core.compare.normalizer import (
    normalize,
    normalize_line,
    split_lines,
)
from comparerows.core.compare.partitioner import (
    RowPartitioner,
    compare_lines,
    partition,
    rows_match,
)

__all__ = [
    # Normalizer
    'normalize',
    'normalize_line',
    'split_lines',
    # Partitioner
    'RowPartitioner',
    'compare_lines',
    'partition',
    'rows_match',
]

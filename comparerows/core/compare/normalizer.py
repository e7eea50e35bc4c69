"""
Line normalization.

Turns raw file content into comparison-ready rows:
- Splitting on a line separator
- Dropping empty and whitespace-only lines
- Trimming and case folding
"""

from __future__ import annotations

import os
from typing import Optional, Sequence

from comparerows.core.models import ComparisonOptions


def split_lines(text: str, separator: str = os.linesep) -> list[str]:
    """
    Split text into rows, discarding blank ones.

    Args:
        text: Decoded file content
        separator: Line separator to split on

    Returns:
        Non-blank rows in file order
    """
    if not text:
        return []
    return [line for line in text.split(separator) if line and line.strip()]


def normalize_line(line: str, options: ComparisonOptions) -> str:
    """Normalize a single row. Trim is applied before case folding."""
    result = line.strip() if options.trim else line
    if options.ignorecase:
        result = result.lower()
    return result


def normalize(
    lines: Sequence[str],
    options: Optional[ComparisonOptions] = None
) -> list[str]:
    """
    Normalize rows according to options.

    The output keeps the length and order of the input. With no transform
    enabled the rows are returned unchanged.
    """
    options = options or ComparisonOptions()
    if not options.transforms_lines:
        return list(lines)
    return [normalize_line(line, options) for line in lines]

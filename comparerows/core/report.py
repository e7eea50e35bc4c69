"""
Report text for comparison results.

Builds the user-facing summary lines and the proposed file names used
when results are saved.
"""

from __future__ import annotations

from pathlib import Path

from comparerows.core.models import PartitionResult


COMMON_DESTINATION = "./common.json"


def pluralize(count: int, noun: str) -> str:
    """Format a count with its noun, e.g. '1 line' or '3 lines'."""
    return f"{count} {noun}{'' if count == 1 else 's'}"


def line_count_message(count: int, path: Path | str) -> str:
    return f"{pluralize(count, 'line')} found in {path}."


def _rows_phrase(count: int, kind: str) -> str:
    if not count:
        return f"No {kind} rows"
    return pluralize(count, f"{kind} row")


def summary_messages(
    result: PartitionResult,
    path_a: Path | str,
    path_b: Path | str
) -> list[str]:
    """
    Build the results summary block.

    Args:
        result: Partition result to summarize
        path_a: Label of the first file
        path_b: Label of the second file

    Returns:
        Summary lines in display order
    """
    return [
        "RESULTS:",
        "========",
        f"   - {_rows_phrase(len(result.common), 'common')} found.",
        f"   - {_rows_phrase(len(result.diff_a), 'different')} found in {path_a}.",
        f"   - {_rows_phrase(len(result.diff_b), 'different')} found in {path_b}.",
    ]


def default_diff_destination(path: Path | str) -> str:
    """
    Propose a destination for the different rows of a file.

    The file extension is replaced by '.json', or '.json' is appended
    when the file has none.
    """
    basename = Path(path).name
    extension = Path(basename).suffix
    name = f"diff-{basename}"
    if extension:
        name = name[:-len(extension)]
    return f"./{name}.json"

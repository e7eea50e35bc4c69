"""
Core data models for row comparison.

This module defines the data structures shared by the comparison engine
and the interactive session:
- Comparison options
- Partition results
- Session states and next-step choices

All models are UI-agnostic and immutable where practical.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


# =============================================================================
# Enumerations
# =============================================================================

class NextStep(Enum):
    """Action chosen by the user once the summary is shown."""
    PRINT = "print"    # Print results in the terminal
    SAVE = "save"      # Save results to JSON files
    ABORT = "abort"    # Stop without output


class SessionState(Enum):
    """State of an interactive compare session."""
    COMPARING = auto()
    AWAITING_NEXT_STEP = auto()
    PRINTING = auto()
    AWAITING_DESTINATIONS = auto()
    SAVING = auto()
    DONE = auto()


# =============================================================================
# Comparison Models
# =============================================================================

@dataclass(frozen=True)
class ComparisonOptions:
    """Options controlling how rows are normalized and matched."""
    trim: bool = False
    ignorecase: bool = False
    contains: bool = False

    @property
    def transforms_lines(self) -> bool:
        """True when normalization changes line values."""
        return self.trim or self.ignorecase

    def describe(self) -> str:
        """Short description of the active options for logging."""
        active = [name for name in ('trim', 'ignorecase', 'contains') if getattr(self, name)]
        return ', '.join(active) if active else 'exact'


@dataclass(frozen=True)
class PartitionResult:
    """
    Result of partitioning two sets of rows.

    Attributes:
        common: Rows of the second file matched by a row of the first
        diff_a: Rows of the first file with no match in the second
        diff_b: Rows of the second file with no match in the first
    """
    common: list[str] = field(default_factory=list)
    diff_a: list[str] = field(default_factory=list)
    diff_b: list[str] = field(default_factory=list)

    @property
    def is_identical(self) -> bool:
        """True when neither side has unmatched rows."""
        return not self.diff_a and not self.diff_b

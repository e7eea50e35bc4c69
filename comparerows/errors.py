"""
Errors raised by a compare session.

Read failures are not part of this taxonomy: an unreadable file is
compared as if it were empty.
"""

from __future__ import annotations

from pathlib import Path


class CompareRowsError(Exception):
    """Base class for errors reported to the user."""
    pass


class UsageError(CompareRowsError):
    """A required file argument is missing."""

    def __init__(self, argument_name: str):
        self.argument_name = argument_name
        super().__init__(f"Missing required {argument_name} argument")


class NotFoundError(CompareRowsError):
    """A file to compare does not exist."""

    def __init__(self, path: Path | str):
        self.path = Path(path).resolve()
        super().__init__(f"File {self.path} not found")


class WriteFailure(CompareRowsError):
    """A result file could not be written."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Could not save {self.path}: {reason}")

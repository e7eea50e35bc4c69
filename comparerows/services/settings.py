"""
Run configuration.

A single SessionConfig is built when the process starts and passed to the
session. Nothing is read from or written to disk.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from comparerows import __version__
from comparerows.core.models import ComparisonOptions


APP_NAME = "compare-rows"


@dataclass
class SessionConfig:
    """Configuration for one compare invocation."""
    file_a: Optional[str] = None
    file_b: Optional[str] = None
    options: ComparisonOptions = field(default_factory=ComparisonOptions)
    line_separator: str = os.linesep
    encoding: Optional[str] = None
    log_level: str = "WARNING"
    log_file: Optional[Path] = None
    app_name: str = APP_NAME
    version: str = __version__

    @classmethod
    def from_args(
        cls,
        file_a: Optional[str],
        file_b: Optional[str],
        trim: bool = False,
        ignorecase: bool = False,
        contains: bool = False,
        **kwargs
    ) -> 'SessionConfig':
        """Create from parsed command line values."""
        return cls(
            file_a=file_a,
            file_b=file_b,
            options=ComparisonOptions(
                trim=bool(trim),
                ignorecase=bool(ignorecase),
                contains=bool(contains),
            ),
            **kwargs
        )

    @property
    def path_a(self) -> Path:
        return Path(self.file_a or '').resolve()

    @property
    def path_b(self) -> Path:
        return Path(self.file_b or '').resolve()

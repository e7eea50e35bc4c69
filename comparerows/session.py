"""
Interactive compare session.

Drives one invocation through its states:
- COMPARING: validate inputs, read both files, partition rows
- AWAITING_NEXT_STEP: show the summary and ask what to do
- PRINTING or AWAITING_DESTINATIONS then SAVING
- DONE
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from comparerows.core.compare import compare_lines
from comparerows.core.models import NextStep, PartitionResult, SessionState
from comparerows.core.report import (
    COMMON_DESTINATION,
    default_diff_destination,
    line_count_message,
    summary_messages,
)
from comparerows.errors import NotFoundError, UsageError, WriteFailure
from comparerows.services.console import Console
from comparerows.services.file_io import FileIOService
from comparerows.services.settings import SessionConfig


@dataclass
class SaveDestinations:
    """Where each result set is written."""
    common: Path
    diff_a: Path
    diff_b: Path

    def pairs(self, result: PartitionResult) -> list[tuple[Path, list[str]]]:
        return [
            (self.common, result.common),
            (self.diff_a, result.diff_a),
            (self.diff_b, result.diff_b),
        ]


class CompareSession:
    """
    One interactive comparison of two files.

    User prompts are the only points where the session waits; everything
    between them runs to completion.
    """

    def __init__(
        self,
        config: SessionConfig,
        console: Optional[Console] = None,
        file_io: Optional[FileIOService] = None
    ):
        self.config = config
        self.console = console or Console()
        self.file_io = file_io or FileIOService(line_separator=config.line_separator)
        self.state = SessionState.COMPARING
        self.result: Optional[PartitionResult] = None
        self.saved: list[Path] = []

    def run(self) -> Optional[PartitionResult]:
        """
        Run the session until DONE.

        Returns:
            The partition result

        Raises:
            UsageError: A file argument is missing
            NotFoundError: A file does not exist
            WriteFailure: A result file could not be saved
        """
        next_step = NextStep.ABORT
        destinations: Optional[SaveDestinations] = None

        while self.state != SessionState.DONE:
            logging.debug(f"CompareSession - State {self.state.name}")

            if self.state == SessionState.COMPARING:
                self.result = self.compare()
                self.state = SessionState.AWAITING_NEXT_STEP

            elif self.state == SessionState.AWAITING_NEXT_STEP:
                self.report_summary(self.result)
                next_step = self.console.choose_next_step()
                if next_step == NextStep.PRINT:
                    self.state = SessionState.PRINTING
                elif next_step == NextStep.SAVE:
                    self.state = SessionState.AWAITING_DESTINATIONS
                else:
                    self.state = SessionState.DONE

            elif self.state == SessionState.PRINTING:
                self.print_results(self.result)
                self.state = SessionState.DONE

            elif self.state == SessionState.AWAITING_DESTINATIONS:
                destinations = self.select_destinations()
                self.state = SessionState.SAVING

            elif self.state == SessionState.SAVING:
                self.save_results(self.result, destinations)
                self.state = SessionState.DONE

        logging.info(f"CompareSession - Finished with next step '{next_step.value}'")
        return self.result

    # -------------------------------------------------------------------------
    # Comparing
    # -------------------------------------------------------------------------

    def validate(self) -> None:
        """Check the file arguments before any work is done."""
        if not self.config.file_a:
            raise UsageError("1st")
        if not self.config.file_b:
            raise UsageError("2nd")
        if not self.file_io.exists(self.config.file_a):
            raise NotFoundError(self.config.file_a)
        if not self.file_io.exists(self.config.file_b):
            raise NotFoundError(self.config.file_b)

    def compare(self) -> PartitionResult:
        """Read both files and partition their rows."""
        self.validate()

        encoding = self.config.encoding
        with ThreadPoolExecutor(max_workers=2) as pool:
            future_a = pool.submit(self.file_io.read_lines, self.config.file_a, encoding)
            future_b = pool.submit(self.file_io.read_lines, self.config.file_b, encoding)
            lines_a = future_a.result()
            lines_b = future_b.result()

        self.console.info(line_count_message(len(lines_a), self.config.path_a))
        self.console.info(line_count_message(len(lines_b), self.config.path_b))
        self.console.blank()

        result = compare_lines(lines_a, lines_b, self.config.options)
        logging.info(
            f"CompareSession - Compared {self.config.path_a} and {self.config.path_b} "
            f"({self.config.options.describe()}), identical: {result.is_identical}"
        )
        return result

    def report_summary(self, result: PartitionResult) -> None:
        for message in summary_messages(result, self.config.path_a, self.config.path_b):
            self.console.success(message)

    # -------------------------------------------------------------------------
    # Printing
    # -------------------------------------------------------------------------

    def print_results(self, result: PartitionResult) -> None:
        self.console.print_rows("COMMON ROWS:", result.common)
        self.console.print_rows(f"DIFFERENT ROWS IN FILE {self.config.path_a}:", result.diff_a)
        self.console.print_rows(f"DIFFERENT ROWS IN FILE {self.config.path_b}:", result.diff_b)

    # -------------------------------------------------------------------------
    # Saving
    # -------------------------------------------------------------------------

    def select_destinations(self) -> SaveDestinations:
        """Ask for the three result destinations."""
        name_a = f"diff-{self.config.path_a.name}"
        name_b = f"diff-{self.config.path_b.name}"
        return SaveDestinations(
            common=self.console.ask_destination("the common rows", COMMON_DESTINATION),
            diff_a=self.console.ask_destination(
                f"the different rows in {name_a}",
                default_diff_destination(self.config.path_a)
            ),
            diff_b=self.console.ask_destination(
                f"the different rows in {name_b}",
                default_diff_destination(self.config.path_b)
            ),
        )

    def save_results(self, result: PartitionResult, destinations: SaveDestinations) -> None:
        """
        Write each result set as a JSON array.

        Stops at the first failing write.
        """
        for path, rows in destinations.pairs(result):
            write_result = self.file_io.write(path, rows)
            if not write_result.success:
                raise WriteFailure(path, write_result.error or "unknown error")
            self.saved.append(path)

        self.console.success(f"The following {len(self.saved)} files have been successfully saved:")
        for path in self.saved:
            self.console.success(f"  - {path}")

"""
Terminal output and interactive prompts.

Provides the message channels shown to the user (success, info, log,
error) and the prompts used to pick the next step and result
destinations.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence, TextIO

from comparerows.core.models import NextStep


NEXT_STEP_CHOICES = [
    ("Print results in this terminal", NextStep.PRINT),
    ("Save results to files", NextStep.SAVE),
    ("Abort", NextStep.ABORT),
]


class Console:
    """Styled console channels and line-based prompts."""

    STYLES = {
        'success': ('\033[1m\033[32m', '✔ '),   # Bold green
        'info': ('\033[1m\033[36m', 'i '),      # Bold cyan
        'log': ('\033[1m\033[37m', ' '),        # Bold white
        'error': ('\033[1m\033[31m', 'x '),     # Bold red
    }
    RESET = '\033[0m'

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        input_func: Callable[[str], str] = input,
        use_colors: bool = True
    ):
        self.stream = stream or sys.stdout
        self.input_func = input_func
        self.use_colors = use_colors and self.stream.isatty()

    # -------------------------------------------------------------------------
    # Message channels
    # -------------------------------------------------------------------------

    def success(self, message: str) -> None:
        self._emit('success', message)

    def info(self, message: str) -> None:
        self._emit('info', message)

    def log(self, message: str) -> None:
        self._emit('log', message)

    def error(self, message: str) -> None:
        self._emit('error', message)

    def blank(self) -> None:
        print('', file=self.stream)

    def print_rows(self, title: str, rows: Sequence[str]) -> None:
        """Print a titled list of rows as a JSON array."""
        self.success(title)
        print(json.dumps(list(rows), indent=2, ensure_ascii=False), file=self.stream)
        self.blank()

    def _emit(self, channel: str, message: str) -> None:
        color, marker = self.STYLES[channel]
        text = f"{marker}{message}"
        if self.use_colors:
            text = f"{color}{text}{self.RESET}"
        print(text, file=self.stream)

    # -------------------------------------------------------------------------
    # Prompts
    # -------------------------------------------------------------------------

    def choose_next_step(self) -> NextStep:
        """
        Ask the user what to do with the results.

        Accepts the number of a choice or its keyword. End of input aborts.
        """
        self.log("Choose an option:")
        for index, (label, _) in enumerate(NEXT_STEP_CHOICES, start=1):
            self.log(f"  {index}) {label}")

        while True:
            try:
                answer = self.input_func("> ").strip().lower()
            except EOFError:
                return NextStep.ABORT

            if answer.isdigit() and 1 <= int(answer) <= len(NEXT_STEP_CHOICES):
                return NEXT_STEP_CHOICES[int(answer) - 1][1]
            for step in NextStep:
                if answer == step.value:
                    return step

            self.error(f"Invalid choice '{answer}', enter 1-{len(NEXT_STEP_CHOICES)}")

    def ask_destination(self, label: str, default: str) -> Path:
        """
        Ask where to save a result set.

        Args:
            label: Description of the result set
            default: Destination used when the answer is empty

        Returns:
            Resolved absolute destination path
        """
        prompt = (
            f"Enter file destination to save {label} "
            f"or press enter to select default ({default}): "
        )
        try:
            answer = self.input_func(prompt).strip()
        except EOFError:
            answer = ''
        return Path(answer or default).resolve()

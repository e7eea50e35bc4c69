"""Shared fixtures for compare-rows tests."""

import io
from pathlib import Path

import pytest

from comparerows.services.console import Console


class ScriptedConsole(Console):
    """Console that answers prompts from a list and captures output."""

    def __init__(self, answers=None):
        self.answers = list(answers or [])
        self.prompts = []
        super().__init__(stream=io.StringIO(), input_func=self._next_answer)

    def _next_answer(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    @property
    def output(self):
        return self.stream.getvalue()


@pytest.fixture
def scripted_console():
    """Factory for consoles with scripted answers."""
    return ScriptedConsole


@pytest.fixture
def write_rows(tmp_path):
    """Write rows joined by newlines to a file under tmp_path."""
    def _write(name, rows, separator="\n"):
        path = Path(tmp_path) / name
        path.write_text(separator.join(rows), encoding="utf-8")
        return path
    return _write

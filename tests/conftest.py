"""Pytest configuration and fixtures."""

from collections.abc import Callable, Iterable

import pytest

from evalsh.config import EvalshConfig
from evalsh.core.evaluator import PythonEvaluator
from evalsh.frontends.cli.repl.state import REPLState

BASE_URL = "http://db.test:5984"


class ScriptedInput:
    """Stands in for input(): returns queued lines and records prompts.

    Raises EOFError once the lines run out, like a closed stdin.
    """

    def __init__(self, lines: Iterable[str]):
        self.lines = list(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        line = self.lines.pop(0)
        if isinstance(line, BaseException) or (
            isinstance(line, type) and issubclass(line, BaseException)
        ):
            raise line
        return line


@pytest.fixture
def config(tmp_path):
    """Config with a throwaway history file and a fake server URL."""
    return EvalshConfig(
        server_url=BASE_URL,
        history_file=str(tmp_path / "history"),
    )


@pytest.fixture
def state():
    return REPLState()


@pytest.fixture
def evaluator(state):
    return PythonEvaluator(state.namespace)


@pytest.fixture
def scripted() -> Callable[..., ScriptedInput]:
    """Factory for ScriptedInput readers."""

    def make(*lines: str) -> ScriptedInput:
        return ScriptedInput(lines)

    return make

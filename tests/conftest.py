from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


class ScriptedConsole:
    """Feed canned answers to a quiz and record what it prints."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = iter(answers)
        self.prompts: list[str] = []
        self.outputs: list[str] = []
        self.clears = 0

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._answers)
        except StopIteration:
            raise EOFError("script exhausted") from None

    def print(self, text: str) -> None:
        self.outputs.append(text)

    def clear(self) -> None:
        self.clears += 1

    def printed(self, text: str) -> bool:
        return any(text in line for line in self.outputs)


@pytest.fixture
def console() -> Callable[..., ScriptedConsole]:
    def factory(*answers: str) -> ScriptedConsole:
        return ScriptedConsole(answers)

    return factory


@pytest.fixture
def lesson_file(tmp_path: Path) -> Callable[..., Path]:
    def write(*lines: str, name: str = "lessons.txt") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return write

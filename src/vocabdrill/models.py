"""Core domain models for lesson files and quiz selection."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, IntEnum

LESSON_NUMBER_MIN = 0
LESSON_NUMBER_MAX = 255


@dataclass(frozen=True)
class LessonEntry:
    """One vocabulary item loaded from a lesson file."""

    lesson_number: int
    word: str
    description: str
    origin_word: str


class ParseError(Enum):
    """Why a numeric field could not be used."""

    NOT_A_NUMBER = "not a number"
    OUT_OF_RANGE = "out of range"


class LessonType(IntEnum):
    """Quiz mode selected on the command line."""

    RANDOM = 0
    SPELLING = 1
    MULTIPLE_CHOICE = 2
    HANGMAN = 3

    @classmethod
    def from_code(cls, code: int) -> LessonType:
        """Map an integer code to a lesson type; unknown codes mean random."""
        try:
            return cls(code)
        except ValueError:
            return cls.RANDOM

    def resolve(self, rng: random.Random) -> LessonType:
        """Return a playable lesson type, drawing one if this is RANDOM."""
        if self is not LessonType.RANDOM:
            return self
        return rng.choice(PLAYABLE_LESSON_TYPES)


PLAYABLE_LESSON_TYPES = (LessonType.SPELLING, LessonType.MULTIPLE_CHOICE, LessonType.HANGMAN)

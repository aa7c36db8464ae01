"""Load lesson entries from `;`-delimited lesson files."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path

from .models import LESSON_NUMBER_MAX, LESSON_NUMBER_MIN, LessonEntry, ParseError

logger = logging.getLogger(__name__)

FIELD_DELIMITER = ";"
MIN_FIELDS = 4
_INTEGER = re.compile(r"[+-]?\d+")


def parse_lesson_number(text: str) -> int | ParseError:
    """Parse a decimal lesson number, reporting failures as a value."""
    stripped = text.strip()
    if not _INTEGER.fullmatch(stripped):
        return ParseError.NOT_A_NUMBER
    value = int(stripped)
    if not LESSON_NUMBER_MIN <= value <= LESSON_NUMBER_MAX:
        return ParseError.OUT_OF_RANGE
    return value


def parse_lessons(lines: Iterable[str], lesson_filter: int | None = None) -> list[LessonEntry]:
    """Build lesson entries from raw lines, keeping file order.

    Lines with too few fields or an unusable lesson number are skipped with a
    warning. Lines for other lessons are dropped silently when a filter is set.
    """
    entries: list[LessonEntry] = []
    for line_no, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip("\r\n")
        fields = line.split(FIELD_DELIMITER)
        if len(fields) < MIN_FIELDS:
            logger.warning("Skipping line %d with invalid format: %s", line_no, line)
            continue

        number = parse_lesson_number(fields[0])
        if isinstance(number, ParseError):
            logger.warning("Skipping line %d, lesson number %r is %s.", line_no, fields[0], number.value)
            continue
        if lesson_filter is not None and number != lesson_filter:
            continue

        entries.append(
            LessonEntry(lesson_number=number, word=fields[1], description=fields[2], origin_word=fields[3])
        )
    return entries


def read_lessons(path: Path | str, lesson_filter: int | None = None) -> list[LessonEntry]:
    """Read a lesson file to completion and parse it."""
    text = Path(path).read_text(encoding="utf-8-sig", errors="surrogateescape")
    entries = parse_lessons(text.splitlines(), lesson_filter)
    logger.debug("Loaded %d lesson entries from %s", len(entries), path)
    return entries


def recap_lines(entries: Iterable[LessonEntry]) -> list[str]:
    """Format the pre-session overview, one line per entry."""
    return [f"{entry.word} ({entry.description})- {entry.origin_word}" for entry in entries]

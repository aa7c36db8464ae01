import logging
from pathlib import Path

import pytest

from vocabdrill.lessons import parse_lesson_number, parse_lessons, read_lessons, recap_lines
from vocabdrill.models import LessonEntry, ParseError


def test_parse_lesson_number_accepts_range() -> None:
    assert parse_lesson_number("0") == 0
    assert parse_lesson_number("255") == 255
    assert parse_lesson_number(" 7 ") == 7
    assert parse_lesson_number("+3") == 3


def test_parse_lesson_number_rejects_out_of_range() -> None:
    assert parse_lesson_number("-1") is ParseError.OUT_OF_RANGE
    assert parse_lesson_number("256") is ParseError.OUT_OF_RANGE
    assert parse_lesson_number("99999999999999999999") is ParseError.OUT_OF_RANGE


def test_parse_lesson_number_rejects_non_numeric() -> None:
    for text in ["", "abc", "1.5", "12abc", "0x10", "--1"]:
        assert parse_lesson_number(text) is ParseError.NOT_A_NUMBER


def test_parse_lessons_maps_fields_without_trimming() -> None:
    entries = parse_lessons(["1;байгаль; nature ;Nature"])
    assert entries == [LessonEntry(lesson_number=1, word="байгаль", description=" nature ", origin_word="Nature")]


def test_parse_lessons_ignores_extra_fields_and_line_endings() -> None:
    entries = parse_lessons(["3;ус;water;water;extra\r\n"])
    assert entries[0].origin_word == "water"


def test_parse_lessons_skips_short_lines_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="vocabdrill.lessons"):
        entries = parse_lessons(["1;ус;water", "", "2;ус;water;water"])
    assert [entry.lesson_number for entry in entries] == [2]
    warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert len(warnings) == 2
    assert "invalid format" in warnings[0].getMessage()


def test_parse_lessons_skips_bad_lesson_numbers(caplog: pytest.LogCaptureFixture) -> None:
    lines = ["notanumber;x;y;z", "300;x;y;z", "-4;x;y;z", "1;байгаль;nature;nature"]
    with caplog.at_level(logging.WARNING, logger="vocabdrill.lessons"):
        entries = parse_lessons(lines)
    assert [entry.word for entry in entries] == ["байгаль"]
    messages = [record.getMessage() for record in caplog.records]
    assert any("'notanumber'" in message and "not a number" in message for message in messages)
    assert sum("out of range" in message for message in messages) == 2


def test_parse_lessons_filter_drops_other_lessons_silently(caplog: pytest.LogCaptureFixture) -> None:
    lines = ["1;a;b;c", "2;d;e;f", "1;g;h;i", "2;j;k;l"]
    with caplog.at_level(logging.WARNING, logger="vocabdrill.lessons"):
        entries = parse_lessons(lines, lesson_filter=2)
    assert [entry.word for entry in entries] == ["d", "j"]
    assert all(entry.lesson_number == 2 for entry in entries)
    assert caplog.records == []


def test_parse_lessons_count_matches_valid_lines() -> None:
    lines = ["1;a;b;c", "x;a;b;c", "2;a;b", "3;a;b;c", "256;a;b;c", "0;;;"]
    assert len(parse_lessons(lines)) == 3


def test_parse_lessons_may_be_empty() -> None:
    assert parse_lessons([]) == []
    assert parse_lessons(["1;a;b;c"], lesson_filter=9) == []


def test_read_lessons_from_file(tmp_path: Path) -> None:
    path = tmp_path / "mn.txt"
    path.write_text("\ufeff1;байгаль;nature;nature\n2;ус;water;water\n", encoding="utf-8")
    entries = read_lessons(path)
    assert [entry.word for entry in entries] == ["байгаль", "ус"]
    assert entries[0].lesson_number == 1


def test_recap_lines() -> None:
    entries = [LessonEntry(2, "ус", "water", "water")]
    assert recap_lines(entries) == ["ус (water)- water"]


def test_read_lessons_keeps_undecodable_bytes(tmp_path: Path) -> None:
    path = tmp_path / "mixed.txt"
    path.write_bytes("2;ус;water;water\n".encode("utf-8") + b"3;\xe9t\xe9;summer;summer\n")
    entries = read_lessons(path)
    assert [entry.lesson_number for entry in entries] == [2, 3]
    assert entries[1].word.encode("utf-8", "surrogateescape") == b"\xe9t\xe9"

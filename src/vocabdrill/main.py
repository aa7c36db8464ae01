"""CLI entrypoint for the vocabulary drill."""

from __future__ import annotations

import argparse
import io
import logging
import os
import random
import sys
from pathlib import Path
from typing import NoReturn

from .lessons import parse_lesson_number, read_lessons, recap_lines
from .models import LessonEntry, LessonType, ParseError
from .quiz import ClearFn, InputFn, PrintFn, run_hangman_quiz, run_multiple_choice_quiz, run_spelling_quiz

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
LOG_FORMAT = "%(levelname)s: %(message)s"


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that fails with exit status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"{self.prog}: error: {message}\n")


def _lesson_number_arg(text: str) -> int:
    """Validate the optional lesson filter argument."""
    number = parse_lesson_number(text)
    if number is ParseError.NOT_A_NUMBER:
        raise argparse.ArgumentTypeError(f"invalid number format: {text!r}")
    if number is ParseError.OUT_OF_RANGE:
        raise argparse.ArgumentTypeError("lesson number must be between 0 and 255")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="vocabdrill", description="Drill vocabulary from a lesson file")
    parser.add_argument("file", type=Path, help="lesson file, one 'number;word;description;origin' per line")
    parser.add_argument(
        "lesson_number",
        nargs="?",
        type=_lesson_number_arg,
        default=None,
        help="only use entries with this lesson number (0-255)",
    )
    parser.add_argument(
        "lesson_type",
        nargs="?",
        type=int,
        default=int(LessonType.RANDOM),
        help="0=random, 1=spelling, 2=multiple choice, 3=hangman; other values mean random",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed the random source for a repeatable session")
    parser.add_argument("--verbose", action="store_true", help="log debug diagnostics")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def clear_screen() -> None:
    """Clear the terminal when attached to one."""
    if sys.stdout.isatty():
        os.system("cls" if os.name == "nt" else "clear")


def run(
    argv: list[str] | None = None,
    input_fn: InputFn = input,
    print_fn: PrintFn = print,
    clear_fn: ClearFn = clear_screen,
    rng: random.Random | None = None,
) -> int:
    """Run the CLI application and return its exit status."""
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    path: Path = args.file
    if not path.exists():
        logger.error("File does not exist: %s", path)
        return EXIT_FAILURE
    if not path.is_file():
        logger.error("Not a file: %s", path)
        return EXIT_FAILURE

    if rng is None:
        rng = random.Random(args.seed)
    lesson_type = LessonType.from_code(args.lesson_type).resolve(rng)
    logger.debug("Selected lesson type: %s", lesson_type.name)

    if args.lesson_number is not None:
        print_fn(f"Preparing Lesson No {args.lesson_number} ...")

    try:
        lessons = read_lessons(path, args.lesson_number)
    except OSError as exc:
        logger.error("Could not read %s: %s", path, exc)
        return EXIT_FAILURE
    if not lessons:
        logger.error("No lessons found or file is empty.")
        return EXIT_FAILURE

    try:
        _recap(lessons, input_fn, print_fn, clear_fn)
        rng.shuffle(lessons)
        _play(lesson_type, lessons, rng, input_fn, print_fn, clear_fn)
    except (EOFError, KeyboardInterrupt):
        print_fn("")
        logger.error("Session interrupted.")
        return EXIT_FAILURE
    return EXIT_OK


def _recap(lessons: list[LessonEntry], input_fn: InputFn, print_fn: PrintFn, clear_fn: ClearFn) -> None:
    """Show every entry once before quizzing starts."""
    print_fn("\nRecap\n")
    for line in recap_lines(lessons):
        print_fn(line)
    print_fn("\nPress Enter to start the lesson...\n")
    input_fn("")
    clear_fn()
    print_fn("\nStarting lesson...\n")


def _play(
    lesson_type: LessonType,
    lessons: list[LessonEntry],
    rng: random.Random,
    input_fn: InputFn,
    print_fn: PrintFn,
    clear_fn: ClearFn,
) -> None:
    """Drive the chosen quiz over the shuffled lessons."""
    if lesson_type is LessonType.SPELLING:
        correct_count = 0
        for entry in lessons:
            if run_spelling_quiz(entry, input_fn, print_fn):
                correct_count += 1
            print_fn("\nPress Enter to continue...\n")
            input_fn("")
            clear_fn()
        print_fn(f"Session complete: {correct_count}/{len(lessons)} correct")
        return

    # Multiple choice and hangman only quiz the first shuffled entry.
    entry = lessons[0]
    if lesson_type is LessonType.MULTIPLE_CHOICE:
        passed = run_multiple_choice_quiz(entry, rng, input_fn, print_fn)
    elif lesson_type is LessonType.HANGMAN:
        passed = run_hangman_quiz(entry, input_fn, print_fn, clear_fn)
    else:
        raise ValueError(f"Unplayable lesson type: {lesson_type!r}")
    print_fn(f"Session complete: {int(passed)}/1 correct")


def main_entry() -> None:
    """Console script entrypoint."""
    # Undecodable lesson bytes arrive as escaped surrogates.
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(errors="backslashreplace")
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()

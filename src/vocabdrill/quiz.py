"""Interactive quiz engines: spelling, multiple choice, and hangman.

Each engine runs one question/answer cycle for a single lesson entry and
returns ``True`` when the learner finds the word. Console access is injected
so sessions can be scripted.
"""

from __future__ import annotations

import random
from collections.abc import Callable

from .distractors import generate_distractors
from .models import LessonEntry
from .segmenter import segment

InputFn = Callable[[str], str]
PrintFn = Callable[[str], None]
ClearFn = Callable[[], None]

QUIT_COMMAND = "quit"
HINT_COMMAND = "hint"
HIDDEN_SLOT = "_"


def _no_clear() -> None:
    """Leave the screen as it is."""


def _print_entry(entry: LessonEntry, print_fn: PrintFn) -> None:
    print_fn(entry.word)
    print_fn(entry.description)
    print_fn(entry.origin_word)


def run_spelling_quiz(entry: LessonEntry, input_fn: InputFn = input, print_fn: PrintFn = print) -> bool:
    """Ask for the spelling of one word until it is typed correctly or abandoned."""
    target = entry.word.strip().casefold()
    print_fn(f"How do you spell {entry.origin_word}?")

    while True:
        answer = input_fn("Your answer: ").strip()
        if not answer:
            continue

        folded = answer.casefold()
        if folded == HINT_COMMAND:
            print_fn(entry.description)
            continue
        if folded == QUIT_COMMAND:
            print_fn(f"The correct spelling is: {entry.word}")
            return False
        if folded == target:
            print_fn(f"Correct! The word is: {entry.word}")
            return True
        print_fn("Incorrect. Try again.")


def build_choices(entry: LessonEntry, rng: random.Random) -> tuple[list[str], int]:
    """Return shuffled choices and the 1-based position of the correct word."""
    choices = [entry.word, *generate_distractors(entry.word, segment(entry.word), rng)]
    rng.shuffle(choices)
    return choices, choices.index(entry.word) + 1


def run_multiple_choice_quiz(
    entry: LessonEntry,
    rng: random.Random,
    input_fn: InputFn = input,
    print_fn: PrintFn = print,
) -> bool:
    """Offer four spellings and accept exactly one numbered guess."""
    choices, correct_choice = build_choices(entry, rng)
    for number, choice in enumerate(choices, start=1):
        print_fn(f"{number}. {choice}")

    while True:
        print_fn(f"\nHow do you spell {entry.origin_word}?")
        raw = input_fn(f"Enter your choice (1-{len(choices)}): ").strip()
        if not raw:
            continue
        if raw.casefold() == QUIT_COMMAND:
            print_fn(f"The word was: {entry.word}")
            return False

        try:
            choice = int(raw)
        except ValueError:
            print_fn("Invalid input! Please enter a number.")
            continue
        if not 1 <= choice <= len(choices):
            print_fn(f"Invalid input! Please enter a number between 1 and {len(choices)}.")
            continue

        if choice == correct_choice:
            print_fn("Correct! You found the word!")
            _print_entry(entry, print_fn)
            return True
        print_fn(f"Wrong! The correct choice was {correct_choice}!")
        print_fn("The word was:")
        _print_entry(entry, print_fn)
        return False


def run_hangman_quiz(
    entry: LessonEntry,
    input_fn: InputFn = input,
    print_fn: PrintFn = print,
    clear_fn: ClearFn = _no_clear,
) -> bool:
    """Reveal the word letter by letter; there is no limit on wrong guesses."""
    target = entry.word.lower()
    target_chars = segment(target)
    revealed = [char == " " for char in target_chars]

    def mask() -> str:
        return "".join(char if shown else HIDDEN_SLOT for char, shown in zip(target_chars, revealed))

    def found() -> bool:
        print_fn("\nYou found the word!")
        _print_entry(entry, print_fn)
        return True

    if all(revealed):
        return found()

    notice = ""
    while True:
        clear_fn()
        if notice:
            print_fn(notice)
            notice = ""
        print_fn("\nGuess the word!")
        print_fn(f"Current: {mask()}")

        guess = input_fn("Enter a letter or a full word: ").strip().lower()
        if not guess:
            continue
        if guess == QUIT_COMMAND:
            print_fn(f"The word was: {entry.word}")
            return False
        if guess == target.strip():
            return found()

        hits: list[int] = []
        if len(segment(guess)) == 1:
            hits = [idx for idx, char in enumerate(target_chars) if char == guess]
        if not hits:
            notice = "Wrong!"
            continue

        for idx in hits:
            revealed[idx] = True
        if all(revealed):
            return found()

"""Generate plausible misspellings for multiple-choice questions."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

logger = logging.getLogger(__name__)

MONGOLIAN_LETTERS: tuple[str, ...] = (
    "а", "б", "в", "г", "д", "е", "ё", "ж", "з", "и", "й", "к",
    "л", "м", "н", "о", "ө", "п", "р", "с", "т", "у", "ү", "ф",
    "х", "ц", "ч", "ш", "щ", "ъ", "ы", "ь", "э", "ю", "я",
)  # fmt: skip

DISTRACTOR_COUNT = 3
MIN_CHANGES = 2
MAX_CHANGES = 4
# Each round drains one shuffled copy of the characters.
MAX_CANDIDATE_ROUNDS = 8


def change_count_bounds(character_count: int) -> tuple[int, int]:
    """Return the inclusive (low, high) range of substitutions for a word."""
    high = min(character_count, MAX_CHANGES)
    return min(MIN_CHANGES, high), high


def _misspell(
    characters: Sequence[str],
    changes: int,
    rng: random.Random,
    alphabet: list[str],
) -> str:
    """Substitute ``changes`` characters of a word with letters from ``alphabet``."""
    current = list(characters)
    touched: set[int] = set()
    candidates: list[str] = []
    rounds = 0

    while changes > 0:
        if not candidates:
            if rounds == MAX_CANDIDATE_ROUNDS:
                logger.debug("Gave up on %d change(s) for %r", changes, "".join(characters))
                break
            rounds += 1
            candidates = list(characters)
            rng.shuffle(candidates)

        candidate = candidates.pop()
        if candidate == " ":
            continue
        # First occurrence of the value, not the sampled position.
        position = next(
            (idx for idx, char in enumerate(current) if char == candidate and idx not in touched),
            None,
        )
        if position is None:
            continue

        rng.shuffle(alphabet)
        replacement = alphabet[0]
        if replacement == candidate:
            continue

        current[position] = replacement
        touched.add(position)
        changes -= 1

    return "".join(current)


def generate_distractors(
    word: str,
    characters: Sequence[str],
    rng: random.Random,
    count: int = DISTRACTOR_COUNT,
    alphabet: Sequence[str] = MONGOLIAN_LETTERS,
) -> list[str]:
    """Return ``count`` wrong spellings of ``word``.

    ``characters`` is the segmented form of ``word``. Each distractor replaces
    between two and four characters (fewer for very short words) and never
    touches spaces. Distractors are not deduplicated against each other.
    """
    if "".join(characters) != word:
        raise ValueError(f"Characters do not spell {word!r}.")
    letters = list(alphabet)
    if not letters:
        raise ValueError("Alphabet must contain at least one letter.")

    low, high = change_count_bounds(len(characters))
    distractors: list[str] = []
    for _ in range(count):
        changes = rng.randint(low, high) if high > 0 else 0
        distractors.append(_misspell(characters, changes, rng, letters))
    return distractors

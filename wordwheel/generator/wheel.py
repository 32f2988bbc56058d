"""Letter wheel derivation."""

import string
from collections import Counter
from typing import Iterable, List, Optional

from ..rng import SeededRandom

ALPHABET = string.ascii_uppercase


def letter_requirements(words: Iterable[str]) -> Counter:
    """
    Per-letter maximum over each word's own letter counts.

    This is what the wheel needs so that any single word can be spelled,
    not every word at once.
    """
    required: Counter = Counter()
    for word in words:
        for char, count in Counter(word.upper()).items():
            if count > required[char]:
                required[char] = count
    return required


def derive_wheel_letters(
    words: Iterable[str],
    rng: SeededRandom,
    min_letters: int = 5,
    max_letters: int = 6,
) -> Optional[List[str]]:
    """
    Smallest shuffled wheel from which every word is formable.

    Pads with letters not already present when short of `min_letters`.
    Returns None when the words need more than `max_letters`.
    """
    wheel = list(letter_requirements(words).elements())

    if len(wheel) > max_letters:
        return None

    while len(wheel) < min_letters:
        letter = rng.choice(ALPHABET)
        if letter not in wheel:
            wheel.append(letter)

    rng.shuffle(wheel)
    return wheel

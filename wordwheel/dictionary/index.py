"""
Dictionary index for puzzle generation and word validation.

Holds three read-only structures built once at construction:
- a validation set for O(1) existence checks (bonus words included)
- curated words bucketed by length, used to supply placement candidates
- the base-word table used to seed each puzzle
"""

import logging
import random
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..config import DictionaryConfig
from ..rng import SeededRandom
from .fallback import DEFAULT_BASE_WORD, FALLBACK_BASE_WORDS, FALLBACK_WORDS
from .loaders import (
    BASE_WORDS_FILE,
    CURATED_FILE,
    WORDS_FILE,
    load_first,
    strategies_for,
)

logger = logging.getLogger(__name__)

MIN_VALIDATION_LENGTH = 3
MIN_CURATED_LENGTH = 3
MAX_CURATED_LENGTH = 6


def can_form_word(word: str, letters: Iterable[str]) -> bool:
    """
    Check if `word` can be spelled from `letters`.

    Each letter of the word consumes one matching instance from a copy of the
    available letters, so repeated letters need repeated instances.
    """
    available = [letter.upper() for letter in letters]
    for char in word.upper():
        try:
            available.remove(char)
        except ValueError:
            return False
    return True


class DictionaryIndex:
    """Word existence checks and candidate supply for the level generator."""

    def __init__(
        self,
        validation_words: Iterable[str],
        curated_words: Iterable[str],
        base_words: Iterable[str],
        base_word_length: int = 6,
    ):
        self.base_word_length = base_word_length

        buckets: Dict[int, List[str]] = {}
        for word in curated_words:
            buckets.setdefault(len(word), []).append(word)
        self._words_by_length: Dict[int, Tuple[str, ...]] = {
            length: tuple(words) for length, words in buckets.items()
        }

        self._validation: frozenset = frozenset(validation_words)

        self._base_words: Tuple[str, ...] = tuple(base_words)

    @classmethod
    def create(
        cls,
        config: Optional[DictionaryConfig] = None,
        base_word_length: int = 6,
    ) -> "DictionaryIndex":
        """
        Load all word lists, falling back to embedded tables.

        Never raises for missing or malformed sources.
        """
        config = config or DictionaryConfig()

        validation = load_first(
            strategies_for(WORDS_FILE, config.words_path, FALLBACK_WORDS),
            min_length=MIN_VALIDATION_LENGTH,
        )
        curated = load_first(
            strategies_for(CURATED_FILE, config.curated_path, FALLBACK_WORDS),
            min_length=MIN_CURATED_LENGTH,
            max_length=MAX_CURATED_LENGTH,
        )
        base_words = load_first(
            strategies_for(BASE_WORDS_FILE, config.base_words_path, FALLBACK_BASE_WORDS),
        )

        index = cls(validation, curated, base_words, base_word_length=base_word_length)
        logger.debug("Dictionary loaded: %s", index.stats())
        return index

    def is_valid_word(self, word: str) -> bool:
        """Case-insensitive membership in the validation list."""
        return word.strip().upper() in self._validation

    def words_of_length(self, length: int) -> Sequence[str]:
        return self._words_by_length.get(length, ())

    def can_form_word(self, word: str, letters: Iterable[str]) -> bool:
        return can_form_word(word, letters)

    def find_words(
        self,
        letters: Sequence[str],
        min_length: int = 3,
        max_length: Optional[int] = None,
    ) -> List[str]:
        """All curated words formable from `letters`, shortest first."""
        upper = len(letters) if max_length is None else max_length
        found: List[str] = []
        for length in range(min_length, upper + 1):
            found.extend(w for w in self.words_of_length(length) if can_form_word(w, letters))
        return found

    def find_words_matching(self, pattern: str, letters: Sequence[str]) -> List[str]:
        """Curated words fitting `pattern` ('_' is a wildcard) and formable from `letters`."""
        pattern = pattern.upper()
        return [
            word for word in self.words_of_length(len(pattern))
            if _matches_pattern(word, pattern) and can_form_word(word, letters)
        ]

    def random_word(self, length: int, seed: Optional[int] = None) -> Optional[str]:
        words = self.words_of_length(length)
        if not words:
            return None
        if seed is None:
            return random.choice(words)
        return SeededRandom(seed).choice(words)

    def random_base_word(self, excluding: Iterable[str] = (), seed: int = 0) -> str:
        """
        Deterministically pick a base word not in `excluding`.

        Falls back to any base word of the right length once all are excluded,
        then to a constant.
        """
        excluded = set(excluding)
        sized = [w for w in self._base_words if len(w) == self.base_word_length]
        candidates = [w for w in sized if w not in excluded] or sized
        if not candidates:
            return DEFAULT_BASE_WORD
        return SeededRandom(seed).choice(candidates)

    def base_word_for_level(self, level_number: int) -> str:
        return self.random_base_word(seed=level_number)

    def stats(self) -> Dict[str, int]:
        stats = {
            "validation_words": len(self._validation),
            "base_words": len(self._base_words),
        }
        for length in sorted(self._words_by_length):
            stats[f"curated_{length}"] = len(self._words_by_length[length])
        return stats


def _matches_pattern(word: str, pattern: str) -> bool:
    if len(word) != len(pattern):
        return False
    return all(p == "_" or p == c for p, c in zip(pattern, word))

"""Retrying level generator: base word, layout, wheel, then validation."""

import logging
from typing import Optional, Set

from ..config import GeneratorConfig
from ..dictionary import DictionaryIndex
from ..models import Puzzle
from ..rng import SeededRandom, derive_seed
from ..verifiers import check_puzzle, normalize_placements
from .placement import LayoutAttempt
from .wheel import derive_wheel_letters

logger = logging.getLogger(__name__)


class LevelGenerator:
    """
    Builds crossword levels around a base word.

    Each attempt picks an untried base word, lays out intersecting words,
    derives the letter wheel and runs the full validator. The first attempt
    that passes is returned; when every attempt fails the result is None.

    Attributes:
        dictionary: Word lists for candidates and validation
        config: Generation bounds and limits
        seed: Optional seed mixed into every attempt
    """

    def __init__(
        self,
        dictionary: DictionaryIndex,
        config: Optional[GeneratorConfig] = None,
        seed: Optional[int] = None,
    ):
        self.dictionary = dictionary
        self.config = config or GeneratorConfig()
        self.seed = seed if seed is not None else self.config.seed

    def target_word_count(self, level_number: int) -> int:
        """Words to aim for at this level, cycling through the allowed range."""
        low, high = self.config.min_words, self.config.max_words
        return min(low + level_number % (high - low + 1), high)

    def generate_puzzle(self, level_number: int, seed: Optional[int] = None) -> Optional[Puzzle]:
        """
        Generate a validated puzzle for a level.

        Args:
            level_number: The level number; also varies the target word count
            seed: Optional seed overriding the generator's own

        Returns:
            A puzzle that passed validation, or None if all attempts failed
        """
        seed = seed if seed is not None else self.seed
        tried: Set[str] = set()

        for attempt in range(1, self.config.max_attempts + 1):
            attempt_seed = derive_seed(level_number, attempt, seed)
            base_word = self.dictionary.random_base_word(excluding=tried, seed=attempt_seed)
            if len(base_word) != self.config.base_word_length:
                continue
            tried.add(base_word)

            puzzle = self.try_base_word(base_word, level_number, SeededRandom(attempt_seed))
            if puzzle is not None:
                logger.debug(
                    "Level %d: accepted '%s' on attempt %d", level_number, base_word, attempt
                )
                return puzzle

        logger.info(
            "Level %d: no valid puzzle after %d attempts", level_number, self.config.max_attempts
        )
        return None

    def try_base_word(
        self,
        base_word: str,
        level_number: int,
        rng: SeededRandom,
    ) -> Optional[Puzzle]:
        """Build and validate one puzzle around `base_word`, or return None."""
        config = self.config
        if len(base_word) != config.base_word_length:
            return None

        layout = LayoutAttempt(base_word, self.dictionary, rng, config)
        placements = layout.build(self.target_word_count(level_number))
        placements, grid_size = normalize_placements(placements)

        wheel = derive_wheel_letters(
            [p.word for p in placements],
            rng,
            min_letters=config.min_wheel,
            max_letters=config.max_wheel,
        )
        if wheel is None:
            logger.debug("'%s': wheel needs more than %d letters", base_word, config.max_wheel)
            return None

        if not config.min_words <= len(placements) <= config.max_words:
            logger.debug("'%s': placed %d words", base_word, len(placements))
            return None

        puzzle = Puzzle(
            level_number=level_number,
            base_word=base_word,
            placements=placements,
            wheel_letters=wheel,
            grid_size=grid_size,
        )

        result = check_puzzle(puzzle, self.dictionary, config)
        if not result.valid:
            logger.debug("'%s': rejected by validator: %s", base_word, result.errors[0].message)
            return None

        return puzzle

    def validate_puzzle(self, puzzle: Puzzle) -> bool:
        return check_puzzle(puzzle, self.dictionary, self.config).valid

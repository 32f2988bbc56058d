"""Crossword-style letter-wheel puzzle generation and validation."""

from typing import Optional

from .config import DictionaryConfig, GeneratorConfig, WordwheelConfig, load_config
from .dictionary import DictionaryIndex, can_form_word
from .generator import LevelGenerator
from .models import GridPosition, GridSize, Placement, Puzzle
from .rng import SeededRandom
from .verifiers import check_puzzle, validate_puzzle


def generate_puzzle(
    level_number: int,
    seed: Optional[int] = None,
    dictionary: Optional[DictionaryIndex] = None,
    config: Optional[GeneratorConfig] = None,
) -> Optional[Puzzle]:
    """Generate a puzzle, loading the packaged dictionary if none is given."""
    config = config or GeneratorConfig()
    if dictionary is None:
        dictionary = DictionaryIndex.create(base_word_length=config.base_word_length)
    return LevelGenerator(dictionary, config).generate_puzzle(level_number, seed=seed)


__all__ = [
    "generate_puzzle",
    "validate_puzzle",
    "check_puzzle",
    "can_form_word",
    "DictionaryIndex",
    "LevelGenerator",
    "SeededRandom",
    "GridPosition",
    "GridSize",
    "Placement",
    "Puzzle",
    "DictionaryConfig",
    "GeneratorConfig",
    "WordwheelConfig",
    "load_config",
]

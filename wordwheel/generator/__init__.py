"""Puzzle generation: layout, wheel derivation and the retrying level generator."""

from .level_generator import LevelGenerator
from .placement import LayoutAttempt, can_place_word, find_intersecting_words
from .wheel import derive_wheel_letters, letter_requirements

__all__ = [
    "LevelGenerator",
    "LayoutAttempt",
    "can_place_word",
    "find_intersecting_words",
    "derive_wheel_letters",
    "letter_requirements",
]

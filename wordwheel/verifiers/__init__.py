"""Puzzle verification for wordwheel."""

from .verify import check_puzzle, validate_puzzle
from .models import ValidationError, ValidationResult
from .grid import (
    build_grid,
    place_on_grid,
    grid_bounds,
    normalize_placements,
    render_grid,
    extract_all_words_from_grid,
)

__all__ = [
    # Main verification
    "check_puzzle",
    "validate_puzzle",
    # Models
    "ValidationError",
    "ValidationResult",
    # Grid utilities
    "build_grid",
    "place_on_grid",
    "grid_bounds",
    "normalize_placements",
    "render_grid",
    "extract_all_words_from_grid",
]

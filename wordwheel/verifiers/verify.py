"""
Puzzle verification: an independent re-check that a puzzle is consistent and solvable.

Checks run in order and stop at the first failure:
1. Base word length
2. Grid dimensions, measured from the placements, within the per-axis maximum
   and matching the size the puzzle declares
3. Wheel letter count within bounds
4. Word count within bounds
5. Word lengths within bounds and every word in the validation dictionary
6. Placements rebuilt into a fresh grid agree on every shared cell
7. The wheel covers every run of letters visible along a grid row or column
8. Every word is formable from the wheel on its own
"""

from collections import Counter
from typing import Dict, List, Optional

from ..config import GeneratorConfig
from ..dictionary import DictionaryIndex, can_form_word
from ..models import Puzzle
from .grid import build_grid, extract_all_words_from_grid, grid_bounds, render_grid
from .models import ValidationError, ValidationResult


def check_puzzle(
    puzzle: Puzzle,
    dictionary: DictionaryIndex,
    config: Optional[GeneratorConfig] = None,
) -> ValidationResult:
    """
    Validate a puzzle and report the first failed check.

    Returns a ValidationResult with:
    - valid: True if every check passed
    - errors: the failing check, if any
    - words: the placed words
    - grid: the rebuilt grid rendered as text
    - letters_used: letters on the grid, each cell counted once
    """
    config = config or GeneratorConfig()
    grid, conflicts = build_grid(puzzle.placements)
    wheel = [letter.upper() for letter in puzzle.wheel_letters]

    error = _first_failure(puzzle, wheel, grid, conflicts, dictionary, config)

    return ValidationResult(
        valid=error is None,
        errors=[error] if error else [],
        words=puzzle.words,
        grid=render_grid(grid) or None,
        letters_used=sorted(grid.values()),
    )


def validate_puzzle(
    puzzle: Puzzle,
    dictionary: DictionaryIndex,
    config: Optional[GeneratorConfig] = None,
) -> bool:
    """True if the puzzle passes every check."""
    return check_puzzle(puzzle, dictionary, config).valid


def _first_failure(
    puzzle: Puzzle,
    wheel: List[str],
    grid: Dict,
    conflicts: List[ValidationError],
    dictionary: DictionaryIndex,
    config: GeneratorConfig,
) -> Optional[ValidationError]:
    if len(puzzle.base_word) != config.base_word_length:
        return ValidationError(
            code="BASE_WORD_LENGTH",
            message=f"Base word '{puzzle.base_word}' must be {config.base_word_length} letters",
            word=puzzle.base_word,
        )

    min_row, min_col, max_row, max_col = grid_bounds(puzzle.placements)
    rows, cols = max_row - min_row + 1, max_col - min_col + 1
    if rows > config.max_grid_dimension or cols > config.max_grid_dimension:
        return ValidationError(
            code="GRID_TOO_LARGE",
            message=(
                f"Grid {rows}x{cols} exceeds {config.max_grid_dimension} "
                f"in at least one dimension"
            ),
        )

    declared = puzzle.grid_size
    if (declared.rows, declared.cols) != (rows, cols):
        return ValidationError(
            code="GRID_SIZE_MISMATCH",
            message=f"Declared grid {declared.rows}x{declared.cols} but placements span {rows}x{cols}",
        )

    if not config.min_wheel <= len(wheel) <= config.max_wheel:
        return ValidationError(
            code="WHEEL_SIZE",
            message=(
                f"Wheel has {len(wheel)} letters, expected "
                f"{config.min_wheel}-{config.max_wheel}"
            ),
        )

    count = len(puzzle.placements)
    if not config.min_words <= count <= config.max_words:
        return ValidationError(
            code="WORD_COUNT",
            message=f"Puzzle has {count} words, expected {config.min_words}-{config.max_words}",
        )

    for placement in puzzle.placements:
        word = placement.word
        if not config.min_word_length <= len(word) <= config.max_word_length:
            return ValidationError(
                code="WORD_LENGTH",
                message=(
                    f"'{word}' has {len(word)} letters, expected "
                    f"{config.min_word_length}-{config.max_word_length}"
                ),
                word=word,
            )
        if not dictionary.is_valid_word(word):
            return ValidationError(
                code="INVALID_WORD",
                message=f"'{word}' is not a valid dictionary word",
                word=word,
            )

    if conflicts:
        return conflicts[0]

    available = Counter(wheel)
    for run in sorted(extract_all_words_from_grid(grid)):
        for char, needed in Counter(run).items():
            if available[char] < needed:
                return ValidationError(
                    code="WHEEL_COVERAGE",
                    message=(
                        f"Grid run '{run}' needs {needed} '{char}' but the wheel "
                        f"has {available[char]}"
                    ),
                    word=run,
                )

    for placement in puzzle.placements:
        if not can_form_word(placement.word, wheel):
            return ValidationError(
                code="UNFORMABLE_WORD",
                message=f"'{placement.word}' cannot be formed from wheel letters {''.join(wheel)}",
                word=placement.word,
            )

    return None

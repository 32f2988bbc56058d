"""Grid building and rendering utilities."""

from typing import List, Sequence, Set, Tuple

from ..models import Grid, GridPosition, GridSize, Placement
from .models import ValidationError


def build_grid(placements: Sequence[Placement]) -> Tuple[Grid, List[ValidationError]]:
    """Build the grid from scratch and check for conflicts."""
    grid: Grid = {}
    errors: List[ValidationError] = []

    for placement in placements:
        for i, letter in enumerate(placement.word):
            cell = placement.position(i)

            if cell in grid and grid[cell] != letter:
                errors.append(ValidationError(
                    code="GRID_CONFLICT",
                    message=(
                        f"Cell conflict at {tuple(cell)}: existing '{grid[cell]}' "
                        f"vs new '{letter}' from '{placement.word}'"
                    ),
                    word=placement.word,
                ))
                continue
            grid[cell] = letter

    return grid, errors


def place_on_grid(grid: Grid, placement: Placement) -> None:
    """Write a placement's letters into an existing grid."""
    for i, letter in enumerate(placement.word):
        grid[placement.position(i)] = letter


def grid_bounds(placements: Sequence[Placement]) -> Tuple[int, int, int, int]:
    """Return (min_row, min_col, max_row, max_col) over all occupied cells."""
    cells = [cell for p in placements for cell in p.positions()]
    if not cells:
        return 0, 0, -1, -1
    return (
        min(c.row for c in cells),
        min(c.col for c in cells),
        max(c.row for c in cells),
        max(c.col for c in cells),
    )


def normalize_placements(placements: Sequence[Placement]) -> Tuple[List[Placement], GridSize]:
    """Shift placements so the top-left occupied cell is (0, 0)."""
    min_row, min_col, max_row, max_col = grid_bounds(placements)
    normalized = [p.shifted(-min_row, -min_col) for p in placements]
    return normalized, GridSize(rows=max_row - min_row + 1, cols=max_col - min_col + 1)


def render_grid(grid: Grid) -> str:
    """Render the grid to a string."""
    if not grid:
        return ""

    min_row = min(pos.row for pos in grid)
    max_row = max(pos.row for pos in grid)
    min_col = min(pos.col for pos in grid)
    max_col = max(pos.col for pos in grid)

    lines = [
        ''.join(grid.get(GridPosition(row, col), '.') for col in range(min_col, max_col + 1))
        for row in range(min_row, max_row + 1)
    ]

    return '\n'.join(lines)


def extract_all_words_from_grid(grid: Grid) -> Set[str]:
    """Extract every horizontal and vertical run of 2+ letters from the grid."""
    if not grid:
        return set()

    words: Set[str] = set()

    min_row = min(pos.row for pos in grid)
    max_row = max(pos.row for pos in grid)
    min_col = min(pos.col for pos in grid)
    max_col = max(pos.col for pos in grid)

    # Horizontal runs
    for row in range(min_row, max_row + 1):
        word = ""
        for col in range(min_col, max_col + 2):  # +2 to flush last word
            cell = GridPosition(row, col)
            if cell in grid:
                word += grid[cell]
            else:
                if len(word) >= 2:
                    words.add(word)
                word = ""

    # Vertical runs
    for col in range(min_col, max_col + 1):
        word = ""
        for row in range(min_row, max_row + 2):  # +2 to flush last word
            cell = GridPosition(row, col)
            if cell in grid:
                word += grid[cell]
            else:
                if len(word) >= 2:
                    words.add(word)
                word = ""

    return words

"""
Crossword layout for a single generation attempt.

The base word goes down first, horizontally at the anchor row. Vertical words
are then hung off each base letter, and horizontal words off the letters of
those verticals, until the target word count is reached. Nothing is ever
undone: an attempt either produces a usable layout or is thrown away whole.
"""

from typing import Dict, List, Sequence

from ..config import GeneratorConfig
from ..dictionary import DictionaryIndex, can_form_word
from ..models import Direction, Grid, GridPosition, Placement
from ..rng import SeededRandom
from ..verifiers.grid import place_on_grid


def can_place_word(word: str, row: int, col: int, direction: Direction, grid: Grid) -> bool:
    """
    Check that a word can go at (row, col) without clashing or touching other words.

    - The cells just before and after the word on its own axis must be empty,
      so it cannot run into a neighbour and read as a longer word.
    - Occupied cells along the word must already hold the same letter.
    - New cells must have both cross-axis neighbours empty; words only touch
      where they intersect.
    - No two consecutive cells may already be occupied, which would mean
      running along an existing word on the same axis.
    """
    if direction == "horizontal":
        before = GridPosition(row, col - 1)
        after = GridPosition(row, col + len(word))
    else:
        before = GridPosition(row - 1, col)
        after = GridPosition(row + len(word), col)
    if before in grid or after in grid:
        return False

    previous_occupied = False
    for i, char in enumerate(word):
        if direction == "horizontal":
            pos = GridPosition(row, col + i)
            flanks = (GridPosition(row - 1, col + i), GridPosition(row + 1, col + i))
        else:
            pos = GridPosition(row + i, col)
            flanks = (GridPosition(row + i, col - 1), GridPosition(row + i, col + 1))

        existing = grid.get(pos)
        if existing is not None:
            if existing != char or previous_occupied:
                return False
            previous_occupied = True
            continue
        previous_occupied = False

        if any(flank in grid for flank in flanks):
            return False

    return True


def find_intersecting_words(
    dictionary: DictionaryIndex,
    char: str,
    length: int,
    letters: Sequence[str],
    excluding: Sequence[str],
    rng: SeededRandom,
    config: GeneratorConfig,
) -> List[str]:
    """Curated words of `length` containing `char` and formable from `letters`, in seeded order."""
    if not config.min_word_length <= length <= config.max_word_length:
        return []

    excluded = set(excluding)
    candidates = [
        word for word in dictionary.words_of_length(length)
        if char in word and word not in excluded and can_form_word(word, letters)
    ]
    rng.shuffle(candidates)
    return candidates


class LayoutAttempt:
    """Grid, placements and length tally for one base word."""

    def __init__(
        self,
        base_word: str,
        dictionary: DictionaryIndex,
        rng: SeededRandom,
        config: GeneratorConfig,
    ):
        self.base_word = base_word
        self.letters = list(base_word)
        self.dictionary = dictionary
        self.rng = rng
        self.config = config

        self.grid: Grid = {}
        self.placements: List[Placement] = []
        self.length_counts: Dict[int, int] = {n: 0 for n in config.word_lengths}

        self.place(Placement(
            word=base_word,
            direction="horizontal",
            start_row=config.anchor_row,
            start_col=0,
        ))

    @property
    def words(self) -> List[str]:
        return [p.word for p in self.placements]

    def place(self, placement: Placement) -> None:
        self.placements.append(placement)
        place_on_grid(self.grid, placement)
        self.length_counts[placement.length] = self.length_counts.get(placement.length, 0) + 1

    def prioritized_lengths(self) -> List[int]:
        # sorted() is stable, so ties keep ascending length order
        return sorted(self.config.word_lengths, key=lambda n: self.length_counts.get(n, 0))

    def place_through(self, cell: GridPosition, direction: Direction) -> bool:
        """Place one new word in `direction` crossing `cell`. Returns True on success."""
        char = self.grid[cell]

        for length in self.prioritized_lengths():
            candidates = find_intersecting_words(
                self.dictionary, char, length, self.letters, self.words, self.rng, self.config
            )
            for word in candidates:
                offset = word.index(char)
                if direction == "vertical":
                    row, col = cell.row - offset, cell.col
                else:
                    row, col = cell.row, cell.col - offset

                if can_place_word(word, row, col, direction, self.grid):
                    self.place(Placement(word=word, direction=direction, start_row=row, start_col=col))
                    return True

        return False

    def first_pass(self, target: int) -> None:
        """Hang a vertical word off each base letter."""
        for i in range(len(self.base_word)):
            if len(self.placements) >= target:
                break
            self.place_through(GridPosition(self.config.anchor_row, i), "vertical")

    def second_pass(self, target: int) -> None:
        """Sweep the vertical words, crossing their letters with horizontal words."""
        sweeps = 0
        while len(self.placements) < target and sweeps < self.config.max_sweeps:
            sweeps += 1
            verticals = [p for p in self.placements if p.direction == "vertical"]
            for vertical in verticals:
                for cell in vertical.positions():
                    if len(self.placements) >= target:
                        return
                    if self._crossed(cell, "horizontal"):
                        continue
                    self.place_through(cell, "horizontal")

    def _crossed(self, cell: GridPosition, direction: Direction) -> bool:
        return any(p.direction == direction and p.contains(cell) for p in self.placements)

    def build(self, target: int) -> List[Placement]:
        self.first_pass(target)
        self.second_pass(target)
        return list(self.placements)

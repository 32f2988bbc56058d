"""
Pydantic models for puzzles and their grid placements.

A Puzzle is produced once by the level generator and never mutated afterwards.
Placements only describe where a word sits; the occupied cells are derived on
demand from the start coordinate and direction.
"""

from typing import Dict, List, Literal, NamedTuple, Optional
from pydantic import BaseModel, ConfigDict, Field


Direction = Literal["horizontal", "vertical"]


class GridPosition(NamedTuple):
    """A (row, col) cell on the puzzle grid."""
    row: int
    col: int


Grid = Dict[GridPosition, str]


class Placement(BaseModel):
    """A word positioned on the grid."""
    model_config = ConfigDict(frozen=True)

    word: str = Field(..., min_length=1, pattern=r'^[A-Z]+$')
    direction: Direction
    start_row: int
    start_col: int

    @property
    def length(self) -> int:
        return len(self.word)

    def position(self, index: int) -> GridPosition:
        """Get the grid position of the letter at `index`."""
        if self.direction == "horizontal":
            return GridPosition(self.start_row, self.start_col + index)
        return GridPosition(self.start_row + index, self.start_col)

    def positions(self) -> List[GridPosition]:
        return [self.position(i) for i in range(len(self.word))]

    def contains(self, position: GridPosition) -> bool:
        return self.index_of(position) is not None

    def index_of(self, position: GridPosition) -> Optional[int]:
        """Get the letter index at a grid position, or None if not covered."""
        row, col = position
        if self.direction == "horizontal":
            offset = col - self.start_col
            on_line = row == self.start_row
        else:
            offset = row - self.start_row
            on_line = col == self.start_col
        if on_line and 0 <= offset < len(self.word):
            return offset
        return None

    def shifted(self, row_offset: int, col_offset: int) -> "Placement":
        """Return a copy moved by the given offsets."""
        return Placement(
            word=self.word,
            direction=self.direction,
            start_row=self.start_row + row_offset,
            start_col=self.start_col + col_offset,
        )


class GridSize(BaseModel):
    """Dimensions of a normalized grid."""
    model_config = ConfigDict(frozen=True)

    rows: int = Field(..., ge=0)
    cols: int = Field(..., ge=0)


class Puzzle(BaseModel):
    """A generated level: base word, placements and the letter wheel."""
    model_config = ConfigDict(frozen=True)

    level_number: int
    base_word: str
    placements: List[Placement] = Field(default_factory=list)
    wheel_letters: List[str] = Field(default_factory=list)
    grid_size: GridSize

    @property
    def words(self) -> List[str]:
        return [p.word for p in self.placements]

    @property
    def wheel_string(self) -> str:
        """Wheel letters joined into a single string."""
        return "".join(self.wheel_letters)

"""Letter grid representation and generation helpers."""

from __future__ import annotations

import random
from typing import Iterator, List, Optional, Sequence, Tuple

from ..core.constants import ALPHABET, EMPTY_CELL, KING_STEPS, Bounds
from ..core.models import Coordinate
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class LetterGrid:
    """Square board of single letters indexed by ``(x, y)``.

    Rows are stored top to bottom, so ``rows[y][x]`` is the letter at column
    ``x`` of row ``y``. Empty cells hold :data:`EMPTY_CELL`.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        self.size = size
        self.bounds = Bounds(size=size)
        self.rows: List[List[str]] = [[EMPTY_CELL for _ in range(size)] for _ in range(size)]

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def letter(self, x: int, y: int) -> str:
        return self.rows[y][x]

    def set_letter(self, x: int, y: int, letter: str) -> None:
        if not self.bounds.contains(x, y):
            raise IndexError(f"Cell outside board: {(x, y)}")
        self.rows[y][x] = letter

    def is_empty(self, x: int, y: int) -> bool:
        return self.rows[y][x] == EMPTY_CELL

    def coordinates(self) -> Iterator[Coordinate]:
        for y in range(self.size):
            for x in range(self.size):
                yield Coordinate(x, y)

    def neighbors(self, x: int, y: int) -> List[Coordinate]:
        """In-bounds king-move neighbours of ``(x, y)``."""

        return [
            Coordinate(x + dx, y + dy)
            for dx, dy in KING_STEPS
            if self.bounds.contains(x + dx, y + dy)
        ]

    def empty_count(self) -> int:
        return sum(1 for row in self.rows for letter in row if letter == EMPTY_CELL)

    def is_filled(self) -> bool:
        return self.empty_count() == 0

    def read_path(self, path: Sequence[Tuple[int, int]]) -> str:
        return "".join(self.letter(x, y) for x, y in path)

    def to_jsonable(self) -> List[str]:
        return ["".join(letter or "." for letter in row) for row in self.rows]


def create_empty_grid(size: int) -> LetterGrid:
    """Return a ``size`` x ``size`` grid with every cell empty."""

    return LetterGrid(size)


def fill_remaining(
    grid: LetterGrid,
    alphabet: str = ALPHABET,
    rng: Optional[random.Random] = None,
) -> None:
    """Assign a uniformly random letter to every still-empty cell."""

    rng = rng or random.Random()
    filled = 0
    for x, y in grid.coordinates():
        if grid.is_empty(x, y):
            grid.set_letter(x, y, rng.choice(alphabet))
            filled += 1
    LOGGER.debug("Filled %s empty cells with random letters", filled)

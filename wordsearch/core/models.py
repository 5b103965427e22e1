"""Data models shared by the engine and the game layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, NamedTuple, Sequence, Tuple

from .constants import PALETTE


class Coordinate(NamedTuple):
    """Board position; ``x`` is the column and ``y`` the row."""

    x: int
    y: int


Path = Tuple[Coordinate, ...]


def as_path(cells: Sequence[Tuple[int, int]]) -> Path:
    return tuple(Coordinate(int(x), int(y)) for x, y in cells)


def is_adjacent(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    """King-move adjacency; a cell counts as adjacent to itself."""

    return abs(a[0] - b[0]) <= 1 and abs(a[1] - b[1]) <= 1


def paths_equal(first: Sequence[Tuple[int, int]], second: Sequence[Tuple[int, int]]) -> bool:
    """Ordered, direction-sensitive comparison of two coordinate sequences."""

    if len(first) != len(second):
        return False
    for (ax, ay), (bx, by) in zip(first, second):
        if ax != bx or ay != by:
            return False
    return True


@dataclass(frozen=True)
class PlacedWord:
    """A word written onto the grid along a contiguous path."""

    word: str
    path: Path
    color_index: int = 0

    @property
    def color(self) -> str:
        return PALETTE[self.color_index % len(PALETTE)]

    def to_jsonable(self) -> dict:
        return {
            "word": self.word,
            "path": [list(cell) for cell in self.path],
            "color_index": self.color_index,
            "color": self.color,
        }


@dataclass(frozen=True)
class WordStatus:
    """Entry of the word list shown next to the board."""

    word: str
    color: str
    found: bool


def words_of(placed_words: Sequence[PlacedWord]) -> List[str]:
    return [placed.word for placed in placed_words]

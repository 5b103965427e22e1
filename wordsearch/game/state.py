"""Mutable play state for a single puzzle."""

from __future__ import annotations

from typing import List, Optional, Sequence, Set

from ..core.models import Coordinate, PlacedWord, WordStatus
from ..engine.grid import LetterGrid


class PuzzleState:
    """Grid, placed words, found words and the in-progress selection.

    Grid and placed words are read-only once a puzzle is loaded; the found
    set, the selection and the status message change during play.
    """

    def __init__(
        self,
        board_size: int = 0,
        placed_words: Optional[Sequence[PlacedWord]] = None,
        grid: Optional[LetterGrid] = None,
    ) -> None:
        self.board_size = 0
        self.grid: Optional[LetterGrid] = None
        self.placed_words: List[PlacedWord] = []
        self.found_words: Set[str] = set()
        self.selection: List[Coordinate] = []
        self.message = ""
        if grid is not None:
            self.reset(board_size, placed_words or [], grid)

    @classmethod
    def from_result(cls, result) -> "PuzzleState":
        """Build a state from a :class:`~wordsearch.engine.generator.PuzzleResult`."""

        return cls(result.board_size, result.placed_words, result.grid)

    def reset(self, board_size: int, placed_words: Sequence[PlacedWord], grid: LetterGrid) -> None:
        self.board_size = board_size
        self.grid = grid
        self.placed_words = list(placed_words)
        self.found_words = set()
        self.selection = []
        self.message = ""

    def clear_selection(self) -> None:
        self.selection = []

    def mark_found(self, word: str) -> None:
        self.found_words.add(word)

    def is_complete(self) -> bool:
        return len(self.found_words) == len(self.placed_words)

    # ------------------------------------------------------------------
    # Render-side views
    # ------------------------------------------------------------------
    def found_placed_words(self) -> List[PlacedWord]:
        return [placed for placed in self.placed_words if placed.word in self.found_words]

    def word_statuses(self) -> List[WordStatus]:
        return [
            WordStatus(word=placed.word, color=placed.color, found=placed.word in self.found_words)
            for placed in self.placed_words
        ]

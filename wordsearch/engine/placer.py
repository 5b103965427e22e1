"""Randomized contiguous-path word placement."""

from __future__ import annotations

import random
from typing import List, Optional, Sequence

from ..core.constants import DEFAULT_MAX_ATTEMPTS, PALETTE
from ..core.models import Coordinate, Path, PlacedWord, as_path
from ..utils.logger import get_logger
from .grid import LetterGrid


LOGGER = get_logger(__name__)


class WordPlacer:
    """Places words along random king-move paths of empty cells.

    Each word gets up to ``max_attempts_per_word`` independent attempts. An
    attempt picks a random start cell and then greedily extends the path
    with a random empty, unvisited neighbour until the path is as long as
    the word or no neighbour is left. There is no backtracking: a short
    path is discarded and the next attempt starts from scratch. Words that
    exhaust their attempts are dropped from the puzzle.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        max_attempts_per_word: int = DEFAULT_MAX_ATTEMPTS,
        palette_size: int = len(PALETTE),
    ) -> None:
        self.rng = rng or random.Random()
        self.max_attempts_per_word = max_attempts_per_word
        self.palette_size = max(1, palette_size)

    def place_words(self, words: Sequence[str], grid: LetterGrid) -> List[PlacedWord]:
        """Place ``words`` in input order and return the ones that fit."""

        placed: List[PlacedWord] = []
        for index, word in enumerate(words):
            path = self._find_path(word, grid)
            if path is None:
                LOGGER.info(
                    "Dropping '%s' after %s attempts; puzzle shrinks to fewer words",
                    word,
                    self.max_attempts_per_word,
                )
                continue
            for (x, y), letter in zip(path, word):
                grid.set_letter(x, y, letter)
            placed.append(
                PlacedWord(word=word, path=path, color_index=index % self.palette_size)
            )
            LOGGER.debug("Placed '%s' along %s", word, list(path))

        LOGGER.info("Placed %s/%s words", len(placed), len(words))
        return placed

    # ------------------------------------------------------------------
    # Path growth
    # ------------------------------------------------------------------
    def _find_path(self, word: str, grid: LetterGrid) -> Optional[Path]:
        if not word:
            return None
        for attempt in range(1, self.max_attempts_per_word + 1):
            path = self._grow_path(len(word), grid)
            if len(path) == len(word):
                LOGGER.debug("Found path for '%s' on attempt %s", word, attempt)
                return as_path(path)
        return None

    def _grow_path(self, length: int, grid: LetterGrid) -> List[Coordinate]:
        start = Coordinate(self.rng.randrange(grid.size), self.rng.randrange(grid.size))
        if not grid.is_empty(*start):
            return []

        path = [start]
        visited = {start}
        while len(path) < length:
            tail = path[-1]
            candidates = [
                cell
                for cell in grid.neighbors(*tail)
                if cell not in visited and grid.is_empty(*cell)
            ]
            if not candidates:
                break
            step = self.rng.choice(candidates)
            path.append(step)
            visited.add(step)
        return path

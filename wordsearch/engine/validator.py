"""Deterministic invariant checks for generated puzzles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Set

from ..core.constants import ALPHABET
from ..core.exceptions import ValidationError
from ..core.models import Coordinate, PlacedWord, is_adjacent
from .grid import LetterGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class PuzzleValidator:
    """Runs structural validation over a filled grid and its placed words."""

    def validate(self, grid: LetterGrid, placed_words: Sequence[PlacedWord]) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_letters_valid(grid)
            self._check_paths(grid, placed_words)
            self._check_no_shared_cells(placed_words)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_letters_valid(self, grid: LetterGrid) -> None:
        for x, y in grid.coordinates():
            letter = grid.letter(x, y)
            if len(letter) != 1 or letter not in ALPHABET:
                raise ValidationError(f"Invalid letter '{letter}' at ({x},{y})")

    def _check_paths(self, grid: LetterGrid, placed_words: Sequence[PlacedWord]) -> None:
        for placed in placed_words:
            if len(placed.path) != len(placed.word):
                raise ValidationError(
                    f"Path length {len(placed.path)} does not match '{placed.word}'"
                )
            for x, y in placed.path:
                if not grid.bounds.contains(x, y):
                    raise ValidationError(f"'{placed.word}' leaves the board at ({x},{y})")
            if len(set(placed.path)) != len(placed.path):
                raise ValidationError(f"'{placed.word}' revisits a cell")
            for first, second in zip(placed.path, placed.path[1:]):
                if first == second or not is_adjacent(first, second):
                    raise ValidationError(
                        f"'{placed.word}' jumps from {tuple(first)} to {tuple(second)}"
                    )
            spelled = grid.read_path(placed.path)
            if spelled != placed.word:
                raise ValidationError(f"Path of '{placed.word}' spells '{spelled}'")

    @staticmethod
    def _check_no_shared_cells(placed_words: Sequence[PlacedWord]) -> None:
        seen: Set[Coordinate] = set()
        for placed in placed_words:
            for cell in placed.path:
                if cell in seen:
                    raise ValidationError(
                        f"'{placed.word}' shares cell {tuple(cell)} with another word"
                    )
                seen.add(cell)

"""Puzzle generation orchestration.

One pass, no restarts:
  1. Build an empty grid.
  2. Place the chosen words along random contiguous paths.
  3. Fill every remaining cell with a random letter.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..core.constants import (ALPHABET, DEFAULT_BOARD_SIZE, DEFAULT_MAX_ATTEMPTS,
                              DEFAULT_MAX_WORDS, PALETTE)
from ..core.exceptions import ValidationError
from ..core.models import PlacedWord, words_of
from ..data.normalization import clean_word
from ..data.word_source import WordSource, choose_words
from .grid import LetterGrid, create_empty_grid, fill_remaining
from .placer import WordPlacer
from .validator import PuzzleValidator
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    board_size: int = DEFAULT_BOARD_SIZE
    max_words: int = DEFAULT_MAX_WORDS
    max_attempts_per_word: int = DEFAULT_MAX_ATTEMPTS
    alphabet: str = ALPHABET
    seed: Optional[int] = None
    validate: bool = True

    def __post_init__(self) -> None:
        # Filler letters must be uppercase A-Z like the placed words.
        if not self.alphabet or any(letter not in ALPHABET for letter in self.alphabet):
            raise ValueError(f"Alphabet must be a non-empty subset of A-Z, got {self.alphabet!r}")
        if self.board_size < 1:
            raise ValueError(f"Board size must be positive, got {self.board_size}")


@dataclass
class PuzzleResult:
    board_size: int
    grid: LetterGrid
    placed_words: List[PlacedWord]
    requested_words: List[str] = field(default_factory=list)
    seed: Optional[int] = None

    @property
    def dropped_words(self) -> List[str]:
        placed = set(words_of(self.placed_words))
        return [word for word in self.requested_words if word not in placed]

    def to_jsonable(self) -> dict:
        return {
            "board_size": self.board_size,
            "grid": self.grid.to_jsonable(),
            "placed_words": [placed.to_jsonable() for placed in self.placed_words],
            "dropped_words": self.dropped_words,
            "seed": self.seed,
        }


class PuzzleGenerator:
    """Builds a complete puzzle from a word list."""

    def __init__(self, config: Optional[GeneratorConfig] = None, rng: Optional[random.Random] = None) -> None:
        self.config = config or GeneratorConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.placer = WordPlacer(
            rng=self.rng,
            max_attempts_per_word=self.config.max_attempts_per_word,
            palette_size=len(PALETTE),
        )
        self.validator = PuzzleValidator()

    def generate(self, words: Sequence[str]) -> PuzzleResult:
        """Place ``words`` in the given order and fill the grid.

        Words are folded to uppercase ASCII first so the grid only ever holds
        A-Z. Words that fold to the same text are kept once, first occurrence
        first; anything that folds to an empty string is dropped by the placer.
        """

        requested = list(dict.fromkeys(clean_word(word) for word in words))
        LOGGER.info(
            "Generating %sx%s puzzle for %s words",
            self.config.board_size,
            self.config.board_size,
            len(requested),
        )
        grid = create_empty_grid(self.config.board_size)
        placed = self.placer.place_words(requested, grid)
        fill_remaining(grid, self.config.alphabet, self.rng)

        if self.config.validate:
            validation = self.validator.validate(grid, placed)
            if not validation.ok:
                raise ValidationError(f"Puzzle validation failed: {validation.messages}")

        result = PuzzleResult(
            board_size=self.config.board_size,
            grid=grid,
            placed_words=placed,
            requested_words=requested,
            seed=self.config.seed,
        )
        if result.dropped_words:
            LOGGER.info("Could not place: %s", ", ".join(result.dropped_words))
        return result

    def generate_from_source(self, source: WordSource) -> PuzzleResult:
        """Load candidates, draw the word subset and generate."""

        chosen = choose_words(source.load(), limit=self.config.max_words, rng=self.rng)
        return self.generate(chosen)

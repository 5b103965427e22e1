"""Shared constants for puzzle generation and play."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Tuple


ALPHABET: str = string.ascii_uppercase
EMPTY_CELL: str = ""

DEFAULT_BOARD_SIZE = 8
DEFAULT_MAX_ATTEMPTS = 100
DEFAULT_MAX_WORDS = 5
MIN_WORD_LENGTH = 3
MAX_WORD_LENGTH = 8

# Shorter selections are never compared against placed paths.
MIN_MATCH_LENGTH = MIN_WORD_LENGTH

ORTHOGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))
DIAGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
KING_STEPS: Tuple[Tuple[int, int], ...] = ORTHOGONAL_STEPS + DIAGONAL_STEPS

PALETTE: Tuple[str, ...] = (
    "#e57373",
    "#64b5f6",
    "#81c784",
    "#ffd54f",
    "#ba68c8",
    "#ff8a65",
    "#4dd0e1",
    "#dce775",
)


@dataclass(frozen=True)
class Bounds:
    """Square board bounds helper."""

    size: int

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

"""Word-path search puzzles: generation and selection matching.

This package exposes the public API surface via:

- ``wordsearch.engine.generator.PuzzleGenerator``: builds a filled grid with
  words laid along random contiguous paths.
- ``wordsearch.game.state.PuzzleState`` and
  ``wordsearch.game.matcher.SelectionMatcher``: play-time selection state.
- ``wordsearch.game.events.handle_event``: typed input events in, render
  frames out.
"""

from .engine.generator import GeneratorConfig, PuzzleGenerator, PuzzleResult
from .game.events import CancelSelection, CellPicked, RenderFrame, handle_event
from .game.matcher import SelectionMatcher
from .game.state import PuzzleState

__all__ = [
    "CancelSelection",
    "CellPicked",
    "GeneratorConfig",
    "PuzzleGenerator",
    "PuzzleResult",
    "PuzzleState",
    "RenderFrame",
    "SelectionMatcher",
    "handle_event",
]

__version__ = "0.1.0"

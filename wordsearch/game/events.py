"""Typed input events and the render snapshot handed to the view."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

from ..core.models import Coordinate, PlacedWord, WordStatus
from ..utils.logger import get_logger
from .matcher import MatchOutcome, SelectionMatcher
from .state import PuzzleState


LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class CellPicked:
    x: int
    y: int


@dataclass(frozen=True)
class CancelSelection:
    pass


Event = Union[CellPicked, CancelSelection]


@dataclass
class RenderFrame:
    """Everything a view needs to draw the board after a state change."""

    rows: List[List[str]]
    selection: List[Coordinate]
    highlights: List[PlacedWord]
    words: List[WordStatus]
    message: str = ""
    complete: bool = False
    outcome: Optional[MatchOutcome] = field(default=None, compare=False)


def render_frame(state: PuzzleState, outcome: Optional[MatchOutcome] = None) -> RenderFrame:
    rows = [list(row) for row in state.grid.rows] if state.grid is not None else []
    return RenderFrame(
        rows=rows,
        selection=list(state.selection),
        highlights=state.found_placed_words(),
        words=state.word_statuses(),
        message=state.message,
        complete=state.is_complete(),
        outcome=outcome,
    )


def handle_event(state: PuzzleState, event: Event) -> RenderFrame:
    """Apply ``event`` to ``state`` and return the frame to render."""

    matcher = SelectionMatcher(state)
    if isinstance(event, CellPicked):
        if state.grid is None or not state.grid.bounds.contains(event.x, event.y):
            LOGGER.debug("Ignoring pick outside the board: (%s,%s)", event.x, event.y)
            return render_frame(state)
        return render_frame(state, matcher.pick((event.x, event.y)))
    if isinstance(event, CancelSelection):
        matcher.cancel()
        return render_frame(state)
    raise TypeError(f"Unsupported event: {event!r}")

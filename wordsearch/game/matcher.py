"""Selection state machine: contiguous extension and path matching."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..core.constants import MIN_MATCH_LENGTH
from ..core.models import Coordinate, PlacedWord, is_adjacent, paths_equal
from ..utils.logger import get_logger
from .state import PuzzleState


LOGGER = get_logger(__name__)

FOUND_MESSAGE = "You found: {word}"
COMPLETE_MESSAGE = "Congratulations! All words have been found!"


@dataclass(frozen=True)
class MatchOutcome:
    """Result of a single cell pick."""

    extended: bool
    matched: Optional[PlacedWord] = None
    completed: bool = False


class SelectionMatcher:
    """Drives the selection of a :class:`PuzzleState`.

    The selection grows one king-move step at a time. Once it holds at least
    three cells it is compared, in order, with every placed path; a match
    marks the word found and empties the selection.
    """

    def __init__(self, state: PuzzleState) -> None:
        self.state = state

    def try_extend(self, coord: Tuple[int, int]) -> bool:
        """Append ``coord`` if it continues the selection; ignore it otherwise."""

        cell = Coordinate(*coord)
        selection = self.state.selection
        if selection and not is_adjacent(selection[-1], cell):
            LOGGER.debug("Ignoring pick %s: not adjacent to %s", tuple(cell), tuple(selection[-1]))
            return False
        if cell in selection:
            LOGGER.debug("Ignoring pick %s: already selected", tuple(cell))
            return False
        selection.append(cell)
        return True

    @staticmethod
    def check_match(
        selection: Sequence[Tuple[int, int]],
        placed_words: Sequence[PlacedWord],
    ) -> Optional[PlacedWord]:
        if len(selection) < MIN_MATCH_LENGTH:
            return None
        for placed in placed_words:
            if paths_equal(placed.path, selection):
                return placed
        return None

    def pick(self, coord: Tuple[int, int]) -> MatchOutcome:
        """Handle a cell pick: extend, then check the selection for a match."""

        extended = self.try_extend(coord)
        matched = self.check_match(self.state.selection, self.state.placed_words)
        if matched is None:
            return MatchOutcome(extended=extended)

        self.state.mark_found(matched.word)
        self.state.clear_selection()
        self.state.message = FOUND_MESSAGE.format(word=matched.word)
        LOGGER.info("Found '%s' (%s/%s)", matched.word, len(self.state.found_words), len(self.state.placed_words))

        completed = self.state.is_complete()
        if completed:
            self.state.message = COMPLETE_MESSAGE
            LOGGER.info("All %s words found", len(self.state.placed_words))
        return MatchOutcome(extended=extended, matched=matched, completed=completed)

    def cancel(self) -> None:
        self.state.clear_selection()
        self.state.message = ""

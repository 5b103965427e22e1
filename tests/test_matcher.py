import random
import unittest

from wordsearch.core.models import PlacedWord, as_path, is_adjacent
from wordsearch.engine.grid import create_empty_grid, fill_remaining
from wordsearch.game.events import CancelSelection, CellPicked, handle_event, render_frame
from wordsearch.game.matcher import COMPLETE_MESSAGE, SelectionMatcher
from wordsearch.game.state import PuzzleState


CAT_PATH = [(0, 0), (0, 1), (0, 2)]


def make_state(*placements):
    """Board of size 8 with each ``(word, cells)`` written in, rest random."""

    grid = create_empty_grid(8)
    placed_words = []
    for index, (word, cells) in enumerate(placements):
        for (x, y), letter in zip(cells, word):
            grid.set_letter(x, y, letter)
        placed_words.append(PlacedWord(word, as_path(cells), color_index=index))
    fill_remaining(grid, rng=random.Random(0))
    return PuzzleState(8, placed_words, grid)


class TryExtendTests(unittest.TestCase):
    def test_first_pick_is_always_accepted(self) -> None:
        state = make_state(("CAT", CAT_PATH))
        self.assertTrue(SelectionMatcher(state).try_extend((5, 5)))
        self.assertEqual(state.selection, [(5, 5)])

    def test_non_adjacent_pick_is_ignored(self) -> None:
        state = make_state(("CAT", CAT_PATH))
        matcher = SelectionMatcher(state)
        self.assertTrue(matcher.try_extend((0, 0)))
        self.assertFalse(matcher.try_extend((2, 2)))
        self.assertEqual(state.selection, [(0, 0)])

    def test_repicking_last_cell_is_a_no_op(self) -> None:
        state = make_state(("CAT", CAT_PATH))
        matcher = SelectionMatcher(state)
        matcher.try_extend((3, 3))
        self.assertFalse(matcher.try_extend((3, 3)))
        self.assertEqual(state.selection, [(3, 3)])

    def test_adjacent_but_already_selected_is_ignored(self) -> None:
        state = make_state(("CAT", CAT_PATH))
        matcher = SelectionMatcher(state)
        matcher.try_extend((3, 3))
        matcher.try_extend((4, 4))
        self.assertFalse(matcher.try_extend((3, 3)))
        self.assertEqual(state.selection, [(3, 3), (4, 4)])

    def test_random_picks_keep_selection_contiguous_and_distinct(self) -> None:
        rng = random.Random(17)
        state = make_state(("CAT", CAT_PATH))
        matcher = SelectionMatcher(state)
        for _ in range(300):
            matcher.try_extend((rng.randrange(8), rng.randrange(8)))
            if len(state.selection) >= 8:
                state.clear_selection()
            selection = state.selection
            self.assertEqual(len(selection), len(set(selection)))
            for first, second in zip(selection, selection[1:]):
                self.assertTrue(is_adjacent(first, second))
                self.assertNotEqual(first, second)


class CheckMatchTests(unittest.TestCase):
    def setUp(self) -> None:
        self.cat = PlacedWord("CAT", as_path(CAT_PATH))

    def test_exact_sequence_matches(self) -> None:
        self.assertIs(SelectionMatcher.check_match(CAT_PATH, [self.cat]), self.cat)

    def test_reversed_sequence_does_not_match(self) -> None:
        self.assertIsNone(SelectionMatcher.check_match(list(reversed(CAT_PATH)), [self.cat]))

    def test_short_selection_is_never_checked(self) -> None:
        two = PlacedWord("AT", as_path([(0, 1), (0, 2)]))
        self.assertIsNone(SelectionMatcher.check_match([(0, 1), (0, 2)], [two]))
        self.assertIsNone(SelectionMatcher.check_match([], [self.cat]))

    def test_prefix_does_not_match_longer_path(self) -> None:
        cats = PlacedWord("CATS", as_path(CAT_PATH + [(0, 3)]))
        self.assertIsNone(SelectionMatcher.check_match(CAT_PATH, [cats]))


class PickScenarioTests(unittest.TestCase):
    def test_selecting_cat_finds_it_and_completes_puzzle(self) -> None:
        state = make_state(("CAT", CAT_PATH))
        matcher = SelectionMatcher(state)
        first = matcher.pick((0, 0))
        second = matcher.pick((0, 1))
        self.assertIsNone(first.matched)
        self.assertIsNone(second.matched)
        outcome = matcher.pick((0, 2))
        self.assertEqual(outcome.matched.word, "CAT")
        self.assertTrue(outcome.completed)
        self.assertEqual(state.found_words, {"CAT"})
        self.assertTrue(state.is_complete())
        self.assertEqual(state.selection, [])
        self.assertEqual(state.message, COMPLETE_MESSAGE)

    def test_found_message_when_words_remain(self) -> None:
        state = make_state(("CAT", CAT_PATH), ("DOG", [(5, 5), (6, 6), (7, 7)]))
        matcher = SelectionMatcher(state)
        for cell in CAT_PATH:
            outcome = matcher.pick(cell)
        self.assertFalse(outcome.completed)
        self.assertEqual(state.message, "You found: CAT")
        self.assertFalse(state.is_complete())

    def test_reversed_picks_do_not_find_word(self) -> None:
        state = make_state(("CAT", CAT_PATH))
        matcher = SelectionMatcher(state)
        for cell in reversed(CAT_PATH):
            matcher.pick(cell)
        self.assertEqual(state.found_words, set())
        self.assertEqual(len(state.selection), 3)

    def test_cancel_clears_selection_and_message(self) -> None:
        state = make_state(("CAT", CAT_PATH), ("DOG", [(5, 5), (6, 6), (7, 7)]))
        matcher = SelectionMatcher(state)
        for cell in CAT_PATH:
            matcher.pick(cell)
        matcher.pick((4, 4))
        matcher.cancel()
        self.assertEqual(state.selection, [])
        self.assertEqual(state.message, "")
        self.assertEqual(state.found_words, {"CAT"})


class EventHandlerTests(unittest.TestCase):
    def test_events_drive_state_and_return_frames(self) -> None:
        state = make_state(("CAT", CAT_PATH), ("DOG", [(5, 5), (6, 6), (7, 7)]))
        frame = handle_event(state, CellPicked(0, 0))
        self.assertEqual(frame.selection, [(0, 0)])
        self.assertEqual(frame.highlights, [])
        handle_event(state, CellPicked(0, 1))
        frame = handle_event(state, CellPicked(0, 2))
        self.assertEqual(frame.selection, [])
        self.assertEqual([placed.word for placed in frame.highlights], ["CAT"])
        self.assertEqual([(status.word, status.found) for status in frame.words], [("CAT", True), ("DOG", False)])
        self.assertEqual(frame.message, "You found: CAT")
        self.assertFalse(frame.complete)
        self.assertEqual(frame.rows[0][0], "C")

    def test_cancel_event(self) -> None:
        state = make_state(("CAT", CAT_PATH))
        handle_event(state, CellPicked(4, 4))
        frame = handle_event(state, CancelSelection())
        self.assertEqual(frame.selection, [])
        self.assertEqual(frame.message, "")

    def test_pick_outside_board_is_ignored(self) -> None:
        state = make_state(("CAT", CAT_PATH))
        frame = handle_event(state, CellPicked(8, 0))
        self.assertEqual(frame.selection, [])
        self.assertIsNone(frame.outcome)

    def test_unknown_event_raises(self) -> None:
        state = make_state(("CAT", CAT_PATH))
        with self.assertRaises(TypeError):
            handle_event(state, "click")

    def test_render_frame_of_unloaded_state(self) -> None:
        frame = render_frame(PuzzleState())
        self.assertEqual(frame.rows, [])
        self.assertTrue(frame.complete)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

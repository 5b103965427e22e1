"""Plain-text rendering of puzzle frames."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Iterable, List, Sequence, Set, Tuple

if TYPE_CHECKING:
    from ..core.models import PlacedWord, WordStatus
    from ..game.events import RenderFrame


def cell_symbol(letter: str, selected: bool, found: bool) -> str:
    shown = (letter or ".").lower() if found else (letter or ".")
    if selected:
        return f"[{shown}]"
    return f" {shown} "


def format_grid(
    rows: Sequence[Sequence[str]],
    selection: Iterable[Tuple[int, int]] = (),
    highlights: Iterable[PlacedWord] = (),
) -> str:
    """Render the board; selected cells are bracketed, found cells lowercase."""

    selected: Set[Tuple[int, int]] = {(x, y) for x, y in selection}
    found: Set[Tuple[int, int]] = {(x, y) for placed in highlights for x, y in placed.path}
    width = len(rows[0]) if rows else 0
    lines = ["    " + "".join(f"{x:^3}" for x in range(width))]
    lines.append("    " + "-" * (3 * width))
    for y, row in enumerate(rows):
        rendered = "".join(
            cell_symbol(letter, (x, y) in selected, (x, y) in found)
            for x, letter in enumerate(row)
        )
        lines.append(f"{y:>2} |{rendered}")
    return "\n".join(lines)


def format_word_list(words: Iterable[WordStatus]) -> str:
    parts: List[str] = []
    for status in words:
        marker = "✓" if status.found else "·"
        parts.append(f"{marker} {status.word}")
    return "  ".join(parts)


def print_frame(frame: RenderFrame, *, stream=None) -> None:
    """Print the board, the word list and the status message."""

    stream = stream or sys.stdout
    print(format_grid(frame.rows, frame.selection, frame.highlights), file=stream)
    print(file=stream)
    print(f"Words: {format_word_list(frame.words) or '(none placed)'}", file=stream)
    if frame.message:
        print(frame.message, file=stream)

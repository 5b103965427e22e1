"""CLI entrypoint for the word-path search puzzle."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from wordsearch.core.constants import (DEFAULT_BOARD_SIZE, DEFAULT_MAX_ATTEMPTS,
                                       DEFAULT_MAX_WORDS)
from wordsearch.core.exceptions import WordSearchError
from wordsearch.data.word_source import FileWordSource, StaticWordSource, WordSource
from wordsearch.engine.generator import GeneratorConfig, PuzzleGenerator, PuzzleResult
from wordsearch.game.events import CancelSelection, CellPicked, Event, handle_event, render_frame
from wordsearch.game.state import PuzzleState
from wordsearch.io.remote import WORDS_URL_ENV, RemoteWordSource
from wordsearch.utils.logger import configure_logging
from wordsearch.utils.pretty import print_frame


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate and play word-path search puzzles",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=DEFAULT_BOARD_SIZE,
        help="Board size in cells (square board)",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Explicit candidate words",
    )
    source.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one candidate word per line (# comments and blank lines ignored)",
    )
    source.add_argument(
        "--words-url",
        type=str,
        metavar="URL",
        help=f"URL of a plain-text word list (defaults to ${WORDS_URL_ENV})",
    )
    parser.add_argument(
        "--max-words",
        type=int,
        default=DEFAULT_MAX_WORDS,
        help="Number of words drawn from the candidates",
    )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=DEFAULT_MAX_ATTEMPTS,
        help="Placement attempts per word before it is dropped",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--play",
        action="store_true",
        help="Play the puzzle in the terminal instead of printing JSON",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def resolve_source(args: argparse.Namespace) -> WordSource:
    if args.words:
        return StaticWordSource(args.words)
    if args.words_file:
        return FileWordSource(args.words_file)
    return RemoteWordSource(args.words_url)


def parse_command(line: str) -> Optional[Event]:
    """Turn a terminal line into an event: ``x y`` picks a cell, ``c`` cancels."""

    parts = line.split()
    if parts == ["c"]:
        return CancelSelection()
    if len(parts) == 2 and all(part.lstrip("-").isdigit() for part in parts):
        return CellPicked(int(parts[0]), int(parts[1]))
    return None


def play(result: PuzzleResult, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> PuzzleState:
    state = PuzzleState.from_result(result)
    frame = render_frame(state)
    print_frame(frame, stream=stdout)
    while not frame.complete:
        print("pick> ", end="", file=stdout, flush=True)
        line = stdin.readline()
        if not line or line.strip() == "q":
            break
        event = parse_command(line)
        if event is None:
            print("Enter 'x y' to pick a cell, 'c' to cancel, 'q' to quit", file=stdout)
            continue
        frame = handle_event(state, event)
        print_frame(frame, stream=stdout)
    return state


def main(argv: List[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    if args.size < 1:
        parser.error("--size must be positive")

    config = GeneratorConfig(
        board_size=args.size,
        max_words=args.max_words,
        max_attempts_per_word=args.max_attempts,
        seed=args.seed,
    )
    try:
        result = PuzzleGenerator(config).generate_from_source(resolve_source(args))
    except WordSearchError as exc:
        parser.exit(1, f"error: {exc}\n")

    if args.play:
        play(result)
        return

    output_text = json.dumps(result.to_jsonable(), ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)


if __name__ == "__main__":  # pragma: no cover
    main()

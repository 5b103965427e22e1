"""Word list providers and the candidate subset draw."""

from __future__ import annotations

import random
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Sequence

from ..core.constants import DEFAULT_MAX_WORDS, MAX_WORD_LENGTH, MIN_WORD_LENGTH
from ..core.exceptions import WordSourceError
from ..utils.logger import get_logger
from .normalization import clean_word


LOGGER = get_logger(__name__)


class WordSource(Protocol):
    """Protocol implemented by all word list providers."""

    def load(self) -> List[str]:
        ...


def parse_word_lines(text: str) -> List[str]:
    """Split a plain-text list into entries. Blank lines and # comments are skipped."""

    entries: List[str] = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


class StaticWordSource:
    """Serves a fixed in-memory list."""

    def __init__(self, words: Iterable[str]) -> None:
        self.words = list(words)

    def load(self) -> List[str]:
        return list(self.words)


class FileWordSource:
    """Reads one word per line from a UTF-8 text file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> List[str]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise WordSourceError(f"Cannot read word list {self.path}: {exc}") from exc
        words = parse_word_lines(text)
        LOGGER.info("Loaded %s candidate words from %s", len(words), self.path)
        return words


def eligible_words(
    candidates: Iterable[str],
    min_length: int = MIN_WORD_LENGTH,
    max_length: int = MAX_WORD_LENGTH,
) -> List[str]:
    """Normalize candidates and keep those within the length bounds."""

    eligible: List[str] = []
    for candidate in candidates:
        cleaned = clean_word(candidate)
        if min_length <= len(cleaned) <= max_length:
            eligible.append(cleaned)
    return eligible


def choose_words(
    candidates: Sequence[str],
    limit: int = DEFAULT_MAX_WORDS,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """Draw up to ``limit`` distinct eligible words at random.

    Each draw removes the candidate from the pool, so the loop ends once
    ``limit`` unique words are chosen or the pool runs dry.
    """

    rng = rng or random.Random()
    pool = eligible_words(candidates)
    chosen: List[str] = []
    while len(chosen) < limit and pool:
        word = pool.pop(rng.randrange(len(pool)))
        if word not in chosen:
            chosen.append(word)
    LOGGER.debug("Chose %s words: %s", len(chosen), ", ".join(chosen))
    return chosen

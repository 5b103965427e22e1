"""HTTP word list provider."""

from __future__ import annotations

import os
from typing import List, Optional

import requests

from ..core.exceptions import WordSourceError
from ..data.word_source import parse_word_lines
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

WORDS_URL_ENV = "WORDSEARCH_WORDS_URL"


class RemoteWordSource:
    """Fetches a plain-text word list, one entry per line."""

    def __init__(
        self,
        url: Optional[str] = None,
        url_env: str = WORDS_URL_ENV,
        timeout_seconds: float = 30.0,
    ) -> None:
        self.url = url or os.environ.get(url_env)
        self.url_env = url_env
        self.timeout_seconds = timeout_seconds
        if not self.url:
            raise WordSourceError(
                f"No word list URL given and {self.url_env} is not set"
            )

    def load(self) -> List[str]:
        try:
            response = requests.get(self.url, timeout=self.timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise WordSourceError(f"Word list request failed: {exc}") from exc

        words = parse_word_lines(response.text)
        if not words:
            LOGGER.warning("Word list at %s is empty", self.url)
        else:
            LOGGER.info("Fetched %s candidate words from %s", len(words), self.url)
        return words

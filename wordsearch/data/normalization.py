"""Shared helpers for word normalization."""

from __future__ import annotations

import re
import unicodedata

WORD_RE = re.compile(r"[^A-Z]")


def clean_word(text: str) -> str:
    """Return an uppercase A-Z representation of ``text``.

    Accents are stripped (``"ação"`` becomes ``"ACAO"``); any other
    character outside A-Z is removed.
    """

    if not text:
        return ""
    decomposed = unicodedata.normalize("NFD", str(text).strip())
    stripped = "".join(char for char in decomposed if unicodedata.category(char) != "Mn")
    return WORD_RE.sub("", stripped.upper())


__all__ = ["clean_word"]

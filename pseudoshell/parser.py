"""Split command lines into tokens on a set of delimiter characters."""

from __future__ import annotations

import re
from functools import lru_cache

__all__ = ["count_tokens", "tokenize"]


@lru_cache(maxsize=32)
def _splitter(delimiters: str) -> re.Pattern[str]:
    if not delimiters:
        # No delimiter characters: the whole text is a single token.
        return re.compile(r"(?!)")
    return re.compile("[" + re.escape(delimiters) + "]+")


def _pieces(text: str, delimiters: str) -> list[str]:
    return [piece for piece in _splitter(delimiters).split(text) if piece]


def count_tokens(text: str | None, delimiters: str) -> int:
    """Return how many non-empty tokens ``text`` holds.

    Any character of ``delimiters`` separates tokens. Runs of delimiters,
    and delimiters at either end, never produce empty tokens. ``None``
    holds no tokens.
    """
    if text is None:
        return 0
    return len(_pieces(text, delimiters))


def tokenize(text: str, delimiters: str) -> list[str]:
    """Split one line of ``text`` into its non-empty tokens.

    The text is cut at its first newline, so only the first line is
    tokenized. Any character of ``delimiters`` separates tokens.
    """
    line = text.split("\n", 1)[0]
    return _pieces(line, delimiters)
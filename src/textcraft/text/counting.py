"""Word and substring counting."""

__all__ = [
    "count_words",
    "count_occurrences",
]

import re

from textcraft.text.normalize import normalize_whitespace

_WORD = re.compile(r"\S+")


def count_words(text: str) -> int:
    """Count whitespace-separated words."""
    return len(_WORD.findall(normalize_whitespace(text)))


def count_occurrences(text: str, sub: str) -> int:
    """
    Count non-overlapping occurrences of `sub`, scanning left to right.

    Example:
        >>> count_occurrences("aaaa", "aa")
        2
        >>> count_occurrences("abc", "")
        0
    """
    if not sub:
        return 0
    return text.count(sub)

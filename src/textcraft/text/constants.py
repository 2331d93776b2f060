"""
Constant tables shared by the text transforms.

Built once at import time and exposed read-only.
"""

__all__ = [
    "StyleName",
    "STYLES",
    "LEET_MAP",
    "WEIRD_MAP",
    "LITTLE_WORDS",
    "ELLIPSIS",
    "DEFAULT_PAD_CHAR",
]

from types import MappingProxyType
from typing import Literal, Mapping

StyleName = Literal["upper", "lower", "leet", "weird"]

STYLES: tuple[str, ...] = ("upper", "lower", "leet", "weird")
"""Style names understood by `stylize`."""

LEET_MAP: Mapping[str, str] = MappingProxyType(
    {
        "a": "4",
        "b": "8",
        "e": "3",
        "i": "1",
        "l": "1",
        "o": "0",
        "s": "5",
        "t": "7",
        "g": "9",
    }
)
"""Lowercase letter -> digit substitutions for the "leet" style."""

WEIRD_MAP: Mapping[str, str] = MappingProxyType(
    {
        "a": "ä",
        "e": "ë",
        "i": "ï",
        "o": "ö",
        "u": "ü",
        "n": "ñ",
        "c": "ç",
    }
)
"""Lowercase letter -> accented letter substitutions for the "weird" style."""

LITTLE_WORDS: frozenset[str] = frozenset(
    {
        "a",
        "an",
        "the",
        "and",
        "or",
        "but",
        "for",
        "nor",
        "on",
        "at",
        "to",
        "from",
        "by",
        "of",
        "in",
        "with",
    }
)
"""Articles, conjunctions and short prepositions kept lowercase by `title_smart`."""

ELLIPSIS = "..."
DEFAULT_PAD_CHAR = " "

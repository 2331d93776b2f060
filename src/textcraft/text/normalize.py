"""
Normalization primitives - no external dependencies.

Building blocks reused by the case and identifier transforms.
"""

__all__ = [
    "remove_accents",
    "normalize_whitespace",
    "reverse",
    "strip_non_ascii",
]

import re
import unicodedata

_COMBINING_MARKS = re.compile("[\u0300-\u036f]")
_WHITESPACE_RUN = re.compile(r"[\s\ufeff]+")
_NON_ASCII_RUN = re.compile(r"[^\x00-\x7f]+")


def remove_accents(text: str) -> str:
    """
    Remove diacritical marks from text.

    Decomposes the text (NFD) and drops code points in the combining
    diacritical marks block (U+0300..U+036F). Scripts without such marks
    pass through in decomposed form.

    Args:
        text: Input text

    Returns:
        Text without combining diacritics

    Example:
        >>> remove_accents("Café Déjà Vu")
        'Cafe Deja Vu'
    """
    return _COMBINING_MARKS.sub("", unicodedata.normalize("NFD", text))


def normalize_whitespace(text: str) -> str:
    """
    Trim text and collapse every interior whitespace run to one space.

    Byte order marks (U+FEFF) count as whitespace.

    Example:
        >>> normalize_whitespace("  Hello\\n\\t World  ")
        'Hello World'
    """
    return _WHITESPACE_RUN.sub(" ", text).strip(" ")


def reverse(text: str) -> str:
    """Reverse text code point by code point."""
    return text[::-1]


def strip_non_ascii(text: str) -> str:
    """Drop every character outside the 7-bit ASCII range."""
    return _NON_ASCII_RUN.sub("", text)

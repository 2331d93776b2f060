"""
Case and title transforms - no external dependencies.
"""

__all__ = [
    "capitalize",
    "to_title_case",
    "to_sentence_case",
    "title_smart",
    "name_case",
]

import re

from textcraft.text.constants import LITTLE_WORDS
from textcraft.text.normalize import normalize_whitespace

_TITLE_TOKEN = re.compile(r"[A-Za-z0-9_]\S*")


def capitalize(text: str) -> str:
    """
    Uppercase the first character and lowercase the rest.

    Unlike `str.capitalize`, the first character is upper-cased rather than
    title-cased.

    Example:
        >>> capitalize("hELLO")
        'Hello'
        >>> capitalize("")
        ''
    """
    if not text:
        return text
    return text[0].upper() + text[1:].lower()


def to_title_case(text: str) -> str:
    """
    Capitalize every word, leaving separators untouched.

    A word starts at an ASCII letter, digit or underscore and runs through
    the following non-whitespace characters, so "o'neil" becomes "O'neil"
    and "über" becomes "üBer".

    Example:
        >>> to_title_case("the QUICK brown-fox")
        'The Quick Brown-fox'
    """
    return _TITLE_TOKEN.sub(lambda m: capitalize(m.group(0)), text)


def to_sentence_case(text: str) -> str:
    """Uppercase the first character and lowercase the rest."""
    return capitalize(text)


def title_smart(text: str) -> str:
    """
    Title-case text, keeping little words lowercase.

    Articles, conjunctions and short prepositions (see `LITTLE_WORDS`)
    are lowercased unless they open the title.

    Args:
        text: Title to format

    Returns:
        Whitespace-normalized title

    Example:
        >>> title_smart("the lord OF the rings")
        'The Lord of the Rings'
    """
    parts = normalize_whitespace(text).split(" ")
    return " ".join(
        part.lower() if i != 0 and part.lower() in LITTLE_WORDS else capitalize(part)
        for i, part in enumerate(parts)
    )


def name_case(text: str) -> str:
    """
    Capitalize personal names without clobbering deliberate casing.

    Tokens written entirely in upper or lower case are capitalized;
    mixed-case tokens such as "McDonald" are kept as given.

    Example:
        >>> name_case("JOHN  McDonald")
        'John McDonald'
    """
    parts = normalize_whitespace(text).split(" ")
    return " ".join(
        capitalize(part) if part.upper() == part or part.lower() == part else part
        for part in parts
    )

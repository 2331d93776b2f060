"""
Cosmetic styles: random case, alternating case and character substitutions.
"""

__all__ = [
    "random_case",
    "alternating_case",
    "stylize",
]

import random
from typing import Callable, Optional

from loguru import logger

from textcraft.text.constants import LEET_MAP, WEIRD_MAP, StyleName


def _is_ascii_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _fair_coin() -> bool:
    return random.random() >= 0.5


def random_case(text: str, coin: Optional[Callable[[], bool]] = None) -> str:
    """
    Randomly upper- or lowercase each ASCII letter.

    Args:
        text: Input text
        coin: Zero-argument callable drawn once per letter; a true result
              uppercases the letter. Defaults to a fair coin from `random`.

    Returns:
        Text with letters in random case, other characters unchanged

    Example:
        >>> random_case("abc", coin=lambda: True)
        'ABC'
    """
    if coin is None:
        coin = _fair_coin
    return "".join(
        (ch.upper() if coin() else ch.lower()) if _is_ascii_letter(ch) else ch
        for ch in text
    )


def alternating_case(text: str) -> str:
    """
    Alternate upper and lower case across ASCII letters, starting upper.

    Non-letters are copied and do not advance the alternation.

    Example:
        >>> alternating_case("hello!")
        'HeLlO!'
    """
    upper = True
    out = []
    for ch in text:
        if not _is_ascii_letter(ch):
            out.append(ch)
            continue
        out.append(ch.upper() if upper else ch.lower())
        upper = not upper
    return "".join(out)


def _leet(ch: str) -> str:
    return LEET_MAP.get(ch.lower(), ch)


def _weird(ch: str) -> str:
    low = ch.lower()
    mapped = WEIRD_MAP.get(low)
    if mapped is None:
        return ch
    return mapped if ch == low else mapped.upper()


def stylize(text: str, style: StyleName) -> str:
    """
    Apply a named style to text.

    Args:
        text: Input text
        style: One of "upper", "lower", "leet" or "weird"

    Returns:
        Styled text; unknown styles return the input unchanged

    Example:
        >>> stylize("Leet", "leet")
        '1337'
        >>> stylize("Sao", "weird")
        'Säö'
    """
    if style == "upper":
        return text.upper()
    if style == "lower":
        return text.lower()
    if style == "leet":
        return "".join(_leet(ch) for ch in text)
    if style == "weird":
        return "".join(_weird(ch) for ch in text)
    logger.debug("Unknown style {!r}, returning text unchanged", style)
    return text

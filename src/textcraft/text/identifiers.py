"""
Identifier-style transforms: slug, kebab, snake and camel case.

All of them strip accents and lowercase before splitting on anything
outside [a-z0-9].
"""

__all__ = [
    "to_slug",
    "kebab_case",
    "snake_case",
    "camel_case",
]

import re

from textcraft.text.normalize import remove_accents

_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")


def _join_with(text: str, separator: str) -> str:
    lowered = remove_accents(text).lower()
    return _NON_ALNUM_RUN.sub(separator, lowered).strip(separator)


def to_slug(text: str) -> str:
    """
    Generate a URL slug.

    Args:
        text: Input text

    Returns:
        Lowercase ASCII words joined by hyphens

    Example:
        >>> to_slug("Café Déjà Vu!")
        'cafe-deja-vu'
    """
    return _join_with(text, "-")


def kebab_case(text: str) -> str:
    """Convert text to kebab-case."""
    return _join_with(text, "-")


def snake_case(text: str) -> str:
    """Convert text to snake_case."""
    return _join_with(text, "_")


def camel_case(text: str) -> str:
    """
    Convert text to camelCase.

    Only the first character of each following word is upper-cased.

    Example:
        >>> camel_case("hello world_foo")
        'helloWorldFoo'
    """
    words = _join_with(text, " ").split(" ")
    if not words[0]:
        return ""
    return words[0] + "".join(word[0].upper() + word[1:] for word in words[1:] if word)

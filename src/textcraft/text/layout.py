"""
Layout transforms: truncation, word limits, padding and wrapping.
"""

__all__ = [
    "truncate",
    "limit_words",
    "pad",
    "wrap",
]

from textcraft.errors import InvalidArgumentError
from textcraft.text.constants import DEFAULT_PAD_CHAR, ELLIPSIS
from textcraft.text.normalize import normalize_whitespace


def truncate(text: str, length: int, suffix: str = ELLIPSIS) -> str:
    """
    Truncate text to length, adding suffix if truncated.

    The suffix is always appended in full, so the result can be longer
    than `length` when `length` is smaller than the suffix.

    Args:
        text: Text to truncate
        length: Maximum length including suffix
        suffix: Suffix to add if truncated

    Returns:
        Truncated text with suffix, or original if short enough

    Example:
        >>> truncate("hello world", 8)
        'hello...'
        >>> truncate("hello", 2)
        '...'
    """
    if len(text) <= length:
        return text
    return text[: max(0, length - len(suffix))] + suffix


def limit_words(text: str, count: int) -> str:
    """
    Keep at most `count` words, adding an ellipsis if any were dropped.

    When nothing is dropped the original text is returned as given,
    without whitespace normalization. A negative count behaves like 0.

    Example:
        >>> limit_words("one  two three", 2)
        'one two...'
        >>> limit_words(" one two ", 5)
        ' one two '
    """
    words = normalize_whitespace(text).split(" ")
    if len(words) > count:
        return " ".join(words[: max(0, count)]) + ELLIPSIS
    return text


def pad(text: str, length: int, char: str = DEFAULT_PAD_CHAR) -> str:
    """
    Center text within `length` characters.

    When the padding is uneven the extra character goes on the right.

    Args:
        text: Text to pad
        length: Target length
        char: Single fill character

    Returns:
        Padded text, or the original if already long enough

    Raises:
        InvalidArgumentError: If char is not exactly one character

    Example:
        >>> pad("hi", 7, "*")
        '**hi***'
    """
    if len(char) != 1:
        raise InvalidArgumentError(f"pad: 'char' must be a single character, got {char!r}")
    if len(text) >= length:
        return text
    total = length - len(text)
    left = total // 2
    return char * left + text + char * (total - left)


def wrap(text: str, width: int) -> str:
    """
    Greedily wrap words into lines of at most `width` characters.

    Words longer than `width` are kept whole on their own line.

    Example:
        >>> wrap("one two three four", 7)
        'one two\\nthree\\nfour'
    """
    lines = []
    line = ""
    for word in normalize_whitespace(text).split(" "):
        if not line:
            line = word
        elif len(line) + 1 + len(word) <= width:
            line = f"{line} {word}"
        else:
            lines.append(line)
            line = word
    if line:
        lines.append(line)
    return "\n".join(lines)

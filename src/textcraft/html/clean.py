"""
HTML to plain text - no external dependencies.

Regex based: good enough for snippets, not a parser.
"""

__all__ = ["clean_html"]

import re

from textcraft.text.normalize import normalize_whitespace

_SCRIPT_BLOCK = re.compile(r"<script[^>]*>.*?</script>", re.IGNORECASE | re.DOTALL)
_STYLE_BLOCK = re.compile(r"<style[^>]*>.*?</style>", re.IGNORECASE | re.DOTALL)
_TAG = re.compile(r"<[^>]+>")


def clean_html(html: str) -> str:
    """
    Strip HTML markup down to its visible text.

    Script and style blocks are removed with their contents, every other
    tag becomes a space, and whitespace is normalized. An unterminated
    "<" is kept as text.

    Args:
        html: HTML fragment

    Returns:
        Plain text

    Example:
        >>> clean_html("<p>Hi <script>evil()</script>there</p>")
        'Hi there'
    """
    text = _SCRIPT_BLOCK.sub("", html)
    text = _STYLE_BLOCK.sub("", text)
    text = _TAG.sub(" ", text)
    return normalize_whitespace(text)

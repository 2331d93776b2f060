"""
textcraft - Pure, stateless string transformation utilities.

This package is organized into focused subpackages:

- text/     Pure text utilities (no dependencies)
            - normalize: remove_accents, normalize_whitespace, reverse, strip_non_ascii
            - case: capitalize, to_title_case, to_sentence_case, title_smart, name_case
            - identifiers: to_slug, kebab_case, snake_case, camel_case
            - layout: truncate, limit_words, pad, wrap
            - counting: count_words, count_occurrences
            - styles: random_case, alternating_case, stylize

- html/     HTML cleaning (no dependencies)
            - clean: clean_html

- registry  Transform lookup by name: TRANSFORMS, get_transform, apply_transforms

- df/       DataFrame utilities (requires polars)
            - transforms: transform_column, word_count_column

Logging goes through loguru and is disabled by default; call
``logger.enable("textcraft")`` to see it.

Usage:
    from textcraft import to_slug, title_smart, pad
    from textcraft.registry import apply_transforms
    from textcraft.df import transform_column
"""

__version__ = "0.1.0"

from loguru import logger

from textcraft.errors import (
    TextcraftError,
    InvalidArgumentError,
    UnknownTransformError,
)

# Convenience imports from text (no dependencies)
from textcraft.text import (
    remove_accents,
    normalize_whitespace,
    reverse,
    strip_non_ascii,
    capitalize,
    to_title_case,
    to_sentence_case,
    title_smart,
    name_case,
    to_slug,
    kebab_case,
    snake_case,
    camel_case,
    truncate,
    limit_words,
    pad,
    wrap,
    count_words,
    count_occurrences,
    random_case,
    alternating_case,
    stylize,
    StyleName,
    STYLES,
)

# Convenience imports from html (no dependencies)
from textcraft.html import clean_html

logger.disable("textcraft")

__all__ = [
    "__version__",
    # errors
    "TextcraftError",
    "InvalidArgumentError",
    "UnknownTransformError",
    # text.normalize
    "remove_accents",
    "normalize_whitespace",
    "reverse",
    "strip_non_ascii",
    # text.case
    "capitalize",
    "to_title_case",
    "to_sentence_case",
    "title_smart",
    "name_case",
    # text.identifiers
    "to_slug",
    "kebab_case",
    "snake_case",
    "camel_case",
    # text.layout
    "truncate",
    "limit_words",
    "pad",
    "wrap",
    # text.counting
    "count_words",
    "count_occurrences",
    # text.styles
    "random_case",
    "alternating_case",
    "stylize",
    "StyleName",
    "STYLES",
    # html.clean
    "clean_html",
]

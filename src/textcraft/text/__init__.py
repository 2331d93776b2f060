"""
Text utilities subpackage - no external dependencies.

Pure functions for normalization, case conversion, layout, counting
and cosmetic styling.
"""

from textcraft.text.normalize import (
    remove_accents,
    normalize_whitespace,
    reverse,
    strip_non_ascii,
)

from textcraft.text.case import (
    capitalize,
    to_title_case,
    to_sentence_case,
    title_smart,
    name_case,
)

from textcraft.text.identifiers import (
    to_slug,
    kebab_case,
    snake_case,
    camel_case,
)

from textcraft.text.layout import (
    truncate,
    limit_words,
    pad,
    wrap,
)

from textcraft.text.counting import (
    count_words,
    count_occurrences,
)

from textcraft.text.styles import (
    random_case,
    alternating_case,
    stylize,
)

from textcraft.text.constants import (
    StyleName,
    STYLES,
    LEET_MAP,
    WEIRD_MAP,
    LITTLE_WORDS,
)

__all__ = [
    # normalize
    "remove_accents",
    "normalize_whitespace",
    "reverse",
    "strip_non_ascii",
    # case
    "capitalize",
    "to_title_case",
    "to_sentence_case",
    "title_smart",
    "name_case",
    # identifiers
    "to_slug",
    "kebab_case",
    "snake_case",
    "camel_case",
    # layout
    "truncate",
    "limit_words",
    "pad",
    "wrap",
    # counting
    "count_words",
    "count_occurrences",
    # styles
    "random_case",
    "alternating_case",
    "stylize",
    # constants
    "StyleName",
    "STYLES",
    "LEET_MAP",
    "WEIRD_MAP",
    "LITTLE_WORDS",
]

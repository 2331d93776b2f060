"""
Named transform lookup - no external dependencies.

Maps snake_case names to single-argument string transforms so callers
(DataFrame helpers, notebooks) can select transforms by name.
"""

__all__ = [
    "TRANSFORMS",
    "get_transform",
    "apply_transforms",
]

from functools import partial, reduce
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping

from loguru import logger

from textcraft.errors import UnknownTransformError
from textcraft.html.clean import clean_html
from textcraft.text import case, counting, identifiers, normalize, styles

TRANSFORMS: Mapping[str, Callable[[str], Any]] = MappingProxyType(
    {
        "remove_accents": normalize.remove_accents,
        "normalize_whitespace": normalize.normalize_whitespace,
        "reverse": normalize.reverse,
        "strip_non_ascii": normalize.strip_non_ascii,
        "capitalize": case.capitalize,
        "to_title_case": case.to_title_case,
        "to_sentence_case": case.to_sentence_case,
        "title_smart": case.title_smart,
        "name_case": case.name_case,
        "to_slug": identifiers.to_slug,
        "kebab_case": identifiers.kebab_case,
        "snake_case": identifiers.snake_case,
        "camel_case": identifiers.camel_case,
        "clean_html": clean_html,
        "count_words": counting.count_words,
        "random_case": styles.random_case,
        "alternating_case": styles.alternating_case,
        "upper": partial(styles.stylize, style="upper"),
        "lower": partial(styles.stylize, style="lower"),
        "leet": partial(styles.stylize, style="leet"),
        "weird": partial(styles.stylize, style="weird"),
    }
)
"""Every unary transform, keyed by name. `count_words` returns an int."""


def get_transform(name: str) -> Callable[[str], Any]:
    """
    Look up a transform by name.

    Raises:
        UnknownTransformError: If no transform has that name
    """
    try:
        return TRANSFORMS[name]
    except KeyError:
        raise UnknownTransformError(name, sorted(TRANSFORMS)) from None


def apply_transforms(text: str, names: Iterable[str]) -> Any:
    """
    Apply named transforms to text, left to right.

    Args:
        text: Input text
        names: Transform names, applied in order

    Returns:
        Result of the last transform (the input if names is empty)

    Example:
        >>> apply_transforms("  Héllo   World ", ["normalize_whitespace", "snake_case"])
        'hello_world'
    """
    names = list(names)
    funcs = [get_transform(name) for name in names]
    logger.debug("Applying transforms: {}", names)
    return reduce(lambda acc, func: func(acc), funcs, text)

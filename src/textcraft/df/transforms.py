"""
DataFrame column transformations - requires polars.

Apply textcraft transforms element-wise to string columns.
"""

__all__ = [
    "transform_column",
    "word_count_column",
]

from typing import Any, Callable, Optional, Union

import polars as pl
from loguru import logger

from textcraft.registry import get_transform
from textcraft.text.counting import count_occurrences, count_words

_INTEGER_TRANSFORMS = {count_words, count_occurrences}


def transform_column(
    df: pl.DataFrame,
    column: str,
    transform: Union[str, Callable[[str], Any]],
    output_column: Optional[str] = None,
    return_dtype: Optional[pl.DataType] = None,
) -> pl.DataFrame:
    """
    Apply a text transform to every value of a column.

    Nulls are kept as nulls.

    Args:
        df: Input DataFrame
        column: String column to transform
        transform: Registry name (e.g. "to_slug") or a callable
        output_column: Name for the result column (defaults to overwriting column)
        return_dtype: Result dtype; defaults to Int64 for counting transforms,
                      String otherwise

    Returns:
        DataFrame with the transformed column, or df unchanged if column is missing

    Raises:
        UnknownTransformError: If transform is a name not in the registry

    Example:
        >>> df = pl.DataFrame({"title": ["Café Déjà Vu!", None]})
        >>> transform_column(df, "title", "to_slug", "slug")
        shape: (2, 2)
        ┌───────────────┬──────────────┐
        │ title         │ slug         │
        ├───────────────┼──────────────┤
        │ Café Déjà Vu! │ cafe-deja-vu │
        │ null          │ null         │
        └───────────────┴──────────────┘
    """
    if column not in df.columns:
        logger.warning("Column {!r} not found, leaving DataFrame unchanged", column)
        return df

    func = get_transform(transform) if isinstance(transform, str) else transform
    if return_dtype is None:
        return_dtype = pl.Int64 if func in _INTEGER_TRANSFORMS else pl.String

    return df.with_columns(
        pl.col(column)
        .map_elements(func, return_dtype=return_dtype)
        .alias(output_column or column)
    )


def word_count_column(
    df: pl.DataFrame,
    column: str,
    output_column: Optional[str] = None,
) -> pl.DataFrame:
    """Add a column with the word count of each value (defaults to column + "_words")."""
    return transform_column(
        df,
        column,
        count_words,
        output_column=output_column or f"{column}_words",
        return_dtype=pl.Int64,
    )

"""
DataFrame utilities subpackage - requires polars.

Apply text transforms to DataFrame columns.
"""

from textcraft.df.transforms import (
    transform_column,
    word_count_column,
)

__all__ = [
    "transform_column",
    "word_count_column",
]

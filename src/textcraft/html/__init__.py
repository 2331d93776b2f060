"""
HTML utilities subpackage - no external dependencies.

Pure functions for turning HTML fragments into plain text.
"""

from textcraft.html.clean import clean_html

__all__ = [
    "clean_html",
]

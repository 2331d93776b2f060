"""
Exception types raised by textcraft.

Only a handful of operations can fail; everything else is total.
"""

__all__ = [
    "TextcraftError",
    "InvalidArgumentError",
    "UnknownTransformError",
]


class TextcraftError(Exception):
    """Base class for all textcraft errors."""


class InvalidArgumentError(TextcraftError, ValueError):
    """An argument is outside the domain the operation accepts."""


class UnknownTransformError(TextcraftError, KeyError):
    """A transform name is not present in the registry."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(name)

    def __str__(self) -> str:
        return f"unknown transform {self.name!r}, use one of: {', '.join(self.available)}"

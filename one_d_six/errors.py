"""Errors raised while parsing notation or building dice.

Everything derives from DiceError, itself a ValueError, so callers can catch
a single class for any bad notation.
"""

from __future__ import annotations


class DiceError(ValueError):
    """Raised when a dice notation or dice construction is invalid."""

    def __init__(self, message: str, notation: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.notation = notation


class MalformedNotation(DiceError):
    """Missing separator, empty segment, or non-digit characters."""


class ConstructionError(DiceError):
    """A die or a collection was requested with a non-positive count or side count."""


class ZeroQuantity(ConstructionError):
    """Count or sides parsed to zero."""


class NumericOverflow(DiceError):
    """A value does not fit in the chosen rollable type."""

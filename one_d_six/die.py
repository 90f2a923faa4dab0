"""A single die."""

from __future__ import annotations

from one_d_six.errors import ConstructionError
from one_d_six.rollable import U32, RandomSource, Rollable


class Die:
    """One die with a fixed number of sides.

    A fresh die has no roll yet and reads as its kind's minimum face until
    :meth:`roll` is called.
    """

    __slots__ = ("sides", "kind", "last_roll")

    def __init__(self, sides: int, kind: Rollable = U32) -> None:
        if sides < 1:
            raise ConstructionError(f"A die needs at least one side, got {sides}")
        self.sides = kind.check(sides, "Sides")
        self.kind = kind
        self.last_roll: int | None = None

    def roll(self, rng: RandomSource | None = None) -> int:
        """Roll the die, remember the result, and return it."""
        self.last_roll = self.kind.draw(self.sides, rng)
        return self.last_roll

    def value(self) -> int:
        """Return the last roll, or the minimum face if the die was never rolled."""
        if self.last_roll is None:
            return self.kind.minimum
        return self.last_roll

    def copy(self) -> Die:
        die = Die(self.sides, self.kind)
        die.last_roll = self.last_roll
        return die

    def __add__(self, other: Die) -> int:
        if not isinstance(other, Die):
            return NotImplemented
        return self.value() + other.value()

    def __repr__(self) -> str:
        return f"Die(sides={self.sides}, kind={self.kind.name}, last_roll={self.last_roll})"

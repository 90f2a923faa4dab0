"""Collections of dice.

A Dice object owns a flat, ordered list of Die instances that all share one
rollable type. Dice of different side counts can live in the same collection
(``2d4 + 1d20``); the grouped label is rebuilt from runs of equal-sided dice.

Example::

    dice = Dice.parse("2d4").combine(Dice(1, 20))
    dice.roll_all().total()   # 3..28
    dice.verbose()            # e.g. "3 1 17"
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from itertools import groupby

from one_d_six.die import Die
from one_d_six.errors import ConstructionError
from one_d_six.notation import parse_term
from one_d_six.rollable import U32, RandomSource, Rollable
from one_d_six.schemas import RollResult

logger = logging.getLogger(__name__)


class Dice:
    """A handful of dice rolled and totalled together."""

    def __init__(self, count: int, sides: int, kind: Rollable = U32) -> None:
        if count < 1:
            raise ConstructionError(f"Dice count must be positive, got {count}")
        if sides < 1:
            raise ConstructionError(f"Dice sides must be positive, got {sides}")
        kind.check(count, "Count")
        self.kind = kind
        self._dice: list[Die] = [Die(sides, kind) for _ in range(count)]

    @classmethod
    def from_dice(cls, dice: Iterable[Die]) -> Dice:
        """Build a collection from explicit dice, which may have different side counts.

        The dice are copied; the new collection does not share them with the caller.

        Raises:
            ConstructionError: If ``dice`` is empty.
            TypeError: If the dice are not all of the same rollable type.
        """
        owned = [die.copy() for die in dice]
        if not owned:
            raise ConstructionError("A dice collection needs at least one die")
        kind = owned[0].kind
        if any(die.kind is not kind for die in owned):
            raise TypeError("Cannot mix dice of different rollable types")
        return cls._wrap(owned, kind)

    @classmethod
    def parse(cls, notation: str, kind: Rollable = U32) -> Dice:
        """Build a collection from one ``NdM`` term.

        Raises:
            DiceError: If the notation is invalid (see ``parse_term``).
        """
        term = parse_term(notation, kind)
        logger.debug("Parsed %r as %s over %s", notation, term, kind.name)
        return cls(term.count, term.sides, kind)

    @classmethod
    def _wrap(cls, dice: list[Die], kind: Rollable) -> Dice:
        obj = cls.__new__(cls)
        obj.kind = kind
        obj._dice = dice
        return obj

    # -----------------------------------------------------------------------
    # Rolling
    # -----------------------------------------------------------------------

    def roll_all(self, rng: RandomSource | None = None) -> Dice:
        """Roll every die once and return this collection.

        This mutates the dice in place; the return value is the same object,
        so calls can be chained: ``dice.roll_all().total()``.
        """
        for die in self._dice:
            die.roll(rng)
        logger.debug("Rolled %s: %s", self.label(), self.verbose())
        return self

    def current_faces(self) -> list[int]:
        return [die.value() for die in self._dice]

    def total(self) -> int:
        """Sum of every die's current value.

        Raises:
            NumericOverflow: If the sum does not fit in the rollable type.
        """
        return self.kind.check(sum(self.current_faces()), "Total", self.label())

    # -----------------------------------------------------------------------
    # Combining
    # -----------------------------------------------------------------------

    def combine(self, other: Dice) -> Dice:
        """Return a new collection with this collection's dice followed by other's.

        Both operands are left untouched; the result owns copies of their dice.
        """
        if not isinstance(other, Dice):
            raise TypeError(f"Cannot combine Dice with {type(other).__name__}")
        if other.kind is not self.kind:
            raise TypeError(
                f"Cannot combine {self.kind.name} dice with {other.kind.name} dice"
            )
        return self._wrap([die.copy() for die in (*self._dice, *other._dice)], self.kind)

    def __add__(self, other: Dice) -> Dice:
        if not isinstance(other, Dice):
            return NotImplemented
        return self.combine(other)

    # -----------------------------------------------------------------------
    # Rendering
    # -----------------------------------------------------------------------

    def label(self) -> str:
        """Grouped notation, e.g. ``2d4 + 1d20``."""
        groups = groupby(self._dice, key=lambda die: die.sides)
        return " + ".join(f"{len(list(run))}d{sides}" for sides, run in groups)

    def verbose(self) -> str:
        """Every die's current value separated by spaces, e.g. ``3 1 17``."""
        return " ".join(str(face) for face in self.current_faces())

    def to_result(self) -> RollResult:
        return RollResult(
            notation=self.label(),
            kind=self.kind.name,
            faces=self.current_faces(),
            total=self.total(),
        )

    def __str__(self) -> str:
        return str(self.total())

    def __repr__(self) -> str:
        return f"Dice({self.label()!r}, kind={self.kind.name})"

    # -----------------------------------------------------------------------
    # Container protocol
    # -----------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._dice)

    def __iter__(self) -> Iterator[Die]:
        return iter(self._dice)

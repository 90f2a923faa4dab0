"""Bounded value types that dice can be rolled over.

A Rollable describes the range a die's faces live in: the lowest face
(``minimum``), the largest value the type can hold (``maximum``), and how to
draw a uniform face up to a given number of sides. The built-in types model
unsigned integers of a fixed width, so the same notation can be rolled as an
8-bit or a 64-bit quantity with the matching overflow limits.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Protocol

from one_d_six.errors import NumericOverflow


class RandomSource(Protocol):
    """Anything with ``randint``, e.g. a ``random.Random`` instance."""

    def randint(self, a: int, b: int) -> int: ...


class Rollable(ABC):
    """A value type that can be produced by rolling within a bounded range."""

    name: str

    @property
    @abstractmethod
    def minimum(self) -> int:
        """Lowest face a die of this type can show."""

    @property
    @abstractmethod
    def maximum(self) -> int:
        """Largest value this type can represent."""

    def draw(self, high: int, rng: RandomSource | None = None) -> int:
        """Return a uniform value in ``[minimum, high]``.

        Args:
            high: Inclusive upper bound, normally a die's side count.
            rng: Randomness source; the module-level ``random`` functions
                are used when omitted.
        """
        source = rng if rng is not None else random
        return source.randint(self.minimum, high)

    def check(self, value: int, what: str, notation: str | None = None) -> int:
        """Return value unchanged, or raise NumericOverflow if it does not fit."""
        if value > self.maximum:
            raise NumericOverflow(
                f"{what} {value} does not fit in {self.name} (max {self.maximum})",
                notation,
            )
        return value

    def __repr__(self) -> str:
        return f"<Rollable {self.name}>"


class UnsignedInt(Rollable):
    """Fixed-width unsigned integer whose faces start at 1."""

    def __init__(self, name: str, bits: int) -> None:
        self.name = name
        self.bits = bits
        self._maximum = (1 << bits) - 1

    @property
    def minimum(self) -> int:
        return 1

    @property
    def maximum(self) -> int:
        return self._maximum


U8 = UnsignedInt("u8", 8)
U16 = UnsignedInt("u16", 16)
U32 = UnsignedInt("u32", 32)
U64 = UnsignedInt("u64", 64)
U128 = UnsignedInt("u128", 128)
USIZE = UnsignedInt("usize", 64)

ROLLABLE_TYPES: dict[str, Rollable] = {
    kind.name: kind for kind in (U8, U16, U32, U64, U128, USIZE)
}


def get_rollable(name: str) -> Rollable:
    """Look up a built-in rollable type by name (case-insensitive).

    Raises:
        ValueError: If no type has that name.
    """
    try:
        return ROLLABLE_TYPES[name.strip().lower()]
    except KeyError:
        choices = ", ".join(ROLLABLE_TYPES)
        raise ValueError(f"Unknown rollable type: {name!r} (choose from {choices})") from None

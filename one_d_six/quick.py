"""One-call helpers: parse a notation, roll it once, return the total."""

from __future__ import annotations

import logging

from one_d_six.dice import Dice
from one_d_six.errors import DiceError
from one_d_six.rollable import U32, RandomSource, Rollable

logger = logging.getLogger(__name__)


def quickroll(notation: str, kind: Rollable = U32, rng: RandomSource | None = None) -> int:
    """Roll dice described by notation and return the total.

    Args:
        notation: Dice notation string, e.g. "2d6".
        kind: Rollable type to roll over; bounds and overflow follow it.
        rng: Optional randomness source.

    Returns:
        Integer total of all dice.

    Raises:
        DiceError: If the notation is invalid or the total overflows ``kind``.
    """
    return Dice.parse(notation, kind).roll_all(rng).total()


def try_quickroll(
    notation: str, kind: Rollable = U32, rng: RandomSource | None = None
) -> int | None:
    """Like quickroll, but return None instead of raising DiceError."""
    try:
        return quickroll(notation, kind, rng)
    except DiceError as exc:
        logger.debug("Quick roll of %r failed: %s", notation, exc)
        return None

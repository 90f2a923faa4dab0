"""Dice notation parsing and rolling.

    >>> from one_d_six import Dice, quickroll
    >>> quickroll("1d2") in (1, 2)
    True
    >>> dice = Dice(2, 4) + Dice.parse("1d20")
    >>> 3 <= dice.roll_all().total() <= 28
    True
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from one_d_six.dice import Dice
from one_d_six.die import Die
from one_d_six.errors import (
    ConstructionError,
    DiceError,
    MalformedNotation,
    NumericOverflow,
    ZeroQuantity,
)
from one_d_six.notation import Term, parse_term, try_parse_term
from one_d_six.quick import quickroll, try_quickroll
from one_d_six.rollable import (
    ROLLABLE_TYPES,
    U8,
    U16,
    U32,
    U64,
    U128,
    USIZE,
    Rollable,
    UnsignedInt,
    get_rollable,
)
from one_d_six.schemas import RollResult


def _package_version() -> str:
    try:
        return version("one-d-six")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _package_version()

__all__ = [
    "ROLLABLE_TYPES",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "USIZE",
    "ConstructionError",
    "Dice",
    "DiceError",
    "Die",
    "MalformedNotation",
    "NumericOverflow",
    "Rollable",
    "RollResult",
    "Term",
    "UnsignedInt",
    "ZeroQuantity",
    "__version__",
    "get_rollable",
    "parse_term",
    "quickroll",
    "try_parse_term",
    "try_quickroll",
]

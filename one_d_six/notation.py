"""Parser for standard dice notation.

Supports a single ``NdM`` term: N dice with M sides each.
Examples: 1d6, 3d4, 2d20.

No whitespace, no modifiers, lowercase ``d`` only. Combining several terms
is left to the caller (see ``Dice.combine``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from one_d_six.errors import DiceError, MalformedNotation, NumericOverflow, ZeroQuantity
from one_d_six.rollable import U32, Rollable

_DIGITS_RE = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class Term:
    """Count and side count of one parsed ``NdM`` term."""

    count: int
    sides: int

    def __str__(self) -> str:
        return f"{self.count}d{self.sides}"


def _parse_segment(segment: str, what: str, notation: str, kind: Rollable) -> int:
    if not segment:
        raise MalformedNotation(f"Missing {what} in dice notation: {notation!r}", notation)
    if not _DIGITS_RE.fullmatch(segment):
        raise MalformedNotation(f"Improper dice format: {notation!r}", notation)
    significant = segment.lstrip("0") or "0"
    if len(significant) > len(str(kind.maximum)):
        raise NumericOverflow(
            f"{what.capitalize()} has {len(segment)} digits, too many for {kind.name} "
            f"(max {kind.maximum})",
            notation,
        )
    return kind.check(int(significant), what.capitalize(), notation)


def parse_term(notation: str, kind: Rollable = U32) -> Term:
    """Parse dice notation into a Term.

    Args:
        notation: Dice notation string, e.g. "3d4".
        kind: Rollable type whose range count and sides must fit in.

    Returns:
        The parsed (count, sides) pair.

    Raises:
        MalformedNotation: If the separator is missing, a segment is empty,
            or a segment contains anything but digits.
        NumericOverflow: If count or sides exceeds the type's maximum.
        ZeroQuantity: If count or sides is zero.
    """
    count_part, sep, sides_part = notation.partition("d")
    if not sep:
        raise MalformedNotation(f"Missing 'd' in dice notation: {notation!r}", notation)

    count = _parse_segment(count_part, "count", notation, kind)
    sides = _parse_segment(sides_part, "sides", notation, kind)

    if count == 0:
        raise ZeroQuantity(f"Dice count must be positive: {notation!r}", notation)
    if sides == 0:
        raise ZeroQuantity(f"Dice sides must be positive: {notation!r}", notation)

    return Term(count, sides)


def try_parse_term(notation: str, kind: Rollable = U32) -> Term | DiceError:
    """Like parse_term, but return the error instead of raising it."""
    try:
        return parse_term(notation, kind)
    except DiceError as exc:
        return exc

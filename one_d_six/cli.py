from __future__ import annotations

import argparse
import logging
import random
import sys

from one_d_six import __version__
from one_d_six.config import settings
from one_d_six.dice import Dice
from one_d_six.errors import DiceError, NumericOverflow
from one_d_six.notation import try_parse_term
from one_d_six.rollable import ROLLABLE_TYPES, Rollable, get_rollable

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_BAD_NOTATION = 2
EXIT_OVERFLOW = 3


def _eprint(msg: str) -> None:
    print(msg, file=sys.stderr)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="one-d-six", description="Rolls some dice.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "dice",
        metavar="DICE",
        nargs="+",
        help="The dice to be rolled (e.g. 1d6). Several are rolled together.",
    )
    parser.add_argument(
        "-c",
        "--complex",
        action="store_true",
        help="Print each cast die instead of the total.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the roll as a JSON object.",
    )
    parser.add_argument(
        "-t",
        "--type",
        choices=sorted(ROLLABLE_TYPES),
        default=None,
        help="Integer type to roll over (defaults to ONE_D_SIX_DEFAULT_TYPE or u32).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the random generator for a reproducible roll.",
    )
    return parser


def parse_args(argv: list[str]) -> argparse.Namespace:
    return _build_parser().parse_args(argv)


def _parse_all(notations: list[str], kind: Rollable) -> list[Dice] | None:
    """Parse every notation, reporting each bad one. Returns None if any failed."""
    parsed: list[Dice] = []
    failed = False
    for notation in notations:
        outcome = try_parse_term(notation, kind)
        if isinstance(outcome, DiceError):
            _eprint(f"{notation}: {outcome.message}")
            failed = True
            continue
        parsed.append(Dice(outcome.count, outcome.sides, kind))
    return None if failed else parsed


def cmd_roll(args: argparse.Namespace) -> int:
    kind = get_rollable(args.type or settings.default_type)
    seed = args.seed if args.seed is not None else settings.seed
    rng = random.Random(seed) if seed is not None else None

    parsed = _parse_all(args.dice, kind)
    if parsed is None:
        return EXIT_BAD_NOTATION

    dice = Dice.from_dice(die for group in parsed for die in group).roll_all(rng)
    logger.debug("Rolled %d dice over %s", len(dice), kind.name)

    try:
        if args.json:
            print(dice.to_result().model_dump_json())
        elif args.complex:
            # Per-die output never sums, so it cannot overflow.
            print(f"{dice.label()}: {dice.verbose()}")
        else:
            print(f"{dice.label()}: {dice}")
    except NumericOverflow as exc:
        _eprint(f"error: {exc.message}")
        return EXIT_OVERFLOW
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    try:
        args = parse_args(list(sys.argv[1:] if argv is None else argv))
    except SystemExit as e:
        # argparse uses SystemExit for --help/--version and usage errors.
        code = e.code
        return int(code) if isinstance(code, int) else EXIT_BAD_NOTATION

    logging.basicConfig(level=settings.log_level)
    return cmd_roll(args)


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))

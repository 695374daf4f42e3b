from __future__ import annotations

import argparse
import logging
import sys

from .config import make_rng, settings
from .dice import average, roll, total
from .errors import DiceError, EmptyExpressionError
from .parser import parse, render_expression


logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dice-notation",
        description="Roll dice notation like '2d20 + 5' or '-d8 - 3'.",
    )
    parser.add_argument(
        "--avg",
        dest="average",
        action="store_true",
        help="also calculate the expected average value",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=settings.rng_seed,
        help="seed the random source for reproducible rolls",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("dice", nargs="+", help="the dice rolls to calculate (like '2d4' or 'd20+5')")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    text = " ".join(args.dice)
    logger.debug("Rolling %r", text)
    try:
        terms = parse(text)
        if not terms:
            raise EmptyExpressionError()
    except DiceError as e:
        print(str(e), file=sys.stderr)
        return 2

    rendered = render_expression(terms)
    rolled = roll(terms, make_rng(args.seed))
    print(f"{rendered} = {total(rolled)}")
    if args.average:
        print(f"average of {rendered} = {average(terms)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

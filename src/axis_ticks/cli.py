"""Commandline Interface"""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

from axis_ticks.locator import DEFAULT_TICK_COUNT, NiceTickLocator


def main(argv: Sequence[str] | None = None) -> int:
    """Parses commandline arguments and prints the ticks, one per line."""
    parser = argparse.ArgumentParser(
        "axis-ticks", description="Print nicely rounded ticks from START to STOP."
    )
    parser.add_argument("start", type=float, help="first end of the interval")
    parser.add_argument("stop", type=float, help="second end of the interval")
    parser.add_argument(
        "-n",
        "--count",
        type=int,
        default=DEFAULT_TICK_COUNT,
        help="approximate number of ticks (default: %(default)s)",
    )
    parser.add_argument(
        "--nice",
        default=False,
        action="store_true",
        help="extend the interval to the nearest enclosing ticks first",
    )
    parser.add_argument(
        "--debug",
        required=False,
        default=False,
        action="store_true",
        help="Set logging level.",
    )

    args = parser.parse_args(argv)
    if args.count < 0:
        parser.error("count must be non-negative")

    logging.basicConfig(format="%(name)s: %(message)s")
    logger = logging.getLogger("axis_ticks")
    if args.debug:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    locator = NiceTickLocator(count=args.count, nice_limits=args.nice)
    limits, ticks = locator.get_limits_and_ticks(args.start, args.stop)
    logger.debug("Ticks for limits %s, %s", *limits)
    for tick in ticks:
        print(repr(float(tick)))
    return 0


# commandline argument parser
if __name__ == "__main__":
    raise SystemExit(main())

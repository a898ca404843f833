#!/usr/bin/env python3
"""
Powerset enumeration example.

This script prints the subsets of its arguments in order of increasing size,
or just counts them.
"""

import argparse
import itertools
import logging
import sys
from collections.abc import Iterable

from lazysets.checked import MAX_COUNT, CountOverflowError
from lazysets.logging import log_exception, setup_color_logging
from lazysets.metrics import log_counters
from lazysets.powerset import powerset

logger = logging.getLogger(__name__)


def main(args: argparse.Namespace) -> int:
    setup_color_logging(level=logging.DEBUG if args.verbose else logging.INFO)
    if args.count and args.infinite:
        parser.error("cannot count the subsets of an infinite source")
    source: Iterable[object]
    if args.range is not None:
        source = range(args.range)
    elif args.infinite:
        source = itertools.count()
    else:
        source = args.elements
    subsets = powerset(source, max_count=args.max_count)
    logger.info(f"Size hint: {subsets.size_hint()}")

    if args.count:
        try:
            print(subsets.count())
        except CountOverflowError as e:
            log_exception(logger, e, "Cannot count subsets")
            return 1
        return 0

    print("Size\tSubset")
    print("-" * 40)
    for subset in itertools.islice(subsets, args.limit):
        print(f"{len(subset)}\t{{{', '.join(map(str, subset))}}}")
    if args.verbose:
        log_counters(logging.DEBUG)
    return 0


parser = argparse.ArgumentParser(
    description=__doc__, formatter_class=argparse.ArgumentDefaultsHelpFormatter
)
parser.add_argument("elements", nargs="*", help="Elements of the source set")
parser.add_argument("--range", type=int, help="Use range(RANGE) as the source")
parser.add_argument(
    "--infinite", action="store_true", help="Use itertools.count() as the source"
)
parser.add_argument(
    "--limit", type=int, default=100, help="Maximum number of subsets to print"
)
parser.add_argument(
    "--count", action="store_true", help="Print the number of subsets and exit"
)
parser.add_argument(
    "--max-count",
    type=int,
    default=MAX_COUNT,
    help="Largest count considered representable",
)
parser.add_argument("--verbose", "-v", action="store_true", help="Log debug info")

if __name__ == "__main__":
    args = parser.parse_args()
    sys.exit(main(args))

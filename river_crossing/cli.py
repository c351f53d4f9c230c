"""Command-line entry point for the missionaries and cannibals solver."""

import sys
import argparse
from river_crossing.crossing import State, solve_missionaries_cannibals

DEFAULT_MISSIONARIES = 3
DEFAULT_CANNIBALS = 3


def build_parser():
    parser = argparse.ArgumentParser(
        prog="river-crossing",
        description="Decide whether the missionaries and cannibals river crossing can be solved"
    )
    # kept as raw strings: only one or two counts are ever converted
    parser.add_argument(
        'counts',
        nargs='*',
        metavar='COUNT',
        help='Missionaries, then cannibals, starting on the left bank (default: 3 3)'
    )
    return parser


def parse_count(parser, raw):
    try:
        return int(raw)
    except ValueError:
        parser.error("invalid int value: %r" % raw)


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    counts = parser.parse_args(argv).counts

    if len(counts) == 2:
        cannibals = parse_count(parser, counts[1])
        if cannibals < 0:
            print("Cannibal count cannot be negative.")
            return 1
        missionaries = parse_count(parser, counts[0])
    elif len(counts) == 1:
        missionaries, cannibals = parse_count(parser, counts[0]), 0
    else:
        missionaries, cannibals = DEFAULT_MISSIONARIES, DEFAULT_CANNIBALS

    if missionaries < 0:
        print("Missionary count cannot be negative.")
        return 1

    if solve_missionaries_cannibals(State.initial(missionaries, cannibals)):
        print("Solution found!")
    else:
        print("No solution exists.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

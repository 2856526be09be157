#!/usr/bin/env python3
"""
Print the leaper report matrix for a square board.

Entry (r, c) is the minimum number of moves Leaper(r, c) needs to get
from (1, 1) to (n, n) on an n x n board, or -1 if it never gets there.

Usage:
    python3 knights.py                 # n from KNIGHTS_BOARD_SIZE (default 7)
    python3 knights.py --size 10       # a 10x10 board
    python3 knights.py --leaper 1,2    # path for a single leaper
    python3 knights.py --debug         # per-leaper trace and timing
"""

import argparse
import time

import config
from board import ORIGIN, corner
from reports import InvalidInput, check_size, run
from solver import Leaper, find_shortest_path


def parse_leaper(text):
    """Parse 'A,B' into a Leaper with two positive magnitudes."""
    parts = text.split(',')
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected A,B, got {text!r}")
    try:
        a, b = (int(x) for x in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected two integers, got {text!r}")
    if a < 1 or b < 1:
        raise argparse.ArgumentTypeError(f"magnitudes must be >= 1, got {text!r}")
    return Leaper(a, b)


def print_path(leaper, n):
    path = find_shortest_path(leaper, ORIGIN, corner(n), n)
    print(f"{leaper!r} on {n}x{n}:")
    print(path, end='')
    print(f"steps: {path.step_count()}")


def main(argv=None):
    parser = argparse.ArgumentParser(description='Leaper shortest-path report')
    parser.add_argument('--size', type=int, default=None,
                        help=f'Board size n, {config.MIN_BOARD_SIZE}-{config.MAX_BOARD_SIZE} '
                             f'(default: {config.BOARD_SIZE})')
    parser.add_argument('--leaper', type=parse_leaper, default=None,
                        help='Show the path for one leaper, as A,B')
    parser.add_argument('--debug', action='store_true', default=config.DEBUG,
                        help='Print a trace line per leaper and the total time')
    args = parser.parse_args(argv)

    if args.size is None:
        # A malformed or out-of-range configured default is a fault and propagates
        n = int(config.BOARD_SIZE)
        check_size(n)
    else:
        n = args.size
        try:
            check_size(n)
        except InvalidInput as e:
            parser.error(str(e))

    if args.leaper is not None:
        print_path(args.leaper, n)
        return

    start = time.monotonic()
    reports = run(n, debug=args.debug)
    reports.finalize().print()
    print()

    if args.debug:
        elapsed = time.monotonic() - start
        print(f"Solved {n}x{n} in {elapsed:.3f}s", flush=True)


if __name__ == '__main__':
    main()

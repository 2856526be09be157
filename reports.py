"""
Leaper reports: the minimum move count from (1, 1) to (n, n) for every
distinct leaper shape on an n x n board, folded into a symmetric matrix.

Only shapes with a <= b are searched, since Leaper(a, b) and Leaper(b, a)
share a move set. finalize() mirrors that triangular stream into the full
(n-1) x (n-1) matrix.
"""

from collections import deque

import config
from board import ORIGIN, corner
from solver import Leaper, find_shortest_path


class InvalidInput(ValueError):
    """Board size outside the supported range."""


class ReportUnderflow(RuntimeError):
    """finalize() ran out of triangular reports: an internal consistency fault."""


def report(leaper, goal, debug=False):
    """Step count for leaper from the origin to goal, on a goal.row-sided board."""
    path = find_shortest_path(leaper, ORIGIN, goal, goal.row)
    steps = path.step_count()
    if debug:
        print(f"knight: {leaper!r} steps: {steps}")
    return steps


class Reports:
    def __init__(self, data, n, finalized=False):
        self.data = deque(data)
        self.n = n
        self.finalized = finalized

    def __repr__(self):
        return f"Reports(n={self.n}, finalized={self.finalized}, data={list(self.data)!r})"

    def _idx(self, r, c):
        return (r - 1) * self.n + (c - 1)

    def finalize(self):
        """
        Expand the triangular report stream into the full symmetric matrix.

        Cells with r <= c take the next report in stream order; cells with
        r > c copy their mirror (c, r). Returns a new Reports and leaves
        this one untouched.
        """
        if self.finalized:
            return self

        pending = deque(self.data)
        matrix = [0] * (self.n * self.n)
        for r in range(1, self.n + 1):
            for c in range(1, self.n + 1):
                if r <= c:
                    if not pending:
                        raise ReportUnderflow(
                            f"no report left for leaper ({r}, {c}) "
                            f"({len(self.data)} reports for a {self.n}x{self.n} matrix)"
                        )
                    matrix[self._idx(r, c)] = pending.popleft()
                else:
                    matrix[self._idx(r, c)] = matrix[self._idx(c, r)]
        return Reports(matrix, self.n, finalized=True)

    def to_2dvec(self):
        """The data as a list of rows, n values per row."""
        data = list(self.data)
        return [data[i:i + self.n] for i in range(0, len(data), self.n)]

    def print(self):
        """Write the matrix to stdout, a blank line before each row."""
        for i, value in enumerate(self.data):
            if i % self.n == 0:
                print()
            print(f"{value:3} ", end='')


def check_size(n):
    """Raise InvalidInput unless MIN_BOARD_SIZE <= n <= MAX_BOARD_SIZE."""
    if not config.MIN_BOARD_SIZE <= n <= config.MAX_BOARD_SIZE:
        raise InvalidInput(
            f"n must be between {config.MIN_BOARD_SIZE} and {config.MAX_BOARD_SIZE}"
        )


def run(n, debug=None):
    """
    Build the triangular report stream for every leaper (r, c) with
    1 <= r <= c < n, on an n x n board, from (1, 1) to (n, n).

    Raises InvalidInput when n is outside [MIN_BOARD_SIZE, MAX_BOARD_SIZE].
    """
    check_size(n)
    if debug is None:
        debug = config.DEBUG

    goal = corner(n)
    # Only unique shapes: (1, 3) and (3, 1) are the same leaper
    leapers = [Leaper(r, c) for r in range(1, n) for c in range(1, n) if r <= c]

    data = deque()
    for leaper in leapers:
        if debug:
            print(f"---------------\nknight: {leaper!r}")
        data.append(report(leaper, goal, debug))

    return Reports(data, n - 1)


def knights_on_board(n):
    """The finalized matrix for an n x n board as nested lists."""
    return run(n).finalize().to_2dvec()

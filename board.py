"""
Board geometry for the leaper search.

Boards are square and 1-indexed: cell (1, 1) is the origin corner and
(n, n) the diagonally opposite one. Validity is pure range checking; there
are no blocked cells.
"""

from collections import namedtuple

Position = namedtuple('Position', ['row', 'col'])
Position.__doc__ = "A 1-indexed board cell. Compares and hashes by value."

ORIGIN = Position(1, 1)


def is_valid(position, board_size):
    """Returns whether a position lies on a board_size x board_size board."""
    row, col = position
    return 1 <= row <= board_size and 1 <= col <= board_size


def try_position(row, col, board_size):
    """Build a Position for (row, col), or None if it falls off the board."""
    pos = Position(row, col)
    if is_valid(pos, board_size):
        return pos
    return None


def corner(n):
    """The far corner of an n x n board, diagonally opposite ORIGIN."""
    return Position(n, n)

"""
Shortest-path solver for generalized knights ("leapers").

A Leaper(a, b) jumps a cells along one axis and b along the other, in any
of the four sign combinations. The chess knight is Leaper(1, 2). Move
tables are position independent and are lazily cached per shape on first
use.

Usage:
    from board import ORIGIN, corner
    from solver import Leaper, find_shortest_path
    path = find_shortest_path(Leaper(1, 2), ORIGIN, corner(8), 8)
    path.step_count()  # -1 when the goal is unreachable
"""

from collections import deque, namedtuple

from board import Position, try_position

# Sign pairs: (row_sign, col_sign)
DIRECTIONS = ((1, 1), (1, -1), (-1, 1), (-1, -1))

# Per-shape move cache: (a, b) -> tuple of (row_delta, col_delta)
_MOVE_CACHE = {}


def _build_moves(a, b):
    """Apply every direction to (a, b), then to (b, a) unless they coincide."""
    moves = [(a * sr, b * sc) for sr, sc in DIRECTIONS]
    if a != b:
        moves.extend((b * sr, a * sc) for sr, sc in DIRECTIONS)
    return tuple(moves)


class Leaper(namedtuple('Leaper', ['a', 'b'])):
    """A move capability defined by two step magnitudes."""

    __slots__ = ()

    def __new__(cls, a, b):
        if a < 1 or b < 1:
            raise ValueError(f"leaper magnitudes must be >= 1, got ({a}, {b})")
        return super().__new__(cls, a, b)

    def reverse(self):
        return Leaper(self.b, self.a)

    def moves(self):
        """Offsets reachable in one step: 8 when a != b, 4 when a == b."""
        key = (self.a, self.b)
        if key not in _MOVE_CACHE:
            _MOVE_CACHE[key] = _build_moves(self.a, self.b)
        return _MOVE_CACHE[key]

    def valid_moves(self, current, board_size):
        """Destinations from current that stay on the board."""
        destinations = []
        for dr, dc in self.moves():
            pos = try_position(current.row + dr, current.col + dc, board_size)
            if pos is not None:
                destinations.append(pos)
        return destinations

    def find_shortest_path(self, start, goal, board_size):
        return find_shortest_path(self, start, goal, board_size)


class Path:
    """Result of a search. Either Found (with positions) or NotFound."""

    positions = ()

    def __bool__(self):
        return bool(self.positions)

    def __len__(self):
        return len(self.positions)

    def __iter__(self):
        return iter(self.positions)

    def __eq__(self, other):
        if isinstance(other, Path):
            return type(self) is type(other) and self.positions == other.positions
        return NotImplemented

    def __hash__(self):
        return hash((type(self).__name__, self.positions))

    def __str__(self):
        return ''.join(f"({pos.row}, {pos.col})\n" for pos in self.positions)

    def step_count(self):
        """Number of moves on the path, or -1 when no path was found."""
        if not self.positions:
            return -1
        return len(self.positions) - 1


class Found(Path):
    def __init__(self, positions):
        self.positions = tuple(Position(*pos) for pos in positions)
        if not self.positions:
            raise ValueError("a found path holds at least the start position")

    def __repr__(self):
        return f"Found({list(self.positions)!r})"


class NotFound(Path):
    def __repr__(self):
        return "NotFound()"


NOT_FOUND = NotFound()


def _reconstruct(start, goal, parents):
    """Walk predecessors from goal back to start and return them in order."""
    path = [goal]
    current = goal
    while current != start:
        current = parents[current]
        path.append(current)
    path.reverse()
    return Found(path)


def find_shortest_path(leaper, start, goal, board_size):
    """
    Breadth-first search from start to goal using the leaper's moves.

    Returns Found with the positions from start to goal inclusive, or
    NOT_FOUND if the goal cannot be reached on this board.
    """
    start = Position(*start)
    goal = Position(*goal)

    queue = deque([start])
    visited = {start}
    parents = {}

    while queue:
        current = queue.popleft()
        if current == goal:
            return _reconstruct(start, goal, parents)

        for nxt in leaper.valid_moves(current, board_size):
            if nxt not in visited:
                visited.add(nxt)
                parents[nxt] = current
                queue.append(nxt)

    return NOT_FOUND

"""Board model for the gate puzzle.

A ``Board`` is the static background of a puzzle: the verbatim rows of
the map file (``map_save``) and its geometry.  It never changes once a
search starts and is shared by every state derived from it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

EMPTY = " "
WALL = "#"
PLAYER = "H"
ANY_TARGET = "G"

PIECE_LABELS = "0123456789"
TARGET_LABELS = "GIJKLMNOPQ"
ALPHABET = frozenset(EMPTY + WALL + PLAYER + PIECE_LABELS + TARGET_LABELS)

MAX_PIECES = len(PIECE_LABELS)


class Direction(StrEnum):
    UP = "u"
    DOWN = "d"
    LEFT = "l"
    RIGHT = "r"

    @property
    def delta(self) -> tuple[int, int]:
        """Unit step as ``(dx, dy)``; rows grow downwards."""
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# Expansion order; fixes tie-breaking between equally short solutions.
DIRECTIONS: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


def is_target(cell: str) -> bool:
    return cell == ANY_TARGET or "I" <= cell <= "Q"


def is_piece(cell: str) -> bool:
    return len(cell) == 1 and cell in PIECE_LABELS


def accepts(target: str, label: str) -> bool:
    """Return True if piece *label* may cover *target*.

    ``G`` takes any piece; ``I`` takes ``0``, ``J`` takes ``1`` and so on
    up to ``Q`` taking ``8``.
    """
    if target == ANY_TARGET:
        return True
    return ord(target) - ord("I") == ord(label) - ord("0")


@dataclass(frozen=True)
class Board:
    """Immutable geometry plus the original map rows."""

    rows: tuple[str, ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_text(cls, text: str) -> Board:
        """Create a board from newline-separated rows.

        Example::

            Board.from_text("0 H G\\n#####")
        """
        return cls(rows=tuple(text.split("\n")))

    # -- geometry -------------------------------------------------------------

    @property
    def lines(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def num_chars_map(self) -> int:
        return self.lines * self.width

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= y < self.lines and 0 <= x < self.width

    # -- queries --------------------------------------------------------------

    def background(self, x: int, y: int) -> str:
        """Return what lies under a piece at column *x*, row *y*.

        ``map_save`` keeps the starting piece labels verbatim; a vacated
        starting cell reads as empty floor.
        """
        cell = self.rows[y][x]
        return EMPTY if is_piece(cell) else cell

    def empty_cells(self) -> int:
        return sum(row.count(EMPTY) for row in self.rows)

    def positions(self, cell: str) -> list[tuple[int, int]]:
        """Every ``(x, y)`` where ``map_save`` holds *cell*, row-major."""
        return [
            (x, y)
            for y, row in enumerate(self.rows)
            for x, c in enumerate(row)
            if c == cell
        ]

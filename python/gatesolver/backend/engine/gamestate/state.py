"""Search node: the dynamic configuration of a puzzle in progress."""

from __future__ import annotations

from dataclasses import dataclass, field

from gatesolver.backend.models.board import PIECE_LABELS, Board


@dataclass(frozen=True)
class GateState:
    """Holds the current grid, piece and player positions, and move prefix.

    ``board`` (``map_save`` plus geometry) is shared by reference between
    a state and everything derived from it.  States are immutable, so a
    successor never aliases its parent's grid rows in a way either can
    observe.
    """

    board: Board = field(repr=False)
    grid: tuple[str, ...]
    piece_x: tuple[int, ...] = ()
    piece_y: tuple[int, ...] = ()
    player_x: int = -1
    player_y: int = -1
    soln: str = ""

    @classmethod
    def initial(cls, board: Board) -> GateState:
        """Fresh state whose grid is a copy of ``map_save``."""
        return cls(board=board, grid=board.rows)

    # -- geometry -------------------------------------------------------------

    @property
    def lines(self) -> int:
        return self.board.lines

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def num_chars_map(self) -> int:
        return self.board.num_chars_map

    @property
    def num_pieces(self) -> int:
        return len(self.piece_x)

    # -- queries --------------------------------------------------------------

    def cell(self, x: int, y: int) -> str:
        return self.grid[y][x]

    def piece_index(self, label: str) -> int | None:
        """Resolve *label* to a piece index, or ``None`` if absent."""
        if len(label) != 1 or label not in PIECE_LABELS:
            return None
        i = PIECE_LABELS.index(label)
        return i if i < self.num_pieces else None

    def piece_positions(self) -> tuple[tuple[int, int], ...]:
        return tuple(zip(self.piece_x, self.piece_y))

    def render(self) -> str:
        return "\n".join(self.grid)

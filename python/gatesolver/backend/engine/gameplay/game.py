"""Core gameplay logic: applies moves and checks the win condition."""

from __future__ import annotations

from dataclasses import replace

from gatesolver.backend.engine.gamestate.state import GateState
from gatesolver.backend.models.board import (
    EMPTY,
    Direction,
    accepts,
    is_target,
)


def _set_cell(grid: tuple[str, ...], x: int, y: int, cell: str) -> tuple[str, ...]:
    row = grid[y]
    return grid[:y] + (row[:x] + cell + row[x + 1 :],) + grid[y + 1 :]


def attempt_move(
    state: GateState, label: str, direction: Direction | str
) -> tuple[GateState, bool]:
    """Try to slide piece *label* one cell in *direction*.

    Returns ``(successor, True)`` when the move is legal, otherwise
    ``(state, False)`` with *state* itself untouched.  Raises
    ``ValueError`` for a direction outside ``u/d/l/r``.
    """
    direction = Direction(direction)
    i = state.piece_index(label)
    if i is None:
        return state, False

    px, py = state.piece_x[i], state.piece_y[i]
    dx, dy = direction.delta
    nx, ny = px + dx, py + dy
    if not state.board.in_bounds(nx, ny):
        return state, False

    # Walls, other pieces, the player and foreign targets all block.
    dest = state.cell(nx, ny)
    if dest != EMPTY and not (is_target(dest) and accepts(dest, label)):
        return state, False

    grid = _set_cell(state.grid, px, py, state.board.background(px, py))
    grid = _set_cell(grid, nx, ny, label)
    return (
        replace(
            state,
            grid=grid,
            piece_x=state.piece_x[:i] + (nx,) + state.piece_x[i + 1 :],
            piece_y=state.piece_y[:i] + (ny,) + state.piece_y[i + 1 :],
            soln=state.soln + label + direction.value,
        ),
        True,
    )


def is_winning(state: GateState) -> bool:
    """True once no target letter is left uncovered in the grid."""
    return not any(is_target(c) for row in state.grid for c in row)


class GamePlay:
    """Replays moves on a single puzzle, counting the accepted ones."""

    def __init__(self, state: GateState) -> None:
        self.state = state
        self.moves: int = 0

    @classmethod
    def from_state(cls, state: GateState) -> "GamePlay":
        return cls(state)

    # -- movement -------------------------------------------------------------

    def move(self, label: str, direction: Direction | str) -> bool:
        """Slide piece *label* one cell.  Returns True if the move was valid."""
        self.state, moved = attempt_move(self.state, label, direction)
        if moved:
            self.moves += 1
        return moved

    def play(self, path: str) -> None:
        """Apply every ``(label, direction)`` pair of *path* in order.

        Raises ``ValueError`` if *path* is malformed or a move is rejected.
        """
        if len(path) % 2:
            raise ValueError(f"Move path has odd length {len(path)}.")
        for k in range(0, len(path), 2):
            label, direction = path[k], path[k + 1]
            if not self.move(label, direction):
                raise ValueError(
                    f"Move {k // 2} ({label}{direction}) was rejected."
                )

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return is_winning(self.state)

"""Map file loading and validation.

A map file is plain text, one grid row per line.  Loading happens in
four steps, always in this order::

    state = make_map(path)
    map_check(state)
    state = find_player(state)
    state = find_pieces(state)

``load_state`` runs all four.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from gatesolver.backend.engine.gamestate.state import GateState
from gatesolver.backend.models.board import (
    ALPHABET,
    MAX_PIECES,
    PIECE_LABELS,
    PLAYER,
    Board,
    is_piece,
)

logger = logging.getLogger(__name__)


class MapValidationError(ValueError):
    """Raised when a map is not a well-formed puzzle."""


def parse_rows(text: str) -> tuple[str, ...]:
    """Split map text into rows, dropping line terminators and trailing blanks."""
    rows = [line.rstrip("\r") for line in text.split("\n")]
    while rows and rows[-1] == "":
        rows.pop()
    return tuple(rows)


def make_map(path: str | Path) -> GateState:
    """Read *path* and return the initial state with a verbatim ``map_save``."""
    text = Path(path).read_text(encoding="utf-8")
    return state_from_text(text)


def state_from_text(text: str) -> GateState:
    board = Board(rows=parse_rows(text))
    logger.debug("Loaded %d x %d map", board.lines, board.width)
    return GateState.initial(board)


def map_check(state: GateState) -> None:
    """Validate shape and alphabet; raise ``MapValidationError`` on failure."""
    rows = state.board.rows
    if not rows or not rows[0]:
        raise MapValidationError("Map is empty.")

    width = len(rows[0])
    for y, row in enumerate(rows):
        if len(row) != width:
            raise MapValidationError(
                f"Row {y} has {len(row)} cells, expected {width}."
            )
        for x, c in enumerate(row):
            if c not in ALPHABET:
                raise MapValidationError(
                    f"Invalid character {c!r} at row {y}, column {x}."
                )

    players = state.board.positions(PLAYER)
    if len(players) != 1:
        raise MapValidationError(
            f"Expected exactly one player {PLAYER!r}, found {len(players)}."
        )

    labels = [c for row in rows for c in row if is_piece(c)]
    if len(labels) > MAX_PIECES:
        raise MapValidationError(
            f"At most {MAX_PIECES} pieces are supported, found {len(labels)}."
        )
    if len(set(labels)) != len(labels):
        raise MapValidationError("Each piece label may appear only once.")
    if sorted(labels) != list(PIECE_LABELS[: len(labels)]):
        raise MapValidationError(
            "Piece labels must run consecutively from '0', "
            f"got {''.join(sorted(labels))!r}."
        )


def find_player(state: GateState) -> GateState:
    (x, y), = state.board.positions(PLAYER)
    return replace(state, player_x=x, player_y=y)


def find_pieces(state: GateState) -> GateState:
    xs: list[int] = []
    ys: list[int] = []
    for label in PIECE_LABELS:
        found = state.board.positions(label)
        if not found:
            break
        x, y = found[0]
        xs.append(x)
        ys.append(y)
    logger.debug("Found %d pieces", len(xs))
    return replace(state, piece_x=tuple(xs), piece_y=tuple(ys))


def load_state(path: str | Path) -> GateState:
    """Load, validate, and locate the player and pieces of the map at *path*."""
    state = make_map(path)
    map_check(state)
    state = find_player(state)
    return find_pieces(state)


def load_text(text: str) -> GateState:
    """Same as ``load_state`` for in-memory map text."""
    state = state_from_text(text)
    map_check(state)
    state = find_player(state)
    return find_pieces(state)

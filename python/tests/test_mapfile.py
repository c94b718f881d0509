"""Map loading and validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from gatesolver.backend.models.mapfile import (
    MapValidationError,
    find_pieces,
    find_player,
    load_state,
    load_text,
    make_map,
    map_check,
    parse_rows,
    state_from_text,
)

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"


def test_parse_rows_strips_terminators() -> None:
    assert parse_rows("0 G\r\n#H#\n\n") == ("0 G", "#H#")


def test_make_map_keeps_verbatim_map_save(tmp_path: Path) -> None:
    path = tmp_path / "m.txt"
    path.write_text("0  G\n###H\n")
    state = make_map(path)
    assert state.board.rows == ("0  G", "###H")
    assert state.grid == state.board.rows
    assert state.lines == 2
    assert state.num_chars_map == 8
    assert state.soln == ""


def test_load_state_runs_every_step() -> None:
    state = load_state(FIXTURES_DIR / "maps" / "two_lanes.txt")
    assert (state.player_x, state.player_y) == (3, 4)
    assert state.num_pieces == 2
    assert state.piece_positions() == ((1, 1), (1, 3))


def test_find_player_and_pieces_in_order() -> None:
    state = state_from_text("2 1\nH 0")
    map_check(state)
    state = find_pieces(find_player(state))
    assert (state.player_x, state.player_y) == (0, 1)
    assert state.piece_x == (2, 2, 0)
    assert state.piece_y == (1, 0, 0)


def test_no_pieces_is_allowed() -> None:
    state = load_text("H G")
    assert state.num_pieces == 0


@pytest.mark.parametrize(
    "text, message",
    [
        ("", "empty"),
        ("0 G\n#H", "Row 1"),
        ("0 X\n#H#", "Invalid character"),
        ("0 G\n###", "exactly one player"),
        ("0HG\n#H#", "exactly one player"),
        ("00G\n#H#", "only once"),
        ("0 2\n#H#", "consecutively"),
        ("1 G\n#H#", "consecutively"),
        ("0123456789\n#H0000000#", "At most 10"),
    ],
    ids=[
        "empty",
        "ragged",
        "alphabet",
        "no-player",
        "two-players",
        "duplicate-label",
        "gap-in-labels",
        "not-from-zero",
        "too-many",
    ],
)
def test_map_check_rejects(text: str, message: str) -> None:
    with pytest.raises(MapValidationError, match=message):
        map_check(state_from_text(text))


def test_validation_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        load_text("0 G")


def test_missing_file_raises_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        load_state(tmp_path / "nope.txt")

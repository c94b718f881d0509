"""Command-line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from gatesolver.backend.engine.gamesolver.frontier import Frontier
from gatesolver.backend.engine.gamestate import GateState
from gatesolver.frontend.cli.rich import app as rich_app
from gatesolver.main import app

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"

runner = CliRunner()

_LABELS = [
    "Solution path",
    "Execution time",
    "Expanded nodes",
    "Generated nodes",
    "Duplicated nodes",
    "Number of pieces in the puzzle",
    "Number of steps in solution",
    "Number of empty spaces",
    "Auxiliary memory usage (bytes)",
    "Number of nodes expanded per second",
]


def _stats(output: str) -> dict[str, str]:
    stats: dict[str, str] = {}
    for line in output.splitlines():
        key, sep, value = line.partition(": ")
        if sep and key in _LABELS:
            stats[key] = value
    return stats


def test_vanilla_block_in_order() -> None:
    result = runner.invoke(app, [str(FIXTURES_DIR / "maps" / "corridor.txt")])
    assert result.exit_code == 0, result.output

    order = [
        line.partition(":")[0]
        for line in result.output.splitlines()
        if line.partition(":")[0] in _LABELS
    ]
    assert order == _LABELS

    stats = _stats(result.output)
    assert stats["Solution path"] == "0r0r0r"
    assert stats["Number of steps in solution"] == "3"
    assert stats["Number of pieces in the puzzle"] == "1"
    assert stats["Number of empty spaces"] == "2"


def test_unsolvable_still_exits_zero() -> None:
    result = runner.invoke(app, [str(FIXTURES_DIR / "maps" / "walled.txt")])
    assert result.exit_code == 0, result.output
    assert "Solution path: \n" in result.output
    assert "Number of steps in solution: 0" in result.output


def test_no_dedup_reports_zero_memory() -> None:
    result = runner.invoke(
        app, [str(FIXTURES_DIR / "maps" / "blocker.txt"), "--no-dedup"]
    )
    assert result.exit_code == 0, result.output
    assert _stats(result.output)["Auxiliary memory usage (bytes)"] == "0"


@pytest.mark.parametrize("backend", ["radix", "hash"])
def test_visited_backends(backend: str) -> None:
    result = runner.invoke(
        app, [str(FIXTURES_DIR / "maps" / "lettered.txt"), "--visited", backend]
    )
    assert result.exit_code == 0, result.output
    assert _stats(result.output)["Solution path"] == "0r0r"


def test_rich_frontend() -> None:
    result = runner.invoke(
        app, [str(FIXTURES_DIR / "maps" / "blocker.txt"), "-f", "rich"]
    )
    assert result.exit_code == 0, result.output
    assert "1r1r" in result.output
    assert "Solved" in result.output


def test_invalid_map_exits_nonzero(tmp_path: Path) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("0 X\n#H#\n")
    result = runner.invoke(app, [str(path)])
    assert result.exit_code == 1


def test_missing_map_exits_nonzero(tmp_path: Path) -> None:
    result = runner.invoke(app, [str(tmp_path / "missing.txt")])
    assert result.exit_code == 1


def test_rich_replay(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(rich_app.time, "sleep", lambda _: None)
    result = runner.invoke(
        app,
        [str(FIXTURES_DIR / "maps" / "corridor.txt"), "-f", "rich", "--replay"],
    )
    assert result.exit_code == 0, result.output
    assert "Move 1/3" in result.output
    assert "Move 3/3" in result.output
    assert "Solved" in result.output


def test_out_of_memory_exits_nonzero(monkeypatch: pytest.MonkeyPatch) -> None:
    original = Frontier.enqueue

    def enqueue(self: Frontier, state: GateState) -> None:
        if len(self) >= 1:
            raise MemoryError
        original(self, state)

    monkeypatch.setattr(Frontier, "enqueue", enqueue)
    result = runner.invoke(app, [str(FIXTURES_DIR / "maps" / "two_lanes.txt")])
    assert result.exit_code == 1
    assert "Solution path" not in result.output

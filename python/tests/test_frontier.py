"""FIFO frontier."""

from __future__ import annotations

from gatesolver.backend.engine.gameplay import attempt_move
from gatesolver.backend.engine.gamesolver.frontier import Frontier
from gatesolver.backend.models.mapfile import load_text


def test_fifo_order() -> None:
    start = load_text("  0  \n  H G")
    left, _ = attempt_move(start, "0", "l")
    right, _ = attempt_move(start, "0", "r")

    frontier = Frontier()
    assert not frontier
    for state in (start, left, right):
        frontier.enqueue(state)
    assert len(frontier) == 3
    assert frontier.dequeue() is start
    assert frontier.dequeue() is left
    assert frontier.dequeue() is right
    assert frontier.dequeue() is None


def test_drain_releases_everything() -> None:
    frontier = Frontier()
    state = load_text("0 H")
    for _ in range(4):
        frontier.enqueue(state)
    assert frontier.drain() == 4
    assert len(frontier) == 0
    assert frontier.dequeue() is None

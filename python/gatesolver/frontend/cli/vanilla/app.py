"""Vanilla terminal frontend: plain ``print`` of the statistics block."""

from __future__ import annotations

from gatesolver.backend.engine.gamesolver import SearchResult


def format_stats(result: SearchResult) -> list[str]:
    """Return the statistics block, one line per figure, in report order."""
    s = result.stats
    return [
        f"Solution path: {result.soln}",
        f"Execution time: {s.elapsed:.6f}",
        f"Expanded nodes: {s.expanded}",
        f"Generated nodes: {s.generated}",
        f"Duplicated nodes: {s.duplicates}",
        f"Number of pieces in the puzzle: {s.num_pieces}",
        f"Number of steps in solution: {result.steps}",
        f"Number of empty spaces: {s.empty_cells}",
        f"Auxiliary memory usage (bytes): {s.memory_usage}",
        f"Number of nodes expanded per second: {s.expanded_per_second:.6f}",
    ]


def run(result: SearchResult) -> None:
    for line in format_stats(result):
        print(line)

"""Breadth-first gate puzzle solver."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field, replace

from gatesolver.backend.engine.gameplay.game import attempt_move, is_winning
from gatesolver.backend.engine.gamesolver.config import SearchConfig, VisitedBackend
from gatesolver.backend.engine.gamesolver.encoding import StateEncoder
from gatesolver.backend.engine.gamesolver.frontier import Frontier
from gatesolver.backend.engine.gamesolver.visited import (
    HashVisitedSet,
    NullVisitedSet,
    RadixTree,
    VisitedSet,
)
from gatesolver.backend.engine.gamestate.state import GateState
from gatesolver.backend.models.board import DIRECTIONS, PIECE_LABELS

logger = logging.getLogger(__name__)


@dataclass
class SearchStats:
    """Counters for one search.

    ``generated`` counts ``attempt_move`` calls only, so the root state is
    not included; ``enqueued`` does include it, giving
    ``enqueued + duplicates == generated + 1``.  Reports that count the
    root as generated show one more node, and ``expanded_per_second`` is
    ``expanded / elapsed`` rather than ``(expanded + 1) / elapsed``.
    """

    expanded: int = 0
    generated: int = 0
    enqueued: int = 0
    duplicates: int = 0
    elapsed: float = 0.0
    memory_usage: int = 0
    num_pieces: int = 0
    empty_cells: int = 0

    @property
    def expanded_per_second(self) -> float:
        if self.elapsed <= 0:
            return 0.0
        return self.expanded / self.elapsed


@dataclass
class SearchResult:
    soln: str
    solved: bool
    stats: SearchStats
    winning_state: GateState | None = field(default=None, repr=False)

    @property
    def steps(self) -> int:
        return len(self.soln) // 2


def make_visited(config: SearchConfig, bits: int) -> VisitedSet:
    if not config.dedup:
        return NullVisitedSet()
    if VisitedBackend(config.visited) is VisitedBackend.hash:
        return HashVisitedSet()
    return RadixTree(bits)


class Solver:
    """Explores states in FIFO order until one wins or none are left.

    Pieces are tried in ascending label order and directions in
    ``u, d, l, r`` order, so the shortest solution returned is always the
    same one.
    """

    def __init__(self, config: SearchConfig | None = None) -> None:
        self.config = config or SearchConfig()

    def solve(self, initial: GateState) -> SearchResult:
        """Return the move path that wins *initial*, or ``""`` if none exists."""
        stats = SearchStats(
            num_pieces=initial.num_pieces,
            empty_cells=initial.board.empty_cells(),
        )
        encoder = StateEncoder(initial)
        visited = make_visited(self.config, encoder.bits)
        frontier = Frontier()
        labels = PIECE_LABELS[: initial.num_pieces]
        progress_every = self.config.progress_every

        logger.info(
            "Searching %d x %d map with %d pieces (dedup=%s)",
            initial.lines,
            initial.width,
            initial.num_pieces,
            self.config.dedup,
        )

        start = time.perf_counter()
        winner: GateState | None = None
        try:
            root = replace(initial, soln="")
            frontier.enqueue(root)
            stats.enqueued += 1
            visited.insert(encoder.encode(root))

            while frontier:
                n = frontier.dequeue()
                stats.expanded += 1

                if is_winning(n):
                    winner = n
                    break

                if progress_every and stats.expanded % progress_every == 0:
                    logger.info(
                        "expanded=%d frontier=%d depth=%d",
                        stats.expanded,
                        len(frontier),
                        len(n.soln) // 2,
                    )

                for label in labels:
                    for direction in DIRECTIONS:
                        m, moved = attempt_move(n, label, direction)
                        stats.generated += 1
                        if not moved:
                            stats.duplicates += 1
                            continue
                        if not visited.insert(encoder.encode(m)):
                            stats.duplicates += 1
                            continue
                        frontier.enqueue(m)
                        stats.enqueued += 1
        except MemoryError:
            released = frontier.drain()
            visited.clear()
            logger.error(
                "Out of memory after %d expansions; released %d queued states",
                stats.expanded,
                released,
            )
            raise

        stats.elapsed = time.perf_counter() - start
        stats.memory_usage = visited.memory_usage()
        frontier.drain()
        visited.clear()

        if winner is None:
            logger.warning(
                "No solution: frontier exhausted after %d expansions",
                stats.expanded,
            )
            return SearchResult(soln="", solved=False, stats=stats)

        logger.info(
            "Solved in %d moves after %d expansions (%.3fs)",
            len(winner.soln) // 2,
            stats.expanded,
            stats.elapsed,
        )
        return SearchResult(
            soln=winner.soln, solved=True, stats=stats, winning_state=winner
        )

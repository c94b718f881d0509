"""Gate puzzle solver.

Usage::

    gatesolver maps/level1.txt              # plain statistics block
    gatesolver maps/level1.txt -f rich      # Rich tables + final board
    gatesolver maps/level1.txt -f rich --replay
    gatesolver maps/level1.txt --no-dedup   # plain BFS, no visited set
"""

from __future__ import annotations

import importlib
import logging
from enum import StrEnum
from pathlib import Path

import typer

from gatesolver.backend.engine.gamesolver import SearchConfig, Solver, VisitedBackend
from gatesolver.backend.models.mapfile import MapValidationError, load_state
from gatesolver.logging_utils import LOG_LEVELS, setup_logger

logger = logging.getLogger("gatesolver")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


class LogLevel(StrEnum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"
    critical = "critical"


_RUNNERS = {
    Frontend.vanilla: "gatesolver.frontend.cli.vanilla.app",
    Frontend.rich: "gatesolver.frontend.cli.rich.app",
}


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    map_path: Path = typer.Argument(
        ...,
        help="Map file to solve.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="How to present the result.",
    ),
    dedup: bool = typer.Option(
        True, "--dedup/--no-dedup",
        help="Skip states that were already visited.",
    ),
    visited: VisitedBackend = typer.Option(
        VisitedBackend.radix, "--visited",
        help="Visited-set structure used when dedup is on.",
    ),
    replay: bool = typer.Option(
        False, "--replay",
        help="Animate the solution (rich frontend only).",
    ),
    progress_every: int = typer.Option(
        0, "--progress-every",
        min=0,
        help="Log progress every N expansions at info level (0 = off).",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        help="Logging threshold for messages on stderr.",
    ),
) -> None:
    """Solve a gate puzzle with breadth-first search."""
    setup_logger("gatesolver", LOG_LEVELS[log_level])

    try:
        initial = load_state(map_path)
    except (MapValidationError, OSError) as exc:
        logger.error("Cannot load %s: %s", map_path, exc)
        raise typer.Exit(code=1) from exc

    config = SearchConfig(
        dedup=dedup,
        visited=visited,
        progress_every=progress_every,
    )
    try:
        result = Solver(config).solve(initial)
    except MemoryError as exc:
        logger.critical("Search ran out of memory.")
        raise typer.Exit(code=1) from exc

    mod = importlib.import_module(_RUNNERS[frontend])
    if frontend is Frontend.rich:
        mod.run(initial, result, replay=replay)
    else:
        mod.run(result)


if __name__ == "__main__":
    app()

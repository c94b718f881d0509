"""Rich terminal frontend: tables, colours, and an animated replay.

Shows the same figures as the vanilla frontend, laid out in a table,
followed by the board the solution ends on.
"""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from gatesolver.backend.engine.gameplay import GamePlay
from gatesolver.backend.engine.gamesolver import SearchResult
from gatesolver.backend.engine.gamestate import GateState
from gatesolver.backend.models.board import (
    PLAYER,
    WALL,
    is_piece,
    is_target,
)

console = Console()


# -- board rendering ----------------------------------------------------------


def _style(cell: str) -> str:
    if cell == WALL:
        return "dim"
    if cell == PLAYER:
        return "bold magenta"
    if is_piece(cell):
        return "bold cyan"
    if is_target(cell):
        return "bold yellow"
    return ""


def render_board(state: GateState) -> Text:
    """Return the grid as styled text, one character per cell."""
    text = Text()
    for y, row in enumerate(state.grid):
        if y:
            text.append("\n")
        for c in row:
            text.append("·" if c == " " else c, style=_style(c))
    return text


def _board_panel(state: GateState, title: str, border: str) -> Panel:
    return Panel(
        Align.center(render_board(state)),
        title=title,
        border_style=border,
        padding=(1, 2),
    )


# -- statistics ---------------------------------------------------------------


def render_stats(result: SearchResult) -> Table:
    s = result.stats
    table = Table(
        show_header=False,
        box=rich.box.ROUNDED,
        border_style="bright_blue",
    )
    table.add_column(style="dim")
    table.add_column(justify="right", style="bold yellow")

    table.add_row("Solution path", result.soln or "[dim](none)[/dim]")
    table.add_row("Execution time", f"{s.elapsed:.6f}s")
    table.add_row("Expanded nodes", str(s.expanded))
    table.add_row("Generated nodes", str(s.generated))
    table.add_row("Duplicated nodes", str(s.duplicates))
    table.add_row("Pieces", str(s.num_pieces))
    table.add_row("Steps", str(result.steps))
    table.add_row("Empty spaces", str(s.empty_cells))
    table.add_row("Auxiliary memory (bytes)", str(s.memory_usage))
    table.add_row("Expanded per second", f"{s.expanded_per_second:.1f}")
    return table


# -- replay -------------------------------------------------------------------


def _replay(initial: GateState, soln: str, delay: float) -> None:
    game = GamePlay.from_state(initial)
    total = len(soln) // 2
    for k in range(total):
        label, direction = soln[2 * k], soln[2 * k + 1]
        game.move(label, direction)
        console.clear()

        progress = Text()
        progress.append(f"  Move {k + 1}/{total} ", style="bold cyan")
        progress.append(f"({label}{direction})", style="dim")

        console.print()
        console.print(
            Align.center(
                _board_panel(game.state, "[bold cyan]Replay[/bold cyan]", "cyan")
            )
        )
        console.print(Align.center(progress))
        time.sleep(delay)


# -- public entry point -------------------------------------------------------


def run(
    initial: GateState,
    result: SearchResult,
    replay: bool = False,
    delay: float = 0.15,
) -> None:
    """Print the statistics table and final board; optionally replay first."""
    if replay and result.solved:
        _replay(initial, result.soln, delay)

    final = result.winning_state or initial
    if result.solved:
        title = "[bold green]Solved[/bold green]"
        border = "bold green"
    else:
        title = "[bold red]No solution[/bold red]"
        border = "red"

    console.print()
    console.print(
        Align.center(
            Group(
                Align.center(render_stats(result)),
                Align.center(_board_panel(final, title, border)),
            )
        )
    )

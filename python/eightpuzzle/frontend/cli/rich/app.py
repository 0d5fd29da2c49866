"""Rich terminal frontend with tables, colours and panels.

Uses the ``rich`` library for styled output while sharing the same
backend as the vanilla CLI.  Each step of the solution is drawn as a
framed grid, tiles already in their goal cell highlighted in green.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from eightpuzzle.backend.engine.gamesolver import SearchResult, Solver
from eightpuzzle.backend.models.board import Board

console = Console()
err_console = Console(stderr=True)


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(len(board.rows)):
        table.add_column(width=2, justify="center")

    for r, row in enumerate(board.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


def _step_panel(board: Board, index: int, last: int) -> Panel:
    if index == 0:
        title = "[bold cyan]Initial board[/bold cyan]"
        style = "cyan"
    elif index == last:
        title = "[bold green]Goal state[/bold green]"
        style = "bold green"
    else:
        title = (
            f"[bold yellow]Move {board.moves_made}[/bold yellow] "
            f"[dim]({board.direction.value})[/dim]"
        )
        style = "bright_blue"
    return Panel(
        Align.center(_render_board(board)),
        title=title,
        border_style=style,
        padding=(0, 2),
        expand=False,
    )


def _summary(result: SearchResult) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(result.goal.moves_made), style="bold yellow")
    stats.append("    Expanded: ", style="dim")
    stats.append(str(result.expanded), style="bold yellow")
    stats.append("    Generated: ", style="dim")
    stats.append(str(result.generated), style="bold yellow")
    stats.append("    Pruned: ", style="dim")
    stats.append(str(result.pruned), style="bold yellow")
    stats.append("    Peak frontier: ", style="dim")
    stats.append(str(result.peak_frontier), style="bold yellow")
    return stats


# -- public entry point -------------------------------------------------------


def run(board: Board) -> int:
    """Solve *board* and draw the styled transcript.  Returns the exit code."""
    if board.is_at_goal():
        console.print("[green]Looks like board is already at the goal state![/green]")
        return 0

    result = Solver.search(board)
    if not result.solved:
        err_console.print("[red]This board is not solvable[/red]")
        return 1

    steps = result.path
    panels = [_step_panel(b, i, len(steps) - 1) for i, b in enumerate(steps)]

    console.print()
    console.print(
        Panel(
            Group(*(Align.center(p) for p in panels)),
            title="[bold]S O L U T I O N[/bold]",
            subtitle=f"goal: blank {board.goal.value}",
            border_style="bright_blue",
            padding=(1, 2),
        )
    )
    console.print(Align.center(_summary(result)))
    return 0

"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input parsing and backend as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from eightpuzzle.engine.gamesolver import Solver
from eightpuzzle.engine.heuristic import manhattan_distance
from eightpuzzle.frontend.cli.input_handler import read_board as _read_board
from eightpuzzle.models.board import Board
from eightpuzzle.models.result import Found

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, goal: Board) -> Table:
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
            elif goal.get_tile(r, c) == val:
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


def _board_panel(board: Board, goal: Board, title: str) -> Panel:
    score = Text()
    score.append("h = ", style="dim")
    score.append(str(manhattan_distance(board, goal)), style="bold yellow")

    return Panel(
        Group(Align.center(_render_board(board, goal)), Align.center(score)),
        title=title,
        border_style="cyan",
        padding=(0, 2),
    )


# -- public entry points ------------------------------------------------------


def read_board(label: str) -> Board:
    console.print(
        f"  [bold cyan]{label} state[/bold cyan] "
        "[dim](3×3 matrix, use 0 for the empty space)[/dim]"
    )
    return _read_board(console.input, label.lower())


def run(initial: Board, goal: Board, max_expansions: int | None = None) -> bool:
    """Solve and print every board along the path.  Returns True if found."""
    console.print()
    console.print(
        Align.center(_board_panel(initial, goal, "[bold]Initial[/bold]"))
    )
    console.print(Align.center(_board_panel(goal, goal, "[bold]Goal[/bold]")))

    with console.status("[cyan]Searching…[/cyan]"):
        result = Solver.solve(initial, goal, max_expansions=max_expansions)

    if not isinstance(result, Found):
        console.print(
            f"  [bold red]No solution found.[/bold red] "
            f"[dim]({result.expanded} boards expanded)[/dim]"
        )
        return False

    boards = Solver.replay(initial, result.path)
    for i, (move, board) in enumerate(zip(result.path, boards[1:]), 1):
        title = (
            f"[bold cyan]Move {i}/{len(result.path)}[/bold cyan] "
            f"[dim]({move.value})[/dim]"
        )
        console.print(Align.center(_board_panel(board, goal, title)))

    console.print(
        f"  [bold green]Solution found in {len(result.path)} moves.[/bold green] "
        f"[dim]({result.expanded} boards expanded)[/dim]"
    )
    return True

"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes) for rendering and ``input`` for
reading boards.
"""

from __future__ import annotations

from eightpuzzle.engine.gamesolver import Solver
from eightpuzzle.frontend.cli.input_handler import read_board as _read_board
from eightpuzzle.models.board import Board
from eightpuzzle.models.result import Found


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, goal: Board) -> str:
    """Return an ANSI-coloured text representation of the board.

    Tiles already on their goal cell are shown in green.
    """
    sep = "+" + ("---+" * len(board.rows))

    lines: list[str] = [sep]
    for r, row in enumerate(board.rows):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append(f"{_DIM} · {_R}")
            elif goal.get_tile(r, c) == val:
                cells.append(f"{_G} {val} {_R}")
            else:
                cells.append(f" {val} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


# -- public entry points ------------------------------------------------------


def read_board(label: str) -> Board:
    print(f"  {_C}{label} state{_R} (3×3 matrix, use 0 for the empty space):")
    return _read_board(input, label.lower())


def run(initial: Board, goal: Board, max_expansions: int | None = None) -> bool:
    """Solve and print every board along the path.  Returns True if found."""
    print()
    print(f"  {_C}=== 8-Puzzle ==={_R}")
    print()
    print(_render_board(initial, goal))
    print()

    result = Solver.solve(initial, goal, max_expansions=max_expansions)

    if not isinstance(result, Found):
        print(f"  {_Y}No solution found.{_R}  ({result.expanded} boards expanded)")
        return False

    boards = Solver.replay(initial, result.path)
    for i, (move, board) in enumerate(zip(result.path, boards[1:]), 1):
        print(f"  Move {i}/{len(result.path)}  ({move.value})")
        print(_render_board(board, goal))
        print()

    print(
        f"  {_G}Solution found in {len(result.path)} moves.{_R}  "
        f"({result.expanded} boards expanded)"
    )
    return True

"""8-Puzzle Solver.

Usage::

    eightpuzzle                                  # type both matrices
    eightpuzzle -i "1 2 3 4 0 6 7 5 8" -g "1 2 3 4 5 6 7 8 0"
    eightpuzzle -f rich --random 25              # scrambled canonical goal
    eightpuzzle --file puzzle.json -v            # load pair, debug logging
"""

import importlib
import logging
import random
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from eightpuzzle.engine.gamegenerator import GameGenerator
from eightpuzzle.engine.gamesolver import SearchLimitExceeded
from eightpuzzle.frontend.cli.input_handler import parse_board
from eightpuzzle.models.board import Board, InvalidBoardError
from eightpuzzle.models.puzzlefile import PuzzleFile

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_INVALID = 2


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "eightpuzzle.frontend.cli.vanilla.app",
    Frontend.rich: "eightpuzzle.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _check_sources(
    initial: Optional[str],
    goal: Optional[str],
    file: Optional[Path],
    random_steps: Optional[int],
) -> None:
    """Reject board sources that would silently override one another."""
    if file is not None and (initial or goal or random_steps is not None):
        raise typer.BadParameter(
            "cannot be combined with -i/--initial, -g/--goal or --random.",
            param_hint="--file",
        )
    if random_steps is not None and initial:
        raise typer.BadParameter(
            "generates the initial board; drop -i/--initial.",
            param_hint="--random",
        )


def _resolve_boards(
    mod,
    initial: Optional[str],
    goal: Optional[str],
    file: Optional[Path],
    random_steps: Optional[int],
    seed: Optional[int],
) -> tuple[Board, Board]:
    if file is not None:
        puzzle = PuzzleFile.load(file)
        return puzzle.initial, puzzle.goal

    if random_steps is not None:
        goal_board = parse_board(goal) if goal else GameGenerator.solved()
        start = GameGenerator.scramble(goal_board, random_steps, random.Random(seed))
        return start, goal_board

    start = parse_board(initial) if initial else mod.read_board("Initial")
    goal_board = parse_board(goal) if goal else mod.read_board("Goal")
    return start, goal_board


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Frontend used to read boards and print the solution.",
    ),
    initial: Optional[str] = typer.Option(
        None, "-i", "--initial",
        help='Initial board, nine symbols row-major, e.g. "1 2 3 4 0 6 7 5 8".',
    ),
    goal: Optional[str] = typer.Option(
        None, "-g", "--goal",
        help="Goal board in the same format as --initial.",
    ),
    file: Optional[Path] = typer.Option(
        None, "--file",
        exists=True, dir_okay=False,
        help='JSON file with "initial" and "goal" 3×3 matrices.',
    ),
    random_steps: Optional[int] = typer.Option(
        None, "--random",
        min=1,
        help="Scramble the goal this many moves to get the initial board.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random seed for --random.",
    ),
    max_expansions: Optional[int] = typer.Option(
        None, "--max-expansions",
        min=1,
        help="Give up after expanding this many boards.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Solve an 8-puzzle with greedy best-first search."""
    _check_sources(initial, goal, file, random_steps)
    _configure_logging(verbose)
    mod = importlib.import_module(_RUNNERS[frontend])

    try:
        start, goal_board = _resolve_boards(
            mod, initial, goal, file, random_steps, seed
        )
        found = mod.run(start, goal_board, max_expansions=max_expansions)
    except (InvalidBoardError, SearchLimitExceeded) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(EXIT_INVALID)
    except EOFError:
        typer.echo("Error: input ended before a full board was read.", err=True)
        raise typer.Exit(EXIT_INVALID)

    raise typer.Exit(EXIT_FOUND if found else EXIT_NOT_FOUND)


if __name__ == "__main__":
    app()

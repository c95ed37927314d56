"""8-puzzle solver."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from eightpuzzle.engine.gamesolver.search import Search
from eightpuzzle.engine.movegen import MoveGenerator
from eightpuzzle.models.board import Board, Move
from eightpuzzle.models.result import Found, SolveResult

logger = logging.getLogger(__name__)


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(
        initial: Board, goal: Board, *, max_expansions: int | None = None
    ) -> SolveResult:
        """Search from *initial* to *goal*.

        Returns ``Found(path)`` with the blank moves that reach *goal*, or
        ``NotFound()`` once every board reachable from *initial* has been
        expanded. The path is not guaranteed to be the shortest one.
        """
        result = Search(initial, goal).run(max_expansions=max_expansions)
        if isinstance(result, Found):
            logger.debug("Found %d-move path", len(result.path))
        else:
            logger.debug("No path after %d expansions", result.expanded)
        return result

    @staticmethod
    def hint(initial: Board, goal: Board) -> Move | None:
        """Return the first move of a solution, or ``None`` if solved / unsolvable."""
        if initial == goal:
            return None

        result = Solver.solve(initial, goal)
        if isinstance(result, Found) and result.path:
            return result.path[0]
        return None

    @staticmethod
    def replay(initial: Board, path: Iterable[Move]) -> list[Board]:
        """Return every board along *path*, starting with *initial*.

        Raises ``InvalidMoveError`` if a move in *path* is not legal where
        it is applied.
        """
        boards = [initial]
        for move in path:
            boards.append(MoveGenerator.apply_move(boards[-1], move))
        return boards

    @staticmethod
    def is_solvable(initial: Board, goal: Board) -> bool:
        """Return True if *goal* is reachable from *initial*.

        On a 3×3 board every blank move keeps the parity of the tile
        inversion count, and boards of equal parity are mutually reachable.
        """
        return _inversions(initial) % 2 == _inversions(goal) % 2


def _inversions(board: Board) -> int:
    flat = [v for v in board.cells if v != 0]
    inversions = 0
    for i in range(len(flat)):
        for j in range(i + 1, len(flat)):
            if flat[i] > flat[j]:
                inversions += 1
    return inversions

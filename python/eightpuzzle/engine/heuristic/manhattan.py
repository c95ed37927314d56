"""Manhattan-distance heuristic."""

from __future__ import annotations

from eightpuzzle.models.board import SIZE, Board

# Row/column of every flat cell index, computed once.
_ROW = tuple(i // SIZE for i in range(SIZE * SIZE))
_COL = tuple(i % SIZE for i in range(SIZE * SIZE))


class ManhattanHeuristic:
    """Scores boards against a fixed *goal*.

    The score is the sum, over tiles 1-8, of the grid distance between a
    tile's cell and its cell in the goal. The blank is ignored, so the score
    is 0 exactly when the board equals the goal.
    """

    def __init__(self, goal: Board) -> None:
        self.goal = goal
        # _target[symbol] -> flat index of that symbol in the goal
        target = [0] * (SIZE * SIZE)
        for i, v in enumerate(goal.cells):
            target[v] = i
        self._target = tuple(target)

    def __call__(self, board: Board) -> int:
        total = 0
        target = self._target
        for i, v in enumerate(board.cells):
            if v == 0:
                continue
            t = target[v]
            total += abs(_ROW[i] - _ROW[t]) + abs(_COL[i] - _COL[t])
        return total


def manhattan_distance(board: Board, goal: Board) -> int:
    """Return the Manhattan distance of *board* from *goal*."""
    return ManhattanHeuristic(goal)(board)

from eightpuzzle.models.board import SIZE, Board, InvalidBoardError, Move
from eightpuzzle.models.puzzlefile import PuzzleFile
from eightpuzzle.models.result import Found, NotFound, SolveResult

__all__ = [
    "SIZE",
    "Board",
    "Found",
    "InvalidBoardError",
    "Move",
    "NotFound",
    "PuzzleFile",
    "SolveResult",
]

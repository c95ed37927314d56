from eightpuzzle.engine.gamegenerator import GameGenerator
from eightpuzzle.engine.gamesolver import Search, SearchLimitExceeded, SearchStatus, Solver
from eightpuzzle.engine.heuristic import ManhattanHeuristic, manhattan_distance
from eightpuzzle.engine.movegen import InvalidMoveError, MoveGenerator

__all__ = [
    "GameGenerator",
    "InvalidMoveError",
    "ManhattanHeuristic",
    "MoveGenerator",
    "Search",
    "SearchLimitExceeded",
    "SearchStatus",
    "Solver",
    "manhattan_distance",
]

from eightpuzzle.engine.gamesolver.search import (
    Search,
    SearchLimitExceeded,
    SearchStatus,
)
from eightpuzzle.engine.gamesolver.solver import Solver

__all__ = ["Search", "SearchLimitExceeded", "SearchStatus", "Solver"]

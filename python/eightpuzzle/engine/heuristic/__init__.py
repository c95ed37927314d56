from eightpuzzle.engine.heuristic.manhattan import ManhattanHeuristic, manhattan_distance

__all__ = ["ManhattanHeuristic", "manhattan_distance"]

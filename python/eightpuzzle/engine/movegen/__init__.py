from eightpuzzle.engine.movegen.generator import InvalidMoveError, MoveGenerator

__all__ = ["InvalidMoveError", "MoveGenerator"]

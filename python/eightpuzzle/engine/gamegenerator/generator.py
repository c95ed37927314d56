"""Generates reachable 8-puzzle boards."""

from __future__ import annotations

import random

from eightpuzzle.engine.movegen import MoveGenerator
from eightpuzzle.models.board import SIZE, Board, Move

DEFAULT_SCRAMBLE_STEPS = 30


class GameGenerator:
    """Creates puzzles by random-walking the blank away from a start board."""

    @staticmethod
    def solved() -> Board:
        """Return the canonical goal (tiles in order, blank bottom-right)."""
        return Board(tuple(range(1, SIZE * SIZE)) + (0,))

    @staticmethod
    def scramble(
        board: Board, steps: int, rng: random.Random | None = None
    ) -> Board:
        """Return *board* after *steps* random blank moves.

        A move never immediately undoes the previous one.
        """
        rng = rng or random.Random()
        prev: Move | None = None

        for _ in range(steps):
            moves = MoveGenerator.valid_moves(board)
            if prev is not None and prev.reverse in moves:
                moves.remove(prev.reverse)
            prev = rng.choice(moves)
            board = MoveGenerator.apply_move(board, prev)
        return board

    @staticmethod
    def generate(
        steps: int = DEFAULT_SCRAMBLE_STEPS, rng: random.Random | None = None
    ) -> Board:
        """Return a random board that is reachable from, but not equal to, ``solved()``."""
        if steps < 1:
            raise ValueError("steps must be at least 1.")
        rng = rng or random.Random()
        goal = GameGenerator.solved()

        board = GameGenerator.scramble(goal, steps, rng)
        while board == goal:
            board = GameGenerator.scramble(goal, steps, rng)
        return board

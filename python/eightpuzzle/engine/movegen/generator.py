"""Legal blank moves and their resulting boards."""

from __future__ import annotations

from collections.abc import Iterator

from eightpuzzle.models.board import SIZE, Board, Move


class InvalidMoveError(ValueError):
    """Raised when a move would slide the blank off the board."""


class MoveGenerator:
    """Stateless move generator — all methods are static."""

    @staticmethod
    def valid_moves(board: Board) -> list[Move]:
        """Return the legal moves for *board* in UP, DOWN, LEFT, RIGHT order."""
        br, bc = board.blank_pos
        moves: list[Move] = []
        if br > 0:
            moves.append(Move.UP)
        if br < SIZE - 1:
            moves.append(Move.DOWN)
        if bc > 0:
            moves.append(Move.LEFT)
        if bc < SIZE - 1:
            moves.append(Move.RIGHT)
        return moves

    @staticmethod
    def apply_move(board: Board, move: Move) -> Board:
        """Slide the blank one cell in *move*'s direction.

        E.g. ``Move.UP`` swaps the blank with the tile **above** it, so that
        tile ends up one row lower. *board* itself is left untouched.
        """
        br, bc = board.blank_pos
        dr, dc = move.offset
        tr, tc = br + dr, bc + dc

        if not (0 <= tr < SIZE and 0 <= tc < SIZE):
            raise InvalidMoveError(
                f"Cannot move blank {move.value} from ({br}, {bc})."
            )

        return board.swapped((br, bc), (tr, tc))

    @staticmethod
    def successors(board: Board) -> Iterator[tuple[Move, Board]]:
        for move in MoveGenerator.valid_moves(board):
            yield move, MoveGenerator.apply_move(board, move)

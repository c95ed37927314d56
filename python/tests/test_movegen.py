"""Move generator tests — every blank position, every legal move."""

from __future__ import annotations

import itertools

import pytest

from eightpuzzle.engine.movegen import InvalidMoveError, MoveGenerator
from eightpuzzle.models.board import Board, Move


def _board_with_blank_at(index: int) -> Board:
    """A board whose blank sits at flat *index*, other tiles in order."""
    tiles = [v for v in range(1, 9)]
    tiles.insert(index, 0)
    return Board.from_flat(tiles)


_ALL_BLANKS = [_board_with_blank_at(i) for i in range(9)]


def _blank_ids(board: Board) -> str:
    return "blank_%d_%d" % board.blank_pos


@pytest.mark.parametrize(
    "index, expected",
    [
        (0, [Move.DOWN, Move.RIGHT]),
        (1, [Move.DOWN, Move.LEFT, Move.RIGHT]),
        (2, [Move.DOWN, Move.LEFT]),
        (3, [Move.UP, Move.DOWN, Move.RIGHT]),
        (4, [Move.UP, Move.DOWN, Move.LEFT, Move.RIGHT]),
        (5, [Move.UP, Move.DOWN, Move.LEFT]),
        (6, [Move.UP, Move.RIGHT]),
        (7, [Move.UP, Move.LEFT, Move.RIGHT]),
        (8, [Move.UP, Move.LEFT]),
    ],
)
def test_valid_moves(index: int, expected: list[Move]) -> None:
    assert MoveGenerator.valid_moves(_board_with_blank_at(index)) == expected


@pytest.mark.parametrize("board", _ALL_BLANKS, ids=_blank_ids)
def test_valid_moves_count_between_two_and_four(board: Board) -> None:
    assert 2 <= len(MoveGenerator.valid_moves(board)) <= 4


@pytest.mark.parametrize("board", _ALL_BLANKS, ids=_blank_ids)
def test_apply_move_swaps_two_cells_and_reverses(board: Board) -> None:
    for move in MoveGenerator.valid_moves(board):
        nxt = MoveGenerator.apply_move(board, move)

        assert sorted(nxt.cells) == sorted(board.cells)
        assert sum(a != b for a, b in zip(board.cells, nxt.cells)) == 2

        br, bc = board.blank_pos
        dr, dc = move.offset
        assert nxt.blank_pos == (br + dr, bc + dc)
        assert nxt.get_tile(br, bc) == board.get_tile(br + dr, bc + dc)

        assert move.reverse in MoveGenerator.valid_moves(nxt)
        assert MoveGenerator.apply_move(nxt, move.reverse) == board


def test_apply_move_leaves_input_untouched() -> None:
    board = Board.from_rows([[1, 2, 3], [4, 0, 6], [7, 5, 8]])
    MoveGenerator.apply_move(board, Move.DOWN)
    assert board == Board.from_rows([[1, 2, 3], [4, 0, 6], [7, 5, 8]])


def test_apply_move_down_slides_tile_up() -> None:
    board = Board.from_rows([[1, 2, 3], [4, 0, 6], [7, 5, 8]])
    assert MoveGenerator.apply_move(board, Move.DOWN) == Board.from_rows(
        [[1, 2, 3], [4, 5, 6], [7, 0, 8]]
    )


@pytest.mark.parametrize(
    "index, move",
    [(0, Move.UP), (0, Move.LEFT), (2, Move.RIGHT), (6, Move.DOWN), (8, Move.DOWN)],
)
def test_apply_illegal_move_raises(index: int, move: Move) -> None:
    with pytest.raises(InvalidMoveError):
        MoveGenerator.apply_move(_board_with_blank_at(index), move)


def test_successors_match_valid_moves() -> None:
    board = _board_with_blank_at(4)
    successors = list(MoveGenerator.successors(board))
    assert [m for m, _ in successors] == MoveGenerator.valid_moves(board)
    boards = [b for _, b in successors]
    assert len(set(boards)) == 4
    assert all(a != board for a in boards)


def test_every_pair_of_successors_differs() -> None:
    for board in _ALL_BLANKS:
        boards = [b for _, b in MoveGenerator.successors(board)]
        for a, b in itertools.combinations(boards, 2):
            assert a != b

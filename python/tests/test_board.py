"""Board and Move model tests."""

from __future__ import annotations

import pytest

from eightpuzzle.models.board import Board, InvalidBoardError, Move


def test_from_rows_and_flat_agree() -> None:
    rows = Board.from_rows([[1, 2, 3], [4, 0, 6], [7, 5, 8]])
    flat = Board.from_flat([1, 2, 3, 4, 0, 6, 7, 5, 8])
    assert rows == flat
    assert hash(rows) == hash(flat)
    assert rows.rows == ((1, 2, 3), (4, 0, 6), (7, 5, 8))


def test_queries() -> None:
    board = Board.from_rows([[1, 2, 3], [4, 0, 6], [7, 5, 8]])
    assert board.blank_pos == (1, 1)
    assert board.get_tile(2, 1) == 5
    assert board.position_of(8) == (2, 2)


def test_boards_are_immutable() -> None:
    board = Board.from_flat(range(9))
    with pytest.raises(AttributeError):
        board.cells = (1, 0, 2, 3, 4, 5, 6, 7, 8)  # type: ignore[misc]


def test_swapped_returns_new_board() -> None:
    board = Board.from_flat(range(9))
    other = board.swapped((0, 0), (0, 1))
    assert other.cells[:2] == (1, 0)
    assert board.cells[:2] == (0, 1)


def test_ordering_is_by_cells() -> None:
    low = Board.from_flat([0, 1, 2, 3, 4, 5, 6, 7, 8])
    high = Board.from_flat([1, 0, 2, 3, 4, 5, 6, 7, 8])
    assert low < high
    assert sorted([high, low]) == [low, high]


def test_usable_in_sets() -> None:
    a = Board.from_flat(range(9))
    b = Board.from_flat(list(range(9)))
    assert len({a, b}) == 1


@pytest.mark.parametrize(
    "flat",
    [
        [1, 2, 3, 4, 5, 6, 7, 8],           # too short
        [1, 2, 3, 4, 5, 6, 7, 8, 0, 0],     # too long
        [1, 1, 3, 4, 5, 6, 7, 8, 0],        # duplicate
        [1, 2, 3, 4, 5, 6, 7, 8, 9],        # out of range, no blank
        [-1, 2, 3, 4, 5, 6, 7, 8, 0],       # negative
    ],
    ids=["short", "long", "duplicate", "no_blank", "negative"],
)
def test_invalid_flat_rejected(flat: list[int]) -> None:
    with pytest.raises(InvalidBoardError):
        Board.from_flat(flat)


@pytest.mark.parametrize(
    "rows",
    [
        [[1, 2, 3], [4, 5, 6]],
        [[1, 2, 3, 4], [5, 6, 7], [8, 0]],
        [[1, 2, 3], [4, 5, 6], 7],
        "123456780",
    ],
    ids=["two_rows", "ragged", "scalar_row", "string"],
)
def test_invalid_rows_rejected(rows) -> None:
    with pytest.raises(InvalidBoardError):
        Board.from_rows(rows)


def test_non_integer_cells_rejected() -> None:
    with pytest.raises(InvalidBoardError):
        Board.from_flat(["a", 2, 3, 4, 5, 6, 7, 8, 0])


def test_invalid_board_error_is_value_error() -> None:
    assert issubclass(InvalidBoardError, ValueError)


def test_move_labels() -> None:
    assert [str(m) for m in Move] == ["UP", "DOWN", "LEFT", "RIGHT"]


@pytest.mark.parametrize("move", list(Move))
def test_move_reverse(move: Move) -> None:
    assert move.reverse is not move
    assert move.reverse.reverse is move
    dr, dc = move.offset
    rr, rc = move.reverse.offset
    assert (dr + rr, dc + rc) == (0, 0)


def test_str_renders_rows() -> None:
    board = Board.from_rows([[1, 2, 3], [4, 0, 6], [7, 5, 8]])
    assert str(board) == "1 2 3\n4 0 6\n7 5 8"


@pytest.mark.parametrize(
    "flat",
    [
        [1, 2, 3, 4, 5, 6, 7, 8.9, 0],
        [1.0, 2, 3, 4, 5, 6, 7, 8, 0],
        [True, 2, 3, 4, 5, 6, 7, 8, 0],
        ["1", 2, 3, 4, 5, 6, 7, 8, 0],
    ],
    ids=["fractional", "integral_float", "bool", "numeric_string"],
)
def test_non_int_cells_rejected(flat: list) -> None:
    with pytest.raises(InvalidBoardError):
        Board.from_flat(flat)


def test_direct_construction_rejects_floats() -> None:
    with pytest.raises(InvalidBoardError):
        Board((1.0, 2, 3, 4, 5, 6, 7, 8, 0))  # type: ignore[arg-type]

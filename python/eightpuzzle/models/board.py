"""Board model for the 8-puzzle."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum

SIZE = 3
SYMBOLS = frozenset(range(SIZE * SIZE))


class InvalidBoardError(ValueError):
    """Raised when board data is not a permutation of the symbols 0-8."""


class Move(StrEnum):
    """Direction the *blank* moves.

    The value doubles as the display label, e.g. ``str(Move.UP) == "UP"``.
    """

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]

    @property
    def reverse(self) -> Move:
        return _REVERSE[self]


_OFFSETS: dict[Move, tuple[int, int]] = {
    Move.UP: (-1, 0),
    Move.DOWN: (1, 0),
    Move.LEFT: (0, -1),
    Move.RIGHT: (0, 1),
}

_REVERSE: dict[Move, Move] = {
    Move.UP: Move.DOWN,
    Move.DOWN: Move.UP,
    Move.LEFT: Move.RIGHT,
    Move.RIGHT: Move.LEFT,
}


@dataclass(frozen=True, order=True)
class Board:
    """An immutable 3×3 puzzle board.

    Cells are stored as a flat row-major tuple. 0 represents the blank.
    Equality, hashing and ordering all follow the cell values.
    """

    cells: tuple[int, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.cells, tuple):
            object.__setattr__(self, "cells", tuple(self.cells))
        if len(self.cells) != SIZE * SIZE:
            raise InvalidBoardError(
                f"Expected {SIZE * SIZE} cells for a {SIZE}×{SIZE} board, "
                f"got {len(self.cells)}."
            )
        if any(type(v) is not int for v in self.cells):
            raise InvalidBoardError(
                f"Board cells must be integers, got {list(self.cells)}."
            )
        if set(self.cells) != SYMBOLS:
            raise InvalidBoardError(
                f"Board must contain each of 0-{SIZE * SIZE - 1} exactly once, "
                f"got {list(self.cells)}."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: Iterable[int]) -> Board:
        """Create a board from a flat row-major symbol list.

        Example::

            Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        try:
            cells = tuple(flat)
        except TypeError as exc:
            raise InvalidBoardError(f"Board cells must be a sequence: {exc}") from exc
        return cls(cells)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Board:
        """Create a board from a 3×3 matrix."""
        try:
            shape_ok = len(rows) == SIZE and all(len(row) == SIZE for row in rows)
        except TypeError:
            shape_ok = False
        if not shape_ok:
            raise InvalidBoardError(f"Expected a {SIZE}×{SIZE} matrix, got {rows!r}.")
        return cls.from_flat(v for row in rows for v in row)

    # -- queries --------------------------------------------------------------

    @property
    def rows(self) -> tuple[tuple[int, ...], ...]:
        return tuple(
            self.cells[r * SIZE : (r + 1) * SIZE] for r in range(SIZE)
        )

    @property
    def blank_pos(self) -> tuple[int, int]:
        return self.position_of(0)

    def get_tile(self, row: int, col: int) -> int:
        return self.cells[row * SIZE + col]

    def position_of(self, symbol: int) -> tuple[int, int]:
        return divmod(self.cells.index(symbol), SIZE)

    def swapped(self, a: tuple[int, int], b: tuple[int, int]) -> Board:
        """Return a copy with the cells at *a* and *b* exchanged."""
        i = a[0] * SIZE + a[1]
        j = b[0] * SIZE + b[1]
        cells = list(self.cells)
        cells[i], cells[j] = cells[j], cells[i]
        return Board(tuple(cells))

    def __str__(self) -> str:
        return "\n".join(" ".join(str(v) for v in row) for row in self.rows)

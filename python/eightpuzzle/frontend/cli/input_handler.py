"""Board input for CLI frontends.

Boards are typed as nine symbols, row-major, separated by spaces, commas or
newlines. ``0`` is the blank.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from eightpuzzle.models.board import SIZE, Board, InvalidBoardError

_SEPARATORS = re.compile(r"[\s,;]+")


def _tokens(text: str) -> list[str]:
    return [t for t in _SEPARATORS.split(text.strip()) if t]


def parse_board(text: str) -> Board:
    """Parse ``"1 2 3 4 0 6 7 5 8"`` (or ``"1,2,3,4,0,6,7,5,8"``) into a Board.

    Raises ``InvalidBoardError`` for anything that is not nine integers
    forming a permutation of 0-8.
    """
    tokens = _tokens(text)
    try:
        values = [int(t) for t in tokens]
    except ValueError as exc:
        raise InvalidBoardError(f"Board symbols must be integers: {text!r}") from exc
    return Board.from_flat(values)


def read_board(
    prompt: Callable[[str], str] = input,
    label: str = "puzzle",
) -> Board:
    """Read a 3×3 matrix from *prompt*, one row per call.

    Extra symbols on a line carry over to the next row, so the whole matrix
    may also be typed on a single line.
    """
    need = SIZE * SIZE
    tokens: list[str] = []
    row = 0
    while len(tokens) < need:
        line = prompt(f"  {label} row {row + 1}: ")
        tokens.extend(_tokens(line))
        row += 1
        if row > need:
            break
    return parse_board(" ".join(tokens))

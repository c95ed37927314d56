"""Puzzle file persistence (initial + goal board pair)."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from eightpuzzle.models.board import Board, InvalidBoardError


@dataclass(frozen=True)
class PuzzleFile:
    """An initial/goal pair as stored on disk.

    File format::

        {"initial": [[1, 2, 3], [4, 0, 6], [7, 5, 8]],
         "goal":    [[1, 2, 3], [4, 5, 6], [7, 8, 0]]}
    """

    initial: Board
    goal: Board

    # -- persistence ----------------------------------------------------------

    @classmethod
    def load(cls, filepath: Path) -> PuzzleFile:
        try:
            data = json.loads(filepath.read_text())
        except json.JSONDecodeError as exc:
            raise InvalidBoardError(f"{filepath}: not valid JSON ({exc})") from exc
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: object) -> PuzzleFile:
        if not isinstance(data, dict):
            raise InvalidBoardError("Puzzle data must be a JSON object.")
        missing = [key for key in ("initial", "goal") if key not in data]
        if missing:
            raise InvalidBoardError(f"Puzzle data is missing {', '.join(missing)}.")
        return cls(
            initial=Board.from_rows(data["initial"]),
            goal=Board.from_rows(data["goal"]),
        )

    def to_dict(self) -> dict[str, list[list[int]]]:
        return {
            "initial": [list(row) for row in self.initial.rows],
            "goal": [list(row) for row in self.goal.rows],
        }

    def save(self, filepath: Path) -> None:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        filepath.write_text(json.dumps(self.to_dict(), indent=2) + "\n")

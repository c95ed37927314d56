"""Outcomes of a search."""

from __future__ import annotations

from dataclasses import dataclass, field

from eightpuzzle.models.board import Move


@dataclass(frozen=True)
class Found:
    """The goal was reached by applying *path* to the initial board."""

    path: tuple[Move, ...]
    expanded: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", tuple(self.path))


@dataclass(frozen=True)
class NotFound:
    """The reachable state space was exhausted without meeting the goal."""

    expanded: int = field(default=0, compare=False)


SolveResult = Found | NotFound

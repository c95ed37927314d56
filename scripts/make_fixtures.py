#!/usr/bin/env python3
"""Generate the solver test fixtures.

Run from the project root after ``pip install -e .``::

    python scripts/make_fixtures.py

Writes ``<project_root>/fixtures/random.json``: a list of
``{"id", "initial", "goal", "solvable"}`` records. Solvable cases are
random walks away from a goal, so they are reachable by construction.
Unsolvable cases swap two tiles of a solvable start, which flips the
inversion parity.
"""

from __future__ import annotations

import hashlib
import json
import random
from pathlib import Path

from eightpuzzle.engine.gamegenerator import GameGenerator
from eightpuzzle.engine.gamesolver import Solver
from eightpuzzle.models.board import Board

SCRIPT_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = SCRIPT_DIR.parent
FIXTURES_DIR = PROJECT_ROOT / "fixtures"
SEED = 42

# Scramble depth -> number of random boards at that depth.
DEPTHS: dict[int, int] = {
    1: 4,
    5: 4,
    15: 4,
    40: 4,
}
UNSOLVABLE_COUNT = 2

# Goals other than the canonical one, so the heuristic is exercised
# against arbitrary targets.
EXTRA_GOALS: list[Board] = [
    Board.from_rows([[1, 2, 3], [8, 0, 4], [7, 6, 5]]),
    Board.from_rows([[0, 1, 2], [3, 4, 5], [6, 7, 8]]),
]


# -- hashing / uniqueness ----------------------------------------------------


def _pair_hash(initial: Board, goal: Board) -> str:
    """SHA-256 of both boards' cells — deterministic, order-sensitive."""
    return hashlib.sha256(str((initial.cells, goal.cells)).encode()).hexdigest()


# -- serialisation ------------------------------------------------------------


def _case(case_id: str, initial: Board, goal: Board) -> dict:
    return {
        "id": case_id,
        "initial": [list(row) for row in initial.rows],
        "goal": [list(row) for row in goal.rows],
        "solvable": Solver.is_solvable(initial, goal),
    }


def _break_parity(board: Board) -> Board:
    """Swap the first two non-blank cells."""
    cells = [i for i, v in enumerate(board.cells) if v != 0][:2]
    a, b = (divmod(i, 3) for i in cells)
    return board.swapped(a, b)


# -- main ---------------------------------------------------------------------


def main() -> None:
    FIXTURES_DIR.mkdir(parents=True, exist_ok=True)
    rng = random.Random(SEED)
    seen: set[str] = set()
    cases: list[dict] = []

    goals = [GameGenerator.solved(), *EXTRA_GOALS]
    for depth, count in DEPTHS.items():
        made = 0
        while made < count:
            goal = rng.choice(goals)
            initial = GameGenerator.scramble(goal, depth, rng)
            h = _pair_hash(initial, goal)
            if initial == goal or h in seen:
                continue  # duplicate — regenerate
            seen.add(h)
            cases.append(_case(f"depth_{depth:02d}_{made}", initial, goal))
            made += 1

    for i in range(UNSOLVABLE_COUNT):
        goal = rng.choice(goals)
        initial = _break_parity(GameGenerator.scramble(goal, 20, rng))
        cases.append(_case(f"unsolvable_{i}", initial, goal))

    path = FIXTURES_DIR / "random.json"
    with open(path, "w") as f:
        json.dump(cases, f, indent=1)
    print(f"  → {path.name}  ({len(cases)} cases) ✓")


if __name__ == "__main__":
    main()

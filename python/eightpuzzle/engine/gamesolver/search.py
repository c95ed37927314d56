"""Greedy best-first search over 8-puzzle boards.

The frontier is ordered purely by the heuristic score of each board; the
length of the path so far plays no part. The search therefore finds *a*
path, not necessarily a shortest one.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from enum import StrEnum
from typing import Optional, cast

from eightpuzzle.engine.heuristic import ManhattanHeuristic
from eightpuzzle.engine.movegen import MoveGenerator
from eightpuzzle.models.board import Board, Move
from eightpuzzle.models.result import Found, NotFound, SolveResult

logger = logging.getLogger(__name__)

# A path is a chain of (move, parent-link) pairs ending in None, so that
# every frontier entry shares its prefix with the entry it came from.
_PathLink = Optional[tuple[Move, "_PathLink"]]


class SearchStatus(StrEnum):
    RUNNING = "running"
    GOAL_FOUND = "goal_found"
    EXHAUSTED = "exhausted"


class SearchLimitExceeded(RuntimeError):
    """Raised when a search expands more boards than its budget allows."""

    def __init__(self, expanded: int) -> None:
        super().__init__(f"Search budget exhausted after {expanded} expansions.")
        self.expanded = expanded


def _materialise(link: _PathLink) -> tuple[Move, ...]:
    moves: list[Move] = []
    while link is not None:
        move, link = link
        moves.append(move)
    moves.reverse()
    return tuple(moves)


class Search:
    """One search from *initial* to *goal*, advanced a step at a time.

    Call :meth:`step` until :attr:`status` leaves ``RUNNING``, or use
    :meth:`run` to drive it to completion. The frontier and visited set
    belong to this object alone and are dropped with it.
    """

    def __init__(self, initial: Board, goal: Board) -> None:
        self.initial = initial
        self.goal = goal
        self.status = SearchStatus.RUNNING
        self.result: SolveResult | None = None
        self.expanded: int = 0
        self.max_expansions: int | None = None

        self._score = ManhattanHeuristic(goal)
        self._visited: set[Board] = set()
        # Entries are (score, insertion order, board, path link); the counter
        # makes equal scores pop first-in first-out and keeps boards out of
        # the comparison.
        self._counter = itertools.count()
        self._frontier: list[tuple[int, int, Board, _PathLink]] = []
        self._push(initial, None)

    # -- frontier -------------------------------------------------------------

    def _push(self, board: Board, link: _PathLink) -> None:
        heapq.heappush(
            self._frontier, (self._score(board), next(self._counter), board, link)
        )

    @property
    def frontier_size(self) -> int:
        return len(self._frontier)

    @property
    def visited_count(self) -> int:
        return len(self._visited)

    # -- state machine --------------------------------------------------------

    def step(self) -> SearchStatus:
        """Process a single frontier entry and return the new status."""
        if self.status is not SearchStatus.RUNNING:
            return self.status

        if not self._frontier:
            self.status = SearchStatus.EXHAUSTED
            self.result = NotFound(expanded=self.expanded)
            return self.status

        entry = heapq.heappop(self._frontier)
        _, _, board, link = entry

        if board == self.goal:
            self.status = SearchStatus.GOAL_FOUND
            self.result = Found(_materialise(link), expanded=self.expanded)
            return self.status

        if board in self._visited:
            return self.status

        if self.max_expansions is not None and self.expanded >= self.max_expansions:
            # The entry stays on the frontier; a later run resumes from it.
            heapq.heappush(self._frontier, entry)
            logger.debug(
                "Search budget hit: %d expanded, %d on frontier",
                self.expanded,
                self.frontier_size,
            )
            raise SearchLimitExceeded(self.expanded)

        self._visited.add(board)
        self.expanded += 1
        for move, nxt in MoveGenerator.successors(board):
            if nxt not in self._visited:
                self._push(nxt, (move, link))

        return self.status

    def run(self, max_expansions: int | None = None) -> SolveResult:
        """Step until the search terminates.

        Raises :class:`SearchLimitExceeded` when another board would have
        to be expanded after *max_expansions* already were. Popping and
        goal-testing a board never counts against the budget.
        """
        self.max_expansions = max_expansions
        logger.debug(
            "Search start: initial score %d", self._score(self.initial)
        )
        while self.step() is SearchStatus.RUNNING:
            pass

        logger.debug(
            "Search %s: %d expanded, %d left on frontier",
            self.status.value,
            self.expanded,
            self.frontier_size,
        )
        return cast(SolveResult, self.result)

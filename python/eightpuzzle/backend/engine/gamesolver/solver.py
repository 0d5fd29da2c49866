"""8-puzzle solver: best-first (A*) search over board snapshots."""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass
from enum import StrEnum

from eightpuzzle.backend.models.board import Board, Direction, is_solvable
from eightpuzzle.backend.models.errors import SearchExhaustedError

logger = logging.getLogger(__name__)

# Expansion order for every popped board.
DIRECTIONS: tuple[Direction, ...] = (
    Direction.RIGHT,
    Direction.LEFT,
    Direction.UP,
    Direction.DOWN,
)


class SearchStatus(StrEnum):
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"


@dataclass
class SearchResult:
    """Outcome of one search plus its instrumentation counters."""

    status: SearchStatus
    goal: Board | None = None
    expanded: int = 0
    generated: int = 0
    pruned: int = 0
    peak_frontier: int = 0

    @property
    def solved(self) -> bool:
        return self.status is SearchStatus.SOLVED

    @property
    def path(self) -> list[Board]:
        return self.goal.trace() if self.goal is not None else []

    @property
    def moves(self) -> list[Direction]:
        return self.goal.moves() if self.goal is not None else []


class _Frontier:
    """Min-heap of boards keyed by rank, then heuristic, then arrival."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, int, Board]] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, board: Board) -> None:
        heapq.heappush(
            self._heap,
            (board.rank, board.heuristic, next(self._counter), board),
        )

    def pop(self) -> Board:
        return heapq.heappop(self._heap)[-1]

    def clear(self) -> int:
        released = len(self._heap)
        self._heap.clear()
        return released


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def search(board: Board) -> SearchResult:
        """Run A* from *board* and return the full search result.

        Unsolvable boards are reported through ``SearchResult.status``
        without searching.  The returned goal board links back through
        ``previous`` to *board*.
        """
        if not Solver.is_solvable(board):
            logger.info("Board %s is not solvable", board.tiles)
            return SearchResult(status=SearchStatus.UNSOLVABLE)

        if board.is_at_goal():
            return SearchResult(status=SearchStatus.SOLVED, goal=board)

        logger.debug(
            "Searching towards %s goal, initial heuristic %d",
            board.goal.value,
            board.heuristic,
        )

        frontier = _Frontier()
        discarded: list[Board] = []
        result = SearchResult(status=SearchStatus.SOLVED)
        frontier.push(board)

        try:
            while True:
                if not frontier:
                    raise SearchExhaustedError(
                        f"frontier exhausted for solvable board {board.tiles}"
                    )
                result.peak_frontier = max(result.peak_frontier, len(frontier))
                current = frontier.pop()
                result.expanded += 1

                goal = Solver._expand(current, frontier, result)
                if goal is not None:
                    result.goal = goal
                    break

                discarded.append(current)
        finally:
            released = len(discarded) + frontier.clear()
            discarded.clear()
            logger.debug("Released %d boards after search", released)

        logger.info(
            "Solved in %d moves (expanded=%d generated=%d pruned=%d peak_frontier=%d)",
            result.goal.moves_made,
            result.expanded,
            result.generated,
            result.pruned,
            result.peak_frontier,
        )
        return result

    @staticmethod
    def solve(board: Board) -> list[Direction]:
        """Return a move sequence that solves *board*, or ``[]`` if unsolvable."""
        if board.is_at_goal():
            return []
        return Solver.search(board).moves

    @staticmethod
    def hint(board: Board) -> Direction | None:
        """Return the single best next move, or ``None`` if solved / unsolvable."""
        moves = Solver.solve(board)
        return moves[0] if moves else None

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach its goal layout."""
        return is_solvable(board)

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _expand(
        board: Board, frontier: _Frontier, result: SearchResult
    ) -> Board | None:
        """Push the children of *board*; return the first one at the goal.

        Only the immediate parent is checked for duplicates, so longer
        cycles and transpositions are queued again.
        """
        for direction in DIRECTIONS:
            if not board.can_move(direction):
                continue
            child = board.child(direction)
            result.generated += 1

            if child.is_at_goal():
                return child

            if board.previous is not None and board.previous == child:
                result.pruned += 1
                continue

            frontier.push(child)
        return None

"""Board model for the 8-puzzle solver."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum

from eightpuzzle.backend.models.errors import (
    IllegalMoveError,
    MalformedInputError,
    TileIndexError,
)

SIZE = 3
CELLS = SIZE * SIZE


class Direction(StrEnum):
    """Direction the *blank* travels when a move is applied."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class GoalLayout(StrEnum):
    """The two arrangements accepted as solved."""

    TOP_LEFT = "top-left"
    BOTTOM_RIGHT = "bottom-right"

    def target(self, value: int) -> tuple[int, int]:
        """Return the goal ``(row, col)`` of a non-blank tile."""
        if self is GoalLayout.TOP_LEFT:
            return divmod(value, SIZE)
        return divmod(value - 1, SIZE)

    @property
    def tiles(self) -> list[int]:
        if self is GoalLayout.TOP_LEFT:
            return list(range(CELLS))
        return list(range(1, CELLS)) + [0]


def manhattan_distance(tiles: Iterable[int], goal: GoalLayout) -> int:
    """Sum of Manhattan distances of every non-blank tile to *goal*."""
    total = 0
    for index, value in enumerate(tiles):
        if value == 0:
            continue
        row, col = divmod(index, SIZE)
        goal_row, goal_col = goal.target(value)
        total += abs(row - goal_row) + abs(col - goal_col)
    return total


def _choose_goal(tiles: list[int]) -> GoalLayout:
    # Ties go to the top-left layout.
    bottom = manhattan_distance(tiles, GoalLayout.BOTTOM_RIGHT)
    top = manhattan_distance(tiles, GoalLayout.TOP_LEFT)
    if bottom < top:
        return GoalLayout.BOTTOM_RIGHT
    return GoalLayout.TOP_LEFT


@dataclass(eq=False)
class Board:
    """One snapshot of the 3×3 puzzle plus its search bookkeeping.

    Tiles are stored as a flat row-major list of ints (``row * 3 + col``).
    0 represents the blank space.  Two boards are equal when their tiles
    are, regardless of how they were reached; ordering uses ``rank``.
    Boards are mutable and therefore unhashable; key sets on
    ``tuple(board.tiles)`` instead.
    """

    tiles: list[int]
    blank_pos: tuple[int, int]
    goal: GoalLayout
    moves_made: int = 0
    heuristic: int = 0
    previous: Board | None = field(default=None, repr=False)
    direction: Direction | None = None

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_string(cls, text: str) -> Board:
        """Parse a board from text such as ``"1 2 3 4 5 6 7 8 0"``.

        Whitespace is ignored.  Exactly nine digits in ``0..8`` must
        remain, each one appearing once.
        """
        compact = "".join(text.split())
        if len(compact) != CELLS:
            raise MalformedInputError(
                f"wrong length: need {CELLS} tiles, got {len(compact)}"
            )
        tiles: list[int] = []
        for ch in compact:
            if ch not in "012345678":
                raise MalformedInputError(
                    f"out-of-range digit: {ch!r} (tiles are only valid in range 0-8)"
                )
            tiles.append(int(ch))
        return cls.from_tiles(tiles)

    @classmethod
    def from_tiles(
        cls, tiles: Iterable[int], goal: GoalLayout | None = None
    ) -> Board:
        """Create a board from a flat row-major tile sequence.

        Example::

            Board.from_tiles([1, 2, 3, 4, 5, 6, 7, 0, 8])

        When *goal* is omitted, the layout with the lower Manhattan sum
        for these tiles is chosen.
        """
        flat = list(tiles)
        if len(flat) != CELLS:
            raise MalformedInputError(
                f"wrong length: need {CELLS} tiles, got {len(flat)}"
            )
        seen: set[int] = set()
        blank_pos: tuple[int, int] = (0, 0)
        for index, value in enumerate(flat):
            if (
                not isinstance(value, int)
                or isinstance(value, bool)
                or not 0 <= value < CELLS
            ):
                raise MalformedInputError(
                    f"out-of-range digit: {value!r} (tiles are only valid in range 0-8)"
                )
            if value in seen:
                raise MalformedInputError(f"duplicate digit: {value}")
            seen.add(value)
            if value == 0:
                blank_pos = divmod(index, SIZE)

        board = cls(
            tiles=flat,
            blank_pos=blank_pos,
            goal=goal if goal is not None else _choose_goal(flat),
        )
        board.calculate_heuristic()
        return board

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> int:
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise TileIndexError(f"coordinates out of range: ({row}, {col})")
        return self.tiles[row * SIZE + col]

    @property
    def rows(self) -> list[list[int]]:
        return [self.tiles[r * SIZE : (r + 1) * SIZE] for r in range(SIZE)]

    @property
    def rank(self) -> int:
        """A* priority: moves so far plus estimated moves remaining."""
        return self.moves_made + self.heuristic

    def is_at_goal(self) -> bool:
        return self.heuristic == 0

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        value = self.get_tile(row, col)
        if value == 0:
            return (row, col) == divmod(self.goal.tiles.index(0), SIZE)
        return (row, col) == self.goal.target(value)

    def calculate_heuristic(self) -> int:
        """Recompute, store and return the Manhattan sum."""
        self.heuristic = manhattan_distance(self.tiles, self.goal)
        return self.heuristic

    # -- movement (direction = where the *blank* moves) -----------------------

    def can_move(self, direction: Direction) -> bool:
        row, col = self.blank_pos
        d_row, d_col = direction.offset
        return 0 <= row + d_row < SIZE and 0 <= col + d_col < SIZE

    def apply_move(self, direction: Direction) -> None:
        """Slide the blank one cell in *direction*, in place.

        Raises ``IllegalMoveError`` if the blank would leave the board;
        the board is left untouched in that case.
        """
        if not self.can_move(direction):
            raise IllegalMoveError(
                f"cannot move {direction.value} with blank at {self.blank_pos}"
            )
        row, col = self.blank_pos
        d_row, d_col = direction.offset
        target = (row + d_row, col + d_col)
        self._swap(target)
        self.moves_made += 1
        self.direction = direction
        self.calculate_heuristic()

    def copy(self) -> Board:
        """Return a value copy that does not link back to this board."""
        return Board(
            tiles=self.tiles[:],
            blank_pos=self.blank_pos,
            goal=self.goal,
            moves_made=self.moves_made,
            heuristic=self.heuristic,
            direction=self.direction,
        )

    def child(self, direction: Direction) -> Board:
        """Return a new board one move away, linked back to this one."""
        derived = self.copy()
        derived.apply_move(direction)
        derived.previous = self
        return derived

    # -- path reconstruction --------------------------------------------------

    def trace(self) -> list[Board]:
        """Return every board from the initial one up to this one."""
        chain: list[Board] = []
        board: Board | None = self
        while board is not None:
            chain.append(board)
            board = board.previous
        chain.reverse()
        return chain

    def moves(self) -> list[Direction]:
        return [b.direction for b in self.trace()[1:] if b.direction is not None]

    # -- comparison -----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.tiles == other.tiles

    def __lt__(self, other: Board) -> bool:
        return self.rank < other.rank

    # -- helpers --------------------------------------------------------------

    def _swap(self, target: tuple[int, int]) -> None:
        row, col = self.blank_pos
        t_row, t_col = target
        blank, other = row * SIZE + col, t_row * SIZE + t_col
        self.tiles[blank], self.tiles[other] = self.tiles[other], self.tiles[blank]
        self.blank_pos = target


def is_solvable(board: Board) -> bool:
    """Return True if *board* can reach its goal layout.

    Tiles are ranked by their place in the goal layout and the inversions
    among the non-blank ones are counted.  On a board of odd width the
    blank's row never changes the parity, so an even count means solvable.
    """
    order = {value: index for index, value in enumerate(board.goal.tiles)}
    ranked = [order[v] for v in board.tiles if v != 0]
    inversions = 0
    for i in range(len(ranked)):
        for j in range(i + 1, len(ranked)):
            if ranked[i] > ranked[j]:
                inversions += 1
    return inversions % 2 == 0

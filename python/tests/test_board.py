"""Board model tests: parsing, heuristic, moves and ordering."""

from __future__ import annotations

import random

import pytest

from eightpuzzle.backend.engine.gamegenerator import GameGenerator
from eightpuzzle.backend.models.board import (
    Board,
    Direction,
    GoalLayout,
    is_solvable,
    manhattan_distance,
)
from eightpuzzle.backend.models.errors import (
    IllegalMoveError,
    MalformedInputError,
    TileIndexError,
)


# -- helpers ------------------------------------------------------------------


def _random_boards(count: int, seed: int = 0) -> list[Board]:
    rng = random.Random(seed)
    boards: list[Board] = []
    for _ in range(count):
        tiles = list(range(9))
        rng.shuffle(tiles)
        boards.append(Board.from_tiles(tiles))
    return boards


# -- construction -------------------------------------------------------------


@pytest.mark.parametrize(
    "text",
    [
        "1 2 3 4 5 6 7 8 0",
        "123456780",
        " 8\t1 2\n3 4 5 6 7 0 ",
        "0 1 2 3 4 5 6 7 8",
    ],
)
def test_from_string_accepts_whitespace_variants(text: str) -> None:
    board = Board.from_string(text)
    assert sorted(board.tiles) == list(range(9))
    assert board.get_tile(*board.blank_pos) == 0


def test_from_string_fills_row_major() -> None:
    board = Board.from_string("4 1 3 7 2 6 0 5 8")
    assert board.rows == [[4, 1, 3], [7, 2, 6], [0, 5, 8]]
    assert board.blank_pos == (2, 0)
    assert board.moves_made == 0
    assert board.previous is None
    assert board.direction is None


@pytest.mark.parametrize(
    ("text", "reason"),
    [
        ("1 2 3 4 5 6 7 8", "wrong length"),
        ("1 2 3 4 5 6 7 8 0 4", "wrong length"),
        ("", "wrong length"),
        ("1 2 3 4 5 6 7 9 0", "out-of-range"),
        ("1 2 3 4 5 6 7 x 0", "out-of-range"),
        ("1 1 3 4 5 6 7 8 0", "duplicate"),
    ],
    ids=["short", "long", "empty", "digit-9", "letter", "duplicate"],
)
def test_from_string_rejects_malformed_input(text: str, reason: str) -> None:
    with pytest.raises(MalformedInputError, match=reason):
        Board.from_string(text)


def test_from_tiles_rejects_bad_values() -> None:
    with pytest.raises(MalformedInputError):
        Board.from_tiles([1, 2, 3, 4, 5, 6, 7, 8, -1])
    with pytest.raises(MalformedInputError):
        Board.from_tiles([0, 0, 1, 2, 3, 4, 5, 6, 7])


@pytest.mark.parametrize("flag", [True, False])
def test_from_tiles_rejects_booleans(flag: bool) -> None:
    tiles: list = [1, 2, 3, 4, 5, 6, 7, 8, 0]
    tiles[tiles.index(int(flag))] = flag
    with pytest.raises(MalformedInputError, match="out-of-range"):
        Board.from_tiles(tiles)


def test_every_valid_permutation_builds_a_board() -> None:
    for board in _random_boards(200):
        assert sorted(board.tiles) == list(range(9))
        row, col = board.blank_pos
        assert board.tiles[row * 3 + col] == 0


def test_goal_choice_prefers_cheaper_layout() -> None:
    assert Board.from_string("1 2 3 4 5 6 7 0 8").goal is GoalLayout.BOTTOM_RIGHT
    assert Board.from_string("1 0 2 3 4 5 6 7 8").goal is GoalLayout.TOP_LEFT


def test_goal_choice_tie_goes_to_top_left() -> None:
    tiles = [1, 2, 3, 4, 0, 5, 6, 7, 8]
    assert manhattan_distance(tiles, GoalLayout.TOP_LEFT) == 6
    assert manhattan_distance(tiles, GoalLayout.BOTTOM_RIGHT) == 6
    assert Board.from_tiles(tiles).goal is GoalLayout.TOP_LEFT


# -- heuristic ----------------------------------------------------------------


@pytest.mark.parametrize("goal", list(GoalLayout))
def test_heuristic_is_zero_on_goal(goal: GoalLayout) -> None:
    board = GameGenerator.solved(goal)
    assert board.heuristic == 0
    assert board.is_at_goal()


def test_heuristic_is_never_negative() -> None:
    for board in _random_boards(200, seed=1):
        assert board.heuristic >= 0
        assert board.heuristic == manhattan_distance(board.tiles, board.goal)


def test_heuristic_values() -> None:
    assert Board.from_string("1 2 3 4 5 6 7 0 8").heuristic == 1
    assert Board.from_string("1 0 2 3 4 5 6 7 8").heuristic == 1
    assert Board.from_string("4 1 3 7 2 6 0 5 8").heuristic == 6


def test_goal_targets() -> None:
    assert GoalLayout.TOP_LEFT.target(1) == (0, 1)
    assert GoalLayout.TOP_LEFT.target(8) == (2, 2)
    assert GoalLayout.BOTTOM_RIGHT.target(1) == (0, 0)
    assert GoalLayout.BOTTOM_RIGHT.target(8) == (2, 1)


# -- moves --------------------------------------------------------------------


def test_can_move_follows_blank_position() -> None:
    corner = Board.from_string("0 1 2 3 4 5 6 7 8")
    assert corner.can_move(Direction.RIGHT)
    assert corner.can_move(Direction.DOWN)
    assert not corner.can_move(Direction.LEFT)
    assert not corner.can_move(Direction.UP)

    centre = Board.from_string("1 2 3 4 0 5 6 7 8")
    assert all(centre.can_move(d) for d in Direction)


def test_move_right_swaps_blank_with_neighbour() -> None:
    board = Board.from_string("1 0 2 3 4 5 6 7 8")
    assert board.can_move(Direction.RIGHT)

    board.apply_move(Direction.RIGHT)

    assert board.tiles == [1, 2, 0, 3, 4, 5, 6, 7, 8]
    assert board.blank_pos == (0, 2)
    assert board.moves_made == 1
    assert board.direction is Direction.RIGHT
    assert board.heuristic == manhattan_distance(board.tiles, board.goal)


def test_illegal_move_raises_and_leaves_board_untouched() -> None:
    board = Board.from_string("1 2 0 3 4 5 6 7 8")
    before = board.copy()
    with pytest.raises(IllegalMoveError):
        board.apply_move(Direction.RIGHT)
    assert board == before
    assert board.moves_made == before.moves_made


@pytest.mark.parametrize("direction", list(Direction))
def test_move_then_inverse_restores_board(direction: Direction) -> None:
    for board in _random_boards(50, seed=2):
        if not board.can_move(direction):
            continue
        moved = board.copy()
        moved.apply_move(direction)
        assert moved != board
        moved.apply_move(direction.opposite)
        assert moved == board
        assert moved.blank_pos == board.blank_pos
        assert moved.heuristic == board.heuristic


def test_child_links_back_and_leaves_parent_alone() -> None:
    parent = Board.from_string("1 2 3 4 0 5 7 8 6")
    snapshot = parent.tiles[:]

    child = parent.child(Direction.RIGHT)

    assert parent.tiles == snapshot
    assert child.previous is parent
    assert child.moves_made == parent.moves_made + 1
    assert child.goal is parent.goal


def test_rank_never_decreases_from_parent_to_child() -> None:
    for board in _random_boards(100, seed=3):
        for direction in Direction:
            if board.can_move(direction):
                child = board.child(direction)
                assert child.rank >= board.rank
                assert abs(child.heuristic - board.heuristic) == 1


# -- comparison ---------------------------------------------------------------


def test_equality_ignores_bookkeeping() -> None:
    a = Board.from_string("1 2 3 4 5 6 7 0 8")
    b = a.child(Direction.LEFT).child(Direction.RIGHT)
    assert a == b
    assert a.moves_made != b.moves_made


def test_boards_are_unhashable() -> None:
    board = Board.from_string("1 2 3 4 5 6 7 0 8")
    with pytest.raises(TypeError):
        hash(board)


def test_ordering_uses_rank() -> None:
    near = Board.from_string("1 2 3 4 5 6 7 0 8")
    far = Board.from_string("4 1 3 7 2 6 0 5 8")
    assert near < far
    assert not far < near


# -- grid access --------------------------------------------------------------


@pytest.mark.parametrize("coords", [(-1, 0), (3, 0), (0, 3), (0, -1)])
def test_get_tile_out_of_range_fails_loudly(coords: tuple[int, int]) -> None:
    board = Board.from_string("1 2 3 4 5 6 7 8 0")
    with pytest.raises(TileIndexError):
        board.get_tile(*coords)


def test_is_tile_correct() -> None:
    board = Board.from_string("1 2 3 4 5 6 7 0 8")
    assert board.is_tile_correct(0, 0)
    assert not board.is_tile_correct(2, 1)
    assert not board.is_tile_correct(2, 2)


# -- path reconstruction ------------------------------------------------------


def test_trace_returns_chain_in_forward_order() -> None:
    root = Board.from_string("1 2 3 4 5 6 7 8 0")
    last = root
    for direction in (Direction.LEFT, Direction.UP, Direction.RIGHT):
        last = last.child(direction)

    chain = last.trace()

    assert chain[0] is root
    assert chain[-1] is last
    assert [b.moves_made for b in chain] == [0, 1, 2, 3]
    assert last.moves() == [Direction.LEFT, Direction.UP, Direction.RIGHT]


# -- solvability --------------------------------------------------------------


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1 2 3 4 5 6 7 8 0", True),
        ("0 1 2 3 4 5 6 7 8", True),
        ("4 1 3 7 2 6 0 5 8", True),
        ("2 1 3 4 5 6 7 8 0", False),
        ("1 2 3 4 5 6 8 7 0", False),
        ("0 2 1 3 4 5 6 7 8", False),
    ],
)
def test_is_solvable(text: str, expected: bool) -> None:
    assert is_solvable(Board.from_string(text)) is expected


def test_scrambled_boards_are_solvable() -> None:
    for seed in range(20):
        assert is_solvable(GameGenerator.generate(depth=25, seed=seed))

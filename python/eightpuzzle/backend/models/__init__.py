from eightpuzzle.backend.models.board import Board, Direction, GoalLayout, is_solvable
from eightpuzzle.backend.models.errors import (
    IllegalMoveError,
    MalformedInputError,
    PuzzleError,
    SearchExhaustedError,
    TileIndexError,
)

__all__ = [
    "Board",
    "Direction",
    "GoalLayout",
    "IllegalMoveError",
    "MalformedInputError",
    "PuzzleError",
    "SearchExhaustedError",
    "TileIndexError",
    "is_solvable",
]

"""Generates solvable 8-puzzle boards."""

from __future__ import annotations

import random

from eightpuzzle.backend.models.board import Board, Direction, GoalLayout


class GameGenerator:
    """Creates solvable puzzles by shuffling from a solved state."""

    @staticmethod
    def solved(goal: GoalLayout = GoalLayout.BOTTOM_RIGHT) -> Board:
        """Return the goal-state board for *goal*."""
        return Board.from_tiles(goal.tiles, goal=goal)

    @staticmethod
    def scramble(board: Board, depth: int, rng: random.Random) -> None:
        """Scramble *board* in-place using *depth* random blank moves.

        The blank never steps straight back to the cell it just left.
        Move bookkeeping is reset so the result reads as a fresh board.
        """
        last = None
        for _ in range(depth):
            options = [d for d in Direction if board.can_move(d)]
            if last is not None and last.opposite in options:
                options.remove(last.opposite)
            last = rng.choice(options)
            board.apply_move(last)

        board.moves_made = 0
        board.direction = None
        board.previous = None

    @staticmethod
    def generate(depth: int = 30, seed: int | None = None) -> Board:
        """Return a random *solvable*, unsolved board.

        The goal layout is chosen afresh for the scrambled tiles, exactly
        as it is for boards typed in by a user.
        """
        if depth < 1:
            raise ValueError(f"depth must be at least 1, got {depth}")
        rng = random.Random(seed)
        while True:
            board = GameGenerator.solved()
            GameGenerator.scramble(board, depth, rng)
            fresh = Board.from_tiles(board.tiles)
            if not fresh.is_at_goal():
                return fresh

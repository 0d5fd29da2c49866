"""Vanilla terminal frontend — no third-party dependencies.

Prints the solution as a plain ASCII transcript: the initial board, every
intermediate board labelled with its move, and the goal board.
"""

from __future__ import annotations

import sys

from eightpuzzle.backend.engine.gamesolver import SearchResult, Solver
from eightpuzzle.backend.models.board import Board

_BORDER = "-" * 11


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> str:
    """Return the framed 3×3 grid, with the blank shown as a space."""
    lines: list[str] = [_BORDER]
    for row in board.rows:
        cells = "".join(f" {val if val else ' '} " for val in row)
        lines.append(f"|{cells}|")
    lines.append(_BORDER)
    return "\n".join(lines)


def render_transcript(goal: Board) -> str:
    """Return every step from the initial board up to *goal*."""
    steps = goal.trace()
    blocks: list[str] = []
    for i, board in enumerate(steps):
        if i == 0:
            label = "INITIAL BOARD"
        elif i == len(steps) - 1:
            label = "GOAL STATE"
        else:
            label = f"MOVE: {board.moves_made} - moved {board.direction.value}"
        blocks.append(f"{label}\n{render_board(board)}\n")
    return "\n".join(blocks)


def _print_stats(result: SearchResult) -> None:
    print(
        f"Solved in {result.goal.moves_made} moves "
        f"({result.expanded} expanded, {result.generated} generated, "
        f"{result.pruned} pruned, peak frontier {result.peak_frontier})."
    )


# -- public entry point -------------------------------------------------------


def run(board: Board) -> int:
    """Solve *board* and print the transcript.  Returns the exit code."""
    if board.is_at_goal():
        print("Looks like board is already at the goal state!")
        return 0

    result = Solver.search(board)
    if not result.solved:
        print("This board is not solvable", file=sys.stderr)
        return 1

    print()
    print("SOLUTION: ")
    print()
    print(render_transcript(result.goal))
    _print_stats(result)
    return 0

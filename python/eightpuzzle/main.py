#!/usr/bin/env python3
"""8-Puzzle Solver.

Usage::

    eightpuzzle                          # read a board from stdin
    eightpuzzle -b "1 0 2 3 4 5 6 7 8"   # solve the given board
    eightpuzzle -f rich --random         # Rich transcript, random board
    eightpuzzle -v -b 123456708          # log search progress to stderr
"""

import importlib
import logging
from enum import StrEnum
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from eightpuzzle.backend.engine.gamegenerator import GameGenerator
from eightpuzzle.backend.models.board import Board
from eightpuzzle.backend.models.errors import MalformedInputError

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "eightpuzzle.frontend.cli.vanilla.app",
    Frontend.rich: "eightpuzzle.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _ask_board() -> str:
    print()
    print("DIRECTIONS: ")
    print("Please enter the puzzle board a single string,")
    print("starting from the top left and going to")
    print("the bottom right of the table.")
    print()
    print("ex: goal state would be '1 2 3 4 5 6 7 8 0'")
    print("(with or without spaces between numbers)")
    print()
    print("Enter board string: ")
    try:
        return input()
    except EOFError:
        return ""


def _load_board(text: Optional[str], random_board: bool, seed: Optional[int], depth: int) -> Board:
    if random_board:
        board = GameGenerator.generate(depth=depth, seed=seed)
        logger.info("Generated board %s (seed=%s, depth=%d)", board.tiles, seed, depth)
        return board
    if text is None:
        text = _ask_board()
    return Board.from_string(text)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        envvar="EIGHTPUZZLE_FRONTEND",
        help="Frontend used to print the solution.",
    ),
    board: Optional[str] = typer.Option(
        None, "-b", "--board",
        help="Board string, e.g. '1 2 3 4 5 6 7 0 8'. Read from stdin if omitted.",
    ),
    random_board: bool = typer.Option(
        False, "--random",
        help="Solve a randomly scrambled board instead.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for --random.",
    ),
    depth: int = typer.Option(
        20, "--depth",
        min=1, max=60,
        help="Number of scramble moves for --random.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress to stderr.",
    ),
) -> None:
    """Solve the 8-puzzle with A* search and print every step."""
    _configure_logging(verbose)

    if random_board and board is not None:
        raise typer.BadParameter(
            "cannot be combined with --random", param_hint="'--board'"
        )

    try:
        puzzle = _load_board(board, random_board, seed, depth)
    except MalformedInputError as exc:
        typer.echo(f"Board could not be created: {exc}", err=True)
        raise typer.Exit(code=1)

    mod = importlib.import_module(_RUNNERS[frontend])
    code = mod.run(puzzle)
    if code:
        raise typer.Exit(code=code)


if __name__ == "__main__":
    app()

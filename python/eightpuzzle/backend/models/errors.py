"""Exceptions raised by the puzzle model and solver."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error raised by this package."""


class MalformedInputError(PuzzleError, ValueError):
    """The board text or tile sequence does not describe a 3×3 puzzle."""


class IllegalMoveError(PuzzleError, ValueError):
    """The blank cannot slide in the requested direction."""


class TileIndexError(PuzzleError, IndexError):
    """A grid coordinate lies outside ``0..2``."""


class SearchExhaustedError(PuzzleError, RuntimeError):
    """The frontier ran dry on a board that passed the solvability check."""

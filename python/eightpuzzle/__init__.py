"""Solve the 3×3 sliding-tile puzzle with A* search."""

__version__ = "0.1.0"

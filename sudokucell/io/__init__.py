"""Puzzle input parsing and grid rendering."""

from .puzzle import Puzzle, parse_puzzle, load_puzzle, puzzle_from_grid, puzzle_from_mapping
from .renderer import to_string, render_grid, ConsoleAnimator

__all__ = [
    "Puzzle",
    "parse_puzzle",
    "load_puzzle",
    "puzzle_from_grid",
    "puzzle_from_mapping",
    "to_string",
    "render_grid",
    "ConsoleAnimator",
]

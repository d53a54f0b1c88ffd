"""Core module: cells, the board engine and validation."""

from .cell import Cell, neighbors_of
from .board import Board, SearchEvent, SearchStats
from .exceptions import SudokuError, InvalidConfiguration, CellStateError
from .validator import is_valid_grid, is_solved_grid, validate_solution

__all__ = [
    "Cell",
    "neighbors_of",
    "Board",
    "SearchEvent",
    "SearchStats",
    "SudokuError",
    "InvalidConfiguration",
    "CellStateError",
    "is_valid_grid",
    "is_solved_grid",
    "validate_solution",
]

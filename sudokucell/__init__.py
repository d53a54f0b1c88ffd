"""Sudoku solving by constraint propagation and backtracking search."""

from .core import Board, Cell, InvalidConfiguration, CellStateError, SudokuError
from .config import SolverConfig
from .io import Puzzle, parse_puzzle, load_puzzle
from .solvers import BacktrackingSolver, StackSolver, SolveResult, make_solver

__version__ = "1.0.0"

__all__ = [
    "Board",
    "Cell",
    "InvalidConfiguration",
    "CellStateError",
    "SudokuError",
    "SolverConfig",
    "Puzzle",
    "parse_puzzle",
    "load_puzzle",
    "BacktrackingSolver",
    "StackSolver",
    "SolveResult",
    "make_solver",
]

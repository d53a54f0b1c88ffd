"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats, SolveResult
from .backtracking_solver import BacktrackingSolver, StackSolver, make_solver

__all__ = [
    "BaseSolver",
    "SolverStats",
    "SolveResult",
    "BacktrackingSolver",
    "StackSolver",
    "make_solver",
]

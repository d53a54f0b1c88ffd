"""Backtracking solvers over a statically ordered search space."""

from __future__ import annotations
from typing import Optional

from .base_solver import BaseSolver
from ..config import SolverConfig
from ..core.board import Board, Observer
from ..io.renderer import ConsoleAnimator


class BacktrackingSolver(BaseSolver):
    """
    Depth-first recursive backtracking after constraint propagation.

    Features:
    - Elimination of committed values from neighbouring candidates
    - Naked singles committed before the search starts
    - Cells searched fewest-candidates first, in an order fixed up front
    """

    name = "Backtracking"

    def _search(self, board: Board) -> bool:
        return board.search()


class StackSolver(BaseSolver):
    """
    The same search as BacktrackingSolver driven by an explicit stack.

    Explores candidates in the same order and reaches the same grid, but
    its depth is not bounded by the interpreter's recursion limit.
    """

    name = "Backtracking (explicit stack)"

    def _search(self, board: Board) -> bool:
        return board.search_iterative()


def make_solver(config: Optional[SolverConfig] = None, observer: Optional[Observer] = None) -> BaseSolver:
    """
    Build the solver described by a config.

    Args:
        config: Solver options, defaults to SolverConfig().
        observer: Board observer; overrides config.animate when given.
    """
    config = config or SolverConfig()
    if observer is None and config.animate:
        observer = ConsoleAnimator(delay=config.delay)

    solver_cls = StackSolver if config.strategy == "iterative" else BacktrackingSolver
    return solver_cls(validate_seeds=config.validate_seeds, observer=observer)

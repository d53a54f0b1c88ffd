"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Optional
import logging
import time
import tracemalloc

import numpy as np

from ..core.board import Board, Observer
from ..core.validator import validate_solution
from ..io.puzzle import Puzzle

log = logging.getLogger(__name__)


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    solved: bool = False
    time_seconds: float = 0.0
    memory_bytes: int = 0

    # Engine counters
    naked_singles: int = 0
    trials: int = 0
    backtracks: int = 0
    max_depth: int = 0
    search_order_size: int = 0

    # Additional metadata
    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "naked_singles": self.naked_singles,
            "trials": self.trials,
            "backtracks": self.backtracks,
            "max_depth": self.max_depth,
            "search_order_size": self.search_order_size,
            "algorithm": self.algorithm,
            **self.extra
        }


@dataclass
class SolveResult:
    """
    Outcome of a solve attempt, ready for a renderer.

    `grid` and `values` hold each cell's effective value, so guesses that
    survived the search appear exactly like seeds and forced values.
    """
    solved: bool
    size: int
    grid: np.ndarray
    values: Dict[int, Optional[int]]

    @classmethod
    def from_board(cls, board: Board, solved: bool) -> SolveResult:
        return cls(
            solved=solved,
            size=board.size,
            grid=board.to_grid(),
            values=board.snapshot(),
        )


class BaseSolver(ABC):
    """
    Abstract base class for solvers built on the Board engine.

    Subclasses only choose how the prepared board is searched.
    """

    name: str = "BaseSolver"

    def __init__(self, validate_seeds: bool = False, observer: Optional[Observer] = None):
        """
        Args:
            validate_seeds: Reject conflicting seeds with InvalidConfiguration.
            observer: Optional board observer, see Board.
        """
        self.validate_seeds = validate_seeds
        self.observer = observer
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, puzzle: Puzzle) -> tuple[SolveResult, SolverStats]:
        """
        Solve a puzzle with timing and memory tracking.

        Args:
            puzzle: The puzzle to solve.

        Returns:
            Tuple of (result, stats). An unsolvable puzzle gives a result
            with solved=False.

        Raises:
            InvalidConfiguration: If the puzzle is malformed.
        """
        self.stats = SolverStats(algorithm=self.name)

        tracemalloc.start()
        start_time = time.perf_counter()
        try:
            board = Board(puzzle.size, observer=self.observer)
            board.seed(puzzle.seeds, check_conflicts=self.validate_seeds)
            board.prepare()
            solved = self._search(board)
        finally:
            self.stats.time_seconds = time.perf_counter() - start_time
            _, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            self.stats.memory_bytes = peak

        solved = solved and validate_solution(puzzle, board.to_grid())
        result = SolveResult.from_board(board, solved)
        self.stats.solved = solved
        for key, value in board.stats.to_dict().items():
            setattr(self.stats, key, value)

        log.info(
            "%s %s %s in %.4fs (%d trials, %d backtracks)",
            self.name,
            "solved" if self.stats.solved else "failed on",
            puzzle.name or f"{puzzle.size}x{puzzle.size} puzzle",
            self.stats.time_seconds, self.stats.trials, self.stats.backtracks
        )
        return result, self.stats

    @abstractmethod
    def _search(self, board: Board) -> bool:
        """
        Search a prepared board.

        Args:
            board: A seeded board whose search order is built.

        Returns:
            True if the board was completed.
        """
        pass

    def reset_stats(self) -> None:
        """Reset solver statistics."""
        self.stats = SolverStats(algorithm=self.name)

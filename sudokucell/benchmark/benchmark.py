"""Benchmarking framework for comparing search strategies."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import json
import logging
import os

from tqdm import tqdm

from .catalog import load_catalog
from ..core.exceptions import SudokuError
from ..io.puzzle import Puzzle
from ..io.renderer import to_string
from ..solvers import BaseSolver, BacktrackingSolver, StackSolver

log = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    puzzle: str
    size: int
    clues: int
    algorithm: str
    solved: bool
    time_seconds: float
    memory_bytes: int
    trials: int
    backtracks: int
    naked_singles: int
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle": self.puzzle,
            "size": self.size,
            "clues": self.clues,
            "algorithm": self.algorithm,
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "trials": self.trials,
            "backtracks": self.backtracks,
            "naked_singles": self.naked_singles,
            **self.extra
        }


class Benchmark:
    """
    Runs every solver on every puzzle and collects performance metrics.
    """

    def __init__(
        self,
        puzzles: Optional[Dict[str, Puzzle]] = None,
        solvers: Optional[Dict[str, BaseSolver]] = None
    ):
        """
        Initialize the benchmark.

        Args:
            puzzles: Dict of name -> puzzle (default: the whole catalog).
            solvers: Dict of solver_name -> solver_instance (default: the
                recursive and explicit-stack solvers).
        """
        self.puzzles = puzzles if puzzles is not None else load_catalog()

        if solvers is None:
            self.solvers = {
                "Recursive": BacktrackingSolver(),
                "Stack": StackSolver(),
            }
        else:
            self.solvers = solvers

        self.results: List[BenchmarkResult] = []
        self.solutions: Dict[str, str] = {}

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the full benchmark suite.

        Returns:
            List of BenchmarkResult objects.
        """
        self.results = []
        total_tests = len(self.puzzles) * len(self.solvers)

        pbar = tqdm(total=total_tests, desc="Benchmarking", disable=not show_progress)

        for puzzle_name, puzzle in self.puzzles.items():
            for solver_name, solver in self.solvers.items():
                self.results.append(self._run_single(puzzle_name, puzzle, solver_name, solver))
                pbar.update(1)

        pbar.close()
        return self.results

    def _run_single(
        self,
        puzzle_name: str,
        puzzle: Puzzle,
        solver_name: str,
        solver: BaseSolver
    ) -> BenchmarkResult:
        """Run a single solver on a single puzzle."""
        try:
            result, stats = solver.solve(puzzle)
        except SudokuError as e:
            log.warning("%s rejected %s: %s", solver_name, puzzle_name, e)
            return BenchmarkResult(
                puzzle=puzzle_name,
                size=puzzle.size,
                clues=puzzle.clues,
                algorithm=solver_name,
                solved=False,
                time_seconds=0.0,
                memory_bytes=0,
                trials=0,
                backtracks=0,
                naked_singles=0,
                extra={"error": str(e)}
            )

        if result.solved:
            self.solutions[puzzle_name] = to_string(result.grid)

        return BenchmarkResult(
            puzzle=puzzle_name,
            size=puzzle.size,
            clues=puzzle.clues,
            algorithm=solver_name,
            solved=stats.solved,
            time_seconds=stats.time_seconds,
            memory_bytes=stats.memory_bytes,
            trials=stats.trials,
            backtracks=stats.backtracks,
            naked_singles=stats.naked_singles,
            extra=dict(stats.extra)
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary = {
            "total_puzzles": len(self.puzzles),
            "solvers_tested": list(self.solvers.keys()),
            "results_by_algorithm": {},
            "results_by_puzzle": {}
        }

        # Group by algorithm
        for solver_name in self.solvers:
            solver_results = [r for r in self.results if r.algorithm == solver_name]
            if solver_results:
                solved = [r for r in solver_results if r.solved]
                times = [r.time_seconds for r in solver_results]

                summary["results_by_algorithm"][solver_name] = {
                    "solved_percent": len(solved) / len(solver_results) * 100,
                    "avg_time_seconds": sum(times) / len(times),
                    "max_time_seconds": max(times),
                    "total_trials": sum(r.trials for r in solver_results),
                    "total_backtracks": sum(r.backtracks for r in solver_results),
                    "total_solved": len(solved),
                    "total_tested": len(solver_results)
                }

        # Group by puzzle
        for puzzle_name in self.puzzles:
            summary["results_by_puzzle"][puzzle_name] = {
                r.algorithm: {
                    "solved": r.solved,
                    "time_seconds": r.time_seconds,
                    "trials": r.trials
                }
                for r in self.results if r.puzzle == puzzle_name
            }

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save benchmark results, summary and solutions to JSON files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        solutions_file = os.path.join(output_dir, "solutions.json")
        with open(solutions_file, "w") as f:
            json.dump(self.solutions, f, indent=2)

        log.info("Results saved to %s", output_dir)

"""Unit tests for the solver front end."""

import pytest
from sudokucell.benchmark.catalog import PUZZLES, SOLUTIONS, get_puzzle
from sudokucell.config import SolverConfig
from sudokucell.core.exceptions import InvalidConfiguration
from sudokucell.io.renderer import ConsoleAnimator, to_string
from sudokucell.solvers import BacktrackingSolver, StackSolver, make_solver


class TestBacktrackingSolver:
    """Tests for the recursive solver."""

    def test_solve_puzzle(self):
        """Test solving a known puzzle."""
        solver = BacktrackingSolver()

        result, stats = solver.solve(get_puzzle("classic"))

        assert stats.solved
        assert result.solved
        assert to_string(result.grid) == SOLUTIONS["classic"]
        assert stats.trials == 0
        assert stats.naked_singles == 51

    def test_stats_collected(self):
        """Test that stats are collected."""
        solver = BacktrackingSolver()

        result, stats = solver.solve(get_puzzle("first-row-4x4"))

        assert stats.time_seconds > 0
        assert stats.memory_bytes > 0
        assert stats.trials > 0
        assert stats.search_order_size == 12
        assert stats.algorithm == "Backtracking"
        assert stats.to_dict()["trials"] == stats.trials

    def test_unsolvable_is_not_an_error(self):
        solver = BacktrackingSolver()

        result, stats = solver.solve(get_puzzle("row-conflict"))

        assert not stats.solved
        assert not result.solved

    def test_outcome_flags_agree(self):
        for name in ("classic", "first-row-4x4", "dead-end-4x4", "row-conflict"):
            result, stats = BacktrackingSolver().solve(get_puzzle(name))
            assert result.solved == stats.solved

    def test_validate_seeds(self):
        solver = BacktrackingSolver(validate_seeds=True)
        with pytest.raises(InvalidConfiguration):
            solver.solve(get_puzzle("row-conflict"))

    def test_result_values_are_effective_values(self):
        result, _ = BacktrackingSolver().solve(get_puzzle("first-row-4x4"))

        assert result.size == 4
        assert result.values[0] == 1
        assert all(value is not None for value in result.values.values())
        assert [result.values[i] for i in range(4, 8)] == [3, 4, 1, 2]


class TestStackSolver:
    """Tests for the explicit-stack solver."""

    def test_solve_puzzle(self):
        solver = StackSolver()

        result, stats = solver.solve(get_puzzle("minimal-17"))

        assert stats.solved
        assert to_string(result.grid) == SOLUTIONS["minimal-17"]

    def test_dead_end(self):
        result, stats = StackSolver().solve(get_puzzle("dead-end-4x4"))
        assert not stats.solved
        assert stats.trials > 0


class TestMakeSolver:
    """Tests for make_solver()."""

    def test_default(self):
        solver = make_solver()
        assert isinstance(solver, BacktrackingSolver)
        assert solver.observer is None

    def test_iterative(self):
        solver = make_solver(SolverConfig(strategy="iterative", validate_seeds=True))
        assert isinstance(solver, StackSolver)
        assert solver.validate_seeds

    def test_animate(self):
        solver = make_solver(SolverConfig(animate=True, delay=0.0))
        assert isinstance(solver.observer, ConsoleAnimator)
        assert solver.observer.delay == 0.0

    def test_explicit_observer(self):
        events = []
        solver = make_solver(SolverConfig(animate=True), observer=lambda b, e: events.append(e))
        solver.solve(get_puzzle("first-row-4x4"))
        assert events[-1].kind == "solved"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

"""Tests for the benchmark runner and charts."""

import json
import os

import pytest
from sudokucell.benchmark import Benchmark, Visualizer, load_catalog
from sudokucell.benchmark.catalog import PUZZLES, SOLUTIONS, UNSOLVABLE, get_puzzle
from sudokucell.solvers import BacktrackingSolver

NAMES = ["first-row-4x4", "classic", "row-conflict"]


@pytest.fixture
def benchmark():
    bench = Benchmark(puzzles=load_catalog(NAMES))
    bench.run(show_progress=False)
    return bench


class TestCatalog:
    """Tests for the puzzle catalog."""

    def test_every_puzzle_parses(self):
        puzzles = load_catalog()
        assert set(puzzles) == set(PUZZLES)
        for name, puzzle in puzzles.items():
            assert puzzle.name == name

    def test_known_names(self):
        assert set(SOLUTIONS) <= set(PUZZLES)
        assert UNSOLVABLE <= set(PUZZLES)

    def test_unknown_name(self):
        with pytest.raises(KeyError):
            get_puzzle("nope")

    def test_minimal_puzzle_has_17_clues(self):
        assert get_puzzle("minimal-17").clues == 17


class TestBenchmark:
    """Tests for Benchmark."""

    def test_results(self, benchmark):
        assert len(benchmark.results) == len(NAMES) * 2
        solved = {(r.puzzle, r.algorithm): r.solved for r in benchmark.results}
        assert solved[("classic", "Recursive")]
        assert solved[("classic", "Stack")]
        assert not solved[("row-conflict", "Recursive")]
        assert benchmark.solutions["classic"] == SOLUTIONS["classic"]

    def test_summary(self, benchmark):
        summary = benchmark.get_summary()
        assert summary["total_puzzles"] == 3
        assert summary["solvers_tested"] == ["Recursive", "Stack"]
        recursive = summary["results_by_algorithm"]["Recursive"]
        assert recursive["total_solved"] == 2
        assert recursive["total_tested"] == 3
        assert set(summary["results_by_puzzle"]["classic"]) == {"Recursive", "Stack"}

    def test_rejected_puzzle_is_recorded(self):
        bench = Benchmark(
            puzzles={"row-conflict": get_puzzle("row-conflict")},
            solvers={"Strict": BacktrackingSolver(validate_seeds=True)}
        )
        results = bench.run(show_progress=False)
        assert not results[0].solved
        assert "error" in results[0].to_dict()

    def test_save_results(self, benchmark, tmp_path):
        benchmark.save_results(str(tmp_path))
        with open(tmp_path / "benchmark_results.json") as f:
            rows = json.load(f)
        assert len(rows) == 6
        assert {"puzzle", "algorithm", "trials", "memory_mb"} <= set(rows[0])
        assert os.path.exists(tmp_path / "benchmark_summary.json")
        assert os.path.exists(tmp_path / "solutions.json")


class TestVisualizer:
    """Tests for chart generation."""

    def test_generate_all(self, benchmark, tmp_path):
        visualizer = Visualizer(benchmark.results, str(tmp_path))
        charts = visualizer.generate_all()
        assert len(charts) == 2
        for chart in charts:
            assert os.path.getsize(chart) > 0

    def test_summary_table(self, benchmark, tmp_path):
        path = Visualizer(benchmark.results, str(tmp_path)).generate_summary_table()
        with open(path) as f:
            content = f.read()
        assert "| classic | Recursive | yes |" in content
        assert "| row-conflict | Stack | no |" in content

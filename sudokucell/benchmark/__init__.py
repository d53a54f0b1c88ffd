"""Benchmark module for comparing search strategies."""

from .benchmark import Benchmark, BenchmarkResult
from .catalog import PUZZLES, SOLUTIONS, get_puzzle, load_catalog
from .visualizer import Visualizer

__all__ = [
    "Benchmark",
    "BenchmarkResult",
    "PUZZLES",
    "SOLUTIONS",
    "get_puzzle",
    "load_catalog",
    "Visualizer",
]

"""Visualization utilities for benchmark results."""

from __future__ import annotations
import os
from typing import List

import matplotlib.pyplot as plt
import seaborn as sns
import numpy as np

from .benchmark import BenchmarkResult


class Visualizer:
    """
    Chart generator for benchmark results.

    Creates grouped bar charts comparing solvers on each puzzle.
    """

    COLORS = {
        "Recursive": "#2ecc71",  # Green
        "Stack": "#3498db",      # Blue
    }

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        plt.style.use('seaborn-v0_8-whitegrid')
        sns.set_palette("husl")

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        return [
            self.plot_time_by_puzzle(),
            self.plot_trials_by_puzzle(),
        ]

    def _grouped_bars(self, metric: str, ylabel: str, title: str, filename: str, log_scale: bool = False) -> str:
        fig, ax = plt.subplots(figsize=(12, 6))

        algorithms = sorted(set(r.algorithm for r in self.results))
        puzzles = list(dict.fromkeys(r.puzzle for r in self.results))

        x = np.arange(len(puzzles))
        width = 0.8 / max(len(algorithms), 1)

        for i, algo in enumerate(algorithms):
            values = []
            for puzzle in puzzles:
                matching = [
                    getattr(r, metric) for r in self.results
                    if r.algorithm == algo and r.puzzle == puzzle
                ]
                values.append(np.mean(matching) if matching else 0)

            offset = (i - len(algorithms) / 2 + 0.5) * width
            ax.bar(x + offset, values, width,
                   label=algo,
                   color=self.COLORS.get(algo, "#95a5a6"),
                   edgecolor='black', linewidth=0.5)

        ax.set_xlabel('Puzzle', fontsize=12)
        ax.set_ylabel(ylabel, fontsize=12)
        ax.set_title(title, fontsize=14, fontweight='bold')
        ax.set_xticks(x)
        ax.set_xticklabels(puzzles, rotation=30, ha='right')
        ax.legend(title='Solver')
        if log_scale:
            # symlog keeps zero-trial puzzles visible
            ax.set_yscale('symlog')
        else:
            ax.set_ylim(bottom=0)

        plt.tight_layout()
        path = os.path.join(self.output_dir, filename)
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path

    def plot_time_by_puzzle(self) -> str:
        """Create grouped bar chart of solve time per puzzle and solver."""
        return self._grouped_bars(
            "time_seconds", "Time (seconds)", "Solve Time by Puzzle and Solver", "time_by_puzzle.png"
        )

    def plot_trials_by_puzzle(self) -> str:
        """Create grouped bar chart of trial assignments per puzzle and solver."""
        return self._grouped_bars(
            "trials", "Trial assignments (symlog)", "Search Effort by Puzzle and Solver",
            "trials_by_puzzle.png", log_scale=True
        )

    def generate_summary_table(self) -> str:
        """Generate a markdown summary table."""
        lines = [
            "# Benchmark Summary\n",
            "| Puzzle | Solver | Solved | Time | Naked singles | Trials | Backtracks |",
            "|--------|--------|--------|------|---------------|--------|------------|"
        ]

        for r in self.results:
            lines.append(
                f"| {r.puzzle} | {r.algorithm} | {'yes' if r.solved else 'no'} | "
                f"{r.time_seconds:.4f}s | {r.naked_singles} | {r.trials:,} | {r.backtracks:,} |"
            )

        path = os.path.join(self.output_dir, "benchmark_summary.md")
        with open(path, "w") as f:
            f.write("\n".join(lines))

        return path

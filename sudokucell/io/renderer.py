"""Text rendering of grids and console animation of the search."""

from __future__ import annotations
from typing import Optional, TextIO
import math
import sys
import time

import numpy as np

from ..core.board import Board, SearchEvent


def value_to_char(value: int) -> str:
    """Encode one value: '0' for empty, 1-9, then A-Z for 10+."""
    if value == 0:
        return '0'
    if value <= 9:
        return str(value)
    return chr(ord('A') + value - 10)


def to_string(grid: np.ndarray) -> str:
    """Convert a grid to its compact one-line form."""
    return ''.join(value_to_char(int(v)) for v in np.asarray(grid).flatten())


def render_grid(grid: np.ndarray) -> str:
    """Pretty-print a grid with block borders, '.' for empty cells."""
    arr = np.asarray(grid)
    size = arr.shape[0]
    box_size = math.isqrt(size)

    lines = []
    horizontal_sep = '+' + (('-' * (box_size * 2 + 1)) + '+') * box_size

    for i in range(size):
        if i % box_size == 0:
            lines.append(horizontal_sep)

        row_str = '|'
        for j in range(size):
            val = int(arr[i, j])
            row_str += ' .' if val == 0 else f' {value_to_char(val)}'
            if (j + 1) % box_size == 0:
                row_str += ' |'

        lines.append(row_str)

    lines.append(horizontal_sep)
    return '\n'.join(lines)


def describe_event(board: Board, event: SearchEvent) -> str:
    """One-line status message for a search event."""
    if event.kind == "try":
        options = sorted(board[event.position].candidates)
        return (
            f"Trying {event.value} ({options.index(event.value) + 1} of {len(options)}) "
            f"in cell {event.position}"
        )
    if event.kind == "backtrack":
        return f"Backtracking: {event.value} in cell {event.position} leads nowhere"
    if event.kind == "commit":
        return f"Naked single: {event.value} in cell {event.position}"
    return "Solved"


class ConsoleAnimator:
    """
    Board observer that redraws the grid on every search event.

    Each frame clears the terminal, prints the grid and a status line, then
    sleeps for `delay` seconds.
    """

    CLEAR = "\033[H\033[2J"

    def __init__(self, delay: float = 0.01, stream: Optional[TextIO] = None, clear: bool = True):
        self.delay = delay
        self.stream = stream if stream is not None else sys.stdout
        self.clear = clear
        self.frames = 0

    def __call__(self, board: Board, event: SearchEvent) -> None:
        if self.clear:
            self.stream.write(self.CLEAR)
        self.stream.write(render_grid(board.to_grid()) + "\n")
        self.stream.write(describe_event(board, event) + "\n")
        self.stream.flush()
        self.frames += 1
        if self.delay > 0:
            time.sleep(self.delay)

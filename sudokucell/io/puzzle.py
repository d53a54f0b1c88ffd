"""Seed ingestion: turning text, grids and mappings into puzzles."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Sequence, Tuple
import math
import os

import numpy as np

from ..core.cell import box_size_of
from ..core.exceptions import InvalidConfiguration

# Characters drawn by render_grid() around the values
BORDER_CHARS = set("|-+")
EMPTY_CHARS = set("0.")


@dataclass
class Puzzle:
    """A board size plus the (position, value) seeds to commit."""
    size: int
    seeds: List[Tuple[int, int]] = field(default_factory=list)
    name: str = ""

    @property
    def clues(self) -> int:
        return len(self.seeds)

    def to_grid(self) -> np.ndarray:
        """Seeds as an N x N int array, 0 for empty cells."""
        grid = np.zeros(self.size * self.size, dtype=np.int32)
        for position, value in self.seeds:
            grid[position] = value
        return grid.reshape(self.size, self.size)


def char_to_value(c: str) -> int:
    """Decode one cell character: 0 or . for empty, 1-9, then A-Z for 10+."""
    if c in EMPTY_CHARS:
        return 0
    if c.isascii() and c.isdigit():
        return int(c)
    if c.isalpha() and c.isascii():
        return ord(c.upper()) - ord('A') + 10
    raise InvalidConfiguration(f"Unexpected character {c!r} in puzzle")


def parse_puzzle(text: str, size: Optional[int] = None, name: str = "") -> Puzzle:
    """
    Parse a puzzle from its text form.

    Accepts the compact one-line form ("530070000600...") as well as the
    boxed output of render_grid(); whitespace and border characters are
    skipped.

    Args:
        text: Puzzle text.
        size: Board size. Inferred from the number of cells if omitted.
        name: Optional label carried on the puzzle.

    Returns:
        The parsed Puzzle.

    Raises:
        InvalidConfiguration: If the text does not describe a board.
    """
    chars = [c for c in text if not c.isspace() and c not in BORDER_CHARS]

    if size is None:
        size = math.isqrt(len(chars))
        if size == 0 or size * size != len(chars):
            raise InvalidConfiguration(
                f"Cannot infer board size from {len(chars)} cells"
            )
    box_size_of(size)
    if len(chars) != size * size:
        raise InvalidConfiguration(
            f"Puzzle must have {size * size} cells, got {len(chars)}"
        )

    seeds = []
    for position, c in enumerate(chars):
        value = char_to_value(c)
        if value > size:
            raise InvalidConfiguration(
                f"Value {value} at position {position} exceeds board size {size}"
            )
        if value:
            seeds.append((position, value))

    return Puzzle(size=size, seeds=seeds, name=name)


def load_puzzle(path: str, size: Optional[int] = None) -> Puzzle:
    """
    Read a puzzle from a text file.

    Lines starting with '#' are comments.
    """
    with open(path, "r") as f:
        lines = [line for line in f if not line.lstrip().startswith("#")]
    name = os.path.splitext(os.path.basename(path))[0]
    return parse_puzzle("".join(lines), size=size, name=name)


def puzzle_from_grid(rows: Sequence[Sequence[int]], name: str = "") -> Puzzle:
    """Create a puzzle from a 2D list or array, 0 for empty."""
    arr = np.asarray(rows, dtype=np.int32)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise InvalidConfiguration(f"Grid must be square, got shape {arr.shape}")
    size = arr.shape[0]
    box_size_of(size)

    seeds = [
        (int(position), int(value))
        for position, value in enumerate(arr.flatten())
        if value != 0
    ]
    return Puzzle(size=size, seeds=seeds, name=name)


def puzzle_from_mapping(seeds: Mapping[int, int], size: int = 9, name: str = "") -> Puzzle:
    """Create a puzzle from a {position: value} mapping."""
    box_size_of(size)
    return Puzzle(size=size, seeds=sorted(seeds.items()), name=name)

"""Cell state and the row/column/block neighbour model."""

from __future__ import annotations
from functools import lru_cache
from typing import FrozenSet, Optional, Set, Tuple
import math

from .exceptions import CellStateError, InvalidConfiguration


def box_size_of(size: int) -> int:
    """
    Return the block side length for a board of the given size.

    Raises:
        InvalidConfiguration: If size is not a positive perfect square.
    """
    if not isinstance(size, int) or size < 1:
        raise InvalidConfiguration(f"Size must be a positive integer, got {size!r}")
    box_size = math.isqrt(size)
    if box_size * box_size != size:
        raise InvalidConfiguration(f"Size must be a perfect square, got {size}")
    return box_size


def position_of(index: int, size: int) -> Tuple[int, int]:
    """Map a position index to its (row, col) coordinates."""
    return index // size, index % size


def block_of(index: int, size: int) -> Tuple[int, int]:
    """Map a position index to its (block_row, block_col) coordinates."""
    box_size = math.isqrt(size)
    row, col = position_of(index, size)
    return row // box_size, col // box_size


@lru_cache(maxsize=None)
def neighbors_of(index: int, size: int) -> FrozenSet[int]:
    """
    Get every position sharing a row, column or block with index.

    Args:
        index: Position index, 0 <= index < size * size.
        size: Board size N.

    Returns:
        Frozen set of position indices, excluding index itself.
    """
    box_size = math.isqrt(size)
    row, col = position_of(index, size)

    peers = set()
    # Row and column
    for i in range(size):
        peers.add(row * size + i)
        peers.add(i * size + col)

    # Block
    top = (row // box_size) * box_size
    left = (col // box_size) * box_size
    for i in range(box_size):
        for j in range(box_size):
            peers.add((top + i) * size + left + j)

    peers.discard(index)
    return frozenset(peers)


class Cell:
    """
    One grid position of a Sudoku board.

    A cell holds a committed value (a seed or a value forced by
    propagation), a trial value (a guess made by the search) and the set
    of candidates that are still possible. Committing empties the candidate
    set; trial assignments never touch it.
    """

    def __init__(self, index: int, size: int):
        """
        Create an empty cell.

        Args:
            index: Position index of the cell on the board.
            size: Board size N. Candidates start as {1..N}.
        """
        self.index = index
        self.size = size
        self.committed_value: Optional[int] = None
        self.trial_value: Optional[int] = None
        self.candidates: Set[int] = set(range(1, size + 1))
        self.neighbors: FrozenSet[int] = neighbors_of(index, size)

    @property
    def row(self) -> int:
        return self.index // self.size

    @property
    def col(self) -> int:
        return self.index % self.size

    @property
    def is_committed(self) -> bool:
        return self.committed_value is not None

    def commit(self, value: int) -> None:
        """
        Fix the cell's value for good and drop all candidates.

        A cell can be committed once, and only to a value that is still
        one of its candidates.

        Raises:
            CellStateError: If the cell is already committed or value is
                not a live candidate.
        """
        self._check_range(value)
        if self.committed_value is not None:
            raise CellStateError(
                f"Cell {self.index} already committed to {self.committed_value}"
            )
        if value not in self.candidates:
            raise CellStateError(
                f"Cell {self.index}: {value} is not a candidate "
                f"(candidates: {sorted(self.candidates)})"
            )
        self.committed_value = value
        self.trial_value = None
        self.candidates.clear()

    def try_value(self, value: Optional[int]) -> None:
        """Set or clear (with None) the trial value. Candidates are untouched."""
        if self.committed_value is not None:
            raise CellStateError(f"Cell {self.index} is committed, cannot try values")
        if value is not None:
            self._check_range(value)
        self.trial_value = value

    def eliminate(self, value: int) -> None:
        """Remove value from the candidates if present."""
        self.candidates.discard(value)

    def effective_value(self) -> Optional[int]:
        """Committed value if set, else the trial value, else None."""
        if self.committed_value is not None:
            return self.committed_value
        return self.trial_value

    def _check_range(self, value: int) -> None:
        if not 1 <= value <= self.size:
            raise CellStateError(
                f"Cell {self.index}: value must be 1-{self.size}, got {value}"
            )

    def __repr__(self) -> str:
        return (
            f"Cell(index={self.index}, committed={self.committed_value}, "
            f"trial={self.trial_value}, candidates={sorted(self.candidates)})"
        )

"""Validation utilities for solved and partially filled grids."""

from __future__ import annotations
import numpy as np
from typing import TYPE_CHECKING, Sequence, Union

from .cell import box_size_of

if TYPE_CHECKING:
    from ..io.puzzle import Puzzle

GridLike = Union[np.ndarray, Sequence[Sequence[int]]]


def _as_grid(grid: GridLike) -> np.ndarray:
    arr = np.asarray(grid, dtype=np.int32)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise ValueError(f"Grid must be square, got shape {arr.shape}")
    return arr


def _unit_ok(values: np.ndarray) -> bool:
    non_zero = values[values != 0]
    return len(non_zero) == len(set(non_zero.tolist()))


def is_valid_grid(grid: GridLike) -> bool:
    """
    Check that no row, column or block repeats a value.

    Empty cells (0) are ignored, so partially filled grids can be checked.

    Args:
        grid: N x N array or nested list, 0 for empty.

    Returns:
        True if no constraint is violated.
    """
    arr = _as_grid(grid)
    size = arr.shape[0]
    box_size = box_size_of(size)

    if arr.min() < 0 or arr.max() > size:
        return False

    # Check all rows and columns
    for i in range(size):
        if not _unit_ok(arr[i, :]) or not _unit_ok(arr[:, i]):
            return False

    # Check all blocks
    for top in range(0, size, box_size):
        for left in range(0, size, box_size):
            if not _unit_ok(arr[top:top + box_size, left:left + box_size].flatten()):
                return False

    return True


def is_solved_grid(grid: GridLike) -> bool:
    """Check that the grid is completely filled and valid."""
    arr = _as_grid(grid)
    return bool(np.all(arr != 0)) and is_valid_grid(arr)


def validate_solution(puzzle: Puzzle, grid: GridLike) -> bool:
    """
    Validate that a grid solves the puzzle.

    Args:
        puzzle: The original puzzle.
        grid: The proposed solution.

    Returns:
        True if the grid is a complete valid solution that keeps every seed.
    """
    arr = _as_grid(grid)
    if arr.shape[0] != puzzle.size:
        return False

    # Check that the solution respects the seeds
    flat = arr.flatten()
    for position, value in puzzle.seeds:
        if flat[position] != value:
            return False

    return is_solved_grid(arr)

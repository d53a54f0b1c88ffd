"""Exception types raised by the Sudoku engine."""


class SudokuError(Exception):
    """Base class for all errors raised by this package."""


class InvalidConfiguration(SudokuError, ValueError):
    """
    Raised at the boundary when the input cannot describe a puzzle.

    Covers board sizes that are not perfect squares, seeds outside the
    board, values outside 1..N, duplicate seed positions, malformed puzzle
    text and bad solver configuration.
    """


class CellStateError(SudokuError, AssertionError):
    """Raised when a cell is driven into a state its contract forbids."""

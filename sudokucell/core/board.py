"""Sudoku board: seeding, constraint propagation and backtracking search."""

from __future__ import annotations
from dataclasses import dataclass
from collections import abc
from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union
import logging

import numpy as np

from .cell import Cell, box_size_of
from .exceptions import CellStateError, InvalidConfiguration

log = logging.getLogger(__name__)

Seeds = Union[Mapping[int, int], Iterable[Tuple[int, int]]]


@dataclass(frozen=True)
class SearchEvent:
    """Notification sent to a board observer."""
    kind: str  # "commit", "try", "backtrack" or "solved"
    position: Optional[int] = None
    value: Optional[int] = None
    depth: int = 0


@dataclass
class SearchStats:
    """Counters collected while preparing and searching a board."""
    naked_singles: int = 0
    trials: int = 0
    backtracks: int = 0
    max_depth: int = 0
    search_order_size: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "naked_singles": self.naked_singles,
            "trials": self.trials,
            "backtracks": self.backtracks,
            "max_depth": self.max_depth,
            "search_order_size": self.search_order_size,
        }


Observer = Callable[["Board", SearchEvent], None]


class Board:
    """
    An N x N Sudoku board made of N * N cells.

    The board owns its cells. A solve attempt runs in four steps:

    1. seed() commits the given values,
    2. propagate() removes committed values from neighbouring candidates,
    3. build_search_order() commits naked singles until none are left and
       sorts the remaining cells by candidate count,
    4. search() (or search_iterative()) backtracks over that order.

    Candidates are never restored once eliminated. Only committed values
    eliminate; trial values made by the search do not. A board is searched
    once; a new solve attempt needs a new board.
    """

    def __init__(self, size: int = 9, observer: Optional[Observer] = None):
        """
        Create an empty board.

        Args:
            size: Board size N. Must be a perfect square (4, 9, 16, ...).
            observer: Optional callable receiving (board, SearchEvent) for
                every commit, trial and backtrack.

        Raises:
            InvalidConfiguration: If size is not a perfect square.
        """
        self.box_size = box_size_of(size)
        self.size = size
        self.cells: List[Cell] = [Cell(i, size) for i in range(size * size)]
        self.search_order: Optional[List[Cell]] = None
        self.searched = False
        self.stats = SearchStats()
        self.observer = observer

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    # ------------------------------------------------------------------
    # Seeding
    # ------------------------------------------------------------------

    def seed(self, seeds: Seeds, check_conflicts: bool = False) -> None:
        """
        Commit the given (position, value) pairs.

        Args:
            seeds: Mapping of position -> value, or an iterable of pairs.
            check_conflicts: If True, reject seeds that repeat a value in a
                row, column or block. Otherwise such a board is reported as
                unsolvable by search().

        Raises:
            InvalidConfiguration: On out-of-range positions or values,
                duplicate positions, or conflicts when check_conflicts is set.
            CellStateError: If the board has already been prepared.
        """
        if self.search_order is not None:
            raise CellStateError("Cannot seed a board after its search order is built")

        pairs = seeds.items() if isinstance(seeds, abc.Mapping) else seeds
        seen = set()
        for position, value in pairs:
            if not 0 <= position < len(self.cells):
                raise InvalidConfiguration(
                    f"Seed position must be 0-{len(self.cells) - 1}, got {position}"
                )
            if not 1 <= value <= self.size:
                raise InvalidConfiguration(
                    f"Seed value must be 1-{self.size}, got {value} at {position}"
                )
            if position in seen:
                raise InvalidConfiguration(f"Duplicate seed position {position}")
            seen.add(position)
            self.cells[position].commit(value)

        log.debug("Seeded %d of %d cells", len(seen), len(self.cells))

        if check_conflicts:
            clashes = self.conflicts()
            if clashes:
                p, q = clashes[0]
                raise InvalidConfiguration(
                    f"Seeds conflict: positions {p} and {q} both hold "
                    f"{self.cells[p].committed_value}"
                )

    # ------------------------------------------------------------------
    # Propagation
    # ------------------------------------------------------------------

    def propagate(self) -> None:
        """Eliminate every committed value from its neighbours' candidates."""
        for cell in self.cells:
            if cell.committed_value is not None:
                self._eliminate_from_neighbors(cell)

    def build_search_order(self) -> List[Cell]:
        """
        Solve naked singles and return the cells left for the search.

        Cells with exactly one candidate are committed and their value is
        eliminated from their neighbours, repeating until the cell with the
        fewest candidates has more than one. The remaining cells are sorted
        by candidate count, fewest first; ties keep board order.

        Returns:
            The search order, also stored on the board.
        """
        order = [cell for cell in self.cells if cell.candidates]

        while order:
            for cell in order:
                # An earlier single in this pass may have emptied it
                if len(cell.candidates) == 1:
                    value = next(iter(cell.candidates))
                    cell.commit(value)
                    self._eliminate_from_neighbors(cell)
                    self.stats.naked_singles += 1
                    self._emit("commit", cell, value)

            order = [cell for cell in order if cell.candidates]
            order.sort(key=lambda c: len(c.candidates))
            if not order or len(order[0].candidates) > 1:
                break

        self.search_order = order
        self.stats.search_order_size = len(order)
        log.debug(
            "Propagation committed %d naked singles, %d cells left to search",
            self.stats.naked_singles, len(order)
        )
        return order

    def prepare(self) -> List[Cell]:
        """Run propagate() and build_search_order()."""
        self.propagate()
        return self.build_search_order()

    def _eliminate_from_neighbors(self, cell: Cell) -> None:
        for index in cell.neighbors:
            self.cells[index].eliminate(cell.committed_value)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search(self) -> bool:
        """
        Backtrack over the search order using recursion.

        Returns:
            True if every cell in the order received a consistent trial
            value, False if the seed admits no completion.
        """
        if not self._ready_to_search():
            return False
        if not self.search_order:
            return self._finish(True)
        return self._finish(self._search_from(0))

    def _search_from(self, depth: int) -> bool:
        order = self.search_order
        cell = order[depth]
        last = depth == len(order) - 1
        if depth + 1 > self.stats.max_depth:
            self.stats.max_depth = depth + 1

        for candidate in sorted(cell.candidates):
            cell.try_value(candidate)
            self.stats.trials += 1
            self._emit("try", cell, candidate, depth)

            if not self.is_possible(cell, candidate):
                continue
            if last or self._search_from(depth + 1):
                # Trial values stay set on the way back up
                return True

            cell.try_value(None)
            self.stats.backtracks += 1
            self._emit("backtrack", cell, candidate, depth)

        cell.try_value(None)
        return False

    def search_iterative(self) -> bool:
        """
        Same search as search() with an explicit stack instead of recursion.

        Candidates are visited in the same order, so both methods find the
        same assignment and report the same counters.
        """
        if not self._ready_to_search():
            return False
        order = self.search_order
        if not order:
            return self._finish(True)

        pending: List[Optional[Iterator[int]]] = [None] * len(order)
        depth = 0
        pending[0] = iter(sorted(order[0].candidates))
        self.stats.max_depth = max(self.stats.max_depth, 1)

        while True:
            cell = order[depth]
            placed = False
            for candidate in pending[depth]:
                cell.try_value(candidate)
                self.stats.trials += 1
                self._emit("try", cell, candidate, depth)
                if self.is_possible(cell, candidate):
                    placed = True
                    break

            if placed:
                if depth == len(order) - 1:
                    return self._finish(True)
                depth += 1
                pending[depth] = iter(sorted(order[depth].candidates))
                self.stats.max_depth = max(self.stats.max_depth, depth + 1)
                continue

            # Candidates exhausted at this depth
            cell.try_value(None)
            pending[depth] = None
            if depth == 0:
                return self._finish(False)
            depth -= 1
            parent = order[depth]
            value = parent.trial_value
            parent.try_value(None)
            self.stats.backtracks += 1
            self._emit("backtrack", parent, value, depth)

    def is_possible(self, cell: Cell, value: int) -> bool:
        """Check that no neighbour of cell currently holds value."""
        for index in cell.neighbors:
            if self.cells[index].effective_value() == value:
                return False
        return True

    def _ready_to_search(self) -> bool:
        if self.search_order is None:
            raise CellStateError("Search order not built, call prepare() first")
        if self.searched:
            raise CellStateError("Board already searched, build a new board to solve again")
        self.searched = True
        clashes = self.conflicts(committed_only=True)
        if clashes:
            log.debug("Committed values conflict at %s", clashes[0])
            return False
        dead = self.dead_cells()
        if dead:
            log.debug("Cells %s have no value and no candidates", dead)
            return False
        return True

    def _finish(self, solved: bool) -> bool:
        log.debug(
            "Search %s after %d trials, %d backtracks",
            "succeeded" if solved else "failed",
            self.stats.trials, self.stats.backtracks
        )
        if solved:
            self._emit("solved", None, None)
        return solved

    def _emit(self, kind: str, cell: Optional[Cell], value: Optional[int], depth: int = 0) -> None:
        if self.observer is not None:
            position = cell.index if cell is not None else None
            self.observer(self, SearchEvent(kind, position, value, depth))

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------

    def conflicts(self, committed_only: bool = False) -> List[Tuple[int, int]]:
        """
        Find neighbouring positions holding the same value.

        Args:
            committed_only: Compare committed values only, ignoring trials.

        Returns:
            Sorted list of (p, q) pairs with p < q.
        """
        clashes = []
        for cell in self.cells:
            value = cell.committed_value if committed_only else cell.effective_value()
            if value is None:
                continue
            for index in cell.neighbors:
                if index <= cell.index:
                    continue
                other = self.cells[index]
                other_value = other.committed_value if committed_only else other.effective_value()
                if other_value == value:
                    clashes.append((cell.index, index))
        return clashes

    def dead_cells(self) -> List[int]:
        """Positions with no value and no candidates left."""
        return [
            cell.index for cell in self.cells
            if cell.effective_value() is None and not cell.candidates
        ]

    def is_complete(self) -> bool:
        """Check that every cell has a committed or trial value."""
        return all(cell.effective_value() is not None for cell in self.cells)

    def is_solved(self) -> bool:
        """Check that every cell has a value and no neighbours clash."""
        return self.is_complete() and not self.conflicts()

    def snapshot(self) -> Dict[int, Optional[int]]:
        """Map every position to its effective value (None when empty)."""
        return {cell.index: cell.effective_value() for cell in self.cells}

    def to_grid(self) -> np.ndarray:
        """Effective values as an N x N int array, 0 for empty cells."""
        values = [cell.effective_value() or 0 for cell in self.cells]
        return np.array(values, dtype=np.int32).reshape(self.size, self.size)

    def __repr__(self) -> str:
        filled = sum(1 for cell in self.cells if cell.effective_value() is not None)
        return f"Board(size={self.size}, filled={filled})"

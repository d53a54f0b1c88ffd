"""Unit tests for cells and the neighbour model."""

import pytest
from sudokucell.core.cell import Cell, block_of, box_size_of, neighbors_of, position_of
from sudokucell.core.exceptions import CellStateError, InvalidConfiguration


class TestNeighbors:
    """Tests for neighbors_of()."""

    @pytest.mark.parametrize("size,expected", [(4, 7), (9, 20), (16, 39)])
    def test_count_is_same_for_every_position(self, size, expected):
        """Every cell has 3N - 2*sqrt(N) - 1 neighbours."""
        counts = {len(neighbors_of(i, size)) for i in range(size * size)}
        assert counts == {expected}

    @pytest.mark.parametrize("size", [4, 9])
    def test_symmetry(self, size):
        """q is a neighbour of p exactly when p is a neighbour of q."""
        for p in range(size * size):
            for q in neighbors_of(p, size):
                assert p in neighbors_of(q, size)

    def test_excludes_self(self):
        for i in range(81):
            assert i not in neighbors_of(i, 9)

    def test_top_left_cell(self):
        """Neighbours of position 0 on a 9x9 board."""
        peers = neighbors_of(0, 9)
        assert set(range(1, 9)) <= peers            # row
        assert {9, 18, 27, 36, 45, 54, 63, 72} <= peers  # column
        assert {10, 11, 19, 20} <= peers              # block
        assert 12 not in peers
        assert 80 not in peers

    def test_coordinates(self):
        assert position_of(40, 9) == (4, 4)
        assert position_of(17, 9) == (1, 8)
        assert block_of(17, 9) == (0, 2)
        assert block_of(80, 9) == (2, 2)
        assert block_of(5, 4) == (0, 0)

    @pytest.mark.parametrize("size", [0, 2, 8, 10, -9])
    def test_box_size_rejects_non_squares(self, size):
        with pytest.raises(InvalidConfiguration):
            box_size_of(size)

    def test_box_size(self):
        assert box_size_of(1) == 1
        assert box_size_of(9) == 3
        assert box_size_of(25) == 5


class TestCell:
    """Tests for Cell state transitions."""

    def test_new_cell(self):
        cell = Cell(10, 9)
        assert cell.row == 1
        assert cell.col == 1
        assert cell.candidates == set(range(1, 10))
        assert cell.committed_value is None
        assert cell.trial_value is None
        assert cell.effective_value() is None
        assert len(cell.neighbors) == 20

    def test_commit_empties_candidates(self):
        cell = Cell(0, 9)
        cell.commit(5)
        assert cell.committed_value == 5
        assert cell.candidates == set()
        assert cell.is_committed
        assert cell.effective_value() == 5

    def test_commit_twice_is_rejected(self):
        cell = Cell(0, 9)
        cell.commit(5)
        with pytest.raises(CellStateError):
            cell.commit(6)

    def test_commit_eliminated_value_is_rejected(self):
        cell = Cell(0, 9)
        cell.eliminate(4)
        with pytest.raises(CellStateError):
            cell.commit(4)
        assert cell.committed_value is None

    def test_commit_out_of_range(self):
        cell = Cell(0, 4)
        with pytest.raises(CellStateError):
            cell.commit(5)

    def test_try_value_keeps_candidates(self):
        cell = Cell(0, 9)
        cell.eliminate(1)
        cell.try_value(3)
        assert cell.trial_value == 3
        assert cell.effective_value() == 3
        assert cell.candidates == set(range(2, 10))

        cell.try_value(None)
        assert cell.trial_value is None
        assert cell.effective_value() is None

    def test_try_value_on_committed_cell(self):
        cell = Cell(0, 9)
        cell.commit(2)
        with pytest.raises(CellStateError):
            cell.try_value(3)

    def test_eliminate_is_a_no_op_when_absent(self):
        cell = Cell(0, 4)
        cell.eliminate(2)
        cell.eliminate(2)
        assert cell.candidates == {1, 3, 4}

    def test_committed_value_wins_over_trial(self):
        cell = Cell(0, 9)
        cell.try_value(7)
        cell.commit(5)
        assert cell.trial_value is None
        assert cell.effective_value() == 5

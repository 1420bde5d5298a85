"""Tests for the Grid module."""

import pytest

from snake_duel.grid import Axis, Grid
from snake_duel.snake import Direction


class TestGridInit:
    def test_dimensions(self):
        grid = Grid(width=5, height=4)
        assert grid.x_max == 4
        assert grid.y_max == 3
        assert grid.capacity == 20

    def test_inset_bounds(self):
        grid = Grid(width=18, height=18, x_min=1, y_min=1)
        assert (grid.x_min, grid.x_max) == (1, 18)
        assert (grid.y_min, grid.y_max) == (1, 18)

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 1"):
            Grid(width=0, height=5)
        with pytest.raises(ValueError, match="at least 1"):
            Grid(width=5, height=0)

    def test_negative_offset_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            Grid(width=5, height=5, x_min=-1)


class TestGridWrap:
    def test_wrap_past_edges(self):
        grid = Grid(width=5, height=5)
        assert grid.wrap(-1, Axis.X) == 4
        assert grid.wrap(5, Axis.X) == 0
        assert grid.wrap(-1, Axis.Y) == 4
        assert grid.wrap(2, Axis.Y) == 2

    def test_wrap_inset(self):
        grid = Grid(width=18, height=18, x_min=1, y_min=1)
        assert grid.wrap(0, Axis.X) == 18
        assert grid.wrap(19, Axis.X) == 1
        assert grid.wrap(0, Axis.Y) == 18
        assert grid.wrap(19, Axis.Y) == 1

    def test_step_wraps(self):
        grid = Grid(width=5, height=5)
        assert grid.step((4, 0), Direction.RIGHT) == (0, 0)
        assert grid.step((0, 0), Direction.UP) == (0, 4)
        assert grid.step((0, 4), Direction.DOWN) == (0, 0)
        assert grid.step((0, 2), Direction.LEFT) == (4, 2)

    @pytest.mark.parametrize("direction", list(Direction))
    def test_step_never_leaves_board(self, direction):
        grid = Grid(width=6, height=4, x_min=2, y_min=3)
        for cell in grid.cells():
            assert grid.in_bounds(grid.step(cell, direction))


class TestGridIndexing:
    def test_linear_index(self):
        grid = Grid(width=18, height=18, x_min=1, y_min=1)
        assert grid.linear_index((1, 1)) == 0
        assert grid.linear_index((18, 1)) == 17
        assert grid.linear_index((1, 2)) == 18

    def test_cell_at_inverts_linear_index(self):
        grid = Grid(width=4, height=3, x_min=2, y_min=1)
        assert grid.cell_at(0) == (2, 1)
        assert grid.cell_at(5) == (3, 2)
        assert [grid.linear_index(c) for c in grid.cells()] == list(range(12))

    def test_in_bounds(self):
        grid = Grid(width=5, height=5, x_min=1, y_min=1)
        assert grid.in_bounds((1, 1))
        assert grid.in_bounds((5, 5))
        assert not grid.in_bounds((0, 1))
        assert not grid.in_bounds((6, 1))


class TestGridSerialization:
    def test_to_dict(self):
        grid = Grid(width=5, height=4, x_min=1, y_min=2)
        assert grid.to_dict() == {"width": 5, "height": 4, "x_min": 1, "y_min": 2}

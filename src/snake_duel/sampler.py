"""Uniform selection of a free board cell."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from snake_duel.grid import Cell, Grid

logger = logging.getLogger(__name__)


class BoardExhaustedError(RuntimeError):
    """Raised when a free cell is requested from a fully occupied board."""


def sample_free_cell(
    grid: Grid,
    occupied: Iterable[Cell],
    rng: np.random.Generator,
) -> Cell:
    """Pick a cell uniformly at random among those not in *occupied*.

    Occupied cells are converted to sorted linear indices and a single
    integer ``r`` is drawn from ``[0, capacity - occupied_count)``. The
    result is the ``r``-th free position in ascending linear order, which
    is what walking the board from index 0 while skipping occupied
    positions would reach. No retries are needed however full the board is.

    Duplicate cells (two snakes sharing a cell) count once.
    """
    indices = []
    for cell in occupied:
        if not grid.in_bounds(cell):
            raise ValueError(f"Occupied cell {cell} lies outside the grid.")
        indices.append(grid.linear_index(cell))
    taken = np.unique(np.asarray(indices, dtype=np.int64))

    free_count = grid.capacity - taken.size
    if free_count <= 0:
        raise BoardExhaustedError(
            f"No free cell left on a {grid.width}×{grid.height} board."
        )

    r = int(rng.integers(0, free_count))
    free = np.setdiff1d(
        np.arange(grid.capacity, dtype=np.int64), taken, assume_unique=True,
    )
    return grid.cell_at(int(free[r]))

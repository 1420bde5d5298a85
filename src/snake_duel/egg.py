"""Egg placement logic."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np

from snake_duel.sampler import BoardExhaustedError, sample_free_cell

if TYPE_CHECKING:
    from snake_duel.grid import Cell, Grid
    from snake_duel.snake import Snake

logger = logging.getLogger(__name__)


class Egg:
    """The single collectible cell on the board.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.cell: Cell | None = None

    def place_initial(self, snakes: Iterable[Snake]) -> Cell:
        """Put the first egg of the round on a free cell."""
        return self._place(snakes)

    def relocate(self, snakes: Iterable[Snake]) -> Cell:
        """Move an eaten egg to a free cell."""
        previous = self.cell
        cell = self._place(snakes)
        logger.debug("Egg moved from %s to %s.", previous, cell)
        return cell

    def _place(self, snakes: Iterable[Snake]) -> Cell:
        occupied = [seg for snake in snakes for seg in snake.body]
        try:
            self.cell = sample_free_cell(self.grid, occupied, self.rng)
        except BoardExhaustedError:
            logger.error(
                "Cannot place egg: all %d cells are occupied.",
                self.grid.capacity,
            )
            raise
        return self.cell

    def to_dict(self) -> dict:
        """Serialize egg state to a dictionary."""
        return {"cell": list(self.cell) if self.cell is not None else None}

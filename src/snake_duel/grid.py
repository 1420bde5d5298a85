"""Board geometry for the snake game."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from snake_duel.snake import Direction

Cell = tuple[int, int]


class Axis(enum.Enum):
    """Board axis used by :meth:`Grid.wrap`."""

    X = "x"
    Y = "y"


class Grid:
    """Rectangular toroidal board.

    Cells are ``(x, y)`` pairs. A board may be inset inside a border, in
    which case its first cell is ``(x_min, y_min)`` rather than ``(0, 0)``.
    Moving one step past an edge reappears on the opposite edge.
    """

    def __init__(
        self,
        width: int,
        height: int,
        x_min: int = 0,
        y_min: int = 0,
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError("Grid dimensions must be at least 1×1.")
        if x_min < 0 or y_min < 0:
            raise ValueError("Grid offsets must be non-negative.")
        self.width = width
        self.height = height
        self.x_min = x_min
        self.y_min = y_min

    @property
    def x_max(self) -> int:
        return self.x_min + self.width - 1

    @property
    def y_max(self) -> int:
        return self.y_min + self.height - 1

    @property
    def capacity(self) -> int:
        """Total number of cells on the board."""
        return self.width * self.height

    def in_bounds(self, cell: Cell) -> bool:
        """Check whether a cell lies on the board."""
        x, y = cell
        return self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max

    def wrap(self, coordinate: int, axis: Axis) -> int:
        """Wrap a coordinate around the edges of the given axis."""
        if axis is Axis.X:
            return self.x_min + (coordinate - self.x_min) % self.width
        return self.y_min + (coordinate - self.y_min) % self.height

    def step(self, cell: Cell, direction: Direction) -> Cell:
        """Return the neighbour of *cell* along *direction*, wrapped."""
        dx, dy = direction.value
        x, y = cell
        return self.wrap(x + dx, Axis.X), self.wrap(y + dy, Axis.Y)

    def linear_index(self, cell: Cell) -> int:
        """Row-major index of a cell, used for occupancy bookkeeping."""
        x, y = cell
        return (y - self.y_min) * self.width + (x - self.x_min)

    def cell_at(self, index: int) -> Cell:
        """Inverse of :meth:`linear_index`."""
        return index % self.width + self.x_min, index // self.width + self.y_min

    def cells(self) -> list[Cell]:
        """Return every cell in linear order."""
        return [self.cell_at(i) for i in range(self.capacity)]

    def to_dict(self) -> dict:
        """Serialize grid geometry to a dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "x_min": self.x_min,
            "y_min": self.y_min,
        }

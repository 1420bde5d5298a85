"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from snake_duel.grid import Cell, Grid


class Direction(enum.Enum):
    """Cardinal headings with (dx, dy) values; y grows downward."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Collision(enum.Enum):
    """What a snake's head ran into after a move."""

    NONE = "none"
    SELF = "self"
    OPPONENT = "opponent"
    EGG = "egg"

    @property
    def is_fatal(self) -> bool:
        return self in (Collision.SELF, Collision.OPPONENT)


class Snake:
    """A snake represented as an ordered deque of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. A snake starts as a
    single segment and grows one segment per egg, one tick after eating it.
    """

    def __init__(
        self,
        player: int,
        start: Cell,
        direction: Direction = Direction.RIGHT,
    ) -> None:
        self.player = player
        self.body: deque[Cell] = deque([start])
        self.direction = direction
        self.grow_pending = False

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> Cell:
        """Return the head coordinate."""
        return self.body[0]

    def turn(self, new_direction: Direction | None) -> None:
        """Change direction, ignoring ``None`` and 180° reversals."""
        if new_direction is None:
            return
        if new_direction is not self.direction.opposite:
            self.direction = new_direction

    def advance(self, grid: Grid) -> Cell | None:
        """Move the snake one step forward on *grid*.

        Every segment takes the position its predecessor held before the
        move. Returns the vacated tail cell, or ``None`` if the snake grew
        into it.
        """
        previous = list(self.body)
        new_head = grid.step(previous[0], self.direction)
        self.body = deque([new_head, *previous[:-1]])
        vacated = previous[-1]
        if self.grow_pending:
            self.body.append(vacated)
            self.grow_pending = False
            return None
        return vacated

    def mark_growth_pending(self) -> None:
        """Grow by one segment on the next :meth:`advance`."""
        self.grow_pending = True

    def occupies(self, cell: Cell) -> bool:
        """Check whether the snake occupies a given cell."""
        return cell in self.body

    def check_collision(
        self,
        egg: Cell | None,
        others: Iterable[Snake] = (),
    ) -> Collision:
        """Classify what the head landed on.

        Hitting its own body or another snake wins over reaching the egg.
        """
        head = self.head
        if any(seg == head for seg in list(self.body)[1:]):
            return Collision.SELF
        for other in others:
            if other.occupies(head):
                return Collision.OPPONENT
        if head == egg:
            return Collision.EGG
        return Collision.NONE

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "player": self.player,
            "body": [list(seg) for seg in self.body],
            "direction": self.direction.name,
            "grow_pending": self.grow_pending,
        }

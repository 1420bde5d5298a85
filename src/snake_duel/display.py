"""Collaborator interfaces between the round and the outside world."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from snake_duel.grid import Cell


class Display(Protocol):
    """Sink for cell-level drawing."""

    def draw_cell(self, x: int, y: int, glyph: str) -> None: ...

    def clear_cell(self, x: int, y: int) -> None: ...

    def refresh(self) -> None: ...


class InputSource(Protocol):
    """Non-blocking source of raw key codes."""

    def poll_key(self) -> int | None: ...


class Clock(Protocol):
    """Monotonic time source, in seconds."""

    def now(self) -> float: ...


class MonotonicClock:
    """:class:`Clock` backed by :func:`time.monotonic`."""

    def now(self) -> float:
        return time.monotonic()


@dataclass
class Frame:
    """Cells to clear and cells to (re)draw after a tick."""

    clear: list[Cell] = field(default_factory=list)
    draw: list[tuple[Cell, str]] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.clear or self.draw)


def render_frame(display: Display, frame: Frame) -> None:
    """Apply a frame to *display*: clears first, then draws."""
    for x, y in frame.clear:
        display.clear_cell(x, y)
    for (x, y), glyph in frame.draw:
        display.draw_cell(x, y, glyph)
    display.refresh()

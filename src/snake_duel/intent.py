"""Buffering of player key presses between ticks."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from snake_duel.snake import Direction

logger = logging.getLogger(__name__)

# curses key codes for the arrow keys.
KEY_DOWN = 258
KEY_UP = 259
KEY_LEFT = 260
KEY_RIGHT = 261

KeyBindings = Mapping[int, tuple[int, Direction]]

DEFAULT_KEY_BINDINGS: dict[int, tuple[int, Direction]] = {
    KEY_UP: (0, Direction.UP),
    KEY_DOWN: (0, Direction.DOWN),
    KEY_LEFT: (0, Direction.LEFT),
    KEY_RIGHT: (0, Direction.RIGHT),
    ord("z"): (1, Direction.UP),
    ord("s"): (1, Direction.DOWN),
    ord("q"): (1, Direction.LEFT),
    ord("d"): (1, Direction.RIGHT),
}

DEFAULT_QUIT_KEY = ord("!")


class InputIntent:
    """Latest requested heading per player, plus the quit flag.

    Raw keys may arrive many times between two ticks (or not at all); only
    the most recent heading per player survives until :meth:`reset`.
    Reversal filtering is left to :meth:`Snake.turn` since it depends on
    the heading at tick time.
    """

    def __init__(
        self,
        key_bindings: KeyBindings | None = None,
        quit_key: int = DEFAULT_QUIT_KEY,
        player_count: int = 2,
    ) -> None:
        self.key_bindings = dict(
            DEFAULT_KEY_BINDINGS if key_bindings is None else key_bindings
        )
        self.quit_key = quit_key
        self.quit = False
        self._pending: list[Direction | None] = [None] * player_count

    def record_key(self, raw_key: int | None) -> None:
        """Map a raw key code to a turn request or quit; ignore the rest."""
        if raw_key is None:
            return
        if raw_key == self.quit_key:
            self.quit = True
            logger.debug("Quit key pressed.")
            return
        binding = self.key_bindings.get(raw_key)
        if binding is None:
            return
        player, direction = binding
        if 0 <= player < len(self._pending):
            self._pending[player] = direction

    def pending(self, player: int) -> Direction | None:
        """Return the buffered heading for *player*, if any."""
        return self._pending[player]

    def reset(self) -> None:
        """Drop all buffered headings once a tick has consumed them."""
        self._pending = [None] * len(self._pending)

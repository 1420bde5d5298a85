"""curses front-end: windows, drawing and keyboard polling."""

from __future__ import annotations

import curses
import logging
from typing import TYPE_CHECKING

from snake_duel.engine import Outcome, RoundController
from snake_duel.loop import run_round
from snake_duel.snake import Direction

if TYPE_CHECKING:
    from snake_duel.config import RoundConfig

logger = logging.getLogger(__name__)

INFO_WIDTH = 27

_DIRECTION_ORDER = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


class TerminalTooSmallError(RuntimeError):
    """The terminal cannot fit the game windows."""

    def __init__(self, min_width: int, min_height: int) -> None:
        super().__init__(
            f"Need a bigger screen size! Minimum {min_width}*{min_height}"
        )
        self.min_width = min_width
        self.min_height = min_height


class CursesDisplay:
    """Draws board cells into a bordered curses window.

    The board's first cell lands just inside the border, whatever the
    board's own inset is.
    """

    def __init__(self, win, x_min: int = 0, y_min: int = 0) -> None:
        self.win = win
        self.dx = 1 - x_min
        self.dy = 1 - y_min

    def draw_cell(self, x: int, y: int, glyph: str) -> None:
        self.win.addch(y + self.dy, x + self.dx, glyph)

    def clear_cell(self, x: int, y: int) -> None:
        self.win.addch(y + self.dy, x + self.dx, " ")

    def refresh(self) -> None:
        self.win.refresh()


class CursesInput:
    """Non-blocking key polling on a curses window."""

    def __init__(self, win) -> None:
        self.win = win
        self.win.nodelay(True)
        self.win.keypad(True)

    def poll_key(self) -> int | None:
        key = self.win.getch()
        if key == curses.ERR:
            return None
        return key


def info_height(config: RoundConfig) -> int:
    """Rows of the info panel: the board height, or enough for its text."""
    return max(config.height + 2, len(info_lines(config)) + 2)


def required_size(config: RoundConfig) -> tuple[int, int]:
    """Minimum terminal (width, height) for *config*."""
    width = config.width + 2
    height = config.height + 2
    if config.player_count > 1:
        width += INFO_WIDTH + 1
        height = info_height(config)
    return width, height


def _key_name(key: int) -> str:
    names = {
        curses.KEY_UP: "Up",
        curses.KEY_DOWN: "Down",
        curses.KEY_LEFT: "Left",
        curses.KEY_RIGHT: "Right",
    }
    if key in names:
        return names[key]
    return chr(key) if 32 <= key < 127 else str(key)


def info_lines(config: RoundConfig) -> list[str]:
    """Legend and controls shown beside the board."""
    lines = ["SNAKE DUEL", ""]
    for player in range(config.player_count):
        head = config.glyphs.heads[player]
        body = config.glyphs.bodies[player]
        keys = {
            direction: _key_name(key)
            for key, (slot, direction) in config.key_bindings.items()
            if slot == player
        }
        lines.append(f"Player {player + 1}: {head}{body}{body}")
        lines.append(
            "  " + " ".join(keys.get(d, "-") for d in _DIRECTION_ORDER),
        )
    lines.append("")
    lines.append(f"Egg: {config.glyphs.egg}")
    lines.append(f"Quit: {_key_name(config.quit_key)}")
    return lines


def _draw_info(win, config: RoundConfig) -> None:
    win.box()
    _, max_x = win.getmaxyx()
    for row, text in enumerate(info_lines(config), start=1):
        win.addnstr(row, 2, text, max_x - 4)
    win.refresh()


def _play(stdscr, config: RoundConfig) -> Outcome:
    curses.curs_set(0)
    stdscr.refresh()

    max_y, max_x = stdscr.getmaxyx()
    min_width, min_height = required_size(config)
    if max_y < min_height or max_x < min_width:
        logger.warning(
            "Terminal is %d×%d, need %d×%d.", max_x, max_y, min_width, min_height,
        )
        raise TerminalTooSmallError(min_width, min_height)

    game_win = curses.newwin(config.height + 2, config.width + 2, 0, 0)
    game_win.box()
    if config.player_count > 1:
        info_win = curses.newwin(
            info_height(config), INFO_WIDTH, 0, config.width + 3,
        )
        _draw_info(info_win, config)

    controller = RoundController(config)
    display = CursesDisplay(game_win, config.x_min, config.y_min)
    return run_round(controller, display, CursesInput(game_win))


def play(config: RoundConfig) -> Outcome:
    """Set up the terminal, play one round and restore the terminal."""
    return curses.wrapper(_play, config)

"""Tick-based round controller composing grid, snakes, egg and input."""

from __future__ import annotations

import enum
import logging

import numpy as np

from snake_duel.config import RoundConfig
from snake_duel.display import Frame
from snake_duel.egg import Egg
from snake_duel.grid import Cell, Grid
from snake_duel.intent import InputIntent
from snake_duel.snake import Collision, Snake

logger = logging.getLogger(__name__)


class Outcome(enum.Enum):
    """State of a round; everything but ``RUNNING`` is terminal."""

    RUNNING = "running"
    LOST = "lost"
    PLAYER1_LOST = "player1_lost"
    PLAYER2_LOST = "player2_lost"
    BOTH_LOST = "both_lost"
    QUIT = "quit"

    @property
    def is_terminal(self) -> bool:
        return self is not Outcome.RUNNING


class RoundController:
    """Owns the snakes and the egg for one round and advances them.

    Each call to :meth:`tick` moves every snake one cell, resolves all
    collisions at once and returns the :class:`Frame` of changed cells.
    :meth:`advance_time` decouples ticks from how often it is called.
    """

    def __init__(
        self,
        config: RoundConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        cfg = config or RoundConfig()
        self.config = cfg
        self.rng = rng if rng is not None else np.random.default_rng(cfg.seed)
        self.grid = Grid(cfg.width, cfg.height, cfg.x_min, cfg.y_min)
        self.intent = InputIntent(
            cfg.key_bindings, cfg.quit_key, player_count=cfg.player_count,
        )

        self.snakes: list[Snake] = [
            Snake(player, spawn.cell, spawn.direction)
            for player, spawn in enumerate(cfg.effective_spawns)
        ]
        self.egg = Egg(self.grid, rng=self.rng)
        self.egg.place_initial(self.snakes)

        self.outcome = Outcome.RUNNING
        self.tick_count = 0
        self.elapsed = 0.0
        self._drawn = self._snapshot()

        logger.info(
            "Round started: %d player(s) on a %d×%d board, egg at %s.",
            cfg.player_count, cfg.width, cfg.height, self.egg.cell,
        )

    @property
    def running(self) -> bool:
        return not self.outcome.is_terminal

    def frame(self) -> Frame:
        """Full frame of everything currently on the board."""
        return Frame(draw=list(self._drawn.items()))

    def advance_time(self, dt: float) -> Frame | None:
        """Accumulate *dt* seconds and tick once the interval is reached.

        Returns the tick's frame, or ``None`` if no tick was due.
        """
        if not self.running:
            return None
        self.elapsed += dt
        if self.elapsed < self.config.tick_interval:
            return None
        self.elapsed = 0.0
        return self.tick()

    def tick(self) -> Frame:
        """Advance the round by one tick."""
        if not self.running:
            return Frame()
        if self.intent.quit:
            self._end(Outcome.QUIT)
            return Frame()

        for snake in self.snakes:
            snake.turn(self.intent.pending(snake.player))
        self.intent.reset()

        # Every snake moves before any collision is looked at.
        for snake in self.snakes:
            snake.advance(self.grid)

        results = [
            snake.check_collision(
                self.egg.cell, [s for s in self.snakes if s is not snake],
            )
            for snake in self.snakes
        ]
        self.tick_count += 1
        logger.debug(
            "Tick %d: heads at %s.",
            self.tick_count, [s.head for s in self.snakes],
        )
        self.resolve(results)
        return self._diff()

    def resolve(self, results: list[Collision]) -> None:
        """Apply one tick's collision results, one per snake in slot order.

        Losses are decided for all snakes together. Without a loss, the
        lowest slot that reached the egg eats it; the egg moves once.
        """
        losers = [i for i, r in enumerate(results) if r.is_fatal]
        if losers:
            self._end(self._loss_outcome(losers))
            return
        for snake, result in zip(self.snakes, results, strict=True):
            if result is Collision.EGG:
                snake.mark_growth_pending()
                self.egg.relocate(self.snakes)
                logger.debug(
                    "Player %d ate the egg at tick %d.",
                    snake.player + 1, self.tick_count,
                )
                return

    def quit(self) -> None:
        """End the round without a loser."""
        if self.running:
            self._end(Outcome.QUIT)

    def _loss_outcome(self, losers: list[int]) -> Outcome:
        if len(self.snakes) == 1:
            return Outcome.LOST
        if len(losers) == len(self.snakes):
            return Outcome.BOTH_LOST
        return Outcome.PLAYER1_LOST if losers == [0] else Outcome.PLAYER2_LOST

    def _end(self, outcome: Outcome) -> None:
        self.outcome = outcome
        logger.info(
            "Round ended at tick %d: %s.", self.tick_count, outcome.value,
        )

    def _snapshot(self) -> dict[Cell, str]:
        glyphs = self.config.glyphs
        cells: dict[Cell, str] = {}
        if self.egg.cell is not None:
            cells[self.egg.cell] = glyphs.egg
        for snake in self.snakes:
            for seg in list(snake.body)[1:]:
                cells[seg] = glyphs.bodies[snake.player]
        for snake in self.snakes:
            cells[snake.head] = glyphs.heads[snake.player]
        return cells

    def _diff(self) -> Frame:
        current = self._snapshot()
        previous = self._drawn
        self._drawn = current
        return Frame(
            clear=[cell for cell in previous if cell not in current],
            draw=[
                (cell, glyph) for cell, glyph in current.items()
                if previous.get(cell) != glyph
            ],
        )

    def get_state(self) -> dict:
        """Return the full, serializable round state."""
        return {
            "tick": self.tick_count,
            "outcome": self.outcome.value,
            "grid": self.grid.to_dict(),
            "snakes": [s.to_dict() for s in self.snakes],
            "egg": self.egg.to_dict(),
            "quit": self.intent.quit,
        }

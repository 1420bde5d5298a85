"""Snake Duel: fixed-tick terminal snake for one or two players."""

from snake_duel.config import Glyphs, RoundConfig, SpawnPoint
from snake_duel.display import Frame, MonotonicClock, render_frame
from snake_duel.egg import Egg
from snake_duel.engine import Outcome, RoundController
from snake_duel.grid import Axis, Grid
from snake_duel.intent import InputIntent
from snake_duel.loop import run_round
from snake_duel.sampler import BoardExhaustedError, sample_free_cell
from snake_duel.snake import Collision, Direction, Snake

__all__ = [
    "Axis",
    "BoardExhaustedError",
    "Collision",
    "Direction",
    "Egg",
    "Frame",
    "Glyphs",
    "Grid",
    "InputIntent",
    "MonotonicClock",
    "Outcome",
    "RoundConfig",
    "RoundController",
    "Snake",
    "SpawnPoint",
    "render_frame",
    "run_round",
    "sample_free_cell",
]

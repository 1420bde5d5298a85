"""Round configuration: board, timing, spawns, glyphs and keys."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path

from snake_duel.intent import DEFAULT_KEY_BINDINGS, DEFAULT_QUIT_KEY
from snake_duel.snake import Direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpawnPoint:
    """Starting cell and heading of one player."""

    x: int
    y: int
    direction: Direction

    @property
    def cell(self) -> tuple[int, int]:
        return self.x, self.y


@dataclass(frozen=True)
class Glyphs:
    """Characters used to draw each kind of cell."""

    heads: tuple[str, ...] = ("X", "O")
    bodies: tuple[str, ...] = ("x", "o")
    egg: str = "+"


def default_spawns(
    player_count: int,
    width: int,
    height: int,
    x_min: int = 0,
    y_min: int = 0,
) -> tuple[SpawnPoint, ...]:
    """Opposite corners, facing each other."""
    layout = [
        SpawnPoint(x_min, y_min, Direction.RIGHT),
        SpawnPoint(x_min + width - 1, y_min + height - 1, Direction.LEFT),
    ]
    return tuple(layout[:player_count])


@dataclass(frozen=True)
class RoundConfig:
    """Configuration for a single round.

    Supports JSON serialization so a setup can be saved and replayed.
    """

    player_count: int = 2
    width: int = 40
    height: int = 22
    x_min: int = 0
    y_min: int = 0
    tick_interval: float = 0.1
    poll_interval: float = 0.01
    spawns: tuple[SpawnPoint, ...] | None = None
    glyphs: Glyphs = field(default_factory=Glyphs)
    key_bindings: dict[int, tuple[int, Direction]] = field(
        default_factory=lambda: dict(DEFAULT_KEY_BINDINGS),
    )
    quit_key: int = DEFAULT_QUIT_KEY
    seed: int | None = None

    def __post_init__(self) -> None:
        for name in ("player_count", "width", "height", "x_min", "y_min", "quit_key"):
            if not isinstance(getattr(self, name), int):
                raise ValueError(f"{name} must be an integer.")
        for name in ("tick_interval", "poll_interval"):
            if not isinstance(getattr(self, name), (int, float)):
                raise ValueError(f"{name} must be a number.")
        if self.player_count not in (1, 2):
            raise ValueError("player_count must be 1 or 2.")
        if self.width < 1 or self.height < 1:
            raise ValueError("width and height must each be at least 1.")
        if self.x_min < 0 or self.y_min < 0:
            raise ValueError("x_min and y_min must be non-negative.")
        if self.tick_interval <= 0:
            raise ValueError("tick_interval must be positive.")
        if self.poll_interval <= 0:
            raise ValueError("poll_interval must be positive.")
        if (
            len(self.glyphs.heads) < self.player_count
            or len(self.glyphs.bodies) < self.player_count
        ):
            raise ValueError("glyphs must define a head and body per player.")
        glyphs = (*self.glyphs.heads, *self.glyphs.bodies, self.glyphs.egg)
        if any(not isinstance(g, str) or len(g) != 1 for g in glyphs):
            raise ValueError("glyphs must be single characters.")

        spawns = self.effective_spawns
        if len(spawns) != self.player_count:
            raise ValueError("spawns must list exactly one point per player.")
        seen: set[tuple[int, int]] = set()
        for i, spawn in enumerate(spawns):
            if not (
                self.x_min <= spawn.x < self.x_min + self.width
                and self.y_min <= spawn.y < self.y_min + self.height
            ):
                raise ValueError(
                    f"spawn for player {i + 1} lies outside the board; "
                    "increase the board size or move the spawn."
                )
            if spawn.cell in seen:
                raise ValueError("spawn points overlap; players need distinct cells.")
            seen.add(spawn.cell)
        if self.width * self.height <= len(seen):
            raise ValueError("board is too small to hold the snakes and an egg.")

    @property
    def effective_spawns(self) -> tuple[SpawnPoint, ...]:
        if self.spawns is not None:
            return self.spawns
        return default_spawns(
            self.player_count, self.width, self.height, self.x_min, self.y_min,
        )

    @classmethod
    def single_player(cls, **overrides) -> RoundConfig:
        """18×18 board inset by one cell inside a border."""
        params = {"player_count": 1, "width": 18, "height": 18, "x_min": 1, "y_min": 1}
        params.update(overrides)
        return cls(**params)

    @classmethod
    def two_player(cls, **overrides) -> RoundConfig:
        """40×22 board with players in opposite corners."""
        params = {"player_count": 2, "width": 40, "height": 22}
        params.update(overrides)
        return cls(**params)

    def to_dict(self) -> dict:
        """Serialize to a plain, JSON-ready dict."""
        d = asdict(self)
        d["spawns"] = (
            None if self.spawns is None
            else [[s.x, s.y, s.direction.name] for s in self.spawns]
        )
        d["glyphs"] = {
            "heads": list(self.glyphs.heads),
            "bodies": list(self.glyphs.bodies),
            "egg": self.glyphs.egg,
        }
        d["key_bindings"] = [
            [key, player, direction.name]
            for key, (player, direction) in self.key_bindings.items()
        ]
        return d

    @classmethod
    def from_dict(cls, raw: dict) -> RoundConfig:
        """Build a config from :meth:`to_dict` output."""
        raw = dict(raw)
        unknown = raw.keys() - {f.name for f in fields(cls)}
        if unknown:
            raise ValueError(f"unknown config fields: {', '.join(sorted(unknown))}.")
        spawns = raw.pop("spawns", None)
        if spawns is not None:
            raw["spawns"] = tuple(
                SpawnPoint(x, y, Direction[name]) for x, y, name in spawns
            )
        glyphs = raw.pop("glyphs", None)
        if glyphs is not None:
            raw["glyphs"] = Glyphs(
                heads=tuple(glyphs.get("heads", Glyphs.heads)),
                bodies=tuple(glyphs.get("bodies", Glyphs.bodies)),
                egg=glyphs.get("egg", Glyphs.egg),
            )
        bindings = raw.pop("key_bindings", None)
        if bindings is not None:
            raw["key_bindings"] = {
                key: (player, Direction[name]) for key, player, name in bindings
            }
        return cls(**raw)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> RoundConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))

"""Command-line launcher for Snake Duel."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from snake_duel.engine import Outcome

if TYPE_CHECKING:
    from snake_duel.config import RoundConfig

logger = logging.getLogger(__name__)

MESSAGES: dict[Outcome, str] = {
    Outcome.LOST: "You lose!",
    Outcome.PLAYER1_LOST: "Player 1 lost!",
    Outcome.PLAYER2_LOST: "Player 2 lost!",
    Outcome.BOTH_LOST: "Both players lost!",
    Outcome.QUIT: "Bye!",
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-duel",
        description="Terminal Snake for one or two players on a wrap-around board.",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (other flags override it).",
    )
    parser.add_argument("--players", type=int, choices=[1, 2], default=None)
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument(
        "--tick-ms", type=int, default=None,
        help="Milliseconds between two moves.",
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--save-config", type=str, default=None,
        help="Write the effective config to this path and exit.",
    )
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Write logs here; the terminal belongs to the game.",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def build_config(args: argparse.Namespace) -> RoundConfig:
    """Resolve the round config from a preset, a file and flag overrides."""
    from snake_duel.config import RoundConfig

    if args.config:
        config = RoundConfig.load(args.config)
        base = config.to_dict()
    else:
        players = args.players or 2
        preset = (
            RoundConfig.single_player() if players == 1
            else RoundConfig.two_player()
        )
        base = preset.to_dict()

    overrides: dict = {}
    flag_map = {
        "players": "player_count",
        "width": "width",
        "height": "height",
        "seed": "seed",
    }
    for cli_name, cfg_name in flag_map.items():
        val = getattr(args, cli_name, None)
        if val is not None:
            overrides[cfg_name] = val
    if args.tick_ms is not None:
        overrides["tick_interval"] = args.tick_ms / 1000

    # Custom geometry invalidates spawns derived from the old board.
    if {"player_count", "width", "height"} & overrides.keys():
        base["spawns"] = None
    base.update(overrides)
    return RoundConfig.from_dict(base)


def _configure_logging(args: argparse.Namespace) -> None:
    fmt = "%(asctime)s %(name)s %(levelname)s %(message)s"
    if args.log_file:
        logging.basicConfig(
            level=args.log_level, format=fmt, filename=args.log_file,
        )
    else:
        logging.basicConfig(level=logging.WARNING, format=fmt)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-duel`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)

    try:
        config = build_config(args)
    except (ValueError, TypeError, KeyError, OSError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)  # noqa: T201
        return 1

    if args.save_config:
        config.save(args.save_config)
        return 0

    from snake_duel.terminal import TerminalTooSmallError, play

    try:
        outcome = play(config)
    except TerminalTooSmallError as exc:
        print(exc, file=sys.stderr)  # noqa: T201
        return 1

    logger.info("Round finished: %s", outcome.value)
    print(MESSAGES[outcome])  # noqa: T201
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Tests for the command-line launcher."""

import json
from unittest.mock import patch

from snake_duel.cli import _build_parser, build_config, main
from snake_duel.config import RoundConfig
from snake_duel.engine import Outcome
from snake_duel.terminal import TerminalTooSmallError


class TestCLIParser:
    def test_defaults(self):
        args = _build_parser().parse_args([])
        assert args.players is None
        assert args.config is None
        assert args.log_level == "INFO"

    def test_flags(self):
        args = _build_parser().parse_args([
            "--players", "1", "--width", "15", "--tick-ms", "50", "--seed", "4",
        ])
        assert args.players == 1
        assert args.width == 15
        assert args.tick_ms == 50
        assert args.seed == 4


class TestBuildConfig:
    def _config(self, argv):
        return build_config(_build_parser().parse_args(argv))

    def test_default_is_two_player(self):
        assert self._config([]) == RoundConfig.two_player()

    def test_single_player_preset(self):
        assert self._config(["--players", "1"]) == RoundConfig.single_player()

    def test_size_override_recomputes_spawns(self):
        cfg = self._config(["--width", "30", "--height", "10"])
        assert cfg.effective_spawns[1].cell == (29, 9)

    def test_tick_ms(self):
        assert self._config(["--tick-ms", "250"]).tick_interval == 0.25

    def test_config_file(self, tmp_path):
        path = tmp_path / "cfg.json"
        RoundConfig(width=12, height=8, seed=5).save(path)
        cfg = self._config(["--config", str(path), "--seed", "6"])
        assert (cfg.width, cfg.height, cfg.seed) == (12, 8, 6)


class TestMain:
    def test_save_config(self, tmp_path):
        path = tmp_path / "out.json"
        assert main(["--players", "1", "--save-config", str(path)]) == 0
        assert RoundConfig.load(path) == RoundConfig.single_player()

    def test_invalid_config_returns_1(self, capsys):
        assert main(["--width", "0"]) == 1
        assert "Invalid configuration" in capsys.readouterr().err

    def test_unknown_config_field_returns_1(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"widht": 10}))
        out = tmp_path / "out.json"
        assert main(["--config", str(path), "--save-config", str(out)]) == 1
        assert "Invalid configuration" in capsys.readouterr().err
        assert not out.exists()

    def test_wrong_typed_config_value_returns_1(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"width": "10"}))
        out = tmp_path / "out.json"
        assert main(["--config", str(path), "--save-config", str(out)]) == 1
        assert "Invalid configuration" in capsys.readouterr().err
        assert not out.exists()

    def test_malformed_spawns_returns_1(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"spawns": [[1, 1]]}))
        assert main(["--config", str(path), "--save-config", str(tmp_path / "o.json")]) == 1
        assert "Invalid configuration" in capsys.readouterr().err

    def test_outcome_message(self, capsys):
        with patch("snake_duel.terminal.play", return_value=Outcome.PLAYER2_LOST):
            assert main([]) == 0
        assert capsys.readouterr().out.strip() == "Player 2 lost!"

    def test_single_player_loss_message(self, capsys):
        with patch("snake_duel.terminal.play", return_value=Outcome.LOST):
            assert main(["--players", "1"]) == 0
        assert capsys.readouterr().out.strip() == "You lose!"

    def test_small_terminal_returns_1(self, capsys):
        with patch(
            "snake_duel.terminal.play",
            side_effect=TerminalTooSmallError(70, 24),
        ):
            assert main([]) == 1
        assert "Minimum 70*24" in capsys.readouterr().err

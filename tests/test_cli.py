"""Tests for the solo-snake CLI."""

from solo_snake.cli import _build_parser, main
from solo_snake.config import GameConfig


class TestCLIParser:
    def test_no_command_returns_1(self):
        assert main([]) == 1

    def test_simulate_defaults(self):
        args = _build_parser().parse_args(["simulate"])
        assert args.command == "simulate"
        assert args.config is None
        assert args.games == 10
        assert args.grid_width is None
        assert args.max_ticks == 1_000

    def test_simulate_with_flags(self):
        args = _build_parser().parse_args([
            "simulate",
            "--games", "3",
            "--grid-width", "12",
            "--grid-height", "9",
            "--seed", "5",
        ])
        assert args.games == 3
        assert args.grid_width == 12
        assert args.grid_height == 9
        assert args.seed == 5

    def test_init_config_args(self):
        args = _build_parser().parse_args(["init-config", "out.json"])
        assert args.command == "init-config"
        assert args.path == "out.json"


class TestCLICommands:
    def test_simulate_short_run(self, capsys):
        result = main([
            "simulate", "--games", "2", "--grid-width", "8",
            "--grid-height", "8", "--max-ticks", "50",
        ])
        assert result == 0
        assert "Simulation: 2 games" in capsys.readouterr().out

    def test_simulate_from_config(self, tmp_path, capsys):
        path = tmp_path / "cfg.json"
        GameConfig(grid_width=6, grid_height=6, seed=3).save(path)
        assert main(["simulate", "--config", str(path), "--games", "1"]) == 0
        assert "1 games" in capsys.readouterr().out

    def test_init_config_writes_defaults(self, tmp_path):
        path = tmp_path / "game.json"
        assert main(["init-config", str(path)]) == 0
        assert GameConfig.load(path) == GameConfig()

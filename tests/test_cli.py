"""Tests for the snake-arcade CLI."""

import json

from snake_arcade.cli import autopilot_keys, main
from snake_arcade.config import GameConfig
from snake_arcade.controls import Key
from snake_arcade.engine import Phase, Snapshot
from snake_arcade.snake import Direction


def _snapshot(**overrides) -> Snapshot:
    fields = {
        "body": ((10, 10), (9, 10)),
        "heading": Direction.RIGHT,
        "food": (15, 10),
        "score": 0,
        "high_score": 0,
        "paused": False,
        "game_over": False,
        "loading_progress": 100.0,
        "speed": 0.12,
        "phase": Phase.PLAYING,
    }
    fields.update(overrides)
    return Snapshot(**fields)


class TestAutopilot:
    def test_heads_toward_food(self):
        assert autopilot_keys(_snapshot(), 20, 20) == {Key.RIGHT}
        assert autopilot_keys(_snapshot(food=(10, 3)), 20, 20) == {Key.UP}

    def test_food_behind_turns_aside(self):
        keys = autopilot_keys(_snapshot(food=(2, 10)), 20, 20)
        assert keys == {Key.UP}

    def test_avoids_wall(self):
        snap = _snapshot(body=((19, 5), (18, 5)), food=(19, 15))
        assert autopilot_keys(snap, 20, 20) == {Key.DOWN}
        snap = _snapshot(body=((19, 5), (18, 5)), food=(2, 5))
        assert autopilot_keys(snap, 20, 20) == {Key.UP}

    def test_restarts_after_game_over(self):
        snap = _snapshot(game_over=True, phase=Phase.GAME_OVER)
        assert autopilot_keys(snap, 20, 20) == {Key.RESTART}

    def test_idle_while_loading(self):
        snap = _snapshot(loading_progress=10.0, phase=Phase.LOADING)
        assert autopilot_keys(snap, 20, 20) == set()


class TestCli:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "snake-arcade" in capsys.readouterr().out

    def test_config_command(self, capsys):
        assert main(["config"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["grid_width"] == 20
        assert data["initial_speed"] == 0.12

    def test_config_output(self, tmp_path, capsys):
        out = tmp_path / "cfg.json"
        assert main(["config", "--output", str(out)]) == 0
        capsys.readouterr()
        assert GameConfig.load(out) == GameConfig()

    def test_simulate(self, capsys):
        assert main(["simulate", "--frames", "900", "--seed", "3"]) == 0
        summary = json.loads(capsys.readouterr().out)
        assert summary["frames"] == 900
        assert summary["runs"] >= 1
        assert summary["phase"] in {"playing", "game_over"}
        assert summary["length"] >= 2

    def test_simulate_with_config_and_overrides(self, tmp_path, capsys):
        cfg_path = tmp_path / "cfg.json"
        GameConfig(initial_speed=0.2).save(cfg_path)
        args = [
            "simulate", "--config", str(cfg_path), "--frames", "300",
            "--grid-width", "12", "--grid-height", "12", "--dt", "0.05",
        ]
        assert main(args) == 0
        summary = json.loads(capsys.readouterr().out)
        assert summary["frames"] == 300

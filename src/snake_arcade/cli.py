"""Headless command line driver for the arcade simulation."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace

from snake_arcade.config import GameConfig
from snake_arcade.controls import InputFrame, Key
from snake_arcade.engine import GameState, Phase, Snapshot
from snake_arcade.session import GameSession
from snake_arcade.snake import Direction

logger = logging.getLogger(__name__)

_DIRECTION_KEYS: dict[Direction, Key] = {
    Direction.UP: Key.UP,
    Direction.DOWN: Key.DOWN,
    Direction.LEFT: Key.LEFT,
    Direction.RIGHT: Key.RIGHT,
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snake-arcade",
        description="Snake arcade simulation core: headless runs and config.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Drive the game with a greedy autopilot.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (other flags override it).",
    )
    sim_p.add_argument("--frames", type=int, default=3_600)
    sim_p.add_argument(
        "--dt", type=float, default=1 / 60,
        help="Seconds of elapsed time per frame.",
    )
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument("--grid-width", type=int, default=None)
    sim_p.add_argument("--grid-height", type=int, default=None)

    # --- config ---
    cfg_p = sub.add_parser("config", help="Print the effective config.")
    cfg_p.add_argument("--config", type=str, default=None)
    cfg_p.add_argument(
        "--output", type=str, default=None,
        help="Also write the config to this JSON file.",
    )

    return parser


def _load_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()
    overrides = {
        name: getattr(args, name)
        for name in ("grid_width", "grid_height")
        if getattr(args, name, None) is not None
    }
    if overrides:
        config = replace(config, **overrides)
    return config


def autopilot_keys(snapshot: Snapshot, width: int, height: int) -> set[Key]:
    """Press the key that heads toward the food without an immediate crash."""
    if snapshot.phase is Phase.GAME_OVER:
        return {Key.RESTART}
    if snapshot.phase is not Phase.PLAYING or snapshot.food is None:
        return set()

    (hx, hy), (fx, fy) = snapshot.body[0], snapshot.food
    preferred: list[Direction] = []
    if fx != hx:
        preferred.append(Direction.RIGHT if fx > hx else Direction.LEFT)
    if fy != hy:
        preferred.append(Direction.DOWN if fy > hy else Direction.UP)
    preferred += [d for d in Direction if d not in preferred]

    body = set(snapshot.body)
    for direction in preferred:
        if direction is snapshot.heading.opposite:
            continue
        dx, dy = direction.delta
        nx, ny = hx + dx, hy + dy
        if 0 <= nx < width and 0 <= ny < height and (nx, ny) not in body:
            return {_DIRECTION_KEYS[direction]}
    return set()


def _run_simulate(args: argparse.Namespace) -> int:
    config = _load_config(args)
    session = GameSession(GameState(config, seed=args.seed))

    snapshot = session.snapshot()
    for _ in range(args.frames):
        keys = autopilot_keys(snapshot, config.grid_width, config.grid_height)
        snapshot = session.frame(InputFrame.of(keys), args.dt)

    summary = {
        "frames": session.frames,
        "runs": session.runs,
        "score": snapshot.score,
        "high_score": max(snapshot.high_score, snapshot.score),
        "phase": snapshot.phase.value,
        "length": len(snapshot.body),
    }
    print(json.dumps(summary, indent=2))  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    config = _load_config(args)
    if args.output:
        config.save(args.output)
    print(json.dumps(config.to_dict(), indent=2))  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``snake-arcade`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "config": _run_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())

"""Time-stepped game state composing grid, snake, and food logic."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

import numpy as np

from snake_arcade.config import GameConfig
from snake_arcade.food import FoodSpawner
from snake_arcade.grid import Grid
from snake_arcade.snake import Direction, Snake

logger = logging.getLogger(__name__)

LOADING_COMPLETE = 100.0


class Phase(enum.Enum):
    """Coarse lifecycle state derived from the game flags."""

    LOADING = "loading"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of everything a renderer needs for one frame."""

    body: tuple[tuple[int, int], ...]
    heading: Direction
    food: tuple[int, int] | None
    score: int
    high_score: int
    paused: bool
    game_over: bool
    loading_progress: float
    speed: float
    phase: Phase

    def to_dict(self) -> dict:
        """Return a JSON-serializable dict."""
        return {
            "body": [list(seg) for seg in self.body],
            "heading": self.heading.name,
            "food": list(self.food) if self.food is not None else None,
            "score": self.score,
            "high_score": self.high_score,
            "paused": self.paused,
            "game_over": self.game_over,
            "loading_progress": self.loading_progress,
            "speed": self.speed,
            "phase": self.phase.value,
        }


class GameState:
    """Single-snake arcade model advanced by elapsed wall time.

    The state is mutated only through :meth:`reset`,
    :meth:`apply_direction_intent`, :meth:`toggle_pause`, and
    :meth:`advance`. None of them raise for bad gameplay input: illegal
    turns are dropped, negative frame times are clamped, and food placement
    retries until it finds a free cell.

    A newly created state starts in the loading phase; gameplay begins once
    ``loading_progress`` reaches 100.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.grid = Grid(self.config.grid_width, self.config.grid_height)
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.food_spawner = FoodSpawner(
            self.grid,
            rng=self.rng,
            max_attempts=self.config.max_placement_attempts,
        )

        self.score = 0
        self.high_score = 0
        self.loading_progress = 0.0
        self.reset()

    @property
    def food(self) -> tuple[int, int] | None:
        return self.food_spawner.position

    @food.setter
    def food(self, position: tuple[int, int] | None) -> None:
        self.food_spawner.position = position

    @property
    def phase(self) -> Phase:
        if self.loading_progress < LOADING_COMPLETE:
            return Phase.LOADING
        if self.game_over:
            return Phase.GAME_OVER
        if self.paused:
            return Phase.PAUSED
        return Phase.PLAYING

    def reset(self) -> None:
        """Start a new run, folding the finished score into the high score."""
        if self.score > self.high_score:
            logger.info("New high score: %d.", self.score)
        self.high_score = max(self.high_score, self.score)
        self.score = 0

        self.snake = Snake.from_head(self.grid.center, Direction.RIGHT, length=2)
        self.food_spawner.place(self.snake.body, margin=self.config.spawn_margin)

        self.speed = self.config.initial_speed
        self.paused = False
        self.game_over = False
        self.step_accumulator = 0.0

    def apply_direction_intent(self, direction: Direction) -> None:
        """Queue *direction* for the next step; reversals are ignored."""
        self.snake.queue_direction(direction)

    def toggle_pause(self) -> None:
        self.paused = not self.paused

    def advance(self, dt: float) -> None:
        """Advance by *dt* seconds of wall time.

        Runs at most one discrete step per call, and only once the
        accumulated time reaches the current step interval.
        """
        dt = max(float(dt), 0.0)

        if self.loading_progress < LOADING_COMPLETE:
            self.loading_progress = min(
                self.loading_progress + dt * self.config.loading_rate,
                LOADING_COMPLETE,
            )
            return

        if self.paused or self.game_over:
            return

        self.step_accumulator += dt
        if self.step_accumulator < self.speed:
            return
        self.step_accumulator = 0.0

        self._step()

    def _step(self) -> None:
        self.snake.commit_direction()
        next_x, next_y = self.snake.next_head()

        # --- boundary check ---
        if not self.grid.in_bounds(next_x, next_y):
            self._end_run("wall")
            return

        # --- self-collision check ---
        # The tail still counts: it has not moved away yet.
        if self.snake.occupies(next_x, next_y):
            self._end_run("self")
            return

        new_head = (next_x, next_y)
        will_grow = new_head == self.food
        self.snake.advance(new_head, grow=will_grow)

        if will_grow:
            self.score += 1
            self.speed = max(
                self.speed * self.config.speed_factor, self.config.min_speed,
            )
            self.food_spawner.place(
                self.snake.body, margin=self.config.food_margin,
            )
            logger.debug(
                "Food eaten at %s; score %d, speed %.4f.",
                new_head, self.score, self.speed,
            )

    def _end_run(self, cause: str) -> None:
        self.game_over = True
        logger.info(
            "Snake hit %s at %s with score %d.",
            cause, self.snake.head, self.score,
        )

    def snapshot(self) -> Snapshot:
        """Capture an immutable copy of the renderable state."""
        return Snapshot(
            body=tuple(self.snake.body),
            heading=self.snake.current_direction,
            food=self.food,
            score=self.score,
            high_score=self.high_score,
            paused=self.paused,
            game_over=self.game_over,
            loading_progress=self.loading_progress,
            speed=self.speed,
            phase=self.phase,
        )

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            **self.snapshot().to_dict(),
            "step_accumulator": self.step_accumulator,
            "grid": self.grid.to_dict(),
            "snake": self.snake.to_dict(),
        }

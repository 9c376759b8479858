"""Tunable constants for the arcade simulation."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from snake_arcade.grid import MIN_GRID_SIZE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Board size, speed curve, loading ramp, and food placement settings.

    Supports JSON serialization so a tuned setup can be reused.
    """

    # Board
    grid_width: int = 20
    grid_height: int = 20

    # Speed curve (seconds per step; smaller is faster)
    initial_speed: float = 0.12
    speed_factor: float = 0.94
    min_speed: float = 0.06

    # Loading phase, in percentage points per second
    loading_rate: float = 33.33

    # Food placement
    spawn_margin: int = 3
    food_margin: int = 1
    max_placement_attempts: int = 1_000

    def __post_init__(self) -> None:
        if self.grid_width < MIN_GRID_SIZE or self.grid_height < MIN_GRID_SIZE:
            raise ValueError(
                f"grid_width and grid_height must each be at least "
                f"{MIN_GRID_SIZE}."
            )
        if self.initial_speed <= 0:
            raise ValueError("initial_speed must be positive.")
        if not 0 < self.min_speed <= self.initial_speed:
            raise ValueError("min_speed must be in (0, initial_speed].")
        if not 0 < self.speed_factor <= 1:
            raise ValueError("speed_factor must be in (0, 1].")
        if self.loading_rate <= 0:
            raise ValueError("loading_rate must be positive.")
        smallest = min(self.grid_width, self.grid_height)
        for name in ("spawn_margin", "food_margin"):
            margin = getattr(self, name)
            if margin < 0 or 2 * margin >= smallest:
                raise ValueError(f"{name} leaves no interior cells.")
        if self.max_placement_attempts < 1:
            raise ValueError("max_placement_attempts must be at least 1.")

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)

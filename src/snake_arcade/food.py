"""Food placement logic."""

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from snake_arcade.grid import Grid

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places the single food cell on the grid.

    Cells are drawn uniformly from an inset interior and re-rolled while they
    land on the snake. After ``max_attempts`` rejected draws the spawner
    falls back to a row-major scan of free cells, first inside the interior
    and then across the whole grid.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
        max_attempts: int = 1_000,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts
        self.position: tuple[int, int] | None = None

    def place(
        self,
        occupied: Collection[tuple[int, int]],
        margin: int = 1,
    ) -> tuple[int, int] | None:
        """Move the food to a free cell inside the *margin* interior.

        Returns the new position, or ``None`` if the board is full.
        """
        x_lo, x_hi, y_lo, y_hi = self.grid.interior(margin)
        blocked = set(occupied)

        for _ in range(self.max_attempts):
            pos = (
                int(self.rng.integers(x_lo, x_hi)),
                int(self.rng.integers(y_lo, y_hi)),
            )
            if pos not in blocked:
                self.position = pos
                return pos

        logger.debug(
            "Rejection sampling exhausted after %d draws; scanning free cells.",
            self.max_attempts,
        )
        free = self.grid.free_cells(blocked, margin) or self.grid.free_cells(
            blocked,
        )
        if not free:
            logger.warning("No free cells available for food placement.")
            self.position = None
            return None

        self.position = free[0]
        return self.position

    def to_dict(self) -> dict:
        return {
            "position": list(self.position) if self.position else None,
        }

"""Grid geometry for the snake arcade board."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

MIN_GRID_SIZE = 8


class Grid:
    """Fixed-size board addressed by ``(x, y)`` cells.

    ``x`` grows to the right and ``y`` grows downward. The grid holds no
    mutable game state; occupancy is computed on demand as a NumPy mask
    indexed ``[y, x]``.
    """

    def __init__(self, width: int = 20, height: int = 20) -> None:
        if width < MIN_GRID_SIZE or height < MIN_GRID_SIZE:
            raise ValueError(
                f"Grid dimensions must be at least "
                f"{MIN_GRID_SIZE}×{MIN_GRID_SIZE}."
            )
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def center(self) -> tuple[int, int]:
        return self._width // 2, self._height // 2

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self._width and 0 <= y < self._height

    def interior(self, margin: int) -> tuple[int, int, int, int]:
        """Return half-open ``(x_lo, x_hi, y_lo, y_hi)`` bounds inset by *margin*."""
        if margin < 0 or 2 * margin >= min(self._width, self._height):
            raise ValueError(f"margin {margin} leaves no interior cells.")
        return margin, self._width - margin, margin, self._height - margin

    def occupancy(self, cells: Iterable[tuple[int, int]]) -> np.ndarray:
        """Boolean ``(height, width)`` mask with *cells* set to True."""
        mask = np.zeros((self._height, self._width), dtype=bool)
        for x, y in cells:
            if self.in_bounds(x, y):
                mask[y, x] = True
        return mask

    def free_cells(
        self,
        occupied: Iterable[tuple[int, int]],
        margin: int = 0,
    ) -> list[tuple[int, int]]:
        """Return unoccupied cells inside the *margin* interior, row-major."""
        x_lo, x_hi, y_lo, y_hi = self.interior(margin)
        window = self.occupancy(occupied)[y_lo:y_hi, x_lo:x_hi]
        ys, xs = np.nonzero(~window)
        return [
            (x + x_lo, y + y_lo)
            for x, y in zip(xs.tolist(), ys.tolist(), strict=True)
        ]

    def to_dict(self) -> dict:
        return {"width": self._width, "height": self._height}

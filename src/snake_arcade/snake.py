"""Snake body and heading logic."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable


class Direction(enum.Enum):
    """Cardinal headings with (dx, dy) deltas; y grows downward."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered deque of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. ``current_direction``
    is the heading used on the last step and ``queued_direction`` the one
    that will be committed on the next.
    """

    def __init__(
        self,
        body: Iterable[tuple[int, int]],
        direction: Direction = Direction.RIGHT,
    ) -> None:
        self.body: deque[tuple[int, int]] = deque(
            (int(x), int(y)) for x, y in body
        )
        if len(self.body) < 2:
            raise ValueError("Snake length must be at least 2.")
        self.current_direction = direction
        self.queued_direction = direction

    @classmethod
    def from_head(
        cls,
        head: tuple[int, int],
        direction: Direction = Direction.RIGHT,
        length: int = 2,
    ) -> Snake:
        """Build a straight snake whose body trails behind *head*."""
        dx, dy = direction.delta
        x, y = head
        return cls(
            [(x - dx * i, y - dy * i) for i in range(length)],
            direction,
        )

    @property
    def head(self) -> tuple[int, int]:
        """Return the head coordinate."""
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def queue_direction(self, direction: Direction) -> bool:
        """Buffer *direction* for the next step, ignoring 180° reversals.

        The check runs against the current heading, not the queued one, so
        two quick turns within one step cannot fold the snake onto its neck.
        Returns True if the direction was accepted.
        """
        if direction is self.current_direction.opposite:
            return False
        self.queued_direction = direction
        return True

    def commit_direction(self) -> Direction:
        """Make the queued heading current."""
        self.current_direction = self.queued_direction
        return self.current_direction

    def next_head(self) -> tuple[int, int]:
        """Compute the next head position along the current heading."""
        dx, dy = self.current_direction.delta
        x, y = self.head
        return x + dx, y + dy

    def advance(
        self, new_head: tuple[int, int], grow: bool = False,
    ) -> tuple[int, int] | None:
        """Move the head onto *new_head*.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.appendleft(new_head)
        if grow:
            return None
        return self.body.pop()

    def occupies(self, x: int, y: int) -> bool:
        """Check whether the snake occupies a given cell."""
        return (x, y) in self.body

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "current_direction": self.current_direction.name,
            "queued_direction": self.queued_direction.name,
        }

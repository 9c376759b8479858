"""Translation of raw key and pointer events into game intents."""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from snake_arcade.engine import LOADING_COMPLETE, GameState
from snake_arcade.snake import Direction

logger = logging.getLogger(__name__)

_PAUSE_BUTTON_SIZE = 50.0
_PAUSE_BUTTON_INSET = 10.0


class Key(enum.Enum):
    """Keys the game reacts to; each is reported on the frame it goes down."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAUSE = "pause"
    RESTART = "restart"


# Checked in this order; the first legal pressed direction wins.
_KEY_DIRECTIONS: dict[Key, Direction] = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


@dataclass(frozen=True)
class Rect:
    """Axis-aligned screen rectangle with half-open containment."""

    x: float
    y: float
    width: float
    height: float

    def contains(self, px: float, py: float) -> bool:
        return (
            self.x <= px < self.x + self.width
            and self.y <= py < self.y + self.height
        )


@dataclass(frozen=True)
class Viewport:
    """Screen dimensions in pixels, used for pointer hit-testing."""

    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2.0, self.height / 2.0

    @property
    def pause_button(self) -> Rect:
        return Rect(
            self.width - _PAUSE_BUTTON_SIZE - _PAUSE_BUTTON_INSET,
            _PAUSE_BUTTON_INSET,
            _PAUSE_BUTTON_SIZE,
            _PAUSE_BUTTON_SIZE,
        )


@dataclass(frozen=True)
class PointerPress:
    """A touch or mouse event; ``started`` is True only on the first frame."""

    x: float
    y: float
    started: bool = True


@dataclass(frozen=True)
class InputFrame:
    """All input edges observed during one frame."""

    keys: frozenset[Key] = frozenset()
    pointers: tuple[PointerPress, ...] = ()

    @classmethod
    def of(
        cls,
        keys: Iterable[Key] = (),
        pointers: Iterable[PointerPress] = (),
    ) -> InputFrame:
        return cls(frozenset(keys), tuple(pointers))


@dataclass(frozen=True)
class DirectionIntent:
    direction: Direction


@dataclass(frozen=True)
class TogglePause:
    pass


@dataclass(frozen=True)
class Restart:
    pass


Intent = DirectionIntent | TogglePause | Restart


class InputTranslator:
    """Stateless mapping from one frame of input to a list of intents.

    Keyboard intents come first, then at most one pointer intent. Direction
    intents are filtered against the snake's current heading, never the
    queued one.
    """

    def __init__(self, viewport: Viewport) -> None:
        self.viewport = viewport

    def translate(self, frame: InputFrame, state: GameState) -> list[Intent]:
        intents = self.translate_keys(frame.keys, state)
        pointer_intent = self.translate_pointer(frame.pointers, state)
        if pointer_intent is not None:
            intents.append(pointer_intent)
        return intents

    def translate_keys(
        self, keys: frozenset[Key], state: GameState,
    ) -> list[Intent]:
        intents: list[Intent] = []
        if Key.PAUSE in keys:
            intents.append(TogglePause())

        if state.game_over:
            if Key.RESTART in keys:
                intents.append(Restart())
            return intents

        if state.loading_progress < LOADING_COMPLETE:
            return intents

        heading = state.snake.current_direction
        for key, direction in _KEY_DIRECTIONS.items():
            if key in keys and direction is not heading.opposite:
                intents.append(DirectionIntent(direction))
                break
        return intents

    def translate_pointer(
        self, pointers: Iterable[PointerPress], state: GameState,
    ) -> Intent | None:
        press = next((p for p in pointers if p.started), None)
        if press is None or state.loading_progress < LOADING_COMPLETE:
            return None

        if self.viewport.pause_button.contains(press.x, press.y):
            return TogglePause()
        if state.game_over:
            return Restart()
        if state.paused:
            return None

        center_x, center_y = self.viewport.center
        direction = self.direction_from_offset(
            press.x - center_x, press.y - center_y,
        )
        if direction is state.snake.current_direction.opposite:
            return None
        return DirectionIntent(direction)

    @staticmethod
    def direction_from_offset(dx: float, dy: float) -> Direction:
        """Pick the dominant axis; equal offsets resolve vertically."""
        if abs(dx) > abs(dy):
            return Direction.RIGHT if dx > 0 else Direction.LEFT
        return Direction.DOWN if dy > 0 else Direction.UP


def apply_intents(state: GameState, intents: Iterable[Intent]) -> None:
    """Apply *intents* to *state* in order."""
    for intent in intents:
        if isinstance(intent, DirectionIntent):
            state.apply_direction_intent(intent.direction)
        elif isinstance(intent, TogglePause):
            state.toggle_pause()
            logger.debug("Pause toggled; paused=%s.", state.paused)
        elif isinstance(intent, Restart):
            state.reset()
        else:
            raise TypeError(f"Unknown intent {intent!r}.")

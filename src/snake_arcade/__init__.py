"""Snake Arcade — simulation core for a grid-based snake game."""

from snake_arcade.config import GameConfig
from snake_arcade.controls import (
    DirectionIntent,
    InputFrame,
    InputTranslator,
    Key,
    PointerPress,
    Rect,
    Restart,
    TogglePause,
    Viewport,
    apply_intents,
)
from snake_arcade.engine import GameState, Phase, Snapshot
from snake_arcade.food import FoodSpawner
from snake_arcade.grid import Grid
from snake_arcade.session import GameSession
from snake_arcade.snake import Direction, Snake

__all__ = [
    "Direction",
    "DirectionIntent",
    "FoodSpawner",
    "GameConfig",
    "GameSession",
    "GameState",
    "Grid",
    "InputFrame",
    "InputTranslator",
    "Key",
    "Phase",
    "PointerPress",
    "Rect",
    "Restart",
    "Snake",
    "Snapshot",
    "TogglePause",
    "Viewport",
    "apply_intents",
]

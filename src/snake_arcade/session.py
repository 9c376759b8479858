"""Single-owner frame loop tying input translation to the game state."""

from __future__ import annotations

import logging
import threading

from snake_arcade.controls import (
    InputFrame,
    InputTranslator,
    Restart,
    Viewport,
    apply_intents,
)
from snake_arcade.engine import GameState, Phase, Snapshot

logger = logging.getLogger(__name__)


class GameSession:
    """Owns a :class:`GameState` and runs one frame at a time.

    Each :meth:`frame` call translates input, applies the resulting intents,
    advances the simulation, and captures a snapshot, all under one lock.
    A renderer on another thread should read through :meth:`snapshot` so it
    never sees a half-applied frame.
    """

    def __init__(
        self,
        state: GameState | None = None,
        viewport: Viewport | None = None,
        translator: InputTranslator | None = None,
    ) -> None:
        self.state = state if state is not None else GameState()
        if translator is None:
            if viewport is None:
                grid = self.state.grid
                viewport = Viewport(grid.width * 20.0, grid.height * 20.0)
            translator = InputTranslator(viewport)
        self.translator = translator
        self.frames = 0
        self.runs = 1
        self._lock = threading.Lock()
        self._last = self.state.snapshot()

    def frame(self, inputs: InputFrame | None, dt: float) -> Snapshot:
        """Process one frame of *inputs* and *dt* seconds of elapsed time."""
        with self._lock:
            before = self.state.phase
            if inputs is not None:
                intents = self.translator.translate(inputs, self.state)
                if before is Phase.GAME_OVER and any(
                    isinstance(intent, Restart) for intent in intents
                ):
                    self.runs += 1
                apply_intents(self.state, intents)
            self.state.advance(dt)
            self.frames += 1

            self._last = self.state.snapshot()
            if self._last.phase is not before:
                logger.debug(
                    "Frame %d: %s -> %s.",
                    self.frames, before.value, self._last.phase.value,
                )
            return self._last

    def snapshot(self) -> Snapshot:
        """Return the snapshot taken at the end of the last frame."""
        with self._lock:
            return self._last

# Area: Listeners
"""
brainplay.listeners — Outbound notifications from a game session
================================================================

A session reports to listener objects rather than captured closures.
Subclass GameListener and override what you need, or wrap plain
callables with CallbackListener:

    class Renderer(GameListener):
        def on_state_change(self, state):
            draw(state)

        def on_complete(self, result):
            stats_store.save(result.to_dict())

    engine.add_listener(Renderer())

Delivery rules
--------------
- on_state_change(state): after every mutating operation, with a copy.
- on_progress(progress): at each level boundary and at game end.
- on_complete(result): exactly once, at GAME_OVER or COMPLETED.

Exceptions raised by a listener propagate to the caller that triggered
the notification.
"""

from __future__ import annotations

from typing import Callable, Optional

from ._core.game_result import GameResult
from ._core.state import GameProgress, GameState


class GameListener:
    """
    Base listener with no-op hooks.

    Override any of the three methods; the session calls all of them.
    """

    def on_state_change(self, state: GameState) -> None:
        """Called with a snapshot after every state mutation."""

    def on_progress(self, progress: GameProgress) -> None:
        """Called when a progress snapshot is recorded."""

    def on_complete(self, result: GameResult) -> None:
        """Called once with the terminal result."""


class CallbackListener(GameListener):
    """Adapts up to three plain callables to the listener interface."""

    def __init__(
        self,
        on_state_change: Optional[Callable[[GameState], None]] = None,
        on_complete: Optional[Callable[[GameResult], None]] = None,
        on_progress: Optional[Callable[[GameProgress], None]] = None,
    ):
        self._on_state_change = on_state_change
        self._on_complete = on_complete
        self._on_progress = on_progress

    def on_state_change(self, state: GameState) -> None:
        if self._on_state_change is not None:
            self._on_state_change(state)

    def on_progress(self, progress: GameProgress) -> None:
        if self._on_progress is not None:
            self._on_progress(progress)

    def on_complete(self, result: GameResult) -> None:
        if self._on_complete is not None:
            self._on_complete(result)


class RecordingListener(GameListener):
    """Keeps every notification it receives. Handy for replays and tests."""

    def __init__(self) -> None:
        self.states: list = []
        self.progress: list = []
        self.results: list = []

    def on_state_change(self, state: GameState) -> None:
        self.states.append(state)

    def on_progress(self, progress: GameProgress) -> None:
        self.progress.append(progress)

    def on_complete(self, result: GameResult) -> None:
        self.results.append(result)

    @property
    def result(self) -> Optional[GameResult]:
        return self.results[-1] if self.results else None

# Area: Core
"""
brainplay._core.rules — Game variant interface
===============================================

Each game is one GameRules implementation. The shared GameSession owns
lifecycle, lives, score and level progression; the rules only generate
content and judge input, reporting back through the session's
``correct`` / ``mistake`` / ``level_complete`` operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional, Protocol

from .enums import GameCategory

if TYPE_CHECKING:
    from .session import GameSession


class GameRules(Protocol):
    """
    Capability set every game variant provides.

    Attributes:
        game_id: Registry id, e.g. "math-sprint"
        category: Catalog category
        max_levels: Number of levels in a full session
        reference_score: Score that earns a full star rating
        time_limit: Per-turn limit in ms, or None when untimed
        turn_started_at: Clock reading when the current turn began
    """

    game_id: str
    category: GameCategory
    max_levels: int
    reference_score: int
    time_limit: Optional[int]
    turn_started_at: Optional[float]

    def generate_level(self, session: "GameSession") -> None:
        """
        Build content for ``session.level``.

        Must draw randomness only from ``session.rng`` and read only the
        current level and difficulty.
        """
        ...

    def handle_input(self, session: "GameSession", value: Any) -> None:
        """Judge one player input. Invalid input is ignored silently."""
        ...

    def handle_timeout(self, session: "GameSession") -> None:
        """Caller-detected time-out; behaves like a wrong answer."""
        ...

    def progress(self) -> Dict[str, int]:
        """Progress within the current level for display."""
        ...

    def content(self) -> Optional[Dict[str, Any]]:
        """Current level content as a JSON-ready dict, None before start."""
        ...

    def on_resume(self, session: "GameSession", paused_ms: float) -> None:
        """
        Session left PAUSED after ``paused_ms``.

        Turn clocks move forward by the paused time, and work parked
        during the pause is rescheduled here.
        """
        ...

    def cleanup(self) -> None:
        """Cancel anything pending. Called when the session is disposed."""
        ...

# Area: Core
"""
brainplay._core.state — Session state tracker
==============================================

Mutable per-session state owned by one GameSession. Listeners and
callers only ever receive copies produced by ``snapshot()``.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional

from .enums import GameStatus
from ..types import GameStateDict

DEFAULT_MAX_LIVES = 3


@dataclass
class GameState:
    """
    Full state of one play session.

    The session maintains this internally and hands out snapshots.
    """
    max_level: int
    status: GameStatus = GameStatus.IDLE
    level: int = 1
    score: int = 0
    lives: int = DEFAULT_MAX_LIVES
    max_lives: int = DEFAULT_MAX_LIVES
    start_time: Optional[float] = None     # ms, engine clock
    end_time: Optional[float] = None       # ms, engine clock
    accuracy: float = 1.0

    def snapshot(self) -> "GameState":
        return replace(self)

    def to_dict(self) -> "GameStateDict":
        return {
            "status": self.status.value,
            "level": self.level,
            "max_level": self.max_level,
            "score": self.score,
            "lives": self.lives,
            "max_lives": self.max_lives,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "accuracy": self.accuracy,
        }


@dataclass(frozen=True)
class GameProgress:
    """
    Progress snapshot recorded at each level boundary and at game end.

    Attributes:
        level: Level the snapshot was taken on
        score: Score at that point
        lives: Remaining lives
        accuracy: Running accuracy (0-1)
        timestamp: Milliseconds since the session started
    """
    level: int
    score: int
    lives: int
    accuracy: float
    timestamp: float

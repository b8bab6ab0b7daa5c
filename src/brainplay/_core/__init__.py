# Area: Core
"""
Core engine layer shared by every game.

This package handles:
- Seeded random streams and date-derived seeds
- The difficulty curve and star ratings
- The session state machine, state and result records
- Cancellable delayed tasks
- GameSession, the engine callers play against
"""

from .enums import GameStatus, SessionEvent, GameCategory
from .rng import SeededRNG, get_daily_seed, get_game_seed, get_date_string
from .difficulty import (
    calculate_difficulty,
    calculate_stars,
    get_difficulty_label,
    get_difficulty_color,
    get_estimated_duration,
)
from .state import GameState, GameProgress
from .game_result import GameResult
from .state_machine import SessionStateMachine
from .scheduler import ScheduledTask, Scheduler, ThreadingScheduler, ManualScheduler
from .rules import GameRules
from .session import GameSession

__all__ = [
    "GameStatus",
    "SessionEvent",
    "GameCategory",
    "SeededRNG",
    "get_daily_seed",
    "get_game_seed",
    "get_date_string",
    "calculate_difficulty",
    "calculate_stars",
    "get_difficulty_label",
    "get_difficulty_color",
    "get_estimated_duration",
    "GameState",
    "GameProgress",
    "GameResult",
    "SessionStateMachine",
    "ScheduledTask",
    "Scheduler",
    "ThreadingScheduler",
    "ManualScheduler",
    "GameRules",
    "GameSession",
]

# Area: Core
"""
brainplay._core.enums — Session State Machine Enums
===================================================

Defines the statuses and events for the per-session game state
machine, plus the game categories used for catalog grouping.
"""

from enum import Enum


class GameStatus(Enum):
    """
    Statuses of a game session.

    State transitions:
    IDLE -> READY (on INIT)
    READY -> PLAYING (on START)
    PLAYING -> LEVEL_COMPLETE (on LEVEL_CLEARED)
    LEVEL_COMPLETE -> PLAYING (on NEXT_LEVEL)
    LEVEL_COMPLETE -> COMPLETED (on FINAL_LEVEL_CLEARED)
    PLAYING -> GAME_OVER (on LIVES_EXHAUSTED)
    PLAYING -> PAUSED (on PAUSE)
    PAUSED -> PLAYING (on RESUME)

    COMPLETED and GAME_OVER are terminal.
    """
    IDLE = "idle"
    READY = "ready"
    PLAYING = "playing"
    LEVEL_COMPLETE = "level_complete"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    COMPLETED = "completed"

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.GAME_OVER, GameStatus.COMPLETED)


class SessionEvent(Enum):
    """
    Events that trigger session status transitions.

    Events are triggered by:
    - INIT: init() finished setup
    - START: start() called on a ready session
    - LEVEL_CLEARED: level_complete() called by the rules
    - NEXT_LEVEL: a cleared level below max_level rolls over
    - FINAL_LEVEL_CLEARED: the max level was cleared
    - LIVES_EXHAUSTED: mistake() dropped lives to zero
    - PAUSE / RESUME: caller paused or resumed play
    """
    INIT = "INIT"
    START = "START"
    LEVEL_CLEARED = "LEVEL_CLEARED"
    NEXT_LEVEL = "NEXT_LEVEL"
    FINAL_LEVEL_CLEARED = "FINAL_LEVEL_CLEARED"
    LIVES_EXHAUSTED = "LIVES_EXHAUSTED"
    PAUSE = "PAUSE"
    RESUME = "RESUME"


class GameCategory(Enum):
    """Catalog category of a game."""
    MEMORY = "memory"
    LOGIC = "logic"
    FOCUS = "focus"
    CALCULATION = "calculation"
    LANGUAGE = "language"
    SPEED = "speed"

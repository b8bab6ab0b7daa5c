# Area: Core
"""
brainplay._core.state_machine — Session State Machine
=====================================================

Implements the status transition table shared by every game engine.
The session consults it before each lifecycle change, so an engine
can never leave a terminal status or skip a step.
"""

import logging
from typing import Optional
from .enums import GameStatus, SessionEvent

logger = logging.getLogger("brainplay.state_machine")


# Valid status transitions: {current_status: {event: next_status}}
TRANSITIONS = {
    GameStatus.IDLE: {
        SessionEvent.INIT: GameStatus.READY,
    },
    GameStatus.READY: {
        SessionEvent.START: GameStatus.PLAYING,
    },
    GameStatus.PLAYING: {
        SessionEvent.LEVEL_CLEARED: GameStatus.LEVEL_COMPLETE,
        SessionEvent.LIVES_EXHAUSTED: GameStatus.GAME_OVER,
        SessionEvent.PAUSE: GameStatus.PAUSED,
    },
    GameStatus.LEVEL_COMPLETE: {
        SessionEvent.NEXT_LEVEL: GameStatus.PLAYING,
        SessionEvent.FINAL_LEVEL_CLEARED: GameStatus.COMPLETED,
    },
    GameStatus.PAUSED: {
        SessionEvent.RESUME: GameStatus.PLAYING,
    },
    GameStatus.GAME_OVER: {},
    GameStatus.COMPLETED: {},
}


class SessionStateMachine:
    """
    State machine for a single game session.

    Attributes:
        current_status: The current status of the session
        previous_status: Status before the last transition, if any
    """

    def __init__(self):
        """Initialize state machine in IDLE."""
        self.current_status = GameStatus.IDLE
        self.previous_status: Optional[GameStatus] = None

    def can_transition(self, event: SessionEvent) -> bool:
        """
        Check if a transition is valid from the current status.

        Args:
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        valid_transitions = TRANSITIONS.get(self.current_status, {})
        return event in valid_transitions

    def transition(self, event: SessionEvent) -> GameStatus:
        """
        Execute a status transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new status after transition

        Raises:
            ValueError: If the transition is not valid
        """
        if not self.can_transition(event):
            raise ValueError(
                f"Invalid transition: {event.value} from {self.current_status.value}"
            )

        next_status = TRANSITIONS[self.current_status][event]
        logger.debug(
            "Transition %s: %s -> %s",
            event.value, self.current_status.value, next_status.value,
        )
        self.previous_status = self.current_status
        self.current_status = next_status
        return next_status

    @property
    def is_terminal(self) -> bool:
        """True once the session reached GAME_OVER or COMPLETED."""
        return self.current_status.is_terminal

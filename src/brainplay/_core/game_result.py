# Area: Core
"""
brainplay._core.game_result — Game Result Dataclass
===================================================

Defines the immutable GameResult the session hands to its listeners
exactly once, when it reaches GAME_OVER or COMPLETED. Stats stores,
sharing and badge bookkeeping read it from there.
"""

from dataclasses import asdict, dataclass

from ..types import GameResultDict

OUTCOME_COMPLETED = "completed"
OUTCOME_GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameResult:
    """
    Terminal summary of one play session.

    Attributes:
        game_id: Registry id of the game played
        category: Catalog category value (e.g. "memory")
        score: Final score
        accuracy: Ratio of correct actions to attempts (0-1)
        levels_completed: Levels cleared (max_level on completion)
        max_level: Number of levels the game has
        duration: Session length in milliseconds
        date: Calendar date of the session, ISO ``YYYY-MM-DD``
        outcome: 'completed' or 'game_over'
        stars: Star rating (1-5) against the game's reference score
    """

    game_id: str
    category: str
    score: int
    accuracy: float
    levels_completed: int
    max_level: int
    duration: float
    date: str
    outcome: str = OUTCOME_COMPLETED
    stars: int = 1

    @property
    def is_win(self) -> bool:
        return self.outcome == OUTCOME_COMPLETED

    def to_dict(self) -> "GameResultDict":
        return asdict(self)

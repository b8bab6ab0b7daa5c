# Area: Games
"""
brainplay._games.batch — Timed question batches
================================================

Bookkeeping shared by the games that serve a fixed batch of timed
questions per level (math-sprint, color-stroop), plus the numeric input
coercion every game with numeric answers uses.
"""

import math
import numbers
from dataclasses import dataclass
from typing import Any, Optional

LEVEL_BONUS_MAX = 50


@dataclass
class ChallengeBatch:
    """Counts answered and correct challenges within one level."""
    per_level: int = 5
    answered: int = 0
    correct: int = 0

    def reset(self) -> None:
        self.answered = 0
        self.correct = 0

    def record(self, was_correct: bool) -> None:
        self.answered += 1
        if was_correct:
            self.correct += 1

    @property
    def finished(self) -> bool:
        return self.answered >= self.per_level

    def level_bonus(self) -> int:
        """floor(correct / per_level * 50)"""
        return (self.correct * LEVEL_BONUS_MAX) // self.per_level

    def progress(self) -> dict:
        return {"current": min(self.answered + 1, self.per_level), "total": self.per_level}


def time_bonus(time_limit: float, response_time: float, step_ms: int) -> int:
    """One point per ``step_ms`` left on the clock, never negative."""
    return max(0, int((time_limit - response_time) // step_ms))


def whole_number(value: Any) -> Optional[int]:
    """
    Coerce a numeric answer to int.

    Integral floats such as ``17.0`` count, so a UI that parses with
    ``float()`` still scores. Booleans, fractions and non-numbers give
    None and are ignored by the caller.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if not math.isfinite(value):
        return None
    return int(value) if value == int(value) else None

# Area: Games
"""
brainplay._games.math_sprint — Arithmetic challenge
====================================================

Five timed arithmetic problems per level. The operator pool widens as
levels rise (+ and − first, × from level 3, ÷ from level 6) and operands
grow with level and difficulty.

Every problem has an exact non-negative integer answer: subtraction
draws the subtrahend no larger than the minuend, and division picks
divisor and quotient first and multiplies them into the dividend.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .batch import ChallengeBatch, time_bonus, whole_number
from .._core.enums import GameCategory
from ..types import MathProblemDict

if TYPE_CHECKING:
    from .._core.session import GameSession

logger = logging.getLogger("brainplay.games.math_sprint")

ADD = "+"
SUBTRACT = "-"
MULTIPLY = "×"
DIVIDE = "÷"

MULTIPLY_UNLOCK_LEVEL = 3
DIVIDE_UNLOCK_LEVEL = 6
OPERAND_CAP = 99
FACTOR_CAP = 12

BASE_POINTS = 15
OPERATOR_BONUS = 10
TIME_BONUS_STEP_MS = 200


@dataclass(frozen=True)
class MathProblem:
    """One arithmetic problem as shown to the player."""
    num1: int
    num2: int
    operation: str
    answer: int

    @property
    def display(self) -> str:
        return f"{self.num1} {self.operation} {self.num2} = ?"

    def to_dict(self) -> "MathProblemDict":
        return {
            "num1": self.num1,
            "num2": self.num2,
            "operation": self.operation,
            "answer": self.answer,
            "display": self.display,
        }


def operations_for_level(level: int) -> List[str]:
    """Operator pool unlocked at ``level``."""
    operations = [ADD, SUBTRACT]
    if level >= MULTIPLY_UNLOCK_LEVEL:
        operations.append(MULTIPLY)
    if level >= DIVIDE_UNLOCK_LEVEL:
        operations.append(DIVIDE)
    return operations


def time_limit_for(level: int, difficulty: int) -> int:
    """Per-problem limit in ms."""
    return max(5000, 15000 - level * 500 - difficulty * 300)


def operand_range(level: int, difficulty: int) -> tuple:
    """(min, max) operand bounds for + and −."""
    max_num = min(10 + level * 5 + difficulty * 3, OPERAND_CAP)
    min_num = max(1, max_num // 4)
    return min_num, max_num


class MathSprintRules:
    """Rules for the arithmetic challenge."""

    game_id = "math-sprint"
    category = GameCategory.CALCULATION
    max_levels = 10
    reference_score = 3000

    def __init__(self) -> None:
        self.current_problem: Optional[MathProblem] = None
        self.operations: List[str] = [ADD, SUBTRACT]
        self.batch = ChallengeBatch(per_level=5)
        self.time_limit: Optional[int] = None
        self.turn_started_at: Optional[float] = None

    def generate_level(self, session: "GameSession") -> None:
        self.batch.reset()
        self.operations = operations_for_level(session.level)
        self.time_limit = time_limit_for(session.level, session.difficulty)
        self._next_problem(session)

    def _next_problem(self, session: "GameSession") -> None:
        rng = session.rng
        operation = rng.pick(self.operations)
        min_num, max_num = operand_range(session.level, session.difficulty)
        factor_max = min(FACTOR_CAP, max_num // 2)

        if operation == ADD:
            num1 = rng.next_int(min_num, max_num)
            num2 = rng.next_int(min_num, max_num)
            answer = num1 + num2
        elif operation == SUBTRACT:
            num1 = rng.next_int(min_num + 10, max_num)
            num2 = rng.next_int(min_num, num1)
            answer = num1 - num2
        elif operation == MULTIPLY:
            num1 = rng.next_int(2, factor_max)
            num2 = rng.next_int(2, factor_max)
            answer = num1 * num2
        else:
            num2 = rng.next_int(2, factor_max)
            answer = rng.next_int(2, factor_max)
            num1 = num2 * answer

        self.current_problem = MathProblem(num1, num2, operation, answer)
        self.turn_started_at = session.clock()
        logger.debug("Problem: %s", self.current_problem.display)

    def handle_input(self, session: "GameSession", value: Any) -> None:
        if self.current_problem is None:
            return
        answer = whole_number(value)
        if answer is None:
            return

        problem = self.current_problem
        if answer == problem.answer:
            response_time = session.clock() - (self.turn_started_at or 0)
            bonus = time_bonus(self.time_limit or 0, response_time, TIME_BONUS_STEP_MS)
            operator_bonus = OPERATOR_BONUS if problem.operation in (MULTIPLY, DIVIDE) else 0
            session.correct(BASE_POINTS + bonus + operator_bonus)
            self.batch.record(True)
        else:
            session.mistake()
            self.batch.record(False)
        self._advance(session)

    def handle_timeout(self, session: "GameSession") -> None:
        if self.current_problem is None:
            return
        session.mistake()
        self.batch.record(False)
        self._advance(session)

    def _advance(self, session: "GameSession") -> None:
        if not session.is_playing:
            return
        if self.batch.finished:
            session.level_complete(self.batch.level_bonus())
        else:
            self._next_problem(session)
            session.notify_state_change()

    def progress(self) -> Dict[str, int]:
        return self.batch.progress()

    def content(self) -> Optional[dict]:
        return self.current_problem.to_dict() if self.current_problem else None

    def on_resume(self, session: "GameSession", paused_ms: float) -> None:
        if self.turn_started_at is not None:
            self.turn_started_at += paused_ms

    def cleanup(self) -> None:
        pass

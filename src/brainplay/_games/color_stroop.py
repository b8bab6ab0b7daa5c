# Area: Games
"""
brainplay._games.color_stroop — Color/word conflict challenge
==============================================================

A color name is drawn in some ink color and the player must pick the
ink, not the word. Congruent trials (word matches ink) get rarer as the
level rises, and the answer list grows from 2 to 4 options.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

from .batch import ChallengeBatch, time_bonus
from .._core.enums import GameCategory
from ..types import StroopChallengeDict

if TYPE_CHECKING:
    from .._core.session import GameSession

logger = logging.getLogger("brainplay.games.color_stroop")


@dataclass(frozen=True)
class ColorSwatch:
    name: str
    hex: str


PALETTE: Tuple[ColorSwatch, ...] = (
    ColorSwatch("RED", "#ef4444"),
    ColorSwatch("BLUE", "#3b82f6"),
    ColorSwatch("GREEN", "#22c55e"),
    ColorSwatch("YELLOW", "#eab308"),
    ColorSwatch("PURPLE", "#a855f7"),
    ColorSwatch("ORANGE", "#f97316"),
)

BASE_POINTS = 20
TIME_BONUS_STEP_MS = 100


@dataclass(frozen=True)
class StroopChallenge:
    """
    One trial.

    Attributes:
        word: Color name written on screen
        ink_name: Name of the ink color, the correct answer
        display_color: Hex of the ink color
        options: Answer buttons, in display order
    """
    word: str
    ink_name: str
    display_color: str
    options: Tuple[str, ...]

    @property
    def correct_answer(self) -> str:
        return self.ink_name

    @property
    def congruent(self) -> bool:
        return self.word == self.ink_name

    def to_dict(self) -> "StroopChallengeDict":
        return {
            "word": self.word,
            "display_color": self.display_color,
            "correct_answer": self.ink_name,
            "options": list(self.options),
        }


def congruent_chance(level: int) -> float:
    return max(0.1, 0.5 - level * 0.05)


def option_count(level: int) -> int:
    return min(4, 2 + level // 3)


def time_limit_for(level: int, difficulty: int) -> int:
    return max(3000, 5000 - level * 200 - difficulty * 100)


class ColorStroopRules:
    """Rules for the color/word conflict challenge."""

    game_id = "color-stroop"
    category = GameCategory.FOCUS
    max_levels = 10
    reference_score = 3000

    def __init__(self) -> None:
        self.current_challenge: Optional[StroopChallenge] = None
        self.batch = ChallengeBatch(per_level=5)
        self.time_limit: Optional[int] = None
        self.turn_started_at: Optional[float] = None

    def generate_level(self, session: "GameSession") -> None:
        self.batch.reset()
        self.time_limit = time_limit_for(session.level, session.difficulty)
        self._next_challenge(session)

    def _next_challenge(self, session: "GameSession") -> None:
        rng = session.rng
        word = rng.pick(PALETTE)

        if rng.chance(congruent_chance(session.level)):
            ink = word
        else:
            ink = rng.pick(PALETTE)
            while ink.name == word.name:
                ink = rng.pick(PALETTE)

        others = [c for c in PALETTE if c.name != ink.name]
        wrong = rng.pick_multiple(others, option_count(session.level) - 1)
        options = rng.shuffle([ink.name] + [c.name for c in wrong])

        self.current_challenge = StroopChallenge(
            word=word.name,
            ink_name=ink.name,
            display_color=ink.hex,
            options=tuple(options),
        )
        self.turn_started_at = session.clock()
        logger.debug("Challenge: %s in %s", word.name, ink.name)

    def handle_input(self, session: "GameSession", value: Any) -> None:
        challenge = self.current_challenge
        if challenge is None or not isinstance(value, str):
            return
        answer = value.strip().upper()
        if answer not in challenge.options:
            return

        if answer == challenge.ink_name:
            response_time = session.clock() - (self.turn_started_at or 0)
            session.correct(
                BASE_POINTS + time_bonus(self.time_limit or 0, response_time, TIME_BONUS_STEP_MS)
            )
            self.batch.record(True)
        else:
            session.mistake()
            self.batch.record(False)
        self._advance(session)

    def handle_timeout(self, session: "GameSession") -> None:
        if self.current_challenge is None:
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
            self._next_challenge(session)
            session.notify_state_change()

    def progress(self) -> Dict[str, int]:
        return self.batch.progress()

    def content(self) -> Optional[dict]:
        return self.current_challenge.to_dict() if self.current_challenge else None

    def on_resume(self, session: "GameSession", paused_ms: float) -> None:
        if self.turn_started_at is not None:
            self.turn_started_at += paused_ms

    def cleanup(self) -> None:
        pass

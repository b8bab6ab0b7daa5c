# Area: Daily
"""
brainplay.daily — Daily challenge selection
============================================

Picks the game, seed and difficulty of the daily challenge for a UTC
calendar date. Every input is derived from the date alone, so every
player and device sees the same challenge:

    challenge = get_daily_challenge(date(2026, 3, 14))
    engine = create_engine(challenge.to_config())

Selection order:
1. Special days name a game directly (when it is registered).
2. Otherwise the weekday picks a category and the daily seed picks a
   game within it; categories without a registered game fall back to
   the whole catalog.
"""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ._config import DEFAULT_DIFFICULTY, GameConfig
from ._core.difficulty import calculate_difficulty
from ._core.enums import GameCategory
from ._core.rng import DayLike, get_daily_seed, get_game_seed, to_utc_date
from .registry import DEFAULT_REGISTRY, GameInfo, GameRegistry
from .types import DailyChallengeDict

logger = logging.getLogger("brainplay.daily")

MONTHLY_THEMES: Dict[int, Tuple[str, GameCategory]] = {
    1: ("New Beginnings", GameCategory.MEMORY),
    2: ("Love & Connection", GameCategory.LANGUAGE),
    3: ("Growth & Spring", GameCategory.LOGIC),
    4: ("Clarity & Focus", GameCategory.FOCUS),
    5: ("Mental Agility", GameCategory.SPEED),
    6: ("Summer Sharpness", GameCategory.CALCULATION),
    7: ("Creative Thinking", GameCategory.LANGUAGE),
    8: ("Back to Basics", GameCategory.MEMORY),
    9: ("Analytical September", GameCategory.LOGIC),
    10: ("Autumn Awareness", GameCategory.FOCUS),
    11: ("Gratitude & Recall", GameCategory.MEMORY),
    12: ("Year in Review", GameCategory.CALCULATION),
}

# Sunday first
WEEKLY_ROTATION: Tuple[GameCategory, ...] = (
    GameCategory.MEMORY,       # Sunday
    GameCategory.MEMORY,       # Monday
    GameCategory.LOGIC,        # Tuesday
    GameCategory.FOCUS,        # Wednesday
    GameCategory.CALCULATION,  # Thursday
    GameCategory.SPEED,        # Friday
    GameCategory.LANGUAGE,     # Saturday
)


@dataclass(frozen=True)
class SpecialDay:
    month: int
    day: int
    name: str
    game_id: Optional[str] = None


SPECIAL_DAYS: Tuple[SpecialDay, ...] = (
    SpecialDay(1, 1, "New Year Challenge"),
    SpecialDay(3, 14, "Pi Day Math Blitz", "math-sprint"),
    SpecialDay(7, 4, "Independence Speed", "reflex-tap"),
    SpecialDay(10, 31, "Halloween Memory", "pattern-echo"),
    SpecialDay(12, 25, "Holiday Challenge"),
)


@dataclass(frozen=True)
class DailyChallenge:
    """
    The challenge for one calendar date.

    Attributes:
        date: ISO date string
        game: Catalog entry of the chosen game
        seed: Game seed for that date
        difficulty: Date-adjusted difficulty (1-10)
        theme: Special-day name or monthly theme
        is_special_day: True on a special day
        special_day_name: Name of the special day, if any
    """
    date: str
    game: GameInfo
    seed: int
    difficulty: int
    theme: str
    is_special_day: bool
    special_day_name: Optional[str] = None

    def to_config(self) -> GameConfig:
        return GameConfig(
            game_id=self.game.id,
            seed=self.seed,
            difficulty=self.difficulty,
            date=dt.date.fromisoformat(self.date),
        )

    def to_dict(self) -> "DailyChallengeDict":
        return {
            "date": self.date,
            "game": self.game.to_dict(),
            "seed": self.seed,
            "difficulty": self.difficulty,
            "theme": self.theme,
            "is_special_day": self.is_special_day,
            "special_day_name": self.special_day_name,
        }


def find_special_day(day: dt.date) -> Optional[SpecialDay]:
    for special in SPECIAL_DAYS:
        if special.month == day.month and special.day == day.day:
            return special
    return None


def _pick_game(day: dt.date, special: Optional[SpecialDay], registry: GameRegistry) -> GameInfo:
    if special is not None and special.game_id is not None:
        info = registry.get_info(special.game_id)
        if info is not None:
            return info
        logger.debug(f"Special-day game {special.game_id} not registered, using rotation")

    category = WEEKLY_ROTATION[(day.weekday() + 1) % 7]
    candidates = registry.games_by_category(category) or registry.list_games()
    if not candidates:
        raise LookupError("Registry has no games to schedule")
    return candidates[get_daily_seed(day) % len(candidates)]


def get_daily_challenge(
    day: Optional[DayLike] = None,
    base_difficulty: int = DEFAULT_DIFFICULTY,
    registry: GameRegistry = DEFAULT_REGISTRY,
) -> DailyChallenge:
    """Challenge for ``day`` (UTC calendar date, default today)."""
    day = to_utc_date(day)
    special = find_special_day(day)
    game = _pick_game(day, special, registry)
    theme = special.name if special else MONTHLY_THEMES[day.month][0]

    return DailyChallenge(
        date=day.isoformat(),
        game=game,
        seed=get_game_seed(game.id, day),
        difficulty=calculate_difficulty(base_difficulty, day),
        theme=theme,
        is_special_day=special is not None,
        special_day_name=special.name if special else None,
    )


def get_challenge_for_date(date_str: str, **kwargs) -> DailyChallenge:
    """Challenge for an ISO ``YYYY-MM-DD`` string."""
    return get_daily_challenge(dt.date.fromisoformat(date_str), **kwargs)


def get_upcoming_challenges(
    days: int = 7,
    start: Optional[DayLike] = None,
    **kwargs,
) -> List[DailyChallenge]:
    """Challenges for ``days`` consecutive dates starting at ``start``."""
    first = to_utc_date(start)
    return [
        get_daily_challenge(first + dt.timedelta(days=offset), **kwargs)
        for offset in range(days)
    ]


def daily_config(day: Optional[DayLike] = None, **kwargs) -> GameConfig:
    """Ready-to-use GameConfig for the daily challenge."""
    return get_daily_challenge(day, **kwargs).to_config()

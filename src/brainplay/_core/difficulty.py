# Area: Core
"""
brainplay._core.difficulty — Difficulty curve and star rating
==============================================================

Pure functions mapping a calendar date to a difficulty value and a
score ratio to a 1-5 star rating. Nothing here caches "today": the
default date is resolved on every call.
"""

from __future__ import annotations

import math
from typing import Optional

from .rng import DayLike, to_utc_date

# Day of week modifiers, Sunday first
DAY_MODIFIERS = (
    0.7,  # Sunday - Easy
    0.8,  # Monday - Easy-Medium
    0.9,  # Tuesday - Medium
    1.0,  # Wednesday - Medium
    1.1,  # Thursday - Medium-Hard
    1.2,  # Friday - Hard
    0.6,  # Saturday - Relaxed
)

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 10

# (minimum ratio, stars), checked top-down
STAR_THRESHOLDS = (
    (0.95, 5),
    (0.80, 4),
    (0.60, 3),
    (0.40, 2),
)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def day_of_week_modifier(day: Optional[DayLike] = None) -> float:
    """Modifier for the weekday of ``day`` (Sunday=0.7 ... Saturday=0.6)."""
    weekday = to_utc_date(day).weekday()  # Monday == 0
    return DAY_MODIFIERS[(weekday + 1) % 7]


def month_progress_modifier(day: Optional[DayLike] = None) -> float:
    """Scales from 0.8 at the start of a month to about 1.2 at its end."""
    return 0.8 + (to_utc_date(day).day / 30) * 0.4


def calculate_difficulty(base: float = 5, day: Optional[DayLike] = None) -> int:
    """
    Difficulty for a given date.

    Args:
        base: Base difficulty (1-10)
        day: Date to calculate for, defaults to today (UTC)

    Returns:
        Integer difficulty clamped to [1, 10]
    """
    day = to_utc_date(day)
    adjusted = base * day_of_week_modifier(day) * month_progress_modifier(day)
    return max(MIN_DIFFICULTY, min(MAX_DIFFICULTY, _round_half_up(adjusted)))


def calculate_stars(score: float, max_possible_score: float) -> int:
    """Number of stars (1-5) earned for ``score`` out of ``max_possible_score``."""
    if max_possible_score <= 0:
        return 1
    ratio = score / max_possible_score
    for threshold, stars in STAR_THRESHOLDS:
        if ratio >= threshold:
            return stars
    return 1


def get_difficulty_label(difficulty: int) -> str:
    """Display label for a difficulty value."""
    if difficulty <= 2:
        return "Easy"
    if difficulty <= 4:
        return "Medium"
    if difficulty <= 6:
        return "Moderate"
    if difficulty <= 8:
        return "Hard"
    return "Expert"


def get_difficulty_color(difficulty: int) -> str:
    """Hex color for a difficulty value."""
    if difficulty <= 2:
        return "#10b981"  # green
    if difficulty <= 4:
        return "#3b82f6"  # blue
    if difficulty <= 6:
        return "#f59e0b"  # yellow
    if difficulty <= 8:
        return "#f97316"  # orange
    return "#ef4444"  # red


def get_estimated_duration(base_minutes: float, difficulty: int) -> str:
    """Rough play time such as ``"~3 min"``."""
    minutes = _round_half_up(base_minutes * (0.8 + difficulty * 0.05))
    return "~1 min" if minutes == 1 else f"~{minutes} min"

# Area: Core
"""
brainplay._core.rng — Seeded random stream and daily seeds
===========================================================

Deterministic pseudo-random generator used by every engine. The stream
is a 31-bit linear congruential recurrence evaluated with integer
arithmetic only, so a seed produces the same content on every platform.

Seed helpers derive integers from the UTC calendar date so that all
players get identical daily content:

    seed = get_game_seed("math-sprint", date(2026, 3, 14))
    rng = SeededRNG(seed)
"""

from __future__ import annotations

import math
from datetime import date, datetime, timezone
from typing import List, Optional, Sequence, TypeVar, Union

T = TypeVar("T")
DayLike = Union[date, datetime]

LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MASK = 0x7FFFFFFF
LCG_MODULUS = LCG_MASK + 1

_EPOCH = date(1970, 1, 1)


class SeededRNG:
    """
    Reproducible random stream keyed by an integer seed.

    Two instances built from the same seed return the same values for
    the same call order. The state is never touched by wall-clock time.
    """

    def __init__(self, seed: int):
        self._initial_seed = seed
        self._state = seed & LCG_MASK

    @property
    def seed(self) -> int:
        """The seed this stream was created with."""
        return self._initial_seed

    def next(self) -> float:
        """Advance the stream and return a float in [0, 1)."""
        self._state = (self._state * LCG_MULTIPLIER + LCG_INCREMENT) & LCG_MASK
        return self._state / LCG_MODULUS

    def next_int(self, lo: int, hi: int) -> int:
        """Return an integer in [lo, hi], both inclusive."""
        return math.floor(self.next() * (hi - lo + 1)) + lo

    def next_float(self, lo: float, hi: float) -> float:
        """Return a float in [lo, hi)."""
        return self.next() * (hi - lo) + lo

    def shuffle(self, items: Sequence[T]) -> List[T]:
        """Fisher–Yates shuffle into a new list; ``items`` is left unchanged."""
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = math.floor(self.next() * (i + 1))
            result[i], result[j] = result[j], result[i]
        return result

    def pick(self, items: Sequence[T]) -> T:
        """Pick one element uniformly."""
        if not items:
            raise IndexError("Cannot pick from an empty sequence")
        return items[self.next_int(0, len(items) - 1)]

    def pick_multiple(self, items: Sequence[T], n: int) -> List[T]:
        """Pick ``n`` distinct elements (fewer if ``items`` is shorter)."""
        return self.shuffle(items)[:min(n, len(items))]

    def chance(self, probability: float) -> bool:
        """Return True with the given probability (0-1)."""
        return self.next() < probability


# ══════════════════════════════════════════════════════════════
# DATE-DERIVED SEEDS
# ══════════════════════════════════════════════════════════════

def to_utc_date(day: Optional[DayLike] = None) -> date:
    """
    Canonicalize ``day`` to a UTC calendar date.

    Aware datetimes are converted to UTC first, naive datetimes are
    taken as UTC, plain dates are used as-is. ``None`` means today (UTC).
    """
    if day is None:
        return datetime.now(timezone.utc).date()
    if isinstance(day, datetime):
        if day.tzinfo is not None:
            day = day.astimezone(timezone.utc)
        return day.date()
    return day


def get_daily_seed(day: Optional[DayLike] = None) -> int:
    """Days since 1970-01-01 for the UTC calendar date of ``day``."""
    return (to_utc_date(day) - _EPOCH).days


def get_game_seed(game_id: str, day: Optional[DayLike] = None) -> int:
    """Seed for one game on one calendar day, identical for every player."""
    return hash_combine(get_daily_seed(day), hash_string(game_id))


def get_date_string(day: Optional[DayLike] = None) -> str:
    """ISO ``YYYY-MM-DD`` string for the UTC calendar date of ``day``."""
    return to_utc_date(day).isoformat()


def hash_string(text: str) -> int:
    """
    31-multiplier string hash over UTF-16 code units.

    Arithmetic wraps at signed 32 bits; the absolute value is returned.
    """
    h = 0
    data = text.encode("utf-16-le")
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        h = ((h << 5) - h + unit) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return abs(h)


def hash_combine(a: int, b: int) -> int:
    """Mix two hashes into a non-negative 31-bit seed."""
    mixed = (b + 0x9E3779B9 + (a << 6) + (a >> 2)) & 0xFFFFFFFF
    return (a ^ mixed) & LCG_MASK

"""
brainplay.types — TypedDict schemas for JSON-ready views
=========================================================

This module documents the exact structure of the dictionaries returned
by ``to_dict()``, ``progress()`` and ``content()`` across the package.
Renderers and persistence layers should reference these types.

Use __annotations__ to inspect fields:

    >>> MathProblemDict.__annotations__
    {'num1': int, 'num2': int, 'operation': str, 'answer': int, 'display': str}
"""

from typing import List, Optional, TypedDict


# ============================================
# Session views
# ============================================

class GameStateDict(TypedDict):
    """GameState.to_dict()."""
    status: str             # e.g., "playing"
    level: int
    max_level: int
    score: int
    lives: int
    max_lives: int
    start_time: Optional[float]
    end_time: Optional[float]
    accuracy: float


class GameResultDict(TypedDict):
    """GameResult.to_dict(), the record handed to stats storage.

    Fields
    ------
    outcome : str
        "completed" or "game_over".
    duration : float
        Session length in milliseconds.
    date : str
        ISO date, e.g., "2026-03-14".
    """
    game_id: str
    category: str
    score: int
    accuracy: float
    levels_completed: int
    max_level: int
    duration: float
    date: str
    outcome: str
    stars: int


class _LevelProgressBase(TypedDict):
    current: int
    total: int


class LevelProgress(_LevelProgressBase, total=False):
    """progress(): position within the current level."""
    moves: int              # card-flip only


# ============================================
# Level content
# ============================================

class MathProblemDict(TypedDict):
    num1: int
    num2: int
    operation: str          # "+", "-", "×" or "÷"
    answer: int
    display: str            # e.g., "12 + 7 = ?"


class StroopChallengeDict(TypedDict):
    word: str               # e.g., "RED"
    display_color: str      # ink hex, e.g., "#3b82f6"
    correct_answer: str     # ink name, e.g., "BLUE"
    options: List[str]


class CardDict(TypedDict):
    id: int
    symbol: str
    is_flipped: bool
    is_matched: bool


class CardFlipBoardDict(TypedDict):
    rows: int
    cols: int
    cards: List[CardDict]
    flipped_cards: List[int]
    matched_pairs: int
    total_pairs: int
    moves: int
    can_flip: bool
    last_match_correct: Optional[bool]


class PatternEchoLevelDict(TypedDict):
    """Sequence tiles are [row, col] pairs in playback order."""
    grid_size: int
    sequence: List[List[int]]
    time_per_tile: int


# ============================================
# Catalog and daily schedule
# ============================================

class GameInfoDict(TypedDict):
    id: str
    name: str
    category: str
    description: str
    duration: str           # e.g., "~3 min"
    icon: str
    max_levels: int


class DailyChallengeDict(TypedDict):
    date: str
    game: GameInfoDict
    seed: int
    difficulty: int
    theme: str
    is_special_day: bool
    special_day_name: Optional[str]

"""
brainplay — Brain-training game engines
========================================

Engine layer for a catalog of short brain-training games: a shared
session state machine, a deterministic seeded RNG with date-derived
seeds for the daily challenge, a difficulty curve and four games.

Quick Start:
    from brainplay import create_engine, RecordingListener

    engine = create_engine({"game_id": "math-sprint", "seed": 42})
    listener = RecordingListener()
    engine.add_listener(listener)
    engine.init()
    engine.start()
    engine.handle_input(engine.rules.current_problem.answer)

Daily Challenge:
    from brainplay import create_engine, daily_config

    engine = create_engine(daily_config())

Watch a scripted game:
    from brainplay import DemoPlayer

    result = DemoPlayer.for_config({"game_id": "card-flip", "seed": 7}).play()

Registered games
----------------
math-sprint, color-stroop, card-flip, pattern-echo
"""

from ._core import (
    GameStatus,
    SessionEvent,
    GameCategory,
    SeededRNG,
    get_daily_seed,
    get_game_seed,
    get_date_string,
    calculate_difficulty,
    calculate_stars,
    get_difficulty_label,
    get_difficulty_color,
    get_estimated_duration,
    GameState,
    GameProgress,
    GameResult,
    ScheduledTask,
    Scheduler,
    ThreadingScheduler,
    ManualScheduler,
    GameRules,
    GameSession,
)
from ._config import GameConfig, build_config, load_settings
from ._games import (
    MathSprintRules,
    MathProblem,
    ColorStroopRules,
    StroopChallenge,
    CardFlipRules,
    Card,
    CardFlipBoard,
    PatternEchoRules,
    PatternEchoLevel,
    Tile,
)
from .listeners import GameListener, CallbackListener, RecordingListener
from .errors import BrainPlayError, InvalidConfigError, UnknownGameError
from .registry import (
    GameInfo,
    GameRegistry,
    DEFAULT_REGISTRY,
    create_engine,
    get_game_info,
    list_games,
    get_games_by_category,
)
from .daily import (
    DailyChallenge,
    get_daily_challenge,
    get_challenge_for_date,
    get_upcoming_challenges,
    daily_config,
)
from .demo_player import DemoPlayer
from ._shared import setup_logging

__version__ = "1.0.0"

__all__ = [
    # Engine
    "GameSession",
    "GameRules",
    "GameConfig",
    "build_config",
    "load_settings",
    "create_engine",
    # Catalog
    "GameInfo",
    "GameRegistry",
    "DEFAULT_REGISTRY",
    "get_game_info",
    "list_games",
    "get_games_by_category",
    # State
    "GameStatus",
    "SessionEvent",
    "GameCategory",
    "GameState",
    "GameProgress",
    "GameResult",
    # Listeners
    "GameListener",
    "CallbackListener",
    "RecordingListener",
    # Errors
    "BrainPlayError",
    "InvalidConfigError",
    "UnknownGameError",
    # Randomness and difficulty
    "SeededRNG",
    "get_daily_seed",
    "get_game_seed",
    "get_date_string",
    "calculate_difficulty",
    "calculate_stars",
    "get_difficulty_label",
    "get_difficulty_color",
    "get_estimated_duration",
    # Scheduling
    "ScheduledTask",
    "Scheduler",
    "ThreadingScheduler",
    "ManualScheduler",
    # Games
    "MathSprintRules",
    "MathProblem",
    "ColorStroopRules",
    "StroopChallenge",
    "CardFlipRules",
    "Card",
    "CardFlipBoard",
    "PatternEchoRules",
    "PatternEchoLevel",
    "Tile",
    # Daily challenge
    "DailyChallenge",
    "get_daily_challenge",
    "get_challenge_for_date",
    "get_upcoming_challenges",
    "daily_config",
    # Demo and tooling
    "DemoPlayer",
    "setup_logging",
]

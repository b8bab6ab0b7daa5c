# Area: Shared
"""
brainplay._config — Session and runtime configuration
======================================================

GameConfig is the immutable input of one play session. It is validated
with pydantic so structurally invalid configs fail before any engine
exists. Runtime settings for the CLI come from a JSON file and/or
environment variables (``.env`` files are loaded by the CLI).
"""

from __future__ import annotations

import json
import logging
import os
import datetime as dt
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import InvalidConfigError

logger = logging.getLogger("brainplay.config")

DEFAULT_DIFFICULTY = 5


class GameConfig(BaseModel):
    """
    Immutable input for one play session.

    Fields
    ------
    game_id : str
        Registry id, e.g. "math-sprint".
    seed : int, optional
        Explicit seed. Absent means a fresh non-reproducible seed.
    difficulty : int
        Difficulty scalar, 1-10.
    level : int, optional
        Starting level override (1-based).
    date : date, optional
        Calendar date stamped into the result. Daily sessions set it
        to the challenge date.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    game_id: str = Field(min_length=1)
    seed: Optional[int] = None
    difficulty: int = Field(default=DEFAULT_DIFFICULTY, ge=1, le=10)
    level: Optional[int] = Field(default=None, ge=1)
    date: Optional[dt.date] = None


def build_config(data: Union[GameConfig, Mapping[str, Any]]) -> GameConfig:
    """
    Validate ``data`` into a GameConfig.

    Raises:
        InvalidConfigError: If any field is missing or out of range
    """
    if isinstance(data, GameConfig):
        return data
    try:
        return GameConfig.model_validate(dict(data))
    except ValidationError as e:
        errors = [
            f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}"
            for err in e.errors()
        ]
        raise InvalidConfigError(
            input_payload=dict(data),
            validation_errors=errors,
            game_id=data.get("game_id") if isinstance(data.get("game_id"), str) else None,
        ) from e


# ══════════════════════════════════════════════════════════════
# RUNTIME SETTINGS
# ══════════════════════════════════════════════════════════════

ENV_MAPPINGS = {
    "BRAINPLAY_LOG_LEVEL": "log_level",
    "BRAINPLAY_LOG_FILE": "log_file",
    "BRAINPLAY_BASE_DIFFICULTY": "base_difficulty",
}

DEFAULT_SETTINGS: Dict[str, Any] = {
    "log_level": "WARNING",
    "log_file": None,
    "base_difficulty": DEFAULT_DIFFICULTY,
}


def load_settings(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load runtime settings from defaults, a JSON file, then environment.

    Raises:
        ValueError: If base_difficulty is not an integer in 1-10
    """
    settings = dict(DEFAULT_SETTINGS)

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                settings.update(json.load(f))
        else:
            logger.warning("Settings file not found: %s", config_path)

    for env_key, settings_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            settings[settings_key] = os.environ[env_key]

    validate_settings(settings)
    return settings


def validate_settings(settings: Dict[str, Any]) -> None:
    """Coerce and range-check settings in place."""
    try:
        base = int(settings["base_difficulty"])
    except (TypeError, ValueError):
        raise ValueError(
            f"base_difficulty must be an integer, got {settings['base_difficulty']!r}"
        )
    if not 1 <= base <= 10:
        raise ValueError(f"base_difficulty must be within 1-10, got {base}")
    settings["base_difficulty"] = base
    settings["log_level"] = str(settings["log_level"]).upper()

# Area: Shared
"""
brainplay.errors — Custom exception classes
============================================

Defines the exception hierarchy for session construction errors.
Gameplay itself never raises: invalid or out-of-turn input is ignored.
Each exception stores full context for structured logging.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
import json


class BrainPlayError(Exception):
    """Base exception for all brainplay package errors."""
    pass


class InvalidConfigError(BrainPlayError):
    """Raised when a GameConfig is structurally invalid."""

    def __init__(
        self,
        input_payload: Dict[str, Any],
        validation_errors: List[str],
        game_id: Optional[str] = None,
    ):
        self.input_payload = input_payload
        self.validation_errors = validation_errors
        self.game_id = game_id
        super().__init__(f"Invalid game config: {validation_errors}")

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="INVALID_CONFIG",
            game_id=self.game_id,
            input_payload=self.input_payload,
            validation_errors=self.validation_errors,
        )


class UnknownGameError(BrainPlayError):
    """Raised when no engine is registered for a game id."""

    def __init__(self, game_id: str, known_ids: List[str]):
        self.game_id = game_id
        self.known_ids = known_ids
        super().__init__(
            f"Unknown game '{game_id}' (known: {', '.join(known_ids)})"
        )

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="UNKNOWN_GAME",
            game_id=self.game_id,
            input_payload={"game_id": self.game_id},
            validation_errors=[f"Expected one of {self.known_ids}"],
        )


def _format_error_block(
    error_type: str,
    game_id: Optional[str],
    input_payload: Dict[str, Any],
    validation_errors: Optional[List[str]],
) -> str:
    """Format a structured error block for terminal output."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " GAME CONFIG ERROR — SESSION NOT CREATED",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
    ]

    if game_id is not None:
        lines.append(f" Game:         {game_id}")

    lines.append("")
    lines.append(" ── INPUT PAYLOAD " + "─" * 46)
    lines.append(_indent_json(input_payload))

    if validation_errors:
        lines.append("")
        lines.append(" ── VALIDATION ERRORS " + "─" * 42)
        for error in validation_errors:
            lines.append(f" • {error}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)


def _indent_json(data: Dict[str, Any], indent: int = 2) -> str:
    """Format JSON with indentation for error logs."""
    try:
        formatted = json.dumps(data, indent=indent, default=str)
        return "\n".join(" " + line for line in formatted.split("\n"))
    except (TypeError, ValueError):
        return f" {repr(data)}"

# Area: Games
"""
brainplay._games.pattern_echo — Sequence recall
================================================

A sequence of tiles lights up on a square grid; the player repeats it.
Each level starts in playback: the caller animates ``current_level``
(one tile per ``time_per_tile`` ms) and then reports the end of the
animation with ``finish_playback``:

    engine.rules.finish_playback(engine)
    engine.handle_input(Tile(0, 2))

A wrong tap costs one life and resets the player's progress; the same
sequence is replayed, never regenerated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, NamedTuple, Optional, Tuple

from .batch import whole_number
from .._core.enums import GameCategory
from ..types import PatternEchoLevelDict

if TYPE_CHECKING:
    from .._core.session import GameSession

logger = logging.getLogger("brainplay.games.pattern_echo")

MAX_SEQUENCE_LENGTH = 12
POINTS_PER_TAP = 10
TIME_BONUS_SECONDS = 50


class Tile(NamedTuple):
    row: int
    col: int


@dataclass(frozen=True)
class PatternEchoLevel:
    """Content of one level."""
    grid_size: int
    sequence: Tuple[Tile, ...]
    time_per_tile: int

    def to_dict(self) -> "PatternEchoLevelDict":
        return {
            "grid_size": self.grid_size,
            "sequence": [[t.row, t.col] for t in self.sequence],
            "time_per_tile": self.time_per_tile,
        }


def grid_size_for(level: int) -> int:
    """3x3 for levels 1-3, 4x4 for 4-6, 5x5 beyond."""
    return min(3 + (level - 1) // 3, 5)


def sequence_length_for(level: int, difficulty: int) -> int:
    return min(2 + level + difficulty // 3, MAX_SEQUENCE_LENGTH)


def time_per_tile_for(level: int, difficulty: int) -> int:
    return max(400, 800 - difficulty * 30 - level * 20)


def _coerce_tile(value: Any) -> Optional[Tile]:
    if isinstance(value, dict):
        value = (value.get("row"), value.get("col"))
    if not isinstance(value, (tuple, list)) or len(value) != 2:
        return None
    row, col = (whole_number(part) for part in value)
    if row is None or col is None:
        return None
    return Tile(row, col)


class PatternEchoRules:
    """Rules for the sequence recall challenge."""

    game_id = "pattern-echo"
    category = GameCategory.MEMORY
    max_levels = 8
    reference_score = 900
    time_limit: Optional[int] = None
    turn_started_at: Optional[float] = None

    def __init__(self) -> None:
        self.current_level: Optional[PatternEchoLevel] = None
        self.player_progress = 0
        self.showing_sequence = False
        self.level_started_at: float = 0.0

    def generate_level(self, session: "GameSession") -> None:
        level, difficulty = session.level, session.difficulty
        grid_size = grid_size_for(level)
        length = sequence_length_for(level, difficulty)

        sequence = []
        for _ in range(length):
            row = session.rng.next_int(0, grid_size - 1)
            col = session.rng.next_int(0, grid_size - 1)
            sequence.append(Tile(row, col))

        self.current_level = PatternEchoLevel(
            grid_size=grid_size,
            sequence=tuple(sequence),
            time_per_tile=time_per_tile_for(level, difficulty),
        )
        self.player_progress = 0
        self.showing_sequence = True
        self.level_started_at = session.clock()
        logger.debug("Level %d: %d tiles on %dx%d", level, length, grid_size, grid_size)

    @property
    def required_length(self) -> int:
        return len(self.current_level.sequence) if self.current_level else 0

    def playback_duration(self) -> int:
        """Milliseconds the caller needs to play the whole sequence."""
        if self.current_level is None:
            return 0
        return self.current_level.time_per_tile * len(self.current_level.sequence)

    def finish_playback(self, session: "GameSession") -> None:
        """Caller finished animating the sequence; recall input opens."""
        with session.lock:
            if not self.showing_sequence or not session.is_playing:
                return
            self.showing_sequence = False
            session.notify_state_change()

    def handle_input(self, session: "GameSession", value: Any) -> None:
        if self.showing_sequence or self.current_level is None:
            return
        tile = _coerce_tile(value)
        size = self.current_level.grid_size
        if tile is None or not (0 <= tile.row < size and 0 <= tile.col < size):
            return

        expected = self.current_level.sequence[self.player_progress]
        if tile != expected:
            self._fail(session)
            return

        self.player_progress += 1
        session.correct(POINTS_PER_TAP)

        if self.player_progress == self.required_length:
            elapsed_seconds = int((session.clock() - self.level_started_at) // 1000)
            session.level_complete(max(0, TIME_BONUS_SECONDS - elapsed_seconds))

    def handle_timeout(self, session: "GameSession") -> None:
        if self.showing_sequence or self.current_level is None:
            return
        self._fail(session)

    def _fail(self, session: "GameSession") -> None:
        session.mistake()
        if session.is_playing:
            self.player_progress = 0
            self.showing_sequence = True
            session.notify_state_change()

    def progress(self) -> Dict[str, int]:
        return {"current": self.player_progress, "total": self.required_length}

    def content(self) -> Optional[dict]:
        if self.current_level is None:
            return None
        data = self.current_level.to_dict()
        data["showing_sequence"] = self.showing_sequence
        return data

    def on_resume(self, session: "GameSession", paused_ms: float) -> None:
        # the completion bonus counts unpaused time only
        self.level_started_at += paused_ms

    def cleanup(self) -> None:
        pass

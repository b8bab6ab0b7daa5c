# Area: Core
"""
brainplay._core.session — Shared game session state machine
============================================================

GameSession is the engine a caller plays against. It owns lifecycle,
lives, score, level progression and result assembly for exactly one
play session, and delegates content generation and input judging to a
GameRules variant chosen by the registry.

    engine = create_engine({"game_id": "math-sprint", "seed": 42})
    engine.add_listener(my_listener)
    engine.init()
    engine.start()
    engine.handle_input(17)

Gameplay never raises. Input that arrives while the session is not
playing, or after dispose(), is ignored without notification.

Every mutator runs under ``session.lock``, and delayed tasks scheduled
by the rules run under the same lock. A timer firing on another thread
therefore sees the session either before or after a caller's call,
never halfway through it.
"""

from __future__ import annotations

import logging
import secrets
import threading
import time
from typing import Any, Callable, Dict, List, Optional

from .difficulty import calculate_stars
from .enums import GameStatus, SessionEvent
from .game_result import OUTCOME_COMPLETED, OUTCOME_GAME_OVER, GameResult
from .rng import LCG_MASK, SeededRNG, get_date_string
from .rules import GameRules
from .scheduler import ScheduledTask, Scheduler, ThreadingScheduler
from .state import GameProgress, GameState
from .state_machine import SessionStateMachine
from .._config import GameConfig
from ..listeners import CallbackListener, GameListener

logger = logging.getLogger("brainplay.session")

Clock = Callable[[], float]


def monotonic_ms() -> float:
    """Default engine clock, in milliseconds."""
    return time.monotonic() * 1000.0


class GameSession:
    """
    One play session of one game.

    Attributes:
        config: The validated GameConfig
        rules: The game variant (engine-specific accessors live here)
        rng: Session-private seeded random stream
        seed: Seed actually used (drawn fresh when config.seed is None)
        difficulty: Difficulty scalar (1-10)
        clock: Millisecond clock used for start time and response times
        scheduler: Runs the few delayed tasks a variant may need
        lock: Re-entrant lock held by every mutator and scheduled task
        progress_history: GameProgress snapshots recorded so far
    """

    def __init__(
        self,
        config: GameConfig,
        rules: GameRules,
        clock: Optional[Clock] = None,
        scheduler: Optional[Scheduler] = None,
    ):
        self.config = config
        self.rules = rules
        self.game_id = config.game_id
        self.seed = config.seed if config.seed is not None else secrets.randbits(31) & LCG_MASK
        self.rng = SeededRNG(self.seed)
        self.difficulty = config.difficulty
        self.clock: Clock = clock or monotonic_ms
        self.scheduler: Scheduler = scheduler or ThreadingScheduler()
        self.lock = threading.RLock()
        self.state_machine = SessionStateMachine()
        self.state = GameState(
            max_level=rules.max_levels,
            level=config.level or 1,
        )
        self.progress_history: List[GameProgress] = []
        self._listeners: List[GameListener] = []
        self._callback_listener: Optional[CallbackListener] = None
        self._result: Optional[GameResult] = None
        self._disposed = False
        self._paused_at: Optional[float] = None
        self._closed = False
        self._correct_count = 0
        self._attempts = 0

    # ── Listeners ────────────────────────────────────────────

    def add_listener(self, listener: GameListener) -> None:
        with self.lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def remove_listener(self, listener: GameListener) -> None:
        with self.lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def set_callbacks(
        self,
        on_state_change: Optional[Callable[[GameState], None]] = None,
        on_complete: Optional[Callable[[GameResult], None]] = None,
        on_progress: Optional[Callable[[GameProgress], None]] = None,
    ) -> None:
        """Register plain callables, replacing any set by a previous call."""
        with self.lock:
            if self._callback_listener is not None:
                self.remove_listener(self._callback_listener)
            self._callback_listener = CallbackListener(
                on_state_change=on_state_change,
                on_complete=on_complete,
                on_progress=on_progress,
            )
            self.add_listener(self._callback_listener)

    # ── Read access ──────────────────────────────────────────

    @property
    def status(self) -> GameStatus:
        return self.state.status

    @property
    def level(self) -> int:
        return self.state.level

    @property
    def lives(self) -> int:
        return self.state.lives

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def is_playing(self) -> bool:
        return not self._disposed and self.state.status == GameStatus.PLAYING

    @property
    def disposed(self) -> bool:
        return self._disposed

    def get_state(self) -> GameState:
        with self.lock:
            return self.state.snapshot()

    def get_result(self) -> Optional[GameResult]:
        """The terminal result, or None while the game is still running."""
        return self._result

    def progress(self) -> Dict[str, int]:
        return self.rules.progress()

    def content(self) -> Optional[Dict[str, Any]]:
        """Current level content as a JSON-ready dict."""
        return self.rules.content()

    def time_remaining(self) -> Optional[float]:
        """
        Milliseconds left for the current turn, computed on demand.

        Returns None for games without a per-turn time limit, and while
        the session is not playing (paused, finished or disposed). The
        caller owns the countdown and calls handle_timeout() when this
        hits 0.
        """
        if not self.is_playing:
            return None
        limit = self.rules.time_limit
        started_at = self.rules.turn_started_at
        if limit is None or started_at is None:
            return None
        return max(0.0, limit - (self.clock() - started_at))

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> ScheduledTask:
        """Schedule ``callback`` to run under the session lock."""
        return self.scheduler.call_later(delay_ms, callback, lock=self.lock)

    # ── Lifecycle ────────────────────────────────────────────

    def init(self) -> None:
        """Finish setup and move IDLE -> READY. No RNG use, no timers."""
        with self.lock:
            if self._disposed or not self.state_machine.can_transition(SessionEvent.INIT):
                return
            self._transition(SessionEvent.INIT)
            logger.info(
                f"[{self.game_id}] Ready (seed={self.seed}, difficulty={self.difficulty})"
            )
            self.notify_state_change()

    def start(self) -> None:
        """Move READY -> PLAYING and generate the first level. No-op otherwise."""
        with self.lock:
            if self._disposed or not self.state_machine.can_transition(SessionEvent.START):
                logger.debug(f"[{self.game_id}] start() ignored in {self.status.value}")
                return
            self.state.start_time = self.clock()
            self._transition(SessionEvent.START)
            logger.info(f"[{self.game_id}] Started at level {self.state.level}")
            self.rules.generate_level(self)
            self.notify_state_change()

    def pause(self) -> None:
        with self.lock:
            if self._disposed or not self.state_machine.can_transition(SessionEvent.PAUSE):
                return
            self._paused_at = self.clock()
            self._transition(SessionEvent.PAUSE)
            self.notify_state_change()

    def resume(self) -> None:
        """Resume play; turn clocks skip the time spent paused."""
        with self.lock:
            if self._disposed or not self.state_machine.can_transition(SessionEvent.RESUME):
                return
            now = self.clock()
            paused_ms = now - self._paused_at if self._paused_at is not None else 0.0
            self._paused_at = None
            self._transition(SessionEvent.RESUME)
            self.rules.on_resume(self, max(0.0, paused_ms))
            self.notify_state_change()

    def dispose(self) -> None:
        """Cancel pending tasks and make the session inert. Idempotent."""
        with self.lock:
            if self._disposed:
                return
            self._disposed = True
            self.rules.cleanup()
            logger.debug(f"[{self.game_id}] Disposed in {self.status.value}")

    def __enter__(self) -> "GameSession":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.dispose()
        return False

    # ── Input ────────────────────────────────────────────────

    def handle_input(self, value: Any) -> None:
        with self.lock:
            if not self.is_playing:
                logger.debug(f"[{self.game_id}] Input ignored in {self.status.value}")
                return
            self.rules.handle_input(self, value)

    def handle_timeout(self) -> None:
        with self.lock:
            if not self.is_playing:
                return
            logger.debug(f"[{self.game_id}] Timeout at level {self.state.level}")
            self.rules.handle_timeout(self)

    # ── Operations used by the rules ─────────────────────────

    def correct(self, points: int = 10) -> None:
        """Add ``points`` for a correct action."""
        with self.lock:
            if not self.is_playing:
                return
            self.state.score += max(0, int(points))
            self._update_accuracy(True)
            self.notify_state_change()

    def mistake(self) -> None:
        """Lose a life; the game is over when none remain."""
        with self.lock:
            if not self.is_playing:
                return
            self.state.lives = max(0, self.state.lives - 1)
            self._update_accuracy(False)
            if self.state.lives <= 0:
                self._finish(SessionEvent.LIVES_EXHAUSTED)
            else:
                self.notify_state_change()

    def record_miss(self) -> None:
        """Count a failed attempt against accuracy without costing a life."""
        with self.lock:
            if not self.is_playing:
                return
            self._update_accuracy(False)

    def level_complete(self, bonus: int = 0) -> None:
        """Add ``bonus`` and advance, or complete the game on the last level."""
        with self.lock:
            if not self.is_playing:
                return
            self.state.score += max(0, int(bonus))
            self._transition(SessionEvent.LEVEL_CLEARED)
            self._record_progress()

            if self.state.level >= self.state.max_level:
                self._finish(SessionEvent.FINAL_LEVEL_CLEARED)
                return

            self.state.level += 1
            self._transition(SessionEvent.NEXT_LEVEL)
            logger.info(f"[{self.game_id}] Level {self.state.level} (score={self.state.score})")
            self.rules.generate_level(self)
            self.notify_state_change()

    # ── Internals ────────────────────────────────────────────

    def _transition(self, event: SessionEvent) -> None:
        self.state.status = self.state_machine.transition(event)

    def _update_accuracy(self, was_correct: bool) -> None:
        self._attempts += 1
        if was_correct:
            self._correct_count += 1
        self.state.accuracy = self._correct_count / self._attempts

    def _record_progress(self) -> None:
        progress = GameProgress(
            level=self.state.level,
            score=self.state.score,
            lives=self.state.lives,
            accuracy=self.state.accuracy,
            timestamp=self.clock() - (self.state.start_time or 0),
        )
        self.progress_history.append(progress)
        for listener in list(self._listeners):
            listener.on_progress(progress)

    def _finish(self, event: SessionEvent) -> None:
        if self._result is not None:
            return
        self._transition(event)
        self.state.end_time = self.clock()
        won = self.state.status == GameStatus.COMPLETED
        if not won:
            self._record_progress()

        self._result = GameResult(
            game_id=self.game_id,
            category=self.rules.category.value,
            score=self.state.score,
            accuracy=self.state.accuracy,
            levels_completed=self.state.max_level if won else self.state.level - 1,
            max_level=self.state.max_level,
            duration=self.state.end_time - (self.state.start_time or self.state.end_time),
            date=get_date_string(self.config.date),
            outcome=OUTCOME_COMPLETED if won else OUTCOME_GAME_OVER,
            stars=calculate_stars(self.state.score, self.rules.reference_score),
        )
        logger.info(
            f"[{self.game_id}] {self._result.outcome} "
            f"(score={self._result.score}, levels={self._result.levels_completed})"
        )
        self.rules.cleanup()
        self.notify_state_change()
        # nothing is announced after the result
        self._closed = True
        for listener in list(self._listeners):
            listener.on_complete(self._result)

    def notify_state_change(self) -> None:
        """Push a state snapshot to every listener."""
        with self.lock:
            if self._closed:
                return
            snapshot = self.state.snapshot()
            for listener in list(self._listeners):
                listener.on_state_change(snapshot)

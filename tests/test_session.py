# Area: Core Tests
"""Tests for GameSession lifecycle, scoring and notifications."""

from datetime import date
from unittest.mock import patch

import pytest
from brainplay._config import GameConfig
from brainplay._core.enums import GameCategory, GameStatus
from brainplay._core.scheduler import ManualScheduler
from brainplay._core.session import GameSession
from brainplay.listeners import GameListener, RecordingListener


class FakeClock:
    """Millisecond clock moved by hand."""

    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


class StubRules:
    """Minimal rules: 'ok' scores, 'bad' costs a life, 'clear' ends the level."""

    game_id = "stub"
    category = GameCategory.LOGIC
    max_levels = 3
    reference_score = 100
    time_limit = None
    turn_started_at = None

    def __init__(self):
        self.generated = []
        self.inputs = []
        self.cleaned = 0
        self.resumed = []

    def generate_level(self, session):
        self.generated.append(session.level)

    def handle_input(self, session, value):
        self.inputs.append(value)
        if value == "ok":
            session.correct(10)
        elif value == "bad":
            session.mistake()
        elif value == "clear":
            session.level_complete(5)
        elif value == "miss":
            session.record_miss()

    def handle_timeout(self, session):
        session.mistake()

    def progress(self):
        return {"current": len(self.inputs), "total": 3}

    def content(self):
        return {"level": self.generated[-1] if self.generated else None}

    def on_resume(self, session, paused_ms):
        self.resumed.append(paused_ms)

    def cleanup(self):
        self.cleaned += 1


def _make_session(rules=None, clock=None, **config):
    config.setdefault("game_id", "stub")
    config.setdefault("seed", 1)
    return GameSession(
        GameConfig(**config),
        rules or StubRules(),
        clock=clock or FakeClock(),
        scheduler=ManualScheduler(),
    )


def _playing(**kwargs):
    session = _make_session(**kwargs)
    session.init()
    session.start()
    return session


class TestLifecycle:
    """Tests for init/start/pause/resume/dispose."""

    def test_init_moves_to_ready_and_notifies(self):
        session = _make_session()
        listener = RecordingListener()
        session.add_listener(listener)
        session.init()
        assert session.status == GameStatus.READY
        assert [s.status for s in listener.states] == [GameStatus.READY]
        assert session.rules.generated == []

    def test_init_twice_is_noop(self):
        session = _make_session()
        listener = RecordingListener()
        session.add_listener(listener)
        session.init()
        session.init()
        assert len(listener.states) == 1

    def test_start_before_init_is_noop(self):
        session = _make_session()
        session.start()
        assert session.status == GameStatus.IDLE
        assert session.rules.generated == []

    def test_start_generates_first_level(self):
        clock = FakeClock(2500.0)
        session = _playing(clock=clock)
        assert session.status == GameStatus.PLAYING
        assert session.rules.generated == [1]
        assert session.get_state().start_time == 2500.0

    def test_start_twice_generates_once(self):
        session = _playing()
        session.start()
        assert session.rules.generated == [1]

    def test_level_override(self):
        session = _playing(level=2)
        assert session.level == 2
        assert session.rules.generated == [2]

    def test_pause_blocks_input(self):
        session = _playing()
        session.pause()
        assert session.status == GameStatus.PAUSED
        session.handle_input("ok")
        assert session.score == 0
        session.resume()
        assert session.status == GameStatus.PLAYING
        session.handle_input("ok")
        assert session.score == 10

    def test_resume_reports_paused_time_to_rules(self):
        clock = FakeClock(1000.0)
        session = _playing(clock=clock)
        session.pause()
        clock.now = 4500.0
        session.resume()
        assert session.rules.resumed == [3500.0]

    def test_resume_without_pause_is_noop(self):
        session = _playing()
        session.resume()
        assert session.rules.resumed == []

    def test_nothing_notified_after_result(self):
        """Test that late state pushes after the result are dropped."""
        session = _playing()
        listener = RecordingListener()
        session.add_listener(listener)
        for _ in range(3):
            session.handle_input("bad")
        seen = len(listener.states)
        session.notify_state_change()
        assert len(listener.states) == seen
        assert listener.states[-1].status == GameStatus.GAME_OVER

    def test_pause_when_not_playing_is_noop(self):
        session = _make_session()
        session.pause()
        assert session.status == GameStatus.IDLE

    def test_dispose_is_idempotent_and_inert(self):
        session = _playing()
        session.dispose()
        session.dispose()
        assert session.disposed
        assert session.rules.cleaned == 1
        session.handle_input("ok")
        session.handle_timeout()
        assert session.score == 0
        assert session.lives == 3

    def test_context_manager_disposes(self):
        with _playing() as session:
            pass
        assert session.disposed

    def test_seed_drawn_when_absent(self):
        """Test that a missing seed is drawn once from the OS generator."""
        with patch("brainplay._core.session.secrets.randbits", return_value=777) as randbits:
            session = GameSession(
                GameConfig(game_id="stub"), StubRules(),
                clock=FakeClock(), scheduler=ManualScheduler(),
            )
        assert session.seed == 777
        assert session.rng.seed == 777
        randbits.assert_called_once_with(31)

    def test_explicit_seed_used(self):
        assert _make_session(seed=42).seed == 42


class TestScoring:
    """Tests for correct/mistake/level_complete."""

    def test_correct_adds_points(self):
        session = _playing()
        session.handle_input("ok")
        assert session.score == 10
        assert session.get_state().accuracy == 1.0

    def test_negative_points_never_lower_score(self):
        session = _playing()
        session.correct(-50)
        assert session.score == 0

    def test_mistake_costs_life(self):
        session = _playing()
        session.handle_input("bad")
        assert session.lives == 2
        assert session.status == GameStatus.PLAYING

    def test_accuracy_tracks_attempts(self):
        session = _playing()
        session.handle_input("ok")
        session.handle_input("bad")
        assert session.get_state().accuracy == 0.5

    def test_record_miss_keeps_lives(self):
        session = _playing()
        session.handle_input("miss")
        assert session.lives == 3
        assert session.get_state().accuracy == 0.0

    def test_level_complete_advances(self):
        session = _playing()
        session.handle_input("clear")
        assert session.level == 2
        assert session.score == 5
        assert session.status == GameStatus.PLAYING
        assert session.rules.generated == [1, 2]

    def test_timeout_costs_life(self):
        session = _playing()
        session.handle_timeout()
        assert session.lives == 2


class TestTermination:
    """Tests for GAME_OVER and COMPLETED."""

    def test_game_over_after_three_mistakes(self):
        clock = FakeClock(1000.0)
        session = _playing(clock=clock, date=date(2026, 3, 14))
        listener = RecordingListener()
        session.add_listener(listener)
        session.handle_input("ok")
        clock.now = 6000.0
        for _ in range(3):
            session.handle_input("bad")

        assert session.status == GameStatus.GAME_OVER
        assert session.lives == 0
        result = session.get_result()
        assert result.outcome == "game_over"
        assert result.levels_completed == 0
        assert result.score == 10
        assert result.duration == 5000.0
        assert result.date == "2026-03-14"
        assert result.category == "logic"
        assert listener.results == [result]

    def test_completion_after_max_level(self):
        session = _playing()
        listener = RecordingListener()
        session.add_listener(listener)
        for _ in range(3):
            session.handle_input("clear")

        assert session.status == GameStatus.COMPLETED
        result = session.get_result()
        assert result.outcome == "completed"
        assert result.levels_completed == 3
        assert result.max_level == 3
        assert result.score == 15
        assert len(listener.results) == 1
        assert [p.level for p in session.progress_history] == [1, 2, 3]

    def test_on_complete_fires_once(self):
        session = _playing()
        completed = []
        session.set_callbacks(on_complete=completed.append)
        for _ in range(3):
            session.handle_input("bad")
        session.handle_input("bad")
        session.handle_timeout()
        session.mistake()
        session.level_complete(100)
        assert len(completed) == 1
        assert session.score == 0

    def test_input_after_terminal_is_ignored(self):
        session = _playing()
        for _ in range(3):
            session.handle_input("bad")
        inputs = list(session.rules.inputs)
        session.handle_input("ok")
        assert session.rules.inputs == inputs

    def test_cleanup_called_on_finish(self):
        session = _playing()
        for _ in range(3):
            session.handle_input("bad")
        assert session.rules.cleaned == 1

    def test_stars_use_reference_score(self):
        session = _playing()
        session.correct(95)
        for _ in range(3):
            session.handle_input("bad")
        assert session.get_result().stars == 5

    def test_result_none_while_running(self):
        assert _playing().get_result() is None


class TestListeners:
    """Tests for notification delivery."""

    def test_progress_delivered_at_level_boundary(self):
        session = _playing()
        listener = RecordingListener()
        session.add_listener(listener)
        session.handle_input("clear")
        assert len(listener.progress) == 1
        assert listener.progress[0].level == 1
        assert listener.progress[0].score == 5

    def test_set_callbacks_replaces_previous(self):
        session = _make_session()
        first, second = [], []
        session.set_callbacks(on_state_change=first.append)
        session.set_callbacks(on_state_change=second.append)
        session.init()
        assert first == []
        assert len(second) == 1

    def test_remove_listener(self):
        session = _make_session()
        listener = RecordingListener()
        session.add_listener(listener)
        session.remove_listener(listener)
        session.init()
        assert listener.states == []

    def test_listener_exception_propagates(self):
        class Exploding(GameListener):
            def on_state_change(self, state):
                raise RuntimeError("render failed")

        session = _make_session()
        session.add_listener(Exploding())
        with pytest.raises(RuntimeError, match="render failed"):
            session.init()

    def test_snapshots_are_copies(self):
        session = _playing()
        listener = RecordingListener()
        session.add_listener(listener)
        session.handle_input("ok")
        session.handle_input("ok")
        assert [s.score for s in listener.states] == [10, 20]


class TestReadAccess:
    """Tests for accessors."""

    def test_time_remaining_none_without_limit(self):
        assert _playing().time_remaining() is None

    def test_time_remaining_counts_down(self):
        rules = StubRules()
        rules.time_limit = 1000
        rules.turn_started_at = 0.0
        clock = FakeClock(400.0)
        session = _playing(rules=rules, clock=clock)
        assert session.time_remaining() == 600.0
        clock.now = 5000.0
        assert session.time_remaining() == 0.0

    def test_time_remaining_none_while_paused(self):
        rules = StubRules()
        rules.time_limit = 1000
        rules.turn_started_at = 0.0
        clock = FakeClock(400.0)
        session = _playing(rules=rules, clock=clock)
        session.pause()
        clock.now = 900.0
        assert session.time_remaining() is None

    def test_time_remaining_none_after_game_over(self):
        rules = StubRules()
        rules.time_limit = 1000
        rules.turn_started_at = 0.0
        clock = FakeClock(400.0)
        session = _playing(rules=rules, clock=clock)
        for _ in range(3):
            session.handle_input("bad")
        assert session.status == GameStatus.GAME_OVER
        assert session.time_remaining() is None

    def test_progress_and_content_delegate(self):
        session = _playing()
        assert session.progress() == {"current": 0, "total": 3}
        assert session.content() == {"level": 1}

    def test_get_state_is_copy(self):
        session = _playing()
        state = session.get_state()
        state.score = 999
        assert session.score == 0

# Area: Games Tests
"""Tests for the color-stroop focus challenge."""

import pytest
from brainplay import create_engine
from brainplay._core.enums import GameStatus
from brainplay._core.scheduler import ManualScheduler
from brainplay._games.color_stroop import (
    PALETTE,
    congruent_chance,
    option_count,
    time_limit_for,
)


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def _start(clock=None, **config):
    config.setdefault("game_id", "color-stroop")
    config.setdefault("seed", 11)
    engine = create_engine(config, clock=clock or FakeClock(), scheduler=ManualScheduler())
    engine.init()
    engine.start()
    return engine


def _answer(engine):
    engine.handle_input(engine.rules.current_challenge.correct_answer)


class TestLevelParameters:
    def test_congruent_chance_floor(self):
        assert congruent_chance(1) == pytest.approx(0.45)
        assert congruent_chance(10) == 0.1

    def test_option_count(self):
        assert option_count(1) == 2
        assert option_count(3) == 3
        assert option_count(6) == 4
        assert option_count(10) == 4

    def test_time_limit(self):
        assert time_limit_for(1, 5) == 4300
        assert time_limit_for(10, 10) == 3000


class TestChallengeGeneration:
    """Tests for generated trials."""

    def test_options_contain_ink_and_are_distinct(self):
        for seed in range(20):
            challenge = _start(seed=seed).rules.current_challenge
            assert challenge.ink_name in challenge.options
            assert len(set(challenge.options)) == len(challenge.options) == 2

    def test_display_color_matches_ink(self):
        hex_by_name = {c.name: c.hex for c in PALETTE}
        challenge = _start().rules.current_challenge
        assert challenge.display_color == hex_by_name[challenge.ink_name]

    def test_options_grow_with_level(self):
        challenge = _start(level=6).rules.current_challenge
        assert len(challenge.options) == 4

    def test_congruent_flag(self):
        challenge = _start().rules.current_challenge
        assert challenge.congruent == (challenge.word == challenge.ink_name)


class TestScoring:
    """Tests for answering trials."""

    def test_instant_correct_answer(self):
        """Test that an instant answer scores 20 + 4300 // 100."""
        engine = _start()
        _answer(engine)
        assert engine.score == 63

    def test_answer_is_normalized(self):
        engine = _start()
        answer = engine.rules.current_challenge.correct_answer
        engine.handle_input(f"  {answer.lower()} ")
        assert engine.score == 63

    def test_wrong_option_costs_life(self):
        engine = _start()
        challenge = engine.rules.current_challenge
        wrong = next(o for o in challenge.options if o != challenge.ink_name)
        engine.handle_input(wrong)
        assert engine.lives == 2
        assert engine.progress()["current"] == 2

    def test_answer_outside_options_ignored(self):
        engine = _start()
        challenge = engine.rules.current_challenge
        outside = next(c.name for c in PALETTE if c.name not in challenge.options)
        engine.handle_input(outside)
        engine.handle_input(3)
        assert engine.lives == 3
        assert engine.score == 0
        assert engine.rules.current_challenge == challenge

    def test_five_answers_finish_level(self):
        engine = _start()
        for _ in range(5):
            _answer(engine)
        assert engine.level == 2
        assert engine.score == 5 * 63 + 50

    def test_timeout_costs_life(self):
        engine = _start()
        engine.handle_timeout()
        assert engine.lives == 2

    def test_full_game_completes(self):
        engine = _start()
        while engine.status == GameStatus.PLAYING:
            _answer(engine)
        assert engine.status == GameStatus.COMPLETED
        assert engine.get_result().category == "focus"

    def test_time_remaining(self):
        clock = FakeClock()
        engine = _start(clock=clock)
        clock.now = 1300.0
        assert engine.time_remaining() == 3000.0

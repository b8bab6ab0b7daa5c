# Area: Games Tests
"""Tests for the shared batch bookkeeping and numeric input coercion."""

from fractions import Fraction

import pytest
from brainplay._games.batch import ChallengeBatch, time_bonus, whole_number


class TestWholeNumber:
    """Tests for numeric answer coercion."""

    @pytest.mark.parametrize("value, expected", [
        (17, 17),
        (17.0, 17),
        (-3.0, -3),
        (Fraction(8, 2), 4),
    ])
    def test_whole_values_accepted(self, value, expected):
        assert whole_number(value) == expected

    @pytest.mark.parametrize("value", [
        3.5, float("nan"), float("inf"), True, False, "17", None, [17],
    ])
    def test_other_values_rejected(self, value):
        assert whole_number(value) is None


class TestChallengeBatch:
    def test_level_bonus_floors(self):
        batch = ChallengeBatch(per_level=5)
        for was_correct in (True, True, True, False, True):
            batch.record(was_correct)
        assert batch.finished
        assert batch.level_bonus() == 40

    def test_time_bonus_never_negative(self):
        assert time_bonus(5000, 9000, 100) == 0
        assert time_bonus(5000, 1000, 100) == 40

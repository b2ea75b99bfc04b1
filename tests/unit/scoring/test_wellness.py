"""
Unit tests for the physical, mental and lifestyle scores.
"""

import datetime

import pytest

from fitcoach.schemas.mood import MoodRecord
from fitcoach.schemas.sleep import SleepFactors, SleepRecord
from fitcoach.scoring.wellness import (
    WellnessScoreConfig,
    compute_lifestyle_score,
    compute_mental_score,
    compute_physical_score,
)

DAY = datetime.date(2026, 10, 19)


def _mood(energy=8, stress=3, mood=7, clarity=8, anxiety=3, factors=None) -> MoodRecord:
    return MoodRecord(
        date=DAY,
        mood_level=mood,
        energy_level=energy,
        stress_level=stress,
        anxiety_level=anxiety,
        mental_clarity=clarity,
        factors=factors or [],
    )


def _sleep(**factors) -> SleepRecord:
    return SleepRecord(
        date=DAY,
        duration=450,
        quality=7,
        factors=SleepFactors(**factors) if factors else None,
    )


class TestPhysicalScore:

    @pytest.mark.parametrize("energy,stress,expected", [
        (8, 3, 75),
        (10, 0, 100),
        (0, 10, 0),
        (5, 5, 50),
        (7, 4, 65),
    ])
    def test_values(self, energy, stress, expected):
        assert compute_physical_score(_mood(energy=energy, stress=stress)) == expected


class TestMentalScore:

    @pytest.mark.parametrize("mood,clarity,anxiety,expected", [
        (7, 8, 3, 73),
        (10, 10, 0, 100),
        (0, 0, 10, 0),
        (5, 5, 5, 50),
    ])
    def test_values(self, mood, clarity, anxiety, expected):
        assert compute_mental_score(_mood(mood=mood, clarity=clarity, anxiety=anxiety)) == expected


class TestLifestyleScore:

    def test_no_factors_is_base(self):
        assert compute_lifestyle_score(_sleep(), _mood()) == 80

    def test_alcohol(self):
        assert compute_lifestyle_score(_sleep(alcohol=True), _mood()) == 60

    def test_sleep_stress(self):
        assert compute_lifestyle_score(_sleep(stress=True), _mood()) == 70

    def test_unrelated_sleep_factors_ignored(self):
        assert compute_lifestyle_score(_sleep(caffeine=True, screens=True), _mood()) == 80

    def test_every_negative_factor(self):
        score = compute_lifestyle_score(
            _sleep(alcohol=True, stress=True),
            _mood(factors=["poor_nutrition", "dehydration"]),
        )
        assert score == 20

    def test_every_positive_factor(self):
        score = compute_lifestyle_score(_sleep(), _mood(factors=["active_recovery", "good_nutrition"]))
        assert score == 100

    def test_mixed_factors(self):
        score = compute_lifestyle_score(
            _sleep(alcohol=True),
            _mood(factors=["good_nutrition", "muscle_soreness"]),
        )
        assert score == 70

    def test_clamped_high(self):
        cfg = WellnessScoreConfig(lifestyle_base=95)
        score = compute_lifestyle_score(_sleep(), _mood(factors=["active_recovery", "good_nutrition"]), cfg)
        assert score == 100

    def test_clamped_low(self):
        cfg = WellnessScoreConfig(lifestyle_base=20)
        score = compute_lifestyle_score(
            _sleep(alcohol=True, stress=True),
            _mood(factors=["poor_nutrition", "dehydration"]),
            cfg,
        )
        assert score == 0

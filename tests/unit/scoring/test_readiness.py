"""
Unit tests for the composite readiness score.

Tests the weighted combination, the adjustment bands, the recommendation
list, and the store-driven entry points against an in-memory fake store.
"""

import datetime
import uuid

import pytest

from fitcoach.core.result import Err, ErrorKind, Ok
from fitcoach.schemas.mood import MoodRecord
from fitcoach.schemas.readiness import ReadinessScore, TrainingAdjustment
from fitcoach.schemas.sleep import SleepFactors, SleepRecord
from fitcoach.scoring.readiness import (
    INSUFFICIENT_DATA,
    LIFESTYLE_LOW,
    MENTAL_MODERATE,
    OVERALL_TEMPLATES,
    PHYSICAL_MODERATE,
    SLEEP_LOW,
    SLEEP_MODERATE,
    assess_readiness,
    combine_scores,
    compute_readiness,
    compute_readiness_stats,
    determine_training_adjustment,
    generate_recommendations,
    get_or_compute_readiness,
    list_readiness,
    readiness_stats_for_window,
)

DAY = datetime.date(2026, 10, 19)


# ======================================================================
# Helpers
# ======================================================================


def _sleep(day=DAY, duration=480, quality=8, hrv=65, rhr=52, **factors) -> SleepRecord:
    return SleepRecord(
        date=day, duration=duration, quality=quality, hrv=hrv, resting_heart_rate=rhr,
        deep_sleep=96, factors=SleepFactors(**factors) if factors else None,
    )


def _mood(day=DAY, energy=8, stress=3, mood=7, clarity=8, anxiety=3, factors=None) -> MoodRecord:
    return MoodRecord(
        date=day, mood_level=mood, energy_level=energy, stress_level=stress,
        anxiety_level=anxiety, mental_clarity=clarity, factors=factors or [],
    )


def _score(day: datetime.date, overall: int, adjustment: TrainingAdjustment) -> ReadinessScore:
    assessment = assess_readiness(_sleep(day), _mood(day))
    return ReadinessScore(
        user_id="u1",
        date=day,
        **assessment.model_dump(exclude={"overall_score", "training_adjustment"}),
        overall_score=overall,
        training_adjustment=adjustment,
    )


class FakeStore:
    """In-memory ReadinessStore."""

    def __init__(self, sleep=None, mood=None, fail_on=None):
        self.sleep = sleep or {}
        self.mood = mood or {}
        self.scores: dict[tuple[str, datetime.date], ReadinessScore] = {}
        self.fail_on = fail_on or set()
        self.saves = 0

    def _maybe_fail(self, op):
        if op in self.fail_on:
            raise RuntimeError(f"{op} unavailable")

    def get_sleep_records(self, user_id, date):
        self._maybe_fail("sleep")
        return list(self.sleep.get((user_id, date), []))

    def get_mood_records(self, user_id, date):
        self._maybe_fail("mood")
        return list(self.mood.get((user_id, date), []))

    def get_readiness(self, user_id, date):
        self._maybe_fail("get")
        return self.scores.get((user_id, date))

    def save_readiness(self, score):
        self._maybe_fail("save")
        self.saves += 1
        existing = self.scores.get((score.user_id, score.date))
        stored = score.model_copy(update={
            "id": existing.id if existing else str(uuid.uuid4()),
            "created_at": existing.created_at if existing else datetime.datetime(2026, 10, 19, 7, 0),
        })
        self.scores[(score.user_id, score.date)] = stored
        return stored

    def list_readiness(self, user_id, start=None, end=None, limit=30, offset=0):
        self._maybe_fail("list")
        rows = [
            s for (uid, d), s in self.scores.items()
            if uid == user_id and (start is None or d >= start) and (end is None or d <= end)
        ]
        rows.sort(key=lambda s: s.date, reverse=True)
        return rows[offset:offset + limit]


def _store_with_day(day=DAY, **kwargs) -> FakeStore:
    return FakeStore(
        sleep={("u1", day): [_sleep(day, **kwargs)]},
        mood={("u1", day): [_mood(day)]},
    )


# ======================================================================
# Pure computation
# ======================================================================


class TestCombineScores:

    def test_weights(self):
        # 94*.30 + 75*.25 + 70*.25 + 80*.20 = 80.45
        assert combine_scores(94, 75, 70, 80) == 80

    def test_rounds_half_up(self):
        # 88*.30 + 75*.25 + 73*.25 + 80*.20 = 79.4
        assert combine_scores(88, 75, 73, 80) == 79

    def test_extremes(self):
        assert combine_scores(0, 0, 0, 0) == 0
        assert combine_scores(100, 100, 100, 100) == 100


class TestTrainingAdjustment:

    @pytest.mark.parametrize("overall,expected", [
        (0, TrainingAdjustment.REDUCE_INTENSITY),
        (39, TrainingAdjustment.REDUCE_INTENSITY),
        (40, TrainingAdjustment.REDUCE_VOLUME),
        (59, TrainingAdjustment.REDUCE_VOLUME),
        (60, TrainingAdjustment.NORMAL),
        (79, TrainingAdjustment.NORMAL),
        (80, TrainingAdjustment.INCREASE),
        (100, TrainingAdjustment.INCREASE),
    ])
    def test_bands(self, overall, expected):
        assert determine_training_adjustment(overall) == expected


class TestGenerateRecommendations:

    def test_all_high_gives_only_overall(self):
        recs = generate_recommendations(90, 90, 90, 90, 90)
        assert recs == [OVERALL_TEMPLATES[TrainingAdjustment.INCREASE]]

    def test_order_and_bands(self):
        recs = generate_recommendations(40, 60, 80, 45, 30)
        assert recs == [
            *SLEEP_LOW,
            PHYSICAL_MODERATE,
            LIFESTYLE_LOW,
            OVERALL_TEMPLATES[TrainingAdjustment.REDUCE_INTENSITY],
        ]

    def test_moderate_sleep_is_one_sentence(self):
        recs = generate_recommendations(69, 70, 69, 70, 65)
        assert recs == [
            *SLEEP_MODERATE,
            MENTAL_MODERATE,
            OVERALL_TEMPLATES[TrainingAdjustment.NORMAL],
        ]

    def test_thresholds_are_exclusive(self):
        recs = generate_recommendations(50, 50, 70, 70, 60)
        assert SLEEP_MODERATE[0] in recs
        assert PHYSICAL_MODERATE in recs
        assert len(recs) == 3

    @pytest.mark.parametrize("overall", [0, 45, 65, 95])
    def test_never_empty(self, overall):
        assert len(generate_recommendations(100, 100, 100, 100, overall)) == 1


class TestAssessReadiness:

    def test_worked_example(self):
        a = assess_readiness(_sleep(), _mood())
        assert a.sleep_score == 88
        assert a.physical_score == 75
        assert a.mental_score == 73
        assert a.lifestyle_score == 80
        assert a.overall_score == 79
        assert a.training_adjustment == TrainingAdjustment.NORMAL
        assert a.recommendations == [OVERALL_TEMPLATES[TrainingAdjustment.NORMAL]]

    def test_top_bucket_example_is_increase(self):
        a = assess_readiness(_sleep(hrv=72, rhr=48), _mood(clarity=7, mood=7, anxiety=3.5))
        assert a.sleep_score == 94
        assert a.overall_score >= 80
        assert a.training_adjustment == TrainingAdjustment.INCREASE

    def test_components_snapshot(self):
        a = assess_readiness(
            _sleep(alcohol=True),
            _mood(factors=["muscle_soreness", "poor_nutrition", "active_recovery"]),
        )
        c = a.components
        assert c.sleep.duration == 480
        assert c.sleep.deep_sleep_percentage == pytest.approx(20.0)
        assert c.physical.muscle_soreness == 7
        assert c.physical.fatigue == 2
        assert c.physical.recovery == 8
        assert c.mental.anxiety == 3
        assert c.lifestyle.nutrition == 4
        assert c.lifestyle.hydration == 8
        assert c.lifestyle.alcohol is True
        assert c.lifestyle.active_recovery is True

    def test_deterministic(self):
        assert assess_readiness(_sleep(), _mood()) == assess_readiness(_sleep(), _mood())


# ======================================================================
# Store-driven entry points
# ======================================================================


class TestComputeReadiness:

    def test_success_persists(self):
        store = _store_with_day()
        result = compute_readiness(store, "u1", DAY)
        assert isinstance(result, Ok)
        assert result.data.overall_score == 79
        assert result.data.user_id == "u1"
        assert result.data.id is not None
        assert result.error is None
        assert store.get_readiness("u1", DAY) == result.value

    def test_missing_sleep(self):
        store = FakeStore(mood={("u1", DAY): [_mood()]})
        result = compute_readiness(store, "u1", DAY)
        assert isinstance(result, Err)
        assert result.kind == ErrorKind.NOT_FOUND
        assert result.error == INSUFFICIENT_DATA
        assert store.saves == 0

    def test_missing_mood(self):
        store = FakeStore(sleep={("u1", DAY): [_sleep()]})
        result = compute_readiness(store, "u1", DAY)
        assert result.kind == ErrorKind.NOT_FOUND
        assert result.data is None

    def test_uses_most_recent_record(self):
        store = FakeStore(
            sleep={("u1", DAY): [_sleep(duration=300, quality=2, hrv=None), _sleep()]},
            mood={("u1", DAY): [_mood()]},
        )
        result = compute_readiness(store, "u1", DAY)
        assert result.data.components.sleep.duration == 300

    def test_idempotent(self):
        store = _store_with_day()
        first = compute_readiness(store, "u1", DAY).value
        second = compute_readiness(store, "u1", DAY).value
        assert first == second
        assert len(store.scores) == 1

    def test_recompute_keeps_identity(self):
        store = _store_with_day()
        first = compute_readiness(store, "u1", DAY).value
        store.sleep[("u1", DAY)] = [_sleep(duration=300, quality=3)]
        second = compute_readiness(store, "u1", DAY).value
        assert second.id == first.id
        assert second.created_at == first.created_at
        assert second.sleep_score < first.sleep_score

    @pytest.mark.parametrize("op", ["sleep", "mood", "save"])
    def test_store_failures_become_err(self, op):
        store = _store_with_day()
        store.fail_on = {op}
        result = compute_readiness(store, "u1", DAY)
        assert isinstance(result, Err)
        assert result.kind == ErrorKind.PERSISTENCE_FAILED
        assert "unavailable" in result.message


class TestGetOrComputeReadiness:

    def test_returns_cached_without_recomputing(self):
        store = _store_with_day()
        compute_readiness(store, "u1", DAY)
        result = get_or_compute_readiness(store, "u1", DAY)
        assert result.ok
        assert store.saves == 1

    def test_computes_on_miss(self):
        store = _store_with_day()
        result = get_or_compute_readiness(store, "u1", DAY)
        assert result.ok
        assert store.saves == 1

    def test_read_failure(self):
        store = _store_with_day()
        store.fail_on = {"get"}
        assert get_or_compute_readiness(store, "u1", DAY).kind == ErrorKind.PERSISTENCE_FAILED


class TestListReadiness:

    def test_most_recent_first(self):
        store = FakeStore()
        for offset in range(3):
            day = DAY - datetime.timedelta(days=offset)
            store.save_readiness(_score(day, 70, TrainingAdjustment.NORMAL))
        result = list_readiness(store, "u1")
        assert [s.date for s in result.value] == [DAY - datetime.timedelta(days=i) for i in range(3)]

    def test_failure(self):
        store = FakeStore(fail_on={"list"})
        assert list_readiness(store, "u1").kind == ErrorKind.PERSISTENCE_FAILED


class TestReadinessStats:

    def test_empty(self):
        stats = compute_readiness_stats([])
        assert stats.average_overall_score == 0.0
        assert stats.dates == []
        assert stats.trends.overall == []
        assert stats.training_adjustments == {adj: 0 for adj in TrainingAdjustment}

    def test_aggregates_in_date_order(self):
        d1, d2, d3 = (DAY - datetime.timedelta(days=i) for i in (2, 1, 0))
        scores = [
            _score(d3, 85, TrainingAdjustment.INCREASE),
            _score(d1, 35, TrainingAdjustment.REDUCE_INTENSITY),
            _score(d2, 65, TrainingAdjustment.NORMAL),
        ]
        stats = compute_readiness_stats(scores)
        assert stats.dates == [d1, d2, d3]
        assert stats.trends.overall == [35, 65, 85]
        assert stats.average_overall_score == pytest.approx(61.666, abs=0.01)
        assert stats.average_sleep_score == pytest.approx(88)
        assert stats.training_adjustments[TrainingAdjustment.REDUCE_VOLUME] == 0
        assert stats.training_adjustments[TrainingAdjustment.NORMAL] == 1

    def test_window(self):
        store = FakeStore()
        for offset in (0, 5, 40):
            day = DAY - datetime.timedelta(days=offset)
            store.save_readiness(_score(day, 70, TrainingAdjustment.NORMAL))
        result = readiness_stats_for_window(store, "u1", days=30, today=DAY)
        assert result.ok
        assert len(result.value.dates) == 2

"""
Tests for the SQL readiness store and the sleep/mood → readiness refresh.
"""

import datetime

import pytest
from fastapi import HTTPException

from fitcoach.core.result import ErrorKind
from fitcoach.db.repositories.readiness import ReadinessRepository
from fitcoach.models import MoodEntry, ReadinessScoreRecord, SleepEntry, VolumeLandmarkRecord
from fitcoach.schemas.mood import MoodRecordCreate
from fitcoach.schemas.readiness import TrainingAdjustment
from fitcoach.schemas.sleep import SleepFactors, SleepRecordCreate
from fitcoach.services.mood_service import MoodService
from fitcoach.services.readiness_service import ReadinessService, SqlReadinessStore
from fitcoach.services.sleep_service import SleepService

DAY = datetime.date(2026, 10, 19)


def _sleep(day=DAY, **overrides) -> SleepRecordCreate:
    data = dict(date=day, duration=480, quality=8, hrv=65, resting_heart_rate=52,
                start_time=datetime.time(23, 0), end_time=datetime.time(7, 0))
    data.update(overrides)
    return SleepRecordCreate(**data)


def _mood(day=DAY, **overrides) -> MoodRecordCreate:
    data = dict(date=day, mood_level=7, energy_level=8, stress_level=3, anxiety_level=3,
                mental_clarity=8, factors=["good_nutrition"])
    data.update(overrides)
    return MoodRecordCreate(**data)


class TestSleepAndMoodServices:

    def test_upsert_creates_then_replaces(self, session):
        service = SleepService(session)
        first, created = service.upsert("u1", DAY, _sleep())
        assert created is True
        assert first.start_time == datetime.time(23, 0)

        second, created = service.upsert("u1", DAY, _sleep(duration=400, factors=SleepFactors(alcohol=True)))
        assert created is False
        assert second.id == first.id
        assert second.duration == 400
        assert second.factors.alcohol is True

    def test_get_missing_raises_404(self, session):
        with pytest.raises(HTTPException) as exc:
            MoodService(session).get_by_date("u1", DAY)
        assert exc.value.status_code == 404

    def test_range_and_listing(self, session):
        service = MoodService(session)
        for offset in range(3):
            day = DAY - datetime.timedelta(days=offset)
            service.upsert("u1", day, _mood(day))
        service.upsert("u2", DAY, _mood())

        in_range = service.get_range("u1", DAY - datetime.timedelta(days=1), DAY)
        assert [m.date for m in in_range] == [DAY - datetime.timedelta(days=1), DAY]
        assert [m.date for m in service.get_all("u1")][0] == DAY
        assert len(service.get_all("u1")) == 3
        assert service.get_by_date("u1", DAY).factors == ["good_nutrition"]


class TestReadinessRefresh:

    def test_score_appears_once_both_sources_exist(self, session):
        readiness = ReadinessService(session)
        SleepService(session).upsert("u1", DAY, _sleep())
        assert readiness.store.get_readiness("u1", DAY) is None

        MoodService(session).upsert("u1", DAY, _mood())
        score = readiness.store.get_readiness("u1", DAY)
        assert score is not None
        assert score.sleep_score == 88
        assert score.lifestyle_score == 90

    def test_sleep_change_recomputes_and_keeps_identity(self, session):
        SleepService(session).upsert("u1", DAY, _sleep())
        MoodService(session).upsert("u1", DAY, _mood())
        store = SqlReadinessStore(session)
        before = store.get_readiness("u1", DAY)

        SleepService(session).upsert("u1", DAY, _sleep(duration=300, quality=3))
        after = store.get_readiness("u1", DAY)
        assert after.id == before.id
        assert after.created_at == before.created_at
        assert after.sleep_score < before.sleep_score

    def test_deleting_a_source_drops_the_score(self, session):
        SleepService(session).upsert("u1", DAY, _sleep())
        MoodService(session).upsert("u1", DAY, _mood())
        MoodService(session).delete_by_date("u1", DAY)
        assert SqlReadinessStore(session).get_readiness("u1", DAY) is None


class TestReadinessService:

    def test_compute_without_data(self, session):
        result = ReadinessService(session).compute("u1", DAY)
        assert result.kind == ErrorKind.NOT_FOUND

    def test_roundtrip_through_json_columns(self, session):
        SleepService(session).upsert("u1", DAY, _sleep(deep_sleep=120))
        MoodService(session).upsert("u1", DAY, _mood(factors=["muscle_soreness"]))
        score = ReadinessService(session).get("u1", DAY).value
        assert score.training_adjustment == TrainingAdjustment.NORMAL
        assert score.components.sleep.deep_sleep_percentage == pytest.approx(25.0)
        assert score.components.physical.muscle_soreness == 7
        assert score.recommendations

    def test_history_and_stats(self, session):
        for offset in range(4):
            day = DAY - datetime.timedelta(days=offset)
            SleepService(session).upsert("u1", day, _sleep(day))
            MoodService(session).upsert("u1", day, _mood(day))

        service = ReadinessService(session)
        history = service.history("u1", limit=2).value
        assert [s.date for s in history] == [DAY, DAY - datetime.timedelta(days=1)]

        stats = service.stats("u1", days=7, today=DAY).value
        assert len(stats.dates) == 4
        assert stats.dates == sorted(stats.dates)
        assert sum(stats.training_adjustments.values()) == 4

    def test_score_persisted_after_sleep_and_mood_upserts(self, session):
        SleepService(session).upsert("u1", DAY, _sleep())
        MoodService(session).upsert("u1", DAY, _mood())

        result = ReadinessService(session).get("u1", DAY)
        assert result.ok
        stored = ReadinessRepository(session).get_by_user_and_date("u1", DAY)
        assert stored is not None
        assert stored.created_at is not None
        assert stored.overall_score == result.value.overall_score

    def test_failed_save_rolls_back_session(self, session, monkeypatch):
        SleepService(session).upsert("u1", DAY, _sleep())
        MoodService(session).upsert("u1", DAY, _mood())
        service = ReadinessService(session)

        # Hide the cached row so the save inserts a duplicate (user_id, date).
        monkeypatch.setattr(service.store.readiness, "get_by_user_and_date", lambda user_id, date: None)
        result = service.compute("u1", DAY)
        assert result.kind == ErrorKind.PERSISTENCE_FAILED

        monkeypatch.undo()
        assert not session.in_transaction()
        assert service.get("u1", DAY).ok


class TestTimestamps:

    @pytest.mark.parametrize("model,fields", [
        (SleepEntry, dict(user_id="u1", date=DAY, duration=480, quality=8)),
        (MoodEntry, dict(user_id="u1", date=DAY, mood_level=7, energy_level=8, stress_level=3,
                         anxiety_level=3, mental_clarity=8)),
        (VolumeLandmarkRecord, dict(user_id="u1", muscle_group="chest", mev=8, mav=18, mrv=22)),
    ])
    def test_defaults_are_timezone_aware(self, model, fields):
        record = model(**fields)
        assert record.created_at.tzinfo is not None
        assert record.updated_at.tzinfo is not None

    def test_readiness_row_defaults_are_timezone_aware(self):
        record = ReadinessScoreRecord(
            user_id="u1", date=DAY, overall_score=80, sleep_score=80, physical_score=80,
            mental_score=80, lifestyle_score=80, training_adjustment="increase",
        )
        assert record.created_at.tzinfo is datetime.timezone.utc

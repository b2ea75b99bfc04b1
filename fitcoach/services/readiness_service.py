"""
Readiness service.

Binds the readiness scorers to the database: :class:`SqlReadinessStore`
is the SQLModel implementation of the scorers' data-access protocol, and
:class:`ReadinessService` is what the endpoints and the sleep/mood
services call.
"""

import datetime
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from fitcoach.core.clock import utc_now
from fitcoach.core.config import settings
from fitcoach.core.result import ErrorKind, Result
from fitcoach.db.repositories.mood import MoodRepository
from fitcoach.db.repositories.readiness import ReadinessRepository
from fitcoach.db.repositories.sleep import SleepRepository
from fitcoach.models.readiness import ReadinessScoreRecord
from fitcoach.schemas.mood import MoodRecord
from fitcoach.schemas.readiness import ReadinessScore, ReadinessStats
from fitcoach.schemas.sleep import SleepRecord
from fitcoach.scoring.readiness import (
    ReadinessConfig,
    compute_readiness,
    get_or_compute_readiness,
    list_readiness,
    readiness_stats_for_window,
)

logger = logging.getLogger(__name__)

# Fields owned by the row rather than by the computation.
_IDENTITY_FIELDS = {"id", "user_id", "date", "created_at"}


class SqlReadinessStore:
    """Readiness data access backed by the SQLModel repositories."""

    def __init__(self, session: Session):
        self.session = session
        self.sleep = SleepRepository(session)
        self.mood = MoodRepository(session)
        self.readiness = ReadinessRepository(session)

    def get_sleep_records(self, user_id: str, date: datetime.date) -> list[SleepRecord]:
        entries = self.sleep.list_by_date(user_id, date)
        return [SleepRecord.model_validate(e, from_attributes=True) for e in entries]

    def get_mood_records(self, user_id: str, date: datetime.date) -> list[MoodRecord]:
        entries = self.mood.list_by_date(user_id, date)
        return [MoodRecord.model_validate(e, from_attributes=True) for e in entries]

    def get_readiness(self, user_id: str, date: datetime.date) -> Optional[ReadinessScore]:
        record = self.readiness.get_by_user_and_date(user_id, date)
        return ReadinessScore.model_validate(record) if record else None

    def save_readiness(self, score: ReadinessScore) -> ReadinessScore:
        values = score.model_dump(mode="json", exclude=_IDENTITY_FIELDS)
        record = self.readiness.get_by_user_and_date(score.user_id, score.date)

        if record:
            for key, value in values.items():
                setattr(record, key, value)
            record.updated_at = utc_now()
        else:
            record = ReadinessScoreRecord(user_id=score.user_id, date=score.date, **values)
            if score.id:
                record.id = score.id

        try:
            record = self.readiness.save(record)
        except SQLAlchemyError:
            self.session.rollback()
            raise
        return ReadinessScore.model_validate(record)

    def list_readiness(
        self,
        user_id: str,
        start: Optional[datetime.date] = None,
        end: Optional[datetime.date] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> list[ReadinessScore]:
        records = self.readiness.list_by_user(user_id, start, end, limit, offset)
        return [ReadinessScore.model_validate(r) for r in records]


class ReadinessService:
    """Service for readiness computation, caching and history."""

    def __init__(self, session: Session, config: Optional[ReadinessConfig] = None):
        self.store = SqlReadinessStore(session)
        self.config = config

    def compute(self, user_id: str, date: datetime.date) -> Result[ReadinessScore]:
        """Recompute and cache the score of ``date``."""
        return compute_readiness(self.store, user_id, date, self.config)

    def get(self, user_id: str, date: datetime.date) -> Result[ReadinessScore]:
        """Cached score of ``date``, computed on first access."""
        return get_or_compute_readiness(self.store, user_id, date, self.config)

    def history(
        self,
        user_id: str,
        start: Optional[datetime.date] = None,
        end: Optional[datetime.date] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> Result[list[ReadinessScore]]:
        return list_readiness(self.store, user_id, start, end, limit, offset)

    def stats(
        self,
        user_id: str,
        days: Optional[int] = None,
        today: Optional[datetime.date] = None,
    ) -> Result[ReadinessStats]:
        return readiness_stats_for_window(
            self.store,
            user_id,
            days or settings.READINESS_HISTORY_DAYS,
            today or datetime.date.today(),
        )

    def refresh(self, user_id: str, date: datetime.date) -> None:
        """Bring the cached score of ``date`` in line with its sources.

        Called after a sleep or mood entry changes.  When one of the two
        sources is gone the stale score is dropped.
        """
        result = self.compute(user_id, date)
        if result.ok:
            return
        if result.kind is ErrorKind.NOT_FOUND:
            self.store.readiness.delete_by_user_and_date(user_id, date)
        else:
            logger.warning("Readiness refresh failed for user=%s date=%s: %s", user_id, date, result.error)

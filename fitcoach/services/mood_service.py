"""
Mood check-in service.

Business logic for daily mood entries.  Every write refreshes the cached
readiness score of the same date.
"""

import datetime

from fastapi import HTTPException, status
from sqlmodel import Session

from fitcoach.core.clock import utc_now
from fitcoach.db.repositories.mood import MoodRepository
from fitcoach.models.mood import MoodEntry
from fitcoach.schemas.mood import MoodRecordCreate, MoodRecordResponse
from fitcoach.services.readiness_service import ReadinessService


class MoodService:
    """Service for mood entry business logic."""

    def __init__(self, session: Session):
        self.repository = MoodRepository(session)
        self.readiness = ReadinessService(session)

    def upsert(
        self, user_id: str, date: datetime.date, data: MoodRecordCreate,
    ) -> tuple[MoodRecordResponse, bool]:
        """Create or replace the mood entry of ``date``."""
        values = data.model_dump(exclude={"date"})

        entry = self.repository.get_by_user_and_date(user_id, date)
        created = entry is None
        if created:
            entry = MoodEntry(user_id=user_id, date=date, **values)
        else:
            for key, value in values.items():
                setattr(entry, key, value)
            entry.updated_at = utc_now()

        entry = self.repository.save(entry)
        self.readiness.refresh(user_id, date)
        return MoodRecordResponse.model_validate(entry), created

    def get_by_date(self, user_id: str, date: datetime.date) -> MoodRecordResponse:
        return MoodRecordResponse.model_validate(self._get_entry(user_id, date))

    def get_range(
        self, user_id: str, start: datetime.date, end: datetime.date,
    ) -> list[MoodRecordResponse]:
        entries = self.repository.get_by_user_date_range(user_id, start, end)
        return [MoodRecordResponse.model_validate(e) for e in entries]

    def get_all(self, user_id: str, skip: int = 0, limit: int = 100) -> list[MoodRecordResponse]:
        entries = self.repository.get_all_by_user(user_id, skip, limit)
        return [MoodRecordResponse.model_validate(e) for e in entries]

    def delete_by_date(self, user_id: str, date: datetime.date) -> None:
        self.repository.delete(self._get_entry(user_id, date))
        self.readiness.refresh(user_id, date)

    def _get_entry(self, user_id: str, date: datetime.date) -> MoodEntry:
        entry = self.repository.get_by_user_and_date(user_id, date)
        if not entry:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No mood entry for {date}",
            )
        return entry

"""
Sleep entry service.

Business logic for nightly sleep records.  Every write refreshes the
cached readiness score of the same date.
"""

import datetime

from fastapi import HTTPException, status
from sqlmodel import Session

from fitcoach.core.clock import utc_now
from fitcoach.db.repositories.sleep import SleepRepository
from fitcoach.models.sleep import SleepEntry
from fitcoach.schemas.sleep import SleepRecordCreate, SleepRecordResponse
from fitcoach.services.readiness_service import ReadinessService


class SleepService:
    """Service for sleep entry business logic."""

    def __init__(self, session: Session):
        self.repository = SleepRepository(session)
        self.readiness = ReadinessService(session)

    def upsert(
        self, user_id: str, date: datetime.date, data: SleepRecordCreate,
    ) -> tuple[SleepRecordResponse, bool]:
        """Create or replace the sleep entry of ``date``.

        Returns:
            Tuple of (response, created) where created is True if new entry.
        """
        values = data.model_dump(mode="json", exclude={"date"})
        values["start_time"] = data.start_time
        values["end_time"] = data.end_time

        entry = self.repository.get_by_user_and_date(user_id, date)
        created = entry is None
        if created:
            entry = SleepEntry(user_id=user_id, date=date, **values)
        else:
            for key, value in values.items():
                setattr(entry, key, value)
            entry.updated_at = utc_now()

        entry = self.repository.save(entry)
        self.readiness.refresh(user_id, date)
        return SleepRecordResponse.model_validate(entry), created

    def get_by_date(self, user_id: str, date: datetime.date) -> SleepRecordResponse:
        return SleepRecordResponse.model_validate(self._get_entry(user_id, date))

    def get_range(
        self, user_id: str, start: datetime.date, end: datetime.date,
    ) -> list[SleepRecordResponse]:
        entries = self.repository.get_by_user_date_range(user_id, start, end)
        return [SleepRecordResponse.model_validate(e) for e in entries]

    def get_all(self, user_id: str, skip: int = 0, limit: int = 100) -> list[SleepRecordResponse]:
        entries = self.repository.get_all_by_user(user_id, skip, limit)
        return [SleepRecordResponse.model_validate(e) for e in entries]

    def delete_by_date(self, user_id: str, date: datetime.date) -> None:
        self.repository.delete(self._get_entry(user_id, date))
        self.readiness.refresh(user_id, date)

    def _get_entry(self, user_id: str, date: datetime.date) -> SleepEntry:
        entry = self.repository.get_by_user_and_date(user_id, date)
        if not entry:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No sleep entry for {date}",
            )
        return entry

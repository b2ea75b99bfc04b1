"""
Sleep entry repository.

Handles database operations for the SleepEntry model.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from fitcoach.models.sleep import SleepEntry


class SleepRepository:
    """Repository for SleepEntry database operations."""

    def __init__(self, session: Session):
        self.session = session

    def save(self, entry: SleepEntry) -> SleepEntry:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_user_and_date(self, user_id: str, date: datetime.date) -> Optional[SleepEntry]:
        statement = select(SleepEntry).where(
            SleepEntry.user_id == user_id,
            SleepEntry.date == date,
        )
        return self.session.exec(statement).first()

    def list_by_date(self, user_id: str, date: datetime.date) -> list[SleepEntry]:
        """Entries of ``date``, most recently written first."""
        statement = (
            select(SleepEntry)
            .where(SleepEntry.user_id == user_id, SleepEntry.date == date)
            .order_by(SleepEntry.updated_at.desc())
        )
        return list(self.session.exec(statement).all())

    def get_by_user_date_range(
        self, user_id: str, start: datetime.date, end: datetime.date,
    ) -> list[SleepEntry]:
        """Entries for a user within a date range (inclusive), oldest first."""
        statement = (
            select(SleepEntry)
            .where(
                SleepEntry.user_id == user_id,
                SleepEntry.date >= start,
                SleepEntry.date <= end,
            )
            .order_by(SleepEntry.date)
        )
        return list(self.session.exec(statement).all())

    def get_all_by_user(self, user_id: str, skip: int = 0, limit: int = 100) -> list[SleepEntry]:
        statement = (
            select(SleepEntry)
            .where(SleepEntry.user_id == user_id)
            .order_by(SleepEntry.date.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(self.session.exec(statement).all())

    def delete(self, entry: SleepEntry) -> None:
        self.session.delete(entry)
        self.session.commit()

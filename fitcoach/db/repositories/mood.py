"""
Mood entry repository.

Handles database operations for the MoodEntry model.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from fitcoach.models.mood import MoodEntry


class MoodRepository:
    """Repository for MoodEntry database operations."""

    def __init__(self, session: Session):
        self.session = session

    def save(self, entry: MoodEntry) -> MoodEntry:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_user_and_date(self, user_id: str, date: datetime.date) -> Optional[MoodEntry]:
        statement = select(MoodEntry).where(
            MoodEntry.user_id == user_id,
            MoodEntry.date == date,
        )
        return self.session.exec(statement).first()

    def list_by_date(self, user_id: str, date: datetime.date) -> list[MoodEntry]:
        """Entries of ``date``, most recently written first."""
        statement = (
            select(MoodEntry)
            .where(MoodEntry.user_id == user_id, MoodEntry.date == date)
            .order_by(MoodEntry.updated_at.desc())
        )
        return list(self.session.exec(statement).all())

    def get_by_user_date_range(
        self, user_id: str, start: datetime.date, end: datetime.date,
    ) -> list[MoodEntry]:
        """Entries for a user within a date range (inclusive), oldest first."""
        statement = (
            select(MoodEntry)
            .where(
                MoodEntry.user_id == user_id,
                MoodEntry.date >= start,
                MoodEntry.date <= end,
            )
            .order_by(MoodEntry.date)
        )
        return list(self.session.exec(statement).all())

    def get_all_by_user(self, user_id: str, skip: int = 0, limit: int = 100) -> list[MoodEntry]:
        statement = (
            select(MoodEntry)
            .where(MoodEntry.user_id == user_id)
            .order_by(MoodEntry.date.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(self.session.exec(statement).all())

    def delete(self, entry: MoodEntry) -> None:
        self.session.delete(entry)
        self.session.commit()

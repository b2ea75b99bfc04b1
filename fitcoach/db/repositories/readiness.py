"""
Readiness score repository.

Handles database operations for the ReadinessScoreRecord model.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from fitcoach.models.readiness import ReadinessScoreRecord


class ReadinessRepository:
    """Repository for cached readiness scores."""

    def __init__(self, session: Session):
        self.session = session

    def save(self, record: ReadinessScoreRecord) -> ReadinessScoreRecord:
        self.session.add(record)
        self.session.commit()
        self.session.refresh(record)
        return record

    def get_by_user_and_date(
        self, user_id: str, date: datetime.date,
    ) -> Optional[ReadinessScoreRecord]:
        statement = select(ReadinessScoreRecord).where(
            ReadinessScoreRecord.user_id == user_id,
            ReadinessScoreRecord.date == date,
        )
        return self.session.exec(statement).first()

    def list_by_user(
        self,
        user_id: str,
        start: Optional[datetime.date] = None,
        end: Optional[datetime.date] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> list[ReadinessScoreRecord]:
        """Scores for a user, most recent first, optionally bounded (inclusive)."""
        statement = select(ReadinessScoreRecord).where(ReadinessScoreRecord.user_id == user_id)
        if start is not None:
            statement = statement.where(ReadinessScoreRecord.date >= start)
        if end is not None:
            statement = statement.where(ReadinessScoreRecord.date <= end)
        statement = statement.order_by(ReadinessScoreRecord.date.desc()).offset(offset).limit(limit)
        return list(self.session.exec(statement).all())

    def delete_by_user_and_date(self, user_id: str, date: datetime.date) -> bool:
        record = self.get_by_user_and_date(user_id, date)
        if record:
            self.session.delete(record)
            self.session.commit()
            return True
        return False

"""
Volume landmark repository.

Handles database operations for the VolumeLandmarkRecord model.
"""

from typing import Optional

from sqlmodel import Session, select

from fitcoach.models.volume_landmark import VolumeLandmarkRecord


class VolumeLandmarkRepository:
    """Repository for per-user volume landmarks."""

    def __init__(self, session: Session):
        self.session = session

    def save(self, record: VolumeLandmarkRecord) -> VolumeLandmarkRecord:
        self.session.add(record)
        self.session.commit()
        self.session.refresh(record)
        return record

    def save_all(self, records: list[VolumeLandmarkRecord]) -> list[VolumeLandmarkRecord]:
        """Write several rows in one transaction."""
        self.session.add_all(records)
        self.session.commit()
        for record in records:
            self.session.refresh(record)
        return records

    def get(self, user_id: str, muscle_group: str) -> Optional[VolumeLandmarkRecord]:
        statement = select(VolumeLandmarkRecord).where(
            VolumeLandmarkRecord.user_id == user_id,
            VolumeLandmarkRecord.muscle_group == muscle_group,
        )
        return self.session.exec(statement).first()

    def list_by_user(self, user_id: str) -> list[VolumeLandmarkRecord]:
        statement = (
            select(VolumeLandmarkRecord)
            .where(VolumeLandmarkRecord.user_id == user_id)
            .order_by(VolumeLandmarkRecord.muscle_group)
        )
        return list(self.session.exec(statement).all())

"""
Volume landmark database model.

Stores the per-user MEV / MAV / MRV thresholds of each muscle group and
the measured weekly volume.
"""

import datetime
from typing import Optional

from sqlalchemy import Column, DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel

from fitcoach.core.clock import utc_now


class VolumeLandmarkRecord(SQLModel, table=True):
    """Landmarks of one muscle group for one user."""

    __tablename__ = "volume_landmarks"
    __table_args__ = (
        UniqueConstraint("user_id", "muscle_group", name="uq_landmark_user_muscle"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(nullable=False, max_length=64, index=True)
    muscle_group: str = Field(nullable=False, max_length=50)

    mev: float = Field(nullable=False)
    mav: float = Field(nullable=False)
    mrv: float = Field(nullable=False)

    # Weekly hard sets actually performed
    current_volume: Optional[float] = Field(default=None)

    # Timestamps
    created_at: datetime.datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False)
    )
    updated_at: datetime.datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False)
    )

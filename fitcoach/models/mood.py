"""
Mood entry database model.

Defines the mood_entries table for the daily wellness check-in.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column, DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel

from fitcoach.core.clock import utc_now


class MoodEntry(SQLModel, table=True):
    """Daily mood / wellness check-in.  One entry per user per day."""

    __tablename__ = "mood_entries"
    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_mood_user_date"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(nullable=False, max_length=64, index=True)
    date: datetime.date = Field(nullable=False, index=True)
    time: Optional[datetime.time] = Field(default=None)

    # 0-10 scales
    mood_level: float = Field(nullable=False)
    energy_level: float = Field(nullable=False)
    stress_level: float = Field(nullable=False)
    anxiety_level: float = Field(nullable=False)
    mental_clarity: float = Field(nullable=False)

    emotion: Optional[str] = Field(default=None, max_length=50)
    factors: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    notes: Optional[str] = Field(default=None, max_length=1000)

    # Timestamps
    created_at: datetime.datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False)
    )
    updated_at: datetime.datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False)
    )

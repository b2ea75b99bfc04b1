"""
Sleep entry database model.

Defines the sleep_entries table.  One entry per user per night, keyed by
the wake-up date.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column, DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel

from fitcoach.core.clock import utc_now


class SleepEntry(SQLModel, table=True):
    """Nightly sleep record with optional device metrics."""

    __tablename__ = "sleep_entries"
    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_sleep_user_date"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(nullable=False, max_length=64, index=True)
    date: datetime.date = Field(nullable=False, index=True)

    start_time: Optional[datetime.time] = Field(default=None)
    end_time: Optional[datetime.time] = Field(default=None)
    duration: int = Field(nullable=False)
    quality: float = Field(nullable=False)

    # Stages (minutes)
    deep_sleep: Optional[int] = Field(default=None)
    rem_sleep: Optional[int] = Field(default=None)
    light_sleep: Optional[int] = Field(default=None)

    # Device metrics
    hrv: Optional[float] = Field(default=None)
    resting_heart_rate: Optional[int] = Field(default=None)

    factors: Optional[dict] = Field(default=None, sa_column=Column(JSON, nullable=True))
    source: str = Field(default="manual", max_length=20)

    # Timestamps
    created_at: datetime.datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False)
    )
    updated_at: datetime.datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False)
    )

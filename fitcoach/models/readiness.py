"""
Readiness score database model.

Cached daily readiness, recomputed whenever the source sleep or mood
entry changes.  The component snapshot and recommendations are stored as
JSON; the five scores are plain integer columns so they can be averaged in
SQL.
"""

import datetime
import uuid
from typing import Optional

from sqlalchemy import JSON, Column, DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel

from fitcoach.core.clock import utc_now


class ReadinessScoreRecord(SQLModel, table=True):
    """One readiness score per user per day."""

    __tablename__ = "readiness_scores"
    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_readiness_user_date"),
    )

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)
    user_id: str = Field(nullable=False, max_length=64, index=True)
    date: datetime.date = Field(nullable=False, index=True)

    overall_score: int = Field(nullable=False)
    sleep_score: int = Field(nullable=False)
    physical_score: int = Field(nullable=False)
    mental_score: int = Field(nullable=False)
    lifestyle_score: int = Field(nullable=False)
    training_adjustment: str = Field(nullable=False, max_length=20)

    recommendations: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    components: dict = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))

    # Timestamps
    created_at: datetime.datetime = Field(
        default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=False)
    )
    updated_at: Optional[datetime.datetime] = Field(
        default_factory=utc_now, sa_column=Column(DateTime(timezone=True), nullable=True)
    )

"""
Mood / wellness check-in schemas.

All level fields use a 0-10 scale.  ``stress_level`` and ``anxiety_level``
are "higher is worse"; the scorers invert them.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

# Factor tags read by the scorers.
MUSCLE_SORENESS = "muscle_soreness"
POOR_NUTRITION = "poor_nutrition"
GOOD_NUTRITION = "good_nutrition"
DEHYDRATION = "dehydration"
ACTIVE_RECOVERY = "active_recovery"


class MoodRecordBase(BaseModel):
    """Fields shared by requests and stored records."""

    date: datetime.date
    time: Optional[datetime.time] = None
    mood_level: float = Field(..., ge=0, le=10)
    energy_level: float = Field(..., ge=0, le=10)
    stress_level: float = Field(..., ge=0, le=10)
    anxiety_level: float = Field(..., ge=0, le=10)
    mental_clarity: float = Field(..., ge=0, le=10)
    emotion: Optional[str] = Field(None, max_length=50, description="Dominant emotion tag")
    factors: list[str] = Field(default_factory=list, description="Contributing-factor tags")
    notes: Optional[str] = Field(None, max_length=1000)


class MoodRecord(MoodRecordBase):
    """In-memory mood record, as consumed by the scorers."""

    id: Optional[int] = None
    user_id: Optional[str] = None

    def has_factor(self, tag: str) -> bool:
        return tag in self.factors


class MoodRecordCreate(MoodRecordBase):
    """Schema for creating or replacing the mood record of a date."""
    pass


class MoodRecordResponse(MoodRecordBase):
    """Schema for mood records in API responses."""

    id: int
    user_id: str
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True

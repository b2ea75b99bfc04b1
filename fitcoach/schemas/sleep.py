"""
Sleep record schemas.

A sleep record is created from a manual form or a device sync and is the
primary input of the sleep score.  Optional device metrics (HRV, resting
heart rate, sleep stages) refine the score when present.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class SleepSource(str, Enum):
    """Where the record came from."""
    MANUAL = "manual"
    OURA = "oura"
    WHOOP = "whoop"
    GARMIN = "garmin"
    APPLE_HEALTH = "apple_health"
    FITBIT = "fitbit"
    OTHER = "other"


class SleepFactors(BaseModel):
    """Contributing factors reported for the night."""

    alcohol: bool = False
    caffeine: bool = False
    screens: bool = False
    stress: bool = False
    exercise: bool = False
    late_meal: bool = False
    note: Optional[str] = Field(None, max_length=500)


class SleepRecordBase(BaseModel):
    """Fields shared by requests and stored records."""

    date: datetime.date = Field(..., description="Night the record belongs to (wake-up date)")
    start_time: Optional[datetime.time] = Field(None, description="Time of falling asleep (HH:MM)")
    end_time: Optional[datetime.time] = Field(None, description="Time of waking up (HH:MM)")
    duration: int = Field(..., ge=0, le=1440, description="Total sleep duration (minutes)")
    quality: float = Field(..., ge=0, le=10, description="Subjective quality 0-10")
    deep_sleep: Optional[int] = Field(None, ge=0, le=1440, description="Deep sleep (minutes)")
    rem_sleep: Optional[int] = Field(None, ge=0, le=1440, description="REM sleep (minutes)")
    light_sleep: Optional[int] = Field(None, ge=0, le=1440, description="Light sleep (minutes)")
    hrv: Optional[float] = Field(None, ge=0, le=300, description="Heart rate variability (ms)")
    resting_heart_rate: Optional[int] = Field(None, ge=0, le=220, description="Resting heart rate (bpm)")
    factors: Optional[SleepFactors] = None
    source: SleepSource = SleepSource.MANUAL


class SleepRecord(SleepRecordBase):
    """In-memory sleep record, as consumed by the scorers."""

    id: Optional[int] = None
    user_id: Optional[str] = None


class SleepRecordCreate(SleepRecordBase):
    """Schema for creating or replacing the sleep record of a date."""
    pass


class SleepRecordResponse(SleepRecordBase):
    """Schema for sleep records in API responses."""

    id: int
    user_id: str
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True

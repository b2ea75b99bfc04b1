"""
Daily readiness schemas.

The readiness score is a derived record: it is computed from the
same-day sleep and mood records, cached per ``(user_id, date)`` and
recomputed whenever the source records change.

    overall = 0.30 × sleep + 0.25 × physical + 0.25 × mental + 0.20 × lifestyle

All scores are integers on a 0-100 scale.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class TrainingAdjustment(str, Enum):
    """How today's session should deviate from the plan."""
    REDUCE_INTENSITY = "reduce_intensity"
    REDUCE_VOLUME = "reduce_volume"
    NORMAL = "normal"
    INCREASE = "increase"


class SleepComponents(BaseModel):
    duration: int
    quality: float
    hrv: Optional[float] = None
    resting_heart_rate: Optional[int] = None
    deep_sleep_percentage: Optional[float] = None


class PhysicalComponents(BaseModel):
    muscle_soreness: float
    fatigue: float
    recovery: float


class MentalComponents(BaseModel):
    stress: float
    mood: float
    mental_clarity: float
    anxiety: float


class LifestyleComponents(BaseModel):
    nutrition: float
    hydration: float
    alcohol: bool
    active_recovery: bool


class ReadinessComponents(BaseModel):
    """Snapshot of the raw inputs behind a readiness score."""

    sleep: SleepComponents
    physical: PhysicalComponents
    mental: MentalComponents
    lifestyle: LifestyleComponents


class ReadinessAssessment(BaseModel):
    """Pure computation output, before it is bound to a user and date."""

    overall_score: int = Field(..., ge=0, le=100)
    sleep_score: int = Field(..., ge=0, le=100)
    physical_score: int = Field(..., ge=0, le=100)
    mental_score: int = Field(..., ge=0, le=100)
    lifestyle_score: int = Field(..., ge=0, le=100)
    training_adjustment: TrainingAdjustment
    recommendations: list[str]
    components: ReadinessComponents


class ReadinessScore(ReadinessAssessment):
    """Readiness score bound to a user and date, as cached."""

    id: Optional[str] = Field(None, description="Stable identifier, kept across recomputations")
    user_id: str
    date: datetime.date
    created_at: Optional[datetime.datetime] = None

    class Config:
        from_attributes = True


class ComponentTrends(BaseModel):
    overall: list[int] = Field(default_factory=list)
    sleep: list[int] = Field(default_factory=list)
    physical: list[int] = Field(default_factory=list)
    mental: list[int] = Field(default_factory=list)
    lifestyle: list[int] = Field(default_factory=list)


class ReadinessStats(BaseModel):
    """Aggregate view over a window of cached readiness scores."""

    average_overall_score: float = 0.0
    average_sleep_score: float = 0.0
    average_physical_score: float = 0.0
    average_mental_score: float = 0.0
    average_lifestyle_score: float = 0.0
    trends: ComponentTrends = Field(default_factory=ComponentTrends)
    dates: list[datetime.date] = Field(default_factory=list)
    training_adjustments: dict[TrainingAdjustment, int] = Field(
        default_factory=lambda: {adj: 0 for adj in TrainingAdjustment},
    )

"""
Volume-landmark schemas.

Volume landmarks are weekly hard-set thresholds per muscle group:

- ``mev`` — Minimum Effective Volume
- ``mav`` — Maximum Adaptive Volume
- ``mrv`` — Maximum Recoverable Volume

with ``0 < mev < mav < mrv``.  The ordering is enforced when a landmark is
edited, not by these schemas, so that all violations can be reported at
once.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class TrainingLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class VolumeStatus(str, Enum):
    """Where the current weekly volume sits against the landmarks."""
    BELOW_MEV = "below_mev"
    OPTIMAL = "optimal"
    APPROACHING_MRV = "approaching_mrv"
    EXCEEDING_MRV = "exceeding_mrv"
    UNKNOWN = "unknown"


class VolumeAction(str, Enum):
    INCREASE = "increase"
    MAINTAIN = "maintain"
    DECREASE = "decrease"


class VolumeAdjustment(str, Enum):
    INCREASE = "increase"
    MAINTAIN = "maintain"
    DECREASE = "decrease"
    DELOAD = "deload"


class VolumeTrend(str, Enum):
    INCREASING = "increasing"
    STABLE = "stable"
    DECREASING = "decreasing"
    INCONSISTENT = "inconsistent"


class TrainingGoal(str, Enum):
    STRENGTH = "strength"
    HYPERTROPHY = "hypertrophy"
    ENDURANCE = "endurance"


class AdaptationResponse(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class VolumeLandmark(BaseModel):
    """Landmark triple for one muscle group, plus the measured volume."""

    muscle_group: str = Field(..., description="Muscle-group slug, e.g. 'chest'")
    mev: float
    mav: float
    mrv: float
    current_volume: Optional[float] = Field(None, ge=0, description="Weekly sets actually performed")


class VolumeLandmarkUpdate(BaseModel):
    """Schema for editing the thresholds of a landmark."""

    mev: float
    mav: float
    mrv: float


class CurrentVolumeUpdate(BaseModel):
    """Schema for setting the measured weekly volume."""

    current_volume: float = Field(..., ge=0)


class VolumeStatusReport(BaseModel):
    """Classification of a landmark's current volume."""

    muscle_group: str
    display_name: str
    status: VolumeStatus
    action: Optional[VolumeAction] = Field(
        None, description="Direction to move weekly volume (None when unknown)",
    )
    recommendation: str
    recovery_hours: Optional[int] = Field(
        None, description="Typical recovery time between sessions (None for uncatalogued groups)",
    )
    landmark: VolumeLandmark


class VolumeRecommendation(BaseModel):
    """Multi-week adjustment suggestion for a muscle group."""

    muscle_group: str
    current_volume: float
    recommended_volume: float
    adjustment_type: VolumeAdjustment
    reasoning: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    timeline_weeks: int


class VolumeRange(BaseModel):
    """Goal-specific weekly set range."""

    min: int
    optimal: int
    max: int


class LoggedExerciseVolume(BaseModel):
    """One logged exercise as seen by the weekly-volume aggregation."""

    muscle_groups: list[str] = Field(default_factory=list)
    sets: int = Field(0, ge=0)

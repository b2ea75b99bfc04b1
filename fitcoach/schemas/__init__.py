"""Pydantic schemas for records, request/response validation."""

from fitcoach.schemas.sleep import (
    SleepFactors,
    SleepRecord,
    SleepRecordCreate,
    SleepRecordResponse,
    SleepSource,
)
from fitcoach.schemas.mood import MoodRecord, MoodRecordCreate, MoodRecordResponse
from fitcoach.schemas.readiness import (
    ReadinessAssessment,
    ReadinessComponents,
    ReadinessScore,
    ReadinessStats,
    TrainingAdjustment,
)
from fitcoach.schemas.volume import (
    TrainingLevel,
    VolumeLandmark,
    VolumeLandmarkUpdate,
    VolumeStatus,
    VolumeStatusReport,
)
from fitcoach.schemas.session import (
    PeriodizedExercise,
    PeriodizedSession,
    SpecialTechnique,
    TechniqueParameters,
    TechniqueType,
)
from fitcoach.schemas.physiology import PhysiologicalAnalysis

__all__ = [
    "SleepFactors",
    "SleepRecord",
    "SleepRecordCreate",
    "SleepRecordResponse",
    "SleepSource",
    "MoodRecord",
    "MoodRecordCreate",
    "MoodRecordResponse",
    "ReadinessAssessment",
    "ReadinessComponents",
    "ReadinessScore",
    "ReadinessStats",
    "TrainingAdjustment",
    "TrainingLevel",
    "VolumeLandmark",
    "VolumeLandmarkUpdate",
    "VolumeStatus",
    "VolumeStatusReport",
    "PeriodizedExercise",
    "PeriodizedSession",
    "SpecialTechnique",
    "TechniqueParameters",
    "TechniqueType",
    "PhysiologicalAnalysis",
]

"""SQLModel database models."""

from fitcoach.models.sleep import SleepEntry
from fitcoach.models.mood import MoodEntry
from fitcoach.models.readiness import ReadinessScoreRecord
from fitcoach.models.volume_landmark import VolumeLandmarkRecord

__all__ = [
    "SleepEntry",
    "MoodEntry",
    "ReadinessScoreRecord",
    "VolumeLandmarkRecord",
]

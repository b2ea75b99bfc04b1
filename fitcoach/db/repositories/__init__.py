"""Database repositories."""

from fitcoach.db.repositories.sleep import SleepRepository
from fitcoach.db.repositories.mood import MoodRepository
from fitcoach.db.repositories.readiness import ReadinessRepository
from fitcoach.db.repositories.volume_landmark import VolumeLandmarkRepository

__all__ = [
    "SleepRepository",
    "MoodRepository",
    "ReadinessRepository",
    "VolumeLandmarkRepository",
]

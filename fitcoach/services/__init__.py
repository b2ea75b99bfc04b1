"""Business logic services."""

from fitcoach.services.readiness_service import ReadinessService, SqlReadinessStore
from fitcoach.services.sleep_service import SleepService
from fitcoach.services.mood_service import MoodService
from fitcoach.services.volume_service import VolumeLandmarkService

__all__ = [
    "ReadinessService",
    "SqlReadinessStore",
    "SleepService",
    "MoodService",
    "VolumeLandmarkService",
]

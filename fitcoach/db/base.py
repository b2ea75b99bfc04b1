"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

from sqlmodel import SQLModel

from fitcoach.models.sleep import SleepEntry  # noqa: F401
from fitcoach.models.mood import MoodEntry  # noqa: F401
from fitcoach.models.readiness import ReadinessScoreRecord  # noqa: F401
from fitcoach.models.volume_landmark import VolumeLandmarkRecord  # noqa: F401

metadata = SQLModel.metadata

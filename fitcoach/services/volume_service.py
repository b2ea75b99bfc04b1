"""
Volume landmark service.

Per-user landmark storage on top of the pure classification in
:mod:`fitcoach.scoring.volume`.  Edits go through
:func:`~fitcoach.scoring.volume.validate_landmark_edit` and are refused
while it reports any violation.
"""

import logging
from typing import Iterable, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from fitcoach.core.clock import utc_now
from fitcoach.core.config import settings
from fitcoach.core.result import Ok, Result, not_found, persistence_failed, validation_failed
from fitcoach.db.repositories.volume_landmark import VolumeLandmarkRepository
from fitcoach.models.volume_landmark import VolumeLandmarkRecord
from fitcoach.schemas.volume import (
    LoggedExerciseVolume,
    TrainingLevel,
    VolumeLandmark,
    VolumeLandmarkUpdate,
    VolumeRecommendation,
    VolumeStatusReport,
    VolumeTrend,
)
from fitcoach.scoring.volume import (
    aggregate_weekly_sets,
    analyze_volume_trend,
    classify_volume_status,
    default_landmarks,
    normalize_muscle_group,
    recommend_volume_adjustment,
    validate_landmark_edit,
)

logger = logging.getLogger(__name__)


def _to_landmark(record: VolumeLandmarkRecord) -> VolumeLandmark:
    return VolumeLandmark.model_validate(record, from_attributes=True)


class VolumeLandmarkService:
    """Service for volume landmark business logic."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = VolumeLandmarkRepository(session)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def initialize(
        self, user_id: str, level: Optional[TrainingLevel] = None,
    ) -> Result[list[VolumeStatusReport]]:
        """Reset every catalogued muscle group to the defaults of ``level``.

        Existing rows keep their measured ``current_volume``.
        """
        level = level or TrainingLevel(settings.DEFAULT_TRAINING_LEVEL)
        now = utc_now()
        records = []
        for landmark in default_landmarks(level):
            record = self.repository.get(user_id, landmark.muscle_group)
            if record is None:
                record = VolumeLandmarkRecord(user_id=user_id, muscle_group=landmark.muscle_group,
                                              mev=landmark.mev, mav=landmark.mav, mrv=landmark.mrv)
            else:
                record.mev, record.mav, record.mrv = landmark.mev, landmark.mav, landmark.mrv
                record.updated_at = now
            records.append(record)

        try:
            saved = self.repository.save_all(records)
        except SQLAlchemyError as exc:
            return self._persistence_error(exc, "Failed to initialize volume landmarks", user_id)

        logger.info("Initialized %d volume landmarks for user=%s level=%s", len(saved), user_id, level.value)
        return Ok([classify_volume_status(_to_landmark(r)) for r in saved])

    def list_reports(self, user_id: str) -> list[VolumeStatusReport]:
        return [classify_volume_status(_to_landmark(r)) for r in self.repository.list_by_user(user_id)]

    def get_report(self, user_id: str, muscle_group: str) -> Result[VolumeStatusReport]:
        record = self.repository.get(user_id, normalize_muscle_group(muscle_group))
        if record is None:
            return not_found(f"No volume landmark for '{muscle_group}'")
        return Ok(classify_volume_status(_to_landmark(record)))

    def update_landmark(
        self, user_id: str, muscle_group: str, data: VolumeLandmarkUpdate,
    ) -> Result[VolumeStatusReport]:
        """Validate and store new thresholds, creating the row if needed."""
        errors = validate_landmark_edit(data.mev, data.mav, data.mrv)
        if errors:
            return validation_failed(errors)

        slug = normalize_muscle_group(muscle_group)
        record = self.repository.get(user_id, slug)
        if record is None:
            record = VolumeLandmarkRecord(user_id=user_id, muscle_group=slug,
                                          mev=data.mev, mav=data.mav, mrv=data.mrv)
        else:
            record.mev, record.mav, record.mrv = data.mev, data.mav, data.mrv
            record.updated_at = utc_now()

        try:
            record = self.repository.save(record)
        except SQLAlchemyError as exc:
            return self._persistence_error(exc, "Failed to save volume landmark", user_id)
        return Ok(classify_volume_status(_to_landmark(record)))

    def set_current_volume(
        self, user_id: str, muscle_group: str, current_volume: float,
    ) -> Result[VolumeStatusReport]:
        record = self.repository.get(user_id, normalize_muscle_group(muscle_group))
        if record is None:
            return not_found(f"No volume landmark for '{muscle_group}'")

        record.current_volume = current_volume
        record.updated_at = utc_now()
        try:
            record = self.repository.save(record)
        except SQLAlchemyError as exc:
            return self._persistence_error(exc, "Failed to save current volume", user_id)
        return Ok(classify_volume_status(_to_landmark(record)))

    def recalculate_current_volumes(
        self, user_id: str, exercises: Iterable[LoggedExerciseVolume],
    ) -> Result[list[VolumeStatusReport]]:
        """Overwrite ``current_volume`` of every landmark from a week of logged exercises.

        Landmarks with no logged sets are set to 0.
        """
        weekly = aggregate_weekly_sets(exercises)
        records = self.repository.list_by_user(user_id)
        now = utc_now()
        for record in records:
            record.current_volume = weekly.get(record.muscle_group, 0)
            record.updated_at = now

        try:
            saved = self.repository.save_all(records)
        except SQLAlchemyError as exc:
            return self._persistence_error(exc, "Failed to recalculate current volumes", user_id)
        return Ok([classify_volume_status(_to_landmark(r)) for r in saved])

    def recommendations(
        self,
        user_id: str,
        history: Optional[dict[str, list[float]]] = None,
    ) -> list[VolumeRecommendation]:
        """Adjustment suggestion for every stored landmark.

        Args:
            history: Optional weekly set history per muscle group, oldest
                first.  Groups without history are treated as stable.
        """
        history = history or {}
        result = []
        for record in self.repository.list_by_user(user_id):
            weeks = history.get(record.muscle_group)
            trend = analyze_volume_trend(weeks) if weeks else VolumeTrend.STABLE
            result.append(recommend_volume_adjustment(_to_landmark(record), trend))
        return result

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _persistence_error(self, exc: SQLAlchemyError, context: str, user_id: str):
        logger.exception("%s for user=%s", context, user_id)
        self.session.rollback()
        return persistence_failed(exc, context)

"""
Tests for the volume landmark service against SQLite.
"""

import pytest

from fitcoach.core.result import ErrorKind
from fitcoach.schemas.volume import (
    LoggedExerciseVolume,
    TrainingLevel,
    VolumeAdjustment,
    VolumeLandmarkUpdate,
    VolumeStatus,
)
from fitcoach.services.volume_service import VolumeLandmarkService


@pytest.fixture
def service(session):
    svc = VolumeLandmarkService(session)
    svc.initialize("u1", TrainingLevel.INTERMEDIATE)
    return svc


class TestInitialize:

    def test_creates_every_group(self, service):
        reports = service.list_reports("u1")
        assert len(reports) == 10
        assert all(r.status == VolumeStatus.UNKNOWN for r in reports)

    def test_reinitialize_keeps_current_volume(self, service):
        service.set_current_volume("u1", "chest", 12)
        result = service.initialize("u1", TrainingLevel.ADVANCED)
        assert result.ok
        chest = service.get_report("u1", "chest").value
        assert chest.landmark.mev == 10
        assert chest.landmark.current_volume == 12
        assert len(service.list_reports("u1")) == 10

    def test_users_are_isolated(self, service):
        assert service.list_reports("u2") == []


class TestEdits:

    def test_get_by_alias(self, service):
        assert service.get_report("u1", "Pecho").value.muscle_group == "chest"

    def test_get_missing(self, service):
        assert service.get_report("u1", "forearms").kind == ErrorKind.NOT_FOUND

    def test_invalid_edit_is_refused(self, service):
        result = service.update_landmark("u1", "chest", VolumeLandmarkUpdate(mev=0, mav=0, mrv=0))
        assert result.kind == ErrorKind.VALIDATION_FAILED
        assert len(result.details) == 3
        assert service.get_report("u1", "chest").value.landmark.mev == 8

    def test_valid_edit(self, service):
        result = service.update_landmark("u1", "chest", VolumeLandmarkUpdate(mev=6, mav=12, mrv=16))
        assert result.ok
        assert result.value.landmark.mrv == 16

    def test_edit_creates_missing_group(self, service):
        result = service.update_landmark("u1", "forearms", VolumeLandmarkUpdate(mev=4, mav=8, mrv=12))
        assert result.ok
        assert result.value.display_name == "Forearms"

    def test_set_current_volume(self, service):
        result = service.set_current_volume("u1", "chest", 24)
        assert result.value.status == VolumeStatus.EXCEEDING_MRV

    def test_set_current_volume_missing(self, service):
        assert service.set_current_volume("u1", "forearms", 5).kind == ErrorKind.NOT_FOUND


class TestRecalculateAndRecommend:

    def test_recalculate_from_logged_exercises(self, service):
        result = service.recalculate_current_volumes("u1", [
            LoggedExerciseVolume(muscle_groups=["Chest", "triceps"], sets=6),
            LoggedExerciseVolume(muscle_groups=["pecho"], sets=6),
        ])
        assert result.ok
        by_group = {r.muscle_group: r for r in result.value}
        assert by_group["chest"].landmark.current_volume == 12
        assert by_group["triceps"].landmark.current_volume == 6
        assert by_group["back"].status == VolumeStatus.BELOW_MEV

    def test_recommendations(self, service):
        service.set_current_volume("u1", "chest", 25)
        recs = {r.muscle_group: r for r in service.recommendations("u1")}
        assert recs["chest"].adjustment_type == VolumeAdjustment.DELOAD
        assert recs["back"].adjustment_type == VolumeAdjustment.INCREASE

    def test_recommendations_with_history(self, service):
        service.set_current_volume("u1", "chest", 20)
        recs = {r.muscle_group: r for r in service.recommendations("u1", {"chest": [24, 22, 20]})}
        assert recs["chest"].adjustment_type == VolumeAdjustment.MAINTAIN

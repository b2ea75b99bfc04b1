"""
Volume landmark endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from fitcoach.api.dependencies import result_or_raise
from fitcoach.db.session import get_db
from fitcoach.schemas.volume import (
    CurrentVolumeUpdate,
    LoggedExerciseVolume,
    TrainingGoal,
    TrainingLevel,
    VolumeLandmarkUpdate,
    VolumeRange,
    VolumeRecommendation,
    VolumeStatusReport,
)
from fitcoach.scoring.volume import optimal_volume_for_goal
from fitcoach.services.volume_service import VolumeLandmarkService

router = APIRouter()
catalog_router = APIRouter()


@router.post("/initialize", summary="Reset every muscle group to the defaults of a training level.",
             response_model=list[VolumeStatusReport])
def initialize_landmarks(user_id: str,
                         level: Optional[TrainingLevel] = Query(None, description="Defaults to the configured level"),
                         db: Session = Depends(get_db)):
    return result_or_raise(VolumeLandmarkService(db).initialize(user_id, level))


@router.get("", summary="Status of every stored landmark.", response_model=list[VolumeStatusReport])
def list_landmarks(user_id: str, db: Session = Depends(get_db)):
    return VolumeLandmarkService(db).list_reports(user_id)


@router.get("/recommendations", summary="Adjustment suggestion for every stored landmark.",
            response_model=list[VolumeRecommendation])
def list_recommendations(user_id: str, db: Session = Depends(get_db)):
    return VolumeLandmarkService(db).recommendations(user_id)


@router.post("/recalculate", summary="Set current volumes from a week of logged exercises.",
             response_model=list[VolumeStatusReport])
def recalculate_volumes(user_id: str, exercises: list[LoggedExerciseVolume], db: Session = Depends(get_db)):
    return result_or_raise(VolumeLandmarkService(db).recalculate_current_volumes(user_id, exercises))


@router.get("/{muscle_group}", summary="Status of one muscle group.", response_model=VolumeStatusReport)
def get_landmark(user_id: str, muscle_group: str, db: Session = Depends(get_db)):
    return result_or_raise(VolumeLandmarkService(db).get_report(user_id, muscle_group))


@router.put("/{muscle_group}", summary="Edit the MEV / MAV / MRV of one muscle group.",
            response_model=VolumeStatusReport)
def update_landmark(user_id: str, muscle_group: str, data: VolumeLandmarkUpdate, db: Session = Depends(get_db)):
    """Rejected with 422 and the full violation list unless 0 < MEV < MAV < MRV."""
    return result_or_raise(VolumeLandmarkService(db).update_landmark(user_id, muscle_group, data))


@router.put("/{muscle_group}/current", summary="Set the measured weekly volume of one muscle group.",
            response_model=VolumeStatusReport)
def set_current_volume(user_id: str, muscle_group: str, data: CurrentVolumeUpdate, db: Session = Depends(get_db)):
    return result_or_raise(VolumeLandmarkService(db).set_current_volume(user_id, muscle_group, data.current_volume))


@catalog_router.get("/goal/{goal}", summary="Weekly set range for a training goal.", response_model=VolumeRange)
def get_goal_range(goal: TrainingGoal,
                   muscle_group: str = Query(..., description="Muscle group slug or display name"),
                   level: TrainingLevel = Query(TrainingLevel.INTERMEDIATE)):
    return optimal_volume_for_goal(goal, level, muscle_group)

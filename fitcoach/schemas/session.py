"""
Periodized session schemas.

A session is an ordered list of exercises plus the special intensity
techniques attached to it.  These records are pure input to the
physiological-impact estimator and are not persisted.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class TechniqueType(str, Enum):
    REST_PAUSE = "rest_pause"
    DROP_SET = "drop_set"
    CLUSTER_SET = "cluster_set"
    SUPERSET = "superset"
    GIANT_SET = "giant_set"
    MYO_REPS = "myo_reps"
    MECHANICAL_DROP_SET = "mechanical_drop_set"


class TechniqueParameters(BaseModel):
    """Small parameter record; only ``type`` drives the estimator."""

    type: TechniqueType
    drops: Optional[int] = Field(None, ge=0, description="Number of drops (drop sets)")
    drop_percentage: Optional[float] = Field(None, ge=0, le=100)
    rest_seconds: Optional[int] = Field(None, ge=0, description="Intra-set rest")
    mini_sets: Optional[int] = Field(None, ge=0, description="Rest-pause / myo-rep mini sets")
    reps_per_cluster: Optional[int] = Field(None, ge=0)
    exercises: list[str] = Field(default_factory=list, description="Paired exercises (supersets)")


class SpecialTechnique(BaseModel):
    name: str
    description: Optional[str] = None
    parameters: Optional[TechniqueParameters] = None


class PeriodizedExercise(BaseModel):
    name: str
    sets: int = Field(..., ge=0)
    reps: str = Field(..., description="Rep target, e.g. '8' or '8-12'")
    rir: Optional[float] = Field(None, ge=0, le=10, description="Reps in reserve")
    rpe: Optional[float] = Field(None, ge=0, le=10)
    rest_seconds: Optional[int] = Field(None, ge=0)
    tempo: Optional[str] = None


class PeriodizedSession(BaseModel):
    name: str
    exercises: list[PeriodizedExercise] = Field(default_factory=list)
    special_techniques: list[SpecialTechnique] = Field(default_factory=list)


class PhysiologyRequest(BaseModel):
    """Request body of the physiology endpoint."""

    session: PeriodizedSession
    user_fatigue: float = Field(50, ge=0, le=100)
    user_readiness: float = Field(50, ge=0, le=100)

"""Scoring algorithms — sleep, wellness, readiness, volume landmarks, session physiology."""

from fitcoach.scoring.physiology import estimate_physiological_impact
from fitcoach.scoring.readiness import (
    ReadinessStore,
    compute_readiness,
    compute_readiness_stats,
    get_or_compute_readiness,
    list_readiness,
)
from fitcoach.scoring.sleep import compute_sleep_score
from fitcoach.scoring.volume import classify_volume_status, validate_landmark_edit
from fitcoach.scoring.wellness import (
    compute_lifestyle_score,
    compute_mental_score,
    compute_physical_score,
)

__all__ = [
    "ReadinessStore",
    "classify_volume_status",
    "compute_lifestyle_score",
    "compute_mental_score",
    "compute_physical_score",
    "compute_readiness",
    "compute_readiness_stats",
    "compute_sleep_score",
    "estimate_physiological_impact",
    "get_or_compute_readiness",
    "list_readiness",
    "validate_landmark_edit",
]

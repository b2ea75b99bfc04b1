"""
Volume landmarks — weekly set-volume status per muscle group.

Each muscle group carries three weekly hard-set landmarks (MEV < MAV < MRV).
The current weekly volume is classified against them:

    current absent        → unknown
    current < MEV         → below_mev        (increase)
    MEV ≤ current ≤ MAV   → optimal          (maintain)
    MAV < current ≤ MRV   → approaching_mrv  (decrease)
    current > MRV         → exceeding_mrv    (decrease)

Default landmarks per training level, the goal-specific ranges and the
multi-week adjustment heuristics are rules of thumb from the hypertrophy
coaching literature, declared as module-level tables so they can be
inspected and tuned.
"""

from __future__ import annotations

from typing import Iterable, Optional

from pydantic import BaseModel

from fitcoach.schemas.volume import (
    AdaptationResponse,
    LoggedExerciseVolume,
    TrainingGoal,
    TrainingLevel,
    VolumeAction,
    VolumeAdjustment,
    VolumeLandmark,
    VolumeRange,
    VolumeRecommendation,
    VolumeStatus,
    VolumeStatusReport,
    VolumeTrend,
)
from fitcoach.scoring.common import round_score

# ======================================================================
# Muscle-group catalogue
# ======================================================================


class MuscleGroupDefaults(BaseModel):
    """Default landmarks of one muscle group for every training level."""

    slug: str
    display_name: str
    # level -> (mev, mav, mrv)
    landmarks: dict[TrainingLevel, tuple[int, int, int]]
    recovery_time_hours: int
    aliases: tuple[str, ...] = ()


def _group(slug, display_name, beginner, intermediate, advanced, recovery, aliases=()):
    return MuscleGroupDefaults(
        slug=slug,
        display_name=display_name,
        landmarks={
            TrainingLevel.BEGINNER: beginner,
            TrainingLevel.INTERMEDIATE: intermediate,
            TrainingLevel.ADVANCED: advanced,
        },
        recovery_time_hours=recovery,
        aliases=aliases,
    )


MUSCLE_GROUPS: dict[str, MuscleGroupDefaults] = {
    g.slug: g for g in [
        _group("chest", "Chest", (6, 14, 18), (8, 18, 22), (10, 22, 26), 48, ("pecho",)),
        _group("back", "Back", (8, 16, 20), (10, 20, 25), (12, 25, 30), 48, ("espalda",)),
        _group("shoulders", "Shoulders", (6, 12, 16), (8, 16, 20), (10, 20, 24), 36, ("hombros",)),
        _group("quadriceps", "Quadriceps", (8, 16, 20), (10, 20, 25), (12, 25, 30), 72, ("cuádriceps", "quads")),
        _group("hamstrings", "Hamstrings", (6, 12, 16), (8, 16, 20), (10, 20, 24), 72, ("isquiotibiales",)),
        _group("glutes", "Glutes", (6, 14, 18), (8, 18, 22), (10, 22, 26), 48, ("glúteos",)),
        _group("biceps", "Biceps", (4, 10, 14), (6, 14, 18), (8, 18, 22), 36, ("bíceps",)),
        _group("triceps", "Triceps", (4, 10, 14), (6, 14, 18), (8, 18, 22), 36, ("tríceps",)),
        _group("calves", "Calves", (6, 12, 16), (8, 16, 20), (10, 20, 24), 24, ("pantorrillas",)),
        _group("abs", "Abs", (6, 12, 16), (8, 16, 20), (10, 20, 24), 24, ("abdominales", "core")),
    ]
}

# Range used when a goal is requested for an unknown muscle group.
_FALLBACK_RANGE = VolumeRange(min=6, optimal=12, max=18)

_ALIAS_INDEX: dict[str, str] = {}
for _g in MUSCLE_GROUPS.values():
    _ALIAS_INDEX[_g.slug] = _g.slug
    _ALIAS_INDEX[_g.display_name.lower()] = _g.slug
    for _alias in _g.aliases:
        _ALIAS_INDEX[_alias] = _g.slug


def normalize_muscle_group(name: str) -> str:
    """Map a display name or alias to its slug; unknown names are lower-cased."""
    key = name.strip().lower()
    return _ALIAS_INDEX.get(key, key)


def display_name(muscle_group: str) -> str:
    group = MUSCLE_GROUPS.get(normalize_muscle_group(muscle_group))
    if group is None:
        return muscle_group.replace("_", " ").title()
    return group.display_name


def recovery_hours(muscle_group: str) -> Optional[int]:
    group = MUSCLE_GROUPS.get(normalize_muscle_group(muscle_group))
    return group.recovery_time_hours if group else None


def default_landmarks(level: TrainingLevel = TrainingLevel.INTERMEDIATE) -> list[VolumeLandmark]:
    """Initial landmarks of every catalogued muscle group for ``level``."""
    result = []
    for group in MUSCLE_GROUPS.values():
        mev, mav, mrv = group.landmarks[level]
        result.append(VolumeLandmark(muscle_group=group.slug, mev=mev, mav=mav, mrv=mrv))
    return result


# ======================================================================
# Status classification
# ======================================================================

_ACTIONS: dict[VolumeStatus, Optional[VolumeAction]] = {
    VolumeStatus.BELOW_MEV: VolumeAction.INCREASE,
    VolumeStatus.OPTIMAL: VolumeAction.MAINTAIN,
    # Above MAV by construction
    VolumeStatus.APPROACHING_MRV: VolumeAction.DECREASE,
    VolumeStatus.EXCEEDING_MRV: VolumeAction.DECREASE,
    VolumeStatus.UNKNOWN: None,
}


def _fmt(value: float) -> str:
    """Render set counts without a trailing ``.0``."""
    return str(int(value)) if float(value).is_integer() else f"{value:.1f}"


def determine_volume_status(landmark: VolumeLandmark) -> VolumeStatus:
    current = landmark.current_volume
    if current is None:
        return VolumeStatus.UNKNOWN
    if current < landmark.mev:
        return VolumeStatus.BELOW_MEV
    if current <= landmark.mav:
        return VolumeStatus.OPTIMAL
    if current <= landmark.mrv:
        return VolumeStatus.APPROACHING_MRV
    return VolumeStatus.EXCEEDING_MRV


def volume_action(status: VolumeStatus) -> Optional[VolumeAction]:
    return _ACTIONS[status]


def volume_recommendation(status: VolumeStatus, landmark: VolumeLandmark, name: str) -> str:
    """Recommendation sentence with the concrete set deltas substituted."""
    current = landmark.current_volume
    mev, mav, mrv = landmark.mev, landmark.mav, landmark.mrv

    if status is VolumeStatus.UNKNOWN or current is None:
        return (
            f"No recent volume logged for {name}. Log your workouts to track it "
            f"against MEV {_fmt(mev)} / MAV {_fmt(mav)} / MRV {_fmt(mrv)} sets/week."
        )
    if status is VolumeStatus.BELOW_MEV:
        return (
            f"{name} volume is below the minimum effective volume. Add {_fmt(mev - current)} "
            f"more sets/week to reach at least {_fmt(mev)} sets."
        )
    if status is VolumeStatus.OPTIMAL:
        return (
            f"{name} volume is in the productive range. Keep it between {_fmt(mev)} and "
            f"{_fmt(mav)} sets/week; up to {_fmt(mav - current)} more sets are still productive."
        )
    if status is VolumeStatus.APPROACHING_MRV:
        return (
            f"{name} volume is close to the recoverable limit ({_fmt(mrv - current)} sets/week "
            f"below MRV). Consider removing {_fmt(current - mav)} sets/week or planning a deload."
        )
    return (
        f"{name} volume exceeds the maximum recoverable volume by {_fmt(current - mrv)} sets/week. "
        f"Reduce by {_fmt(current - mav)} sets/week to return to {_fmt(mav)} sets."
    )


def classify_volume_status(
    landmark: VolumeLandmark,
    name: Optional[str] = None,
) -> VolumeStatusReport:
    """Classify a landmark's current volume and build its recommendation."""
    status = determine_volume_status(landmark)
    label = name or display_name(landmark.muscle_group)
    return VolumeStatusReport(
        muscle_group=landmark.muscle_group,
        display_name=label,
        status=status,
        action=volume_action(status),
        recommendation=volume_recommendation(status, landmark, label),
        recovery_hours=recovery_hours(landmark.muscle_group),
        landmark=landmark,
    )


# ======================================================================
# Edit-time validation
# ======================================================================


def validate_landmark_edit(mev: float, mav: float, mrv: float) -> list[str]:
    """Return every ordering violation; an empty list means valid."""
    errors: list[str] = []
    if mev <= 0:
        errors.append("MEV must be greater than 0")
    if mav <= mev:
        errors.append("MAV must be greater than MEV")
    if mrv <= mav:
        errors.append("MRV must be greater than MAV")
    return errors


# ======================================================================
# Weekly volume aggregation
# ======================================================================


def aggregate_weekly_sets(exercises: Iterable[LoggedExerciseVolume]) -> dict[str, float]:
    """Sum hard sets per muscle group.  An exercise counts fully toward
    every muscle group it lists."""
    volumes: dict[str, float] = {}
    for exercise in exercises:
        for group in exercise.muscle_groups:
            slug = normalize_muscle_group(group)
            volumes[slug] = volumes.get(slug, 0) + exercise.sets
    return volumes


# ======================================================================
# Multi-week heuristics
# ======================================================================


def analyze_volume_trend(weekly_sets: list[float]) -> VolumeTrend:
    """Trend of weekly sets, given oldest first."""
    if len(weekly_sets) < 2:
        return VolumeTrend.STABLE

    increases = decreases = 0
    for prev, cur in zip(weekly_sets, weekly_sets[1:]):
        if cur > prev:
            increases += 1
        elif cur < prev:
            decreases += 1

    if increases > decreases:
        return VolumeTrend.INCREASING
    if decreases > increases:
        return VolumeTrend.DECREASING
    if increases == 0:
        return VolumeTrend.STABLE
    return VolumeTrend.INCONSISTENT


def recommend_volume_adjustment(
    landmark: VolumeLandmark,
    trend: VolumeTrend = VolumeTrend.STABLE,
) -> VolumeRecommendation:
    """Suggest next block's weekly sets from the status and recent trend."""
    current = landmark.current_volume or 0
    mev, mav = landmark.mev, landmark.mav
    status = determine_volume_status(landmark.model_copy(update={"current_volume": current}))

    recommended = current
    adjustment = VolumeAdjustment.MAINTAIN
    confidence = 0.8
    weeks = 2

    if status is VolumeStatus.BELOW_MEV:
        recommended = min(mev + 2, mav)
        adjustment = VolumeAdjustment.INCREASE
        reasoning = "Volume is below the minimum effective dose. Increase gradually to drive adaptation."
        confidence = 0.9
    elif status is VolumeStatus.OPTIMAL:
        if trend is VolumeTrend.INCREASING and current < mav * 0.8:
            recommended = current + 1
            adjustment = VolumeAdjustment.INCREASE
            reasoning = "Positive progression. Add one set to keep adaptations coming."
        else:
            reasoning = "Volume is optimal. Hold it to consolidate adaptations."
    elif status is VolumeStatus.APPROACHING_MRV:
        if trend is VolumeTrend.DECREASING:
            reasoning = "Close to the limit but already trending down. Hold the current volume."
        else:
            recommended = max(current - 2, mav)
            adjustment = VolumeAdjustment.DECREASE
            reasoning = "Approaching the recoverable limit. Reduce slightly."
            weeks = 1
    else:
        recommended = mav
        adjustment = VolumeAdjustment.DELOAD
        reasoning = "Volume is compromising recovery. A deload is needed."
        confidence = 0.95
        weeks = 1

    return VolumeRecommendation(
        muscle_group=landmark.muscle_group,
        current_volume=current,
        recommended_volume=recommended,
        adjustment_type=adjustment,
        reasoning=reasoning,
        confidence=confidence,
        timeline_weeks=weeks,
    )


def optimal_volume_for_goal(
    goal: TrainingGoal,
    level: TrainingLevel,
    muscle_group: str,
) -> VolumeRange:
    """Weekly set range for ``goal`` derived from the level's landmarks."""
    group = MUSCLE_GROUPS.get(normalize_muscle_group(muscle_group))
    if group is None:
        return _FALLBACK_RANGE

    mev, mav, mrv = group.landmarks[level]
    if goal is TrainingGoal.STRENGTH:
        return VolumeRange(
            min=mev,
            optimal=round_score(mev + (mav - mev) * 0.4),
            max=round_score(mav * 0.8),
        )
    if goal is TrainingGoal.HYPERTROPHY:
        return VolumeRange(
            min=round_score(mev + (mav - mev) * 0.3),
            optimal=mav,
            max=round_score(mrv * 0.9),
        )
    return VolumeRange(
        min=round_score(mav * 0.6),
        optimal=round_score(mav * 0.8),
        max=mrv,
    )


def adaptation_response(performed: float, target: float, fatigue: float) -> AdaptationResponse:
    """Rate one week's response from completion and reported fatigue (0-10)."""
    completion = performed / target if target > 0 else 0.0
    if completion >= 1.0 and fatigue <= 6:
        return AdaptationResponse.POSITIVE
    if completion >= 0.8 and fatigue <= 8:
        return AdaptationResponse.NEUTRAL
    return AdaptationResponse.NEGATIVE

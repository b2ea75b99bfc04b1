"""
Daily readiness — composite of sleep, physical, mental and lifestyle.

Model
-----
Each component is a 0-100 score computed from the same-day sleep record
and mood check-in.  The overall score is a fixed weighted sum:

    overall = round(0.30 × sleep + 0.25 × physical + 0.25 × mental + 0.20 × lifestyle)

and maps onto a training adjustment:

    overall < 40  → reduce_intensity
    overall < 60  → reduce_volume
    overall < 80  → normal
    otherwise     → increase

Recommendations are template sentences, one group per component whose
score is under 70 (a stronger sentence under 50), followed by exactly one
sentence for the overall bucket.  The overall sentence always fires, so the
list is never empty.

Persistence
-----------
The scorers themselves are pure.  :func:`compute_readiness` is the only
entry point that touches storage, and it does so through a
:class:`ReadinessStore` passed in by the caller: fetch sleep → fetch mood
→ compute → upsert.  Missing records and storage failures come back as an
:class:`~fitcoach.core.result.Err`, never as an exception.
"""

from __future__ import annotations

import datetime
import logging
from typing import Optional, Protocol

from pydantic import BaseModel, Field

from fitcoach.core.result import Ok, Result, not_found, persistence_failed
from fitcoach.schemas import mood as mood_tags
from fitcoach.schemas.mood import MoodRecord
from fitcoach.schemas.readiness import (
    ComponentTrends,
    LifestyleComponents,
    MentalComponents,
    PhysicalComponents,
    ReadinessAssessment,
    ReadinessComponents,
    ReadinessScore,
    ReadinessStats,
    SleepComponents,
    TrainingAdjustment,
)
from fitcoach.schemas.sleep import SleepRecord
from fitcoach.scoring.common import round_score
from fitcoach.scoring.sleep import SleepScoreConfig, compute_sleep_score
from fitcoach.scoring.wellness import (
    WellnessScoreConfig,
    compute_lifestyle_score,
    compute_mental_score,
    compute_physical_score,
)

logger = logging.getLogger(__name__)

INSUFFICIENT_DATA = "Insufficient data to compute the readiness score: a sleep and a mood record are required"

# ======================================================================
# Configuration
# ======================================================================

_DEFAULT_WEIGHTS: dict[str, float] = {
    "sleep": 0.30,
    "physical": 0.25,
    "mental": 0.25,
    "lifestyle": 0.20,
}

# (upper bound exclusive, adjustment), ascending.
_ADJUSTMENT_BANDS: list[tuple[float, TrainingAdjustment]] = [
    (40, TrainingAdjustment.REDUCE_INTENSITY),
    (60, TrainingAdjustment.REDUCE_VOLUME),
    (80, TrainingAdjustment.NORMAL),
]


class ReadinessConfig(BaseModel):
    """Configuration for the composite readiness score."""

    weights: dict[str, float] = Field(default_factory=lambda: dict(_DEFAULT_WEIGHTS))
    low_threshold: float = 50
    moderate_threshold: float = 70
    sleep: SleepScoreConfig = Field(default_factory=SleepScoreConfig)
    wellness: WellnessScoreConfig = Field(default_factory=WellnessScoreConfig)


DEFAULT_READINESS_CONFIG = ReadinessConfig()


# ======================================================================
# Recommendation templates
# ======================================================================

SLEEP_LOW = (
    "Prioritise improving your sleep. Try going to bed earlier and keep a consistent schedule.",
    "Consider a short nap (20-30 minutes) today to make up for the lost sleep.",
)
SLEEP_MODERATE = ("Your sleep could improve. Avoid caffeine after midday and screens before bed.",)
PHYSICAL_LOW = "Your body needs recovery. Consider a light session or an active rest day."
PHYSICAL_MODERATE = "Adjust today's training intensity. Focus on technique and moderate volume."
MENTAL_LOW = "Your mental state shows fatigue. Spend 10 minutes on meditation or deep breathing."
MENTAL_MODERATE = "Consider activities that lift your mental state, such as an outdoor walk or gentle yoga."
LIFESTYLE_LOW = "Prioritise hydration and balanced nutrition today to support recovery."
LIFESTYLE_MODERATE = "Small lifestyle adjustments, such as better hydration, can improve your performance."

OVERALL_TEMPLATES: dict[TrainingAdjustment, str] = {
    TrainingAdjustment.REDUCE_INTENSITY: (
        "Your readiness is low. Consider a full recovery day or very light training."
    ),
    TrainingAdjustment.REDUCE_VOLUME: (
        "Reduce training volume today. Focus on quality over quantity."
    ),
    TrainingAdjustment.NORMAL: (
        "You are in a good state of readiness. Proceed with your planned training."
    ),
    TrainingAdjustment.INCREASE: (
        "Your readiness is excellent. It is a good day for a challenging workout or a key session."
    ),
}


# ======================================================================
# Pure computation
# ======================================================================


def combine_scores(
    sleep: float,
    physical: float,
    mental: float,
    lifestyle: float,
    config: Optional[ReadinessConfig] = None,
) -> int:
    """Weighted overall readiness, rounded half up."""
    w = (config or DEFAULT_READINESS_CONFIG).weights
    return round_score(
        sleep * w["sleep"]
        + physical * w["physical"]
        + mental * w["mental"]
        + lifestyle * w["lifestyle"]
    )


def determine_training_adjustment(overall_score: float) -> TrainingAdjustment:
    for upper, adjustment in _ADJUSTMENT_BANDS:
        if overall_score < upper:
            return adjustment
    return TrainingAdjustment.INCREASE


def generate_recommendations(
    sleep_score: float,
    physical_score: float,
    mental_score: float,
    lifestyle_score: float,
    overall_score: float,
    config: Optional[ReadinessConfig] = None,
) -> list[str]:
    """Build the ordered recommendation list (sleep → overall)."""
    cfg = config or DEFAULT_READINESS_CONFIG
    low, moderate = cfg.low_threshold, cfg.moderate_threshold
    recommendations: list[str] = []

    if sleep_score < low:
        recommendations.extend(SLEEP_LOW)
    elif sleep_score < moderate:
        recommendations.extend(SLEEP_MODERATE)

    for score, low_text, moderate_text in (
        (physical_score, PHYSICAL_LOW, PHYSICAL_MODERATE),
        (mental_score, MENTAL_LOW, MENTAL_MODERATE),
        (lifestyle_score, LIFESTYLE_LOW, LIFESTYLE_MODERATE),
    ):
        if score < low:
            recommendations.append(low_text)
        elif score < moderate:
            recommendations.append(moderate_text)

    recommendations.append(OVERALL_TEMPLATES[determine_training_adjustment(overall_score)])
    return recommendations


def _build_components(sleep: SleepRecord, mood: MoodRecord) -> ReadinessComponents:
    deep_pct = None
    if sleep.deep_sleep is not None and sleep.duration > 0:
        deep_pct = sleep.deep_sleep / sleep.duration * 100

    return ReadinessComponents(
        sleep=SleepComponents(
            duration=sleep.duration,
            quality=sleep.quality,
            hrv=sleep.hrv,
            resting_heart_rate=sleep.resting_heart_rate,
            deep_sleep_percentage=deep_pct,
        ),
        physical=PhysicalComponents(
            muscle_soreness=7 if mood.has_factor(mood_tags.MUSCLE_SORENESS) else 3,
            fatigue=10 - mood.energy_level,
            recovery=mood.energy_level,
        ),
        mental=MentalComponents(
            stress=mood.stress_level,
            mood=mood.mood_level,
            mental_clarity=mood.mental_clarity,
            anxiety=mood.anxiety_level,
        ),
        lifestyle=LifestyleComponents(
            nutrition=4 if mood.has_factor(mood_tags.POOR_NUTRITION) else 8,
            hydration=4 if mood.has_factor(mood_tags.DEHYDRATION) else 8,
            alcohol=bool(sleep.factors and sleep.factors.alcohol),
            active_recovery=mood.has_factor(mood_tags.ACTIVE_RECOVERY),
        ),
    )


def assess_readiness(
    sleep: SleepRecord,
    mood: MoodRecord,
    config: Optional[ReadinessConfig] = None,
) -> ReadinessAssessment:
    """Score one sleep/mood pair.  Deterministic, no I/O."""
    cfg = config or DEFAULT_READINESS_CONFIG

    sleep_score = compute_sleep_score(sleep, cfg.sleep)
    physical_score = compute_physical_score(mood, cfg.wellness)
    mental_score = compute_mental_score(mood, cfg.wellness)
    lifestyle_score = compute_lifestyle_score(sleep, mood, cfg.wellness)

    overall = combine_scores(sleep_score, physical_score, mental_score, lifestyle_score, cfg)

    return ReadinessAssessment(
        overall_score=overall,
        sleep_score=sleep_score,
        physical_score=physical_score,
        mental_score=mental_score,
        lifestyle_score=lifestyle_score,
        training_adjustment=determine_training_adjustment(overall),
        recommendations=generate_recommendations(
            sleep_score, physical_score, mental_score, lifestyle_score, overall, cfg,
        ),
        components=_build_components(sleep, mood),
    )


# ======================================================================
# Persistence boundary
# ======================================================================


class ReadinessStore(Protocol):
    """Data access needed by the readiness entry points."""

    def get_sleep_records(self, user_id: str, date: datetime.date) -> list[SleepRecord]:
        """Sleep records of ``date``, most recent first."""
        ...

    def get_mood_records(self, user_id: str, date: datetime.date) -> list[MoodRecord]:
        """Mood records of ``date``, most recent first."""
        ...

    def get_readiness(self, user_id: str, date: datetime.date) -> Optional[ReadinessScore]:
        ...

    def save_readiness(self, score: ReadinessScore) -> ReadinessScore:
        """Upsert keyed by ``(user_id, date)``; keeps ``id``/``created_at`` of an existing row."""
        ...

    def list_readiness(
        self,
        user_id: str,
        start: Optional[datetime.date] = None,
        end: Optional[datetime.date] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> list[ReadinessScore]:
        ...


# ======================================================================
# Main entry points
# ======================================================================


def compute_readiness(
    store: ReadinessStore,
    user_id: str,
    date: datetime.date,
    config: Optional[ReadinessConfig] = None,
) -> Result[ReadinessScore]:
    """Compute and cache the readiness score of ``user_id`` on ``date``.

    Args:
        store: Data-access adapter.
        user_id: User identifier.
        date: Calendar date to score.
        config: Optional config override.

    Returns:
        ``Ok(ReadinessScore)`` as persisted, ``Err(NOT_FOUND)`` when the
        sleep or mood record is missing, ``Err(PERSISTENCE_FAILED)`` when
        the store raises.
    """
    try:
        sleep_records = store.get_sleep_records(user_id, date)
        mood_records = store.get_mood_records(user_id, date)
    except Exception as exc:
        logger.exception("Failed to load readiness inputs for user=%s date=%s", user_id, date)
        return persistence_failed(exc, "Failed to load readiness inputs")

    if not sleep_records or not mood_records:
        logger.info("Readiness skipped for user=%s date=%s: missing sleep or mood record", user_id, date)
        return not_found(INSUFFICIENT_DATA)

    assessment = assess_readiness(sleep_records[0], mood_records[0], config)
    score = ReadinessScore(user_id=user_id, date=date, **assessment.model_dump())

    try:
        saved = store.save_readiness(score)
    except Exception as exc:
        logger.exception("Failed to save readiness score for user=%s date=%s", user_id, date)
        return persistence_failed(exc, "Failed to save readiness score")

    return Ok(saved)


def get_or_compute_readiness(
    store: ReadinessStore,
    user_id: str,
    date: datetime.date,
    config: Optional[ReadinessConfig] = None,
) -> Result[ReadinessScore]:
    """Return the cached score for ``date``, computing it on a cache miss."""
    try:
        cached = store.get_readiness(user_id, date)
    except Exception as exc:
        logger.exception("Failed to read readiness score for user=%s date=%s", user_id, date)
        return persistence_failed(exc, "Failed to read readiness score")

    if cached is not None:
        return Ok(cached)
    return compute_readiness(store, user_id, date, config)


def list_readiness(
    store: ReadinessStore,
    user_id: str,
    start: Optional[datetime.date] = None,
    end: Optional[datetime.date] = None,
    limit: int = 30,
    offset: int = 0,
) -> Result[list[ReadinessScore]]:
    """Cached scores of ``user_id``, most recent first."""
    try:
        return Ok(store.list_readiness(user_id, start=start, end=end, limit=limit, offset=offset))
    except Exception as exc:
        logger.exception("Failed to list readiness scores for user=%s", user_id)
        return persistence_failed(exc, "Failed to list readiness scores")


def compute_readiness_stats(scores: list[ReadinessScore]) -> ReadinessStats:
    """Aggregate a window of scores.  Trends follow ascending date order."""
    if not scores:
        return ReadinessStats()

    ordered = sorted(scores, key=lambda s: s.date)
    n = len(ordered)

    counts = {adj: 0 for adj in TrainingAdjustment}
    for s in ordered:
        counts[s.training_adjustment] += 1

    return ReadinessStats(
        average_overall_score=sum(s.overall_score for s in ordered) / n,
        average_sleep_score=sum(s.sleep_score for s in ordered) / n,
        average_physical_score=sum(s.physical_score for s in ordered) / n,
        average_mental_score=sum(s.mental_score for s in ordered) / n,
        average_lifestyle_score=sum(s.lifestyle_score for s in ordered) / n,
        trends=ComponentTrends(
            overall=[s.overall_score for s in ordered],
            sleep=[s.sleep_score for s in ordered],
            physical=[s.physical_score for s in ordered],
            mental=[s.mental_score for s in ordered],
            lifestyle=[s.lifestyle_score for s in ordered],
        ),
        dates=[s.date for s in ordered],
        training_adjustments=counts,
    )


def readiness_stats_for_window(
    store: ReadinessStore,
    user_id: str,
    days: int,
    today: datetime.date,
) -> Result[ReadinessStats]:
    """Stats over the last ``days`` days up to ``today`` (inclusive)."""
    start = today - datetime.timedelta(days=days)
    try:
        scores = store.list_readiness(user_id, start=start, end=today, limit=max(days + 1, 1))
    except Exception as exc:
        logger.exception("Failed to list readiness scores for user=%s", user_id)
        return persistence_failed(exc, "Failed to list readiness scores")
    return Ok(compute_readiness_stats(scores))

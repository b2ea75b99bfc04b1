"""
Physical, mental and lifestyle scores (0-100 each).

    physical  = energy / 10 × 50 + (10 − stress) / 10 × 50
    mental    = mood / 10 × 30 + clarity / 10 × 30 + (10 − anxiety) / 10 × 40
    lifestyle = 80 ± factor adjustments, clamped to [0, 100]

The physical and mental scores are bounded by construction for inputs on
the 0-10 scale.  The lifestyle score is the only one that needs a clamp,
because any number of factors may be set at once.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from fitcoach.schemas import mood as mood_tags
from fitcoach.schemas.mood import MoodRecord
from fitcoach.schemas.sleep import SleepRecord
from fitcoach.scoring.common import clamp_percent, round_score


class WellnessScoreConfig(BaseModel):
    """Weights for the mood-derived scores."""

    energy_weight: float = 50
    physical_stress_weight: float = 50

    mood_weight: float = 30
    clarity_weight: float = 30
    anxiety_weight: float = 40

    lifestyle_base: float = 80
    # Mood factor tag -> delta.
    mood_factor_deltas: dict[str, float] = Field(
        default_factory=lambda: {
            mood_tags.POOR_NUTRITION: -15,
            mood_tags.DEHYDRATION: -15,
            mood_tags.ACTIVE_RECOVERY: 10,
            mood_tags.GOOD_NUTRITION: 10,
        },
    )
    # SleepFactors attribute -> delta.
    sleep_factor_deltas: dict[str, float] = Field(
        default_factory=lambda: {"alcohol": -20, "stress": -10},
    )


DEFAULT_WELLNESS_CONFIG = WellnessScoreConfig()


def compute_physical_score(mood: MoodRecord, config: Optional[WellnessScoreConfig] = None) -> int:
    cfg = config or DEFAULT_WELLNESS_CONFIG
    energy = mood.energy_level / 10 * cfg.energy_weight
    # Lower stress scores higher.
    stress = (10 - mood.stress_level) / 10 * cfg.physical_stress_weight
    return round_score(energy + stress)


def compute_mental_score(mood: MoodRecord, config: Optional[WellnessScoreConfig] = None) -> int:
    cfg = config or DEFAULT_WELLNESS_CONFIG
    mood_points = mood.mood_level / 10 * cfg.mood_weight
    clarity = mood.mental_clarity / 10 * cfg.clarity_weight
    anxiety = (10 - mood.anxiety_level) / 10 * cfg.anxiety_weight
    return round_score(mood_points + clarity + anxiety)


def compute_lifestyle_score(
    sleep: SleepRecord,
    mood: MoodRecord,
    config: Optional[WellnessScoreConfig] = None,
) -> int:
    """Start from the base and apply every sleep and mood factor present."""
    cfg = config or DEFAULT_WELLNESS_CONFIG
    score = cfg.lifestyle_base

    if sleep.factors is not None:
        for attr, delta in cfg.sleep_factor_deltas.items():
            if getattr(sleep.factors, attr, False):
                score += delta

    for tag, delta in cfg.mood_factor_deltas.items():
        if mood.has_factor(tag):
            score += delta

    return round_score(clamp_percent(score))

"""
Physiological-impact estimator for a periodized session.

This is a qualitative preview, not a physiological model: the bands and
deltas below are illustrative coaching heuristics.  They are declared as
data so they can be inspected, tested rule by rule and tuned.

Pipeline
--------
1. Summarise the exercise list: mean rest, mean intensity (``10 − RIR``)
   and total volume (sets × first rep count).
2. Run the ordered rule list.  Each rule is a ``(name, predicate, effect)``
   triple over a mutable :class:`ImpactState`; later rules may add to values
   set by earlier ones.
3. Clamp every percentage to [0, 100] (recovery hours are not clamped).
4. Emit recommendations from a fixed checklist.

Defaults (used as-is for an empty session):

    metabolic stress 50, mechanical tension 50
    ATP-PC / glycolytic / oxidative  30 / 40 / 30
    type I / IIa / IIx               30 / 40 / 30
    neural / metabolic fatigue       50 / 50
    recovery                         24 h
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Optional

from pydantic import BaseModel, Field

from fitcoach.schemas.physiology import (
    EnergySystems,
    FatigueRatio,
    FiberTypeEmphasis,
    PhysiologicalAnalysis,
    RecoveryTime,
)
from fitcoach.schemas.session import PeriodizedExercise, PeriodizedSession, TechniqueType
from fitcoach.scoring.common import clamp_percent

_LEADING_INT = re.compile(r"\s*(\d+)")

# Rest assumed when an exercise does not prescribe one (seconds).
DEFAULT_REST_SECONDS = 60

PERCENT_FIELDS = (
    "metabolic_stress",
    "mechanical_tension",
    "atp_pc",
    "glycolytic",
    "oxidative",
    "type_i",
    "type_iia",
    "type_iix",
    "neural",
    "metabolic",
)

# ======================================================================
# Configuration
# ======================================================================


class TechniqueEffect(BaseModel):
    """Additive deltas applied once per attached technique."""

    metabolic_stress: float = 0
    atp_pc: float = 0
    glycolytic: float = 0
    neural: float = 0
    metabolic: float = 0
    recovery_hours: float = 0


_INTENSIFIER = TechniqueEffect(metabolic_stress=15, recovery_hours=12, metabolic=10)
_CLUSTER = TechniqueEffect(atp_pc=15, neural=10)
_COMPOUND_SET = TechniqueEffect(metabolic_stress=20, glycolytic=15, recovery_hours=8)


class PhysiologyConfig(BaseModel):
    """Band edges and deltas of the estimator."""

    short_rest: float = 45
    long_rest: float = 120
    metabolic_rest: float = 60
    high_intensity: float = 8
    moderate_intensity: float = 6
    high_volume: float = 150

    high_fatigue: float = 70
    low_readiness: float = 30
    fatigue_recovery_hours: float = 12
    readiness_recovery_hours: float = 8

    alert_threshold: float = 70
    long_recovery_hours: float = 36

    technique_effects: dict[TechniqueType, TechniqueEffect] = Field(
        default_factory=lambda: {
            TechniqueType.REST_PAUSE: _INTENSIFIER,
            TechniqueType.DROP_SET: _INTENSIFIER,
            TechniqueType.MYO_REPS: _INTENSIFIER,
            TechniqueType.CLUSTER_SET: _CLUSTER,
            TechniqueType.SUPERSET: _COMPOUND_SET,
            TechniqueType.GIANT_SET: _COMPOUND_SET,
        },
    )


DEFAULT_PHYSIOLOGY_CONFIG = PhysiologyConfig()

# ======================================================================
# Working state
# ======================================================================


@dataclass
class ImpactState:
    """Mutable accumulator the rules operate on."""

    session: PeriodizedSession
    user_fatigue: float
    user_readiness: float
    config: PhysiologyConfig

    avg_rest: float = 0.0
    avg_intensity: float = 0.0
    total_volume: float = 0.0

    metabolic_stress: float = 50
    mechanical_tension: float = 50
    atp_pc: float = 30
    glycolytic: float = 40
    oxidative: float = 30
    type_i: float = 30
    type_iia: float = 40
    type_iix: float = 30
    neural: float = 50
    metabolic: float = 50
    recovery_hours: float = 24

    recommendations: list[str] = field(default_factory=list)

    @property
    def has_exercises(self) -> bool:
        return bool(self.session.exercises)

    def set(self, **values: float) -> None:
        for name, value in values.items():
            setattr(self, name, value)

    def add(self, effect: TechniqueEffect) -> None:
        for name, delta in effect.model_dump().items():
            setattr(self, name, getattr(self, name) + delta)


Predicate = Callable[[ImpactState], bool]
Effect = Callable[[ImpactState], None]


@dataclass(frozen=True)
class Rule:
    name: str
    predicate: Predicate
    effect: Effect


# ======================================================================
# Session summary
# ======================================================================


def first_rep_count(reps: str) -> int:
    """Leading integer of a rep prescription (``"8-12"`` → 8); 0 if none."""
    match = _LEADING_INT.match(reps or "")
    return int(match.group(1)) if match else 0


def _exercise_rest(ex: PeriodizedExercise) -> float:
    # A zero rest reads as "not prescribed".
    return ex.rest_seconds or DEFAULT_REST_SECONDS


def _summarise(state: ImpactState) -> None:
    exercises = state.session.exercises
    n = len(exercises)
    state.total_volume = sum(ex.sets * first_rep_count(ex.reps) for ex in exercises)
    state.avg_intensity = sum(10 - (ex.rir or 0) for ex in exercises) / n
    state.avg_rest = sum(_exercise_rest(ex) for ex in exercises) / n


# ======================================================================
# Rules
# ======================================================================


def _short_rest(s: ImpactState) -> bool:
    return s.avg_rest < s.config.short_rest


def _long_rest(s: ImpactState) -> bool:
    return s.avg_rest > s.config.long_rest


def _apply_techniques(s: ImpactState) -> None:
    for technique in s.session.special_techniques:
        if technique.parameters is None:
            continue
        effect = s.config.technique_effects.get(technique.parameters.type)
        if effect is not None:
            s.add(effect)


def _recommend(text: str) -> Effect:
    return lambda s: s.recommendations.append(text)


SESSION_RULES: list[Rule] = [
    Rule("summary", lambda s: s.has_exercises, _summarise),

    # Stimulus balance and energy systems, by mean rest.
    Rule(
        "short_rest",
        lambda s: s.has_exercises and _short_rest(s),
        lambda s: s.set(metabolic_stress=80, mechanical_tension=40,
                        atp_pc=20, glycolytic=70, oxidative=10),
    ),
    Rule(
        "moderate_rest",
        lambda s: s.has_exercises and not _short_rest(s) and not _long_rest(s),
        lambda s: s.set(metabolic_stress=50, mechanical_tension=50,
                        atp_pc=40, glycolytic=50, oxidative=10),
    ),
    Rule(
        "long_rest",
        lambda s: s.has_exercises and _long_rest(s),
        lambda s: s.set(metabolic_stress=30, mechanical_tension=80,
                        atp_pc=60, glycolytic=30, oxidative=10),
    ),

    # Fibre-type emphasis, by mean intensity.
    Rule(
        "high_intensity_fibres",
        lambda s: s.has_exercises and s.avg_intensity > s.config.high_intensity,
        lambda s: s.set(type_i=10, type_iia=30, type_iix=60),
    ),
    Rule(
        "moderate_intensity_fibres",
        lambda s: s.has_exercises
        and s.config.moderate_intensity < s.avg_intensity <= s.config.high_intensity,
        lambda s: s.set(type_i=15, type_iia=60, type_iix=25),
    ),
    Rule(
        "low_intensity_fibres",
        lambda s: s.has_exercises and s.avg_intensity <= s.config.moderate_intensity,
        lambda s: s.set(type_i=50, type_iia=40, type_iix=10),
    ),

    # Fatigue type.
    Rule(
        "neural_fatigue",
        lambda s: s.has_exercises and s.avg_intensity > s.config.high_intensity and _long_rest(s),
        lambda s: s.set(neural=70, metabolic=30),
    ),
    Rule(
        "metabolic_fatigue",
        lambda s: s.has_exercises
        and not (s.avg_intensity > s.config.high_intensity and _long_rest(s))
        and s.avg_rest < s.config.metabolic_rest,
        lambda s: s.set(neural=30, metabolic=70),
    ),

    # Base recovery window.
    Rule(
        "high_volume_recovery",
        lambda s: s.has_exercises and s.total_volume > s.config.high_volume,
        lambda s: s.set(recovery_hours=48),
    ),
    Rule(
        "high_intensity_recovery",
        lambda s: s.has_exercises
        and s.total_volume <= s.config.high_volume
        and s.avg_intensity > s.config.high_intensity,
        lambda s: s.set(recovery_hours=36),
    ),

    Rule("techniques", lambda s: s.has_exercises, _apply_techniques),

    # User state.
    Rule(
        "user_fatigue",
        lambda s: s.user_fatigue > s.config.high_fatigue,
        lambda s: s.set(recovery_hours=s.recovery_hours + s.config.fatigue_recovery_hours),
    ),
    Rule(
        "user_readiness",
        lambda s: s.user_readiness < s.config.low_readiness,
        lambda s: s.set(recovery_hours=s.recovery_hours + s.config.readiness_recovery_hours),
    ),

    Rule("clamp", lambda s: True, lambda s: s.set(**{f: clamp_percent(getattr(s, f)) for f in PERCENT_FIELDS})),
]

RECOMMENDATION_RULES: list[Rule] = [
    Rule(
        "metabolic_stress",
        lambda s: s.metabolic_stress > s.config.alert_threshold,
        _recommend("Make sure you are well hydrated and have enough carbohydrate available "
                   "for this high-metabolic-stress session."),
    ),
    Rule(
        "mechanical_tension",
        lambda s: s.mechanical_tension > s.config.alert_threshold,
        _recommend("Warm up thoroughly to prepare joints and tendons for the high mechanical tension."),
    ),
    Rule(
        "neural_fatigue",
        lambda s: s.neural > s.config.alert_threshold,
        _recommend("Consider scheduling a full rest day after this session to let the "
                   "central nervous system recover."),
    ),
    Rule(
        "long_recovery",
        lambda s: s.recovery_hours > s.config.long_recovery_hours,
        _recommend("Prioritise sleep and post-workout nutrition to recover from this demanding session."),
    ),
    Rule(
        "user_fatigue",
        lambda s: s.user_fatigue > s.config.high_fatigue,
        _recommend("Your fatigue is high. Consider reducing volume or intensity by 20% for this session."),
    ),
    Rule(
        "user_readiness",
        lambda s: s.user_readiness < s.config.low_readiness,
        _recommend("Your readiness is low. Stick to basic compound exercises and avoid "
                   "advanced techniques in this session."),
    ),
]


def recovery_recommendation(hours: float) -> str:
    if hours <= 24:
        return "You can train the same muscle group again after 24 hours if needed."
    if hours <= 36:
        return "Wait at least 36 hours before training the same muscle groups again."
    return "Allow at least 48 hours of recovery before training these muscle groups again."


def run_rules(state: ImpactState, rules: list[Rule]) -> ImpactState:
    """Apply each rule whose predicate holds, in order."""
    for rule in rules:
        if rule.predicate(state):
            rule.effect(state)
    return state


# ======================================================================
# Main entry point
# ======================================================================


def estimate_physiological_impact(
    session: PeriodizedSession,
    user_fatigue: float = 50,
    user_readiness: float = 50,
    config: Optional[PhysiologyConfig] = None,
) -> PhysiologicalAnalysis:
    """Estimate the stimulus profile and recovery cost of ``session``.

    Args:
        session: The planned session.
        user_fatigue: Current fatigue 0-100.
        user_readiness: Current readiness 0-100.
        config: Optional config override.
    """
    state = ImpactState(
        session=session,
        user_fatigue=user_fatigue,
        user_readiness=user_readiness,
        config=config or DEFAULT_PHYSIOLOGY_CONFIG,
    )
    run_rules(state, SESSION_RULES)
    run_rules(state, RECOMMENDATION_RULES)

    return PhysiologicalAnalysis(
        metabolic_stress=state.metabolic_stress,
        mechanical_tension=state.mechanical_tension,
        energy_systems=EnergySystems(
            atp_pc=state.atp_pc, glycolytic=state.glycolytic, oxidative=state.oxidative,
        ),
        recovery_time=RecoveryTime(
            hours=state.recovery_hours,
            recommendation=recovery_recommendation(state.recovery_hours),
        ),
        fiber_type_emphasis=FiberTypeEmphasis(
            type_i=state.type_i, type_iia=state.type_iia, type_iix=state.type_iix,
        ),
        fatigue_ratio=FatigueRatio(neural=state.neural, metabolic=state.metabolic),
        recommendations=state.recommendations,
    )

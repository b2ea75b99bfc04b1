"""
Physiological-impact analysis schemas.

Percentages are 0-100 and each group (energy systems, fibre types, fatigue
types) starts from a split summing to 100.  Technique bonuses can push a
group above 100 in total; the ``*_distribution`` fields carry the same
groups renormalised to 100.
"""

from pydantic import BaseModel, Field, computed_field


def _normalise(values: dict[str, float]) -> dict[str, float]:
    total = sum(values.values())
    if total <= 0:
        return {k: 0.0 for k in values}
    return {k: v / total * 100 for k, v in values.items()}


class EnergySystems(BaseModel):
    atp_pc: float = Field(..., ge=0, le=100)
    glycolytic: float = Field(..., ge=0, le=100)
    oxidative: float = Field(..., ge=0, le=100)


class FiberTypeEmphasis(BaseModel):
    type_i: float = Field(..., ge=0, le=100)
    type_iia: float = Field(..., ge=0, le=100)
    type_iix: float = Field(..., ge=0, le=100)


class FatigueRatio(BaseModel):
    neural: float = Field(..., ge=0, le=100)
    metabolic: float = Field(..., ge=0, le=100)


class RecoveryTime(BaseModel):
    hours: float = Field(..., ge=0)
    recommendation: str


class PhysiologicalAnalysis(BaseModel):
    """Qualitative stimulus profile of a periodized session."""

    metabolic_stress: float = Field(..., ge=0, le=100)
    mechanical_tension: float = Field(..., ge=0, le=100)
    energy_systems: EnergySystems
    recovery_time: RecoveryTime
    fiber_type_emphasis: FiberTypeEmphasis
    fatigue_ratio: FatigueRatio
    recommendations: list[str]

    @computed_field
    @property
    def energy_distribution(self) -> dict[str, float]:
        return _normalise(self.energy_systems.model_dump())

    @computed_field
    @property
    def fiber_distribution(self) -> dict[str, float]:
        return _normalise(self.fiber_type_emphasis.model_dump())

    @computed_field
    @property
    def fatigue_distribution(self) -> dict[str, float]:
        return _normalise(self.fatigue_ratio.model_dump())

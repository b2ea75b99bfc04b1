"""What would the readiness score say over a rough week?

Scores seven hand-written days of sleep and mood check-ins with the pure
scorers (no database), then previews the physiological impact of a
planned hypertrophy session at the last day's readiness.
"""

import datetime

from fitcoach.schemas.mood import MoodRecord
from fitcoach.schemas.session import (
    PeriodizedExercise,
    PeriodizedSession,
    SpecialTechnique,
    TechniqueParameters,
    TechniqueType,
)
from fitcoach.schemas.sleep import SleepFactors, SleepRecord
from fitcoach.scoring.physiology import estimate_physiological_impact
from fitcoach.scoring.readiness import assess_readiness

START = datetime.date(2026, 10, 12)

# (duration min, quality, hrv, rhr, alcohol, energy, stress, mood, clarity, anxiety, factors)
DAYS = [
    (470, 8, 68, 51, False, 8, 3, 8, 8, 2, ["good_nutrition"]),
    (430, 7, 62, 53, False, 7, 4, 7, 7, 3, []),
    (390, 6, 55, 56, False, 6, 5, 6, 6, 4, ["muscle_soreness"]),
    (320, 4, 44, 61, True, 4, 7, 5, 4, 6, ["dehydration"]),
    (360, 5, None, None, False, 5, 6, 5, 5, 5, []),
    (480, 8, 71, 49, False, 8, 2, 8, 9, 2, ["active_recovery"]),
    (450, 7, 66, 52, False, 7, 3, 7, 8, 3, []),
]

SESSION = PeriodizedSession(
    name="Upper hypertrophy",
    exercises=[
        PeriodizedExercise(name="Bench press", sets=4, reps="6-8", rir=2, rest_seconds=150),
        PeriodizedExercise(name="Chest-supported row", sets=4, reps="8-10", rir=2, rest_seconds=120),
        PeriodizedExercise(name="Lateral raise", sets=3, reps="12-15", rir=1, rest_seconds=60),
    ],
    special_techniques=[
        SpecialTechnique(name="Lateral raise myo-reps", parameters=TechniqueParameters(type=TechniqueType.MYO_REPS)),
    ],
)


def main():
    print(f"{'date':<12}{'sleep':>6}{'phys':>6}{'ment':>6}{'life':>6}{'all':>6}  adjustment")
    last = None
    for offset, row in enumerate(DAYS):
        day = START + datetime.timedelta(days=offset)
        duration, quality, hrv, rhr, alcohol, energy, stress, mood, clarity, anxiety, factors = row
        sleep = SleepRecord(date=day, duration=duration, quality=quality, hrv=hrv,
                            resting_heart_rate=rhr, factors=SleepFactors(alcohol=alcohol))
        check_in = MoodRecord(date=day, mood_level=mood, energy_level=energy, stress_level=stress,
                              anxiety_level=anxiety, mental_clarity=clarity, factors=factors)
        last = assess_readiness(sleep, check_in)
        print(f"{day.isoformat():<12}{last.sleep_score:>6}{last.physical_score:>6}{last.mental_score:>6}"
              f"{last.lifestyle_score:>6}{last.overall_score:>6}  {last.training_adjustment.value}")

    print()
    for line in last.recommendations:
        print(f"  - {line}")

    impact = estimate_physiological_impact(SESSION, user_fatigue=100 - last.physical_score,
                                           user_readiness=last.overall_score)
    print()
    print(f"Session '{SESSION.name}':")
    print(f"  metabolic stress {impact.metabolic_stress:.0f}, mechanical tension {impact.mechanical_tension:.0f}")
    print(f"  energy systems {impact.energy_distribution}")
    print(f"  recovery {impact.recovery_time.hours:.0f} h: {impact.recovery_time.recommendation}")
    for line in impact.recommendations:
        print(f"  - {line}")


if __name__ == "__main__":
    main()

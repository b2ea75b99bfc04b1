"""
Sleep score — maps one night to a 0-100 score.

Four weighted sub-scores:

    duration   0-40   (bucketed at 5h / 6h / 7h / 8h)
    quality    0-30   (linear, quality / 10 × 30)
    HRV        0-15   (bucketed at 40 / 50 / 60 / 70 ms)
    resting HR 0-15   (bucketed at 50 / 55 / 60 / 65 / 70 bpm, lower is better)

When HRV or resting HR is missing only duration + quality are summed and
the result is rescaled from 70 to 100 points.  No clamp is applied after
the rescale: the bound holds only while ``duration_max + quality_max`` equals
``partial_max``, which :class:`SleepScoreConfig` exposes for the tests.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from fitcoach.schemas.sleep import SleepRecord
from fitcoach.scoring.common import bucket, bucket_below, round_score


class SleepScoreConfig(BaseModel):
    """Bucket tables for the sleep score."""

    # (min minutes, points), descending
    duration_steps: list[tuple[float, float]] = Field(
        default_factory=lambda: [(480, 40), (420, 35), (360, 25), (300, 15)],
    )
    duration_floor: float = 5
    quality_max: float = 30
    # (min ms, points), descending
    hrv_steps: list[tuple[float, float]] = Field(
        default_factory=lambda: [(70, 15), (60, 12), (50, 9), (40, 6)],
    )
    hrv_floor: float = 3
    # (bpm upper bound exclusive, points), ascending
    rhr_steps: list[tuple[float, float]] = Field(
        default_factory=lambda: [(50, 15), (55, 12), (60, 9), (65, 6), (70, 3)],
    )
    rhr_floor: float = 0
    # Points available without device metrics.
    partial_max: float = 70

    @property
    def duration_max(self) -> float:
        return max(points for _, points in self.duration_steps)


DEFAULT_SLEEP_CONFIG = SleepScoreConfig()


def duration_points(minutes: float, config: Optional[SleepScoreConfig] = None) -> float:
    cfg = config or DEFAULT_SLEEP_CONFIG
    return bucket(minutes, cfg.duration_steps, cfg.duration_floor)


def quality_points(quality: float, config: Optional[SleepScoreConfig] = None) -> float:
    cfg = config or DEFAULT_SLEEP_CONFIG
    return quality / 10 * cfg.quality_max


def hrv_points(hrv: float, config: Optional[SleepScoreConfig] = None) -> float:
    cfg = config or DEFAULT_SLEEP_CONFIG
    return bucket(hrv, cfg.hrv_steps, cfg.hrv_floor)


def resting_hr_points(bpm: float, config: Optional[SleepScoreConfig] = None) -> float:
    cfg = config or DEFAULT_SLEEP_CONFIG
    return bucket_below(bpm, cfg.rhr_steps, cfg.rhr_floor)


def compute_sleep_score(record: SleepRecord, config: Optional[SleepScoreConfig] = None) -> int:
    """Compute the 0-100 sleep score of ``record``."""
    cfg = config or DEFAULT_SLEEP_CONFIG

    total = duration_points(record.duration, cfg) + quality_points(record.quality, cfg)

    # A zero reading counts as missing, as it does on device exports.
    if record.hrv and record.resting_heart_rate:
        total += hrv_points(record.hrv, cfg) + resting_hr_points(record.resting_heart_rate, cfg)
    else:
        total = total / cfg.partial_max * 100

    return round_score(total)

"""Numeric helpers shared by the scorers."""

from __future__ import annotations

import math
from typing import Sequence


def clamp_percent(value: float) -> float:
    """Clamp ``value`` into ``[0, 100]``."""
    return max(0.0, min(100.0, value))


def round_score(value: float) -> int:
    """Round half up (2.5 → 3), the rounding used by every score."""
    return int(math.floor(value + 0.5))


def bucket(value: float, steps: Sequence[tuple[float, float]], default: float) -> float:
    """Return the points of the first ``(threshold, points)`` step with
    ``value >= threshold``; ``default`` when none matches.

    ``steps`` must be ordered by descending threshold.
    """
    for threshold, points in steps:
        if value >= threshold:
            return points
    return default


def bucket_below(value: float, steps: Sequence[tuple[float, float]], default: float) -> float:
    """Like :func:`bucket` but matches ``value < threshold``.

    ``steps`` must be ordered by ascending threshold.
    """
    for threshold, points in steps:
        if value < threshold:
            return points
    return default

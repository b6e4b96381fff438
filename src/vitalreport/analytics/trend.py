"""Coarse trend classification by first-half / second-half mean comparison."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from vitalreport.samples import finite_array

INCREASING = "increasing"
DECREASING = "decreasing"
STABLE = "stable"

# Percent change between half-means needed to call a trend
TREND_THRESHOLD_PCT = 5.0


def percent_change(values: Sequence[float]) -> float | None:
    """Percent change of the second-half mean relative to the first-half mean.

    The first half is ``values[:n // 2]``; for odd *n* the extra point goes to
    the second half.  Returns None with fewer than 2 points or when the
    first-half mean is zero.
    """
    arr = finite_array(values, "trend input")
    if len(arr) < 2:
        return None

    mid = len(arr) // 2
    first_mean = float(np.mean(arr[:mid]))
    second_mean = float(np.mean(arr[mid:]))
    if first_mean == 0.0:
        return None
    return (second_mean - first_mean) / first_mean * 100.0


def classify_trend(
    values: Sequence[float],
    threshold_pct: float = TREND_THRESHOLD_PCT,
) -> str:
    """Classify a time-ordered series as increasing, decreasing or stable.

    Fewer than 2 points, or a zero first-half mean, is ``"stable"``.
    """
    change = percent_change(values)
    if change is None:
        return STABLE
    if change > threshold_pct:
        return INCREASING
    if change < -threshold_pct:
        return DECREASING
    return STABLE

"""Hour-of-day bucketing of signal averages.

Hours come from each timestamp's own wall-clock hour; timestamps are not
normalized to UTC, so samples from different offsets share buckets by
local hour.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from vitalreport.samples import HEART_RATE, LACTATE, SPO2, Sample, ensure_finite

# Signals bucketed by default
TREND_SIGNALS = (HEART_RATE, SPO2, LACTATE)


@dataclass
class HourlyTrendPoint:
    """Average of one signal over all samples in one hour of the day."""

    hour: int  # 0-23
    average: float
    count: int = 1

    def to_dict(self) -> dict[str, float | int]:
        return {"hour": self.hour, "average": self.average, "count": self.count}


def hourly_trends(
    samples: Sequence[Sample],
    signals: Sequence[str] = TREND_SIGNALS,
) -> dict[str, list[HourlyTrendPoint]]:
    """Average each signal per hour of the day.

    Returns:
        ``{signal: [HourlyTrendPoint, ...]}`` with one point per hour that had
        at least one reading of that signal.  Points are in the order each
        hour was first seen, not sorted by hour; sort explicitly if needed.
    """
    buckets: dict[int, dict[str, list[float]]] = {}

    for s in samples:
        hour = s.timestamp.hour
        bucket = buckets.setdefault(hour, {name: [] for name in signals})
        for name in signals:
            value = s.signal(name)
            if value is not None:
                bucket[name].append(ensure_finite(value, name))

    trends: dict[str, list[HourlyTrendPoint]] = {name: [] for name in signals}
    for hour, bucket in buckets.items():
        for name in signals:
            values = bucket[name]
            if values:
                trends[name].append(HourlyTrendPoint(
                    hour=hour,
                    average=float(np.mean(values)),
                    count=len(values),
                ))
    return trends


def trends_to_dict(trends: dict[str, list[HourlyTrendPoint]]) -> dict[str, list[dict]]:
    """JSON-friendly form of :func:`hourly_trends` output."""
    return {name: [p.to_dict() for p in points] for name, points in trends.items()}

"""Per-signal aggregate statistics (average, min, max, trend).

Only samples where the signal is present take part.  Presence is an
explicit ``is not None`` check, so a recorded ``0`` counts as a reading.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Sequence

import numpy as np

from vitalreport.samples import (
    HEART_RATE,
    LACTATE,
    SPO2,
    Sample,
    ensure_finite,
    finite_array,
)
from vitalreport.analytics.trend import STABLE, classify_trend


# Decimal places used when rounding the average of each signal
AVERAGE_PRECISION = {
    HEART_RATE: 1,
    SPO2: 1,
    LACTATE: 2,
}
DEFAULT_PRECISION = 1


@dataclass
class SignalStats:
    """Aggregate statistics for one signal over a window.

    All numeric fields are None when the signal never appeared.
    """

    average: float | None = None
    min: float | None = None
    max: float | None = None
    trend: str = STABLE
    count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def __repr__(self) -> str:
        if self.average is None:
            return "SignalStats(no data)"
        return (
            f"SignalStats(avg={self.average}, "
            f"min={self.min}, max={self.max}, "
            f"trend={self.trend}, n={self.count})"
        )


def signal_values(samples: Sequence[Sample], signal: str) -> list[float]:
    """Extract the present values of *signal*, keeping time order.

    Raises:
        InvalidSampleError: a present value is not a finite number.
    """
    values: list[float] = []
    for s in samples:
        value = s.signal(signal)
        if value is not None:
            values.append(ensure_finite(value, signal))
    return values


def series_stats(values: Sequence[float], precision: int = DEFAULT_PRECISION) -> SignalStats:
    """Compute SignalStats for an already-extracted, time-ordered series."""
    arr = finite_array(values, "series")
    if len(arr) == 0:
        return SignalStats()

    return SignalStats(
        average=round(float(np.mean(arr)), precision),
        min=float(np.min(arr)),
        max=float(np.max(arr)),
        trend=classify_trend(arr),
        count=len(arr),
    )


def signal_stats(samples: Sequence[Sample], signal: str) -> SignalStats:
    """Compute SignalStats for *signal* across a time-ordered sample sequence."""
    precision = AVERAGE_PRECISION.get(signal, DEFAULT_PRECISION)
    return series_stats(signal_values(samples, signal), precision=precision)

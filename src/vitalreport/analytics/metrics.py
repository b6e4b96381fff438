"""MetricsResult: the bundle of per-signal stats and waveform analysis.

A MetricsResult is recomputed from scratch for every report; nothing is
cached or updated incrementally.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Sequence

from vitalreport.samples import HEART_RATE, LACTATE, SPO2, Sample
from vitalreport.analytics.stats import SignalStats, signal_stats
from vitalreport.analytics.waveform import WaveformAnalysis, analyze_waveform_samples


@dataclass
class MetricsResult:
    """Aggregate metrics for one subject over one window."""

    heart_rate: SignalStats = field(default_factory=SignalStats)
    lactate: SignalStats = field(default_factory=SignalStats)
    spo2: SignalStats = field(default_factory=SignalStats)
    waveform: WaveformAnalysis = field(default_factory=WaveformAnalysis)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict (JSON-friendly)."""
        lactate = self.lactate.to_dict()
        # peak lactate is reported as the session "threshold"
        lactate["threshold"] = self.lactate.max
        return {
            "heart_rate": self.heart_rate.to_dict(),
            "waveform": self.waveform.to_dict(),
            "lactate": lactate,
            "spo2": self.spo2.to_dict(),
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def __repr__(self) -> str:
        return (
            f"MetricsResult(hr={self.heart_rate.average}, "
            f"spo2={self.spo2.average}, "
            f"lactate={self.lactate.average}, "
            f"waveform={self.waveform.rhythm}/{self.waveform.quality})"
        )


def calculate_metrics(samples: Sequence[Sample]) -> MetricsResult:
    """Compute a MetricsResult from a time-ordered sample sequence.

    Args:
        samples: Samples for one subject, ascending by timestamp.

    Returns:
        A fresh MetricsResult.  Signals that never appear yield null stats.

    Raises:
        InvalidSampleError: a present signal value is not a finite number.
    """
    return MetricsResult(
        heart_rate=signal_stats(samples, HEART_RATE),
        lactate=signal_stats(samples, LACTATE),
        spo2=signal_stats(samples, SPO2),
        waveform=analyze_waveform_samples(samples),
    )

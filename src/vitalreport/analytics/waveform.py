"""Quality, rhythm and abnormality heuristics for the ECG-like waveform.

The waveform channel is a single noisy amplitude series (mV).  These
heuristics work on absolute amplitudes and successive differences rather
than on beat detection, so they are cheap and need no sampling rate.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Any, Sequence

import numpy as np

from vitalreport.samples import Sample, WAVEFORM, finite_array
from vitalreport.analytics.stats import signal_values

NO_DATA = "No data"

# ---------------------------------------------------------------------------
# Abnormality thresholds (absolute amplitude, mV)
# ---------------------------------------------------------------------------

HIGH_AMPLITUDE_MV = 2.5
LOW_SIGNAL_MV = 0.1

HIGH_AMPLITUDE = "High amplitude"
LOW_SIGNAL = "Low signal"

# Mean successive |difference| upper bounds -> rhythm label
RHYTHM_BANDS = [
    (0.1, "Regular"),
    (0.3, "Slightly irregular"),
]
RHYTHM_FALLBACK = "Irregular"

# Mean |amplitude| upper bounds -> quality label
QUALITY_BANDS = [
    (0.5, "Excellent"),
    (1.0, "Good"),
    (1.5, "Fair"),
]
QUALITY_FALLBACK = "Poor"


@dataclass
class WaveformAnalysis:
    """Abnormality flags plus rhythm and quality labels."""

    abnormalities: list[str] = field(default_factory=list)
    rhythm: str = NO_DATA
    quality: str = NO_DATA

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _as_array(values: Sequence[float]) -> np.ndarray:
    return finite_array(values, "waveform")


def _band(value: float, bands: list[tuple[float, str]], fallback: str) -> str:
    for upper, label in bands:
        if value < upper:
            return label
    return fallback


def detect_abnormalities(values: Sequence[float]) -> list[str]:
    """Flag high amplitude (max |v| > 2.5) and low signal (min |v| < 0.1)."""
    arr = _as_array(values)
    if len(arr) == 0:
        return []

    amplitudes = np.abs(arr)
    flags: list[str] = []
    if float(np.max(amplitudes)) > HIGH_AMPLITUDE_MV:
        flags.append(HIGH_AMPLITUDE)
    if float(np.min(amplitudes)) < LOW_SIGNAL_MV:
        flags.append(LOW_SIGNAL)
    return flags


def classify_rhythm(values: Sequence[float]) -> str:
    """Label rhythm regularity from the mean successive absolute difference.

    Needs at least two points; otherwise ``"No data"``.
    """
    arr = _as_array(values)
    if len(arr) < 2:
        return NO_DATA

    variation = float(np.mean(np.abs(np.diff(arr))))
    return _band(variation, RHYTHM_BANDS, RHYTHM_FALLBACK)


def assess_quality(values: Sequence[float]) -> str:
    """Label signal quality from the mean absolute amplitude (noise level)."""
    arr = _as_array(values)
    if len(arr) == 0:
        return NO_DATA

    noise_level = float(np.mean(np.abs(arr)))
    return _band(noise_level, QUALITY_BANDS, QUALITY_FALLBACK)


def analyze_waveform(values: Sequence[float]) -> WaveformAnalysis:
    """Run all three waveform heuristics on one series."""
    return WaveformAnalysis(
        abnormalities=detect_abnormalities(values),
        rhythm=classify_rhythm(values),
        quality=assess_quality(values),
    )


def analyze_waveform_samples(samples: Sequence[Sample]) -> WaveformAnalysis:
    """Extract the waveform channel from *samples* and analyze it."""
    return analyze_waveform(signal_values(samples, WAVEFORM))

"""Simulated vital-sign feed for demos and load testing.

Produces one sample per tick with every signal populated, using the same
value ranges as the live dashboard feed:

    heart rate   60-99 bpm (integer)
    waveform     -1..1 mV
    lactate      1..9 mmol/L
    SpO2         90-99 % (integer)
    temperature  36..39 C
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Iterator

import numpy as np

from vitalreport.samples import InvalidSampleError, Sample

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SEC = 2.0


def simulate_samples(
    count: int,
    start: datetime | None = None,
    interval_sec: float = DEFAULT_INTERVAL_SEC,
    seed: int | None = None,
    session_id: str = "simulated",
) -> Iterator[Sample]:
    """Return an iterator of *count* simulated samples, *interval_sec* apart.

    Arguments are checked here, before any sample is generated.

    Args:
        count: Number of samples to generate.
        start: Timestamp of the first sample (default: now, local time).
        interval_sec: Spacing between samples.
        seed: Seed for reproducible output.
        session_id: Session tag stamped on every sample.
    """
    if count < 0:
        raise InvalidSampleError(f"count must be >= 0, got {count}")
    if interval_sec <= 0:
        raise InvalidSampleError(f"interval must be positive, got {interval_sec}")

    t0 = start if start is not None else datetime.now()
    logger.debug("Simulating %d samples from %s every %.1fs", count, t0, interval_sec)
    return _generate(count, t0, interval_sec, np.random.default_rng(seed), session_id)


def _generate(
    count: int,
    t0: datetime,
    interval_sec: float,
    rng: np.random.Generator,
    session_id: str,
) -> Iterator[Sample]:
    for i in range(count):
        yield Sample(
            timestamp=t0 + timedelta(seconds=i * interval_sec),
            heart_rate=float(rng.integers(60, 100)),
            waveform=round(float(rng.uniform(-1.0, 1.0)), 4),
            lactate=round(float(rng.uniform(1.0, 9.0)), 2),
            spo2=float(rng.integers(90, 100)),
            temperature=round(float(rng.uniform(36.0, 39.0)), 2),
            session_id=session_id,
        )

"""Shared fixtures and helpers for the vitalreport test suite."""

from __future__ import annotations

import json
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from vitalreport.samples import Sample

T0 = datetime(2024, 2, 13, 9, 0, 0)


# ---------------------------------------------------------------------------
# Sample-building helpers
# ---------------------------------------------------------------------------


def make_series(
    signal: str,
    values: list[float | None],
    start: datetime = T0,
    step_sec: float = 60.0,
) -> list[Sample]:
    """Build one sample per value, *step_sec* apart, with only *signal* set."""
    return [
        Sample(timestamp=start + timedelta(seconds=i * step_sec), **{signal: v})
        for i, v in enumerate(values)
    ]


def make_record(
    timestamp: str = "2024-02-13T09:00:00",
    **signals,
) -> dict:
    """Create a single camelCase sample record as sent by the dashboard."""
    return {"timestamp": timestamp, **signals}


# ---------------------------------------------------------------------------
# JSONL sample file helpers
# ---------------------------------------------------------------------------


def write_jsonl(path: Path, entries: list[dict]) -> Path:
    """Write a list of dicts as JSONL to the given path."""
    with open(path, "w") as f:
        for entry in entries:
            f.write(json.dumps(entry) + "\n")
    return path


@pytest.fixture
def mixed_records() -> list[dict]:
    """Five readings across two hours, waveform on some of them."""
    return [
        make_record("2024-02-13T09:00:00", heartRate=70, spo2=98, lactate=1.5, ecg=0.4),
        make_record("2024-02-13T09:30:00", heartRate=72, spo2=97, lactate=1.7, ecg=0.5),
        make_record("2024-02-13T10:00:00", heartRate=68, spo2=96),
        make_record("2024-02-13T10:15:00", heartRate=75, spo2=97, ecg=0.45),
        make_record("2024-02-13T10:30:00", heartRate=130, spo2=95, lactate=2.0),
    ]

"""Sample, blood pressure and health profile value objects.

A sample is one timestamped reading that may carry any subset of the
monitored signals.  Everything here is an immutable value object; the
analytics engine never mutates a sample sequence it is handed.

Parsing accepts both the camelCase keys emitted by the web dashboard /
socket feed (``heartRate``, ``bloodPressure`` ...) and snake_case keys.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable, Mapping, Sequence

import numpy as np


class VitalReportError(Exception):
    """Base class for all vitalreport errors."""


class InvalidSampleError(VitalReportError, ValueError):
    """A caller-supplied sample, profile or window is malformed."""


class NoSamplesError(VitalReportError):
    """A report was requested over a window with no samples."""


# ---------------------------------------------------------------------------
# Signals
# ---------------------------------------------------------------------------

HEART_RATE = "heart_rate"
WAVEFORM = "waveform"
LACTATE = "lactate"
SPO2 = "spo2"
TEMPERATURE = "temperature"
SYSTOLIC = "systolic"
DIASTOLIC = "diastolic"

# Accepted input keys -> canonical signal name
SIGNAL_ALIASES = {
    "heartRate": HEART_RATE,
    "heart_rate": HEART_RATE,
    "ecg": WAVEFORM,
    "waveform": WAVEFORM,
    "lactate": LACTATE,
    "spo2": SPO2,
    "temperature": TEMPERATURE,
}

# Plausible physiological ranges (inclusive), checked only in strict mode
PLAUSIBLE_RANGES: dict[str, tuple[float, float]] = {
    HEART_RATE: (30.0, 220.0),
    WAVEFORM: (-5.0, 5.0),
    LACTATE: (0.0, 30.0),
    SPO2: (70.0, 100.0),
    TEMPERATURE: (30.0, 45.0),
    SYSTOLIC: (70.0, 200.0),
    DIASTOLIC: (40.0, 130.0),
}


def ensure_finite(value: Any, name: str) -> float:
    """Return *value* as a float, raising InvalidSampleError if it is not a
    finite real number.  Booleans are rejected even though they are ints.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidSampleError(f"{name} must be numeric, got {value!r}")
    val = float(value)
    if not math.isfinite(val):
        raise InvalidSampleError(f"{name} must be finite, got {value!r}")
    return val


def finite_array(values: Sequence[float], name: str) -> np.ndarray:
    """Return *values* as a float64 array of finite numbers.

    Strings, booleans, None and NaN/inf raise InvalidSampleError.
    """
    try:
        raw = np.asarray(values)
    except (TypeError, ValueError) as e:
        raise InvalidSampleError(f"{name} must be a numeric series: {e}") from e
    if raw.size == 0:
        return raw.astype(np.float64).ravel()
    if raw.ndim != 1 or raw.dtype.kind not in "iuf":
        raise InvalidSampleError(f"{name} must be a flat numeric series, got {raw.dtype} values")
    arr = raw.astype(np.float64)
    if not np.all(np.isfinite(arr)):
        raise InvalidSampleError(f"{name} contains non-finite values")
    return arr


def _check_range(value: float, signal: str) -> None:
    low, high = PLAUSIBLE_RANGES[signal]
    if not (low <= value <= high):
        raise InvalidSampleError(
            f"{signal}={value} outside plausible range [{low}, {high}]"
        )


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO-8601 string, epoch seconds or datetime.

    Epoch seconds become local wall-clock datetimes.  ISO strings keep
    whatever offset they carry (a trailing ``Z`` means UTC); naive strings
    stay naive.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, bool):
        raise InvalidSampleError(f"malformed timestamp: {value!r}")
    if isinstance(value, numbers.Real):
        try:
            return datetime.fromtimestamp(ensure_finite(value, "timestamp"))
        except (OverflowError, OSError) as e:
            raise InvalidSampleError(f"malformed timestamp: {value!r}") from e
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError as e:
            raise InvalidSampleError(f"malformed timestamp: {value!r}") from e
    raise InvalidSampleError(f"malformed timestamp: {value!r}")


# ---------------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BloodPressure:
    """Systolic / diastolic pressure in mmHg.  Either side may be missing."""

    systolic: float | None = None
    diastolic: float | None = None

    def to_dict(self) -> dict[str, float | None]:
        return {"systolic": self.systolic, "diastolic": self.diastolic}


@dataclass(frozen=True)
class Sample:
    """One timestamped observation.

    Every signal is optional; ``None`` means "not measured" while ``0`` is a
    present (if implausible) reading.
    """

    timestamp: datetime
    heart_rate: float | None = None  # bpm
    waveform: float | None = None  # mV, signed
    lactate: float | None = None  # mmol/L
    spo2: float | None = None  # %
    temperature: float | None = None  # deg C
    blood_pressure: BloodPressure | None = None
    session_id: str | None = None
    device_id: str | None = None
    notes: str | None = None

    def signal(self, name: str) -> float | None:
        """Return the value of *name* (a canonical signal name) or None."""
        if name in (SYSTOLIC, DIASTOLIC):
            if self.blood_pressure is None:
                return None
            return getattr(self.blood_pressure, name)
        return getattr(self, name)

    @property
    def is_empty(self) -> bool:
        return all(
            self.signal(name) is None
            for name in (HEART_RATE, WAVEFORM, LACTATE, SPO2, TEMPERATURE, SYSTOLIC, DIASTOLIC)
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "heart_rate": self.heart_rate,
            "waveform": self.waveform,
            "lactate": self.lactate,
            "spo2": self.spo2,
            "temperature": self.temperature,
            "blood_pressure": self.blood_pressure.to_dict() if self.blood_pressure else None,
            "session_id": self.session_id,
            "device_id": self.device_id,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any], strict: bool = False) -> Sample:
        """Build a Sample from a JSON-style mapping.

        Args:
            raw: Mapping with a ``timestamp`` key and any signal keys.
            strict: Also reject values outside :data:`PLAUSIBLE_RANGES`.

        Raises:
            InvalidSampleError: missing/malformed timestamp or a signal value
                that is not a finite number.
        """
        if not isinstance(raw, Mapping):
            raise InvalidSampleError(f"sample must be an object, got {type(raw).__name__}")
        if raw.get("timestamp") is None:
            raise InvalidSampleError("sample is missing a timestamp")

        values: dict[str, float] = {}
        for key, signal in SIGNAL_ALIASES.items():
            value = raw.get(key)
            if value is None:
                continue
            values[signal] = ensure_finite(value, signal)
            if strict:
                _check_range(values[signal], signal)

        bp = None
        bp_raw = raw.get("bloodPressure", raw.get("blood_pressure"))
        if bp_raw is not None:
            if not isinstance(bp_raw, Mapping):
                raise InvalidSampleError(f"blood pressure must be an object, got {bp_raw!r}")
            sides: dict[str, float | None] = {}
            for side in (SYSTOLIC, DIASTOLIC):
                value = bp_raw.get(side)
                if value is None:
                    sides[side] = None
                    continue
                sides[side] = ensure_finite(value, side)
                if strict:
                    _check_range(sides[side], side)
            bp = BloodPressure(**sides)

        return cls(
            timestamp=parse_timestamp(raw["timestamp"]),
            blood_pressure=bp,
            session_id=raw.get("sessionId", raw.get("session_id")),
            device_id=raw.get("deviceId", raw.get("device_id")),
            notes=raw.get("notes"),
            **values,
        )


def _yes_no(value: Any, name: str) -> bool:
    """Accept booleans or the dashboard's ``"yes"``/``"no"`` strings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("yes", "no"):
        return value.lower() == "yes"
    raise InvalidSampleError(f"{name} must be a boolean or 'yes'/'no', got {value!r}")


@dataclass(frozen=True)
class HealthProfile:
    """Subject health profile.  Only the two condition flags drive rules."""

    hypertension: bool = False
    diabetes: bool = False
    age: int | None = None
    gender: str | None = None
    weight_kg: float | None = None
    height_cm: float | None = None
    lifestyle: str | None = None
    drinking: str | None = None
    smoking: str | None = None

    @property
    def bmi(self) -> float | None:
        if not self.weight_kg or not self.height_cm:
            return None
        return round(self.weight_kg / (self.height_cm / 100.0) ** 2, 1)

    def to_dict(self) -> dict[str, Any]:
        return {
            "hypertension": self.hypertension,
            "diabetes": self.diabetes,
            "age": self.age,
            "gender": self.gender,
            "weight_kg": self.weight_kg,
            "height_cm": self.height_cm,
            "lifestyle": self.lifestyle,
            "drinking": self.drinking,
            "smoking": self.smoking,
            "bmi": self.bmi,
        }

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> HealthProfile:
        if not isinstance(raw, Mapping):
            raise InvalidSampleError(f"profile must be an object, got {type(raw).__name__}")

        hypertension = raw.get("hypertension", raw.get("bpPatient", False))
        diabetes = raw.get("diabetes", raw.get("sugarPatient", False))
        weight = raw.get("weight", raw.get("weight_kg"))
        height = raw.get("height", raw.get("height_cm"))
        age = raw.get("age")

        return cls(
            hypertension=_yes_no(hypertension, "hypertension"),
            diabetes=_yes_no(diabetes, "diabetes"),
            age=int(ensure_finite(age, "age")) if age is not None else None,
            gender=raw.get("gender"),
            weight_kg=ensure_finite(weight, "weight") if weight is not None else None,
            height_cm=ensure_finite(height, "height") if height is not None else None,
            lifestyle=raw.get("lifestyle"),
            drinking=raw.get("drinking"),
            smoking=raw.get("smoking"),
        )


# ---------------------------------------------------------------------------
# Sequences
# ---------------------------------------------------------------------------


def parse_samples(records: Iterable[Mapping[str, Any]], strict: bool = False) -> list[Sample]:
    """Parse an iterable of JSON-style records into Samples (input order kept)."""
    return [Sample.from_dict(r, strict=strict) for r in records]


def select_window(
    samples: Sequence[Sample],
    start: datetime | None = None,
    end: datetime | None = None,
) -> list[Sample]:
    """Return the samples within ``[start, end]`` sorted by timestamp.

    Either bound may be None (open).  The input sequence is not modified.
    """
    try:
        if start is not None and end is not None and start > end:
            raise InvalidSampleError(f"window start {start} is after end {end}")

        selected = [
            s for s in samples
            if (start is None or s.timestamp >= start)
            and (end is None or s.timestamp <= end)
        ]
        return sorted(selected, key=lambda s: s.timestamp)
    except TypeError as e:
        # naive and aware datetimes cannot be compared
        raise InvalidSampleError(f"cannot order timestamps: {e}") from e

"""Load sample windows and health profiles from JSON / JSONL files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from vitalreport.samples import (
    HealthProfile,
    InvalidSampleError,
    Sample,
    parse_samples,
)

logger = logging.getLogger(__name__)


def _read_text(path: Path) -> str:
    """Read *path* as UTF-8, mapping I/O and decode failures to InvalidSampleError."""
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise InvalidSampleError(f"{path.name}: not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise InvalidSampleError(f"{path.name}: cannot read file ({e.strerror})") from e


def _read_records(path: Path) -> list[Any]:
    """Read raw records from a ``.jsonl`` file or a ``.json`` list."""
    text = _read_text(path)

    if path.suffix == ".jsonl":
        records: list[Any] = []
        for line_num, line in enumerate(text.splitlines(), 1):
            line = line.strip()
            if not line:
                continue
            try:
                records.append(json.loads(line))
            except json.JSONDecodeError as e:
                raise InvalidSampleError(
                    f"{path.name}:{line_num}: invalid JSON ({e.msg})"
                ) from e
        return records

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidSampleError(f"{path.name}: invalid JSON ({e.msg})") from e
    if isinstance(data, dict) and "samples" in data:
        data = data["samples"]
    if not isinstance(data, list):
        raise InvalidSampleError(f"{path.name}: expected a list of samples")
    return data


def load_samples(sample_path: str | Path, strict: bool = False) -> list[Sample]:
    """Load samples from *sample_path* in file order.

    Args:
        sample_path: ``.jsonl`` (one sample per line) or ``.json`` (a list,
            or an object with a ``samples`` list).
        strict: Reject values outside the plausible physiological ranges.

    Raises:
        InvalidSampleError: unreadable JSON or a malformed sample.
    """
    path = Path(sample_path)
    records = _read_records(path)
    samples = parse_samples(records, strict=strict)
    logger.info("Loaded %d samples from %s", len(samples), path.name)
    return samples


def load_profile(profile_path: str | Path) -> HealthProfile:
    """Load a health profile from a JSON object file."""
    path = Path(profile_path)
    try:
        raw = json.loads(_read_text(path))
    except json.JSONDecodeError as e:
        raise InvalidSampleError(f"{path.name}: invalid JSON ({e.msg})") from e
    profile = HealthProfile.from_dict(raw)
    logger.debug("Loaded profile from %s: %s", path.name, profile)
    return profile


def write_samples(samples: list[Sample], output_path: str | Path) -> None:
    """Write samples as JSONL."""
    with open(output_path, "w", encoding="utf-8") as out:
        for s in samples:
            out.write(json.dumps(s.to_dict()) + "\n")

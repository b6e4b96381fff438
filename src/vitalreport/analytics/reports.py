"""Report payloads, one dataclass per report type.

Each report type has a fixed payload shape.  :func:`build_report_data`
picks the variant from a :class:`ReportType`; :func:`build_health_summary`
produces the richer summary with trends and recommendations.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Sequence, Union

from vitalreport.samples import (
    HealthProfile,
    NoSamplesError,
    Sample,
)
from vitalreport.analytics.hourly import HourlyTrendPoint, hourly_trends, trends_to_dict
from vitalreport.analytics.metrics import MetricsResult, calculate_metrics
from vitalreport.analytics.recommendations import generate_recommendations
from vitalreport.analytics.waveform import WaveformAnalysis

logger = logging.getLogger(__name__)


class ReportType(str, Enum):
    HEALTH_SUMMARY = "health_summary"
    WAVEFORM_ANALYSIS = "ecg_analysis"
    TREND_ANALYSIS = "trend_analysis"
    CUSTOM = "custom"

    @classmethod
    def parse(cls, value: str | ReportType) -> ReportType:
        """Map a type name to a ReportType; unknown names become CUSTOM."""
        try:
            return cls(value)
        except ValueError:
            return cls.CUSTOM


def _iso(ts: datetime | None) -> str | None:
    return ts.isoformat() if ts is not None else None


class _ReportData:
    """JSON helpers shared by every payload variant."""

    kind: ClassVar[ReportType]

    def payload(self) -> dict[str, Any]:
        raise NotImplementedError

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, **self.payload()}

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


@dataclass
class HealthSummaryData(_ReportData):
    kind: ClassVar[ReportType] = ReportType.HEALTH_SUMMARY

    total_readings: int
    start: datetime | None
    end: datetime | None
    metrics: MetricsResult
    data_points: list[Sample] = field(default_factory=list)

    def payload(self) -> dict[str, Any]:
        return {
            "total_readings": self.total_readings,
            "time_range": {"start": _iso(self.start), "end": _iso(self.end)},
            "metrics": self.metrics.to_dict(),
            "data_points": [
                {
                    "timestamp": s.timestamp.isoformat(),
                    "heart_rate": s.heart_rate,
                    "spo2": s.spo2,
                    "lactate": s.lactate,
                    "waveform": s.waveform,
                }
                for s in self.data_points
            ],
        }


@dataclass
class WaveformReportData(_ReportData):
    kind: ClassVar[ReportType] = ReportType.WAVEFORM_ANALYSIS

    points: list[tuple[datetime, float]]
    analysis: WaveformAnalysis

    def payload(self) -> dict[str, Any]:
        return {
            "waveform_data": [
                {"timestamp": ts.isoformat(), "value": value}
                for ts, value in self.points
            ],
            "analysis": self.analysis.to_dict(),
        }


@dataclass
class TrendReportData(_ReportData):
    kind: ClassVar[ReportType] = ReportType.TREND_ANALYSIS

    trends: dict[str, list[HourlyTrendPoint]]
    metrics: MetricsResult

    def payload(self) -> dict[str, Any]:
        return {
            "trends": trends_to_dict(self.trends),
            "metrics": self.metrics.to_dict(),
        }


@dataclass
class CustomReportData(_ReportData):
    kind: ClassVar[ReportType] = ReportType.CUSTOM

    samples: list[Sample]
    metrics: MetricsResult

    def payload(self) -> dict[str, Any]:
        return {
            "data": [s.to_dict() for s in self.samples],
            "metrics": self.metrics.to_dict(),
        }


ReportData = Union[HealthSummaryData, WaveformReportData, TrendReportData, CustomReportData]


def build_report_data(
    report_type: str | ReportType,
    samples: Sequence[Sample],
    metrics: MetricsResult | None = None,
) -> ReportData:
    """Build the payload for *report_type* from a time-ordered window.

    Args:
        report_type: Report type name; unknown names produce a custom report.
        samples: Samples for the window, ascending by timestamp.
        metrics: Precomputed metrics (computed here if omitted).

    Raises:
        NoSamplesError: *samples* is empty.
    """
    if len(samples) == 0:
        raise NoSamplesError("No health data found for the specified time range")

    rtype = ReportType.parse(report_type)
    if metrics is None:
        metrics = calculate_metrics(samples)
    logger.debug("Building %s report over %d samples", rtype.value, len(samples))

    if rtype is ReportType.HEALTH_SUMMARY:
        return HealthSummaryData(
            total_readings=len(samples),
            start=samples[0].timestamp,
            end=samples[-1].timestamp,
            metrics=metrics,
            data_points=list(samples),
        )
    if rtype is ReportType.WAVEFORM_ANALYSIS:
        return WaveformReportData(
            points=[(s.timestamp, s.waveform) for s in samples if s.waveform is not None],
            analysis=metrics.waveform,
        )
    if rtype is ReportType.TREND_ANALYSIS:
        return TrendReportData(trends=hourly_trends(samples), metrics=metrics)
    return CustomReportData(samples=list(samples), metrics=metrics)


@dataclass
class HealthSummary:
    """Summary report: metrics, hourly trends and recommendations."""

    start: datetime
    end: datetime
    total_readings: int
    metrics: MetricsResult
    trends: dict[str, list[HourlyTrendPoint]]
    recommendations: list[str]
    profile: HealthProfile | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": ReportType.HEALTH_SUMMARY.value,
            "title": self.title,
            "period": {"start": self.start.isoformat(), "end": self.end.isoformat()},
            "total_readings": self.total_readings,
            "health_profile": self.profile.to_dict() if self.profile else None,
            "metrics": self.metrics.to_dict(),
            "trends": trends_to_dict(self.trends),
            "recommendations": list(self.recommendations),
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @property
    def title(self) -> str:
        return (
            f"Health Summary Report - {self.start.date().isoformat()} "
            f"to {self.end.date().isoformat()}"
        )


def build_health_summary(
    samples: Sequence[Sample],
    start: datetime,
    end: datetime,
    profile: HealthProfile | None = None,
) -> HealthSummary:
    """Summarize a window: metrics, hourly trends and recommendations.

    Raises:
        NoSamplesError: *samples* is empty.
    """
    if len(samples) == 0:
        raise NoSamplesError("No health data found for the specified period")

    metrics = calculate_metrics(samples)
    recommendations = generate_recommendations(metrics, profile)
    logger.info(
        "Health summary %s..%s: %d readings, %d recommendation(s)",
        start.isoformat(), end.isoformat(), len(samples), len(recommendations),
    )
    return HealthSummary(
        start=start,
        end=end,
        total_readings=len(samples),
        metrics=metrics,
        trends=hourly_trends(samples),
        recommendations=recommendations,
        profile=profile,
    )

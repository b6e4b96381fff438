"""Metrics and trend engine for vital-sign sample windows.

Modules:
    stats           -- Per-signal average / min / max / trend
    trend           -- First-half vs second-half trend classification
    waveform        -- Waveform abnormality, rhythm and quality heuristics
    hourly          -- Hour-of-day signal averages
    metrics         -- MetricsResult bundle
    recommendations -- Rule-based advisories
    reports         -- Per-report-type payloads and the health summary
"""

from vitalreport.analytics.trend import (
    classify_trend,
    percent_change,
    INCREASING,
    DECREASING,
    STABLE,
)
from vitalreport.analytics.stats import SignalStats, signal_stats, signal_values, series_stats
from vitalreport.analytics.waveform import (
    WaveformAnalysis,
    analyze_waveform,
    assess_quality,
    classify_rhythm,
    detect_abnormalities,
)
from vitalreport.analytics.hourly import HourlyTrendPoint, hourly_trends
from vitalreport.analytics.metrics import MetricsResult, calculate_metrics
from vitalreport.analytics.recommendations import generate_recommendations
from vitalreport.analytics.reports import (
    ReportType,
    ReportData,
    HealthSummary,
    build_report_data,
    build_health_summary,
)

__all__ = [
    # trend
    "classify_trend",
    "percent_change",
    "INCREASING",
    "DECREASING",
    "STABLE",
    # stats
    "SignalStats",
    "signal_stats",
    "signal_values",
    "series_stats",
    # waveform
    "WaveformAnalysis",
    "analyze_waveform",
    "assess_quality",
    "classify_rhythm",
    "detect_abnormalities",
    # hourly
    "HourlyTrendPoint",
    "hourly_trends",
    # metrics
    "MetricsResult",
    "calculate_metrics",
    # recommendations
    "generate_recommendations",
    # reports
    "ReportType",
    "ReportData",
    "HealthSummary",
    "build_report_data",
    "build_health_summary",
]

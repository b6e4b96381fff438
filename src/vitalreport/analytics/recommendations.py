"""Rule-based advisories from computed metrics and the health profile.

Rules are evaluated in a fixed order and each fires independently.  A
missing (None) average never fires its rule.
"""

from __future__ import annotations

from vitalreport.samples import HealthProfile
from vitalreport.analytics.metrics import MetricsResult

HR_HIGH_BPM = 100.0
HR_LOW_BPM = 60.0
SPO2_LOW_PCT = 95.0
LACTATE_HIGH_MMOL = 4.0

HIGH_HEART_RATE_ADVICE = "Consider reducing physical activity and stress levels"
LOW_HEART_RATE_ADVICE = (
    "Monitor heart rate closely and consult healthcare provider if symptoms persist"
)
LOW_SPO2_ADVICE = (
    "Oxygen levels are below normal. Consider breathing exercises "
    "and consult healthcare provider"
)
HIGH_LACTATE_ADVICE = "Lactate levels are elevated. Consider adjusting exercise intensity"
HYPERTENSION_ADVICE = "Continue monitoring blood pressure regularly"
DIABETES_ADVICE = "Monitor blood glucose levels as recommended by healthcare provider"


def generate_recommendations(
    metrics: MetricsResult,
    profile: HealthProfile | None = None,
) -> list[str]:
    """Return the advisories that apply, in rule order (0-6 entries)."""
    recommendations: list[str] = []

    hr = metrics.heart_rate.average
    if hr is not None:
        if hr > HR_HIGH_BPM:
            recommendations.append(HIGH_HEART_RATE_ADVICE)
        elif hr < HR_LOW_BPM:
            recommendations.append(LOW_HEART_RATE_ADVICE)

    spo2 = metrics.spo2.average
    if spo2 is not None and spo2 < SPO2_LOW_PCT:
        recommendations.append(LOW_SPO2_ADVICE)

    lactate = metrics.lactate.average
    if lactate is not None and lactate > LACTATE_HIGH_MMOL:
        recommendations.append(HIGH_LACTATE_ADVICE)

    if profile is not None:
        if profile.hypertension:
            recommendations.append(HYPERTENSION_ADVICE)
        if profile.diabetes:
            recommendations.append(DIABETES_ADVICE)

    return recommendations

"""Tests for vitalreport.analytics.recommendations -- advisory rules."""

from vitalreport.analytics.metrics import MetricsResult
from vitalreport.analytics.recommendations import (
    DIABETES_ADVICE,
    HIGH_HEART_RATE_ADVICE,
    HIGH_LACTATE_ADVICE,
    HYPERTENSION_ADVICE,
    LOW_HEART_RATE_ADVICE,
    LOW_SPO2_ADVICE,
    generate_recommendations,
)
from vitalreport.analytics.stats import SignalStats
from vitalreport.samples import HealthProfile


def _metrics(hr=None, spo2=None, lactate=None) -> MetricsResult:
    return MetricsResult(
        heart_rate=SignalStats(average=hr),
        spo2=SignalStats(average=spo2),
        lactate=SignalStats(average=lactate),
    )


class TestGenerateRecommendations:
    def test_no_data_no_profile(self):
        assert generate_recommendations(_metrics()) == []

    def test_normal_values(self):
        assert generate_recommendations(_metrics(hr=72, spo2=98, lactate=1.5)) == []

    def test_high_heart_rate_with_hypertension(self):
        profile = HealthProfile(hypertension=True, diabetes=False)
        recs = generate_recommendations(_metrics(hr=105), profile)
        assert recs == [HIGH_HEART_RATE_ADVICE, HYPERTENSION_ADVICE]

    def test_low_heart_rate(self):
        assert generate_recommendations(_metrics(hr=55)) == [LOW_HEART_RATE_ADVICE]

    def test_boundaries_do_not_fire(self):
        assert generate_recommendations(_metrics(hr=100, spo2=95, lactate=4)) == []
        assert generate_recommendations(_metrics(hr=60)) == []

    def test_all_rules_in_order(self):
        profile = HealthProfile(hypertension=True, diabetes=True)
        recs = generate_recommendations(_metrics(hr=120, spo2=90, lactate=6), profile)
        assert recs == [
            HIGH_HEART_RATE_ADVICE,
            LOW_SPO2_ADVICE,
            HIGH_LACTATE_ADVICE,
            HYPERTENSION_ADVICE,
            DIABETES_ADVICE,
        ]
        assert 0 <= len(recs) <= 6

    def test_zero_average_still_evaluated(self):
        # 0 is a (bad) reading, not missing data
        assert generate_recommendations(_metrics(hr=0, spo2=0)) == [
            LOW_HEART_RATE_ADVICE,
            LOW_SPO2_ADVICE,
        ]

    def test_diabetes_only(self):
        assert generate_recommendations(_metrics(), HealthProfile(diabetes=True)) == [DIABETES_ADVICE]

"""Tests for vitalreport.analytics.trend -- half-mean trend classification."""

import numpy as np
import pytest

from vitalreport.analytics.trend import (
    classify_trend,
    percent_change,
    INCREASING,
    DECREASING,
    STABLE,
)
from vitalreport.samples import InvalidSampleError


class TestPercentChange:
    def test_none_for_empty(self):
        assert percent_change([]) is None

    def test_none_for_single(self):
        assert percent_change([80.0]) is None

    def test_odd_length_extra_point_in_second_half(self):
        # first [70, 72] -> 71, second [68, 75, 130] -> 91
        change = percent_change([70, 72, 68, 75, 130])
        assert change == pytest.approx((91.0 - 71.0) / 71.0 * 100.0)

    def test_zero_first_mean(self):
        assert percent_change([0.0, 0.0, 5.0, 5.0]) is None

    def test_nan_rejected(self):
        with pytest.raises(InvalidSampleError):
            percent_change([1.0, float("nan")])

    @pytest.mark.parametrize("values", [["abc"], ["70", "80"], [None, 70.0], [True, False]])
    def test_non_numeric_rejected(self, values):
        with pytest.raises(InvalidSampleError):
            percent_change(values)


class TestClassifyTrend:
    def test_empty_is_stable(self):
        assert classify_trend([]) == STABLE

    def test_single_is_stable(self):
        assert classify_trend([42.0]) == STABLE

    def test_increasing(self):
        assert classify_trend([70, 72, 68, 75, 130]) == INCREASING

    def test_decreasing(self):
        assert classify_trend([100, 100, 80, 80]) == DECREASING

    def test_small_change_is_stable(self):
        # +4% is inside the band
        assert classify_trend([100, 100, 104, 104]) == STABLE

    def test_exactly_five_percent_is_stable(self):
        assert classify_trend([100, 100, 105, 105]) == STABLE

    def test_zero_first_mean_is_stable(self):
        assert classify_trend([0, 0, 10, 10]) == STABLE

    def test_custom_threshold(self):
        assert classify_trend([100, 100, 104, 104], threshold_pct=2.0) == INCREASING

    @pytest.mark.parametrize("scale", [0.01, 3.0, 1000.0])
    def test_invariant_under_positive_scaling(self, scale):
        values = np.array([70.0, 72.0, 68.0, 75.0, 130.0])
        assert classify_trend(values * scale) == classify_trend(values)

    def test_numpy_compatible(self):
        assert classify_trend(np.array([1.0, 1.0, 2.0, 2.0])) == INCREASING

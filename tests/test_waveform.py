"""Tests for vitalreport.analytics.waveform -- abnormality, rhythm, quality."""

import pytest

from vitalreport.analytics.waveform import (
    NO_DATA,
    HIGH_AMPLITUDE,
    LOW_SIGNAL,
    WaveformAnalysis,
    analyze_waveform,
    analyze_waveform_samples,
    assess_quality,
    classify_rhythm,
    detect_abnormalities,
)
from vitalreport.samples import WAVEFORM, InvalidSampleError

from tests.conftest import make_series


class TestDetectAbnormalities:
    def test_empty(self):
        assert detect_abnormalities([]) == []

    def test_non_numeric_rejected(self):
        with pytest.raises(InvalidSampleError):
            detect_abnormalities(["abc"])

    def test_ragged_rejected(self):
        with pytest.raises(InvalidSampleError):
            detect_abnormalities([[0.1, 0.2], [0.3]])

    def test_both_flags(self):
        assert detect_abnormalities([0.05, 0.08, 3.0, 0.06]) == [HIGH_AMPLITUDE, LOW_SIGNAL]

    def test_uses_absolute_amplitude(self):
        # -3.0 is high, -0.05 is low
        assert detect_abnormalities([-3.0, -0.05, 1.0]) == [HIGH_AMPLITUDE, LOW_SIGNAL]

    def test_normal_signal(self):
        assert detect_abnormalities([0.5, -0.8, 1.2]) == []

    def test_boundaries_not_flagged(self):
        assert detect_abnormalities([2.5, 0.1]) == []


class TestClassifyRhythm:
    def test_empty(self):
        assert classify_rhythm([]) == NO_DATA

    def test_single_sample(self):
        assert classify_rhythm([0.5]) == NO_DATA

    def test_non_numeric_rejected(self):
        with pytest.raises(InvalidSampleError):
            classify_rhythm([0.5, "x"])

    def test_regular(self):
        assert classify_rhythm([0.50, 0.55, 0.50, 0.55]) == "Regular"

    def test_slightly_irregular(self):
        # diffs all 0.2
        assert classify_rhythm([0.5, 0.7, 0.5, 0.7]) == "Slightly irregular"

    def test_irregular(self):
        assert classify_rhythm([-1.0, 1.0, -1.0]) == "Irregular"


class TestAssessQuality:
    def test_empty(self):
        assert assess_quality([]) == NO_DATA

    @pytest.mark.parametrize("values,label", [
        ([0.2, -0.3], "Excellent"),
        ([0.7, -0.7], "Good"),
        ([1.2, -1.2], "Fair"),
        ([2.0, -2.0], "Poor"),
        ([1.5], "Poor"),
    ])
    def test_bands(self, values, label):
        assert assess_quality(values) == label

    def test_inf_rejected(self):
        with pytest.raises(InvalidSampleError):
            assess_quality([float("inf")])


class TestAnalyzeWaveform:
    def test_empty(self):
        result = analyze_waveform([])
        assert result == WaveformAnalysis(abnormalities=[], rhythm=NO_DATA, quality=NO_DATA)

    def test_from_samples_ignores_missing(self):
        samples = make_series(WAVEFORM, [0.4, None, 0.45, 0.5])
        result = analyze_waveform_samples(samples)
        assert result.rhythm == "Regular"
        assert result.quality == "Excellent"
        assert result.abnormalities == []

    def test_to_dict(self):
        d = analyze_waveform([0.05, 0.08, 3.0, 0.06]).to_dict()
        assert d["abnormalities"] == [HIGH_AMPLITUDE, LOW_SIGNAL]
        assert set(d) == {"abnormalities", "rhythm", "quality"}

"""
Tests for variance, deviation(kind), value_range(kind) and mode.

All dispersion statistics are population statistics (divisor n).
"""

import math

import numpy as np
import pytest

from pystaz import (
    DeviationKind,
    ErrorCode,
    RangeKind,
    deviation,
    maximum,
    minimum,
    mode,
    value_range,
    variance,
)


class TestVariance:

    def test_textbook(self, textbook_sample):
        assert variance(textbook_sample).value == 4.0

    def test_population_divisor(self):
        # sample variance would be 1.0
        assert variance([1, 2, 3]).value == pytest.approx(2 / 3)

    @pytest.mark.parametrize("c", [0.0, 2.5, -7.0, 1e3, 0.1, 0.3, 1.1])
    def test_constant_is_zero(self, c):
        assert variance(np.full(6, c)).value == 0.0

    def test_deterministic(self, rng):
        x = rng.standard_normal(1000)
        assert variance(x).value == variance(x).value

    def test_singleton(self):
        assert variance([42.0]).value == 0.0

    def test_nan_mean(self):
        result = variance([1.0, np.nan, 3.0])
        assert result.error is ErrorCode.COMPUTED_NAN
        assert math.isnan(result.value)

    def test_infinite_mean(self):
        result = variance([np.inf, 1.0])
        assert result.error is ErrorCode.COMPUTED_NAN
        assert math.isnan(result.value)

    def test_caller_untouched(self, textbook_sample):
        before = textbook_sample.copy()
        variance(textbook_sample)
        np.testing.assert_array_equal(textbook_sample, before)

    @pytest.mark.parametrize("bad", [None, []])
    def test_empty(self, bad):
        assert variance(bad).error is ErrorCode.INVALID_PARAMETERS


class TestDeviation:

    def test_standard(self, textbook_sample):
        assert deviation('standard', textbook_sample).value == 2.0

    def test_relative(self, textbook_sample):
        assert deviation('relative', textbook_sample).value == 0.4

    def test_mad_mean(self, skewed_sample):
        # |x - 4| = 3, 2, 1, 0, 6
        assert deviation('mad_mean', skewed_sample).value == pytest.approx(2.4)

    def test_average_around_median(self, skewed_sample):
        # |x - 3| = 2, 1, 0, 1, 7
        assert deviation('average', skewed_sample).value == pytest.approx(2.2)

    def test_mad_median(self, skewed_sample):
        # sorted |x - 3| = 0, 1, 1, 2, 7
        assert deviation('mad_median', skewed_sample).value == 1.0

    def test_standard_skewed(self, skewed_sample):
        np.testing.assert_allclose(
            deviation(DeviationKind.STANDARD, skewed_sample).value, math.sqrt(10), rtol=1e-15
        )

    def test_relative_zero_mean(self):
        result = deviation('relative', [-1.0, 1.0])
        assert result.error is ErrorCode.ZERO_DIVISION
        assert math.isnan(result.value)

    def test_relative_nan_mean(self):
        assert deviation('relative', [1.0, np.nan]).error is ErrorCode.COMPUTED_NAN

    def test_standard_propagates_computed_nan(self):
        assert deviation('standard', [np.nan, 1.0]).error is ErrorCode.COMPUTED_NAN

    def test_mad_median_nan_median(self):
        assert deviation('mad_median', [np.nan]).error is ErrorCode.COMPUTED_NAN

    @pytest.mark.parametrize("kind", list(DeviationKind))
    def test_infinite_mean(self, kind):
        result = deviation(kind, [np.inf, 1.0])
        assert result.error is ErrorCode.COMPUTED_NAN
        assert math.isnan(result.value)

    @pytest.mark.parametrize("c", [0.1, 0.3, 1.1])
    def test_standard_of_constant(self, c):
        assert deviation('standard', np.full(3, c)).value == 0.0

    @pytest.mark.parametrize("kind", list(DeviationKind))
    def test_caller_untouched(self, kind, skewed_sample):
        before = skewed_sample.copy()
        deviation(kind, skewed_sample)
        np.testing.assert_array_equal(skewed_sample, before)

    @pytest.mark.parametrize("kind", list(DeviationKind))
    def test_constant_sample(self, kind):
        assert deviation(kind, [3.0, 3.0, 3.0]).value == 0.0

    @pytest.mark.parametrize("kind", ['variance', 5, None])
    def test_unknown_kind(self, kind):
        assert deviation(kind, [1, 2]).error is ErrorCode.INVALID_PARAMETERS

    @pytest.mark.parametrize("kind", list(DeviationKind))
    def test_empty(self, kind):
        assert deviation(kind, []).error is ErrorCode.INVALID_PARAMETERS


class TestValueRange:

    def test_standard(self, skewed_sample):
        assert value_range('standard', skewed_sample).value == 9.0

    def test_standard_is_max_minus_min(self, rng):
        x = rng.standard_normal(101)
        assert value_range(RangeKind.STANDARD, x).value == maximum(x).value - minimum(x).value

    def test_interquartile(self, skewed_sample):
        assert value_range('interquartile', skewed_sample).value == 5.5

    def test_percentile_10_90_clamped(self, skewed_sample):
        # P10 clamps to min, P90 clamps to max for n = 5
        assert value_range('percentile_10_90', skewed_sample).value == 9.0

    def test_percentile_10_90(self):
        x = np.arange(1, 11, dtype=np.float64)
        np.testing.assert_allclose(value_range('percentile_10_90', x).value, 8.8, rtol=1e-12)

    def test_integer_kind(self):
        assert value_range(1, [1, 2, 3, 4]).value == 2.5

    def test_nan_escalates(self):
        result = value_range('standard', [1.0, np.nan, 3.0])
        assert result.error is ErrorCode.COMPUTED_NAN
        assert math.isnan(result.value)

    def test_inf_minus_inf(self):
        assert value_range('standard', [np.inf, np.inf]).error is ErrorCode.COMPUTED_NAN

    @pytest.mark.parametrize("kind", ['full', 3])
    def test_unknown_kind(self, kind):
        assert value_range(kind, [1, 2]).error is ErrorCode.INVALID_PARAMETERS

    @pytest.mark.parametrize("kind", list(RangeKind))
    def test_empty(self, kind):
        assert value_range(kind, None).error is ErrorCode.INVALID_PARAMETERS


class TestMode:

    def test_single_mode(self):
        assert mode([1, 3, 3, 2]).value == 3.0

    def test_first_wins_ties(self):
        assert mode([1, 2, 2, 3, 3]).value == 2.0

    def test_all_distinct(self):
        assert mode([4, 5, 6]).value == 4.0

    def test_exact_equality(self):
        """0.1 + 0.2 is not 0.3; no tolerance is applied."""
        assert mode([0.1 + 0.2, 0.3, 0.3]).value == 0.3

    def test_singleton(self):
        assert mode([5]).value == 5.0

    @pytest.mark.parametrize("bad", [None, []])
    def test_empty(self, bad):
        result = mode(bad)
        assert result.error is ErrorCode.INVALID_PARAMETERS
        assert math.isnan(result.value)

"""
Tests for describe(), SampleDesign and DescriptiveSolution.
"""

import math
import warnings

import numpy as np
import pytest

from pystaz import (
    DeviationKind,
    ErrorCode,
    MeanKind,
    RangeKind,
    SampleDesign,
    describe,
    get_error,
)
from pystaz.core.exceptions import ValidationError


class TestSampleDesign:

    def test_from_list(self):
        design = SampleDesign.from_array([1, 2, 3])
        assert design.n == 3
        assert design.data.dtype == np.float64

    def test_private_copy(self):
        x = np.array([1.0, 2.0])
        design = SampleDesign.from_array(x)
        x[0] = 50.0
        assert design.data[0] == 1.0

    def test_read_only(self):
        design = SampleDesign.from_array([1.0, 2.0])
        with pytest.raises(ValueError):
            design.data[0] = 3.0

    def test_missing(self):
        design = SampleDesign.from_array([1.0, np.nan, np.nan])
        assert design.n_missing == 2
        assert design.has_missing
        assert repr(design) == "SampleDesign(n=3, missing=2)"

    def test_named(self):
        assert SampleDesign.from_array([1.0], name='height').name == 'height'

    def test_object_with_values(self):
        class Series:
            values = np.array([4.0, 5.0])
            name = 'weight'

        design = SampleDesign.from_array(Series())
        assert design.name == 'weight'
        assert design.n == 2

    @pytest.mark.parametrize("bad", [None, [], [[1.0, 2.0]]])
    def test_invalid(self, bad):
        with pytest.raises(ValidationError):
            SampleDesign.from_array(bad)


class TestDescribe:

    def test_textbook(self, textbook_sample):
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            result = describe(textbook_sample, name='scores')

        assert result.ok
        assert result.errors == {}
        assert result.n == 8
        assert result.total == 40.0
        assert result.minimum == 2.0
        assert result.maximum == 9.0
        assert result.median == 4.5
        assert result.mode == 4.0
        assert result.variance == 4.0
        assert result.mean() == 5.0
        assert result.deviation() == 2.0
        assert result.deviation('relative') == 0.4
        assert result.range() == 7.0
        assert result.name == 'scores'

    def test_every_kind_present(self, skewed_sample):
        result = describe(skewed_sample)
        for kind in MeanKind:
            assert not math.isnan(result.mean(kind))
        for kind in DeviationKind:
            assert not math.isnan(result.deviation(kind))
        for kind in RangeKind:
            assert not math.isnan(result.range(kind))

    def test_matches_single_calls(self, skewed_sample):
        result = describe(skewed_sample)
        assert result.mean('trimean') == 3.625
        assert result.range('interquartile') == 5.5
        assert result.boxplot.upper_whisker == 15.25

    def test_partial_failure(self):
        with pytest.warns(RuntimeWarning, match="mean\\[harmonic\\]"):
            result = describe([0.0, 1.0, 2.0])

        assert result.ok
        assert result.errors == {'mean[harmonic]': ErrorCode.ZERO_DIVISION}
        assert math.isnan(result.mean('harmonic'))
        assert result.mean('geometric') == 0.0
        assert any('ZERO_DIVISION' in w for w in result.warnings)

    def test_singleton_extremes_fails(self):
        with pytest.warns(RuntimeWarning):
            result = describe([3.0])
        assert result.errors['mean[extremes]'] is ErrorCode.INVALID_PARAMETERS
        assert result.median == 3.0

    def test_timing(self, textbook_sample):
        timing = describe(textbook_sample).timing
        assert timing['total_seconds'] >= 0
        for section in ('primitives', 'order_statistics', 'means', 'dispersion', 'mode'):
            assert section in timing

    def test_backend_name(self, textbook_sample):
        assert describe(textbook_sample).backend_name == 'cpu_descriptive'

    def test_accepts_design(self):
        design = SampleDesign.from_array([1.0, 2.0, 3.0], name='d')
        result = describe(design)
        assert result.n == 3
        assert result.name == 'd'

    def test_nan_sample(self):
        with pytest.warns(RuntimeWarning):
            result = describe([1.0, np.nan])
        assert result.ok
        assert result.errors['variance'] is ErrorCode.COMPUTED_NAN
        assert result.info['n_missing'] == 1

    @pytest.mark.parametrize("bad", [None, [], "text"])
    def test_invalid_sample(self, bad):
        result = describe(bad)
        assert not result.ok
        assert result.error is ErrorCode.INVALID_PARAMETERS
        assert get_error() is ErrorCode.INVALID_PARAMETERS
        assert result.n == 0
        assert math.isnan(result.mean())
        assert result.boxplot.is_nan()
        assert repr(result) == "DescriptiveSolution(error=INVALID_PARAMETERS)"


class TestSummaryText:

    def test_contains_rows(self, textbook_sample):
        text = describe(textbook_sample, name='scores').summary()
        lines = text.splitlines()
        assert lines[0] == "Descriptive Statistics: scores"
        assert any(line.startswith("Median") and line.endswith("4.500000") for line in lines)
        assert any("Mean (harmonic)" in line for line in lines)
        assert "Failed" not in text

    def test_lists_failures(self):
        with pytest.warns(RuntimeWarning):
            text = describe([0.0, 1.0]).summary()
        assert "Failed: mean[harmonic]=ZERO_DIVISION" in text

    def test_repr(self, textbook_sample):
        assert repr(describe(textbook_sample)) == "DescriptiveSolution(n=8)"

"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_present: None rejection
    - check_array: conversion, dtype coercion, object rejection
    - check_1d: dimensionality
    - check_min_samples: minimum sample count
    - check_consistent_length: paired-sample length matching
    - check_sample: the combined single-sample check
"""

import numpy as np
import pytest

from pystaz.core.exceptions import DimensionError, ValidationError
from pystaz.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_min_samples,
    check_present,
    check_sample,
    count_nan,
)


# ═══════════════════════════════════════════════════════════════════════
# check_present / check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckPresent:

    def test_none_rejected(self):
        with pytest.raises(ValidationError, match="absent"):
            check_present(None, "x")

    def test_empty_list_is_present(self):
        check_present([], "x")


class TestCheckArray:
    """check_array converts to float64 and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_int_array_promoted(self):
        result = check_array(np.array([1, 2, 3], dtype=np.int32), "x")
        assert result.dtype == np.float64

    def test_float32_promoted(self):
        result = check_array(np.array([1.5], dtype=np.float32), "x")
        assert result.dtype == np.float64

    def test_float64_passthrough(self):
        arr = np.array([1.0, 2.0])
        assert check_array(arr, "x") is arr

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="x"):
            check_array(["a", "b"], "x")

    def test_mixed_rejected(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([1, "a", None], "x")

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array([True, False], "x")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j], "x")

    def test_nan_accepted(self):
        result = check_array([1.0, np.nan], "x")
        assert np.isnan(result[1])


# ═══════════════════════════════════════════════════════════════════════
# Shape and length
# ═══════════════════════════════════════════════════════════════════════


class TestShape:

    def test_1d_passes(self):
        check_1d(np.zeros(3), "x")

    def test_2d_rejected(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((2, 2)), "x")

    def test_scalar_rejected(self):
        with pytest.raises(DimensionError):
            check_1d(np.asarray(3.0), "x")

    def test_min_samples(self):
        with pytest.raises(ValidationError, match="at least 2 samples, got 1"):
            check_min_samples(np.zeros(1), 2, "x")

    def test_consistent_length(self):
        check_consistent_length(np.zeros(3), np.ones(3), names=("x", "y"))

    def test_inconsistent_length(self):
        with pytest.raises(DimensionError, match="x=3, y=2"):
            check_consistent_length(np.zeros(3), np.ones(2), names=("x", "y"))

    def test_name_count_mismatch(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), np.ones(3), names=("x",))


# ═══════════════════════════════════════════════════════════════════════
# check_sample
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSample:

    def test_valid(self):
        result = check_sample((4, 5, 6))
        np.testing.assert_array_equal(result, [4.0, 5.0, 6.0])

    @pytest.mark.parametrize("bad", [None, [], np.empty(0), [[1.0, 2.0]], 3.0, "abc"])
    def test_invalid(self, bad):
        with pytest.raises(ValidationError):
            check_sample(bad)

    def test_name_in_message(self):
        with pytest.raises(ValidationError, match="^y:"):
            check_sample([], "y")

    def test_count_nan(self):
        assert count_nan(np.array([np.nan, 1.0, np.nan])) == 2

"""
Public operations for descriptive statistics.

Every function here returns a Result and never raises for bad input:
engine exceptions are converted to a failed Result (NaN value, or an
all-NaN record) by @reports_errors, which also writes the outcome to
the calling thread's error latch.

    >>> from pystaz import mean, get_error
    >>> mean('geometric', [1, 2, 4]).value
    2.0
    >>> res = mean('geometric', [-1, -2, -3])
    >>> res.error
    <ErrorCode.MATH_DOMAIN: 4>
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pystaz.core.boundary import reports_errors
from pystaz.core.result import Result
from pystaz.core.validation import check_sample, check_consistent_length, count_nan
from pystaz.descriptive.design import SampleDesign
from pystaz.descriptive.kinds import (
    MeanKind, DeviationKind, RangeKind, coerce_kind,
)
from pystaz.descriptive.solution import (
    BoxplotSummary, LinearFit, DescriptiveParams, DescriptiveSolution,
)
from pystaz.descriptive.backends.cpu import CPUDescriptiveBackend
from pystaz.descriptive import _primitives, _order, _central, _dispersion, _relationship


def _empty_array() -> NDArray:
    return np.empty(0, dtype=np.float64)


def _input_warnings(**samples: NDArray) -> tuple[str, ...]:
    """Note NaN entries, which are accepted and propagate."""
    found = []
    for name, arr in samples.items():
        n_nan = count_nan(arr)
        if n_nan:
            found.append(f"{name}: contains {n_nan} NaN value(s); NaN propagates")
    return tuple(found)


def _paired(x: ArrayLike, y: ArrayLike) -> tuple[NDArray, NDArray]:
    x_arr = check_sample(x, 'x')
    y_arr = check_sample(y, 'y')
    check_consistent_length(x_arr, y_arr, names=('x', 'y'))
    return x_arr, y_arr


# --- Numeric primitives ---


@reports_errors()
def total(sample: ArrayLike) -> Result[float]:
    """Sum by pairwise summation."""
    x = check_sample(sample)
    return Result(value=_primitives.pairwise_sum(x), warnings=_input_warnings(sample=x))


@reports_errors()
def sum_of_squares(sample: ArrayLike) -> Result[float]:
    x = check_sample(sample)
    return Result(value=_primitives.sum_of_squares(x), warnings=_input_warnings(sample=x))


@reports_errors()
def product(sample: ArrayLike) -> Result[float]:
    """Product of all values; returns 0 as soon as a partial product is exactly 0."""
    x = check_sample(sample)
    return Result(value=_primitives.product(x), warnings=_input_warnings(sample=x))


@reports_errors()
def reciprocal_sum(sample: ArrayLike) -> Result[float]:
    """Kahan-compensated sum of reciprocals. Any zero element is ZERO_DIVISION."""
    x = check_sample(sample)
    return Result(value=_primitives.reciprocal_sum(x), warnings=_input_warnings(sample=x))


@reports_errors()
def minimum(sample: ArrayLike) -> Result[float]:
    x = check_sample(sample)
    return Result(value=_primitives.min_value(x), warnings=_input_warnings(sample=x))


@reports_errors()
def maximum(sample: ArrayLike) -> Result[float]:
    x = check_sample(sample)
    return Result(value=_primitives.max_value(x), warnings=_input_warnings(sample=x))


@reports_errors(_empty_array)
def duplicate(sample: ArrayLike) -> Result[NDArray]:
    """Independent float64 copy of the sample."""
    return Result(value=_primitives.duplicate(check_sample(sample)))


@reports_errors(_empty_array)
def sort(sample: ArrayLike) -> Result[NDArray]:
    """Ascending sorted copy; the caller's sample is left untouched."""
    return Result(value=_primitives.sorted_copy(check_sample(sample)))


@reports_errors()
def nth_root(value: float, index: float) -> Result[float]:
    """
    Root of arbitrary index, value ** (1 / index).

    Negative value is MATH_DOMAIN, index 0 is ZERO_DIVISION.
    """
    radicand = check_sample([value], 'value')[0]
    degree = check_sample([index], 'index')[0]
    return Result(value=_primitives.nth_root(float(radicand), float(degree)))


# --- Order statistics ---


@reports_errors()
def median(sample: ArrayLike) -> Result[float]:
    x = check_sample(sample)
    return Result(
        value=_order.median_sorted(_primitives.sorted_copy(x)),
        warnings=_input_warnings(sample=x),
    )


@reports_errors()
def quantile(divisions: int, position: int, sample: ArrayLike) -> Result[float]:
    """
    Quantile at cut point `position` of `divisions` equal partitions.

    Parameters
    ----------
    divisions : int
        Number of partitions: 4 for quartiles, 10 for deciles, 100 for
        percentiles.
    position : int
        1 <= position <= divisions - 1. position >= divisions is
        VALUE_OUT_OF_RANGE; position < 1 or divisions < 2 is
        INVALID_PARAMETERS.
    sample : array-like
        Non-empty 1D sample.

    Returns
    -------
    Result[float]
        Linear interpolation at rank position * (n + 1) / divisions,
        clamped to the sample minimum and maximum.
    """
    _order.check_quantile_request(divisions, position)
    x = check_sample(sample)
    value = _order.quantile_sorted(_primitives.sorted_copy(x), divisions, position)
    return Result(
        value=value,
        info={'divisions': int(divisions), 'position': int(position)},
        warnings=_input_warnings(sample=x),
    )


# --- Central tendency ---


@reports_errors()
def mean(kind: MeanKind | str | int, sample: ArrayLike) -> Result[float]:
    """
    Mean of the requested kind.

    Parameters
    ----------
    kind : MeanKind, str or int
        'arithmetic', 'geometric', 'harmonic', 'quadratic', 'extremes',
        'trimean' or 'midhinge'.
    sample : array-like
        Non-empty 1D sample. 'extremes' needs at least two values.
    """
    x = check_sample(sample)
    mean_kind = coerce_kind(MeanKind, kind)
    value = _central.compute_mean(mean_kind, x)

    warnings_list = list(_input_warnings(sample=x))
    if mean_kind is MeanKind.GEOMETRIC and np.all(np.isfinite(x)):
        if value == 0 and np.all(x != 0):
            warnings_list.append("product underflowed to 0 before the root was taken")
        elif math.isinf(value):
            warnings_list.append("product overflowed to inf before the root was taken")

    return Result(value=value, info={'kind': mean_kind.value}, warnings=tuple(warnings_list))


# --- Dispersion ---


@reports_errors()
def variance(sample: ArrayLike) -> Result[float]:
    """Population variance (divisor n)."""
    x = check_sample(sample)
    return Result(value=_dispersion.variance(x), warnings=_input_warnings(sample=x))


@reports_errors()
def deviation(kind: DeviationKind | str | int, sample: ArrayLike) -> Result[float]:
    """
    Deviation of the requested kind.

    Parameters
    ----------
    kind : DeviationKind, str or int
        'standard' (population sd), 'average' (mean |x - median|),
        'relative' (sd / mean), 'mad_mean' (mean |x - mean|),
        'mad_median' (median |x - median|).
    sample : array-like
        Non-empty 1D sample.
    """
    x = check_sample(sample)
    dev_kind = coerce_kind(DeviationKind, kind)
    return Result(
        value=_dispersion.compute_deviation(dev_kind, x),
        info={'kind': dev_kind.value},
        warnings=_input_warnings(sample=x),
    )


@reports_errors()
def value_range(kind: RangeKind | str | int, sample: ArrayLike) -> Result[float]:
    """
    Range of the requested kind: 'standard' (max - min), 'interquartile'
    (Q3 - Q1) or 'percentile_10_90' (P90 - P10).
    """
    x = check_sample(sample)
    range_kind = coerce_kind(RangeKind, kind)
    return Result(
        value=_dispersion.compute_range(range_kind, x),
        info={'kind': range_kind.value},
        warnings=_input_warnings(sample=x),
    )


@reports_errors()
def mode(sample: ArrayLike) -> Result[float]:
    """Most frequent value by exact equality; the first one wins ties."""
    x = check_sample(sample)
    return Result(value=_dispersion.mode(x), warnings=_input_warnings(sample=x))


# --- Relationship ---


@reports_errors()
def covariance(x: ArrayLike, y: ArrayLike) -> Result[float]:
    """Population covariance of two equal-length samples."""
    x_arr, y_arr = _paired(x, y)
    return Result(
        value=_relationship.covariance(x_arr, y_arr),
        warnings=_input_warnings(x=x_arr, y=y_arr),
    )


@reports_errors()
def correlation(x: ArrayLike, y: ArrayLike) -> Result[float]:
    """Pearson correlation; a constant sample is ZERO_DIVISION."""
    x_arr, y_arr = _paired(x, y)
    return Result(
        value=_relationship.correlation(x_arr, y_arr),
        warnings=_input_warnings(x=x_arr, y=y_arr),
    )


@reports_errors(LinearFit.nan)
def linear_regression(x: ArrayLike, y: ArrayLike) -> Result[LinearFit]:
    """
    Least-squares line through (x, y).

    Returns
    -------
    Result[LinearFit]
        slope and intercept; both NaN on failure. Constant x is
        ZERO_DIVISION.
    """
    x_arr, y_arr = _paired(x, y)
    return Result(
        value=_relationship.linear_regression(x_arr, y_arr),
        info={'n': len(x_arr)},
        warnings=_input_warnings(x=x_arr, y=y_arr),
    )


@reports_errors(BoxplotSummary.nan)
def boxplot(sample: ArrayLike) -> Result[BoxplotSummary]:
    """Quartiles, median, 1.5 IQR whiskers and extremes."""
    x = check_sample(sample)
    return Result(value=_relationship.boxplot(x), warnings=_input_warnings(sample=x))


# --- All at once ---


@reports_errors(DescriptiveParams)
def _solve_describe(
    data: ArrayLike | SampleDesign, name: str | None,
) -> Result[DescriptiveParams]:
    design = data if isinstance(data, SampleDesign) else SampleDesign.from_array(data, name=name)
    return CPUDescriptiveBackend().solve(design)


def describe(
    data: ArrayLike | SampleDesign,
    *,
    name: str | None = None,
) -> DescriptiveSolution:
    """
    Compute every statistic of one sample.

    Computes: sum, min, max, median, mode, population variance, every
    mean kind, every deviation kind, every range kind and the box plot
    summary. A statistic that fails is left NaN and its code recorded
    in DescriptiveSolution.errors; only an invalid sample fails the
    whole call.

    Parameters
    ----------
    data : array-like or SampleDesign
        1D sample.
    name : str, optional
        Label used by DescriptiveSolution.summary().

    Returns
    -------
    DescriptiveSolution
    """
    return DescriptiveSolution(_result=_solve_describe(data, name))

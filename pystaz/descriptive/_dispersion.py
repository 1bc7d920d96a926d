"""
Dispersion engine: variance, deviation and range variants, mode.

All statistics are population statistics (divisor n). Working arrays
are always fresh; the caller's sample is never written.
"""

from __future__ import annotations

import math
from typing import Callable

import numpy as np
from numpy.typing import NDArray

from pystaz.core.exceptions import ComputedNaNError, DivisionByZeroError
from pystaz.descriptive.kinds import DeviationKind, RangeKind
from pystaz.descriptive._central import arithmetic_mean, quartiles
from pystaz.descriptive._order import median_sorted, quantile_sorted
from pystaz.descriptive._primitives import (
    pairwise_sum, min_value, max_value, sorted_copy,
)


def require_number(value: float, stage: str) -> float:
    """
    Escalate a NaN intermediate.

    Raises:
        ComputedNaNError: If value is NaN
    """
    if math.isnan(value):
        raise ComputedNaNError(f"{stage} is NaN", stage=stage)
    return value


def variance(x: NDArray) -> float:
    """Population variance, mean of squared deviations from the mean."""
    mean = require_number(arithmetic_mean(x), 'arithmetic mean')
    # the rounded mean of a constant sample can differ from its value
    if min_value(x) == max_value(x):
        return 0.0
    with np.errstate(over='ignore', invalid='ignore'):
        centred = x - mean
        spread = pairwise_sum(centred * centred) / len(x)
    return require_number(spread, 'variance')


def standard_deviation(x: NDArray) -> float:
    return math.sqrt(variance(x))


def relative_deviation(x: NDArray) -> float:
    """
    Coefficient of variation, sd / mean.

    Raises:
        ComputedNaNError: If the mean is NaN
        DivisionByZeroError: If the mean is exactly 0
    """
    mean = require_number(arithmetic_mean(x), 'arithmetic mean')
    if mean == 0:
        raise DivisionByZeroError("relative deviation of a zero-mean sample", quantity='mean')
    return standard_deviation(x) / mean


def mad_mean(x: NDArray) -> float:
    """Mean absolute deviation around the mean."""
    mean = require_number(arithmetic_mean(x), 'arithmetic mean')
    with np.errstate(invalid='ignore'):
        return arithmetic_mean(np.abs(x - mean))


def average_deviation(x: NDArray) -> float:
    """Mean absolute deviation around the median."""
    med = require_number(median_sorted(sorted_copy(x)), 'median')
    with np.errstate(invalid='ignore'):
        return arithmetic_mean(np.abs(x - med))


def mad_median(x: NDArray) -> float:
    """Median absolute deviation around the median."""
    med = require_number(median_sorted(sorted_copy(x)), 'median')
    with np.errstate(invalid='ignore'):
        spread = np.abs(x - med)
    spread.sort(kind='stable')
    return median_sorted(spread)


_DEVIATIONS: dict[DeviationKind, Callable[[NDArray], float]] = {
    DeviationKind.STANDARD: standard_deviation,
    DeviationKind.AVERAGE: average_deviation,
    DeviationKind.RELATIVE: relative_deviation,
    DeviationKind.MAD_MEAN: mad_mean,
    DeviationKind.MAD_MEDIAN: mad_median,
}


def compute_deviation(kind: DeviationKind, x: NDArray) -> float:
    return require_number(_DEVIATIONS[kind](x), f"{kind.value} deviation")


def full_range(x: NDArray) -> float:
    high = require_number(max_value(x), 'maximum')
    low = require_number(min_value(x), 'minimum')
    return high - low


def interquartile_range(x: NDArray) -> float:
    q1, _, q3 = quartiles(sorted_copy(x))
    return require_number(q3, 'third quartile') - require_number(q1, 'first quartile')


def percentile_range_10_90(x: NDArray) -> float:
    s = sorted_copy(x)
    p90 = require_number(quantile_sorted(s, 100, 90), '90th percentile')
    p10 = require_number(quantile_sorted(s, 100, 10), '10th percentile')
    return p90 - p10


_RANGES: dict[RangeKind, Callable[[NDArray], float]] = {
    RangeKind.STANDARD: full_range,
    RangeKind.INTERQUARTILE: interquartile_range,
    RangeKind.PERCENTILE_10_90: percentile_range_10_90,
}


def compute_range(kind: RangeKind, x: NDArray) -> float:
    return require_number(_RANGES[kind](x), f"{kind.value} range")


def mode(x: NDArray) -> float:
    """
    Most frequent value by exact equality.

    Quadratic in n. Ties go to the value that occurs first in the sample.
    """
    counts = np.array([np.count_nonzero(x == v) for v in x])
    return float(x[int(np.argmax(counts))])

"""
Relationship engine: covariance, Pearson correlation, least-squares line,
and the box plot summary built on the order-statistics engine.

Paired samples arrive validated and of equal length.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pystaz.core.exceptions import DivisionByZeroError
from pystaz.descriptive.solution import BoxplotSummary, LinearFit
from pystaz.descriptive._central import arithmetic_mean, quartiles
from pystaz.descriptive._dispersion import require_number, standard_deviation
from pystaz.descriptive._order import median_sorted
from pystaz.descriptive._primitives import (
    pairwise_sum, sum_of_squares, min_value, max_value, sorted_copy,
)

WHISKER_FACTOR = 1.5


def covariance(x: NDArray, y: NDArray) -> float:
    """Population covariance, mean of (x - mean_x) * (y - mean_y)."""
    mean_x = require_number(arithmetic_mean(x), 'mean of x')
    mean_y = require_number(arithmetic_mean(y), 'mean of y')
    with np.errstate(over='ignore', invalid='ignore'):
        return pairwise_sum((x - mean_x) * (y - mean_y)) / len(x)


def correlation(x: NDArray, y: NDArray) -> float:
    """
    Pearson correlation coefficient.

    Raises:
        ComputedNaNError: If a mean, deviation or the covariance is NaN
        DivisionByZeroError: If either standard deviation is 0
    """
    cov = require_number(covariance(x, y), 'covariance')
    sd_x = require_number(standard_deviation(x), 'standard deviation of x')
    sd_y = require_number(standard_deviation(y), 'standard deviation of y')

    if sd_x == 0 or sd_y == 0:
        constant = 'x' if sd_x == 0 else 'y'
        raise DivisionByZeroError(
            f"correlation with constant {constant}", quantity=f"sd_{constant}"
        )

    denominator = sd_x * sd_y
    if denominator == 0:
        raise DivisionByZeroError("sd_x * sd_y underflows to zero", quantity='sd_x*sd_y')
    return cov / denominator


def linear_regression(x: NDArray, y: NDArray) -> LinearFit:
    """
    Ordinary least squares via the normal equations.

        slope     = (n Sxy - Sx Sy) / (n Sxx - Sx^2)
        intercept = (Sy - slope Sx) / n

    Raises:
        DivisionByZeroError: If n Sxx - Sx^2 is exactly 0 (constant x)
    """
    n = len(x)
    sum_x = pairwise_sum(x)
    sum_y = pairwise_sum(y)
    with np.errstate(over='ignore', invalid='ignore'):
        sum_xy = pairwise_sum(x * y)
    sum_xx = sum_of_squares(x)

    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        raise DivisionByZeroError(
            "regression denominator is zero (x is constant)", quantity='n*Sxx - Sx^2'
        )

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n
    return LinearFit(slope=slope, intercept=intercept)


def boxplot(x: NDArray) -> BoxplotSummary:
    s = sorted_copy(x)
    q1, _, q3 = quartiles(s)
    iqr = q3 - q1
    return BoxplotSummary(
        q3=q3,
        median=median_sorted(s),
        q1=q1,
        upper_whisker=q3 + WHISKER_FACTOR * iqr,
        lower_whisker=q1 - WHISKER_FACTOR * iqr,
        maximum=max_value(x),
        minimum=min_value(x),
    )

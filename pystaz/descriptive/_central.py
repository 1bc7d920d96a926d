"""
Central-tendency engine.

Each mean variant is a plain function of a validated, non-empty float64
sample. compute_mean() dispatches over MeanKind.
"""

from __future__ import annotations

import math
from typing import Callable

from numpy.typing import NDArray

from pystaz.core.exceptions import DivisionByZeroError, DomainError, ValidationError
from pystaz.descriptive.kinds import MeanKind
from pystaz.descriptive._order import quantile_sorted
from pystaz.descriptive._primitives import (
    pairwise_sum, sum_of_squares, product, reciprocal_sum,
    min_value, max_value, sorted_copy, nth_root,
)


def quartiles(s: NDArray) -> tuple[float, float, float]:
    """Q1, Q2, Q3 of a sorted sample."""
    return (
        quantile_sorted(s, 4, 1),
        quantile_sorted(s, 4, 2),
        quantile_sorted(s, 4, 3),
    )


def arithmetic_mean(x: NDArray) -> float:
    return pairwise_sum(x) / len(x)


def geometric_mean(x: NDArray) -> float:
    """
    n-th root of the product.

    Raises:
        DomainError: If the product is negative
    """
    prod = product(x)
    if prod < 0:
        raise DomainError(
            f"geometric mean of a sample with negative product {prod}", value=prod
        )
    if prod == 0:
        return 0.0
    return nth_root(prod, len(x))


def harmonic_mean(x: NDArray) -> float:
    """
    Raises:
        DivisionByZeroError: If any element is 0, or the reciprocals sum to 0
    """
    recip = reciprocal_sum(x)
    if recip == 0:
        raise DivisionByZeroError("reciprocals sum to zero", quantity='reciprocal_sum')
    return len(x) / recip


def quadratic_mean(x: NDArray) -> float:
    return math.sqrt(sum_of_squares(x) / len(x))


def extremes_mean(x: NDArray) -> float:
    """Midrange, (min + max) / 2. Needs at least two values."""
    if len(x) < 2:
        raise ValidationError(f"extremes mean: requires at least 2 samples, got {len(x)}")
    return (min_value(x) + max_value(x)) / 2.0


def trimean(x: NDArray) -> float:
    """Tukey's trimean, (Q1 + 2*Q2 + Q3) / 4."""
    q1, q2, q3 = quartiles(sorted_copy(x))
    return (q1 + 2.0 * q2 + q3) / 4.0


def midhinge(x: NDArray) -> float:
    q1, _, q3 = quartiles(sorted_copy(x))
    return (q1 + q3) / 2.0


_MEANS: dict[MeanKind, Callable[[NDArray], float]] = {
    MeanKind.ARITHMETIC: arithmetic_mean,
    MeanKind.GEOMETRIC: geometric_mean,
    MeanKind.HARMONIC: harmonic_mean,
    MeanKind.QUADRATIC: quadratic_mean,
    MeanKind.EXTREMES: extremes_mean,
    MeanKind.TRIMEAN: trimean,
    MeanKind.MIDHINGE: midhinge,
}


def compute_mean(kind: MeanKind, x: NDArray) -> float:
    return _MEANS[kind](x)

"""
Numeric primitives shared by every engine.

All functions take a validated, non-empty float64 sample and never
write to it. Failures are raised as PyStazError subclasses.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

from pystaz.core.exceptions import AllocationError, DivisionByZeroError, DomainError


def pairwise_sum(x: NDArray) -> float:
    """
    Divide-and-conquer summation.

    Rounding error grows as O(log n) instead of O(n) for naive
    left-to-right accumulation. Recursion depth is ceil(log2 n).
    """
    n = len(x)
    if n == 1:
        return float(x[0])
    if n == 2:
        return float(x[0]) + float(x[1])
    mid = n // 2
    return pairwise_sum(x[:mid]) + pairwise_sum(x[mid:])


def sum_of_squares(x: NDArray) -> float:
    total = 0.0
    for v in x.tolist():
        total += v * v
    return total


def product(x: NDArray) -> float:
    """Running product; stops as soon as the partial product is exactly 0."""
    result = 1.0
    for v in x.tolist():
        result *= v
        if result == 0.0:
            return 0.0
    return result


def reciprocal_sum(x: NDArray) -> float:
    """
    Kahan-compensated sum of 1/x_i.

    Raises:
        DivisionByZeroError: If any element is exactly 0
    """
    total = 0.0
    compensation = 0.0
    for i, v in enumerate(x.tolist()):
        if v == 0.0:
            raise DivisionByZeroError(
                f"reciprocal of zero at index {i}", quantity='x[i]'
            )
        term = 1.0 / v - compensation
        running = total + term
        compensation = (running - total) - term
        total = running
    return total


def min_value(x: NDArray) -> float:
    return float(np.min(x))


def max_value(x: NDArray) -> float:
    return float(np.max(x))


def duplicate(x: NDArray) -> NDArray:
    """
    Independent copy of the sample.

    Raises:
        AllocationError: If numpy cannot allocate the copy
    """
    try:
        return np.array(x, dtype=np.float64, copy=True)
    except MemoryError as e:
        raise AllocationError(f"cannot allocate working copy of {len(x)} values") from e


def sorted_copy(x: NDArray) -> NDArray:
    """Ascending sorted private copy. NaN sorts after every number."""
    work = duplicate(x)
    work.sort(kind='stable')
    return work


def ascending_compare(a: float, b: float) -> int:
    """
    Three-way comparison for ascending order.

    Returns -1, 0 or 1. NaN compares equal to everything, so this is not
    a total order on samples that contain NaN.
    """
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def nth_root(value: float, index: float) -> float:
    """
    Root of arbitrary index, value ** (1 / index).

    Raises:
        DivisionByZeroError: If index is 0, or value is 0 and index negative
        DomainError: If value is negative
    """
    if index == 0:
        raise DivisionByZeroError("root index is zero", quantity='index')
    if value == 0 and index < 0:
        raise DivisionByZeroError("negative-index root of zero", quantity='value')
    if value < 0:
        raise DomainError(
            f"root of index {index} of negative value {value}", value=value
        )
    try:
        return math.pow(value, 1.0 / index)
    except OverflowError:
        return math.inf

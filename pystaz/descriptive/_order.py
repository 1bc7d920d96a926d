"""
Order statistics on sorted samples.

The quantile rule is the (divisions, position) form of linear
interpolation at rank h = P * (n + 1) / D between the bracketing order
statistics, clamped to the sample extremes. It coincides with
Hyndman & Fan type 6, and at D=4, P=2 it reproduces the median exactly.

Reference:
    Hyndman, R.J. and Fan, Y. (1996) "Sample Quantiles in Statistical
    Packages", The American Statistician, 50(4), 361-365.
"""

from __future__ import annotations

import math
import numbers

from numpy.typing import NDArray

from pystaz.core.exceptions import OutOfRangeError, ValidationError


def median_sorted(s: NDArray) -> float:
    """Middle element, or mean of the two middle elements for even n."""
    n = len(s)
    middle = n // 2
    if n % 2 != 0:
        return float(s[middle])
    return (float(s[middle - 1]) + float(s[middle])) / 2.0


def check_quantile_request(divisions: int, position: int) -> None:
    """
    Validate a (divisions, position) pair: 1 <= position <= divisions - 1.

    Raises:
        ValidationError: Non-integer arguments, divisions < 2 or position < 1
        OutOfRangeError: position >= divisions
    """
    for name, value in (('divisions', divisions), ('position', position)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise ValidationError(f"{name}: expected an integer, got {value!r}")

    if divisions < 2:
        raise ValidationError(f"divisions: must be at least 2, got {divisions}")
    if position < 1:
        raise ValidationError(f"position: must be at least 1, got {position}")
    if position >= divisions:
        raise OutOfRangeError(
            f"position {position} must be less than divisions {divisions}",
            value=position,
            limit=divisions,
        )


def quantile_sorted(s: NDArray, divisions: int, position: int) -> float:
    """
    Quantile of an ascending-sorted sample.

    Parameters
    ----------
    s : NDArray
        1D sorted array, non-empty.
    divisions : int
        Number of equal partitions (4 = quartiles, 100 = percentiles).
    position : int
        Which cut point, 1 <= position <= divisions - 1.
    """
    n = len(s)
    index = position * (n + 1) / divisions
    lower = math.floor(index)

    if lower >= n:
        return float(s[n - 1])
    if lower <= 0:
        return float(s[0])

    # 1-based ranks lower and lower + 1
    below = float(s[lower - 1])
    above = float(s[lower])
    fraction = index - lower
    if fraction == 0:
        return below
    # same rounding as median_sorted, so (4, 2) reproduces the median bit for bit
    if fraction == 0.5:
        return (below + above) / 2.0
    return below + fraction * (above - below)

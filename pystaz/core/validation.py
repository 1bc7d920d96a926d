"""
Input validation utilities for PyStaz.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent. The public boundary turns the
raised ValidationError into an INVALID_PARAMETERS result.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - NaN and Inf are accepted; they propagate through arithmetic
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pystaz.core.exceptions import ValidationError, DimensionError


def check_present(array: Any, name: str) -> None:
    """
    Verify an argument was supplied.

    Raises:
        ValidationError: If array is None
    """
    if array is None:
        raise ValidationError(f"{name}: sample is absent (got None)")


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    Integer input is promoted to float64.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, bool, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex dtype {result.dtype}, expected real numbers")

    if result.dtype != np.float64:
        result = result.astype(np.float64)

    return result


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """
    Verify array has at least the minimum number of samples.

    Raises:
        ValidationError: If array has fewer than min_samples
    """
    n = array.shape[0]
    if n < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {n}"
        )


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_sample(
    sample: ArrayLike,
    name: str = 'sample',
    min_samples: int = 1,
) -> NDArray[np.float64]:
    """
    Full check for a single sample: present, numeric, 1D, non-empty.

    Returns:
        float64 view or copy of the sample. Callers must not write to it.
    """
    check_present(sample, name)
    arr = check_array(sample, name)
    check_1d(arr, name)
    check_min_samples(arr, min_samples, name)
    return arr


def count_nan(array: NDArray[np.floating[Any]]) -> int:
    """Number of NaN entries, used for input warnings."""
    return int(np.count_nonzero(np.isnan(array)))

"""
Error codes and the per-thread error latch.

Every public operation reports its outcome through a closed set of
ErrorCode values. The code travels inside the returned Result, and is
also written to a latch that callers can inspect right after a call:

    >>> res = mean('harmonic', [1, 2, 0, 4])
    >>> get_error()
    <ErrorCode.ZERO_DIVISION: 3>
    >>> perror('harmonic')
    harmonic: Division by zero

The latch is thread-local: each calling thread sees only the code left
by its own most recent call. It is overwritten by every public call
(last write wins).
"""

from __future__ import annotations

import sys
import threading
from enum import IntEnum
from typing import TextIO


class ErrorCode(IntEnum):
    """Closed set of outcome codes shared by every operation."""
    NONE = 0
    ALLOCATION_FAILURE = 1
    INVALID_PARAMETERS = 2
    ZERO_DIVISION = 3
    MATH_DOMAIN = 4
    COMPUTED_NAN = 5
    VALUE_OUT_OF_RANGE = 6
    UNKNOWN = 7


_MESSAGES = {
    ErrorCode.NONE: "No error",
    ErrorCode.ALLOCATION_FAILURE: "Memory allocation failed",
    ErrorCode.INVALID_PARAMETERS: "Invalid parameters",
    ErrorCode.ZERO_DIVISION: "Division by zero",
    ErrorCode.MATH_DOMAIN: "Math domain error",
    ErrorCode.COMPUTED_NAN: "Computation produced NaN",
    ErrorCode.VALUE_OUT_OF_RANGE: "Value out of range",
    ErrorCode.UNKNOWN: "Unknown error",
}

_latch = threading.local()


def to_code(code: int) -> ErrorCode:
    """Map any integer to an ErrorCode, falling back to UNKNOWN."""
    try:
        return ErrorCode(code)
    except ValueError:
        return ErrorCode.UNKNOWN


def strerror(code: int) -> str:
    """Human-readable message for an error code."""
    return _MESSAGES[to_code(code)]


def get_error() -> ErrorCode:
    """Code left by the calling thread's most recent public operation."""
    return getattr(_latch, 'code', ErrorCode.NONE)


def set_error(code: int) -> None:
    """Overwrite the calling thread's latch."""
    _latch.code = to_code(code)


def clear_error() -> None:
    """Reset the calling thread's latch to NONE."""
    _latch.code = ErrorCode.NONE


def perror(prefix: str | None = None, *, file: TextIO | None = None) -> None:
    """
    Write the latched error message to a diagnostic stream.

    Args:
        prefix: Optional label written before the message.
        file: Target stream, default sys.stderr.
    """
    stream = file if file is not None else sys.stderr
    message = strerror(get_error())
    if prefix:
        stream.write(f"{prefix}: {message}\n")
    else:
        stream.write(f"{message}\n")

"""
Core infrastructure for PyStaz.

This module provides shared abstractions and utilities used by the
descriptive statistics engines.

Key components:
    errors: ErrorCode enumeration and the per-thread error latch
    exceptions: Exception hierarchy (each class maps to an ErrorCode)
    result: Generic Result[P] envelope
    boundary: Exception-to-Result adapter for public operations
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from pystaz.core.errors import (
    ErrorCode,
    strerror,
    get_error,
    clear_error,
    perror,
)
from pystaz.core.result import Result
from pystaz.core.exceptions import (
    PyStazError,
    ValidationError,
    DimensionError,
    OutOfRangeError,
    AllocationError,
    NumericalError,
    DivisionByZeroError,
    DomainError,
    ComputedNaNError,
)

__all__ = [
    # Errors
    "ErrorCode",
    "strerror",
    "get_error",
    "clear_error",
    "perror",
    # Result
    "Result",
    # Exceptions
    "PyStazError",
    "ValidationError",
    "DimensionError",
    "OutOfRangeError",
    "AllocationError",
    "NumericalError",
    "DivisionByZeroError",
    "DomainError",
    "ComputedNaNError",
]

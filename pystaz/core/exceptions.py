"""
Exception hierarchy for PyStaz.

All exceptions inherit from PyStazError to allow catching any
library-specific error. Each exception class carries the ErrorCode it
maps to, so the public boundary can turn a raised exception into a
failed Result without losing information.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from pystaz.core.errors import ErrorCode


class PyStazError(Exception):
    """Base exception for all PyStaz errors."""
    code = ErrorCode.UNKNOWN


class ValidationError(PyStazError):
    """
    Input validation failed.

    Raised when user-provided inputs (samples, kind selectors, quantile
    parameters) fail validation checks.
    """
    code = ErrorCode.INVALID_PARAMETERS


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when a sample is not 1D, or when paired samples have
    different lengths.
    """
    pass


class OutOfRangeError(ValidationError):
    """
    A parameter lies outside its admissible range.

    Attributes:
        value: The offending value
        limit: The bound it violated
    """
    code = ErrorCode.VALUE_OUT_OF_RANGE

    def __init__(
        self,
        message: str,
        value: float | None = None,
        limit: float | None = None,
    ):
        super().__init__(message)
        self.value = value
        self.limit = limit


class AllocationError(PyStazError):
    """Scratch storage for a working copy could not be allocated."""
    code = ErrorCode.ALLOCATION_FAILURE


class NumericalError(PyStazError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DivisionByZeroError(NumericalError):
    """
    A denominator was exactly zero.

    Attributes:
        quantity: Name of the zero denominator
    """
    code = ErrorCode.ZERO_DIVISION

    def __init__(self, message: str, quantity: str | None = None):
        super().__init__(message)
        self.quantity = quantity


class DomainError(NumericalError):
    """
    A value lies outside the domain of a mathematical function.

    Attributes:
        value: The offending argument
    """
    code = ErrorCode.MATH_DOMAIN

    def __init__(self, message: str, value: float | None = None):
        super().__init__(message)
        self.value = value


class ComputedNaNError(NumericalError):
    """
    An intermediate result was NaN.

    Attributes:
        stage: Name of the intermediate that produced NaN
    """
    code = ErrorCode.COMPUTED_NAN

    def __init__(self, message: str, stage: str | None = None):
        super().__init__(message)
        self.stage = stage


_EXCEPTION_FOR_CODE = {
    ErrorCode.ALLOCATION_FAILURE: AllocationError,
    ErrorCode.INVALID_PARAMETERS: ValidationError,
    ErrorCode.ZERO_DIVISION: DivisionByZeroError,
    ErrorCode.MATH_DOMAIN: DomainError,
    ErrorCode.COMPUTED_NAN: ComputedNaNError,
    ErrorCode.VALUE_OUT_OF_RANGE: OutOfRangeError,
    ErrorCode.UNKNOWN: PyStazError,
}


def exception_for(code: ErrorCode, message: str) -> PyStazError:
    """Build the exception instance that corresponds to a failure code."""
    if code == ErrorCode.NONE:
        raise ValueError("ErrorCode.NONE has no exception")
    return _EXCEPTION_FOR_CODE[code](message)

"""
Generic result container for all PyStaz computations.

The Result class is the single return type of every public operation.
It carries either the computed value or a failure code from the closed
ErrorCode set, so a caller never has to consult shared state to learn
whether a particular call succeeded.

Design decisions:
    - Generic over value payload P (float, BoxplotSummary, LinearFit, ...)
    - On failure, value is the NaN sentinel (scalar) or an all-NaN record
    - info dict for flexible metadata (message, divisions, kind)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

from pystaz.core.errors import ErrorCode, strerror
from pystaz.core.exceptions import exception_for

P = TypeVar('P')  # Value payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The operation-specific value type

    Attributes:
        value: Computed statistic, or the NaN sentinel on failure
        error: Outcome code, ErrorCode.NONE on success
        info: Structured metadata ('message' is set on failure)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(value=2.5)
        >>> Result(value=float('nan'), error=ErrorCode.ZERO_DIVISION,
        ...        info={'message': 'reciprocal of zero at index 2'})
    """
    value: P
    error: ErrorCode = ErrorCode.NONE
    info: dict[str, Any] = field(default_factory=dict)
    timing: dict[str, float] | None = None
    backend_name: str = 'cpu_descriptive'
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def failure(cls, value: P, error: ErrorCode, message: str | None = None) -> Result[P]:
        """Build a failed result holding the NaN sentinel value."""
        return cls(
            value=value,
            error=error,
            info={'message': message or strerror(error)},
        )

    @property
    def ok(self) -> bool:
        """True when the operation succeeded."""
        return self.error == ErrorCode.NONE

    @property
    def message(self) -> str:
        """Failure message, or the NONE message on success."""
        return self.info.get('message', strerror(self.error))

    def unwrap(self) -> P:
        """
        Return the value, raising the mapped PyStazError on failure.

        Raises:
            PyStazError: Subclass selected by the error code
        """
        if not self.ok:
            raise exception_for(self.error, self.message)
        return self.value

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)

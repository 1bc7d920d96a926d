"""
Public-boundary adapter between raised exceptions and Result values.

Engines raise the PyStazError hierarchy; the decorator defined here
turns any such exception into a failed Result carrying the NaN
sentinel, and writes the final code to the calling thread's latch.
No PyStazError escapes a decorated function.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from pystaz.core.errors import set_error
from pystaz.core.exceptions import PyStazError
from pystaz.core.result import Result

F = TypeVar('F', bound=Callable[..., Result])


def nan_scalar() -> float:
    return float('nan')


def reports_errors(sentinel: Callable[[], Any] = nan_scalar) -> Callable[[F], F]:
    """
    Decorate a public operation that returns a Result.

    Args:
        sentinel: Zero-argument factory for the failure value
            (NaN for scalars, an all-NaN record for composites).
    """
    def decorate(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                result = func(*args, **kwargs)
            except PyStazError as exc:
                result = Result.failure(sentinel(), exc.code, str(exc))
            set_error(result.error)
            return result
        return wrapper  # type: ignore[return-value]
    return decorate

"""
PyStaz: lightweight descriptive statistics for Python.

Pure functions over in-memory samples of real numbers: means, deviations,
quantiles, ranges, correlation and least-squares fits. Every operation
returns a Result carrying either the value or an ErrorCode.

Submodules:
    descriptive: The statistics engines
    core: Errors, Result envelope, validation, timing
"""

__version__ = "0.1.0"

from pystaz import core
from pystaz import descriptive
from pystaz.core import (
    ErrorCode,
    Result,
    strerror,
    get_error,
    clear_error,
    perror,
    PyStazError,
)
from pystaz.descriptive import *  # noqa: F401,F403
from pystaz.descriptive import __all__ as _descriptive_all

__all__ = [
    "__version__",
    "core",
    "descriptive",
    "ErrorCode",
    "Result",
    "strerror",
    "get_error",
    "clear_error",
    "perror",
    "PyStazError",
    *_descriptive_all,
]

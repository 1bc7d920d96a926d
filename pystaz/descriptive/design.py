"""
SampleDesign: data wrapper for multi-statistic runs.

Wraps a validated 1D sample and provides metadata for the describe()
pipeline. Follows the Design pattern: build once, read-only afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
import numpy as np
from numpy.typing import NDArray

from pystaz.core.validation import check_sample, count_nan
from pystaz.descriptive._primitives import duplicate


@dataclass(frozen=True)
class SampleDesign:
    """
    Design for descriptive statistics of one sample.

    Holds a private float64 copy of the caller's data, so nothing the
    engines do can reach the caller's memory. NaN and Inf are kept and
    propagate through arithmetic.

    Construction:
        SampleDesign.from_array(data)
        SampleDesign.from_array(series)   # pandas Series, name kept
    """
    _data: NDArray[np.float64]
    _n: int
    _name: str | None

    @classmethod
    def from_array(cls, data, *, name: str | None = None) -> SampleDesign:
        """
        Build SampleDesign from array-like data.

        Parameters
        ----------
        data : array-like
            1D sequence of real numbers. Objects with a .values attribute
            (pandas Series) are unwrapped and their .name is used when no
            name is given.
        name : str, optional
            Label shown in summary output.

        Raises
        ------
        ValidationError
            Absent, empty, non-numeric or multi-dimensional input.
        """
        if hasattr(data, 'values') and not isinstance(data, np.ndarray):
            if name is None and getattr(data, 'name', None) is not None:
                name = str(data.name)
            data = data.values

        arr = duplicate(check_sample(data, 'data'))
        arr.flags.writeable = False
        return cls(_data=arr, _n=len(arr), _name=name)

    @property
    def data(self) -> NDArray[np.float64]:
        """Read-only sample copy."""
        return self._data

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def n_missing(self) -> int:
        """Number of NaN values."""
        return count_nan(self._data)

    @property
    def has_missing(self) -> bool:
        return self.n_missing > 0

    def __repr__(self) -> str:
        missing = f", missing={self.n_missing}" if self.has_missing else ""
        label = f", name={self._name!r}" if self._name else ""
        return f"SampleDesign(n={self._n}{label}{missing})"

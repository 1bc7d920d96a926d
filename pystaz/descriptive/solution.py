"""
Descriptive statistics solution types.

Contains the composite records returned by boxplot() and
linear_regression(), the parameter payload filled by describe(), and
the user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any
import numpy as np
from numpy.typing import ArrayLike

from pystaz.core.errors import ErrorCode
from pystaz.core.result import Result
from pystaz.descriptive.kinds import (
    MeanKind, DeviationKind, RangeKind, coerce_kind,
)

_NAN = float('nan')


@dataclass(frozen=True)
class BoxplotSummary:
    """
    Seven-number box plot summary.

    Whiskers sit 1.5 IQR beyond the quartiles; values outside them are
    conventionally drawn as outliers.
    """
    q3: float
    median: float
    q1: float
    upper_whisker: float
    lower_whisker: float
    maximum: float
    minimum: float

    @classmethod
    def nan(cls) -> BoxplotSummary:
        """All-NaN record returned when boxplot() fails."""
        return cls(*([_NAN] * 7))

    @property
    def iqr(self) -> float:
        return self.q3 - self.q1

    def as_tuple(self) -> tuple[float, ...]:
        """Fields in declaration order: q3, median, q1, upper, lower, max, min."""
        return tuple(getattr(self, f.name) for f in fields(self))

    def is_nan(self) -> bool:
        return all(np.isnan(v) for v in self.as_tuple())


@dataclass(frozen=True)
class LinearFit:
    """Least-squares line y = slope * x + intercept."""
    slope: float
    intercept: float

    @classmethod
    def nan(cls) -> LinearFit:
        """All-NaN record returned when linear_regression() fails."""
        return cls(slope=_NAN, intercept=_NAN)

    def predict(self, x: ArrayLike) -> float | np.ndarray:
        """Evaluate the line at scalar or array x."""
        if np.ndim(x) == 0:
            return self.slope * float(x) + self.intercept
        return self.slope * np.asarray(x, dtype=np.float64) + self.intercept

    def is_nan(self) -> bool:
        return bool(np.isnan(self.slope) and np.isnan(self.intercept))


def _nan_means() -> dict[MeanKind, float]:
    return {kind: _NAN for kind in MeanKind}


def _nan_deviations() -> dict[DeviationKind, float]:
    return {kind: _NAN for kind in DeviationKind}


def _nan_ranges() -> dict[RangeKind, float]:
    return {kind: _NAN for kind in RangeKind}


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for describe().

    Every field is NaN when the statistic could not be computed; the
    reason is recorded in Result.info['errors'].
    """
    n: int = 0
    total: float = _NAN
    minimum: float = _NAN
    maximum: float = _NAN
    median: float = _NAN
    mode: float = _NAN
    variance: float = _NAN
    means: dict[MeanKind, float] = field(default_factory=_nan_means)
    deviations: dict[DeviationKind, float] = field(default_factory=_nan_deviations)
    ranges: dict[RangeKind, float] = field(default_factory=_nan_ranges)
    boxplot: BoxplotSummary = field(default_factory=BoxplotSummary.nan)


@dataclass
class DescriptiveSolution:
    """
    User-facing describe() results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]

    # --- Outcome ---

    @property
    def ok(self) -> bool:
        return self._result.ok

    @property
    def error(self) -> ErrorCode:
        """Overall outcome; only an invalid sample fails describe()."""
        return self._result.error

    @property
    def errors(self) -> dict[str, ErrorCode]:
        """Per-statistic failure codes, keyed by statistic label."""
        return self._result.info.get('errors', {})

    # --- Statistics ---

    @property
    def n(self) -> int:
        return self._result.value.n

    @property
    def total(self) -> float:
        return self._result.value.total

    @property
    def minimum(self) -> float:
        return self._result.value.minimum

    @property
    def maximum(self) -> float:
        return self._result.value.maximum

    @property
    def median(self) -> float:
        return self._result.value.median

    @property
    def mode(self) -> float:
        return self._result.value.mode

    @property
    def variance(self) -> float:
        """Population variance (divisor n)."""
        return self._result.value.variance

    @property
    def boxplot(self) -> BoxplotSummary:
        return self._result.value.boxplot

    def mean(self, kind: MeanKind | str | int = MeanKind.ARITHMETIC) -> float:
        return self._result.value.means[coerce_kind(MeanKind, kind)]

    def deviation(self, kind: DeviationKind | str | int = DeviationKind.STANDARD) -> float:
        return self._result.value.deviations[coerce_kind(DeviationKind, kind)]

    def range(self, kind: RangeKind | str | int = RangeKind.STANDARD) -> float:
        return self._result.value.ranges[coerce_kind(RangeKind, kind)]

    # --- Metadata ---

    @property
    def name(self) -> str | None:
        return self._result.info.get('name')

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Two-column text table of every statistic."""
        params = self._result.value
        rows: list[tuple[str, float]] = [
            ("n", float(params.n)),
            ("Sum", params.total),
            ("Min.", params.minimum),
            ("1st Qu.", params.boxplot.q1),
            ("Median", params.median),
            ("3rd Qu.", params.boxplot.q3),
            ("Max.", params.maximum),
            ("Mode", params.mode),
            ("Variance", params.variance),
        ]
        rows += [(f"Mean ({k.value})", v) for k, v in params.means.items()]
        rows += [(f"Deviation ({k.value})", v) for k, v in params.deviations.items()]
        rows += [(f"Range ({k.value})", v) for k, v in params.ranges.items()]

        label_width = max(len(label) for label, _ in rows)
        lines = [f"Descriptive Statistics: {self.name or 'sample'}"]
        for label, value in rows:
            if label == "n":
                lines.append(f"{label.ljust(label_width)}  {params.n}")
            else:
                lines.append(f"{label.ljust(label_width)}  {value:.6f}")
        if self.errors:
            failed = ", ".join(f"{k}={v.name}" for k, v in self.errors.items())
            lines.append(f"Failed: {failed}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        if not self.ok:
            return f"DescriptiveSolution(error={self.error.name})"
        failed = f", failed={len(self.errors)}" if self.errors else ""
        return f"DescriptiveSolution(n={self.n}{failed})"

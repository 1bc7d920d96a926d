"""
CPU backend for describe().

Runs every engine over one SampleDesign, timing each family of
statistics. A statistic that fails is left NaN; its ErrorCode goes to
info['errors'] and a line to Result.warnings.
"""

from __future__ import annotations

import warnings
from typing import Callable, TypeVar

from pystaz.core.compute.timing import Timer
from pystaz.core.errors import ErrorCode
from pystaz.core.exceptions import PyStazError
from pystaz.core.result import Result
from pystaz.descriptive.design import SampleDesign
from pystaz.descriptive.kinds import MeanKind, DeviationKind, RangeKind
from pystaz.descriptive.solution import BoxplotSummary, DescriptiveParams
from pystaz.descriptive._central import compute_mean
from pystaz.descriptive._dispersion import (
    compute_deviation, compute_range, mode, variance,
)
from pystaz.descriptive._order import median_sorted
from pystaz.descriptive._primitives import (
    max_value, min_value, pairwise_sum, sorted_copy,
)
from pystaz.descriptive._relationship import boxplot

T = TypeVar('T')


class CPUDescriptiveBackend:
    """CPU reference backend for descriptive statistics."""

    @property
    def name(self) -> str:
        return 'cpu_descriptive'

    def solve(self, design: SampleDesign) -> Result[DescriptiveParams]:
        """
        Compute every statistic of the design's sample.

        Parameters
        ----------
        design : SampleDesign

        Returns
        -------
        Result[DescriptiveParams]
            error is always NONE; per-statistic failures are in
            info['errors'].
        """
        timer = Timer()
        timer.start()

        x = design.data
        errors: dict[str, ErrorCode] = {}
        warnings_list: list[str] = []

        if design.has_missing:
            warnings_list.append(
                f"data: contains {design.n_missing} NaN value(s); NaN propagates"
            )

        def attempt(label: str, func: Callable[[], T], fallback: T) -> T:
            try:
                return func()
            except PyStazError as exc:
                errors[label] = exc.code
                warnings_list.append(f"{label}: {exc.code.name}: {exc}")
                return fallback

        nan = float('nan')

        with timer.section('primitives'):
            total = attempt('sum', lambda: pairwise_sum(x), nan)
            low = attempt('min', lambda: min_value(x), nan)
            high = attempt('max', lambda: max_value(x), nan)

        with timer.section('order_statistics'):
            med = attempt('median', lambda: median_sorted(sorted_copy(x)), nan)
            box = attempt('boxplot', lambda: boxplot(x), BoxplotSummary.nan())

        with timer.section('means'):
            means = {
                kind: attempt(f"mean[{kind.value}]", lambda k=kind: compute_mean(k, x), nan)
                for kind in MeanKind
            }

        with timer.section('dispersion'):
            var = attempt('variance', lambda: variance(x), nan)
            deviations = {
                kind: attempt(
                    f"deviation[{kind.value}]", lambda k=kind: compute_deviation(k, x), nan
                )
                for kind in DeviationKind
            }
            ranges = {
                kind: attempt(f"range[{kind.value}]", lambda k=kind: compute_range(k, x), nan)
                for kind in RangeKind
            }

        with timer.section('mode'):
            most_frequent = attempt('mode', lambda: mode(x), nan)

        timer.stop()

        if errors:
            warnings.warn(
                f"describe: {len(errors)} statistic(s) could not be computed: "
                + ", ".join(sorted(errors)),
                RuntimeWarning,
                stacklevel=5,
            )

        params = DescriptiveParams(
            n=design.n,
            total=total,
            minimum=low,
            maximum=high,
            median=med,
            mode=most_frequent,
            variance=var,
            means=means,
            deviations=deviations,
            ranges=ranges,
            boxplot=box,
        )

        return Result(
            value=params,
            info={'name': design.name, 'n_missing': design.n_missing, 'errors': errors},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )

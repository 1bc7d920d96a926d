"""
Descriptive statistics module.

Population statistics of a single in-memory sample (or a pair of
samples). Every operation returns a Result; failures carry an ErrorCode
and a NaN value instead of raising.

Public API:
    total, sum_of_squares, product, reciprocal_sum   - Numeric primitives
    minimum, maximum, duplicate, sort, nth_root
    median(x), quantile(D, P, x)                    - Order statistics
    mean(kind, x)                                   - Seven mean kinds
    variance(x), deviation(kind, x)                 - Dispersion
    value_range(kind, x), mode(x)
    covariance(x, y), correlation(x, y)             - Relationship
    linear_regression(x, y), boxplot(x)
    describe(x)                                     - All statistics at once
"""

from pystaz.descriptive.design import SampleDesign
from pystaz.descriptive.kinds import MeanKind, DeviationKind, RangeKind
from pystaz.descriptive.solution import (
    BoxplotSummary,
    LinearFit,
    DescriptiveParams,
    DescriptiveSolution,
)
from pystaz.descriptive._primitives import ascending_compare
from pystaz.descriptive.solvers import (
    total,
    sum_of_squares,
    product,
    reciprocal_sum,
    minimum,
    maximum,
    duplicate,
    sort,
    nth_root,
    median,
    quantile,
    mean,
    variance,
    deviation,
    value_range,
    mode,
    covariance,
    correlation,
    linear_regression,
    boxplot,
    describe,
)

__all__ = [
    "total",
    "sum_of_squares",
    "product",
    "reciprocal_sum",
    "minimum",
    "maximum",
    "duplicate",
    "sort",
    "nth_root",
    "ascending_compare",
    "median",
    "quantile",
    "mean",
    "variance",
    "deviation",
    "value_range",
    "mode",
    "covariance",
    "correlation",
    "linear_regression",
    "boxplot",
    "describe",
    "MeanKind",
    "DeviationKind",
    "RangeKind",
    "BoxplotSummary",
    "LinearFit",
    "SampleDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
]

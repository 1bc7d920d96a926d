"""
Closed selector enumerations for the dispatching engines.

Callers may pass an enum member, its string value ('geometric'), or its
integer position (1). Anything else is rejected at the boundary by
coerce_kind() with INVALID_PARAMETERS.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from pystaz.core.exceptions import ValidationError


class MeanKind(str, Enum):
    ARITHMETIC = 'arithmetic'
    GEOMETRIC = 'geometric'
    HARMONIC = 'harmonic'
    QUADRATIC = 'quadratic'
    EXTREMES = 'extremes'
    TRIMEAN = 'trimean'
    MIDHINGE = 'midhinge'


class DeviationKind(str, Enum):
    STANDARD = 'standard'
    AVERAGE = 'average'
    RELATIVE = 'relative'
    MAD_MEAN = 'mad_mean'
    MAD_MEDIAN = 'mad_median'


class RangeKind(str, Enum):
    STANDARD = 'standard'
    INTERQUARTILE = 'interquartile'
    PERCENTILE_10_90 = 'percentile_10_90'


K = TypeVar('K', MeanKind, DeviationKind, RangeKind)


def coerce_kind(enum_cls: type[K], kind: object) -> K:
    """
    Resolve a selector to a member of enum_cls.

    Args:
        enum_cls: MeanKind, DeviationKind or RangeKind
        kind: Member, string value (case-insensitive) or integer position

    Raises:
        ValidationError: If kind does not name a member
    """
    if isinstance(kind, enum_cls):
        return kind

    members = list(enum_cls)

    # bool is an int subclass; True/False are never valid selectors
    if isinstance(kind, int) and not isinstance(kind, bool):
        if 0 <= kind < len(members):
            return members[kind]
        raise ValidationError(
            f"Unknown {enum_cls.__name__} index {kind}, expected 0..{len(members) - 1}"
        )

    if isinstance(kind, str):
        try:
            return enum_cls(kind.lower())
        except ValueError:
            pass

    valid = ", ".join(repr(m.value) for m in members)
    raise ValidationError(f"Unknown {enum_cls.__name__}: {kind!r}. Must be one of {valid}")

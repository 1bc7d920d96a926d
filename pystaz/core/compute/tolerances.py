"""
Tolerance tiers for numerical validation.

Defines precision expectations when comparing PyStaz output with
reference implementations (numpy, scipy.stats):
- CPU FP64: machine precision match
- CPU FP64 accumulated: relaxed for long sums where summation order differs

Used by the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Short samples, identical formula: must match to machine precision
CPU_FP64 = ToleranceTier(
    rtol=1e-12,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, identical formula',
)

# Long samples where the reference sums in a different order
CPU_FP64_ACCUMULATED = ToleranceTier(
    rtol=1e-9,
    atol=1e-10,
    name='cpu_fp64_accumulated',
    description='CPU double precision, different summation order',
)


def select_tolerance(n: int) -> ToleranceTier:
    """Select appropriate tolerance tier for a sample of length n."""
    if n > 1000:
        return CPU_FP64_ACCUMULATED
    return CPU_FP64

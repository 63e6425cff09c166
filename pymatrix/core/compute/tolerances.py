"""
Tolerance tiers for approximate matrix comparison.

Equality of matrices is exact by definition. These tiers exist for the
places where exactness cannot be expected:
- EXACT: integer-valued inputs whose arithmetic is exact in float64
- CPU_FP64: general double precision results (inverse, products)
- CPU_FP64_ILL_CONDITIONED: relaxed, for near-singular inputs

Used by Matrix.is_close() and by the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Integer-valued fixtures: no rounding can occur
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Bit-for-bit equality',
)

# Double precision reference
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision',
)

# Double precision, ill-conditioned problems (cond > 1e4)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, ill-conditioned (cond > 1e4)',
)


def select_tolerance(
    exact: bool = False,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select appropriate tolerance tier for a comparison."""
    if exact:
        return EXACT
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64

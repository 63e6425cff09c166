"""
Compute infrastructure for PyMatrix.

Submodules:
    tolerances: Tolerance tiers for approximate comparison
"""

from pymatrix.core.compute.tolerances import (
    ToleranceTier,
    EXACT,
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    select_tolerance,
)

__all__ = [
    "ToleranceTier",
    "EXACT",
    "CPU_FP64",
    "CPU_FP64_ILL_CONDITIONED",
    "select_tolerance",
]

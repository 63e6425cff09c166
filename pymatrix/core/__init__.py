"""
Core infrastructure for PyMatrix.

This module provides the shared pieces the Matrix implementation is
built on.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    constants: Library-wide constants
    compute: Tolerance tiers for approximate comparison
"""

from pymatrix.core.exceptions import (
    MatrixError,
    ValidationError,
    InvalidDimensionError,
    IndexOutOfRangeError,
    InvalidRowError,
    DimensionError,
    DimensionMismatchError,
    NotSquareError,
    NumericalError,
    ZeroSubmatrixError,
    SingularMatrixError,
)

__all__ = [
    "MatrixError",
    "ValidationError",
    "InvalidDimensionError",
    "IndexOutOfRangeError",
    "InvalidRowError",
    "DimensionError",
    "DimensionMismatchError",
    "NotSquareError",
    "NumericalError",
    "ZeroSubmatrixError",
    "SingularMatrixError",
]

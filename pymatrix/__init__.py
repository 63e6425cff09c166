"""
PyMatrix: dense real-valued matrices with exact reduction algorithms.

Construction, elementwise and linear operations, and the structural
reductions taught in a first linear algebra course: cofactor
determinants, adjugate inverses, row echelon and reduced row echelon
forms.

Submodules:
    matrix: The Matrix type, fill/clear helpers
    core: Exceptions, validation, constants, tolerances
"""

__version__ = "0.1.0"

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
from pymatrix.matrix import Matrix, Pivot, fill, clear

__all__ = [
    "__version__",
    # Matrix
    "Matrix",
    "Pivot",
    "fill",
    "clear",
    # Exceptions
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

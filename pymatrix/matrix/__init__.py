"""
Dense matrix type and its reduction algorithms.

Usage:
    from pymatrix.matrix import Matrix

    a = Matrix([[7, 2, 1], [0, 3, -1], [-3, 4, -2]])
    a.det()            # 1.0
    a.inverse()        # adjugate / det
    a.echelon_form()   # in place, returns the pivots
"""

from pymatrix.matrix._echelon import Pivot
from pymatrix.matrix._matrix import Matrix
from pymatrix.matrix.helpers import fill, clear

__all__ = [
    "Matrix",
    "Pivot",
    "fill",
    "clear",
]

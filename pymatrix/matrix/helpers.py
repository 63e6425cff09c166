"""
Whole-matrix convenience helpers.

Standalone functions rather than methods: they only use the public
Matrix API.
"""

from __future__ import annotations

from itertools import product

from pymatrix.core.validation import check_scalar
from pymatrix.matrix._matrix import Matrix


def fill(matrix: Matrix, value: float) -> None:
    """
    Overwrite every entry of matrix with value. In place.

    Parameters
    ----------
    matrix : Matrix
        Matrix to overwrite. Its shape is unchanged.
    value : float
        Value written to every entry.
    """
    if not isinstance(matrix, Matrix):
        raise TypeError(f"fill: expected Matrix, got {type(matrix).__name__}")
    value = check_scalar(value, "value")
    for m, n in product(range(1, matrix.rows + 1), range(1, matrix.columns + 1)):
        matrix.set_entry(m, n, value)


def clear(matrix: Matrix) -> None:
    """Set every entry of matrix to 0. In place."""
    fill(matrix, 0.0)

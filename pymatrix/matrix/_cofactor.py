"""
Minor extraction, cofactor determinant and adjugate.

Array-level kernels behind Matrix.minor(), Matrix.det() and
Matrix.inverse(). They take and return 0-based float64 arrays and do no
argument validation; the Matrix methods validate first.

The determinant is a Laplace expansion along the first row. It is exact
for integer-valued inputs but O(n!) and offers no protection against
cancellation on ill-conditioned floating-point matrices.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def minor_array(A: NDArray[np.float64], row: int, col: int) -> NDArray[np.float64]:
    """
    Delete one row and one column.

    Parameters
    ----------
    A : ndarray
        Matrix of shape (m, n), m >= 1 and n >= 1.
    row, col : int
        0-based row and column to remove.

    Returns
    -------
    ndarray
        New (m-1, n-1) array; A is not modified.
    """
    return np.delete(np.delete(A, row, axis=0), col, axis=1)


def cofactor_det(A: NDArray[np.float64]) -> float:
    """
    Determinant by cofactor expansion along the first row.

    det(A) = sum_j A[0, j] * det(minor(A, 0, j)) * (-1)^j

    Recursion bottoms out at 2x2 (ad - bc). The 1x1 determinant is the
    entry itself and the empty 0x0 matrix has determinant 1, which is
    what makes the adjugate of a 1x1 or 2x2 matrix well defined.
    """
    n = A.shape[0]
    if n == 0:
        return 1.0
    if n == 1:
        return float(A[0, 0])
    if n == 2:
        return float(A[0, 0] * A[1, 1] - A[1, 0] * A[0, 1])

    det = 0.0
    for j in range(n):
        det += float(A[0, j]) * cofactor_det(minor_array(A, 0, j)) * (-1.0) ** j
    return det


def cofactor_matrix(A: NDArray[np.float64]) -> NDArray[np.float64]:
    """C[i, j] = det(minor(A, i, j)) * (-1)^(i+j) for a square A."""
    n = A.shape[0]
    C = np.empty((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(n):
            C[i, j] = cofactor_det(minor_array(A, i, j)) * (-1.0) ** (i + j)
    return C


def adjugate(A: NDArray[np.float64]) -> NDArray[np.float64]:
    """Transpose of the cofactor matrix."""
    return cofactor_matrix(A).T.copy()

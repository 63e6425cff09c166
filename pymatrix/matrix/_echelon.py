"""
Echelon reduction engine.

Gaussian elimination without partial pivoting: the pivot of each step is
the first non-zero entry of the trailing submatrix, scanning columns left
to right and rows top to bottom within a column. Ties therefore always go
to the earliest candidate in that order, independent of magnitude.

All functions work in place on a 0-based float64 array. Pivot positions
are reported 1-based, matching the Matrix API.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Pivot:
    """
    Position of a pivot entry.

    Attributes:
        row: 1-based row index
        column: 1-based column index
    """
    row: int
    column: int


def search_pivot(A: NDArray[np.float64], offset: int) -> Pivot | None:
    """
    First non-zero entry of the submatrix A[offset:, offset:].

    Returns None when that submatrix is empty or entirely zero.
    """
    sub = A[offset:, offset:]
    # nonzero() on the transpose enumerates column by column
    cols, rows = np.nonzero(sub.T)
    if len(cols) == 0:
        return None
    return Pivot(row=offset + int(rows[0]) + 1, column=offset + int(cols[0]) + 1)


def row_swap(A: NDArray[np.float64], i: int, j: int) -> None:
    """Exchange rows i and j (0-based)."""
    if i != j:
        A[[i, j]] = A[[j, i]]


def row_scale_add(A: NDArray[np.float64], src: int, dst: int, c: float) -> None:
    """A[dst] += c * A[src] (0-based)."""
    A[dst] += A[src] * c


def echelon_inplace(A: NDArray[np.float64]) -> list[Pivot]:
    """
    Reduce A to row echelon form in place.

    For each diagonal offset i < min(m, n): locate the pivot of the
    submatrix rooted at (i, i), swap it into row i, divide the row from
    the pivot column onward by the pivot value, then clear every non-zero
    entry below the pivot. The pass stops at the first offset whose
    submatrix has no pivot.

    Returns:
        Pivots in the order found, with rows as they stand after the swap
    """
    n_rows, n_cols = A.shape
    pivots: list[Pivot] = []

    for i in range(min(n_rows, n_cols)):
        pivot = search_pivot(A, i)
        if pivot is None:
            break

        row_swap(A, pivot.row - 1, i)
        col = pivot.column - 1

        value = A[i, col]
        A[i, col:] /= value

        for y in range(i + 1, n_rows):
            factor = A[y, col]
            if factor == 0:
                continue
            row_scale_add(A, i, y, -factor)

        pivots.append(Pivot(row=i + 1, column=pivot.column))

    return pivots


def reduced_echelon_inplace(A: NDArray[np.float64]) -> list[Pivot]:
    """
    Reduce A to reduced row echelon form in place.

    Runs echelon_inplace(), then re-locates the pivots on the reduced
    array with the same forward search and walks them last to first,
    clearing every non-zero entry above each pivot.

    Returns:
        Pivots in forward order
    """
    echelon_inplace(A)

    n_rows, n_cols = A.shape
    pivots: list[Pivot] = []
    for i in range(min(n_rows, n_cols)):
        pivot = search_pivot(A, i)
        if pivot is None:
            break
        pivots.append(pivot)

    for pivot in reversed(pivots):
        row = pivot.row - 1
        col = pivot.column - 1
        for y in range(row - 1, -1, -1):
            factor = A[y, col]
            if factor == 0:
                continue
            row_scale_add(A, row, y, -factor)

    return pivots


def count_pivots(A: NDArray[np.float64]) -> int:
    """
    Number of distinct pivot positions over offsets 0..min(m, n)-1.

    Searches the array as it currently stands; nothing is reduced.
    Offsets with no pivot contribute nothing.
    """
    n_rows, n_cols = A.shape
    found = {search_pivot(A, i) for i in range(min(n_rows, n_cols))}
    found.discard(None)
    return len(found)

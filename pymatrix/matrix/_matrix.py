"""
Dense real-valued Matrix.

A Matrix owns a C-ordered float64 array whose shape is fixed at
construction. Two kinds of methods coexist and must stay distinct:

    - pure operations (add, multiply, transpose, minor, inverse, clone)
      return a new Matrix and leave the receiver untouched
    - in-place operations (set_entry, scale_row, scale_column, swap_rows,
      scale_add_rows, echelon_form, reduced_echelon_form) mutate the
      receiver and never change its shape

No two Matrix instances ever share storage: every constructor and every
producing operation copies.

Indices exposed to callers are 1-based.
"""

from __future__ import annotations

import numbers
import sys
import warnings
from typing import Any, TextIO

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.constants import (
    COFACTOR_WARN_SIZE,
    PRINT_PRECISION,
    RANDOM_HIGH,
    RANDOM_LOW,
)
from pymatrix.core.compute.tolerances import CPU_FP64
from pymatrix.core.exceptions import (
    InvalidRowError,
    SingularMatrixError,
    ZeroSubmatrixError,
)
from pymatrix.core.validation import (
    check_array,
    check_dimension,
    check_index,
    check_inner_dimensions,
    check_integer,
    check_ndim,
    check_offset,
    check_same_shape,
    check_scalar,
    check_square,
)
from pymatrix.matrix._cofactor import adjugate, cofactor_det, minor_array
from pymatrix.matrix._echelon import (
    Pivot,
    count_pivots,
    echelon_inplace,
    reduced_echelon_inplace,
    row_scale_add,
    row_swap,
    search_pivot,
)


def _warn_if_large(n: int, operation: str) -> None:
    if n > COFACTOR_WARN_SIZE:
        warnings.warn(
            f"{operation}: cofactor expansion on a {n}x{n} matrix is O(n!) "
            f"and will be very slow",
            RuntimeWarning,
            stacklevel=3,
        )


class Matrix:
    """
    Dense rectangular grid of double precision numbers.

    Construct from an array-like, or via the factory classmethods
    zeros(), full(), identity() and random().

    Examples:
        >>> m = Matrix([[1, 2, 3], [4, 5, 6]])
        >>> m.rows, m.columns
        (2, 3)
        >>> m.get(2, 1)
        4.0
        >>> Matrix([1, 2, 3]).shape
        (1, 3)
    """

    __slots__ = ("_data",)

    def __init__(self, source: ArrayLike | Matrix):
        """
        Copy a 2D source, or a 1D source as a single row.

        Args:
            source: Nested sequence, ndarray or another Matrix. Rows must
                all have the same length.

        Raises:
            ValidationError: If source is ragged or non-numeric
            DimensionError: If source is a scalar or has more than 2 dimensions
        """
        if isinstance(source, Matrix):
            self._data = source._data.copy()
            return

        data = check_array(source, "source")
        check_ndim(data, (1, 2), "source")
        if data.ndim == 1:
            data = data.reshape(1, -1)
        self._data = data

    @classmethod
    def _wrap(cls, data: NDArray[np.float64]) -> Matrix:
        """Adopt an array this module just created. No copy, no checks."""
        obj = cls.__new__(cls)
        obj._data = data
        return obj

    # === Factories ===

    @classmethod
    def zeros(cls, m: int, n: int) -> Matrix:
        """m x n matrix of zeros."""
        m = check_dimension(m, "m")
        n = check_dimension(n, "n")
        return cls._wrap(np.zeros((m, n), dtype=np.float64))

    @classmethod
    def full(cls, m: int, n: int, value: float) -> Matrix:
        """m x n matrix with every entry equal to value."""
        m = check_dimension(m, "m")
        n = check_dimension(n, "n")
        value = check_scalar(value, "value")
        return cls._wrap(np.full((m, n), value, dtype=np.float64))

    @classmethod
    def identity(cls, n: int) -> Matrix:
        n = check_dimension(n, "n")
        return cls._wrap(np.eye(n, dtype=np.float64))

    @classmethod
    def random(
        cls,
        m: int,
        n: int,
        rng: np.random.Generator | int | None = None,
    ) -> Matrix:
        """
        m x n matrix with entries drawn uniformly from [1, 51).

        For ad hoc experiments only; nothing about the distribution is
        meant for statistical or cryptographic use.

        Args:
            m: Rows
            n: Columns
            rng: Seed or Generator for reproducible draws. None draws
                fresh OS entropy.
        """
        m = check_dimension(m, "m")
        n = check_dimension(n, "n")
        generator = np.random.default_rng(rng)
        return cls._wrap(generator.uniform(RANDOM_LOW, RANDOM_HIGH, size=(m, n)))

    # === Properties ===

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._data.shape[0]

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        return (self.rows, self.columns)

    # === Entry access ===

    def get(self, m: int, n: int) -> float:
        """
        Entry at row m, column n (1-based).

        Raises:
            IndexOutOfRangeError: If (m, n) lies outside the matrix
        """
        m = check_index(m, self.rows, "m")
        n = check_index(n, self.columns, "n")
        return float(self._data[m - 1, n - 1])

    def set_entry(self, m: int, n: int, value: float) -> None:
        """
        Overwrite the entry at row m, column n (1-based). In place.

        Raises:
            IndexOutOfRangeError: If (m, n) lies outside the matrix
        """
        m = check_index(m, self.rows, "m")
        n = check_index(n, self.columns, "n")
        self._data[m - 1, n - 1] = check_scalar(value, "value")

    def clone(self) -> Matrix:
        """Independent deep copy."""
        return Matrix._wrap(self._data.copy())

    def to_array(self) -> NDArray[np.float64]:
        """Copy of the entries as a (rows, columns) float64 array."""
        return self._data.copy()

    def to_list(self) -> list[list[float]]:
        return self._data.tolist()

    # === Elementwise and linear operations ===

    def is_square(self) -> bool:
        return self.rows == self.columns

    def trace(self) -> float:
        """
        Sum of the main diagonal.

        Raises:
            NotSquareError: If the matrix is not square
        """
        check_square(self.shape, "trace")
        return float(np.trace(self._data))

    def transpose(self) -> Matrix:
        """New columns x rows matrix with result[j][i] == self[i][j]."""
        return Matrix._wrap(self._data.T.copy())

    def add(self, other: Matrix) -> Matrix:
        """
        Elementwise sum.

        Raises:
            DimensionMismatchError: If the shapes differ
        """
        if not isinstance(other, Matrix):
            raise TypeError(f"add: expected Matrix, got {type(other).__name__}")
        check_same_shape(self.shape, other.shape, "add")
        return Matrix._wrap(self._data + other._data)

    def multiply(self, other: Matrix | float) -> Matrix:
        """
        Matrix product when other is a Matrix, scalar multiple otherwise.

        The product requires self.columns == other.rows; entry (i, j) of
        the result is the dot product of row i of self and column j of
        other. Multiplying by the scalar 0 yields a zero matrix of the
        same shape.

        Args:
            other: Matrix or real number

        Returns:
            New Matrix; neither operand is modified

        Raises:
            DimensionMismatchError: If the inner dimensions differ
            ValidationError: If other is neither a Matrix nor a real number
        """
        if isinstance(other, Matrix):
            check_inner_dimensions(self.shape, other.shape, "multiply")
            return Matrix._wrap(self._data @ other._data)

        c = check_scalar(other, "other")
        if c == 0:
            return Matrix.zeros(self.rows, self.columns)
        return Matrix._wrap(self._data * c)

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __mul__(self, other: Any) -> Matrix:
        # scalars only; the matrix product is @
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Any) -> Matrix:
        if not isinstance(other, numbers.Real):
            return NotImplemented
        return self.multiply(other)

    def __neg__(self) -> Matrix:
        return self.multiply(-1.0)

    # === Minor, determinant, inverse ===

    def minor(self, m: int, n: int) -> Matrix:
        """
        Matrix with row m and column n (1-based) removed.

        Raises:
            IndexOutOfRangeError: If m or n lies outside the matrix
        """
        m = check_index(m, self.rows, "m")
        n = check_index(n, self.columns, "n")
        return Matrix._wrap(minor_array(self._data, m - 1, n - 1))

    def det(self) -> float:
        """
        Determinant by cofactor expansion along the first row.

        Exact for integer-valued entries of moderate size, O(n!) in time.
        Warns with RuntimeWarning above COFACTOR_WARN_SIZE.

        Raises:
            NotSquareError: If the matrix is not square
        """
        check_square(self.shape, "det")
        _warn_if_large(self.rows, "det")
        return cofactor_det(self._data)

    def invertible(self) -> bool:
        """Square with a determinant that is not exactly zero."""
        return self.is_square() and self.det() != 0

    def inverse(self) -> Matrix:
        """
        Inverse via the adjugate: adj(A) / det(A).

        Returns:
            New Matrix

        Raises:
            NotSquareError: If the matrix is not square
            SingularMatrixError: If the determinant is exactly zero
        """
        check_square(self.shape, "inverse")
        _warn_if_large(self.rows, "inverse")
        det = cofactor_det(self._data)
        if det == 0:
            raise SingularMatrixError(
                f"inverse: {self.rows}x{self.columns} matrix has determinant 0",
                matrix_name="self",
                determinant=det,
            )
        return Matrix._wrap(adjugate(self._data)).multiply(1.0 / det)

    # === Echelon reduction ===

    def find_pivot(self, offset: int) -> Pivot:
        """
        First non-zero entry of the trailing submatrix rooted at (offset, offset).

        Columns are scanned left to right, and rows top to bottom within
        each column.

        Args:
            offset: 0-based number of leading rows and columns to skip

        Returns:
            Pivot with 1-based row and column

        Raises:
            ZeroSubmatrixError: If the submatrix has no non-zero entry
        """
        offset = check_offset(offset, "offset")
        pivot = search_pivot(self._data, offset)
        if pivot is None:
            raise ZeroSubmatrixError(
                f"find_pivot: submatrix at offset {offset} of a "
                f"{self.rows}x{self.columns} matrix has no non-zero entry",
                offset=offset,
            )
        return pivot

    def echelon_form(self) -> list[Pivot]:
        """
        Reduce to row echelon form. Destructive.

        Each pivot becomes 1 and every entry below a pivot becomes 0.
        Reduction stops early when a trailing submatrix is entirely zero.

        Returns:
            The pivots found, in order
        """
        return echelon_inplace(self._data)

    def reduced_echelon_form(self) -> list[Pivot]:
        """
        Reduce to reduced row echelon form. Destructive.

        Every pivot column ends up with a single 1 at the pivot row and
        zeros elsewhere.

        Returns:
            The pivots of the reduced matrix, in order
        """
        return reduced_echelon_inplace(self._data)

    def pivots(self) -> int:
        """
        Number of distinct pivot positions of the matrix as it stands.

        Meaningful as a rank once the matrix is in echelon form; see rank().
        """
        return count_pivots(self._data)

    def rank(self) -> int:
        """Pivot count of the reduced echelon form of a copy."""
        reduced = self.clone()
        reduced.reduced_echelon_form()
        return reduced.pivots()

    # === Row and column primitives ===

    def swap_rows(self, m1: int, m2: int) -> None:
        """Exchange rows m1 and m2 (1-based). In place; no-op when equal."""
        m1 = check_index(m1, self.rows, "m1")
        m2 = check_index(m2, self.rows, "m2")
        row_swap(self._data, m1 - 1, m2 - 1)

    def scale_row(self, row: int, c: float) -> None:
        """Multiply every entry of row (1-based) by c. In place."""
        row = check_index(row, self.rows, "row")
        self._data[row - 1] *= check_scalar(c, "c")

    def scale_column(self, column: int, c: float) -> None:
        """Multiply every entry of column (1-based) by c. In place."""
        column = check_index(column, self.columns, "column")
        self._data[:, column - 1] *= check_scalar(c, "c")

    def scale_add_rows(self, m1: int, m2: int, c: float) -> None:
        """
        Add c times row m1 to row m2 (1-based). In place.

        Raises:
            InvalidRowError: If m1 == m2, or either is <= 0
            ValidationError: If either row is not an integer
            IndexOutOfRangeError: If either row is beyond the last row
        """
        m1 = check_integer(m1, "m1")
        m2 = check_integer(m2, "m2")
        if m1 == m2:
            raise InvalidRowError(
                f"scale_add_rows: source and target are both row {m1}",
                source=m1,
                target=m2,
            )
        if m1 <= 0 or m2 <= 0:
            raise InvalidRowError(
                f"scale_add_rows: rows must be >= 1, got m1={m1}, m2={m2}",
                source=m1,
                target=m2,
            )
        m1 = check_index(m1, self.rows, "m1")
        m2 = check_index(m2, self.rows, "m2")
        row_scale_add(self._data, m1 - 1, m2 - 1, check_scalar(c, "c"))

    # === Comparison ===

    def __eq__(self, other: object) -> bool:
        """Same shape and every entry exactly equal. No tolerance."""
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        # float hashing maps -0.0 and 0.0 alike, matching __eq__.
        # The hash follows the contents, so don't mutate a Matrix used as a key.
        return hash((self.shape, tuple(self._data.ravel().tolist())))

    def is_close(
        self,
        other: Matrix,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        Same shape and entries equal within tolerance.

        Defaults to the CPU_FP64 tier. Use this where rounding is
        expected; == stays exact.
        """
        if not isinstance(other, Matrix):
            raise TypeError(f"is_close: expected Matrix, got {type(other).__name__}")
        if self.shape != other.shape:
            return False
        rtol = CPU_FP64.rtol if rtol is None else rtol
        atol = CPU_FP64.atol if atol is None else atol
        return bool(np.allclose(self._data, other._data, rtol=rtol, atol=atol))

    # === Formatting ===

    def __str__(self) -> str:
        rows = (
            "[" + ", ".join(str(float(v)) for v in row) + "]"
            for row in self._data
        )
        return "[" + ", ".join(rows) + "]"

    def __repr__(self) -> str:
        return f"Matrix({self.to_list()!r})"

    def format(self, precision: int = PRINT_PRECISION) -> str:
        """One line per row, fixed-point entries separated by two spaces."""
        return "\n".join(
            "  ".join(f"{v:.{precision}f}" for v in row)
            for row in self._data
        )

    def print(self, precision: int = PRINT_PRECISION, file: TextIO | None = None) -> None:
        """Write format(precision) to file (stdout by default)."""
        print(self.format(precision), file=sys.stdout if file is None else file)

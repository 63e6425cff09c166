"""
Demonstration of the Matrix API.

Run with:
    python -m pymatrix
"""

from __future__ import annotations

from typing import TextIO

from pymatrix.core.constants import PRINT_PRECISION
from pymatrix.matrix import Matrix


def _section(title: str, out: TextIO | None) -> None:
    print(f"\n{title}", file=out)


def main(out: TextIO | None = None) -> None:
    """Print sample computations to out (stdout by default)."""
    base = Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9], [10, 11, 12]])
    ones = Matrix.full(3, 1, 1.0)
    square = Matrix([[7, 2, 1], [0, 3, -1], [-3, 4, -2]])

    _section("Base matrix:", out)
    base.print(file=out)

    _section("Transpose:", out)
    base.transpose().print(file=out)

    _section("Scaled by 3:", out)
    base.multiply(3).print(file=out)

    _section("Times a column of ones:", out)
    base.multiply(ones).print(file=out)

    _section("String form:", out)
    print(base, file=out)

    _section("Minor (2, 2):", out)
    base.minor(2, 2).print(file=out)

    _section("Square matrix:", out)
    square.print(file=out)
    print(f"Determinant: {square.det():.{PRINT_PRECISION}f}", file=out)

    _section("Inverse:", out)
    square.inverse().print(file=out)


if __name__ == "__main__":
    main()

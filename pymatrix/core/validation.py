"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except float64 conversion of array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages

Shape checks take plain (rows, columns) tuples so they can be used
before a Matrix exists.
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrix.core.exceptions import (
    ValidationError,
    DimensionError,
    InvalidDimensionError,
    IndexOutOfRangeError,
    DimensionMismatchError,
    NotSquareError,
)


def _is_integer(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and returns a new float64 array, never a view
    of the input. Rejects inputs that result in object dtype (ragged rows,
    mixed types) and non-real dtypes.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64, owned by the caller

    Raises:
        ValidationError: If input cannot be converted to a real array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows, "
            f"mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real-valued data"
        )

    return result.astype(np.float64, order='C', copy=True)


def check_ndim(
    array: NDArray[np.floating[Any]],
    allowed: tuple[int, ...],
    name: str,
) -> None:
    """
    Verify array has one of the allowed numbers of dimensions.

    Args:
        array: Array to check
        allowed: Accepted values of array.ndim
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has any other number of dimensions
    """
    if array.ndim not in allowed:
        expected = " or ".join(f"{n}D" for n in allowed)
        raise DimensionError(
            f"{name}: expected {expected} array, got {array.ndim}D with shape {array.shape}"
        )


def check_integer(value: Any, name: str) -> int:
    """
    Verify value is an integer (bools rejected) and return it as int.

    Raises:
        ValidationError: If value is not an integer
    """
    if not _is_integer(value):
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}"
        )
    return int(value)


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a requested matrix dimension is a non-negative integer.

    Args:
        value: Row or column count
        name: Parameter name for error messages

    Returns:
        The dimension as a Python int

    Raises:
        InvalidDimensionError: If value is not an integer or is negative
    """
    if not _is_integer(value):
        raise InvalidDimensionError(
            f"{name}: expected a non-negative integer, got {type(value).__name__} {value!r}",
            name=name,
            value=value,
        )
    if value < 0:
        raise InvalidDimensionError(
            f"{name}: must be >= 0, got {value}",
            name=name,
            value=value,
        )
    return int(value)


def check_index(value: Any, upper: int, name: str) -> int:
    """
    Verify a 1-based index lies in [1, upper].

    Args:
        value: The index
        upper: Largest valid index (row or column count)
        name: Parameter name for error messages

    Returns:
        The index as a Python int (still 1-based)

    Raises:
        ValidationError: If value is not an integer
        IndexOutOfRangeError: If value is outside [1, upper]
    """
    if not _is_integer(value):
        raise ValidationError(
            f"{name}: expected an integer index, got {type(value).__name__} {value!r}"
        )
    if value < 1 or value > upper:
        raise IndexOutOfRangeError(
            f"{name}: index {value} out of range [1, {upper}]",
            name=name,
            index=int(value),
            upper=upper,
        )
    return int(value)


def check_offset(value: Any, name: str) -> int:
    """
    Verify a 0-based submatrix offset is a non-negative integer.

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    if not _is_integer(value) or value < 0:
        raise ValidationError(
            f"{name}: expected a non-negative integer offset, got {value!r}"
        )
    return int(value)


def check_scalar(value: Any, name: str) -> float:
    """
    Verify value is a real number and return it as float.

    Raises:
        ValidationError: If value is not a real number (bools rejected)
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__} {value!r}"
        )
    return float(value)


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two shapes are identical.

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"{operation}: shapes must match, got {left[0]}x{left[1]} "
            f"and {right[0]}x{right[1]}",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_inner_dimensions(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify left columns equal right rows, as a matrix product requires.

    Raises:
        DimensionMismatchError: If the inner dimensions differ
    """
    if left[1] != right[0]:
        raise DimensionMismatchError(
            f"{operation}: left has {left[1]} columns but right has {right[0]} rows "
            f"({left[0]}x{left[1]} @ {right[0]}x{right[1]})",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a shape is square.

    Raises:
        NotSquareError: If rows != columns
    """
    if shape[0] != shape[1]:
        raise NotSquareError(
            f"{operation}: requires a square matrix, got {shape[0]}x{shape[1]}",
            operation=operation,
            shape=shape,
        )

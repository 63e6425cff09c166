"""
Exception hierarchy for PyMatrix.

All exceptions inherit from MatrixError to allow catching any
library-specific error. Input problems derive from ValidationError,
failures of the arithmetic itself derive from NumericalError.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class MatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(MatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class InvalidDimensionError(ValidationError):
    """
    A requested matrix dimension is negative or not an integer.

    Attributes:
        name: Parameter name of the dimension
        value: The rejected value
    """

    def __init__(self, message: str, name: str | None = None, value: object = None):
        super().__init__(message)
        self.name = name
        self.value = value


class IndexOutOfRangeError(ValidationError):
    """
    A 1-based row or column index falls outside the matrix.

    Attributes:
        name: Parameter name of the index
        index: The rejected index
        upper: Largest valid index (valid range is [1, upper])
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        index: int | None = None,
        upper: int | None = None
    ):
        super().__init__(message)
        self.name = name
        self.index = index
        self.upper = upper


class InvalidRowError(ValidationError):
    """
    Row arguments of a scale-add row operation are unusable.

    Raised when source and target rows coincide or either is not positive.

    Attributes:
        source: Row that is scaled and added
        target: Row that receives the sum
    """

    def __init__(self, message: str, source: int | None = None, target: int | None = None):
        super().__init__(message)
        self.source = source
        self.target = target


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class DimensionMismatchError(DimensionError):
    """
    Two matrices have shapes incompatible with the requested operation.

    Attributes:
        operation: Name of the operation ('add', 'multiply')
        left_shape: Shape of the receiver
        right_shape: Shape of the other operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class NotSquareError(DimensionError):
    """
    Operation requires a square matrix.

    Attributes:
        operation: Name of the operation ('trace', 'det', 'inverse')
        shape: Actual shape of the matrix
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.shape = shape


class NumericalError(MatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from the values held in a matrix
    rather than from its shape or the arguments passed.
    """
    pass


class ZeroSubmatrixError(NumericalError):
    """
    Pivot search found no non-zero entry.

    Raised when the trailing submatrix rooted at (offset, offset) is
    entirely zero (or empty), so it has no pivot position.

    Attributes:
        offset: 0-based offset of the searched submatrix
    """

    def __init__(self, message: str, offset: int | None = None):
        super().__init__(message)
        self.offset = offset


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when an inverse is requested for a matrix whose determinant
    is exactly zero.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that was computed, if available
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant

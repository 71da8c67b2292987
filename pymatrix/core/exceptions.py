"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Every error here is a precondition violation
detected before any storage is touched.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Dimensions are incorrect or inconsistent.

    Base class for length and shape problems.
    """
    pass


class DimensionMismatchError(DimensionError):
    """
    A flat length does not match the length an operation requires.

    Raised when constructor data does not hold exactly rows * cols
    elements, or when a vector operand's length differs from the
    matrix's column count.

    Attributes:
        expected: Required length (or dimension value)
        actual: Length that was supplied
        name: Name of the offending parameter
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None,
        name: str | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
        self.name = name


class ShapeMismatchError(DimensionError):
    """
    Two matrices combined elementwise have different shapes.

    Attributes:
        left_shape: (rows, cols) of the receiver
        right_shape: (rows, cols) of the other operand
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    A row or column index falls outside the matrix.

    Also an IndexError, so code written against Python sequences
    keeps working.

    Attributes:
        row: Requested row index
        col: Requested column index
        shape: (rows, cols) of the matrix that was indexed
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        col: int | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.row = row
        self.col = col
        self.shape = shape

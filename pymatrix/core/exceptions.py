"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. InvalidArgumentError also derives from ValueError
(and IndexOutOfRangeError from IndexError) so that callers using the
builtin exception types keep working.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class InvalidArgumentError(PyMatrixError, ValueError):
    """
    An argument failed validation.

    Raised when dimensions are not positive integers, when values cannot be
    interpreted as float32 data, or when the number of values given to a
    from-data constructor does not equal rows * columns.
    """
    pass


class DimensionMismatchError(InvalidArgumentError):
    """
    Operand shapes are incompatible for the requested operation.

    Attributes:
        operation: Name of the operation that was attempted ('multiply', 'add', ...)
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class IndexOutOfRangeError(InvalidArgumentError, IndexError):
    """
    A 1-based row or column index is outside the matrix.

    Attributes:
        axis: 'row' or 'column'
        index: The offending index as given by the caller
        bound: Largest valid index on that axis
    """

    def __init__(
        self,
        message: str,
        axis: str | None = None,
        index: object = None,
        bound: int | None = None,
    ):
        super().__init__(message)
        self.axis = axis
        self.index = index
        self.bound = bound

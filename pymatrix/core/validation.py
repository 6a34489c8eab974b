"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except the float32 conversion of values)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import math
import numbers
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    InvalidArgumentError,
    DimensionMismatchError,
    IndexOutOfRangeError,
)
from pymatrix.core.precision import DTYPE


def _is_integer(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def check_positive_int(value: object, name: str) -> int:
    """
    Verify a dimension is an integer >= 1.

    Args:
        value: Candidate dimension
        name: Parameter name for error messages

    Returns:
        The value as a plain int

    Raises:
        InvalidArgumentError: If value is not an integer or is < 1
    """
    if not _is_integer(value):
        raise InvalidArgumentError(
            f"{name}: expected a positive integer, got {type(value).__name__} {value!r}"
        )
    if value < 1:
        raise InvalidArgumentError(f"{name}: must be >= 1, got {value}")
    return int(value)


def check_index(index: object, bound: int, axis: str) -> int:
    """
    Verify a 1-based index lies within 1..bound.

    Args:
        index: Candidate index
        bound: Largest valid index
        axis: 'row' or 'column', used in messages and on the error

    Returns:
        The index as a plain int

    Raises:
        IndexOutOfRangeError: If index is not an integer or is out of range
    """
    if not _is_integer(index):
        raise IndexOutOfRangeError(
            f"{axis} index must be an integer, got {type(index).__name__} {index!r}",
            axis=axis, index=index, bound=bound,
        )
    if not 1 <= index <= bound:
        raise IndexOutOfRangeError(
            f"{axis} index {index} out of range, expected 1..{bound}",
            axis=axis, index=index, bound=bound,
        )
    return int(index)


def check_scalar(value: object, name: str) -> np.float32:
    """
    Validate and convert a single real number to float32.

    Strings, bools and complex numbers are rejected rather than coerced.
    A finite value that overflows float32 triggers a RuntimeWarning.

    Args:
        value: Candidate number
        name: Parameter name for error messages

    Returns:
        The value as numpy.float32

    Raises:
        InvalidArgumentError: If value is not a real number
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise InvalidArgumentError(
            f"{name}: expected a real number, got {type(value).__name__} {value!r}"
        )

    try:
        wide = float(value)
    except OverflowError:
        wide = math.inf if value > 0 else -math.inf
        finite = True
    else:
        finite = math.isfinite(wide)

    with np.errstate(over='ignore'):
        result = DTYPE(wide)

    if finite and np.isinf(result):
        warnings.warn(
            f"{name}: value {value!r} overflowed float32 and became infinite",
            RuntimeWarning,
            stacklevel=3,
        )
    return result


def check_values(values: ArrayLike, name: str) -> NDArray[np.float32]:
    """
    Validate and convert input to a 1-D float32 array.

    A contiguous 1-D float32 ndarray is returned as-is, so the caller takes
    ownership of that buffer. Anything else is converted once. Finite
    values that overflow float32 during conversion trigger a RuntimeWarning.

    Args:
        values: Input to validate
        name: Parameter name for error messages

    Returns:
        1-D numpy.ndarray of dtype float32

    Raises:
        InvalidArgumentError: If input is non-numeric or not 1-D
    """
    if (
        isinstance(values, np.ndarray)
        and values.dtype == DTYPE
        and values.ndim == 1
        and values.flags.c_contiguous
        and values.flags.writeable
    ):
        return values

    try:
        array = np.asarray(values)
    except (ValueError, TypeError) as e:
        raise InvalidArgumentError(f"{name}: cannot convert to array: {e}") from e

    if array.dtype == object:
        raise InvalidArgumentError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )
    if not np.issubdtype(array.dtype, np.number):
        raise InvalidArgumentError(
            f"{name}: non-numeric dtype {array.dtype}, expected numeric data"
        )
    if np.issubdtype(array.dtype, np.complexfloating):
        raise InvalidArgumentError(
            f"{name}: complex dtype {array.dtype}, expected real-valued data"
        )
    if array.ndim != 1:
        raise InvalidArgumentError(
            f"{name}: expected a flat 1D sequence, got {array.ndim}D with shape {array.shape}"
        )

    with np.errstate(over='ignore', invalid='ignore'):
        result = np.ascontiguousarray(array, dtype=DTYPE)

    n_overflow = int(np.sum(np.isinf(result) & np.isfinite(array)))
    if n_overflow:
        warnings.warn(
            f"{name}: {n_overflow} value(s) overflowed float32 and became infinite",
            RuntimeWarning,
            stacklevel=3,
        )
    if result is array:
        result = result.copy()
    return result


def check_length(values: NDArray[np.float32], expected: int, name: str) -> None:
    """
    Verify a flat value sequence has exactly the expected length.

    Raises:
        InvalidArgumentError: If len(values) != expected
    """
    if values.shape[0] != expected:
        raise InvalidArgumentError(
            f"{name}: got {values.shape[0]} values, expected rows * columns = {expected}"
        )


def check_same_shape(
    left_shape: tuple[int, int],
    right_shape: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    if left_shape != right_shape:
        raise DimensionMismatchError(
            f"{operation}: shapes must match, got {left_shape[0]}x{left_shape[1]} "
            f"and {right_shape[0]}x{right_shape[1]}",
            operation=operation, left_shape=left_shape, right_shape=right_shape,
        )


def check_inner_dimensions(
    left_shape: tuple[int, int],
    right_shape: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify left columns equal right rows.

    Raises:
        DimensionMismatchError: If left_shape[1] != right_shape[0]
    """
    if left_shape[1] != right_shape[0]:
        raise DimensionMismatchError(
            f"{operation}: left operand has {left_shape[1]} columns but right "
            f"operand has {right_shape[0]} rows",
            operation=operation, left_shape=left_shape, right_shape=right_shape,
        )

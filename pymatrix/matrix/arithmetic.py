"""
Matrix arithmetic: multiplication, addition and the dot product.

Both binary operations return a new Matrix and leave their operands
untouched. Operand shapes are checked up front; an incompatible pair
raises DimensionMismatchError instead of producing a partial result.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pymatrix.core.exceptions import DimensionMismatchError
from pymatrix.core.precision import DTYPE
from pymatrix.core.validation import check_inner_dimensions, check_same_shape
from pymatrix.matrix.matrix import Matrix


def dot_product(x: ArrayLike, y: ArrayLike) -> np.float32:
    """
    Sum of pairwise products of two equal-length sequences.

    Accumulates in float32.

    Raises:
        DimensionMismatchError: If either input is not 1D or the lengths differ
    """
    x = np.asarray(x, dtype=DTYPE)
    y = np.asarray(y, dtype=DTYPE)
    if x.ndim != 1 or y.ndim != 1:
        raise DimensionMismatchError(
            f"dot_product: expected two 1D sequences, got shapes {x.shape} and {y.shape}",
            operation='dot_product', left_shape=x.shape, right_shape=y.shape,
        )
    if x.shape != y.shape:
        raise DimensionMismatchError(
            f"dot_product: lengths must match, got shapes {x.shape} and {y.shape}",
            operation='dot_product', left_shape=x.shape, right_shape=y.shape,
        )
    return DTYPE(np.dot(x, y))


def multiply(A: Matrix, B: Matrix) -> Matrix:
    """
    Matrix product C = A B.

    C has A.rows rows and B.columns columns, and each element is the dot
    product of the corresponding row of A with the corresponding column of B.

    Raises:
        DimensionMismatchError: If A.columns != B.rows
    """
    check_inner_dimensions(A.shape, B.shape, 'multiply')

    C = Matrix.zeros(A.rows, B.columns)
    # Columns of B are copies, so build them once rather than per row
    B_columns = [B.column(c) for c in range(1, B.columns + 1)]
    for r in range(1, C.rows + 1):
        A_row = A.row(r)
        for c, B_col in enumerate(B_columns, start=1):
            C.set(r, c, dot_product(A_row, B_col))
    return C


def add(A: Matrix, B: Matrix) -> Matrix:
    """
    Elementwise sum C = A + B.

    Raises:
        DimensionMismatchError: If A and B differ in shape
    """
    check_same_shape(A.shape, B.shape, 'add')
    return Matrix(A.rows, A.columns, A.data + B.data)

"""
Dense float32 matrix module.

Public API:
    Matrix              - the matrix type (get/set, row/column, scalar, transpose)
    new(r, c, values)   - wrap a flat row-major sequence
    zeros(r, c)         - zero-filled matrix
    identity(n)         - n x n identity
    multiply(A, B)      - matrix product
    add(A, B)           - elementwise sum
    dot_product(x, y)   - sum of pairwise products
"""

from pymatrix.matrix.matrix import Matrix, new, zeros, identity
from pymatrix.matrix.arithmetic import multiply, add, dot_product

__all__ = [
    "Matrix",
    "new",
    "zeros",
    "identity",
    "multiply",
    "add",
    "dot_product",
]

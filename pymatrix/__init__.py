"""
PyMatrix: a small dense single-precision matrix type for Python.

Provides a row-major float32 Matrix with 1-based element access,
row/column extraction, multiplication, addition, scalar scaling,
zero/identity construction and text formatting.

Submodules:
    matrix: The Matrix type and arithmetic
    core: Exceptions, validation and precision utilities
"""

__version__ = "0.1.0"

from pymatrix.core.exceptions import (
    PyMatrixError,
    InvalidArgumentError,
    DimensionMismatchError,
    IndexOutOfRangeError,
)
from pymatrix.matrix import (
    Matrix,
    new,
    zeros,
    identity,
    multiply,
    add,
    dot_product,
)

__all__ = [
    "__version__",
    "Matrix",
    "new",
    "zeros",
    "identity",
    "multiply",
    "add",
    "dot_product",
    "PyMatrixError",
    "InvalidArgumentError",
    "DimensionMismatchError",
    "IndexOutOfRangeError",
]

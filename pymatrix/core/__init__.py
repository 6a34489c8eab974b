"""
Core infrastructure for PyMatrix.

Shared building blocks used by the matrix module.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    precision: float32 dtype, tolerances, value formatting
"""

from pymatrix.core.exceptions import (
    PyMatrixError,
    InvalidArgumentError,
    DimensionMismatchError,
    IndexOutOfRangeError,
)

__all__ = [
    "PyMatrixError",
    "InvalidArgumentError",
    "DimensionMismatchError",
    "IndexOutOfRangeError",
]

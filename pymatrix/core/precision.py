"""
Numerical precision constants and utilities.

All matrices store single-precision values. This module holds the dtype,
machine epsilon, default comparison tolerances, and the float32 text
formatting used when rendering matrices.
"""

import numpy as np
from numpy.typing import NDArray
from typing import Any


# Storage dtype for every matrix
DTYPE = np.float32

# Machine epsilon for float32
EPSILON_32: float = float(np.finfo(np.float32).eps)  # ~1.19e-7

# Default tolerance for numerical comparisons (relative)
DEFAULT_RTOL: float = 1e-5

# Default tolerance for considering values as zero (absolute)
DEFAULT_ATOL: float = 1e-6


def is_close(
    a: float | NDArray[np.floating[Any]],
    b: float | NDArray[np.floating[Any]],
    rtol: float = DEFAULT_RTOL,
    atol: float = DEFAULT_ATOL
) -> bool | NDArray[np.bool_]:
    """
    Check if values are numerically close.

    Uses the formula: |a - b| <= atol + rtol * |b|

    Args:
        a: First value(s)
        b: Second value(s)
        rtol: Relative tolerance
        atol: Absolute tolerance

    Returns:
        Boolean or boolean array indicating closeness
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    return np.abs(a - b) <= atol + rtol * np.abs(b)


def format_float32(value: float) -> str:
    """
    Shortest positional decimal string that round-trips a float32.

    Integral values carry no trailing '.0' and exponent notation is never
    used, so 1.0 renders as '1' and 3.3 as '3.3'. Non-finite values render
    as 'NaN', '+Inf' and '-Inf'.
    """
    x = np.float32(value)
    if np.isnan(x):
        return 'NaN'
    if np.isinf(x):
        return '+Inf' if x > 0 else '-Inf'
    return np.format_float_positional(x, unique=True, trim='-')

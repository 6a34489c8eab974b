"""
Matrix: dense single-precision matrix with 1-based indexing.

Storage is one contiguous row-major float32 buffer of length
rows * columns. Rows and columns are addressed from 1, matching
mathematical convention; the translation to flat offsets lives in
pymatrix.matrix._indexing.

Construction:
    Matrix(rows, columns, values)     wrap existing values
    Matrix.zeros(rows, columns)       zero-filled
    Matrix.identity(n)                n x n identity
    Matrix.from_array(array)          copy of a 2D array-like
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import InvalidArgumentError
from pymatrix.core.precision import (
    DTYPE,
    DEFAULT_RTOL,
    DEFAULT_ATOL,
    format_float32,
    is_close,
)
from pymatrix.core.validation import (
    check_index,
    check_length,
    check_positive_int,
    check_scalar,
    check_values,
)
from pymatrix.matrix._indexing import flat_index, row_slice


class Matrix:
    """
    Fixed-size 2D grid of float32 values.

    The matrix owns its buffer exclusively. When constructed from a
    contiguous 1D float32 ndarray, that array becomes the buffer without
    a copy, so the caller should not keep using it.

    Thread safety: none. Concurrent writers need external locking.

    Examples:
        >>> m = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
        >>> m.get(2, 1)
        4.0
        >>> print(m)
        [1, 2, 3,
         4, 5, 6]
    """

    __slots__ = ('_rows', '_columns', '_data')

    def __init__(self, rows: int, columns: int, values: ArrayLike):
        """
        Wrap values as a rows x columns matrix.

        Args:
            rows: Number of rows (>= 1)
            columns: Number of columns (>= 1)
            values: Flat row-major sequence of exactly rows * columns numbers

        Raises:
            InvalidArgumentError: If a dimension is not a positive integer,
                the values are not numeric, or len(values) != rows * columns
        """
        rows = check_positive_int(rows, 'rows')
        columns = check_positive_int(columns, 'columns')
        data = check_values(values, 'values')
        check_length(data, rows * columns, 'values')

        self._rows = rows
        self._columns = columns
        self._data = data

    @classmethod
    def from_data(cls, rows: int, columns: int, values: ArrayLike) -> Matrix:
        """Alias of the constructor, for symmetry with zeros() and identity()."""
        return cls(rows, columns, values)

    @classmethod
    def zeros(cls, rows: int, columns: int) -> Matrix:
        """Zero-filled rows x columns matrix."""
        rows = check_positive_int(rows, 'rows')
        columns = check_positive_int(columns, 'columns')
        return cls(rows, columns, np.zeros(rows * columns, dtype=DTYPE))

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n matrix with 1.0 on the main diagonal and 0.0 elsewhere."""
        n = check_positive_int(n, 'n')
        A = cls.zeros(n, n)
        A._data[::n + 1] = 1.0
        return A

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build a matrix from a 2D array-like such as a nested list or ndarray.

        The values are always copied.

        Raises:
            InvalidArgumentError: If the input is not 2D numeric data
        """
        try:
            array = np.asarray(array)
        except (ValueError, TypeError) as e:
            raise InvalidArgumentError(f"array: cannot convert to array: {e}") from e

        if array.ndim != 2:
            raise InvalidArgumentError(
                f"array: expected 2D array, got {array.ndim}D with shape {array.shape}"
            )
        rows, columns = array.shape
        values = check_values(array.reshape(-1), 'array')
        return cls(rows, columns, values.copy())

    # --- Shape ---

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        return (self._rows, self._columns)

    @property
    def size(self) -> int:
        return self._rows * self._columns

    @property
    def data(self) -> NDArray[np.float32]:
        """Read-only view of the flat row-major buffer."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    # --- Element access ---

    def _offset(self, r: int, c: int) -> int:
        r = check_index(r, self._rows, 'row')
        c = check_index(c, self._columns, 'column')
        return flat_index(r, c, self._columns)

    def get(self, r: int, c: int) -> float:
        """Element at 1-based (r, c)."""
        return float(self._data[self._offset(r, c)])

    def set(self, r: int, c: int, value: float) -> None:
        """Store value (as float32) at 1-based (r, c)."""
        self._data[self._offset(r, c)] = check_scalar(value, 'value')

    def row(self, n: int) -> NDArray[np.float32]:
        """
        Row n (1-based) as a read-only view of length `columns`.

        The view tracks later writes to the matrix. Copy it if a snapshot
        is needed.
        """
        n = check_index(n, self._rows, 'row')
        view = self._data[row_slice(n, self._columns)]
        view.flags.writeable = False
        return view

    def column(self, n: int) -> NDArray[np.float32]:
        """Column n (1-based) as a fresh array of length `rows`."""
        n = check_index(n, self._columns, 'column')
        return self._data[n - 1::self._columns].copy()

    # --- In-place and derived ---

    def scalar(self, k: float) -> None:
        """Multiply every element by k in place."""
        self._data *= check_scalar(k, 'k')

    def transpose(self) -> Matrix:
        """New columns x rows matrix with T[c][r] = A[r][c]."""
        grid = self._data.reshape(self._rows, self._columns)
        # flatten() always copies; a 1-wide grid.T is already contiguous
        values = grid.T.flatten()
        return type(self)(self._columns, self._rows, values)

    def copy(self) -> Matrix:
        """Independent matrix with its own buffer."""
        return type(self)(self._rows, self._columns, self._data.copy())

    def to_numpy(self) -> NDArray[np.float32]:
        """Fresh (rows, columns) float32 array."""
        return self._data.reshape(self._rows, self._columns).copy()

    def allclose(
        self,
        other: Matrix,
        rtol: float = DEFAULT_RTOL,
        atol: float = DEFAULT_ATOL,
    ) -> bool:
        """
        Elementwise closeness within float32 tolerances.

        Returns False when the shapes differ.
        """
        if self.shape != other.shape:
            return False
        return bool(np.all(is_close(self._data, other._data, rtol=rtol, atol=atol)))

    # --- Operators ---

    def __matmul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pymatrix.matrix.arithmetic import multiply
        return multiply(self, other)

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pymatrix.matrix.arithmetic import add
        return add(self, other)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # mutable

    # --- Formatting ---

    def format(self) -> str:
        """
        Bracketed text form, one line per row.

        Values within a row are separated by ', ' and rows by ',\\n '.
        Each value is the shortest decimal that round-trips its float32.
        """
        lines = []
        for r in range(1, self._rows + 1):
            lines.append(', '.join(format_float32(v) for v in self._data[row_slice(r, self._columns)]))
        return '[' + ',\n '.join(lines) + ']'

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        values = ', '.join(format_float32(v) for v in self._data)
        return f"Matrix(rows={self._rows}, columns={self._columns}, data=[{values}])"


def new(rows: int, columns: int, values: ArrayLike) -> Matrix:
    """rows x columns matrix wrapping values. See Matrix."""
    return Matrix(rows, columns, values)


def zeros(rows: int, columns: int) -> Matrix:
    """Zero-filled rows x columns matrix."""
    return Matrix.zeros(rows, columns)


def identity(n: int) -> Matrix:
    """n x n identity matrix."""
    return Matrix.identity(n)

"""
Tests for Matrix construction: from data, zeros, identity, from_array.
"""

import numpy as np
import pytest

from pymatrix import (
    InvalidArgumentError,
    Matrix,
    identity,
    new,
    zeros,
)


# ═══════════════════════════════════════════════════════════════════════
# From data
# ═══════════════════════════════════════════════════════════════════════


class TestFromData:

    def test_shape_and_values(self, m23):
        assert m23.rows == 2
        assert m23.columns == 3
        assert m23.shape == (2, 3)
        assert m23.size == 6
        np.testing.assert_array_equal(m23.data, [1, 2, 3, 4, 5, 6])

    def test_storage_is_float32(self, m23):
        assert m23.data.dtype == np.float32

    def test_new_function(self):
        m = new(1, 2, [7, 8])
        assert m == Matrix(1, 2, [7, 8])

    def test_from_data_alias(self):
        assert Matrix.from_data(2, 1, [1, 2]) == Matrix(2, 1, [1, 2])

    def test_float32_buffer_not_copied(self):
        """Ownership of a float32 buffer moves into the matrix."""
        buf = np.arange(4, dtype=np.float32)
        m = Matrix(2, 2, buf)
        m.set(1, 1, 9.0)
        assert buf[0] == 9.0

    def test_too_few_values(self):
        """New(2, 3, [1, 2, 3]) must fail, not truncate."""
        with pytest.raises(InvalidArgumentError, match="got 3 values"):
            new(2, 3, [1, 2, 3])

    def test_too_many_values(self):
        with pytest.raises(InvalidArgumentError):
            Matrix(2, 2, [1, 2, 3, 4, 5])

    def test_empty_values(self):
        with pytest.raises(InvalidArgumentError):
            Matrix(1, 1, [])

    @pytest.mark.parametrize("rows, columns", [(0, 3), (3, 0), (-1, 2), (2.0, 2)])
    def test_bad_dimensions(self, rows, columns):
        with pytest.raises(InvalidArgumentError):
            Matrix(rows, columns, [0.0] * 6)

    def test_non_numeric_values(self):
        with pytest.raises(InvalidArgumentError):
            Matrix(1, 2, ["a", "b"])

    def test_nested_values_rejected(self):
        with pytest.raises(InvalidArgumentError, match="flat 1D"):
            Matrix(2, 2, [[1, 2], [3, 4]])

    def test_overflow_warns(self):
        with pytest.warns(RuntimeWarning, match="overflowed float32"):
            m = Matrix(1, 2, [1.0, 1e40])
        assert np.isinf(m.get(1, 2))


# ═══════════════════════════════════════════════════════════════════════
# Zeros
# ═══════════════════════════════════════════════════════════════════════


class TestZeros:

    @pytest.mark.parametrize("rows, columns", [(1, 1), (2, 3), (5, 1), (4, 4)])
    def test_all_zero(self, rows, columns):
        m = zeros(rows, columns)
        assert m.shape == (rows, columns)
        for r in range(1, rows + 1):
            for c in range(1, columns + 1):
                assert m.get(r, c) == 0.0

    def test_classmethod(self):
        assert Matrix.zeros(2, 2) == Matrix(2, 2, [0, 0, 0, 0])

    def test_rejects_zero_rows(self):
        with pytest.raises(InvalidArgumentError, match="rows"):
            zeros(0, 2)


# ═══════════════════════════════════════════════════════════════════════
# Identity
# ═══════════════════════════════════════════════════════════════════════


class TestIdentity:

    @pytest.mark.parametrize("n", [1, 2, 3, 7])
    def test_diagonal(self, n):
        m = identity(n)
        assert m.shape == (n, n)
        for i in range(1, n + 1):
            for j in range(1, n + 1):
                assert m.get(i, j) == (1.0 if i == j else 0.0)

    def test_matches_numpy_eye(self):
        np.testing.assert_array_equal(Matrix.identity(4).to_numpy(), np.eye(4, dtype=np.float32))

    def test_rejects_zero(self):
        with pytest.raises(InvalidArgumentError, match="n"):
            identity(0)


# ═══════════════════════════════════════════════════════════════════════
# From array
# ═══════════════════════════════════════════════════════════════════════


class TestFromArray:

    def test_nested_list(self):
        m = Matrix.from_array([[1, 2, 3], [4, 5, 6]])
        assert m == Matrix(2, 3, [1, 2, 3, 4, 5, 6])

    def test_copies_input(self):
        arr = np.array([[1.0, 2.0], [3.0, 4.0]], dtype=np.float32)
        m = Matrix.from_array(arr)
        m.set(1, 1, 0.0)
        assert arr[0, 0] == 1.0

    def test_rejects_1d(self):
        with pytest.raises(InvalidArgumentError, match="expected 2D"):
            Matrix.from_array([1, 2, 3])

    def test_rejects_empty_axis(self):
        with pytest.raises(InvalidArgumentError):
            Matrix.from_array(np.zeros((0, 3)))

    def test_round_trip_to_numpy(self, rng):
        arr = rng.standard_normal((3, 4)).astype(np.float32)
        np.testing.assert_array_equal(Matrix.from_array(arr).to_numpy(), arr)

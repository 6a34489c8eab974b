"""
Tests for the row-major linear-index mapping.
"""

from pymatrix.matrix._indexing import flat_index, row_slice


class TestFlatIndex:

    def test_first_element(self):
        assert flat_index(1, 1, 3) == 0

    def test_row_major(self):
        assert flat_index(1, 3, 3) == 2
        assert flat_index(2, 1, 3) == 3
        assert flat_index(2, 3, 3) == 5


class TestRowSlice:

    def test_covers_row(self):
        assert row_slice(2, 4) == slice(4, 8)
        assert list(range(10)[row_slice(1, 3)]) == [0, 1, 2]

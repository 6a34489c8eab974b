"""
Linear-index mapping between 1-based (row, column) and flat offsets.

Every accessor on Matrix goes through flat_index so the row-major layout
is defined in exactly one place.
"""


def flat_index(r: int, c: int, columns: int) -> int:
    """Offset of 1-based element (r, c) in a row-major buffer."""
    return (r - 1) * columns + (c - 1)


def row_slice(n: int, columns: int) -> slice:
    """Slice covering the whole of 1-based row n."""
    start = flat_index(n, 1, columns)
    return slice(start, start + columns)

from __future__ import annotations

from typing import Iterator, Tuple

Position = Tuple[int, int]


def _walk(dimensions: Tuple[int, int]) -> Iterator[Position]:
    outer, inner = dimensions
    for i in range(outer):
        for j in range(inner):
            yield i, j


def canvas_positions(dimensions: Tuple[int, int]) -> Iterator[Position]:
    """Row-major (row, col) pairs over a (rows, cols) grid; the column index varies fastest."""
    return _walk(dimensions)


def matrix_positions(dimensions: Tuple[int, int]) -> Iterator[Position]:
    """
    (row, col) pairs over a (rows, cols) grid, walked column by column.
    The dimensions are swapped before the walk and every pair is swapped back,
    so callers still index with (row, col) while the row index varies fastest.
    """
    rows, cols = dimensions
    for col, row in _walk((cols, rows)):
        yield row, col

from collections.abc import Iterable

import numpy as np

from diagpair.utils.types import IntInt


def coverage_grid(index_pairs: Iterable[IntInt], shape: IntInt) -> np.ndarray:
    """
    Count how often each (i, j) occurs.

    [ (i, j), ... ] -> int array of `shape`, cell (i, j) holding the count.
    An exact cross product of an m x n grid is all ones.
    """
    grid = np.zeros(shape, dtype=np.int64)
    rows, cols = shape

    for i, j in index_pairs:
        if not (0 <= i < rows and 0 <= j < cols):
            raise ValueError(f"pair ({i}, {j}) lies outside a {rows}x{cols} grid")
        grid[i, j] += 1

    return grid


def is_exact_cover(grid: np.ndarray) -> bool:
    """Every cell hit exactly once."""
    return bool(np.all(grid == 1))


def diagonal_sums(index_pairs: Iterable[IntInt]) -> np.ndarray:
    """i + j for each pair, in order; non-decreasing for diagonal-major output."""
    sums = [i + j for i, j in index_pairs]
    return np.asarray(sums, dtype=np.int64)

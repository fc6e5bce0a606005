"""Matrix helpers: sparsity check, multiplication and hourglass sums."""

from __future__ import annotations

from typing import Sequence


def _check_rectangular(matrix: Sequence[Sequence[int]], name: str) -> int:
    widths = {len(row) for row in matrix}
    if len(widths) > 1:
        raise ValueError(f"{name} rows differ in length")
    return widths.pop() if widths else 0


def is_sparse(matrix: Sequence[Sequence[int]]) -> bool:
    """True when the matrix holds more zero entries than non-zero ones."""
    zeroes = nonzero = 0
    for row in matrix:
        for value in row:
            if value == 0:
                zeroes += 1
            else:
                nonzero += 1
    return zeroes > nonzero


def multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> list[list[int]]:
    """Matrix product ``a x b``."""
    inner = _check_rectangular(a, "a")
    width = _check_rectangular(b, "b")
    if a and inner != len(b):
        raise ValueError("columns of a must equal rows of b")
    columns = list(zip(*b)) if b else []
    if not columns:
        columns = [()] * width
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def hourglass_sum(grid: Sequence[Sequence[int]]) -> int:
    """Largest sum over all hourglass shapes of a rectangular grid.

    An hourglass is a 3x3 window without the middle row's outer cells.
    """
    width = _check_rectangular(grid, "grid")
    if len(grid) < 3 or width < 3:
        raise ValueError("grid must be at least 3x3")
    return max(
        sum(grid[r][c:c + 3]) + grid[r + 1][c + 1] + sum(grid[r + 2][c:c + 3])
        for r in range(len(grid) - 2)
        for c in range(width - 2)
    )
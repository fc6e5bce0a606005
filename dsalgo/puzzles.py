"""Backtracking solvers for Sudoku and the N-queens problem."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

N = 9
UNASSIGNED = 0


def is_safe(grid: Sequence[Sequence[int]], row: int, col: int, num: int) -> bool:
    """True when ``num`` is absent from the row, column and 3x3 box of a cell."""
    if num in grid[row]:
        return False
    if any(line[col] == num for line in grid):
        return False
    box_row = row - row % 3
    box_col = col - col % 3
    return all(num not in grid[r][box_col:box_col + 3] for r in range(box_row, box_row + 3))


def _first_unassigned(grid: list[list[int]]) -> Optional[tuple[int, int]]:
    return next(
        ((r, c) for r, line in enumerate(grid) for c, value in enumerate(line) if value == UNASSIGNED),
        None,
    )


def _solve(grid: list[list[int]]) -> bool:
    cell = _first_unassigned(grid)
    if cell is None:
        return True
    row, col = cell
    for num in range(1, N + 1):
        if is_safe(grid, row, col, num):
            grid[row][col] = num
            if _solve(grid):
                return True
            grid[row][col] = UNASSIGNED
    return False


def solve_sudoku(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a solved copy of a 9x9 grid where 0 marks an empty cell.

    Raises ValueError when the grid is malformed or has no solution.
    """
    if len(grid) != N or any(len(line) != N for line in grid):
        raise ValueError("grid must be 9x9")
    if any(not 0 <= value <= N for line in grid for value in line):
        raise ValueError("cells must hold 0..9")
    work = [list(line) for line in grid]
    if not _solve(work):
        raise ValueError("no solution")
    return work


def n_queens(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every placement of ``n`` non-attacking queens.

    Each solution gives, row by row, the 1-based column of that row's queen;
    solutions come in lexicographic order.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    columns: list[int] = []

    def place(row: int) -> Iterator[tuple[int, ...]]:
        if row == n:
            yield tuple(columns)
            return
        for col in range(1, n + 1):
            if all(c != col and abs(c - col) != row - i for i, c in enumerate(columns)):
                columns.append(col)
                yield from place(row + 1)
                columns.pop()

    if n > 0:
        yield from place(0)


def render_queens(solution: Sequence[int]) -> str:
    """Draw a board: a column header, then one numbered row each with Q or -."""
    size = len(solution)
    header = "".join(f"\t{col}" for col in range(1, size + 1))
    rows = [
        f"{row}" + "".join("\tQ" if queen == col else "\t-" for col in range(1, size + 1))
        for row, queen in enumerate(solution, start=1)
    ]
    return "\n".join([header, *rows])
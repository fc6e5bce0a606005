"""Segment tree supporting point assignment and range sums."""

from __future__ import annotations

from typing import Iterable


class SumSegmentTree:
    """Sums over half-open index ranges of an array of length ``n``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must not be negative")
        self.n = n
        size = 1
        while size < n:
            size *= 2
        self.size = size
        self._sums = [0] * (2 * size)

    def build(self, values: Iterable[int]) -> None:
        """Load the leaves from ``values``; values past the tree's width are ignored."""
        items = list(values)
        self._build(items, 0, 0, self.size)

    def _build(self, items: list[int], x: int, lx: int, rx: int) -> None:
        if rx - lx == 1:
            if lx < len(items):
                self._sums[x] = items[lx]
            return
        mid = (lx + rx) // 2
        self._build(items, 2 * x + 1, lx, mid)
        self._build(items, 2 * x + 2, mid, rx)
        self._sums[x] = self._sums[2 * x + 1] + self._sums[2 * x + 2]

    def set(self, index: int, value: int) -> None:
        """Assign ``value`` to position ``index``."""
        if not 0 <= index < self.n:
            raise IndexError(f"index {index} is outside 0..{self.n - 1}")
        self._set(index, value, 0, 0, self.size)

    def _set(self, index: int, value: int, x: int, lx: int, rx: int) -> None:
        if rx - lx == 1:
            self._sums[x] = value
            return
        mid = (lx + rx) // 2
        if index < mid:
            self._set(index, value, 2 * x + 1, lx, mid)
        else:
            self._set(index, value, 2 * x + 2, mid, rx)
        self._sums[x] = self._sums[2 * x + 1] + self._sums[2 * x + 2]

    def range_sum(self, left: int, right: int) -> int:
        """Sum of positions ``left`` up to but not including ``right``."""
        return self._range_sum(left, right, 0, 0, self.size)

    def _range_sum(self, left: int, right: int, x: int, lx: int, rx: int) -> int:
        if lx >= right or left >= rx:
            return 0
        if lx >= left and rx <= right:
            return self._sums[x]
        mid = (lx + rx) // 2
        return self._range_sum(left, right, 2 * x + 1, lx, mid) + self._range_sum(
            left, right, 2 * x + 2, mid, rx
        )
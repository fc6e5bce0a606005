"""Classic comparison sorts and a shift-based selection sort."""

from __future__ import annotations

from typing import Any, Iterable, NamedTuple


class Shift(NamedTuple):
    """Cyclic left shift of the 1-based segment ``left..right`` by ``offset``."""

    left: int
    right: int
    offset: int


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, sorted by adjacent swaps."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for i in range(end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order; equal values keep their order."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def shell_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order using gaps n/2, n/4, ..., 1."""
    items = list(values)
    n = len(items)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            current = items[i]
            j = i
            while j >= gap and items[j - gap] > current:
                items[j] = items[j - gap]
                j -= gap
            items[j] = current
        gap //= 2
    return items


def _position_of_min(items: list[Any], start: int) -> int:
    return min(range(start, len(items)), key=items.__getitem__)


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order by repeatedly selecting the minimum."""
    items = list(values)
    for i in range(len(items)):
        smallest = _position_of_min(items, i)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def shifting_sort(values: Iterable[Any]) -> tuple[list[Any], list[Shift]]:
    """Sort with segment shifts.

    Returns the sorted values and the shifts that sort the original
    sequence when applied in order. At most one shift per position is used.
    """
    items = list(values)
    shifts: list[Shift] = []
    for i in range(len(items)):
        smallest = _position_of_min(items, i)
        if smallest > i:
            shifts.append(Shift(i + 1, smallest + 1, smallest - i))
            items.insert(i, items.pop(smallest))
    return items, shifts
"""Short exercises: grade rounding, fruit counting and the kangaroo meeting."""

from __future__ import annotations

from typing import Iterable, Sequence


def round_grades(grades: Iterable[int]) -> list[int]:
    """Round each grade of 38 or more up to the next multiple of 5 when that is less than 3 away."""
    result = []
    for grade in grades:
        rounded = grade + (-grade % 5)
        result.append(rounded if grade >= 38 and rounded - grade < 3 else grade)
    return result


def count_fruit_on_house(
    house: Sequence[int],
    trees: Sequence[int],
    apples: Iterable[int],
    oranges: Iterable[int],
) -> tuple[int, int]:
    """Count apples and oranges landing within the house's inclusive span.

    ``house`` is ``(start, end)``, ``trees`` the apple and orange tree
    positions, and each fruit a distance from its tree.
    """
    start, end = house
    apple_tree, orange_tree = trees
    apple_hits = sum(1 for d in apples if start <= apple_tree + d <= end)
    orange_hits = sum(1 for d in oranges if start <= orange_tree + d <= end)
    return apple_hits, orange_hits


def kangaroo_meet(x1: int, v1: int, x2: int, v2: int) -> bool:
    """True when the first kangaroo is faster and the start gap is a whole number of jumps."""
    if v1 <= v2:
        return False
    return (x2 - x1) % (v1 - v2) == 0
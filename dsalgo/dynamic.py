"""Dynamic-programming problems: coin change, LCS, subset sum and division moves."""

from __future__ import annotations

import heapq
from collections import defaultdict
from typing import Iterable, Sequence


def count_coin_change(coins: Iterable[int], amount: int) -> int:
    """Number of ways to make ``amount`` from unlimited coins of the given values."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    ways = [1] + [0] * amount
    for coin in coins:
        if coin <= 0:
            raise ValueError("coin values must be positive")
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


def longest_common_subsequence(a: Sequence, b: Sequence) -> str:
    """A longest common subsequence of two strings."""
    m, n = len(a), len(b)
    table = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if a[i - 1] == b[j - 1]:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])

    picked: list = []
    i, j = m, n
    while i > 0 and j > 0:
        if a[i - 1] == b[j - 1]:
            picked.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(str(item) for item in reversed(picked))


def subset_sum(values: Iterable[int], total: int) -> bool:
    """True when some subset of non-negative ``values`` adds up to ``total``."""
    if total < 0:
        raise ValueError("total must not be negative")
    reachable = {0}
    for value in values:
        if value < 0:
            raise ValueError("values must not be negative")
        reachable |= {r + value for r in reachable if r + value <= total}
    return total in reachable


def min_moves_to_k_equal(values: Iterable[int], k: int, d: int) -> int:
    """Fewest moves to make ``k`` values equal, a move replacing x by x // d."""
    if d < 2:
        raise ValueError("d must be at least 2")
    if k < 0:
        raise ValueError("k must not be negative")
    moves: defaultdict[int, list[int]] = defaultdict(list)
    count_values = 0
    for value in values:
        if value < 0:
            raise ValueError("values must not be negative")
        count_values += 1
        steps = 0
        moves[value].append(0)
        while value > 0:
            value //= d
            steps += 1
            moves[value].append(steps)
    if k == 0:
        return 0
    best = min(
        (sum(heapq.nsmallest(k, costs)) for costs in moves.values() if len(costs) >= k),
        default=None,
    )
    if best is None:
        raise ValueError(f"cannot make {k} of {count_values} values equal")
    return best
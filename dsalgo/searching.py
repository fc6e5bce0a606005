"""Pattern search, linear search and next-greater-element scans."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

_BASE = 256


def rabin_karp(pattern: str, text: str, prime: int = 101) -> list[int]:
    """Start indices of every occurrence of ``pattern`` in ``text``, by rolling hash."""
    if prime < 1:
        raise ValueError("prime must be positive")
    m, n = len(pattern), len(text)
    if m == 0:
        return list(range(n + 1))
    if m > n:
        return []
    high = pow(_BASE, m - 1, prime)
    p = t = 0
    for pc, tc in zip(pattern, text):
        p = (_BASE * p + ord(pc)) % prime
        t = (_BASE * t + ord(tc)) % prime

    matches: list[int] = []
    for i in range(n - m + 1):
        if p == t and text[i:i + m] == pattern:
            matches.append(i)
        if i < n - m:
            t = (_BASE * (t - ord(text[i]) * high) + ord(text[i + m])) % prime
    return matches


def linear_search(values: Iterable[Any], target: Any) -> list[int]:
    """Every index at which ``target`` occurs."""
    return [index for index, value in enumerate(values) if value == target]


def _next_greater(values: Iterable[Any]) -> list[Any]:
    result: list[Any] = []
    stack: list[Any] = []
    for value in values:
        while stack and stack[-1] <= value:
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(value)
    return result


def next_greater_to_right(values: Sequence[Any]) -> list[Any]:
    """For each value, the nearest greater value to its right, or -1."""
    return _next_greater(reversed(values))[::-1]


def next_greater_to_left(values: Sequence[Any]) -> list[Any]:
    """For each value, the nearest greater value to its left, or -1."""
    return _next_greater(values)
"""Small number-theory helpers."""

from __future__ import annotations

import math
from typing import Sequence


def chinese_remainder(nums: Sequence[int], rems: Sequence[int]) -> int:
    """Smallest positive x with ``x % nums[i] == rems[i]`` for every i."""
    if len(nums) != len(rems):
        raise ValueError("nums and rems must have the same length")
    if any(num <= 0 for num in nums):
        raise ValueError("moduli must be positive")
    period = math.lcm(*nums)
    pairs = list(zip(nums, rems))
    for x in range(1, period + 1):
        if all(x % num == rem for num, rem in pairs):
            return x
    raise ValueError("the congruences have no common solution")


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(d, x, y)`` with ``d = gcd(a, b)`` and ``a*x + b*y == d``."""
    if b == 0:
        return a, 1, 0
    d, x1, y1 = extended_gcd(b, a % b)
    return d, y1, x1 - y1 * (a // b)


def fibonacci(n: int) -> list[int]:
    """Fibonacci terms from F(0) up to F(n); always at least F(0) and F(1)."""
    terms = [0, 1]
    for _ in range(1, n):
        terms.append(terms[-1] + terms[-2])
    return terms


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def is_leap_year(year: int) -> bool:
    if year % 4:
        return False
    if year % 100:
        return True
    return year % 400 == 0


def binary_digits(n: int) -> list[int]:
    """Binary digits of a non-negative integer, least significant first."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return [0]
    digits = []
    while n > 0:
        n, bit = divmod(n, 2)
        digits.append(bit)
    return digits


def is_binary_palindrome(n: int) -> bool:
    digits = binary_digits(n)
    return digits == digits[::-1]
"""Arithmetic and bitwise problems over integers and integer lists."""

from __future__ import annotations

import operator
from functools import reduce
from itertools import pairwise
from math import isqrt

__all__ = [
    "count_triples",
    "sum_of_three",
    "maximum_even_split",
    "min_bit_flips",
    "triangular_sum",
    "maximum_xor",
    "count_house_placements",
    "find_array",
]

_MOD = 1_000_000_007


def count_triples(n: int) -> int:
    """Count ordered triples ``(a, b, c)`` in ``1..n`` with ``a² + b² = c²``."""
    count = 0
    for a in range(1, n + 1):
        for b in range(1, n + 1):
            square = a * a + b * b
            c = isqrt(square)
            if c <= n and c * c == square:
                count += 1
    return count


def sum_of_three(num: int) -> list[int]:
    """Three consecutive integers summing to ``num``, or an empty list."""
    if num % 3:
        return []
    mid = num // 3
    return [mid - 1, mid, mid + 1]


def maximum_even_split(n: int) -> list[int]:
    """Split ``n`` into as many distinct positive even integers as possible."""
    if n % 2:
        return []
    parts: list[int] = []
    total = 0
    step = 2
    while total < n:
        parts.append(step)
        total += step
        step += 2
    surplus = total - n
    return sorted(p for p in parts if p != surplus)


def min_bit_flips(start: int, goal: int) -> int:
    """Number of bit flips needed to turn ``start`` into ``goal``."""
    if start < 0 or goal < 0:
        raise ValueError("values must be non-negative")
    return bin(start ^ goal).count("1")


def triangular_sum(nums: list[int]) -> int:
    """Reduce ``nums`` by adding neighbours modulo 10 until one value remains."""
    if not nums:
        raise ValueError("nums must not be empty")
    row = list(nums)
    while len(row) > 1:
        row = [(a + b) % 10 for a, b in pairwise(row)]
    return row[0]


def maximum_xor(nums: list[int]) -> int:
    """Largest XOR reachable: the bitwise OR of all values."""
    return reduce(operator.or_, nums, 0)


def count_house_placements(n: int) -> int:
    """Ways to place houses on two sides of ``n`` plots with no two adjacent."""
    a, b = 0, 1
    for _ in range(n + 1):
        a, b = b, (a + b) % _MOD
    return b * b % _MOD


def find_array(pref: list[int]) -> list[int]:
    """Recover the array whose running XOR is ``pref``."""
    if not pref:
        return []
    return [pref[0], *(a ^ b for a, b in pairwise(pref))]
"""Counting, selection and greedy problems over integer arrays."""

from __future__ import annotations

import heapq
from collections import Counter, defaultdict
from fractions import Fraction
from functools import reduce
from itertools import accumulate, combinations, pairwise
from math import gcd
from typing import Sequence

__all__ = [
    "can_see_persons_count",
    "count_equal_divisible_pairs",
    "best_hand",
    "time_required_to_buy",
    "maximum_bags",
    "minimum_lines",
    "total_strength",
    "number_of_pairs",
    "maximum_sum",
    "smallest_trimmed_numbers",
    "min_operations",
    "min_number_of_hours",
    "most_frequent_even",
    "hardest_worker",
]

_MOD = 1_000_000_007


def can_see_persons_count(heights: Sequence[int]) -> list[int]:
    """For each person in a queue, count the people to the right they can see."""
    stack: list[int] = []
    seen_counts: list[int] = []
    for height in reversed(heights):
        seen = 0
        while stack and stack[-1] < height:
            stack.pop()
            seen += 1
        if stack:
            seen += 1
        seen_counts.append(seen)
        stack.append(height)
    seen_counts.reverse()
    return seen_counts


def count_equal_divisible_pairs(nums: Sequence[int], k: int) -> int:
    """Count index pairs ``i < j`` with equal values and ``i * j`` divisible by ``k``."""
    if k == 0:
        raise ValueError("k must be non-zero")
    return sum(
        1
        for (i, a), (j, b) in combinations(enumerate(nums), 2)
        if a == b and (i * j) % k == 0
    )


def best_hand(ranks: Sequence[int], suits: Sequence[str]) -> str:
    """Name the best poker hand that the five cards make."""
    if max(Counter(suits).values(), default=0) >= 5:
        return "Flush"
    most_of_a_rank = max(Counter(ranks).values(), default=0)
    if most_of_a_rank >= 3:
        return "Three of a Kind"
    if most_of_a_rank >= 2:
        return "Pair"
    return "High Card"


def time_required_to_buy(tickets: Sequence[int], k: int) -> int:
    """Seconds until the person at position ``k`` has bought all their tickets."""
    wanted = tickets[k]
    time = 0
    for i, count in enumerate(tickets):
        time += min(count, wanted)
        if i > k and count >= wanted:
            time -= 1
    return time


def maximum_bags(
    capacity: Sequence[int], rocks: Sequence[int], additional_rocks: int
) -> int:
    """Most bags that can be filled to capacity with the extra rocks."""
    needs = sorted(c - r for c, r in zip(capacity, rocks, strict=True))
    filled = 0
    for need in needs:
        if additional_rocks == 0 or need > additional_rocks:
            break
        additional_rocks -= need
        filled += 1
    return filled


def minimum_lines(stock_prices: Sequence[Sequence[int]]) -> int:
    """Fewest straight segments needed to draw the price chart."""
    points = sorted((x, y) for x, y in stock_prices)
    if len(points) <= 1:
        return 0
    slopes = []
    for (x1, y1), (x2, y2) in pairwise(points):
        if x1 == x2:
            raise ValueError(f"two prices share the day {x1}")
        slopes.append(Fraction(y2 - y1, x2 - x1))
    return 1 + sum(a != b for a, b in pairwise(slopes))


def total_strength(strength: Sequence[int]) -> int:
    """Sum over all subarrays of ``min * sum``, modulo 1e9+7."""
    n = len(strength)
    sums = [0, *accumulate(strength, lambda acc, v: (acc + v) % _MOD)]
    prefix = [0, *accumulate(sums, lambda acc, v: (acc + v) % _MOD)]

    left = [-1] * n
    stack: list[int] = []
    for i, value in enumerate(strength):
        while stack and strength[stack[-1]] >= value:
            stack.pop()
        if stack:
            left[i] = stack[-1]
        stack.append(i)

    right = [n] * n
    stack = []
    for i in reversed(range(n)):
        while stack and strength[stack[-1]] > strength[i]:
            stack.pop()
        if stack:
            right[i] = stack[-1]
        stack.append(i)

    total = 0
    for i, value in enumerate(strength):
        lo, hi = left[i], right[i]
        gain = (prefix[hi + 1] - prefix[i + 1]) * (i - lo)
        loss = (prefix[i + 1] - prefix[lo + 1]) * (hi - i)
        total = (total + (gain - loss) % _MOD * value) % _MOD
    return total


def number_of_pairs(nums: Sequence[int]) -> list[int]:
    """Return ``[pairs formed, values left over]`` after pairing equal values."""
    counts = Counter(nums).values()
    return [sum(c // 2 for c in counts), sum(c % 2 for c in counts)]


def _digit_sum(value: int) -> int:
    if value < 0:
        raise ValueError("values must be non-negative")
    return sum(int(d) for d in str(value))


def maximum_sum(nums: Sequence[int]) -> int:
    """Largest sum of two values with equal digit sums, or -1 if none."""
    groups: defaultdict[int, list[int]] = defaultdict(list)
    for value in nums:
        groups[_digit_sum(value)].append(value)
    return max(
        (sum(heapq.nlargest(2, group)) for group in groups.values() if len(group) >= 2),
        default=-1,
    )


def smallest_trimmed_numbers(
    nums: Sequence[str], queries: Sequence[Sequence[int]]
) -> list[int]:
    """For each ``(k, trim)`` query, index of the k-th smallest trimmed number.

    Numbers are trimmed to their last ``trim`` digits; ties go to the lower index.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    answers = []
    for k, trim in queries:
        if k < 1:
            raise ValueError("k must be at least 1")
        if any(trim < 0 or trim > len(num) for num in nums):
            raise ValueError(f"cannot trim to {trim} digits")
        trimmed = ((num[len(num) - trim :], i) for i, num in enumerate(nums))
        answers.append(heapq.nsmallest(k, trimmed)[-1][1])
    return answers


def min_operations(nums: Sequence[int], nums_divide: Sequence[int]) -> int:
    """Fewest deletions so the smallest of ``nums`` divides all of ``nums_divide``."""
    divisor = reduce(gcd, nums_divide, 0)
    deleted = 0
    for value, count in sorted(Counter(nums).items()):
        if divisor % value == 0:
            return deleted
        if divisor < value:
            return -1
        deleted += count
    return -1


def min_number_of_hours(
    initial_energy: int,
    initial_experience: int,
    energy: Sequence[int],
    experience: Sequence[int],
) -> int:
    """Training hours needed to defeat every opponent in turn."""
    hours = 0
    total_energy = sum(energy)
    if total_energy >= initial_energy:
        hours += total_energy - initial_energy + 1
    current = initial_experience
    for gain in experience:
        if gain >= current:
            training = gain - current + 1
            hours += training
            current += training
        current += gain
    return hours


def most_frequent_even(nums: Sequence[int]) -> int:
    """Most frequent even value, the smallest on ties, or -1 if none."""
    counts = Counter(v for v in nums if v % 2 == 0)
    if not counts:
        return -1
    return min(counts.items(), key=lambda item: (-item[1], item[0]))[0]


def hardest_worker(n: int, logs: Sequence[Sequence[int]]) -> int:
    """Id of the employee who worked the longest task, the smallest on ties."""
    if not logs:
        raise ValueError("logs must not be empty")
    worker, longest = logs[0]
    previous = longest
    for employee, leave in logs[1:]:
        duration = leave - previous
        if duration > longest:
            longest, worker = duration, employee
        elif duration == longest:
            worker = min(worker, employee)
        previous = leave
    return worker
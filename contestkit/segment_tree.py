"""Point-update, range-maximum segment tree and its use for bounded-step LIS."""

from __future__ import annotations

from typing import Sequence

__all__ = ["MaxSegmentTree", "length_of_lis"]


class MaxSegmentTree:
    """Maximum over positions ``0..size-1``; every position starts at 0."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self.size = size
        self._tree = [0] * (2 * size)

    def _check(self, pos: int) -> None:
        if not 0 <= pos < self.size:
            raise IndexError(f"position {pos} is outside 0..{self.size - 1}")

    def update(self, pos: int, value: int) -> None:
        """Set the value stored at ``pos``."""
        self._check(pos)
        i = pos + self.size
        self._tree[i] = value
        i //= 2
        while i:
            self._tree[i] = max(self._tree[2 * i], self._tree[2 * i + 1])
            i //= 2

    def query(self, lo: int, hi: int) -> int:
        """Maximum over the inclusive range ``lo..hi``; 0 for an empty range."""
        if lo > hi:
            return 0
        self._check(lo)
        self._check(hi)
        result = 0
        lo += self.size
        hi += self.size + 1
        while lo < hi:
            if lo & 1:
                result = max(result, self._tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                result = max(result, self._tree[hi])
            lo //= 2
            hi //= 2
        return result


def length_of_lis(nums: Sequence[int], k: int) -> int:
    """Longest strictly increasing subsequence whose steps are at most ``k``."""
    if not nums:
        return 0
    if min(nums) < 0:
        raise ValueError("values must be non-negative")
    tree = MaxSegmentTree(max(nums) + 1)
    longest = 0
    for value in nums:
        best = tree.query(max(value - k, 0), max(value - 1, 0))
        tree.update(value, best + 1)
        longest = max(longest, best + 1)
    return longest
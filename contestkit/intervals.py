"""Sweep-line problems over time intervals."""

from __future__ import annotations

import heapq
from collections import defaultdict
from typing import Sequence

__all__ = ["smallest_chair", "split_painting", "min_groups"]

_LEAVE = -1
_ARRIVE = 1


def smallest_chair(times: Sequence[Sequence[int]], target_friend: int) -> int:
    """Chair taken by ``target_friend`` when each guest sits in the lowest free chair.

    A chair freed at some moment is available to a guest arriving at that moment.
    """
    if not 0 <= target_friend < len(times):
        raise ValueError(f"no friend with index {target_friend}")
    events = []
    for friend, (arrival, leaving) in enumerate(times):
        if arrival >= leaving:
            raise ValueError(f"friend {friend} leaves before arriving")
        events.append((arrival, _ARRIVE, friend))
        events.append((leaving, _LEAVE, friend))
    events.sort()

    free = list(range(len(times)))
    seats: dict[int, int] = {}
    for _, kind, friend in events:
        if kind == _ARRIVE:
            chair = heapq.heappop(free)
            if friend == target_friend:
                return chair
            seats[friend] = chair
        else:
            heapq.heappush(free, seats.pop(friend))
    raise AssertionError("unreachable: target friend always arrives")


def split_painting(segments: Sequence[Sequence[int]]) -> list[list[int]]:
    """Describe a painting of overlapping colour segments as ``[start, end, mix]`` runs."""
    deltas: defaultdict[int, int] = defaultdict(int)
    for start, end, colour in segments:
        deltas[start] += colour
        deltas[end] -= colour
    runs: list[list[int]] = []
    mix = 0
    previous: int | None = None
    for position in sorted(deltas):
        if previous is not None and mix:
            runs.append([previous, position, mix])
        mix += deltas[position]
        previous = position
    return runs


def min_groups(intervals: Sequence[Sequence[int]]) -> int:
    """Fewest groups of pairwise disjoint inclusive intervals, at least one."""
    deltas: defaultdict[int, int] = defaultdict(int)
    for start, end in intervals:
        deltas[start] += 1
        deltas[end + 1] -= 1
    best = 0
    active = 0
    for position in sorted(deltas):
        active += deltas[position]
        best = max(best, active)
    return max(best, 1)
"""Counting, matching and rearranging problems over strings."""

from __future__ import annotations

from collections import Counter
from itertools import accumulate

__all__ = [
    "are_occurrences_equal",
    "number_of_ways",
    "digit_count",
    "largest_word_count",
    "count_asterisks",
    "minimum_recolors",
    "equal_frequency",
    "percentage_letter",
    "can_change",
    "repeated_character",
    "smallest_number",
    "partition_string",
    "robot_with_string",
]

_MAX_PATTERN_LENGTH = 8


def are_occurrences_equal(s: str) -> bool:
    """Return True if every character present in ``s`` occurs equally often."""
    return len(set(Counter(s).values())) <= 1


def number_of_ways(s: str) -> int:
    """Count subsequences of length three that read ``"010"`` or ``"101"``."""
    total = 0
    for middle, outer in (("1", "0"), ("0", "1")):
        ahead = s.count(outer)
        behind = 0
        for ch in s:
            if ch == middle:
                total += ahead * behind
            elif ch == outer:
                behind += 1
                ahead -= 1
    return total


def digit_count(num: str) -> bool:
    """Return True if digit ``i`` occurs ``num[i]`` times for every index ``i``."""
    counts = Counter(num)
    return all(counts[str(i)] == int(d) for i, d in enumerate(num))


def largest_word_count(messages: list[str], senders: list[str]) -> str:
    """Return the sender with most words sent; ties go to the larger name."""
    totals: Counter[str] = Counter()
    for message, sender in zip(messages, senders, strict=True):
        totals[sender] += message.count(" ") + 1
    if not totals:
        return ""
    return max(totals.items(), key=lambda item: (item[1], item[0]))[0]


def count_asterisks(s: str) -> int:
    """Count asterisks that lie outside each pair of ``|`` bars."""
    inside = False
    count = 0
    for ch in s:
        if ch == "|":
            inside = not inside
        elif ch == "*" and not inside:
            count += 1
    return count


def minimum_recolors(blocks: str, k: int) -> int:
    """Fewest ``W`` blocks to repaint to get ``k`` consecutive ``B`` blocks."""
    n = len(blocks)
    if k < 0 or k > n:
        raise ValueError(f"window size {k} does not fit in {n} blocks")
    whites = blocks[:k].count("W")
    best = whites
    for leaving, entering in zip(blocks, blocks[k:]):
        whites += (entering == "W") - (leaving == "W")
        best = min(best, whites)
    return best


def equal_frequency(word: str) -> bool:
    """Return True if removing exactly one letter leaves equal frequencies."""
    freq = Counter(word)
    for letter in list(freq):
        freq[letter] -= 1
        if len({v for v in freq.values() if v > 0}) <= 1:
            return True
        freq[letter] += 1
    return False


def percentage_letter(s: str, letter: str) -> int:
    """Percentage of ``s`` made of ``letter``, rounded down."""
    if not s:
        raise ValueError("string must not be empty")
    return s.count(letter) * 100 // len(s)


def can_change(start: str, target: str) -> bool:
    """Return True if ``start`` can become ``target`` by sliding pieces.

    ``L`` pieces move only left and ``R`` pieces only right, into ``_`` blanks.
    """
    if len(start) != len(target):
        raise ValueError("start and target must have the same length")
    start_pieces = [(ch, i) for i, ch in enumerate(start) if ch != "_"]
    target_pieces = [(ch, i) for i, ch in enumerate(target) if ch != "_"]
    if len(start_pieces) != len(target_pieces):
        return False
    for (piece, pos), (wanted, goal) in zip(start_pieces, target_pieces):
        if piece != wanted:
            return False
        if piece == "L" and pos < goal:
            return False
        if piece == "R" and pos > goal:
            return False
    return True


def repeated_character(s: str) -> str:
    """Return the first character to appear a second time, or ``"a"``."""
    seen: set[str] = set()
    for ch in s:
        if ch in seen:
            return ch
        seen.add(ch)
    return "a"


def smallest_number(pattern: str) -> str:
    """Smallest string of distinct digits 1-9 whose steps follow ``pattern``.

    ``I`` means the next digit is larger, ``D`` that it is smaller.
    """
    if len(pattern) > _MAX_PATTERN_LENGTH:
        raise ValueError(f"pattern longer than {_MAX_PATTERN_LENGTH} steps")
    if set(pattern) - {"I", "D"}:
        raise ValueError("pattern may contain only 'I' and 'D'")
    digits: list[str] = []
    pending: list[str] = []
    for i in range(len(pattern) + 1):
        pending.append(str(i + 1))
        if i == len(pattern) or pattern[i] == "I":
            digits.extend(reversed(pending))
            pending.clear()
    return "".join(digits)


def partition_string(s: str) -> int:
    """Fewest pieces ``s`` splits into with no letter repeated in a piece."""
    parts = 1
    seen: set[str] = set()
    for ch in s:
        if ch in seen:
            parts += 1
            seen = set()
        seen.add(ch)
    return parts


def robot_with_string(s: str) -> str:
    """Lexicographically smallest string a robot can write using one stack."""
    suffix_min = list(accumulate(reversed(s), min))[::-1]
    suffix_min.append(None)
    stack: list[str] = []
    written: list[str] = []
    for i, ch in enumerate(s):
        stack.append(ch)
        remaining = suffix_min[i + 1]
        while stack and (remaining is None or stack[-1] <= remaining):
            written.append(stack.pop())
    return "".join(written)
"""A food rating board that reports the best-rated food of each cuisine."""

from __future__ import annotations

import heapq
from typing import Sequence

__all__ = ["FoodRatings"]


class FoodRatings:
    """Track food ratings by cuisine.

    The best food of a cuisine has the highest rating; among equal ratings the
    lexicographically smallest name wins.
    """

    def __init__(
        self,
        foods: Sequence[str],
        cuisines: Sequence[str],
        ratings: Sequence[int],
    ) -> None:
        self._rating: dict[str, int] = {}
        self._cuisine: dict[str, str] = {}
        self._boards: dict[str, list[tuple[int, str]]] = {}
        for food, cuisine, rating in zip(foods, cuisines, ratings, strict=True):
            self._rating[food] = rating
            self._cuisine[food] = cuisine
            self._boards.setdefault(cuisine, []).append((-rating, food))
        for board in self._boards.values():
            heapq.heapify(board)

    def change_rating(self, food: str, new_rating: int) -> None:
        """Give ``food`` a new rating."""
        cuisine = self._cuisine[food]
        self._rating[food] = new_rating
        heapq.heappush(self._boards[cuisine], (-new_rating, food))

    def highest_rated(self, cuisine: str) -> str:
        """Name of the best-rated food of ``cuisine``."""
        board = self._boards[cuisine]
        while True:
            negated, food = board[0]
            if self._rating[food] == -negated:
                return food
            heapq.heappop(board)
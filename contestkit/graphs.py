"""Problems over undirected graphs and functional graphs given as edge lists."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

__all__ = ["maximum_importance", "count_unreachable_pairs", "edge_score"]


def _check_node(node: int, n: int) -> None:
    if not 0 <= node < n:
        raise ValueError(f"node {node} is outside 0..{n - 1}")


def maximum_importance(n: int, roads: Sequence[Sequence[int]]) -> int:
    """Largest total road importance after giving cities the values 1..n.

    A road's importance is the sum of its two cities' values; busier cities
    receive larger values.
    """
    degrees: Counter[int] = Counter()
    for a, b in roads:
        _check_node(a, n)
        _check_node(b, n)
        degrees[a] += 1
        degrees[b] += 1
    ordered = sorted(degrees[city] for city in range(n))
    return sum(degree * value for value, degree in enumerate(ordered, start=1))


def count_unreachable_pairs(n: int, edges: Sequence[Sequence[int]]) -> int:
    """Count unordered node pairs with no path between them."""
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        _check_node(u, n)
        _check_node(v, n)
        adjacency[u].append(v)
        adjacency[v].append(u)

    visited = [False] * n
    pairs = 0
    counted = 0
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        stack = [root]
        size = 0
        while stack:
            node = stack.pop()
            size += 1
            for neighbour in adjacency[node]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append(neighbour)
        pairs += size * counted
        counted += size
    return pairs


def edge_score(edges: Sequence[int]) -> int:
    """Node with the largest sum of indices pointing at it, the smallest on ties.

    ``edges[i]`` is the node that node ``i`` points to. Returns -1 for no nodes.
    """
    n = len(edges)
    scores = [0] * n
    for source, target in enumerate(edges):
        _check_node(target, n)
        scores[target] += source
    return max(range(n), key=scores.__getitem__, default=-1)
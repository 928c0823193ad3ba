"""Dynamic programming: coin change, subset sum, equal partition and tour cost."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import lru_cache


def count_coin_changes(coins: Iterable[int], total: int) -> int:
    """Return how many unordered combinations of ``coins`` add up to ``total``.

    Every coin may be used any number of times.
    """
    if total < 0:
        raise ValueError("total must not be negative")
    denominations = list(coins)
    if any(coin <= 0 for coin in denominations):
        raise ValueError("coin values must be positive")
    ways = [1] + [0] * total
    for coin in denominations:
        for amount in range(coin, total + 1):
            ways[amount] += ways[amount - coin]
    return ways[total]


def has_subset_sum(nums: Iterable[int], target: int) -> bool:
    """Return True if some subset of the non-negative ``nums`` sums to ``target``."""
    if target < 0:
        raise ValueError("target must not be negative")
    limit = (1 << (target + 1)) - 1
    reachable = 1
    for number in nums:
        if number < 0:
            raise ValueError("numbers must not be negative")
        reachable = (reachable | (reachable << number)) & limit
    return bool((reachable >> target) & 1)


def can_partition(nums: Iterable[int]) -> bool:
    """Return True if ``nums`` splits into two subsets with equal sums."""
    items = list(nums)
    total = sum(items)
    if total % 2:
        return False
    return has_subset_sum(items, total // 2)


def tour_cost(dists: Sequence[Sequence[int]]) -> int:
    """Return the cheapest cost of a tour from node 0 through every node and back."""
    matrix = [list(row) for row in dists]
    size = len(matrix)
    if size == 0:
        raise ValueError("distance matrix is empty")
    if any(len(row) != size for row in matrix):
        raise ValueError("distance matrix must be square")
    everyone = (1 << size) - 1

    @lru_cache(maxsize=None)
    def best(node: int, visited: int) -> int:
        if visited == everyone:
            return matrix[node][0]
        return min(
            matrix[node][nxt] + best(nxt, visited | (1 << nxt))
            for nxt in range(size)
            if not (visited >> nxt) & 1
        )

    return best(0, 1)
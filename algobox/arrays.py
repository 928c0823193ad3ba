"""Array problems: block-swap rotation, stock span, plus one and line values."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def _swap_blocks(items: list[Any], first: int, second: int, length: int) -> None:
    items[first:first + length], items[second:second + length] = (
        items[second:second + length],
        items[first:first + length],
    )


def left_rotate(values: Iterable[T], d: int) -> list[T]:
    """Return ``values`` rotated left by ``d`` places using the block-swap algorithm."""
    if d < 0:
        raise ValueError("rotation count must not be negative")
    items = list(values)
    size = len(items)
    if size == 0:
        return items
    if d > size:
        d %= size

    start = 0
    while d != 0 and d != size:
        if size - d == d:
            _swap_blocks(items, start, start + size - d, d)
            break
        if d < size - d:
            _swap_blocks(items, start, start + size - d, d)
            size -= d
        else:
            _swap_blocks(items, start, start + d, size - d)
            start += size - d
            d, size = 2 * d - size, d
    return items


def stock_span(prices: Sequence[Any]) -> list[int]:
    """Return, for each day, how many consecutive days up to it had a price not above it."""
    spans: list[int] = []
    stack: list[int] = []
    for day, price in enumerate(prices):
        while stack and prices[stack[-1]] <= price:
            stack.pop()
        spans.append(day + 1 if not stack else day - stack[-1])
        stack.append(day)
    return spans


def plus_one(digits: Iterable[int]) -> list[int]:
    """Add one to the number whose decimal digits are given, most significant first."""
    result = list(digits)
    for position in range(len(result) - 1, -1, -1):
        if result[position] < 9:
            result[position] += 1
            return result
        result[position] = 0
    return [1, *result]


def line_values(directions: str) -> list[int]:
    """For k = 1..n, the best count of people seen after turning at most k people.

    Each character is 'L' or 'R'; a person at position i looking left sees i
    people and looking right sees n - i - 1. Any character other than 'L'
    counts as looking right.
    """
    size = len(directions)
    value = 0
    gains = []
    for i, facing in enumerate(directions):
        left, right = i, size - i - 1
        if facing == "L":
            value += left
            gains.append(right - left)
        else:
            value += right
            gains.append(left - right)

    results = []
    for gain in sorted(gains, reverse=True):
        if gain > 0:
            value += gain
        results.append(value)
    return results
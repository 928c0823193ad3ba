"""Searching: Fibonacci search, matrix lookup and first non-repeating element."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from typing import Any


def fibonacci_search(values: Sequence[Any], target: Any) -> int | None:
    """Return the index of ``target`` in sorted ``values``, or None if absent."""
    size = len(values)
    if size == 0:
        return None

    fib_m2, fib_m1 = 0, 1
    fib = fib_m2 + fib_m1
    while fib < size:
        fib_m2, fib_m1 = fib_m1, fib
        fib = fib_m2 + fib_m1

    offset = -1
    while fib > 1:
        i = min(offset + fib_m2, size - 1)
        if values[i] < target:
            fib = fib_m1
            fib_m1 = fib_m2
            fib_m2 = fib - fib_m1
            offset = i
        elif values[i] > target:
            fib = fib_m2
            fib_m1 = fib_m1 - fib_m2
            fib_m2 = fib - fib_m1
        else:
            return i

    if fib_m1 and offset + 1 < size and values[offset + 1] == target:
        return offset + 1
    return None


def search_matrix(matrix: Iterable[Iterable[Any]], target: Any) -> tuple[int, int] | None:
    """Return the (row, column) of the first cell equal to ``target``, or None."""
    for row_index, row in enumerate(matrix):
        for column_index, cell in enumerate(row):
            if cell == target:
                return row_index, column_index
    return None


def first_non_repeating(values: Iterable[Hashable]) -> Hashable | None:
    """Return the first element that occurs exactly once, or None if there is none."""
    items = list(values)
    counts = Counter(items)
    return next((item for item in items if counts[item] == 1), None)
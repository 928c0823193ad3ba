"""Comparison sorts: quick sort (Lomuto partition), heap sort and shell sort."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T")


def _lomuto_partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[T]) -> list[T]:
    """Return a new list with ``values`` sorted by quick sort."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if high > low:
            pivot = _lomuto_partition(items, low, high)
            pending.append((low, pivot - 1))
            pending.append((pivot + 1, high))
    return items


def _sift_down(items: list[Any], size: int, index: int) -> None:
    while True:
        largest = index
        left, right = 2 * index + 1, 2 * index + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def heap_sort(values: Iterable[T]) -> list[T]:
    """Return a new list with ``values`` sorted by heap sort."""
    items = list(values)
    size = len(items)
    for index in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, index)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def shell_sort(values: Iterable[T]) -> list[T]:
    """Return a new list with ``values`` sorted by shell sort (gaps n/2, n/4, ...)."""
    items = list(values)
    size = len(items)
    interval = size // 2
    while interval > 0:
        for i in range(interval, size):
            current = items[i]
            j = i
            while j >= interval and items[j - interval] > current:
                items[j] = items[j - interval]
                j -= interval
            items[j] = current
        interval //= 2
    return items
"""Singly linked lists built from ``ListNode`` objects, handled through their head node.

Functions that may change which node comes first return the new head.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import pairwise
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    data: Any
    next: ListNode | None = None


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _find(head: ListNode | None, value: Any) -> tuple[ListNode | None, ListNode | None]:
    previous = None
    for node in _nodes(head):
        if node.data == value:
            return previous, node
        previous = node
    return previous, None


def from_iterable(values: Iterable[Any]) -> ListNode | None:
    """Build a list holding ``values`` in order and return its head."""
    head: ListNode | None = None
    tail: ListNode | None = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: ListNode | None) -> list[Any]:
    """Return the values of the list in order."""
    return [node.data for node in _nodes(head)]


def count(head: ListNode | None) -> int:
    """Return the number of nodes."""
    return sum(1 for _ in _nodes(head))


def total(head: ListNode | None) -> Any:
    """Return the sum of the values."""
    return sum(node.data for node in _nodes(head))


def maximum(head: ListNode | None) -> Any:
    """Return the largest value; an empty list has none."""
    if head is None:
        raise ValueError("empty list has no maximum")
    return max(node.data for node in _nodes(head))


def contains(head: ListNode | None, value: Any) -> bool:
    """Return True if some node holds ``value``."""
    return any(node.data == value for node in _nodes(head))


def move_to_front(head: ListNode | None, value: Any) -> ListNode | None:
    """Move the first node holding ``value`` to the front; return the new head."""
    previous, node = _find(head, value)
    if node is None or previous is None:
        return head
    previous.next = node.next
    node.next = head
    return node


def insert_after(head: ListNode | None, index: int, value: Any) -> ListNode | None:
    """Insert ``value`` after the node at position ``index``; return the head."""
    if index < 0:
        raise IndexError("index must not be negative")
    for position, node in enumerate(_nodes(head)):
        if position == index:
            node.next = ListNode(value, node.next)
            return head
    raise IndexError("index out of range")


def append(head: ListNode | None, value: Any) -> ListNode:
    """Add ``value`` at the end; return the head."""
    node = ListNode(value)
    if head is None:
        return node
    *_, tail = _nodes(head)
    tail.next = node
    return head


def delete_value(head: ListNode | None, value: Any) -> ListNode | None:
    """Remove the first node holding ``value``; return the new head."""
    previous, node = _find(head, value)
    if node is None:
        raise ValueError(f"{value!r} is not in the list")
    if previous is None:
        return node.next
    previous.next = node.next
    return head


def is_sorted(head: ListNode | None) -> bool:
    """Return True if the values never decrease."""
    return all(a.data <= b.data for a, b in pairwise(_nodes(head)))


def remove_duplicates(head: ListNode | None) -> ListNode | None:
    """Drop nodes equal to the node before them, as in a sorted list; return the head."""
    node = head
    while node is not None and node.next is not None:
        if node.next.data == node.data:
            node.next = node.next.next
        else:
            node = node.next
    return head


def reverse(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return the new head."""
    previous = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous


def _relink(current: ListNode | None, previous: ListNode | None) -> ListNode | None:
    if current is None:
        return previous
    following = current.next
    current.next = previous
    return _relink(following, current)


def reverse_recursive(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place by recursion and return the new head."""
    return _relink(head, None)


def swap_nodes(head: ListNode | None, x: Any, y: Any) -> ListNode | None:
    """Swap the first nodes holding ``x`` and ``y`` by relinking; return the new head.

    Nothing changes if the values are equal or either is absent.
    """
    if x == y:
        return head
    previous_x, node_x = _find(head, x)
    previous_y, node_y = _find(head, y)
    if node_x is None or node_y is None:
        return head
    if previous_x is None:
        head = node_y
    else:
        previous_x.next = node_y
    if previous_y is None:
        head = node_x
    else:
        previous_y.next = node_x
    node_x.next, node_y.next = node_y.next, node_x.next
    return head


def has_cycle(head: ListNode | None) -> bool:
    """Return True if following ``next`` from the head never ends."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def merge_sorted(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    """Merge two sorted lists by relinking their nodes; return the merged head.

    On equal values the node from ``second`` comes first.
    """
    anchor = ListNode(None)
    tail = anchor
    while first is not None and second is not None:
        if first.data < second.data:
            tail.next = first
            first = first.next
        else:
            tail.next = second
            second = second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return anchor.next


def middle(head: ListNode | None) -> Any:
    """Return the middle value; of two middle values, the first."""
    if head is None:
        raise ValueError("empty list has no middle")
    slow = fast = head
    while fast is not None:
        fast = fast.next
        if fast is not None:
            fast = fast.next
        if fast is not None:
            slow = slow.next
    return slow.data
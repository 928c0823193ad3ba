"""Classic algorithms and data structures: sorting, searching, arrays, dynamic
programming, strings, backtracking, shortest paths, bounded queues and singly
linked lists."""

__version__ = "0.1.0"
# algobox

Classic algorithms and data structures in plain Python, with no runtime
dependencies. Requires Python 3.10 or later.

## Installation

```
pip install algobox
```

Install the test dependencies with:

```
pip install "algobox[test]"
```

## What is inside

| Module | Contents |
| --- | --- |
| `algobox.sorting` | `quick_sort`, `heap_sort`, `shell_sort` |
| `algobox.searching` | `fibonacci_search`, `search_matrix`, `first_non_repeating` |
| `algobox.arrays` | `left_rotate`, `stock_span`, `plus_one`, `line_values` |
| `algobox.dynamic` | `count_coin_changes`, `has_subset_sum`, `can_partition`, `tour_cost` |
| `algobox.strings` | `title_to_number`, `is_palindrome`, `evaluate_postfix` |
| `algobox.backtracking` | `solve_n_queens`, `find_paths` |
| `algobox.graphs` | `floyd_warshall`, `format_matrix`, `dijkstra`, `INF` |
| `algobox.queues` | `CircularQueue`, `BoundedDeque`, `QueueFullError`, `QueueEmptyError` |
| `algobox.linked_list` | `ListNode` and functions on list heads |

### Sorting and searching

The three sorts take any iterable and return a new sorted list; the input is
left untouched. `fibonacci_search` looks up a value in a sorted sequence and
returns its index or `None`. `search_matrix` returns the `(row, column)` of the
first matching cell or `None`. `first_non_repeating` returns the first value
that occurs exactly once, or `None`.

### Arrays

- `left_rotate(values, d)` rotates left by `d` places with the block-swap
  algorithm; a negative `d` raises `ValueError`.
- `stock_span(prices)` gives, for each day, the number of consecutive days up
  to and including it whose price was not above that day's.
- `plus_one(digits)` adds one to a number given as decimal digits.
- `line_values(directions)` takes a string of `L`/`R` and returns, for
  k = 1..n, the best total of people seen after turning at most k people.

### Dynamic programming

- `count_coin_changes(coins, total)` counts unordered combinations of coins,
  each usable any number of times.
- `has_subset_sum(nums, target)` and `can_partition(nums)` work on
  non-negative integers.
- `tour_cost(dists)` returns the cheapest round trip from node 0 through every
  node of a square distance matrix.

### Strings

- `title_to_number("AB")` gives spreadsheet column numbers (upper-case letters
  only; anything else raises `ValueError`).
- `is_palindrome(text)` compares ASCII letters and digits, ignoring case.
- `evaluate_postfix(expression)` evaluates single-digit postfix expressions
  with `+ - * / ^`, truncating operands to integers and dividing toward zero.

### Backtracking

- `solve_n_queens(n)` returns the first board found (1 marks a queen) or
  `None`.
- `find_paths(maze)` lists every path through a square maze of open (1) cells
  as strings of moves `D`, `L`, `R`, `U`.

### Graphs

- `floyd_warshall(graph)` returns all-pairs shortest distances; missing edges
  are `INF` (999) or `math.inf`. `format_matrix` renders a matrix with
  four-character cells, missing edges shown as `INF`.
- `dijkstra(vertex_count, edges, source, destination)` works on an undirected
  graph with vertices `0..vertex_count` and edges `(u, v, weight)`, returning
  the distance or `None` when unreachable.

### Queues

`CircularQueue(size=10)` is a ring buffer holding `size - 1` items.
`BoundedDeque(capacity=20)` is a double-ended queue. Both raise
`QueueFullError` when full and `QueueEmptyError` (an `IndexError`) when empty,
and both support `len()` and iteration.

### Linked lists

`ListNode(data, next=None)` is a node; the functions take a head node.
`from_iterable`, `to_list`, `count`, `total`, `maximum`, `contains`,
`is_sorted`, `has_cycle` and `middle` read a list. `move_to_front`,
`insert_after`, `append`, `delete_value`, `remove_duplicates`, `reverse`,
`reverse_recursive`, `swap_nodes` and `merge_sorted` relink nodes in place
and return the (possibly new) head.

## Examples

```python
from algobox.sorting import quick_sort
from algobox.dynamic import count_coin_changes
from algobox.graphs import dijkstra
from algobox.strings import evaluate_postfix
from algobox.arrays import stock_span

quick_sort([5, 2, 9, 1])                      # [1, 2, 5, 9]
count_coin_changes([1, 2, 3], 4)              # 4
evaluate_postfix("23*5+")                     # 11.0
dijkstra(3, [(1, 2, 4), (2, 3, 1), (1, 3, 7)], 1, 3)   # 5
stock_span([10, 4, 5, 90, 120, 80])           # [1, 1, 2, 4, 5, 1]
```

```python
from algobox.queues import CircularQueue, QueueEmptyError

queue = CircularQueue()
queue.enqueue(1)
queue.front()         # 1
queue.dequeue()       # 1
try:
    queue.dequeue()
except QueueEmptyError:
    pass
```

```python
from algobox.linked_list import from_iterable, reverse, to_list

to_list(reverse(from_iterable([10, 20, 30, 40])))   # [40, 30, 20, 10]
```

## What it does not do

algobox is a library only: it has no command-line program and no interactive
menus. It offers no binary tree or binary search tree types and no circular
linked list; the linked-list functions cover singly linked lists that end in
`None`, apart from `has_cycle`, which detects a loop.

## Running the tests

```
pytest
```
# dsakit

Small, dependency-free implementations of classic data structures and
algorithms: queues, stacks, a preorder-built binary tree, two greedy
algorithms and a collection of two-pointer / sliding-window techniques.

## Installation

```
pip install dsakit
```

To run the test suite:

```
pip install "dsakit[test]"
pytest
```

## `dsakit.queues`

Four FIFO queues. Removing from or peeking into an empty queue raises
`QueueEmptyError` (a subclass of `IndexError`); adding to a full bounded
queue raises `QueueFullError` (a subclass of `OverflowError`).

- `CircularQueue(capacity)`: a fixed-size ring buffer that reuses freed
  slots. `capacity` must be at least 1. Methods: `enqueue(item)`,
  `dequeue()` (returns the front item), `peek_front()`, `peek_rear()`,
  `is_empty()`, `is_full()`, `len()`, and a read-only `capacity` property.
- `ArrayQueue(capacity=1000)`: a queue over a fixed block of slots that are
  never reused. Every `enqueue` uses up one slot for good, so once
  `capacity` items have been added in total, further `enqueue` calls raise
  `QueueFullError` even if items have been dequeued. Methods: `enqueue`,
  `dequeue`, `peek`, `is_empty`, `len()`.
- `LinkedQueue()`: an unbounded queue of linked nodes. Methods: `enqueue`,
  `dequeue`, `peek`, `is_empty`, `len()`, and iteration from front to rear.
- `StackQueue()`: an unbounded queue kept in two stacks. Methods:
  `push(item)` (adds at the rear), `pop()` (removes and returns the front),
  `peek`, `is_empty`, `len()`.

```python
from dsakit.queues import CircularQueue

q = CircularQueue(3)
for value in (10, 20, 30):
    q.enqueue(value)
q.peek_front()   # 10
q.dequeue()      # 10
q.enqueue(40)
q.peek_rear()    # 40
```

## `dsakit.stacks`

Three LIFO stacks. Popping or peeking an empty stack raises
`StackEmptyError` (a subclass of `IndexError`); pushing onto a full
`ArrayStack` raises `StackFullError` (a subclass of `OverflowError`).

- `ArrayStack(capacity=1000)`: holds at most `capacity` items.
- `LinkedStack()`: unbounded, built from linked nodes; iterating yields
  items from top to bottom.
- `QueueStack()`: unbounded, kept in a single FIFO queue whose front is
  always the newest item.

All three offer `push(item)`, `pop()` (returns the top item), `peek()`,
`is_empty()` and `len()`.

`is_valid_parentheses(s)` tells whether the brackets `()`, `{}` and `[]`
in `s` are balanced and correctly nested. Any character that is not a
bracket makes the string invalid.

```python
from dsakit.stacks import LinkedStack, is_valid_parentheses

s = LinkedStack()
s.push(10)
s.push(20)
s.pop()                          # 20
is_valid_parentheses("(){}[]")   # True
is_valid_parentheses("(a)")      # False
```

## `dsakit.binary_tree`

- `Node(data, left=None, right=None)`: a dataclass for a tree node.
- `build_tree(values)`: builds a tree from any iterable of values in
  preorder, where `-1` marks an empty child. Returns the root `Node`, or
  `None` when the first value is `-1`. Values left over once the tree is
  complete are ignored; running out of values before it is complete raises
  `ValueError`.
- `preorder(root)`: a generator yielding node data in preorder.

```python
from dsakit.binary_tree import build_tree, preorder

root = build_tree([1, 2, -1, -1, 3, -1, -1])
list(preorder(root))   # [1, 2, 3]
```

`build_tree` reads from the values it is given; it does not prompt for
input.

## `dsakit.greedy`

- `find_content_children(greed, sizes)`: the number of children who can
  each be satisfied by at most one cookie, where a child with greed `g` is
  content with a cookie of size `s` when `g <= s`. The inputs are not
  modified.
- `lemonade_change(bills)`: whether every customer buying a lemonade
  costing 5 can be given correct change, starting from an empty till. Any
  bill other than 5 or 10 is handled as a 20.

```python
from dsakit.greedy import find_content_children, lemonade_change

find_content_children([1, 2, 3], [1, 1])   # 1
lemonade_change([5, 5, 5, 10, 20])        # True
```

## `dsakit.sliding_window`

- `num_subarrays_with_sum(nums, goal)`: subarrays of a 0/1 sequence
  summing to `goal` (0 for a negative goal).
- `number_of_nice_subarrays(nums, k)`: subarrays with exactly `k` odd
  numbers.
- `total_fruit(fruits)`: longest run holding at most two kinds of value.
- `character_replacement(s, k)`: longest run of one character reachable by
  changing at most `k` characters.
- `length_of_longest_substring(s)`: longest substring without a repeated
  character.
- `longest_k_distinct_substring(s, k)`: longest substring with at most `k`
  distinct characters.
- `longest_ones(nums, k)`: longest run of ones after flipping at most `k`
  zeros.
- `max_card_score(card_points, k)`: best total from taking exactly `k`
  cards from the two ends; `k` must lie between 0 and the number of cards.
- `min_window(s, t)`: shortest substring of `s` containing every character
  of `t` with multiplicity; the leftmost is returned among equals, and
  `""` when there is none.
- `number_of_substrings(s)`: substrings of an `a`/`b`/`c` string holding
  all three letters; other characters raise `ValueError`.
- `subarrays_with_k_distinct(nums, k)`: subarrays with exactly `k` distinct
  values (0 when `k < 1`).

`character_replacement`, `longest_k_distinct_substring` and
`longest_ones` raise `ValueError` for a negative `k`.

```python
from dsakit.sliding_window import length_of_longest_substring, min_window

length_of_longest_substring("abcabcbb")   # 3
min_window("ADOBECODEBANC", "ABC")        # "BANC"
```

## What it does not do

dsakit is a library only: it has no command-line tool and reads nothing
from standard input. The containers are not thread-safe.
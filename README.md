# ftcontainers

A small container library: a double-ended queue with positional
cursors, and the classic adaptors built on it.

- `ftcontainers.deque.Deque` – double-ended sequence with cursor
  positions, range insertion and erasure, and lexicographic comparison.
- `ftcontainers.stack.Stack` – last-in, first-out adaptor over a `Deque`.
- `ftcontainers.queue.Queue` – first-in, first-out adaptor over a `Deque`.
- `ftcontainers.priority_queue.PriorityQueue` – binary heap with a
  pluggable ordering (`less` or `greater`).
- `ftcontainers.cursor.Cursor` / `ReverseCursor` – positions that walk a
  sequence forwards or backwards and can be offset and compared.

There are no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Deque

```python
from ftcontainers.deque import Deque

deq = Deque([5, 42])
deq.push_front(6)
deq.push_front(24)

list(deq)                 # [24, 6, 5, 42]
deq.front(), deq.back()   # (24, 42)
deq.at(2)                 # 5
list(reversed(deq))       # [42, 5, 6, 24]

deq.erase(1)              # removes 6
deq.insert(0, 7, 2)       # two copies of 7 at the front
deq.resize(8, 0)          # grow to 8 elements, padding with 0

filled = Deque.filled(5, 42)   # Deque([42, 42, 42, 42, 42])
```

Other operations: `insert_all(index, iterable)`, `erase_range(start, stop)`,
`assign(iterable)`, `assign_fill(n, value)`, `clear()`, `swap(other)`,
`copy()`, `empty()` and `max_size()`.

- Positions passed to `insert`, `insert_all`, `erase` and `erase_range`
  may be integers or cursors from `begin()`/`end()` of the same deque;
  an out-of-range position raises `IndexError`.
- `at()` raises `IndexError` when the index is out of range, as do
  `front()` and `back()` on an empty deque.
- `pop_front()` and `pop_back()` do nothing on an empty deque.
- `resize(n)` pads with `0` unless a value is given.
- Deques compare element by element: `Deque([5, 42]) < Deque([5, 42, 43])`
  and `Deque([99, 42, 43]) > Deque([5, 42])`.

### Cursors

```python
it = deq.begin()
it.get()                  # first element
(deq.end() + -1).get()    # last element
deq.end() - deq.begin()   # number of elements

rit = deq.rbegin()
rit.get()                 # last element
(rit + 1).get()           # the one before it
```

Reading or writing a cursor that holds no element raises `IndexError`;
comparing or subtracting cursors of different sequences raises
`ValueError`.

## Stack and Queue

```python
from ftcontainers.deque import Deque
from ftcontainers.stack import Stack
from ftcontainers.queue import Queue

stk = Stack(Deque([5, 42, 43, 99]))
stk.top()                 # 99
stk.pop()
stk.top()                 # 43
stk.set_top(7)

que = Queue(Deque([5, 42, 43, 99]))
que.front(), que.back()   # (5, 99)
que.pop()
que.front()               # 42
que.set_front(1)
```

Each adaptor copies the items it is given, so the original container is
left unchanged. `pop()` on an empty stack or queue does nothing. Stacks
compare starting from their top element; queues compare starting from
their front.

## PriorityQueue

```python
from ftcontainers.priority_queue import PriorityQueue, greater, less

pq = PriorityQueue([3, 1, 2], less)
pq.top()       # 3
pq.push(10)
pq.top()       # 10
pq.pop()
pq.top()       # 3

smallest_first = PriorityQueue([3, 1, 2], greater)
smallest_first.top()   # 1
```

`top()` and `pop()` raise `IndexError` on an empty queue. `swap(other)`
exchanges both the contents and the orderings.

## Demo command

```
ftcontainers-demo 42
ftcontainers-demo --count 1000 42
```

The command takes a seed and runs a pseudo-random workload: it allocates
and discards a list of 4096-byte buffers, fills a dictionary with random
pairs, sums 10,000 random lookups, and prints

```
should be constant with the same seed: <sum>
abcdefghijklmnopqrstuvwxyz
```

the second line being the alphabet read back from an `IterableStack`.
Runs with the same seed and count print the same sum.

By default the workload uses 1,047,552 buffers, about 4 GiB of memory;
`--count N` sets a smaller number. Without a seed, or with a count that
is not positive, it prints usage information and exits with status 1.
`ftcontainers.cli.run(seed, count, out)` runs the same workload from
Python and returns the sum.

## What is not included

The package offers only the deque and its adaptors. It has no vector,
ordered map or linked-list container; the demo uses Python's own lists
and dictionaries where it needs them.
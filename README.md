# leftheap

A max-priority queue built on a leftist heap. Two queues merge in
logarithmic time. If a comparison raises partway through a `push`, `pop` or
`merge`, every queue involved stays exactly as it was before the call.

## Installation

```
pip install leftheap
```

## Usage

```python
from leftheap.priority_queue import PriorityQueue
from leftheap.errors import ContainerIsEmptyError

q = PriorityQueue([5, 1, 9])
q.push(7)
q.top()      # 9
q.pop()      # removes and returns 9
q.top()      # 7
len(q)       # 3
bool(q)      # True

other = PriorityQueue([100, 2])
q.merge(other)   # `other` is left empty
q.top()          # 100
len(other)       # 0

snapshot = q.copy()   # independent queue; changes to one do not affect the other

empty = PriorityQueue()
try:
    empty.top()
except ContainerIsEmptyError:
    pass
```

`copy.copy(q)` does the same as `q.copy()`. Heap nodes are never modified
after they are built, so a copy shares structure with the original and is
made in constant time.

The largest element comes first. To order the elements another way, pass a
`less` function of two arguments. It returns whether the first argument
ranks below the second:

```python
by_length = PriorityQueue(["aaa", "b", "cc"], less=lambda a, b: len(a) < len(b))
by_length.top()   # "aaa"
```

### Errors

Every error in `leftheap.errors` is a subclass of `QueueError`:

- `ContainerIsEmptyError` (also an `IndexError`) is raised by `top()` or
  `pop()` on an empty queue.
- `ComparisonError` (also a `RuntimeError`) is raised when the `less`
  function raises during `push`, `pop` or `merge`. The queues are left
  unchanged, and the original exception is kept as `__cause__`.
- `IndexOutOfBoundError` and `InvalidIteratorError` belong to the same
  hierarchy. The queue itself never raises them.

The queue has no iteration and no random access. Only the top element can
be read.

## Self-checks

`leftheap.selfcheck_core` and `leftheap.selfcheck_extra` hold functions
that exercise the queue and return their findings. Among them:

- `merge_check(size)` checks merging of two large queues.
- `push_top_trace(count)` and `mixed_trace(count)` record traces of pushes
  and pops.
- `empty_access_check()` checks access to an empty queue.
- `compare_exception_check()` and `faulty_compare_checks()` check comparisons
  that fail partway through.
- `copy_trace(base, rounds)`, `sort_order(count)` and `binary_order(limit)`
  check copies and custom orderings.

The pseudo-random generators they use are `shift_rand()`, `linear_rand()`
and `modular_rand()`. Each is an endless iterator.

The command line runs two of these: the merge check and the
failing-comparison checks.

```
leftheap-selfcheck
leftheap-selfcheck --merge-size 1000 --verbose
```

The first output line is `OKAY` or `FAIL` for the merge check. The last
line is `1` if every failing-comparison check passed and `0` otherwise.
With `--verbose`, each failing-comparison check is also listed by name.
`--merge-size` sets how many values go into each queue before merging. The
default is 400000. The command exits with status 0 only if every check
passed.

The same results are available from Python as a dictionary:
`leftheap.cli.run_all()`.

## Running the tests

```
pip install -e .[test]
pytest
```
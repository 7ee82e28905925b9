"""Self-checks for pushing, popping, merging and error handling."""

from __future__ import annotations

import random
from typing import Iterator, List

from .errors import ComparisonError, ContainerIsEmptyError
from .priority_queue import PriorityQueue

_INT32_SPAN = 1 << 32
_INT32_MAX = (1 << 31) - 1

_LINEAR_MULTIPLIER = 325
_LINEAR_INCREMENT = 2336
_LINEAR_MODULUS = 1000007
_LINEAR_SEED = 233

_COMPARE_CHECK_SEED = 1727417277
_COMPARE_CHECK_SIZE = 1000


def shift_rand() -> Iterator[int]:
    """Yield signed 32-bit pseudo-random numbers from a shift-and-add generator."""
    state = 1727417277
    while True:
        state = (state + (state << 5) + 172741827) % _INT32_SPAN
        if state > _INT32_MAX:
            state -= _INT32_SPAN
        yield state


def linear_rand() -> Iterator[int]:
    """Yield numbers in ``[0, 1000007)`` from a linear congruential generator."""
    state = _LINEAR_SEED
    while True:
        state = (_LINEAR_MULTIPLIER * state + _LINEAR_INCREMENT) % _LINEAR_MODULUS
        yield state


def merge_check(size: int) -> bool:
    """Fill two queues with ``size`` values each, merge them, and verify the result.

    The second queue must end up empty and the first must yield every value
    in descending order.
    """
    numbers = shift_rand()
    first: PriorityQueue[int] = PriorityQueue()
    second: PriorityQueue[int] = PriorityQueue()
    pushed: List[int] = []
    for queue in (first, second):
        for _ in range(size):
            value = next(numbers)
            pushed.append(value)
            queue.push(value)

    first.merge(second)
    if second:
        return False
    if len(first) != len(pushed):
        return False
    for expected in sorted(pushed, reverse=True):
        if first.top() != expected:
            return False
        first.pop()
    return not first


def push_top_trace(count: int) -> List[int]:
    """Push ``count`` generated values, recording the top after every push."""
    numbers = linear_rand()
    queue: PriorityQueue[int] = PriorityQueue()
    trace = []
    for value in (next(numbers) for _ in range(count)):
        queue.push(value)
        trace.append(queue.top())
    return trace


def mixed_trace(count: int) -> List[int]:
    """Run ``count`` random pushes and pops, recording the top whenever non-empty.

    An empty queue always receives a push; otherwise an even draw pops and an
    odd draw pushes the next value.
    """
    numbers = linear_rand()
    queue: PriorityQueue[int] = PriorityQueue()
    trace = []
    for _ in range(count):
        if not queue or next(numbers) % 2:
            queue.push(next(numbers))
        else:
            queue.pop()
        if queue:
            trace.append(queue.top())
    return trace


def _raises_empty(action) -> bool:
    try:
        action()
    except ContainerIsEmptyError:
        return True
    return False


def empty_access_check() -> bool:
    """Verify that ``top`` and ``pop`` refuse to work on a drained or fresh queue."""
    fresh: PriorityQueue[int] = PriorityQueue()
    if not _raises_empty(fresh.top) or not _raises_empty(fresh.pop):
        return False

    numbers = linear_rand()
    queue = PriorityQueue(next(numbers) for _ in range(100))
    while queue:
        queue.pop()
    return _raises_empty(queue.top) and _raises_empty(queue.pop) and len(queue) == 0


def _natural_less(a: int, b: int) -> bool:
    if a < 0 or b < 0:
        raise ValueError("negative values cannot be compared")
    return a < b


def compare_exception_check() -> bool:
    """Push a shuffled mix of valid and invalid values through a failing comparison.

    Only the invalid (negative) values may be rejected, and the queue must
    then yield exactly the valid values in descending order.
    """
    rng = random.Random(_COMPARE_CHECK_SEED)
    values = []
    accepted = []
    for number in range(1, _COMPARE_CHECK_SIZE + 1):
        if rng.randrange(10) == 0:
            values.append(-number)
        else:
            values.append(number)
            accepted.append(number)

    rng.shuffle(values)
    # The first push meets no comparison, so it must be a valid value.
    while values[0] < 0:
        swap = rng.randrange(len(values))
        values[0], values[swap] = values[swap], values[0]

    queue = PriorityQueue(less=_natural_less)
    for value in values:
        try:
            queue.push(value)
        except ComparisonError:
            if value >= 0:
                return False

    if len(queue) != len(accepted):
        return False
    for expected in reversed(accepted):
        if queue.top() != expected:
            return False
        queue.pop()
    return not queue
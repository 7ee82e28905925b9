"""Self-checks for copying, custom orderings and comparisons that fail."""

from __future__ import annotations

from typing import Dict, Iterator, List, NamedTuple, Tuple

from .errors import ComparisonError
from .priority_queue import PriorityQueue
from .selfcheck_core import linear_rand

_MODULAR_MULTIPLIER = 13131
_MODULAR_INCREMENT = 5353
_MODULAR_MODULUS = 1_000_000_007

_TRACE_INTERVAL = 100
_COPY_EXTRA = 100
_COPY_POPS = 10

_TRIGGER_VALUE = 100
_FAULTY_SETUP_SIZE = 100


class Snapshot(NamedTuple):
    """The observable state of a queue at one moment."""

    top: int
    size: int
    empty: bool


def modular_rand() -> Iterator[int]:
    """Yield numbers in ``[0, 1000000007)``, advancing the generator twice per value."""
    state = 1
    while True:
        for _ in range(2):
            state = (state * _MODULAR_MULTIPLIER + _MODULAR_INCREMENT) % _MODULAR_MODULUS
        yield state


def _snapshot(queue: PriorityQueue[int]) -> Snapshot:
    return Snapshot(queue.top(), len(queue), not queue)


def growth_trace(count: int) -> List[Snapshot]:
    """Push ``count`` generated values, taking a snapshot after every hundredth push."""
    numbers = modular_rand()
    queue: PriorityQueue[int] = PriorityQueue()
    trace = []
    for pushed in range(1, count + 1):
        queue.push(next(numbers))
        if pushed % _TRACE_INTERVAL == 0:
            trace.append(_snapshot(queue))
    return trace


def _drain_snapshots(queue: PriorityQueue[int], times: int) -> List[Snapshot]:
    shots = []
    for _ in range(times):
        shots.append(_snapshot(queue))
        queue.pop()
    return shots


def copy_trace(base: int, rounds: int) -> List[Snapshot]:
    """Exercise copies of a queue of ``base`` values over ``rounds`` rounds.

    Each round copies the original, grows the copy, records ten pops, then
    copies that copy, grows it again and records ten more pops.  The
    original must stay untouched throughout.
    """
    numbers = modular_rand()
    original = PriorityQueue(next(numbers) for _ in range(base))
    trace: List[Snapshot] = []
    for _ in range(rounds):
        first = original.copy()
        for _ in range(_COPY_EXTRA):
            first.push(next(numbers))
        trace.extend(_drain_snapshots(first, _COPY_POPS))

        second = first.copy()
        for _ in range(_COPY_EXTRA):
            second.push(next(numbers))
        trace.extend(_drain_snapshots(second, _COPY_POPS))
    return trace


def sort_order(count: int) -> List[int]:
    """Push pairs ``(i // 10, i % 10)`` for ``i < count`` and pop them as ``x * 10 + y``."""
    queue = PriorityQueue(divmod(number, 10) for number in range(count))
    order = []
    while queue:
        tens, units = queue.pop()
        order.append(tens * 10 + units)
    return order


def _binary_less(a: str, b: str) -> bool:
    return (len(a), a) < (len(b), b)


def binary_order(limit: int) -> List[str]:
    """Pop the binary spellings of ``1 .. limit - 1`` ordered by length, then digits."""
    queue = PriorityQueue((format(number, "b") for number in range(1, limit)), less=_binary_less)
    order = []
    while queue:
        order.append(queue.pop())
    return order


class _FaultyLess:
    """Ordering that fails on a trigger value, or on every call while forced."""

    def __init__(self) -> None:
        self.forced = False

    def __call__(self, a: int, b: int) -> bool:
        if self.forced or _TRIGGER_VALUE in (a, b):
            raise ValueError("comparison refused")
        return a < b


def _contents(queue: PriorityQueue[int]) -> List[int]:
    drained = queue.copy()
    values = []
    while drained:
        values.append(drained.pop())
    return values


def _is_descending(values: List[int]) -> bool:
    return all(later <= earlier for earlier, later in zip(values, values[1:]))


def _filled(numbers: Iterator[int], less: _FaultyLess, size: int) -> PriorityQueue[int]:
    return PriorityQueue((next(numbers) % 90 + 1 for _ in range(size)), less=less)


def _check_basic(numbers: Iterator[int], less: _FaultyLess) -> bool:
    queue = _filled(numbers, less, 10)
    return _is_descending(_contents(queue)) and len(queue) == 10


def _check_push(numbers: Iterator[int], less: _FaultyLess) -> bool:
    queue = _filled(numbers, less, _FAULTY_SETUP_SIZE)
    before = _contents(queue)
    try:
        queue.push(_TRIGGER_VALUE)
    except ComparisonError:
        return _contents(queue) == before and len(queue) == len(before)
    return False


def _check_pop(numbers: Iterator[int], less: _FaultyLess) -> bool:
    queue = _filled(numbers, less, _FAULTY_SETUP_SIZE)
    before = _contents(queue)
    less.forced = True
    try:
        queue.pop()
    except ComparisonError:
        less.forced = False
        return _contents(queue) == before and len(queue) == len(before)
    less.forced = False
    return False


def _check_merge(numbers: Iterator[int], less: _FaultyLess) -> bool:
    first = _filled(numbers, less, _FAULTY_SETUP_SIZE)
    second = _filled(numbers, less, _FAULTY_SETUP_SIZE)
    first_before = _contents(first)
    second_before = _contents(second)
    less.forced = True
    try:
        first.merge(second)
    except ComparisonError:
        less.forced = False
        return _contents(first) == first_before and _contents(second) == second_before
    less.forced = False
    return False


def _check_recovery(numbers: Iterator[int], less: _FaultyLess) -> bool:
    queue = _filled(numbers, less, _FAULTY_SETUP_SIZE)
    try:
        queue.push(_TRIGGER_VALUE)
    except ComparisonError:
        pass
    for _ in range(_FAULTY_SETUP_SIZE):
        queue.push(next(numbers) % 90 + 1)
    values = _contents(queue)
    return _is_descending(values) and len(values) == 2 * _FAULTY_SETUP_SIZE


def faulty_compare_checks() -> Dict[str, bool]:
    """Run the failing-comparison checks and report which of them passed.

    A comparison that fails during ``push``, ``pop`` or ``merge`` must leave
    every queue involved as it was, and the queue must keep working after.
    """
    numbers = linear_rand()
    less = _FaultyLess()
    checks: Tuple[Tuple[str, object], ...] = (
        ("basic", _check_basic),
        ("push", _check_push),
        ("pop", _check_pop),
        ("merge", _check_merge),
        ("recovery", _check_recovery),
    )
    return {name: check(numbers, less) for name, check in checks}
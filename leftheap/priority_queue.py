"""A max-priority queue built on a persistent leftist heap."""

from __future__ import annotations

import operator
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar

from .errors import ComparisonError, ContainerIsEmptyError

T = TypeVar("T")


class _Node:
    __slots__ = ("value", "left", "right", "npl")

    def __init__(self, value, left=None, right=None, npl=0):
        self.value = value
        self.left = left
        self.right = right
        self.npl = npl


class PriorityQueue(Generic[T]):
    """Heap that yields the greatest element first according to ``less``.

    Nodes are never modified once built, so a failing comparison leaves
    every queue involved exactly as it was, and copies share structure.
    """

    __slots__ = ("_root", "_size", "_less")

    def __init__(self, items: Iterable[T] = (), less: Callable[[Any, Any], bool] = operator.lt):
        self._root: Optional[_Node] = None
        self._size = 0
        self._less = less
        for item in items:
            self.push(item)

    def _merge(self, a: Optional[_Node], b: Optional[_Node]) -> Optional[_Node]:
        if a is None:
            return b
        if b is None:
            return a
        if self._less(a.value, b.value):
            a, b = b, a
        right = self._merge(a.right, b)
        left = a.left
        if left is None or left.npl < right.npl:
            left, right = right, left
        npl = right.npl + 1 if right is not None else 0
        return _Node(a.value, left, right, npl)

    def _safe_merge(self, a: Optional[_Node], b: Optional[_Node]) -> Optional[_Node]:
        try:
            return self._merge(a, b)
        except Exception as exc:
            raise ComparisonError() from exc

    def top(self) -> T:
        """Return the greatest element without removing it."""
        if self._root is None:
            raise ContainerIsEmptyError()
        return self._root.value

    def push(self, item: T) -> None:
        """Add an element; on a failed comparison the queue is unchanged."""
        self._root = self._safe_merge(self._root, _Node(item))
        self._size += 1

    def pop(self) -> T:
        """Remove and return the greatest element."""
        root = self._root
        if root is None:
            raise ContainerIsEmptyError()
        self._root = self._safe_merge(root.left, root.right)
        self._size -= 1
        return root.value

    def merge(self, other: "PriorityQueue[T]") -> None:
        """Move every element of ``other`` into this queue, leaving ``other`` empty."""
        if other is self:
            return
        self._root = self._safe_merge(self._root, other._root)
        self._size += other._size
        other._root = None
        other._size = 0

    def copy(self) -> "PriorityQueue[T]":
        """Return an independent queue holding the same elements."""
        duplicate = PriorityQueue(less=self._less)
        duplicate._root = self._root
        duplicate._size = self._size
        return duplicate

    def __copy__(self) -> "PriorityQueue[T]":
        return self.copy()

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size})"
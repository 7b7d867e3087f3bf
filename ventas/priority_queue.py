"""A stable priority queue in which lower numbers are served first."""

from __future__ import annotations

from bisect import insort_right
from collections.abc import Iterator
from operator import itemgetter
from typing import Generic, TypeVar

T = TypeVar("T")

NO_PRIORITY = 1_000_000
"""Priority given to plain enqueues; any priority at or above it counts as none."""

_priority = itemgetter(0)


class EmptyError(IndexError):
    """Raised when reading from an empty queue."""


class PriorityQueue(Generic[T]):
    """Queue ordered by ascending priority, first-in first-out within a priority."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, T]] = []

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the back with no priority."""
        self._entries.append((NO_PRIORITY, value))

    def enqueue_priority(self, value: T, priority: int) -> None:
        """Add ``value`` behind every entry whose priority is not greater."""
        if priority >= NO_PRIORITY:
            self.enqueue(value)
            return
        insort_right(self._entries, (priority, value), key=_priority)

    def dequeue(self) -> T:
        """Remove and return the front value."""
        if not self._entries:
            raise EmptyError("dequeue from an empty queue")
        return self._entries.pop(0)[1]

    def peek(self) -> T:
        """Return the front value without removing it."""
        if not self._entries:
            raise EmptyError("peek at an empty queue")
        return self._entries[0][1]

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[T]:
        """Iterate over the values from front to back without removing them."""
        return (value for _, value in self._entries)

    def copy(self) -> PriorityQueue[T]:
        """Return an independent queue holding the same entries."""
        clone: PriorityQueue[T] = PriorityQueue()
        clone._entries = list(self._entries)
        return clone

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"
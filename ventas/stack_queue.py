"""Last-in first-out stack and first-in first-out queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Generic, TypeVar

from ventas.priority_queue import EmptyError

T = TypeVar("T")


class Stack(Generic[T]):
    """A last-in first-out stack."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, value: T) -> None:
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the most recently pushed value."""
        if not self._items:
            raise EmptyError("pop from an empty stack")
        return self._items.pop()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class Queue(Generic[T]):
    """A first-in first-out queue."""

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def enqueue(self, value: T) -> None:
        self._items.append(value)

    def dequeue(self) -> T:
        """Remove and return the value at the front."""
        if not self._items:
            raise EmptyError("dequeue from an empty queue")
        return self._items.popleft()

    def peek(self) -> T:
        """Return the value at the front without removing it."""
        if not self._items:
            raise EmptyError("peek at an empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"
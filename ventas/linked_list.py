"""Singly linked, doubly linked and circular list containers with positional access."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


def _check_position(pos: int, size: int) -> None:
    if not 0 <= pos < size:
        raise IndexError(f"position {pos} out of range for size {size}")


def _check_insert_position(pos: int, size: int) -> None:
    if not 0 <= pos <= size:
        raise IndexError(f"cannot insert at position {pos} in a list of size {size}")


class LinkedList(Generic[T]):
    """A sequence with positional insert, removal and replacement."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def insert(self, pos: int, value: T) -> None:
        """Insert ``value`` so that it ends up at position ``pos``."""
        _check_insert_position(pos, len(self._items))
        self._items.insert(pos, value)

    def insert_first(self, value: T) -> None:
        self.insert(0, value)

    def insert_last(self, value: T) -> None:
        self._items.append(value)

    def remove_at(self, pos: int) -> T:
        """Remove and return the value at ``pos``."""
        _check_position(pos, len(self._items))
        return self._items.pop(pos)

    def get(self, pos: int) -> T:
        _check_position(pos, len(self._items))
        return self._items[pos]

    def replace(self, pos: int, value: T) -> None:
        _check_position(pos, len(self._items))
        self._items[pos] = value

    def clear(self) -> None:
        self._items.clear()

    def render(self) -> str:
        """Return the list as ``a->b->NULL``."""
        return "".join(f"{value}->" for value in self._items) + "NULL"

    def insert_after_nth(self, old_value: T, n: int, new_value: T) -> bool:
        """Insert ``new_value`` after the n-th occurrence of ``old_value``.

        Returns whether that occurrence existed.
        """
        seen = 0
        for pos, value in enumerate(self._items):
            if value == old_value:
                seen += 1
                if seen == n:
                    self._items.insert(pos + 1, new_value)
                    return True
        return False

    def index(self, value: T) -> int:
        """Return the position of the first item equal to ``value``."""
        for pos, item in enumerate(self._items):
            if item == value:
                return pos
        raise ValueError(f"{value!r} is not in the list")


class DoublyLinkedList(Generic[T]):
    """A sequence that can be walked in both directions."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def insert_first(self, value: T) -> None:
        self._items.insert(0, value)

    def insert_last(self, value: T) -> None:
        self._items.append(value)

    def remove_at(self, pos: int) -> T:
        """Remove and return the value at ``pos``."""
        _check_position(pos, len(self._items))
        return self._items.pop(pos)

    def get(self, pos: int) -> T:
        _check_position(pos, len(self._items))
        return self._items[pos]

    def replace(self, pos: int, value: T) -> None:
        _check_position(pos, len(self._items))
        self._items[pos] = value

    def clear(self) -> None:
        self._items.clear()

    def render(self) -> str:
        """Return the list as ``a <-> b <-> NULL``."""
        return "".join(f"{value} <-> " for value in self._items) + "NULL"


class CircularList(Generic[T]):
    """A list whose last element links back to the first."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate once around the ring, starting at the head."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def insert(self, pos: int, value: T) -> None:
        _check_insert_position(pos, len(self._items))
        self._items.insert(pos, value)

    def insert_first(self, value: T) -> None:
        self.insert(0, value)

    def insert_last(self, value: T) -> None:
        self._items.append(value)

    def get(self, pos: int) -> T:
        _check_position(pos, len(self._items))
        return self._items[pos]

    def render(self) -> str:
        """Return the ring as ``a->b->a...``, showing the wrap to the head."""
        if not self._items:
            return ""
        body = "".join(f"{value}->" for value in self._items)
        return f"{body}{self._items[0]}..."
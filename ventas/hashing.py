"""Fixed-size hash tables: one without collision handling, one with chaining."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator
from typing import Any, Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")

HashFunc = Callable[[Any], int]

_FNV_OFFSET = 2166136261
_FNV_PRIME = 16777619
_MASK = 0xFFFFFFFF


class CollisionError(KeyError):
    """Raised when a slot of a table without chaining is taken by another key."""


def default_hash(key: Hashable) -> int:
    """Deterministic 32-bit hash: FNV-1a for strings, the value itself for integers."""
    if isinstance(key, str):
        h = _FNV_OFFSET
        for byte in key.encode("utf-8"):
            h ^= byte
            h = (h * _FNV_PRIME) & _MASK
        return h
    return int(key) & _MASK


def _check_size(size: int) -> None:
    if size <= 0:
        raise ValueError(f"table size must be positive, got {size}")


class HashMap(Generic[K, V]):
    """Hash table holding at most one entry per slot."""

    def __init__(self, size: int, hash_func: HashFunc | None = None) -> None:
        _check_size(size)
        self._size = size
        self._hash = hash_func or default_hash
        self._table: list[tuple[K, V] | None] = [None] * size

    def _slot(self, key: K) -> int:
        return self._hash(key) % self._size

    def put(self, key: K, value: V) -> None:
        """Store ``value``; raise CollisionError if the slot is already taken."""
        pos = self._slot(key)
        if self._table[pos] is not None:
            raise CollisionError(key)
        self._table[pos] = (key, value)

    def get(self, key: K) -> V:
        """Return the value for ``key``.

        Raises KeyError if the slot is empty and CollisionError if it holds
        another key.
        """
        entry = self._table[self._slot(key)]
        if entry is None:
            raise KeyError(key)
        stored_key, value = entry
        if stored_key != key:
            raise CollisionError(key)
        return value

    def is_empty(self) -> bool:
        return all(entry is None for entry in self._table)

    def render(self) -> str:
        """Return the table, one slot per line."""
        lines = ["i Clave\t\tValor", "--------------------"]
        for pos, entry in enumerate(self._table):
            if entry is None:
                lines.append(f"{pos} ")
            else:
                lines.append(f"{pos} {entry[0]}\t\t{entry[1]}")
        return "".join(line + "\n" for line in lines)


class HashMapList(Generic[K, V]):
    """Hash table that chains colliding keys in per-slot lists."""

    def __init__(self, size: int, hash_func: HashFunc | None = None) -> None:
        _check_size(size)
        self._size = size
        self._hash = hash_func or default_hash
        self._table: list[list[list[Any]] | None] = [None] * size

    def _slot(self, key: K) -> int:
        return self._hash(key) % self._size

    def put(self, key: K, value: V) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        pos = self._slot(key)
        bucket = self._table[pos]
        if bucket is None:
            bucket = self._table[pos] = []
        for entry in bucket:
            if entry[0] == key:
                entry[1] = value
                return
        bucket.append([key, value])

    def get(self, key: K) -> V:
        """Return the value stored under ``key``; raise KeyError if absent."""
        bucket = self._table[self._slot(key)]
        for stored_key, value in bucket or ():
            if stored_key == key:
                return value
        raise KeyError(key)

    def remove(self, key: K) -> None:
        """Delete ``key``; raise KeyError if absent."""
        pos = self._slot(key)
        bucket = self._table[pos]
        if bucket is None:
            raise KeyError(key)
        for index, entry in enumerate(bucket):
            if entry[0] == key:
                del bucket[index]
                if not bucket:
                    self._table[pos] = None
                return
        raise KeyError(key)

    def bucket(self, key: K) -> list[V]:
        """Return the values chained in the slot ``key`` hashes to."""
        bucket = self._table[self._slot(key)]
        if bucket is None:
            raise KeyError(key)
        return [value for _, value in bucket]

    def items(self) -> Iterator[tuple[K, V]]:
        """Yield ``(key, value)`` pairs slot by slot, in insertion order within a slot."""
        for bucket in self._table:
            if bucket is not None:
                for key, value in bucket:
                    yield key, value

    def is_empty(self) -> bool:
        return all(bucket is None for bucket in self._table)

    def __contains__(self, key: object) -> bool:
        try:
            self.get(key)  # type: ignore[arg-type]
        except KeyError:
            return False
        return True

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._table if bucket is not None)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"
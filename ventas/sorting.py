"""In-place quicksort with a middle-element pivot."""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any


def quick_sort(values: MutableSequence[Any], start: int = 0, end: int | None = None) -> None:
    """Sort ``values[start:end + 1]`` in place; ``end`` defaults to the last index.

    Raises IndexError when the range to sort falls outside the sequence.
    """
    if end is None:
        end = len(values) - 1
    if start >= end:
        return
    if start < 0 or end >= len(values):
        raise IndexError(f"range {start}..{end} outside a sequence of length {len(values)}")

    pending = [(start, end)]
    while pending:
        low, high = pending.pop()
        pivot = values[(low + high) // 2]
        i, j = low, high
        while i <= j:
            while values[i] < pivot:
                i += 1
            while values[j] > pivot:
                j -= 1
            if i <= j:
                values[i], values[j] = values[j], values[i]
                i += 1
                j -= 1
        if low < j:
            pending.append((low, j))
        if i < high:
            pending.append((i, high))
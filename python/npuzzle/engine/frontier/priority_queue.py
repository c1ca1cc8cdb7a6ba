"""Bucketed min-priority queue used as the search frontier."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

from npuzzle.errors import EmptyQueueError

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Values grouped into buckets of identical priority.

    Buckets are kept sorted by *decreasing* priority, so the minimum is
    always the last bucket and extraction is a pair of ``list.pop()``
    calls. Within a bucket the most recently inserted value comes out
    first.

    ``has``, ``get``, ``filter`` and ``filter_one`` scan every bucket and
    are only meant for the reference A* variant.
    """

    def __init__(self) -> None:
        self._buckets: list[tuple[float, list[T]]] = []
        self._length = 0

    # -- core operations ------------------------------------------------------

    def insert(self, value: T, priority: float) -> None:
        found, index = self._find(priority)
        if found:
            self._buckets[index][1].append(value)
        else:
            self._buckets.insert(index, (priority, [value]))
        self._length += 1

    def extract_min(self) -> T:
        """Remove and return a value with the lowest priority."""
        if not self._buckets:
            raise EmptyQueueError("extract_min() from an empty priority queue.")
        _, bucket = self._buckets[-1]
        value = bucket.pop()
        if not bucket:
            self._buckets.pop()
        self._length -= 1
        return value

    def peek_priority(self) -> float:
        if not self._buckets:
            raise EmptyQueueError("peek_priority() on an empty priority queue.")
        return self._buckets[-1][0]

    def size(self) -> int:
        return self._length

    def is_empty(self) -> bool:
        return self._length == 0

    # -- linear scans ---------------------------------------------------------

    def has(self, value: T) -> bool:
        return any(value == e for e in self._values())

    def get(self, value: T) -> T | None:
        """Return the stored entry equal to *value*, lowest priority first."""
        for e in self._values():
            if value == e:
                return e
        return None

    def filter(self, predicate: Callable[[T], bool]) -> int:
        """Remove every entry matching *predicate*; return how many went."""
        removed = 0
        kept: list[tuple[float, list[T]]] = []
        for priority, bucket in self._buckets:
            survivors = [e for e in bucket if not predicate(e)]
            removed += len(bucket) - len(survivors)
            if survivors:
                kept.append((priority, survivors))
        self._buckets = kept
        self._length -= removed
        return removed

    def filter_one(self, predicate: Callable[[T], bool]) -> bool:
        """Remove the first entry matching *predicate*, lowest priority first."""
        for index in range(len(self._buckets) - 1, -1, -1):
            bucket = self._buckets[index][1]
            for j in range(len(bucket) - 1, -1, -1):
                if predicate(bucket[j]):
                    del bucket[j]
                    if not bucket:
                        del self._buckets[index]
                    self._length -= 1
                    return True
        return False

    # -- dunder ---------------------------------------------------------------

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._length != 0

    def __repr__(self) -> str:
        return f"PriorityQueue(size={self._length}, buckets={len(self._buckets)})"

    # -- helpers --------------------------------------------------------------

    def _find(self, priority: float) -> tuple[bool, int]:
        """Binary search for *priority*.

        Returns ``(True, index)`` on an exact match, otherwise
        ``(False, index)`` where a new bucket must be inserted.
        """
        start, end = 0, len(self._buckets) - 1
        while start <= end:
            mid = (start + end) // 2
            current = self._buckets[mid][0]
            if current > priority:
                start = mid + 1
            elif current < priority:
                end = mid - 1
            else:
                return True, mid
        return False, start

    def _values(self) -> Iterator[T]:
        # Same order extract_min() would produce.
        for _, bucket in reversed(self._buckets):
            yield from reversed(bucket)

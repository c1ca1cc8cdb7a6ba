"""Bucketed priority queue."""

from __future__ import annotations

import pytest

from npuzzle.engine.frontier import PriorityQueue
from npuzzle.errors import EmptyQueueError


def _drain(queue: PriorityQueue[str]) -> list[str]:
    out = []
    while not queue.is_empty():
        out.append(queue.extract_min())
    return out


def test_extracts_by_priority_then_lifo() -> None:
    queue: PriorityQueue[str] = PriorityQueue()
    queue.insert("five", 5)
    queue.insert("three-a", 3)
    queue.insert("three-b", 3)
    queue.insert("one", 1)

    assert _drain(queue) == ["one", "three-b", "three-a", "five"]


def test_float_priorities() -> None:
    queue: PriorityQueue[str] = PriorityQueue()
    for name, priority in [("c", 2.5), ("a", 0.5), ("d", 10.0), ("b", 1.4142)]:
        queue.insert(name, priority)

    assert queue.peek_priority() == 0.5
    assert _drain(queue) == ["a", "b", "c", "d"]


def test_size_tracking() -> None:
    queue: PriorityQueue[int] = PriorityQueue()
    assert queue.size() == 0
    assert not queue

    for i in range(10):
        queue.insert(i, i % 3)
    assert queue.size() == 10
    assert len(queue) == 10
    assert queue

    queue.extract_min()
    assert queue.size() == 9


def test_empty_queue() -> None:
    queue: PriorityQueue[int] = PriorityQueue()
    with pytest.raises(EmptyQueueError):
        queue.extract_min()
    with pytest.raises(EmptyQueueError):
        queue.peek_priority()

    queue.insert(1, 1)
    queue.extract_min()
    with pytest.raises(IndexError):
        queue.extract_min()


def test_has_and_get() -> None:
    queue: PriorityQueue[tuple[int, str]] = PriorityQueue()
    queue.insert((1, "x"), 4)
    queue.insert((2, "y"), 2)

    assert queue.has((1, "x"))
    assert not queue.has((3, "z"))
    assert queue.get((2, "y")) == (2, "y")
    assert queue.get((9, "?")) is None


def test_filter_removes_all_matches_and_prunes_buckets() -> None:
    queue: PriorityQueue[int] = PriorityQueue()
    for value in range(12):
        queue.insert(value, value % 4)

    removed = queue.filter(lambda v: v % 4 == 0 or v > 9)

    assert removed == 5
    assert queue.size() == 7
    assert queue.peek_priority() == 1
    assert sorted(_drain(queue)) == [1, 2, 3, 5, 6, 7, 9]


def test_filter_one() -> None:
    queue: PriorityQueue[int] = PriorityQueue()
    queue.insert(7, 1)
    queue.insert(8, 2)
    queue.insert(9, 2)

    assert queue.filter_one(lambda v: v > 7)
    assert queue.size() == 2
    assert queue.filter_one(lambda v: v == 7)
    assert queue.peek_priority() == 2
    assert not queue.filter_one(lambda v: v == 7)
    assert _drain(queue) == [8]

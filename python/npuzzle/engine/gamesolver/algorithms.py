"""Informed search over the sliding puzzle state graph.

Nodes are :class:`~npuzzle.models.board.Board` objects, edges are unit
cost slides. Every variant tests for the goal when a board is *popped*
from the frontier and breaks priority ties LIFO.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from npuzzle.engine.frontier import PriorityQueue
from npuzzle.errors import SearchExhaustedError
from npuzzle.models.board import Board, Heuristic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchOutcome:
    goal: Board
    iterations: int
    peak_size: int


@dataclass(frozen=True)
class SearchStep:
    """One expansion of the interactive search, reported before it happens."""

    node: Board
    status: str


def _exhausted(start: Board, iterations: int) -> SearchExhaustedError:
    return SearchExhaustedError(
        f"Frontier exhausted after {iterations} iterations on a solvable "
        f"{start.size}×{start.size} board."
    )


# -- reference A* -------------------------------------------------------------


def a_star_reference(start: Board, heuristic: Heuristic) -> SearchOutcome:
    """Textbook A* that merges duplicates eagerly.

    Before a child is admitted the whole frontier is scanned for the same
    board; it is only pushed again if it arrives with a smaller ``g``.
    A closed board is reopened when a strictly cheaper path reaches it.
    Correct, but the frontier scans make it quadratic in practice.
    """
    opened: PriorityQueue[Board] = PriorityQueue()
    closed: dict[bytes, int] = {}
    iterations = 0
    peak = 1

    opened.insert(start, start.total_cost(heuristic))
    while opened:
        iterations += 1
        node = opened.extract_min()
        if node.is_solved():
            peak = max(peak, len(opened) + len(closed))
            return SearchOutcome(node, iterations, peak)

        key = node.key()
        best = closed.get(key)
        if best is not None and node.g >= best:
            # Superseded by a cheaper copy that was already expanded.
            continue
        closed[key] = node.g

        for child in node.expand():
            similar = opened.get(child)
            if similar is not None:
                if child.g < similar.g:
                    opened.insert(child, child.total_cost(heuristic))
                continue

            child_key = child.key()
            closed_g = closed.get(child_key)
            if closed_g is not None:
                if child.g < closed_g:
                    del closed[child_key]
                    opened.insert(child, child.total_cost(heuristic))
                continue

            opened.insert(child, child.total_cost(heuristic))
        peak = max(peak, len(opened) + len(closed))

    raise _exhausted(start, iterations)


# -- lazy-deletion search -----------------------------------------------------


def _lazy_search(start: Board, priority: Callable[[Board], float]) -> SearchOutcome:
    opened: PriorityQueue[Board] = PriorityQueue()
    closed: dict[bytes, int] = {}
    iterations = 0
    peak = 1

    opened.insert(start, priority(start))
    while opened:
        iterations += 1
        node = opened.extract_min()
        if node.is_solved():
            peak = max(peak, len(opened) + len(closed))
            return SearchOutcome(node, iterations, peak)

        key = node.key()
        best = closed.get(key)
        if best is not None and node.g >= best:
            continue
        closed[key] = node.g

        for child in node.expand():
            opened.insert(child, priority(child))
        peak = max(peak, len(opened) + len(closed))

    raise _exhausted(start, iterations)


def a_star(start: Board, heuristic: Heuristic) -> SearchOutcome:
    """A* with lazy deletion: duplicates are resolved when popped."""
    return _lazy_search(start, lambda node: node.total_cost(heuristic))


def best_first(start: Board, heuristic: Heuristic) -> SearchOutcome:
    """Greedy best-first search ranked on ``h`` alone. Not optimal."""
    return _lazy_search(start, lambda node: node.heuristic_value(heuristic))


# -- interactive A* -----------------------------------------------------------


class InteractiveSearch:
    """Lazy-deletion A* advanced one expansion at a time.

    Each :meth:`step` pops boards until it finds one worth expanding and
    returns it as a :class:`SearchStep`; the expansion itself happens at
    the start of the next call. Once the goal is popped ``step`` returns
    ``None`` and :attr:`goal` is set. Dropping the object mid-way is a
    valid way to cancel.
    """

    def __init__(self, start: Board, heuristic: Heuristic) -> None:
        self.start = start
        self.heuristic = heuristic
        self.goal: Board | None = None
        self.iterations = 0
        self.peak_size = 1
        self._opened: PriorityQueue[Board] = PriorityQueue()
        self._closed: dict[bytes, int] = {}
        self._pending: Board | None = None
        self._opened.insert(start, start.total_cost(heuristic))

    @property
    def done(self) -> bool:
        return self.goal is not None

    @property
    def outcome(self) -> SearchOutcome | None:
        if self.goal is None:
            return None
        return SearchOutcome(self.goal, self.iterations, self.peak_size)

    def status_text(self) -> str:
        return f"opened: {len(self._opened)} closed: {len(self._closed)}"

    def step(self) -> SearchStep | None:
        if self._pending is not None:
            self._expand(self._pending)
            self._pending = None
        if self.goal is not None:
            return None

        while self._opened:
            self.iterations += 1
            node = self._opened.extract_min()
            if node.is_solved():
                self.goal = node
                self._track_peak()
                logger.debug(
                    "Interactive search reached the goal at depth %d after %d iterations.",
                    node.g,
                    self.iterations,
                )
                return None

            best = self._closed.get(node.key())
            if best is not None and node.g >= best:
                continue
            self._pending = node
            return SearchStep(node, self.status_text())

        raise _exhausted(self.start, self.iterations)

    def run(self) -> SearchOutcome:
        """Step until the goal is reached and return the outcome."""
        for _ in self:
            pass
        outcome = self.outcome
        if outcome is None:
            raise _exhausted(self.start, self.iterations)
        return outcome

    def __iter__(self) -> Iterator[SearchStep]:
        while True:
            step = self.step()
            if step is None:
                return
            yield step

    # -- helpers --------------------------------------------------------------

    def _expand(self, node: Board) -> None:
        self._closed[node.key()] = node.g
        for child in node.expand():
            self._opened.insert(child, child.total_cost(self.heuristic))
        self._track_peak()

    def _track_peak(self) -> None:
        self.peak_size = max(self.peak_size, len(self._opened) + len(self._closed))

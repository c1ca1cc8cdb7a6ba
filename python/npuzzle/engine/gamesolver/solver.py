"""Sliding puzzle solver."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum

from npuzzle.config import DEFAULT_ALGORITHM, DEFAULT_HEURISTIC
from npuzzle.engine.gamesolver.algorithms import (
    InteractiveSearch,
    SearchOutcome,
    a_star,
    a_star_reference,
    best_first,
)
from npuzzle.engine.heuristics import get_heuristic
from npuzzle.errors import ConfigurationError, UnsolvableError
from npuzzle.models.board import Board, Direction, Heuristic, Status

logger = logging.getLogger(__name__)


class Algorithm(StrEnum):
    REFERENCE = "reference"
    OPTIMIZED = "optimized"
    BEST_FIRST = "best-first"


ALGORITHMS: dict[Algorithm, Callable[[Board, Heuristic], SearchOutcome]] = {
    Algorithm.REFERENCE: a_star_reference,
    Algorithm.OPTIMIZED: a_star,
    Algorithm.BEST_FIRST: best_first,
}


@dataclass
class SolveResult:
    """Outcome of :meth:`Solver.solve`.

    ``iterations`` counts frontier pops; ``peak_size`` is the largest
    open + closed size seen during the search. An unsolvable board gives
    an empty history and zero counters.
    """

    status: Status
    algorithm: Algorithm
    heuristic: str
    history: list[Board] = field(default_factory=list)
    iterations: int = 0
    peak_size: int = 0
    elapsed: float = 0.0

    @classmethod
    def from_outcome(
        cls,
        outcome: SearchOutcome,
        algorithm: Algorithm,
        heuristic: str,
        elapsed: float,
    ) -> SolveResult:
        outcome.goal.status = Status.DONE
        return cls(
            status=Status.DONE,
            algorithm=algorithm,
            heuristic=heuristic,
            history=outcome.goal.history(),
            iterations=outcome.iterations,
            peak_size=outcome.peak_size,
            elapsed=elapsed,
        )

    @property
    def solved(self) -> bool:
        return self.status is Status.DONE

    @property
    def goal(self) -> Board | None:
        return self.history[-1] if self.history else None

    @property
    def moves(self) -> list[Direction]:
        goal = self.goal
        return goal.moves() if goal is not None else []

    @property
    def move_count(self) -> int:
        return max(len(self.history) - 1, 0)


def resolve_algorithm(name: str) -> Algorithm:
    try:
        return Algorithm(name)
    except ValueError:
        choices = ", ".join(a.value for a in Algorithm)
        raise ConfigurationError(f"Bad solver: {name!r}. Can be: {choices}.") from None


def _search_root(board: Board) -> Board:
    # Fresh node: g from zero, no parent, no heuristic cached by an earlier run.
    return Board(size=board.size, tiles=board.tiles)


class Solver:
    """Stateless solver; all methods are static."""

    @staticmethod
    def solve(
        board: Board,
        algorithm: str = DEFAULT_ALGORITHM,
        heuristic: str = DEFAULT_HEURISTIC,
    ) -> SolveResult:
        """Search for a path from *board* to the goal.

        Unknown names raise ``ConfigurationError`` before any work is done.
        An unsolvable board is reported through the result status, never
        by raising.
        """
        algo = resolve_algorithm(algorithm)
        h = get_heuristic(heuristic)

        board.status = Status.READY
        if not Solver.is_solvable(board):
            board.status = Status.UNSOLVABLE
            logger.info("Board is unsolvable; skipping %s search.", algo.value)
            return SolveResult(status=Status.UNSOLVABLE, algorithm=algo, heuristic=heuristic)

        board.status = Status.SOLVING
        root = _search_root(board)
        logger.debug(
            "Solving %d×%d board with %s / %s.", board.size, board.size, algo.value, heuristic
        )
        start = time.perf_counter()
        outcome = ALGORITHMS[algo](root, h)
        elapsed = time.perf_counter() - start

        board.status = Status.DONE
        logger.debug(
            "Solved in %d moves: %d iterations, peak size %d, %.4fs.",
            outcome.goal.g,
            outcome.iterations,
            outcome.peak_size,
            elapsed,
        )
        return SolveResult.from_outcome(outcome, algo, heuristic, elapsed)

    @staticmethod
    def steps(board: Board, heuristic: str = DEFAULT_HEURISTIC) -> InteractiveSearch:
        """Return a step-by-step A* search over *board*."""
        h = get_heuristic(heuristic)
        if not Solver.is_solvable(board):
            board.status = Status.UNSOLVABLE
            raise UnsolvableError("Not solvable!")
        board.status = Status.SOLVING
        return InteractiveSearch(_search_root(board), h)

    @staticmethod
    def hint(
        board: Board,
        algorithm: str = DEFAULT_ALGORITHM,
        heuristic: str = DEFAULT_HEURISTIC,
    ) -> Direction | None:
        """Return the single best next move, or ``None`` if solved / unsolvable."""
        if board.is_solved():
            return None

        moves = Solver.solve(board, algorithm, heuristic).moves
        return moves[0] if moves else None

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        return board.is_solvable()

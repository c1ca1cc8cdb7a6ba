"""Distance heuristics used by the solvers.

Every heuristic takes the flat tile sequence and the board side and
returns a non-negative estimate of the moves left, exactly 0 at the goal.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from npuzzle.errors import ConfigurationError
from npuzzle.models.board import Heuristic, count_inversions


def hamming(tiles: Sequence[int], size: int) -> float:
    """Number of misplaced tiles. Admissible but very weak."""
    return sum(1 for i, v in enumerate(tiles) if v and v != i + 1)


def cartesian(tiles: Sequence[int], size: int) -> float:
    """Sum of straight-line distances from each tile to its goal cell."""
    dist = 0.0
    for i, v in enumerate(tiles):
        if not v:
            continue
        r, c = divmod(i, size)
        gr, gc = divmod(v - 1, size)
        dist += math.hypot(r - gr, c - gc)
    return dist


def manhattan(tiles: Sequence[int], size: int) -> float:
    """Sum of grid distances from each tile to its goal cell."""
    dist = 0
    for i, v in enumerate(tiles):
        if not v:
            continue
        r, c = divmod(i, size)
        gr, gc = divmod(v - 1, size)
        dist += abs(r - gr) + abs(c - gc)
    return dist


def linear_conflict(tiles: Sequence[int], size: int) -> float:
    """Manhattan + 2 per pair of linearly conflicting tiles.

    Two tiles conflict when both sit in their goal row (or column) but in
    reversed order. Each conflicting pair is counted, so rows holding three
    or more mutually reversed tiles can be overestimated.
    """
    conflicts = 0
    for line in range(size):
        # Row ``line``: goal columns of the tiles whose goal row it is.
        row_goals = []
        # Column ``line``: goal rows of the tiles whose goal column it is.
        col_goals = []
        for k in range(size):
            v = tiles[line * size + k]
            if v and (v - 1) // size == line:
                row_goals.append((v - 1) % size)
            v = tiles[k * size + line]
            if v and (v - 1) % size == line:
                col_goals.append((v - 1) // size)
        conflicts += _reversed_pairs(row_goals) + _reversed_pairs(col_goals)
    return manhattan(tiles, size) + 2 * conflicts


def permutation_count(tiles: Sequence[int], size: int) -> float:
    """Inversion count, plus 1 if the blank is not in the last cell.

    Shares its parity logic with the solvability test; it is not a usable
    distance estimate for guiding a search.
    """
    extra = 1 if tiles[-1] else 0
    return count_inversions(tiles) + extra


def _reversed_pairs(goals: list[int]) -> int:
    return sum(
        1
        for i, a in enumerate(goals)
        for b in goals[i + 1 :]
        if a > b
    )


HEURISTICS: dict[str, Heuristic] = {
    "hamming": hamming,
    "cartesian": cartesian,
    "manhattan": manhattan,
    "linear-conflict": linear_conflict,
    "permutation-count": permutation_count,
}

# Never overestimate the true remaining distance.
ADMISSIBLE = frozenset({"hamming", "cartesian", "manhattan"})


def get_heuristic(name: str) -> Heuristic:
    """Look up a heuristic by name."""
    try:
        return HEURISTICS[name]
    except KeyError:
        raise ConfigurationError(
            f"Bad heuristic: {name!r}. Can be: {', '.join(HEURISTICS)}."
        ) from None

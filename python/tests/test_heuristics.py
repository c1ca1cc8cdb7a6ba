"""Heuristic library."""

from __future__ import annotations

import math

import pytest

from npuzzle.engine.heuristics import (
    ADMISSIBLE,
    HEURISTICS,
    cartesian,
    get_heuristic,
    hamming,
    linear_conflict,
    manhattan,
    permutation_count,
)
from npuzzle.errors import ConfigurationError
from npuzzle.models.board import goal_tiles

# 1 2 3 / 4 0 6 / 7 5 8
_TWO_AWAY = (1, 2, 3, 4, 0, 6, 7, 5, 8)


@pytest.mark.parametrize("name", list(HEURISTICS))
@pytest.mark.parametrize("size", [1, 2, 3, 4, 7])
def test_zero_at_goal(name: str, size: int) -> None:
    assert HEURISTICS[name](goal_tiles(size), size) == 0


def test_hamming() -> None:
    assert hamming(_TWO_AWAY, 3) == 2
    assert hamming((8, 6, 7, 2, 5, 4, 3, 0, 1), 3) == 7


def test_manhattan() -> None:
    assert manhattan(_TWO_AWAY, 3) == 2
    # 8 6 7 / 2 5 4 / 3 0 1
    assert manhattan((8, 6, 7, 2, 5, 4, 3, 0, 1), 3) == 21


def test_cartesian() -> None:
    assert cartesian(_TWO_AWAY, 3) == pytest.approx(2.0)
    # 3 at (0, 0) belongs at (0, 2); 1 at (0, 2) belongs at (0, 0); 8 at
    # (2, 0) belongs at (2, 1); 7 at (2, 1) belongs at (2, 0).
    tiles = (3, 2, 1, 4, 5, 6, 8, 7, 0)
    assert cartesian(tiles, 3) == pytest.approx(6.0)
    # 5 at (0, 0) belongs at (1, 1).
    tiles = (5, 2, 3, 4, 1, 6, 7, 8, 0)
    assert cartesian(tiles, 3) == pytest.approx(2 * math.sqrt(2))


def test_cartesian_never_exceeds_manhattan() -> None:
    tiles = (8, 6, 7, 2, 5, 4, 3, 0, 1)
    assert cartesian(tiles, 3) <= manhattan(tiles, 3)


def test_linear_conflict_row() -> None:
    # 2 1 3 / 4 5 6 / 7 8 0: tiles 1 and 2 share their goal row reversed.
    tiles = (2, 1, 3, 4, 5, 6, 7, 8, 0)
    assert manhattan(tiles, 3) == 2
    assert linear_conflict(tiles, 3) == 4


def test_linear_conflict_column() -> None:
    # 4 2 3 / 1 5 6 / 7 8 0: tiles 1 and 4 share their goal column reversed.
    tiles = (4, 2, 3, 1, 5, 6, 7, 8, 0)
    assert linear_conflict(tiles, 3) == manhattan(tiles, 3) + 2


def test_linear_conflict_counts_every_pair() -> None:
    # 3 2 1 in the top row: three reversed pairs.
    tiles = (3, 2, 1, 4, 5, 6, 7, 8, 0)
    assert linear_conflict(tiles, 3) == manhattan(tiles, 3) + 6


def test_linear_conflict_ignores_tiles_from_other_lines() -> None:
    assert linear_conflict(_TWO_AWAY, 3) == manhattan(_TWO_AWAY, 3)


def test_permutation_count() -> None:
    assert permutation_count((1, 2, 3, 4, 5, 6, 8, 7, 0), 3) == 1
    assert permutation_count((1, 2, 3, 4, 5, 6, 7, 0, 8), 3) == 1
    assert permutation_count((8, 6, 7, 2, 5, 4, 3, 0, 1), 3) == 25


def test_registry() -> None:
    assert set(HEURISTICS) == {
        "hamming",
        "cartesian",
        "manhattan",
        "linear-conflict",
        "permutation-count",
    }
    assert ADMISSIBLE <= set(HEURISTICS)
    assert get_heuristic("manhattan") is manhattan


def test_unknown_heuristic() -> None:
    with pytest.raises(ConfigurationError, match="hamming"):
        get_heuristic("misplaced")

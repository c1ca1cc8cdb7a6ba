from npuzzle.engine.heuristics.heuristics import (
    ADMISSIBLE,
    HEURISTICS,
    cartesian,
    get_heuristic,
    hamming,
    linear_conflict,
    manhattan,
    permutation_count,
)

__all__ = [
    "ADMISSIBLE",
    "HEURISTICS",
    "cartesian",
    "get_heuristic",
    "hamming",
    "linear_conflict",
    "manhattan",
    "permutation_count",
]

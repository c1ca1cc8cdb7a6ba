from npuzzle.models.board import (
    Board,
    Direction,
    Heuristic,
    Status,
    count_inversions,
    goal_tiles,
)

__all__ = [
    "Board",
    "Direction",
    "Heuristic",
    "Status",
    "count_inversions",
    "goal_tiles",
]

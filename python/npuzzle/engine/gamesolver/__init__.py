from npuzzle.engine.gamesolver.algorithms import (
    InteractiveSearch,
    SearchOutcome,
    SearchStep,
    a_star,
    a_star_reference,
    best_first,
)
from npuzzle.engine.gamesolver.solver import (
    ALGORITHMS,
    Algorithm,
    SolveResult,
    Solver,
    resolve_algorithm,
)

__all__ = [
    "ALGORITHMS",
    "Algorithm",
    "InteractiveSearch",
    "SearchOutcome",
    "SearchStep",
    "SolveResult",
    "Solver",
    "a_star",
    "a_star_reference",
    "best_first",
    "resolve_algorithm",
]

"""Sliding-tile puzzle engine: board model, heuristics, solvers and generator."""

__version__ = "1.0.0"

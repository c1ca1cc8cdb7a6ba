"""Exceptions raised by the puzzle engine."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every user-facing engine error."""


class FormatError(PuzzleError, ValueError):
    """Puzzle text is structurally malformed."""


class InvalidPermutationError(PuzzleError, ValueError):
    """Tile values are not exactly ``{0, ..., N*N - 1}``."""


class ConfigurationError(PuzzleError, ValueError):
    """Unknown algorithm / heuristic name or bad generator arguments."""


class IllegalMoveError(PuzzleError, ValueError):
    """The requested cell is not adjacent to the blank."""


class UnsolvableError(PuzzleError):
    """A step-by-step search was requested on an unsolvable board."""


class EmptyQueueError(PuzzleError, IndexError):
    """``extract_min`` was called on an empty priority queue."""


class SearchExhaustedError(RuntimeError):
    """The frontier ran dry on a board that passed the parity test.

    Signals a broken internal invariant, not bad input, so it is not a
    ``PuzzleError``.
    """

"""Puzzle session: the surface used by front ends.

Wraps a board with player moves, shuffling and solving so that a renderer
only ever has to draw ``board`` and replay ``history``.
"""

from __future__ import annotations

import random

from npuzzle.config import DEFAULT_ALGORITHM, DEFAULT_HEURISTIC
from npuzzle.engine.gamegenerator import GameGenerator
from npuzzle.engine.gamesolver import InteractiveSearch, SolveResult, Solver
from npuzzle.errors import IllegalMoveError
from npuzzle.models.board import Board, Direction, Status

# Offset from the blank to the tile that slides into it.
# UP   → tile at (br+1, bc) moves up   → blank shifts down
# DOWN → tile at (br-1, bc) moves down  → blank shifts up
# LEFT → tile at (br, bc+1) moves left  → blank shifts right
# RIGHT→ tile at (br, bc-1) moves right → blank shifts left
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


class GamePlay:
    """Orchestrates a single puzzle session."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves = 0
        self.result: SolveResult | None = None
        self._saved = board

    @classmethod
    def from_size(cls, size: int) -> GamePlay:
        """Start a session on the solved board of the given size."""
        return cls(GameGenerator.solved(size))

    @classmethod
    def from_board(cls, board: Board) -> GamePlay:
        """Create a game session from an existing board (e.g. loaded from file)."""
        return cls(board)

    @classmethod
    def from_text(cls, text: str) -> GamePlay:
        """Start a session on a board parsed from the puzzle text format."""
        return cls(Board.from_text(text))

    @property
    def size(self) -> int:
        return self.board.size

    # -- movement (direction = where the *tile* moves) ------------------------

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        br, bc = self.board.blank_pos
        dr, dc = _OFFSETS[direction]
        return self.move_tile(br + dr, bc + dc)

    def move_tile(self, row: int, col: int) -> bool:
        """Move a tile at (row, col) into the adjacent blank.

        Returns True if the tile was adjacent to the blank and the move
        was applied.
        """
        n = self.board.size
        if not (0 <= row < n and 0 <= col < n):
            return False
        try:
            self.board = self.board.slide(row * n + col)
        except IllegalMoveError:
            return False
        self.moves += 1
        self.result = None
        return True

    # -- generation -----------------------------------------------------------

    def shuffle(
        self,
        size: int,
        complexity: int,
        solvable: bool = True,
        rng: random.Random | None = None,
    ) -> bool:
        """Replace the board with a freshly generated one.

        Returns False, leaving the session untouched, when no board of that
        complexity exists for *size*.
        """
        board = GameGenerator.generate(size, complexity, not solvable, rng)
        if board is None:
            return False
        self.board = board
        self._saved = board
        self.moves = 0
        self.result = None
        return True

    def restart(self) -> None:
        """Go back to the last shuffled (or initial) board."""
        self.board = self._saved
        self.moves = 0
        self.result = None

    # -- solving --------------------------------------------------------------

    def solve(
        self,
        algorithm: str = DEFAULT_ALGORITHM,
        heuristic: str = DEFAULT_HEURISTIC,
    ) -> SolveResult:
        self.result = Solver.solve(self.board, algorithm, heuristic)
        return self.result

    def steps(self, heuristic: str = DEFAULT_HEURISTIC) -> InteractiveSearch:
        return Solver.steps(self.board, heuristic)

    # -- queries --------------------------------------------------------------

    @property
    def history(self) -> list[Board]:
        return self.result.history if self.result is not None else []

    @property
    def status(self) -> Status:
        if self.board.is_solved():
            return Status.DONE
        return self.board.status

    @property
    def is_solvable(self) -> bool:
        return Solver.is_solvable(self.board)

    @property
    def is_won(self) -> bool:
        return self.board.is_solved()

    def to_text(self, comments: bool = False) -> str:
        return self.board.to_text(comments)

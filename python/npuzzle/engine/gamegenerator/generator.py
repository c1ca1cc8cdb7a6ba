"""Generates sliding puzzle boards of a requested shuffle complexity."""

from __future__ import annotations

import logging
import random

from npuzzle.errors import ConfigurationError
from npuzzle.models.board import Board

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates puzzles by walking away from the solved state."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.solved(size)

    @staticmethod
    def generate(
        size: int,
        complexity: int,
        force_unsolvable: bool = False,
        rng: random.Random | None = None,
    ) -> Board | None:
        """Return a scrambled board, or ``None`` if none can be built.

        The walk never revisits a board. When it runs out of unvisited
        neighbours it backtracks to a sibling it skipped earlier; with no
        sibling left the requested *complexity* is out of reach for this
        *size* and ``None`` is returned. *complexity* is the length of that
        walk, not the optimal solution length.

        With *force_unsolvable*, two non-blank tiles are swapped at the
        end, which flips the solvability parity.
        """
        if size < 1 or complexity < 0:
            raise ConfigurationError(
                f"Cannot generate puzzle of size: {size} and complexity: {complexity}."
            )
        rng = rng or random.Random()

        board = Board.solved(size)
        visited: set[bytes] = set()
        alternatives: list[Board] = []
        while board.g < complexity:
            visited.add(board.key())
            directions = [b for b in board.expand() if b.key() not in visited]
            if not directions:
                if not alternatives:
                    logger.info(
                        "Cannot generate: complexity %d is too high for a %d×%d board.",
                        complexity,
                        size,
                        size,
                    )
                    return None
                board = alternatives.pop()
                logger.debug("Backtracked to a board at depth %d.", board.g)
                continue
            board = directions.pop(rng.randrange(len(directions)))
            alternatives.extend(directions)

        tiles = list(board.tiles)
        if force_unsolvable:
            if len(tiles) < 4:
                logger.info("A %d×%d board cannot be made unsolvable.", size, size)
                return None
            # Swap two neighbouring tiles away from the blank.
            if tiles[0] == 0 or tiles[1] == 0:
                tiles[-1], tiles[-2] = tiles[-2], tiles[-1]
            else:
                tiles[0], tiles[1] = tiles[1], tiles[0]

        return Board(size=size, tiles=tuple(tiles))

"""Board model for the sliding puzzle engine.

A :class:`Board` is both the puzzle snapshot and a search-tree node: it
carries the tiles plus the path cost ``g``, a cached heuristic value
``h`` and a back-reference to the board it was expanded from.
"""

from __future__ import annotations

from array import array
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from functools import lru_cache

from npuzzle.config import MAX_TILES
from npuzzle.errors import FormatError, IllegalMoveError, InvalidPermutationError

Heuristic = Callable[[Sequence[int], int], float]


class Direction(StrEnum):
    """Direction a *tile* slides into the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Status(StrEnum):
    READY = "ready"
    SOLVING = "solving"
    DONE = "done"
    UNSOLVABLE = "unsolvable"


@lru_cache(maxsize=None)
def goal_tiles(size: int) -> tuple[int, ...]:
    """Return the solved tile tuple: ``1 .. size*size - 1`` then the blank."""
    return tuple(range(1, size * size)) + (0,)


def count_inversions(tiles: Sequence[int]) -> int:
    """Count pairs ``i < j`` of non-blank tiles with ``tiles[i] > tiles[j]``."""
    values = [v for v in tiles if v]
    inversions = 0
    for i, a in enumerate(values):
        for b in values[i + 1 :]:
            if a > b:
                inversions += 1
    return inversions


def _inversions_even(tiles: Sequence[int]) -> bool:
    """Parity of :func:`count_inversions` in linear time.

    The inversion count and the permutation of the non-blank tiles share
    their parity, and a permutation made of ``c`` cycles over ``m``
    elements has parity ``m - c``.
    """
    values = [v for v in tiles if v]
    seen = [False] * len(values)
    transpositions = 0
    for start in range(len(values)):
        i = start
        length = 0
        while not seen[i]:
            seen[i] = True
            i = values[i] - 1
            length += 1
        if length:
            transpositions += length - 1
    return transpositions % 2 == 0


def _validate(size: int, tiles: tuple[int, ...]) -> None:
    if size < 1:
        raise FormatError(f"Invalid puzzle size: {size}.")
    if size * size > MAX_TILES:
        raise FormatError(
            f"Puzzle is too big: {size}×{size} exceeds {MAX_TILES} tiles."
        )
    if len(tiles) != size * size:
        raise InvalidPermutationError(
            f"Expected {size * size} tiles for a {size}×{size} board, "
            f"got {len(tiles)}."
        )
    if sorted(tiles) != list(range(size * size)):
        raise InvalidPermutationError(
            f"Tiles of a {size}×{size} board must be exactly "
            f"0..{size * size - 1}, each once."
        )


def _parse_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise FormatError(f"Invalid {what}: {token!r}.") from None


@dataclass(eq=False, slots=True)
class Board:
    """A sliding puzzle board and its place in a search tree.

    Tiles are stored as a flat row-major tuple. 0 represents the blank.
    Root boards (no ``parent``) are validated on construction; boards
    produced by :meth:`expand` are derived from a valid parent and are not
    checked again.
    """

    size: int
    tiles: tuple[int, ...]
    g: int = 0
    parent: Board | None = field(default=None, repr=False)
    h: float | None = field(default=None, repr=False)
    status: Status = Status.READY

    def __post_init__(self) -> None:
        if self.parent is None:
            self.tiles = tuple(self.tiles)
            _validate(self.size, self.tiles)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal board (all tiles in order, blank bottom-right)."""
        if size < 1:
            raise FormatError(f"Invalid puzzle size: {size}.")
        return cls(size=size, tiles=goal_tiles(size))

    @classmethod
    def from_flat(cls, size: int, flat: Sequence[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        return cls(size=size, tiles=tuple(flat))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Board:
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise FormatError(f"Expected {size} tiles on each of the {size} rows.")
        return cls(size=size, tiles=tuple(v for row in rows for v in row))

    @classmethod
    def from_text(cls, text: str) -> Board:
        """Parse the puzzle text format.

        The first meaningful line holds the size ``N``; exactly ``N`` lines
        of ``N`` whitespace-separated integers follow. ``#`` starts a
        comment and blank lines are ignored anywhere.
        """
        lines = [line.split("#", 1)[0].split() for line in text.splitlines()]
        lines = [tokens for tokens in lines if tokens]
        if not lines:
            raise FormatError("Empty puzzle description.")

        header, *body = lines
        if len(header) != 1:
            raise FormatError(
                f"Expected the puzzle size alone on the first line, "
                f"got {' '.join(header)!r}."
            )
        size = _parse_int(header[0], "puzzle size")
        if size < 1:
            raise FormatError(f"Invalid puzzle size: {size}.")
        if size * size > MAX_TILES:
            raise FormatError(
                f"Puzzle is too big: {size}×{size} exceeds {MAX_TILES} tiles."
            )
        if len(body) != size:
            raise FormatError(f"Expected a puzzle of {size} lines, got {len(body)}.")

        flat: list[int] = []
        for row, tokens in enumerate(body, 1):
            if len(tokens) != size:
                raise FormatError(
                    f"Bad number of tiles on row {row}: "
                    f"expected {size}, got {len(tokens)}."
                )
            flat.extend(_parse_int(token, "tile") for token in tokens)
        return cls(size=size, tiles=tuple(flat))

    # -- queries --------------------------------------------------------------

    @property
    def blank_index(self) -> int:
        return self.tiles.index(0)

    @property
    def blank_pos(self) -> tuple[int, int]:
        return divmod(self.blank_index, self.size)

    @property
    def rows(self) -> list[list[int]]:
        n = self.size
        return [list(self.tiles[r * n : (r + 1) * n]) for r in range(n)]

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row * self.size + col]

    def is_solved(self) -> bool:
        return self.tiles == goal_tiles(self.size)

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.get_tile(row, col)
        if val == 0:
            return row == self.size - 1 and col == self.size - 1
        return divmod(val - 1, self.size) == (row, col)

    def is_solvable(self) -> bool:
        """Return True if the goal board is reachable with legal slides.

        Odd sizes need an even inversion count. Even sizes need exactly
        one of "blank row, counted from the bottom starting at 1, is even"
        and "inversion count is even".
        """
        inversions_even = _inversions_even(self.tiles)
        if self.size % 2:
            return inversions_even
        row_from_bottom = self.size - self.blank_index // self.size
        return (row_from_bottom % 2 == 0) != inversions_even

    # -- search support -------------------------------------------------------

    def expand(self) -> Iterator[Board]:
        """Yield every board reachable with one slide.

        The blank moves up, down, right, then left; the order only matters
        for tie-breaking inside the frontier.
        """
        n = self.size
        spot = self.blank_index
        if spot - n >= 0:
            yield self._swapped(spot, spot - n)
        if spot + n < len(self.tiles):
            yield self._swapped(spot, spot + n)
        if spot % n != n - 1:
            yield self._swapped(spot, spot + 1)
        if spot % n != 0:
            yield self._swapped(spot, spot - 1)

    def key(self) -> bytes:
        """Compact identity of the tile layout (unsigned 16-bit packed)."""
        return array("H", self.tiles).tobytes()

    def heuristic_value(self, heuristic: Heuristic) -> float:
        """Evaluate *heuristic* once and cache it on this board.

        A board must only ever be evaluated against one heuristic.
        """
        if self.h is None:
            self.h = heuristic(self.tiles, self.size)
        return self.h

    def total_cost(self, heuristic: Heuristic) -> float:
        """Return ``g + h``, the f-cost used to rank frontier entries."""
        return self.g + self.heuristic_value(heuristic)

    def history(self) -> list[Board]:
        """Return the boards from the search root up to this one."""
        states: list[Board] = []
        node: Board | None = self
        while node is not None:
            states.append(node)
            node = node.parent
        states.reverse()
        return states

    def moves(self) -> list[Direction]:
        """Return the tile moves leading from the search root to this board."""
        path = self.history()
        return [_direction(a, b) for a, b in zip(path, path[1:])]

    # -- player moves ---------------------------------------------------------

    def slide(self, index: int) -> Board:
        """Return a new root board with the tile at *index* slid into the blank."""
        n = self.size
        blank = self.blank_index
        if not 0 <= index < len(self.tiles):
            raise IllegalMoveError(f"Cell {index} is outside the board.")
        br, bc = divmod(blank, n)
        tr, tc = divmod(index, n)
        if abs(br - tr) + abs(bc - tc) != 1:
            raise IllegalMoveError(
                f"Tile at ({tr}, {tc}) is not adjacent to the blank at ({br}, {bc})."
            )
        tiles = list(self.tiles)
        tiles[blank], tiles[index] = tiles[index], tiles[blank]
        return Board(size=n, tiles=tuple(tiles))

    # -- text -----------------------------------------------------------------

    def to_text(self, comments: bool = False) -> str:
        """Return the canonical text form accepted by :meth:`from_text`."""
        width = len(str(self.size * self.size - 1))
        lines: list[str] = []
        if comments:
            distance = "unknown" if self.h is None else f"{self.h:g}"
            lines.append(f"# Moves done: {self.g}")
            lines.append(f"# Heuristic distance to finish: {distance}")
        lines.append(str(self.size))
        for row in self.rows:
            lines.append(" ".join(f"{v:>{width}}" for v in row))
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.to_text()

    # -- identity -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.tiles == other.tiles

    def __hash__(self) -> int:
        return hash(self.tiles)

    # -- helpers --------------------------------------------------------------

    def _swapped(self, a: int, b: int) -> Board:
        tiles = list(self.tiles)
        tiles[a], tiles[b] = tiles[b], tiles[a]
        return Board(size=self.size, tiles=tuple(tiles), g=self.g + 1, parent=self)


def _direction(before: Board, after: Board) -> Direction:
    # The blank moves opposite to the tile that slid into it.
    n = before.size
    delta = after.blank_index - before.blank_index
    if delta == n:
        return Direction.UP
    if delta == -n:
        return Direction.DOWN
    if delta == 1:
        return Direction.LEFT
    if delta == -1:
        return Direction.RIGHT
    raise IllegalMoveError(f"Boards are not one slide apart (blank moved {delta}).")

"""Board model for the sliding puzzle engine."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum

from backend.models.errors import InvalidDimensions, ValueNotFound

SENTINEL = 255
MAX_CELLS = SENTINEL + 1

# (a, b): exchange the contents of cell a and cell b.
SwapMove = tuple[int, int]


class Direction(StrEnum):
    """Direction the *tile* slides into the empty cell."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# -- tile helpers -------------------------------------------------------------


def solved_tiles(count: int) -> tuple[int, ...]:
    """Return the canonical solved sequence for *count* cells.

    Example::

        solved_tiles(4) == (0, 1, 2, 255)
    """
    if not 0 < count <= MAX_CELLS:
        raise InvalidDimensions(
            f"A board holds between 1 and {MAX_CELLS} cells, got {count}."
        )
    return (*range(count - 1), SENTINEL)


def index_of_value(tiles: Sequence[int], value: int) -> int:
    try:
        return list(tiles).index(value)
    except ValueError:
        raise ValueNotFound(value) from None


def validate_tiles(tiles: Sequence[int], width: int, height: int) -> None:
    """Raise unless *tiles* is a complete permutation for the board size."""
    from backend.engine.geometry import check_dimensions

    check_dimensions(width, height)
    count = width * height
    if len(tiles) != count:
        raise InvalidDimensions(
            f"Expected {count} tiles for a {width}×{height} board, "
            f"got {len(tiles)}."
        )
    present = set(tiles)
    for value in solved_tiles(count):
        if value not in present:
            raise ValueNotFound(value)


def swapped(tiles: Sequence[int], move: SwapMove) -> tuple[int, ...]:
    """Return a copy of *tiles* with the two cells of *move* exchanged."""
    a, b = move
    out = list(tiles)
    out[a], out[b] = out[b], out[a]
    return tuple(out)


# -- board --------------------------------------------------------------------


@dataclass(frozen=True)
class BoardState:
    """An immutable sliding puzzle board.

    Tiles are stored as a flat row-major tuple. Ordinary tiles are
    ``0 .. N-2``; :data:`SENTINEL` marks the empty cell.
    """

    width: int
    height: int
    tiles: tuple[int, ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, width: int, height: int, flat: Iterable[int]) -> BoardState:
        """Create a validated board from a flat row-major tile list.

        Example::

            BoardState.from_flat(2, 2, [0, 1, SENTINEL, 2])
        """
        tiles = tuple(flat)
        validate_tiles(tiles, width, height)
        return cls(width=width, height=height, tiles=tiles)

    @classmethod
    def solved(cls, width: int, height: int) -> BoardState:
        from backend.engine.geometry import check_dimensions

        check_dimensions(width, height)
        return cls(width=width, height=height, tiles=solved_tiles(width * height))

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return self.width * self.height

    @property
    def empty_index(self) -> int:
        return index_of_value(self.tiles, SENTINEL)

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row * self.width + col]

    def is_solved(self) -> bool:
        return self.tiles == solved_tiles(self.size)

    def is_tile_correct(self, idx: int) -> bool:
        """Check if the tile at *idx* sits on its goal cell."""
        val = self.tiles[idx]
        if val == SENTINEL:
            return idx == self.size - 1
        return val == idx

    def rows(self) -> list[tuple[int, ...]]:
        w = self.width
        return [self.tiles[r * w : (r + 1) * w] for r in range(self.height)]

    # -- transitions ----------------------------------------------------------

    def apply(self, move: SwapMove) -> BoardState:
        """Return the board after *move*; no legality check is made here."""
        return BoardState(
            width=self.width, height=self.height, tiles=swapped(self.tiles, move)
        )

    def apply_all(self, moves: Iterable[SwapMove]) -> BoardState:
        board = self
        for move in moves:
            board = board.apply(move)
        return board

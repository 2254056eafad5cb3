"""Legal-move derivation around the empty cell."""

from __future__ import annotations

from collections.abc import Sequence

from backend.engine.geometry import check_dimensions, coords_of, idx_of, in_bounds
from backend.models.board import SENTINEL, Direction, SwapMove, swapped

# Probe order is up, down, left, right.  The solver's tie-breaking and the
# shuffle's candidate lists both depend on it.
_OFFSETS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

# The offset points from the blank to the tile that will slide into it.
# UP   → tile at (br+1, bc) moves up
# DOWN → tile at (br-1, bc) moves down
# LEFT → tile at (br, bc+1) moves left
# RIGHT→ tile at (br, bc-1) moves right
_DIRECTION_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


def _neighbours(idx: int, width: int, height: int) -> list[int]:
    row, col = coords_of(idx, width)
    out: list[int] = []
    for dr, dc in _OFFSETS:
        nr, nc = row + dr, col + dc
        if in_bounds(nr, nc, width, height):
            out.append(idx_of(nr, nc, width))
    return out


def legal_swaps_from(width: int, height: int, empty_idx: int) -> list[int]:
    """Return the indices that may swap with the empty cell at *empty_idx*.

    Neighbours come back in up, down, left, right order: two for a
    corner, three for an edge cell and four for an interior cell.
    """
    check_dimensions(width, height)
    if not 0 <= empty_idx < width * height:
        raise ValueError(
            f"Empty index {empty_idx} is outside a {width}×{height} board."
        )
    return _neighbours(empty_idx, width, height)


def apply_click(
    state: Sequence[int], width: int, height: int, clicked_idx: int
) -> tuple[int, ...]:
    """Slide the clicked tile into the empty cell if they are adjacent.

    Clicking the empty cell, a tile away from it, or outside the board
    returns the state unchanged.
    """
    tiles = tuple(state)
    if width <= 0 or height <= 0:
        return tiles
    if not 0 <= clicked_idx < min(len(tiles), width * height):
        return tiles
    if tiles[clicked_idx] == SENTINEL:
        return tiles

    for neighbour in _neighbours(clicked_idx, width, height):
        if neighbour < len(tiles) and tiles[neighbour] == SENTINEL:
            return swapped(tiles, (clicked_idx, neighbour))
    return tiles


def is_legal_swap(
    state: Sequence[int], width: int, height: int, move: SwapMove
) -> bool:
    """Check that *move* exchanges the sentinel with an adjacent tile."""
    a, b = move
    count = width * height
    if not (0 <= a < count and 0 <= b < count) or len(state) != count:
        return False
    if SENTINEL not in (state[a], state[b]) or a == b:
        return False
    (ar, ac), (br, bc) = coords_of(a, width), coords_of(b, width)
    return abs(ar - br) + abs(ac - bc) == 1


def neighbour_in_direction(
    width: int, height: int, empty_idx: int, direction: Direction
) -> int | None:
    """Return the index of the tile that slides *direction* into the blank."""
    check_dimensions(width, height)
    br, bc = coords_of(empty_idx, width)
    dr, dc = _DIRECTION_OFFSETS[direction]
    tr, tc = br + dr, bc + dc
    if not in_bounds(tr, tc, width, height):
        return None
    return idx_of(tr, tc, width)

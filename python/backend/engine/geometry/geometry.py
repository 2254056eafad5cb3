"""Index and coordinate math for a row-major board."""

from __future__ import annotations

from backend.models.board import MAX_CELLS
from backend.models.errors import InvalidDimensions


def check_dimensions(width: int, height: int) -> None:
    """Raise :class:`InvalidDimensions` unless the board fits the tile scheme."""
    if width <= 0 or height <= 0:
        raise InvalidDimensions(
            f"Board dimensions must be positive, got {width}×{height}."
        )
    if width * height > MAX_CELLS:
        raise InvalidDimensions(
            f"A {width}×{height} board exceeds the {MAX_CELLS}-cell limit."
        )


def coords_of(idx: int, width: int) -> tuple[int, int]:
    """Return ``(row, col)`` of the cell at linear index *idx*."""
    if width <= 0:
        raise InvalidDimensions(f"Board width must be positive, got {width}.")
    return divmod(idx, width)


def idx_of(row: int, col: int, width: int) -> int:
    return row * width + col


def in_bounds(row: int, col: int, width: int, height: int) -> bool:
    return 0 <= row < height and 0 <= col < width

from __future__ import annotations

import pytest

from backend.engine.moverules import (
    apply_click,
    is_legal_swap,
    legal_swaps_from,
    neighbour_in_direction,
)
from backend.models.board import SENTINEL as S
from backend.models.board import BoardState, Direction
from backend.models.errors import InvalidDimensions


# -- legal_swaps_from ---------------------------------------------------------


@pytest.mark.parametrize(
    "width, height, empty_idx, expected",
    [
        (3, 3, 0, [3, 1]),  # corner
        (3, 3, 8, [5, 7]),  # corner
        (3, 3, 1, [4, 0, 2]),  # top edge
        (3, 3, 5, [2, 8, 4]),  # right edge
        (3, 3, 4, [1, 7, 3, 5]),  # interior
        (4, 2, 5, [1, 4, 6]),  # bottom edge
        (1, 3, 1, [0, 2]),  # single column
    ],
)
def test_legal_swaps_order(
    width: int, height: int, empty_idx: int, expected: list[int]
) -> None:
    assert legal_swaps_from(width, height, empty_idx) == expected


@pytest.mark.parametrize("width, height", [(2, 2), (3, 3), (4, 3), (5, 4)])
def test_legal_swaps_counts(width: int, height: int) -> None:
    for idx in range(width * height):
        row, col = divmod(idx, width)
        on_row_edge = row in (0, height - 1)
        on_col_edge = col in (0, width - 1)
        expected = 4 - on_row_edge - on_col_edge
        assert len(legal_swaps_from(width, height, idx)) == expected, idx


def test_legal_swaps_rejects_bad_input() -> None:
    with pytest.raises(InvalidDimensions):
        legal_swaps_from(0, 3, 0)
    with pytest.raises(InvalidDimensions):
        legal_swaps_from(3, 0, 0)
    with pytest.raises(ValueError):
        legal_swaps_from(3, 3, 9)


# -- apply_click --------------------------------------------------------------


def test_click_adjacent_tile_slides(solved_3x3: BoardState) -> None:
    after = apply_click(solved_3x3.tiles, 3, 3, 5)
    assert after == (0, 1, 2, 3, 4, S, 6, 7, 5)
    after = apply_click(solved_3x3.tiles, 3, 3, 7)
    assert after == (0, 1, 2, 3, 4, 5, 6, S, 7)


@pytest.mark.parametrize("clicked", [8, 0, 4, 6, 9, -1])
def test_click_noop(solved_3x3: BoardState, clicked: int) -> None:
    assert apply_click(solved_3x3.tiles, 3, 3, clicked) == solved_3x3.tiles


def test_click_accepts_lists() -> None:
    assert apply_click([0, 1, S, 2], 2, 2, 3) == (0, 1, 2, S)
    assert apply_click([0, 1, S, 2], 0, 2, 3) == (0, 1, S, 2)


# -- helpers ------------------------------------------------------------------


def test_is_legal_swap(solved_3x3: BoardState) -> None:
    tiles = solved_3x3.tiles
    assert is_legal_swap(tiles, 3, 3, (8, 5))
    assert is_legal_swap(tiles, 3, 3, (7, 8))
    assert not is_legal_swap(tiles, 3, 3, (8, 4))  # diagonal
    assert not is_legal_swap(tiles, 3, 3, (0, 1))  # no blank
    assert not is_legal_swap(tiles, 3, 3, (8, 8))
    assert not is_legal_swap(tiles, 3, 3, (8, 9))
    # 2 and 3 are adjacent in the flat list but not on the board
    assert not is_legal_swap((0, 1, S, 2, 3, 4, 5, 6, 7), 3, 3, (2, 3))


def test_neighbour_in_direction() -> None:
    assert neighbour_in_direction(3, 3, 8, Direction.UP) is None
    assert neighbour_in_direction(3, 3, 8, Direction.LEFT) is None
    assert neighbour_in_direction(3, 3, 8, Direction.DOWN) == 5
    assert neighbour_in_direction(3, 3, 8, Direction.RIGHT) == 7
    assert neighbour_in_direction(3, 3, 4, Direction.UP) == 7
    assert neighbour_in_direction(3, 3, 4, Direction.LEFT) == 5

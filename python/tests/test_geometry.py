from __future__ import annotations

import pytest

from backend.engine.geometry import check_dimensions, coords_of, idx_of, in_bounds
from backend.models.errors import InvalidDimensions


@pytest.mark.parametrize(
    "idx, width, expected",
    [(0, 3, (0, 0)), (5, 3, (1, 2)), (8, 3, (2, 2)), (7, 4, (1, 3)), (2, 1, (2, 0))],
)
def test_coords_of(idx: int, width: int, expected: tuple[int, int]) -> None:
    assert coords_of(idx, width) == expected
    assert idx_of(*expected, width) == idx


def test_coords_of_rejects_zero_width() -> None:
    with pytest.raises(InvalidDimensions):
        coords_of(3, 0)


def test_in_bounds_accepts_negative_probes() -> None:
    assert in_bounds(0, 0, 3, 2)
    assert in_bounds(1, 2, 3, 2)
    assert not in_bounds(-1, 0, 3, 2)
    assert not in_bounds(0, -1, 3, 2)
    assert not in_bounds(2, 0, 3, 2)
    assert not in_bounds(0, 3, 3, 2)


def test_check_dimensions() -> None:
    check_dimensions(16, 16)
    check_dimensions(1, 1)
    for width, height in [(0, 3), (3, 0), (-1, 4), (17, 16), (257, 1)]:
        with pytest.raises(InvalidDimensions):
            check_dimensions(width, height)

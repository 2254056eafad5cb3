from backend.models.board import (
    MAX_CELLS,
    SENTINEL,
    BoardState,
    Direction,
    SwapMove,
)
from backend.models.errors import (
    InvalidDimensions,
    NoSolutionFound,
    PuzzleError,
    ValueNotFound,
)
from backend.models.settings import PuzzleSettings

__all__ = [
    "MAX_CELLS",
    "SENTINEL",
    "BoardState",
    "Direction",
    "InvalidDimensions",
    "NoSolutionFound",
    "PuzzleError",
    "PuzzleSettings",
    "SwapMove",
    "ValueNotFound",
]

"""Generates solvable sliding puzzle scrambles."""

from __future__ import annotations

import logging
import random

from backend.engine.geometry import check_dimensions
from backend.engine.moverules import legal_swaps_from
from backend.models.board import BoardState, SwapMove
from backend.models.settings import DEFAULT_SHUFFLE_MOVES

logger = logging.getLogger(__name__)

# generate() gives up re-rolling after this many walks that end solved.
_MAX_ATTEMPTS = 10


class GameGenerator:
    """Creates solvable puzzles by random walks from the solved state."""

    @staticmethod
    def solved(width: int, height: int) -> BoardState:
        """Return the goal-state board (tiles in order, blank bottom-right)."""
        return BoardState.solved(width, height)

    @staticmethod
    def shuffle(
        width: int,
        height: int,
        start_empty_idx: int,
        move_count: int,
        rng: random.Random | None = None,
    ) -> list[SwapMove]:
        """Return *move_count* legal swaps walking the blank from *start_empty_idx*.

        Each swap is legal once every earlier swap has been applied.  The
        walk never undoes the previous step unless the blank has no
        other neighbour.
        """
        check_dimensions(width, height)
        if not 0 <= start_empty_idx < width * height:
            raise ValueError(
                f"Empty index {start_empty_idx} is outside a {width}×{height} board."
            )
        if move_count < 0:
            raise ValueError(f"move_count must be non-negative, got {move_count}.")
        choice = rng.choice if rng is not None else random.choice

        blank = start_empty_idx
        prev_blank: int | None = None
        sequence: list[SwapMove] = []

        for _ in range(move_count):
            neighbours = legal_swaps_from(width, height, blank)
            if prev_blank in neighbours and len(neighbours) > 1:
                neighbours.remove(prev_blank)
            target = choice(neighbours)
            sequence.append((blank, target))
            prev_blank, blank = blank, target

        logger.debug("Shuffle sequence: %s", sequence)
        return sequence

    @staticmethod
    def generate(
        width: int,
        height: int,
        move_count: int = DEFAULT_SHUFFLE_MOVES,
        rng: random.Random | None = None,
    ) -> BoardState:
        """Return a scrambled board reached by *move_count* random swaps.

        Walks that happen to end on the solved board are re-rolled a few
        times; tiny boards may still come back solved.
        """
        board = GameGenerator.solved(width, height)
        scrambled = board
        for _ in range(_MAX_ATTEMPTS):
            moves = GameGenerator.shuffle(
                width, height, board.empty_index, move_count, rng
            )
            scrambled = board.apply_all(moves)
            if not scrambled.is_solved() or move_count == 0:
                break
        return scrambled

"""Core gameplay logic — applies moves one at a time and checks the win."""

from __future__ import annotations

import random

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamesolver import Solver
from backend.engine.moverules import apply_click, is_legal_swap, neighbour_in_direction
from backend.models.board import BoardState, Direction, SwapMove
from backend.models.settings import DEFAULT_SHUFFLE_MOVES


class GamePlay:
    """Owns the live board of a single game session."""

    def __init__(self, width: int, height: int, board: BoardState | None = None) -> None:
        self.width = width
        self.height = height
        self.board = board if board is not None else GameGenerator.solved(width, height)
        self.moves: int = 0

    @classmethod
    def from_board(cls, board: BoardState) -> GamePlay:
        """Create a game session from an existing board."""
        return cls(board.width, board.height, board)

    # -- movement -------------------------------------------------------------

    def swap(self, move: SwapMove) -> bool:
        """Apply *move* if it slides a tile into the adjacent blank.

        Returns True if the move was valid.
        """
        if not is_legal_swap(self.board.tiles, self.width, self.height, move):
            return False
        self.board = self.board.apply(move)
        self.moves += 1
        return True

    def click(self, idx: int) -> bool:
        """Slide the tile at *idx* into the blank if they are adjacent."""
        tiles = apply_click(self.board.tiles, self.width, self.height, idx)
        if tiles == self.board.tiles:
            return False
        self.board = BoardState(width=self.width, height=self.height, tiles=tiles)
        self.moves += 1
        return True

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        """
        blank = self.board.empty_index
        target = neighbour_in_direction(self.width, self.height, blank, direction)
        if target is None:
            return False
        return self.swap((blank, target))

    # -- sequences ------------------------------------------------------------

    def scramble_sequence(
        self,
        move_count: int = DEFAULT_SHUFFLE_MOVES,
        rng: random.Random | None = None,
    ) -> list[SwapMove]:
        """Return a scramble from the current blank without applying it."""
        return GameGenerator.shuffle(
            self.width, self.height, self.board.empty_index, move_count, rng
        )

    def scramble(
        self,
        move_count: int = DEFAULT_SHUFFLE_MOVES,
        rng: random.Random | None = None,
    ) -> list[SwapMove]:
        """Generate a scramble, apply it, and return the applied swaps."""
        sequence = self.scramble_sequence(move_count, rng)
        self.board = self.board.apply_all(sequence)
        self.moves = 0
        return sequence

    def solution(self) -> list[SwapMove]:
        return Solver.solve_board(self.board)

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board.is_solved()

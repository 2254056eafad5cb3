"""Sliding puzzle solver — exhaustive breadth-first search.

Explores the permutation graph level by level from the given board until
the canonical solved board is dequeued.  Every state is recorded the
first time it leaves the frontier together with the move that produced
it; since the frontier is FIFO that first visit lies on a shortest path,
so walking the parent links back from the solved state yields an
optimal swap sequence.

The state space grows factorially with the tile count.  Boards up to
3×3 finish quickly; 4×4 scrambles are only practical when short.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from backend.engine.geometry import coords_of
from backend.engine.moverules import legal_swaps_from
from backend.models.board import (
    SENTINEL,
    BoardState,
    SwapMove,
    index_of_value,
    solved_tiles,
    swapped,
    validate_tiles,
)
from backend.models.errors import NoSolutionFound

logger = logging.getLogger(__name__)

StateKey = tuple[int, ...]


@dataclass(frozen=True)
class SolveStats:
    """Numbers describing one finished search."""

    iterations: int
    states_seen: int
    path_length: int | None


SolveObserver = Callable[[SolveStats], None]


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(
        state: Sequence[int],
        width: int,
        height: int,
        *,
        on_finish: SolveObserver | None = None,
    ) -> list[SwapMove]:
        """Return the shortest swap sequence that turns *state* into solved.

        Returns ``[]`` for a board that is already solved (no search is
        run and *on_finish* is not called).  Raises
        :class:`NoSolutionFound` when the solved board is unreachable.
        """
        validate_tiles(state, width, height)

        initial_key: StateKey = tuple(state)
        target_key = solved_tiles(width * height)
        if initial_key == target_key:
            return []

        empty_idx = index_of_value(initial_key, SENTINEL)

        # state -> (parent state, swap that led here).  Doubles as the
        # visited set; the first entry for a key is never replaced.
        parents: dict[StateKey, tuple[StateKey | None, SwapMove]] = {}

        # (state, parent state, last swap); the first swap is a no-op whose
        # second index tells the loop where the blank is.
        frontier: deque[tuple[StateKey, StateKey | None, SwapMove]] = deque(
            [(initial_key, None, (empty_idx, empty_idx))]
        )

        iterations = 0
        while frontier:
            cur, parent, last_swap = frontier.popleft()
            iterations += 1

            if cur not in parents:
                parents[cur] = (parent, last_swap)

            if cur == target_key:
                break

            blank = last_swap[1]
            for neighbour in legal_swaps_from(width, height, blank):
                move = (blank, neighbour)
                nxt = swapped(cur, move)
                if nxt not in parents:
                    frontier.append((nxt, cur, move))

        found = target_key in parents
        logger.debug(
            "Solver explored %d states in %d iterations", len(parents), iterations
        )

        if not found:
            _notify(on_finish, SolveStats(iterations, len(parents), None))
            raise NoSolutionFound(
                f"No sequence of swaps solves the {width}×{height} board "
                f"{list(initial_key)}."
            )

        moves: list[SwapMove] = []
        key = target_key
        while True:
            prev, move = parents[key]
            moves.append(move)
            if prev == initial_key:
                break
            key = prev
        moves.reverse()

        logger.debug("Number of swaps to solve: %d", len(moves))
        _notify(on_finish, SolveStats(iterations, len(parents), len(moves)))
        return moves

    @staticmethod
    def solve_board(
        board: BoardState, *, on_finish: SolveObserver | None = None
    ) -> list[SwapMove]:
        return Solver.solve(board.tiles, board.width, board.height, on_finish=on_finish)

    @staticmethod
    def hint(board: BoardState) -> SwapMove | None:
        """Return the single best next move, or ``None`` if solved / unsolvable."""
        if board.is_solved():
            return None

        if not Solver.is_solvable(board.tiles, board.width, board.height):
            return None

        moves = Solver.solve_board(board)
        return moves[0] if moves else None

    @staticmethod
    def is_solvable(state: Sequence[int], width: int, height: int) -> bool:
        """Return True if *state* can reach the solved board.

        Uses the inversion-parity rule rather than a search, so it is
        cheap on any board size.
        """
        validate_tiles(state, width, height)
        flat = [v for v in state if v != SENTINEL]
        inversions = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    inversions += 1

        # A single row or column can never reorder its tiles.
        if width == 1 or height == 1:
            return inversions == 0

        if width % 2 == 1:
            return inversions % 2 == 0
        blank_row, _ = coords_of(index_of_value(state, SENTINEL), width)
        blank_row_from_bottom = height - 1 - blank_row
        return (inversions + blank_row_from_bottom) % 2 == 0


def _notify(observer: SolveObserver | None, stats: SolveStats) -> None:
    if observer is not None:
        observer(stats)

"""User-adjustable puzzle settings."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_WIDTH = 3
DEFAULT_HEIGHT = 3
DEFAULT_SHUFFLE_MOVES = 20


@dataclass
class PuzzleSettings:
    """Board size plus the pacing used when replaying move lists."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    shuffle_moves: int = DEFAULT_SHUFFLE_MOVES
    shuffle_step_delay: float = 0.25  # seconds between scramble frames
    solve_step_delay: float = 0.5  # seconds between solve frames

    def validate(self) -> PuzzleSettings:
        from backend.engine.geometry import check_dimensions

        check_dimensions(self.width, self.height)
        if self.shuffle_moves < 0:
            raise ValueError(
                f"shuffle_moves must be non-negative, got {self.shuffle_moves}."
            )
        if self.shuffle_step_delay < 0 or self.solve_step_delay < 0:
            raise ValueError("Step delays must be non-negative.")
        return self

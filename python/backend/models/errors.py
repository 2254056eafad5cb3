"""Exceptions raised by the puzzle engine."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every engine failure."""


class InvalidDimensions(PuzzleError, ValueError):
    """Board dimensions are zero, too large, or disagree with the tiles."""


class ValueNotFound(PuzzleError, LookupError):
    """A tile value that must be on the board is missing."""

    def __init__(self, value: int) -> None:
        super().__init__(f"Tile value {value} not found on the board.")
        self.value = value


class NoSolutionFound(PuzzleError):
    """The search ran out of states without reaching the solved board."""

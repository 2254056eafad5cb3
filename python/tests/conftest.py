"""Shared fixtures for the engine test suite."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent  # python/
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.models.board import BoardState  # noqa: E402


class FirstChoice:
    """Stand-in random source that always picks the first candidate."""

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def solved_3x3() -> BoardState:
    return BoardState.solved(3, 3)


@pytest.fixture
def first_choice() -> FirstChoice:
    return FirstChoice()

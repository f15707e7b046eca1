"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from fenboard.core import STARTING_FEN, Position, position_from_fen


@pytest.fixture
def start_position() -> Position:
    """The standard initial position, freshly decoded."""
    return position_from_fen(STARTING_FEN)

"""Shared fixtures for Samurai Tactics tests."""

from collections.abc import Callable
from typing import Dict, Optional

import pytest

from samurai_tactics.game.board import Board, Coord
from samurai_tactics.game.pieces import Piece


@pytest.fixture
def board_factory() -> Callable[..., Board]:
    """Factory fixture that builds a board holding only the given pieces."""

    def _factory(placements: Optional[Dict[Coord, Piece]] = None) -> Board:
        return Board.from_pieces((placements or {}).items())

    return _factory

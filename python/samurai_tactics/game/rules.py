"""Turn handling and selection state built on top of :mod:`samurai_tactics.game.board`."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional

from .board import Board, Coord, MoveResult, apply_move, legal_destinations
from .pieces import Owner, opponent


LOG = logging.getLogger("samurai_tactics.rules")

FIRST_PLAYER = Owner.RED


class Phase(Enum):
    SELECTING = "selecting"
    PIECE_SELECTED = "piece_selected"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class SelectResult:
    """What a single ``select`` call did; ``move`` is set only when a piece moved."""

    action: str
    move: Optional[MoveResult] = None

    @property
    def changed(self) -> bool:
        return self.action != "ignored"


IGNORED = SelectResult("ignored")
SELECTED = SelectResult("selected")
DESELECTED = SelectResult("deselected")


@dataclass(frozen=True)
class RenderState:
    """Read-only snapshot handed to front-ends for drawing."""

    board: Board
    current_player: Owner
    selected: Optional[Coord]
    legal_destinations: FrozenSet[Coord]
    winner: Optional[Owner]
    phase: Phase
    move_count: int = 0
    last_move: Optional[MoveResult] = None

    @property
    def status_text(self) -> str:
        if self.winner is not None:
            return f"{self.winner.value} wins!"
        return f"Current player: {self.current_player.value}"


class GameSession:
    """Owns one board and drives it from square clicks.

    ``board`` and ``current_player`` let callers start from a position other
    than the opening one; :meth:`reset` always returns to the opening layout.
    """

    def __init__(self, board: Optional[Board] = None, current_player: Owner = FIRST_PLAYER) -> None:
        self.reset()
        if board is not None:
            self.board = board
        self.current_player = current_player

    def reset(self) -> None:
        self.board = Board.initial()
        self.current_player: Owner = FIRST_PLAYER
        self.selected: Optional[Coord] = None
        self.destinations: FrozenSet[Coord] = frozenset()
        self.winner: Optional[Owner] = None
        self.move_count = 0
        self.last_move: Optional[MoveResult] = None
        LOG.info("New game, %s to move", self.current_player.value)

    @property
    def phase(self) -> Phase:
        if self.winner is not None:
            return Phase.GAME_OVER
        if self.selected is not None:
            return Phase.PIECE_SELECTED
        return Phase.SELECTING

    def get_render_state(self) -> RenderState:
        return RenderState(
            board=self.board,
            current_player=self.current_player,
            selected=self.selected,
            legal_destinations=self.destinations,
            winner=self.winner,
            phase=self.phase,
            move_count=self.move_count,
            last_move=self.last_move,
        )

    def select(self, row: int, col: int) -> SelectResult:
        phase = self.phase
        if phase is Phase.GAME_OVER:
            return IGNORED

        square = (row, col)
        if phase is Phase.PIECE_SELECTED:
            if square in self.destinations:
                return self._move_to(square)
            if square == self.selected:
                self._clear_selection()
                return DESELECTED
            if self._owns(square):
                return self._pick(square)
            self._clear_selection()
            return DESELECTED

        if self._owns(square):
            return self._pick(square)
        return IGNORED

    def _owns(self, square: Coord) -> bool:
        piece = self.board.piece_at(*square)
        return piece is not None and piece.owner is self.current_player

    def _pick(self, square: Coord) -> SelectResult:
        self.selected = square
        self.destinations = legal_destinations(self.board, *square)
        LOG.debug(
            "%s selected %s with %d destinations",
            self.current_player.value,
            square,
            len(self.destinations),
        )
        return SELECTED

    def _clear_selection(self) -> None:
        self.selected = None
        self.destinations = frozenset()

    def _move_to(self, target: Coord) -> SelectResult:
        assert self.selected is not None
        result = apply_move(self.board, self.selected, target)
        self.board = result.board
        self.last_move = result
        self.move_count += 1
        self._clear_selection()
        LOG.debug("%s moved %s -> %s", result.piece, result.origin, result.target)

        if result.winner is not None:
            self.winner = result.winner
            LOG.info("%s captured the Daimyo and wins", self.winner.value)
        else:
            self.current_player = opponent(self.current_player)
        return SelectResult("moved", move=result)

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Iterator, List, Optional, Sequence, Set, Tuple

from ..directions import Style, movement
from .pieces import Kind, Owner, Piece, opponent


BOARD_ROWS = 6
BOARD_COLS = 5

Coord = Tuple[int, int]
Cell = Optional[Piece]

BACK_RANK = (Kind.SAMURAI, Kind.RONIN, Kind.DAIMYO, Kind.RONIN, Kind.SAMURAI)


class IllegalMoveError(AssertionError):
    """Raised when :func:`apply_move` is called with a destination that is not legal."""


@dataclass(frozen=True)
class Board:
    cells: Tuple[Tuple[Cell, ...], ...]

    def __post_init__(self) -> None:
        if len(self.cells) != BOARD_ROWS or any(len(row) != BOARD_COLS for row in self.cells):
            raise ValueError(f"Board must be {BOARD_ROWS} rows of {BOARD_COLS} cells")

    @classmethod
    def empty(cls) -> "Board":
        return cls(tuple((None,) * BOARD_COLS for _ in range(BOARD_ROWS)))

    @classmethod
    def initial(cls) -> "Board":
        # Rebuild the starting layout
        rows: List[Tuple[Cell, ...]] = [
            tuple(Piece(kind, Owner.RED) for kind in BACK_RANK),
            tuple(Piece(Kind.NINJA, Owner.RED) for _ in range(BOARD_COLS)),
        ]
        rows.extend((None,) * BOARD_COLS for _ in range(2))
        rows.append(tuple(Piece(Kind.NINJA, Owner.BLUE) for _ in range(BOARD_COLS)))
        rows.append(tuple(Piece(kind, Owner.BLUE) for kind in BACK_RANK))
        return cls(tuple(rows))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> "Board":
        return cls(tuple(tuple(row) for row in rows))

    @classmethod
    def from_pieces(cls, placements: Iterable[Tuple[Coord, Piece]]) -> "Board":
        grid: List[List[Cell]] = [[None] * BOARD_COLS for _ in range(BOARD_ROWS)]
        for (row, col), piece in placements:
            grid[row][col] = piece
        return cls.from_rows(grid)

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        return 0 <= row < BOARD_ROWS and 0 <= col < BOARD_COLS

    def piece_at(self, row: int, col: int) -> Cell:
        if not self.in_bounds(row, col):
            return None
        return self.cells[row][col]

    def pieces(self) -> Iterator[Tuple[Coord, Piece]]:
        for row, cells in enumerate(self.cells):
            for col, piece in enumerate(cells):
                if piece is not None:
                    yield (row, col), piece

    def remaining(self, owner: Owner) -> int:
        return sum(1 for _, piece in self.pieces() if piece.owner is owner)

    def daimyo_position(self, owner: Owner) -> Optional[Coord]:
        leader = Piece(Kind.DAIMYO, owner)
        return next((coord for coord, piece in self.pieces() if piece == leader), None)

    def occupied_count(self) -> int:
        return sum(1 for _ in self.pieces())

    def _with_cells(self, updates: Iterable[Tuple[Coord, Cell]]) -> "Board":
        grid = [list(row) for row in self.cells]
        for (row, col), cell in updates:
            grid[row][col] = cell
        return Board.from_rows(grid)


@dataclass(frozen=True)
class MoveResult:
    board: Board
    origin: Coord
    target: Coord
    piece: Piece
    captured: Optional[Piece] = None
    winner: Optional[Owner] = None

    @property
    def captured_kind(self) -> Optional[Kind]:
        return None if self.captured is None else self.captured.kind


def _admits(mover: Piece, occupant: Cell) -> bool:
    if occupant is None:
        return True
    if not mover.is_enemy_of(occupant):
        return False
    # Ninjas threaten everything except the enemy leader
    return not (mover.kind is Kind.NINJA and occupant.kind is Kind.DAIMYO)


def legal_destinations(board: Board, row: int, col: int) -> FrozenSet[Coord]:
    """Squares the piece at ``(row, col)`` may move to.

    Turn order is not checked here; the owner of the piece only decides
    which occupants count as enemies. An empty origin has no moves.
    """

    mover = board.piece_at(row, col)
    if mover is None:
        return frozenset()

    entry = movement(mover.kind)
    found: Set[Coord] = set()
    for direction in entry.directions:
        if entry.style is Style.SLIDE:
            distance = 1
            while True:
                target = direction.offset(row, col, distance)
                if not board.in_bounds(*target):
                    break
                occupant = board.piece_at(*target)
                if _admits(mover, occupant):
                    found.add(target)
                if occupant is not None:
                    break
                distance += 1
        else:
            # Steps and jumps land on a single square; nothing in between is checked
            target = direction.offset(row, col)
            if board.in_bounds(*target) and _admits(mover, board.piece_at(*target)):
                found.add(target)
    return frozenset(found)


def apply_move(board: Board, origin: Coord, target: Coord) -> MoveResult:
    """Move the piece at ``origin`` to ``target`` and report the outcome.

    The input board is left untouched. A capture of the opponent's Daimyo
    sets ``winner`` on the result.
    """

    if target not in legal_destinations(board, *origin):
        raise IllegalMoveError(f"{target} is not a legal destination from {origin}")

    mover = board.piece_at(*origin)
    assert mover is not None
    captured = board.piece_at(*target)
    new_board = board._with_cells(((origin, None), (target, mover)))

    winner: Optional[Owner] = None
    if captured is not None and captured.kind is Kind.DAIMYO and captured.owner is opponent(mover.owner):
        winner = mover.owner

    return MoveResult(
        board=new_board,
        origin=origin,
        target=target,
        piece=mover,
        captured=captured,
        winner=winner,
    )


def winner_of(board: Board) -> Optional[Owner]:
    # Detect a missing leader; both missing is not a decided game
    red = board.daimyo_position(Owner.RED)
    blue = board.daimyo_position(Owner.BLUE)
    if red is None and blue is None:
        return None
    if red is None:
        return Owner.BLUE
    if blue is None:
        return Owner.RED
    return None


def has_any_move(board: Board, owner: Owner) -> bool:
    # Quick scan used by front-ends to flag a stuck side
    return any(
        legal_destinations(board, row, col)
        for (row, col), piece in board.pieces()
        if piece.owner is owner
    )

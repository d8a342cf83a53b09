"""Movement tables for the Samurai Tactics pieces.

Every kind owns an ordered set of unit vectors and a movement style. The
rule engine in :mod:`samurai_tactics.game.board` walks these vectors; the
table itself is the single source of truth for how each piece travels.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Tuple

from .game.pieces import Kind


class Style(Enum):
    SLIDE = "slide"
    STEP = "step"
    JUMP = "jump"


@dataclass(frozen=True)
class Direction:
    """A ``(row delta, col delta)`` vector on the grid.

    Attributes
    ----------
    d_row:
        Row offset; positive moves toward row 5 (Blue's back rank).
    d_col:
        Column offset; positive moves toward column 4.
    """

    d_row: int
    d_col: int

    def offset(self, row: int, col: int, distance: int = 1) -> Tuple[int, int]:
        return row + self.d_row * distance, col + self.d_col * distance


@dataclass(frozen=True)
class Movement:
    style: Style
    directions: Tuple[Direction, ...]


# fmt: off
RAW_DIRECTIONS: Dict[Kind, Tuple[Style, Tuple[Tuple[int, int], ...]]] = {
    Kind.SAMURAI: (Style.SLIDE, ((-1, -1), (-1, 1), (1, -1), (1, 1))),
    Kind.RONIN:   (Style.SLIDE, ((-1, 0), (1, 0), (0, -1), (0, 1))),
    Kind.DAIMYO:  (Style.STEP,  ((-1, -1), (-1, 0), (-1, 1), (0, -1),
                                 (0, 1), (1, -1), (1, 0), (1, 1))),
    Kind.NINJA:   (Style.JUMP,  ((-2, -2), (-2, 0), (-2, 2), (0, -2),
                                 (0, 2), (2, -2), (2, 0), (2, 2))),
}
# fmt: on

MOVE_DIRECTIONS: Dict[Kind, Movement] = {
    kind: Movement(style=style, directions=tuple(Direction(dr, dc) for dr, dc in vectors))
    for kind, (style, vectors) in RAW_DIRECTIONS.items()
}


def movement(kind: Kind) -> Movement:
    """Return the :class:`Movement` entry for ``kind``."""

    try:
        return MOVE_DIRECTIONS[kind]
    except KeyError as exc:  # pragma: no cover - defensive guard
        raise ValueError(f"Unknown piece kind: {kind}") from exc


def all_directions() -> Iterator[tuple[Kind, Direction]]:
    """Iterate over every ``(kind, direction)`` pair in the table."""

    for kind, entry in MOVE_DIRECTIONS.items():
        for direction in entry.directions:
            yield kind, direction

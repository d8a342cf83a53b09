"""Piece kinds, sides and the immutable piece value used on the board."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Kind(Enum):
    SAMURAI = "Samurai"
    RONIN = "Ronin"
    DAIMYO = "Daimyo"
    NINJA = "Ninja"


class Owner(Enum):
    RED = "Red"
    BLUE = "Blue"


# Flip between players
def opponent(player: Owner) -> Owner:
    return Owner.BLUE if player is Owner.RED else Owner.RED


@dataclass(frozen=True)
class Piece:
    """A piece on the grid. Position on the board is its identity."""

    kind: Kind
    owner: Owner

    def is_enemy_of(self, other: "Piece") -> bool:
        return self.owner is not other.owner

    def __str__(self) -> str:
        return f"{self.owner.value} {self.kind.value}"

"""
Basic definition of a move, and the geometry rule every piece follows:
a single step to one of the eight neighbouring squares.

Legality with respect to the pieces on the board is checked by Board / Game.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Self

from src.generals.combat import ChallengeResult
from src.generals.pieces import Piece
from src.generals.square import Square

Vector = tuple[int, int]

SINGLE_STEP_DELTAS: list[Vector] = [
    (0, 1),
    (0, -1),
    (1, 0),
    (-1, 0),
    (1, 1),
    (1, -1),
    (-1, 1),
    (-1, -1),
]


class MoveType(Enum):
    MOVE = auto()
    CHALLENGE = auto()
    INVALID = auto()


@dataclass(frozen=True)
class Move:
    from_square: Square
    to_square: Square

    @classmethod
    def from_labels(cls, from_label: str, to_label: str) -> Self:
        return cls(Square.from_label(from_label), Square.from_label(to_label))

    def is_single_step(self) -> bool:
        """Exactly one square away, diagonals included."""
        delta = (
            self.to_square.column - self.from_square.column,
            self.to_square.row - self.from_square.row,
        )
        return delta in SINGLE_STEP_DELTAS

    def __str__(self) -> str:
        return f"{self.from_square} -> {self.to_square}"


@dataclass(frozen=True)
class MoveReport:
    """Snapshot of an applied move (taken before the board gets updated). Only used to report what happened."""

    move: Move
    moving_piece: Piece
    move_type: MoveType
    defending_piece: Optional[Piece] = None
    challenge_result: Optional[ChallengeResult] = None

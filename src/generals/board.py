"""The Game board holds the `position` (the configuration of pieces on the board) and implements the rules that only depend on it"""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.core.exceptions import InvalidCoordinateError
from src.generals.moves import Move, MoveType
from src.generals.pieces import Piece, Player, Rank
from src.generals.square import Square


@dataclass
class Board:
    # Only occupied squares are stored. A square missing from the mapping is empty.
    position: dict[Square, Piece] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> Self:
        return cls()

    def piece(self, square: Square) -> Optional[Piece]:
        self._assert_on_board(square)
        return self.position.get(square)

    def is_empty(self, square: Square) -> bool:
        return self.piece(square) is None

    def place_piece(self, piece: Piece, square: Square) -> None:
        """Whatever was standing on the square gets replaced."""
        self._assert_on_board(square)
        self.position[square] = piece

    def remove_piece(self, square: Square) -> None:
        self._assert_on_board(square)
        self.position.pop(square, None)

    def move_piece(self, move: Move) -> None:
        """Update the position on the board"""
        piece_that_moved = self.piece(move.from_square)
        if piece_that_moved is None:
            raise InvalidCoordinateError(f"No piece to move on {move.from_square}.")
        self.remove_piece(move.from_square)
        self.place_piece(piece_that_moved, move.to_square)

    def move_type(self, move: Move) -> MoveType:
        moving_piece = self.piece(move.from_square)
        target_piece = self.piece(move.to_square)
        if moving_piece is None:
            return MoveType.INVALID
        if target_piece is None:
            return MoveType.MOVE
        if target_piece.owner == moving_piece.owner:
            return MoveType.INVALID
        return MoveType.CHALLENGE

    def locate(self, piece: Piece) -> list[Square]:
        return [square for square, other in self.position.items() if other == piece]

    def has_piece(self, piece: Piece) -> bool:
        return bool(self.locate(piece))

    def flags(self) -> dict[Player, list[Square]]:
        """Where each player's Flag is standing (convenience method for the win conditions)"""
        return {player: self.locate(Piece(player, Rank.FLAG)) for player in Player}

    def _assert_on_board(self, square: Square) -> None:
        if not square.is_within_bounds():
            raise InvalidCoordinateError(f"Square {square} is not on the board.")

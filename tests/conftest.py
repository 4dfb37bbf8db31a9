"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.generals.board import Board
from src.generals.game import Game, Status
from src.generals.pieces import Piece, Player
from src.generals.square import Square

# Placements written as {"A1": Piece(...)} to keep the tests readable
Placements = dict[str, Piece]


@pytest.fixture
def board_with_pieces() -> Callable[[Placements], Board]:
    """Call the inner function with the pieces to put on an otherwise empty board"""

    def _create_board(placements: Placements) -> Board:
        board = Board.empty()
        for label, piece in placements.items():
            board.place_piece(piece, Square.from_label(label))
        return board

    return _create_board


@pytest.fixture
def game_in_progress(
    board_with_pieces: Callable[[Placements], Board],
) -> Callable[..., Game]:
    """A game that skipped the setup phase. Call the inner function with the pieces on the board and who is to move."""

    def _create_game(
        placements: Placements, player_to_move: Player = Player.WHITE
    ) -> Game:
        return Game(
            board=board_with_pieces(placements),
            status=Status.IN_PROGRESS,
            player_to_move=player_to_move,
        )

    return _create_game

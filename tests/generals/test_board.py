"""Unit tests for /src/generals/board.py"""

from typing import Callable

import pytest

from src.core.exceptions import InvalidCoordinateError
from src.generals.board import Board
from src.generals.moves import Move, MoveType
from src.generals.pieces import Piece, Player, Rank
from src.generals.square import Square

WHITE_FLAG = Piece(Player.WHITE, Rank.FLAG)
WHITE_SPY = Piece(Player.WHITE, Rank.SPY)
BLACK_FLAG = Piece(Player.BLACK, Rank.FLAG)
BLACK_PRIVATE = Piece(Player.BLACK, Rank.PRIVATE)


# -- CREATION / PLACEMENT ---
def test_new_board_is_empty() -> None:
    board = Board.empty()
    assert all(board.is_empty(square) for square in Square.all_squares())


def test_placing_a_piece() -> None:
    """Placing a piece at a square then reading the square returns that exact piece"""
    board = Board.empty()
    a1 = Square.from_label("A1")
    board.place_piece(WHITE_FLAG, a1)
    assert board.piece(a1) == WHITE_FLAG
    assert not board.is_empty(a1)


def test_placing_overwrites_without_residue() -> None:
    """Setup commands may target the same square more than once: the last one wins, nothing is left behind elsewhere"""
    board = Board.empty()
    c3 = Square.from_label("C3")
    board.place_piece(WHITE_FLAG, c3)
    board.place_piece(BLACK_PRIVATE, c3)
    assert board.piece(c3) == BLACK_PRIVATE
    assert board.position == {c3: BLACK_PRIVATE}


def test_removing_a_piece(board_with_pieces: Callable[..., Board]) -> None:
    board = board_with_pieces({"D4": WHITE_SPY})
    board.remove_piece(Square.from_label("D4"))
    assert board.is_empty(Square.from_label("D4"))


def test_removing_from_empty_square_is_fine() -> None:
    board = Board.empty()
    board.remove_piece(Square.from_label("D4"))
    assert board.position == {}


@pytest.mark.parametrize("square", [Square(9, 0), Square(0, 8), Square(-1, 3)])
def test_squares_off_the_board(square: Square) -> None:
    board = Board.empty()
    with pytest.raises(InvalidCoordinateError):
        board.place_piece(WHITE_FLAG, square)
    with pytest.raises(InvalidCoordinateError):
        board.piece(square)


# -- MOVING ---
def test_move_piece(board_with_pieces: Callable[..., Board]) -> None:
    board = board_with_pieces({"A1": WHITE_SPY})
    board.move_piece(Move.from_labels("A1", "B2"))
    assert board.is_empty(Square.from_label("A1"))
    assert board.piece(Square.from_label("B2")) == WHITE_SPY


def test_move_piece_from_empty_square() -> None:
    board = Board.empty()
    with pytest.raises(InvalidCoordinateError):
        board.move_piece(Move.from_labels("A1", "A2"))


@pytest.mark.parametrize(
    "placements, expected",
    [
        # nothing to move
        ({}, MoveType.INVALID),
        ({"A2": BLACK_PRIVATE}, MoveType.INVALID),
        # own piece in the way
        ({"A1": WHITE_SPY, "A2": WHITE_FLAG}, MoveType.INVALID),
        # empty target
        ({"A1": WHITE_SPY}, MoveType.MOVE),
        # opponent's piece
        ({"A1": WHITE_SPY, "A2": BLACK_PRIVATE}, MoveType.CHALLENGE),
        ({"A1": BLACK_PRIVATE, "A2": WHITE_SPY}, MoveType.CHALLENGE),
    ],
)
def test_move_type(
    board_with_pieces: Callable[..., Board],
    placements: dict[str, Piece],
    expected: MoveType,
) -> None:
    board = board_with_pieces(placements)
    assert board.move_type(Move.from_labels("A1", "A2")) == expected


# -- LOOKUPS ---
def test_locating_flags(board_with_pieces: Callable[..., Board]) -> None:
    board = board_with_pieces({"E1": WHITE_FLAG, "C5": WHITE_SPY})
    flags = board.flags()
    assert flags[Player.WHITE] == [Square.from_label("E1")]
    assert flags[Player.BLACK] == []
    assert board.has_piece(WHITE_FLAG)
    assert not board.has_piece(BLACK_FLAG)

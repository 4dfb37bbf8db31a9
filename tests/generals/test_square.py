"""Unit tests for /src/generals/square.py"""

from string import ascii_uppercase

import pytest

from src.core.exceptions import InvalidCoordinateError
from src.generals.square import BOARD_DIMENSIONS, Square

ALL_LABELS = [
    (column, row, f"{ascii_uppercase[column]}{row + 1}")
    for column in range(9)
    for row in range(8)
]


@pytest.mark.parametrize("column, row, label", ALL_LABELS)
def test_creating_from_label(column: int, row: int, label: str) -> None:
    """Simply checks if the label 'A1' indeed maps to column 0, row 0, etc."""
    square = Square.from_label(label)
    assert square.column == column
    assert square.row == row


@pytest.mark.parametrize("column, row, label", ALL_LABELS)
def test_label_roundtrip(column: int, row: int, label: str) -> None:
    assert Square.from_label(label).to_label() == label


@pytest.mark.parametrize(
    "label",
    ["J1", "A9", "A0", "a1", "1A", "A", "A10", "", " A1", "AA"],
)
def test_invalid_labels_are_rejected(label: str) -> None:
    """No clamping or guessing: anything outside A-I / 1-8 is an error."""
    with pytest.raises(InvalidCoordinateError):
        Square.from_label(label)


def test_square_within_bounds() -> None:
    """happy case: squares within the dimensions of the board"""
    for column in range(BOARD_DIMENSIONS[0]):
        for row in range(BOARD_DIMENSIONS[1]):
            assert Square(column, row).is_within_bounds()


@pytest.mark.parametrize("column, row", [(9, 0), (0, 8), (9, 8), (-1, 0), (0, -1)])
def test_square_out_of_bounds(column: int, row: int) -> None:
    """Out of bounds squares have no label"""
    square = Square(column, row)
    assert not square.is_within_bounds()
    assert square.to_label() is None


def test_all_squares() -> None:
    """72 distinct squares, starting from A1"""
    squares = list(Square.all_squares())
    assert len(squares) == 72
    assert len(set(squares)) == 72
    assert squares[0] == Square.from_label("A1")
    assert squares[-1] == Square.from_label("I8")

"""
A square on the board, and the codec between square labels (A1 - I8) and indices.

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from string import ascii_uppercase
from typing import Iterator, Optional

from src.core.exceptions import InvalidCoordinateError

# The board has 9 columns (A-I) and 8 rows (1-8)
BOARD_DIMENSIONS = (9, 8)

LABEL_PATTERN = re.compile(r"[A-I][1-8]")


@dataclass(frozen=True)
class Square:
    column: int
    row: int

    @classmethod
    def from_label(cls, label: str) -> Square:
        """Label notation: 'A1' - 'I8' get converted to (0,0) - (8,7)"""
        if not LABEL_PATTERN.fullmatch(label):
            raise InvalidCoordinateError(
                f"Cannot interpret {label!r} as a square. Use a letter A-I followed by a digit 1-8."
            )
        column = ascii_uppercase.index(label[0])
        row = int(label[1]) - 1
        return cls(column, row)

    def to_label(self) -> Optional[str]:
        if not self.is_within_bounds():
            return None
        return f"{ascii_uppercase[self.column]}{self.row + 1}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.column < BOARD_DIMENSIONS[0]) and (
            0 <= self.row < BOARD_DIMENSIONS[1]
        )

    @staticmethod
    def all_squares() -> Iterator[Square]:
        """Every square on the board, row by row starting from A1."""
        for row in range(BOARD_DIMENSIONS[1]):
            for column in range(BOARD_DIMENSIONS[0]):
                yield Square(column, row)

    def __str__(self) -> str:
        return self.to_label() or f"({self.column}, {self.row})"

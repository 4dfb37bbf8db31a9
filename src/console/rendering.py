"""
Text art for the board.

Row 8 is drawn at the top, row 1 at the bottom, columns A to I from left to right.
Pieces show their rank code: upper case for White, lower case for Black (same convention as FEN strings in chess).
"""

from string import ascii_uppercase

from src.generals.board import Board
from src.generals.pieces import Piece, Player
from src.generals.square import BOARD_DIMENSIONS, Square

CELL_WIDTH = 5


def render_board(board: Board) -> str:
    num_columns, num_rows = BOARD_DIMENSIONS
    header = "   " + "".join(
        ascii_uppercase[column].center(CELL_WIDTH + 1) for column in range(num_columns)
    )
    separator = "  +" + "+".join(["-" * CELL_WIDTH] * num_columns) + "+"

    lines = [header, separator]
    for row in range(num_rows - 1, -1, -1):
        cells = [
            _render_cell(board.piece(Square(column, row)))
            for column in range(num_columns)
        ]
        lines.append(f"{row + 1} |" + "|".join(cells) + f"| {row + 1}")
        lines.append(separator)
    lines.append(header)
    return "\n".join(lines)


def _render_cell(piece: Piece | None) -> str:
    if piece is None:
        return " " * CELL_WIDTH
    code = piece.rank.code if piece.owner == Player.WHITE else piece.rank.code.lower()
    return code.center(CELL_WIDTH)

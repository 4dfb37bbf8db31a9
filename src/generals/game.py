"""
The Game class is the entrypoint into the domain layer for the service layer.
It owns the board, whose turn it is and the status of the game, and it is responsible for
applying placements and moves, resolving challenges and checking the win conditions.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Self

from src.core.exceptions import GameStateError, IllegalMoveError, NotYourTurnError
from src.generals.board import Board
from src.generals.combat import ChallengeResult, resolve_challenge
from src.generals.commands import MovePiece, PlacePiece
from src.generals.moves import Move, MoveReport, MoveType
from src.generals.pieces import Piece, Player
from src.generals.square import BOARD_DIMENSIONS

logger = logging.getLogger(__name__)

# Row index a Flag has to reach to win the game
FLAG_GOAL_ROW: dict[Player, int] = {
    Player.WHITE: BOARD_DIMENSIONS[1] - 1,
    Player.BLACK: 0,
}


class Status(Enum):
    PRE_SETUP = auto()
    SETUP = auto()
    IN_PROGRESS = auto()
    GAME_OVER = auto()


@dataclass
class Game:
    board: Board = field(default_factory=Board.empty)
    status: Status = Status.PRE_SETUP
    player_to_move: Player = Player.WHITE
    winner: Optional[Player] = None

    @classmethod
    def new_game(cls) -> Self:
        return cls()

    # --- STATUS TRANSITIONS ---
    def start(self) -> None:
        """Leave the PRE_SETUP phase. (The caller is expected to show the help text.)"""
        self._assert_status(Status.PRE_SETUP)
        self._change_status(Status.SETUP)

    def begin(self) -> None:
        """
        Players are done setting up the board by hand.
        Both Flags must be on the board, otherwise the game would be decided before the first move.
        """
        self._assert_status(Status.SETUP)
        missing = [
            player.display_name
            for player, squares in self.board.flags().items()
            if not squares
        ]
        if missing:
            raise GameStateError(
                f"Cannot start the game. No Flag placed for: {', '.join(missing)}."
            )
        self._change_status(Status.IN_PROGRESS)

    def terminate(self) -> None:
        if self.status == Status.GAME_OVER:
            raise GameStateError("Game is already over.")
        self._change_status(Status.GAME_OVER)

    # --- SETTING UP ---
    def place_piece(self, command: PlacePiece) -> None:
        self._assert_status(Status.SETUP, Status.IN_PROGRESS)
        piece = Piece(command.player, command.rank)
        self.board.place_piece(piece, command.square)
        logger.debug("placed %s on %s", piece, command.square)

    def load_setup(self, placements: list[PlacePiece]) -> None:
        """Replay a complete setup. Reaching the end of it starts the game."""
        self._assert_status(Status.SETUP, Status.IN_PROGRESS)
        for placement in placements:
            self.place_piece(placement)
        self._change_status(Status.IN_PROGRESS)

    # --- PLAYING ---
    def make_move(self, command: MovePiece) -> MoveReport:
        """
        Attempt to make a move
        -----

        1. pieces only move a single square (diagonals included)
        2. you can only move your own piece
        3. you cannot move onto your own piece
        4. move onto an empty square --> simply relocate
        5. move onto an opponent's piece --> challenge (see combat.py)
        6. pass the turn to the opponent
        """
        if self.status != Status.IN_PROGRESS:
            raise GameStateError(f"Game is not in progress. status: {self.status.name}")

        move = command.move
        if not move.is_single_step():
            raise IllegalMoveError(
                f"Move not allowed: {move}. Pieces move a single square at the time."
            )

        moving_piece = self.board.piece(move.from_square)
        if moving_piece is None:
            raise IllegalMoveError(f"Move not allowed: {move}. There is no piece to move.")
        if moving_piece.owner != self.player_to_move:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for {self.player_to_move.display_name} to make a move first."
            )

        move_type = self.board.move_type(move)
        if move_type == MoveType.INVALID:
            raise IllegalMoveError(
                f"Move not allowed: {move}. The square is occupied by your own piece."
            )

        # Store move info before update
        report = self._create_move_report(move, move_type)

        self._update_board(report)
        self._switch_turn()
        return report

    def determine_result(self) -> Optional[Player]:
        """
        Performs checks to see if game has ended and changes status accordingly.
        ---

        In order, the first check that finds a winner decides:
        1. Only one of the Flags is left on the board --> its owner wins.
        2. White's Flag reached the last row --> White wins.
        3. Black's Flag reached the first row --> Black wins.
        """
        if self.status != Status.IN_PROGRESS:
            return self.winner

        winner = self._flag_capture_winner() or self._flag_crossing_winner()
        if winner is not None:
            self.winner = winner
            self._change_status(Status.GAME_OVER)
        return winner

    def status_message(self) -> Optional[str]:
        """What the players need to do next (or who won)."""
        match self.status:
            case Status.PRE_SETUP:
                return None
            case Status.SETUP:
                return "Please set up the board."
            case Status.IN_PROGRESS:
                return f"{self.player_to_move.display_name} to move."
            case Status.GAME_OVER:
                return f"{self.winner.display_name} wins!" if self.winner else None

    # -- PRIVATE HELPERS ---
    def _assert_status(self, *allowed: Status) -> None:
        if self.status not in allowed:
            raise GameStateError(
                f"Not allowed while the game status is {self.status.name}."
            )

    def _change_status(self, new_status: Status) -> None:
        logger.debug("status change %s -> %s", self.status.name, new_status.name)
        self.status = new_status

    def _switch_turn(self) -> None:
        self.player_to_move = self.player_to_move.opponent

    def _create_move_report(self, move: Move, move_type: MoveType) -> MoveReport:
        """Snapshot of the pieces involved, before the updates are done."""
        moving_piece = self.board.piece(move.from_square)
        # for the type checker: the move type already guarantees a piece on the starting square
        assert moving_piece is not None

        if move_type == MoveType.MOVE:
            return MoveReport(move, moving_piece, move_type)

        defending_piece = self.board.piece(move.to_square)
        assert defending_piece is not None
        return MoveReport(
            move,
            moving_piece,
            move_type,
            defending_piece=defending_piece,
            challenge_result=resolve_challenge(moving_piece, defending_piece),
        )

    def _update_board(self, report: MoveReport) -> None:
        move = report.move
        match report.challenge_result:
            case None | ChallengeResult.CHALLENGER_WINS:
                self.board.move_piece(move)
            case ChallengeResult.CHALLENGER_LOSES:
                self.board.remove_piece(move.from_square)
            case ChallengeResult.DRAW:
                self.board.remove_piece(move.from_square)
                self.board.remove_piece(move.to_square)

    def _flag_capture_winner(self) -> Optional[Player]:
        remaining = [player for player, squares in self.board.flags().items() if squares]
        if len(remaining) == 1:
            return remaining[0]
        return None

    def _flag_crossing_winner(self) -> Optional[Player]:
        flags = self.board.flags()
        for player in (Player.WHITE, Player.BLACK):
            if any(square.row == FLAG_GOAL_ROW[player] for square in flags[player]):
                return player
        return None
"""Orchestration of one game: from the player's raw input to the domain logic and back to the screen."""

import logging
from typing import Callable, assert_never

from src.core.exceptions import GameError
from src.generals.board import Board
from src.generals.combat import ChallengeResult
from src.generals.commands import (
    Command,
    Invalid,
    LoadSetupFile,
    MovePiece,
    PlacePiece,
    ShowHelp,
    StartGame,
    Terminate,
    interpret,
    parse_setup,
)
from src.generals.game import Game, Status
from src.generals.moves import MoveReport, MoveType
from src.services.io import CommandSource, OutputSink, SetupSource

logger = logging.getLogger(__name__)

BoardRenderer = Callable[[Board], str]

HELP_TEXT = """\
Commands:
  SET <W|B> <square> <rank>  place a piece, e.g. 'SET W A1 FLG'
  MV <square> <square>       move a piece one square, e.g. 'MV A1 A2'
  loadsample                 set up both armies from the sample setup and start playing
  ready                      done setting up by hand, start playing
  help                       show these instructions
  exit                       quit the game
Squares: A1 - I8. Ranks: 5SG 4SG 3SG 2SG 1SG COL LTC MAJ CPT 1LT 2LT SGT PVT SPY FLG
"""

CHALLENGE_OUTCOMES: dict[ChallengeResult, str] = {
    ChallengeResult.CHALLENGER_WINS: "{challenger} eliminates {target}.",
    ChallengeResult.CHALLENGER_LOSES: "{challenger} is eliminated by {target}.",
    ChallengeResult.DRAW: "{challenger} and {target} eliminate each other.",
}


class GeneralsService:
    """Runs the turn loop: draw the board, read a command, apply it, determine and show the result."""

    def __init__(
        self,
        game: Game,
        source: CommandSource,
        out: OutputSink,
        setup_source: SetupSource,
        render: BoardRenderer,
    ) -> None:
        self.game = game
        self.source = source
        self.out = out
        self.setup_source = setup_source
        self.render = render
        # Most recent command received (no need to keep a history)
        self.last_command: Command | None = None

    def run(self) -> None:
        """Play until someone wins or the players exit."""
        self.start()
        while self.main_loop():
            self.draw_board()
            self.get_command()
            self.determine_result()
            self.show_result()
        self.quit()

    # -- Turn loop steps --
    def start(self) -> None:
        logger.debug("starting game.")
        self.game.start()
        self.out.write(HELP_TEXT)

    def main_loop(self) -> bool:
        return self.game.status != Status.GAME_OVER

    def draw_board(self) -> None:
        logger.debug("drawing board.")
        self.out.write(self.render(self.game.board) + "\n")

    def get_command(self) -> None:
        """Fetch the next command and apply it to the game."""
        logger.debug("fetching player command.")
        self.out.write("Enter command: ")
        command = interpret(self.source.read())
        self.last_command = command
        self.handle(command)

    def determine_result(self) -> None:
        logger.debug("determining result.")
        winner = self.game.determine_result()
        if winner is not None:
            logger.debug("%s won the game.", winner.display_name)

    def show_result(self) -> None:
        logger.debug("showing result.")
        message = self.game.status_message()
        if message:
            self._say(message)

    def quit(self) -> None:
        logger.debug("quitting game.")

    # -- Command handling --
    def handle(self, command: Command) -> None:
        """Apply a single command. Rejected commands are reported to the player and leave the game unchanged."""
        try:
            self._apply(command)
        except GameError as error:
            logger.info("command %r rejected: %s", command, error)
            self._say(str(error))

    def _apply(self, command: Command) -> None:
        match command:
            case ShowHelp():
                self.out.write(HELP_TEXT)
            case Terminate():
                logger.debug("exiting game loop.")
                self.game.terminate()
            case LoadSetupFile():
                self._load_setup()
            case StartGame():
                self.game.begin()
            case PlacePiece():
                self.game.place_piece(command)
            case MovePiece():
                report = self.game.make_move(command)
                self._say(describe_move(report))
            case Invalid():
                self._say(f"Invalid command. {command.reason}")
            case _:
                assert_never(command)

    def _load_setup(self) -> None:
        """Read and check the whole setup before touching the board."""
        lines = self.setup_source.read_lines()
        placements = parse_setup(lines)
        self.game.load_setup(placements)
        logger.debug("loaded setup with %d pieces.", len(placements))

    def _say(self, text: str) -> None:
        self.out.write(text + "\n")


def describe_move(report: MoveReport) -> str:
    """Human readable summary of what a move did."""
    if report.move_type == MoveType.MOVE or report.challenge_result is None:
        return f"{report.moving_piece} moved {report.move}."

    template = CHALLENGE_OUTCOMES[report.challenge_result]
    return template.format(challenger=report.moving_piece, target=report.defending_piece)

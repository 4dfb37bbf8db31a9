"""
Command models, and the interpreter that turns a raw line of text into one of them.

Commands understood (tokens separated by any amount of whitespace):

* help                          --> ShowHelp
* exit                          --> Terminate
* loadsample                    --> LoadSetupFile
* ready                         --> StartGame
* SET <W|B> <square> <rank>     --> PlacePiece   e.g. "SET W A1 FLG"
* MV <square> <square>          --> MovePiece    e.g. "MV A1 A2"

Anything else becomes an Invalid command carrying the reason.
"""

import re
from typing import Any, Iterable, Union

from pydantic import BaseModel, ConfigDict, field_validator

from src.core.exceptions import GameError, InvalidCommandError, InvalidSetupError
from src.generals.moves import Move
from src.generals.pieces import Player, Rank
from src.generals.square import Square

# What an input source hands over when it failed to read a line
INVALID_SENTINEL = "invalid"

SET_PATTERN = re.compile(
    r"^SET (?P<player>[WB]) (?P<square>[A-I][1-8]) (?P<rank>\S{3})$"
)
MOVE_PATTERN = re.compile(r"^MV (?P<from_square>[A-I][1-8]) (?P<to_square>[A-I][1-8])$")


# --- COMMAND MODELS ---
class ShowHelp(BaseModel):
    model_config = ConfigDict(frozen=True)


class Terminate(BaseModel):
    model_config = ConfigDict(frozen=True)


class LoadSetupFile(BaseModel):
    model_config = ConfigDict(frozen=True)


class StartGame(BaseModel):
    """Player(s) are done setting up the board."""

    model_config = ConfigDict(frozen=True)


class PlacePiece(BaseModel):
    model_config = ConfigDict(frozen=True)

    player: Player
    square: Square
    rank: Rank

    @field_validator("player", mode="before")
    @classmethod
    def validate_player(cls, value: Any) -> Any:
        if isinstance(value, str):
            if value not in {player.value for player in Player}:
                raise InvalidCommandError(
                    f"Unknown player {value!r}. Pick one from {','.join(p.value for p in Player)}"
                )
            return Player(value)
        return value

    @field_validator("square", mode="before")
    @classmethod
    def validate_square(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Square.from_label(value)
        return value

    @field_validator("rank", mode="before")
    @classmethod
    def validate_rank(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Rank.from_code(value)
        return value


class MovePiece(BaseModel):
    model_config = ConfigDict(frozen=True)

    from_square: Square
    to_square: Square

    @field_validator(*["from_square", "to_square"], mode="before")
    @classmethod
    def validate_square(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Square.from_label(value)
        return value

    @property
    def move(self) -> Move:
        return Move(self.from_square, self.to_square)


class Invalid(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw: str
    reason: str


Command = Union[
    ShowHelp, Terminate, LoadSetupFile, StartGame, PlacePiece, MovePiece, Invalid
]

# Exact-literal commands get matched before the pattern commands
LITERAL_COMMANDS: dict[str, type[Command]] = {
    "help": ShowHelp,
    "exit": Terminate,
    "loadsample": LoadSetupFile,
    "ready": StartGame,
}


# --- INTERPRETER ---
def normalize(raw: str) -> str:
    """Collapse runs of whitespace into single spaces and trim both ends."""
    return " ".join(raw.split())


def interpret(raw: str) -> Command:
    line = normalize(raw)

    if line in LITERAL_COMMANDS:
        return LITERAL_COMMANDS[line]()

    set_match = SET_PATTERN.match(line)
    move_match = MOVE_PATTERN.match(line)
    try:
        if set_match:
            return PlacePiece(**set_match.groupdict())
        if move_match:
            return MovePiece(**move_match.groupdict())
    except GameError as error:
        return Invalid(raw=line, reason=str(error))

    return Invalid(
        raw=line, reason="Unrecognised command. Type 'help' for the list of commands."
    )


def parse_setup(lines: Iterable[str]) -> list[PlacePiece]:
    """
    Parse the contents of a setup ("gggn") file.
    ---

    * One command per line, applied in file order.
    * Blank lines and lines starting with '#' are skipped.
    * Every other line must be a SET command.

    The whole file is checked before returning, so nothing gets applied from a broken file.
    """
    placements: list[PlacePiece] = []
    for line_number, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        command = interpret(stripped)
        if not isinstance(command, PlacePiece):
            reason = command.reason if isinstance(command, Invalid) else "not a SET command"
            raise InvalidSetupError(
                f"Setup line {line_number}: {stripped!r} is invalid ({reason})."
            )
        placements.append(command)
    return placements

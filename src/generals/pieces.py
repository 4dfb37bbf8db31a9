"""Defines the players, the ranks of the pieces and the pieces themselves"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Self

from src.core.exceptions import InvalidCommandError


class Player(Enum):
    """Values are the letters used for the player in SET commands."""

    WHITE = "W"
    BLACK = "B"

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @property
    def opponent(self) -> "Player":
        return Player.BLACK if self == Player.WHITE else Player.WHITE


class Rank(Enum):
    GENERAL_5_STAR = auto()
    GENERAL_4_STAR = auto()
    GENERAL_3_STAR = auto()
    GENERAL_2_STAR = auto()
    GENERAL_1_STAR = auto()
    COLONEL = auto()
    LIEUTENANT_COLONEL = auto()
    MAJOR = auto()
    CAPTAIN = auto()
    FIRST_LIEUTENANT = auto()
    SECOND_LIEUTENANT = auto()
    SERGEANT = auto()
    PRIVATE = auto()
    SPY = auto()
    FLAG = auto()

    @classmethod
    def from_code(cls, code: str) -> Self:
        if code not in CODE_TO_RANK:
            raise InvalidCommandError(
                f"Unknown rank code {code!r}. Pick one from {','.join(CODE_TO_RANK)}"
            )
        return CODE_TO_RANK[code]

    @property
    def code(self) -> str:
        return RANK_TO_CODE[self]


CODE_TO_RANK: dict[str, Rank] = {
    "5SG": Rank.GENERAL_5_STAR,
    "4SG": Rank.GENERAL_4_STAR,
    "3SG": Rank.GENERAL_3_STAR,
    "2SG": Rank.GENERAL_2_STAR,
    "1SG": Rank.GENERAL_1_STAR,
    "COL": Rank.COLONEL,
    "LTC": Rank.LIEUTENANT_COLONEL,
    "MAJ": Rank.MAJOR,
    "CPT": Rank.CAPTAIN,
    "1LT": Rank.FIRST_LIEUTENANT,
    "2LT": Rank.SECOND_LIEUTENANT,
    "SGT": Rank.SERGEANT,
    "PVT": Rank.PRIVATE,
    "SPY": Rank.SPY,
    "FLG": Rank.FLAG,
}

RANK_TO_CODE: dict[Rank, str] = {value: key for key, value in CODE_TO_RANK.items()}


# NOTE: Spy and Flag values are placeholders. Combat involving them never compares power.
RANK_POWER: dict[Rank, int] = {
    Rank.GENERAL_5_STAR: 12,
    Rank.GENERAL_4_STAR: 11,
    Rank.GENERAL_3_STAR: 10,
    Rank.GENERAL_2_STAR: 9,
    Rank.GENERAL_1_STAR: 8,
    Rank.COLONEL: 7,
    Rank.LIEUTENANT_COLONEL: 6,
    Rank.MAJOR: 5,
    Rank.CAPTAIN: 4,
    Rank.FIRST_LIEUTENANT: 3,
    Rank.SECOND_LIEUTENANT: 2,
    Rank.SERGEANT: 1,
    Rank.PRIVATE: 0,
    Rank.SPY: 99,
    Rank.FLAG: -1,
}


@dataclass(frozen=True)
class Piece:
    owner: Player
    rank: Rank

    @property
    def power(self) -> int:
        return RANK_POWER[self.rank]

    def __str__(self) -> str:
        return f"{self.owner.display_name} {self.rank.code}"

"""
Combat rules: what happens when a piece moves onto a square held by an opponent's piece.

Rules are checked in a fixed order, the first rule that applies decides the outcome:

1. A Flag challenging only beats the opponent's Flag.
2. Pieces of the same rank eliminate each other.
3. A Spy beats everything, except for a Private.
4. A Private only beats a Spy.
5. Any other piece loses against a Spy.
6. Otherwise, the piece with the higher power wins.
"""

from enum import Enum, auto

from src.generals.pieces import Piece, Rank

SPECIAL_RANKS: frozenset[Rank] = frozenset({Rank.FLAG, Rank.SPY, Rank.PRIVATE})


class ChallengeResult(Enum):
    CHALLENGER_WINS = auto()
    CHALLENGER_LOSES = auto()
    DRAW = auto()


def is_basic(rank: Rank) -> bool:
    """Officers and the Sergeant: combat between them is decided by power alone."""
    return rank not in SPECIAL_RANKS


def resolve_challenge(challenger: Piece, target: Piece) -> ChallengeResult:
    attacker = challenger.rank
    defender = target.rank

    if attacker == Rank.FLAG:
        return _wins_if(defender == Rank.FLAG)

    if attacker == defender:
        return ChallengeResult.DRAW

    if attacker == Rank.SPY:
        return _wins_if(defender != Rank.PRIVATE)

    if attacker == Rank.PRIVATE:
        return _wins_if(defender == Rank.SPY)

    if defender == Rank.SPY:
        return ChallengeResult.CHALLENGER_LOSES

    # basic attacker against a basic piece, a Private or a Flag.
    return _wins_if(challenger.power > target.power)


def _wins_if(condition: bool) -> ChallengeResult:
    return (
        ChallengeResult.CHALLENGER_WINS
        if condition
        else ChallengeResult.CHALLENGER_LOSES
    )

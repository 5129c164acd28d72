"""Game type descriptors."""

from enum import Enum
from dataclasses import dataclass


class GameType(str, Enum):
    HOLDEM = "holdem"
    OMAHA = "omaha"
    STUD = "stud"
    FIVE_CARD_DRAW = "five_card_draw"
    TRIPLE_DRAW = "triple_draw"

    @property
    def max_streets(self) -> int:
        """Number of betting rounds a hand of this game can have."""
        return {
            "holdem": 4,
            "omaha": 4,
            "stud": 5,
            "five_card_draw": 2,
            "triple_draw": 4,
        }[self.value]

    @property
    def label(self) -> str:
        return {
            "holdem": "Hold'em",
            "omaha": "Omaha",
            "stud": "7 Card Stud",
            "five_card_draw": "5 Card Draw",
            "triple_draw": "Triple Draw",
        }[self.value]


class LimitType(str, Enum):
    NO_LIMIT = "no_limit"
    POT_LIMIT = "pot_limit"
    FIXED_LIMIT = "fixed_limit"

    @property
    def short(self) -> str:
        return {"no_limit": "NL", "pot_limit": "PL", "fixed_limit": "FL"}[self.value]


@dataclass(frozen=True)
class Game:
    """The game a hand was played in. Hashable so it can key per-game stats."""
    type: GameType = GameType.HOLDEM
    limit: LimitType = LimitType.NO_LIMIT
    currency: str = ""
    small_blind: int = 0
    big_blind: int = 0
    max_players: int = 0

    @property
    def max_streets(self) -> int:
        return self.type.max_streets

    def __str__(self) -> str:
        parts = [f"{self.limit.short} {self.type.label}"]
        if self.big_blind:
            parts.append(f"{self.small_blind}/{self.big_blind}")
        if self.currency:
            parts.append(self.currency)
        return " ".join(parts)

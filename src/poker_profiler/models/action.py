"""Action models."""

from enum import Enum
from dataclasses import dataclass


class ActionType(str, Enum):
    """Every kind of action a parsed hand can contain, in report order."""
    FOLD = "fold"
    CHECK = "check"
    CALL = "call"
    BET = "bet"
    RAISE = "raise"
    POST = "post"
    BRING_IN = "bring_in"
    DRAW = "draw"
    STAND_PAT = "stand_pat"
    SHOW = "show"
    MUCK = "muck"
    UNCALL = "uncall"
    COLLECT = "collect"

    @property
    def is_aggressive(self) -> bool:
        return self in (ActionType.BET, ActionType.RAISE)

    @property
    def moves_money_in(self) -> bool:
        """False for blinds/antes and for money coming back out of the pot."""
        return self not in (ActionType.POST, ActionType.UNCALL, ActionType.COLLECT)

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ")


@dataclass
class PlayerAction:
    """A single player action on a street."""
    player_name: str
    seat: int
    action_type: ActionType
    amount: int = 0
    all_in: bool = False

    def __str__(self) -> str:
        if self.amount <= 0:
            return f"{self.player_name} {self.action_type.display_name}"
        suffix = " (all-in)" if self.all_in else ""
        return f"{self.player_name} {self.action_type.display_name} {self.amount}{suffix}"

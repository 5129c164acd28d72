"""Hand and Seat - a single already-parsed poker hand."""

from dataclasses import dataclass, field
from typing import List, Optional

from poker_profiler.models.card import Card
from poker_profiler.models.action import PlayerAction
from poker_profiler.models.game import Game


@dataclass
class Seat:
    """One player's participation in a hand."""
    number: int
    name: str
    chips: int = 0
    # amount put in pot
    pip: int = 0
    won: int = 0
    showdown: bool = False
    final_hole_cards: List[Card] = field(default_factory=list)

    @property
    def hole_cards_str(self) -> str:
        return " ".join(str(c) for c in self.final_hole_cards)


@dataclass
class Hand:
    """Complete record of a single poker hand."""

    hand_id: str = ""
    game: Game = field(default_factory=Game)
    table_name: str = ""
    seats: List[Seat] = field(default_factory=list)
    board: List[Card] = field(default_factory=list)
    rake: int = 0
    # actions per betting round, in order
    streets: List[List[PlayerAction]] = field(default_factory=list)

    @property
    def winners(self) -> List[Seat]:
        return [s for s in self.seats if s.won > 0]

    @property
    def board_str(self) -> str:
        return " ".join(str(c) for c in self.board)

    @property
    def pot_total(self) -> int:
        return sum(s.pip for s in self.seats)

    def seat_by_name(self, name: str) -> Optional[Seat]:
        for s in self.seats:
            if s.name == name:
                return s
        return None

    def seat_by_number(self, number: int) -> Optional[Seat]:
        for s in self.seats:
            if s.number == number:
                return s
        return None

    def has_seat(self, seat: Seat) -> bool:
        return any(s is seat for s in self.seats)

    def summary(self) -> str:
        parts = [f"Hand #{self.hand_id}", str(self.game)]
        if self.board:
            parts.append(f"Board: {self.board_str}")
        parts.append(f"Pot: {self.pot_total}")
        if self.rake:
            parts.append(f"Rake: {self.rake}")
        return " | ".join(parts)

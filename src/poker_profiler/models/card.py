"""Cards as they appear on boards and in shown hole cards."""

from dataclasses import dataclass
from enum import Enum
from typing import List

RANK_ORDER = "23456789TJQKA"

_SUIT_GLYPHS = {"h": "♥", "d": "♦", "c": "♣", "s": "♠"}


class Suit(str, Enum):
    HEARTS = "h"
    DIAMONDS = "d"
    CLUBS = "c"
    SPADES = "s"

    @classmethod
    def from_symbol(cls, s: str) -> "Suit":
        """Letter in either case, or the suit glyph."""
        for letter, glyph in _SUIT_GLYPHS.items():
            if s == glyph:
                return cls(letter)
        try:
            return cls(s.lower())
        except ValueError:
            raise ValueError(f"Unknown suit: {s}") from None

    @property
    def symbol(self) -> str:
        return _SUIT_GLYPHS[self.value]


class Rank(str, Enum):
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "T"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    @property
    def numeric_value(self) -> int:
        # deuce is 2, ace is 14
        return RANK_ORDER.index(self.value) + 2

    @classmethod
    def from_char(cls, c: str) -> "Rank":
        try:
            return cls.TEN if c == "10" else cls(c.upper())
        except ValueError:
            raise ValueError(f"Unknown rank: {c}") from None


@dataclass(frozen=True)
class Card:
    """A single playing card. Renders as '7h' in repr and '7♥' in str."""

    rank: Rank
    suit: Suit

    @classmethod
    def parse(cls, s: str) -> "Card":
        """Rank then suit: 'Ah', 'td', '10s', 'K♠'."""
        text = s.strip()
        if len(text) not in (2, 3):
            raise ValueError(f"Cannot parse card: {s}")
        return cls(Rank.from_char(text[:-1]), Suit.from_symbol(text[-1]))

    @classmethod
    def parse_many(cls, s: str) -> List["Card"]:
        return [cls.parse(part) for part in s.split()]

    def __repr__(self) -> str:
        return self.rank.value + self.suit.value

    def __str__(self) -> str:
        return self.rank.value + self.suit.symbol

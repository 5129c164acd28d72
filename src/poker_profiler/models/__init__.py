"""Data models for poker profiler."""

from poker_profiler.models.card import Card, Rank, Suit
from poker_profiler.models.action import ActionType, PlayerAction
from poker_profiler.models.game import Game, GameType, LimitType
from poker_profiler.models.hand import Hand, Seat

__all__ = [
    "Card", "Rank", "Suit",
    "ActionType", "PlayerAction",
    "Game", "GameType", "LimitType",
    "Hand", "Seat",
]

"""Route played hands to per-player, per-game statistics."""

import logging
from typing import Dict, Iterable, List, Optional

from poker_profiler.models.game import Game
from poker_profiler.models.hand import Hand
from poker_profiler.analysis.player_stats import PlayerGameStats, PlayerInfo

logger = logging.getLogger(__name__)


class StatsCalculator:
    """Accumulate statistics for every player seen in a stream of hands.

    Each seat of each hand is added to the statistics of that seat's player
    for the hand's game. Hands must be added one at a time; a calculator is
    not safe to share between threads while hands are being added.
    """

    def __init__(self):
        self.players: Dict[str, PlayerInfo] = {}
        self.hand_count = 0

    def get_player(self, name: str) -> PlayerInfo:
        if name not in self.players:
            self.players[name] = PlayerInfo(name)
        return self.players[name]

    def add_hand(self, hand: Hand) -> None:
        """Add a single hand for every seat in it."""
        for seat in hand.seats:
            stats = self.get_player(seat.name).game_stats(hand.game)
            stats.add(hand, seat)
        self.hand_count += 1
        logger.debug("Added hand %s (%s) with %d seats",
                     hand.hand_id, hand.game, len(hand.seats))

    def calculate(self, hands: Iterable[Hand]) -> Dict[str, PlayerInfo]:
        """Add a batch of hands and return the players seen so far.

        Args:
            hands: Parsed hands, in the order they were played.

        Returns:
            Mapping of player name to PlayerInfo.
        """
        added = 0
        for hand in hands:
            self.add_hand(hand)
            added += 1
        logger.info("Calculated stats for %d hands, %d players",
                    added, len(self.players))
        return self.players

    def player_games(self, game: Optional[Game] = None,
                     min_hands: int = 0) -> List[PlayerGameStats]:
        """All accumulated stats, most hands first.

        Args:
            game: Only include stats for this game.
            min_hands: Skip stats with fewer hands than this.
        """
        result = [
            stats
            for player in self.players.values()
            for stats in player.games.values()
            if (game is None or stats.game == game) and stats.hands >= min_hands
        ]
        result.sort(key=lambda s: (-s.hands, s.player))
        return result

"""Hand rank evaluation for showdown statistics."""

from enum import IntEnum
from itertools import combinations
from typing import Dict, List, Sequence, Tuple

from poker_profiler.models.card import Card
from poker_profiler.models.game import GameType


class HandRank(IntEnum):
    """Hand rank categories from worst to best."""
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").title()


RANK_COUNT = len(HandRank)


class HandEvaluator:
    """Evaluates high hands from the best five of hole cards plus board."""

    def rank(self, board: Sequence[Card], hole_cards: Sequence[Card]) -> HandRank:
        """Return the rank category of a player's final hand."""
        rank, _ = self.evaluate(list(hole_cards) + list(board))
        return rank

    @staticmethod
    def evaluate(cards: List[Card]) -> Tuple[HandRank, List[int]]:
        """Evaluate a poker hand and return its rank and key values.

        Args:
            cards: List of cards (1-7 cards).

        Returns:
            Tuple of (HandRank, list of key values for tie-breaking).
        """
        if not cards:
            raise ValueError("Cannot evaluate an empty hand")

        if len(cards) > 5:
            return max(HandEvaluator._evaluate_five(list(combo))
                       for combo in combinations(cards, 5))

        if len(cards) == 5:
            return HandEvaluator._evaluate_five(cards)

        # fewer than five cards, e.g. a mucked stud hand
        return HandEvaluator._evaluate_partial(cards)

    @staticmethod
    def _evaluate_five(cards: List[Card]) -> Tuple[HandRank, List[int]]:
        """Evaluate exactly 5 cards."""
        ranks = sorted([c.rank.numeric_value for c in cards], reverse=True)
        is_flush = len(set(c.suit for c in cards)) == 1
        is_straight, high_card = HandEvaluator._check_straight(ranks)

        rank_counts = HandEvaluator._count(ranks)
        counts = sorted(rank_counts.values(), reverse=True)
        grouped = sorted(rank_counts.keys(),
                         key=lambda r: (-rank_counts[r], -r))

        if is_flush and is_straight:
            return HandRank.STRAIGHT_FLUSH, [high_card]

        if counts[0] == 4:
            return HandRank.FOUR_OF_A_KIND, grouped

        if counts[0] == 3 and counts[1] == 2:
            return HandRank.FULL_HOUSE, grouped

        if is_flush:
            return HandRank.FLUSH, ranks

        if is_straight:
            return HandRank.STRAIGHT, [high_card]

        if counts[0] == 3:
            return HandRank.THREE_OF_A_KIND, grouped

        if counts[0] == 2 and counts[1] == 2:
            return HandRank.TWO_PAIR, grouped

        if counts[0] == 2:
            return HandRank.ONE_PAIR, grouped

        return HandRank.HIGH_CARD, ranks

    @staticmethod
    def _evaluate_partial(cards: List[Card]) -> Tuple[HandRank, List[int]]:
        """Evaluate a partial hand (less than 5 cards)."""
        ranks = sorted([c.rank.numeric_value for c in cards], reverse=True)
        rank_counts = HandEvaluator._count(ranks)
        counts = sorted(rank_counts.values(), reverse=True)
        grouped = sorted(rank_counts.keys(),
                         key=lambda r: (-rank_counts[r], -r))

        if counts[0] == 4:
            return HandRank.FOUR_OF_A_KIND, grouped
        if counts[0] == 3:
            return HandRank.THREE_OF_A_KIND, grouped
        if counts[0] == 2 and len(counts) > 1 and counts[1] == 2:
            return HandRank.TWO_PAIR, grouped
        if counts[0] == 2:
            return HandRank.ONE_PAIR, grouped

        return HandRank.HIGH_CARD, ranks

    @staticmethod
    def _count(ranks: List[int]) -> Dict[int, int]:
        rank_counts: Dict[int, int] = {}
        for r in ranks:
            rank_counts[r] = rank_counts.get(r, 0) + 1
        return rank_counts

    @staticmethod
    def _check_straight(ranks: List[int]) -> Tuple[bool, int]:
        """Check if ranks form a straight.

        Returns:
            Tuple of (is_straight, high_card).
        """
        unique_ranks = sorted(set(ranks), reverse=True)

        if len(unique_ranks) >= 5:
            for i in range(len(unique_ranks) - 4):
                if unique_ranks[i] - unique_ranks[i + 4] == 4:
                    return True, unique_ranks[i]

        # wheel
        if {14, 2, 3, 4, 5} <= set(unique_ranks):
            return True, 5

        return False, 0


class OmahaEvaluator(HandEvaluator):
    """Omaha hands must use exactly two hole cards and three board cards."""

    def rank(self, board: Sequence[Card], hole_cards: Sequence[Card]) -> HandRank:
        if len(hole_cards) < 2 or len(board) < 3:
            raise ValueError(
                f"Omaha needs 2+ hole cards and 3+ board cards, "
                f"got {len(hole_cards)} and {len(board)}")
        best = max(self._evaluate_five(list(hole) + list(common))
                   for hole in combinations(hole_cards, 2)
                   for common in combinations(board, 3))
        return best[0]


def evaluator_for(game_type: GameType) -> HandEvaluator:
    """Get the rank evaluator used for showdowns of the given game type."""
    if game_type == GameType.OMAHA:
        return OmahaEvaluator()
    return HandEvaluator()

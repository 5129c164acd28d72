"""Plain text formatting for terminal output."""

from poker_profiler.analysis.player_stats import PlayerGameStats
from poker_profiler.models.hand import Hand


class TextFormatter:
    """Format poker data as plain text for terminal display."""

    def format_summary(self, stats: PlayerGameStats) -> str:
        """One line identifying the player, game and hand count."""
        return str(stats)

    def format_report(self, stats: PlayerGameStats, include_checks: bool = False) -> str:
        """Full report of every counter and derived stat."""
        lines = [f"=== {stats.player} - {stats.game} ===",
                 stats.to_long_string(include_checks)]
        return "\n".join(lines)

    def format_hand(self, hand: Hand) -> str:
        """Format a single hand for display."""
        lines = [f"=== Hand #{hand.hand_id} ===", hand.summary()]
        for seat in hand.seats:
            cards = f" [{seat.hole_cards_str}]" if seat.final_hole_cards else ""
            result = f" won {seat.won}" if seat.won > 0 else ""
            lines.append(f"  Seat {seat.number}: {seat.name} put in {seat.pip}{cards}{result}")
        for street_no, street in enumerate(hand.streets, 1):
            lines.append(f"\n  [STREET {street_no}]")
            for a in street:
                lines.append(f"    {a}")
        return "\n".join(lines)

"""Statistical analysis engine."""

from poker_profiler.analysis.player_stats import PlayerGameStats, PlayerInfo
from poker_profiler.analysis.calculator import StatsCalculator

__all__ = ["PlayerGameStats", "PlayerInfo", "StatsCalculator"]

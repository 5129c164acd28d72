"""Rich table formatting for terminal output."""

import math
from typing import Dict, List

from rich.console import Console
from rich.table import Table

from poker_profiler.analysis.player_stats import PlayerGameStats, PlayerInfo


def _pct(value: float) -> str:
    return "-" if math.isnan(value) else f"{value:.1f}"


class TableFormatter:
    """Format player statistics as Rich tables for terminal display."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def print_player_games(self, stats_list: List[PlayerGameStats],
                           include_checks: bool = False,
                           title: str = "Player Stats") -> None:
        """Print one row per player and game."""
        if not stats_list:
            self.console.print("[dim]No player statistics available.[/dim]")
            return

        table = Table(title=title)
        table.add_column("Player", style="cyan")
        table.add_column("Game")
        table.add_column("Hands", justify="right")
        table.add_column("VPIP%", justify="right")
        table.add_column("PFR%", justify="right")
        table.add_column("AF", justify="right")
        table.add_column("Flop%", justify="right")
        table.add_column("WTSD%", justify="right")
        table.add_column("W$SD%", justify="right")
        table.add_column("Net", justify="right")
        table.add_column("Net/Hand", justify="right")
        table.add_column("Init%", justify="right")

        for stats in stats_list:
            d = stats.summary_dict(include_checks)
            af = d["AF"]
            net_style = "green" if d["Net"] >= 0 else "red"
            table.add_row(
                stats.player,
                str(stats.game),
                str(int(d["Hands"])),
                f"{d['VPIP']:.1f}",
                f"{d['PFR']:.1f}",
                "-" if math.isnan(af) else f"{af:.2f}",
                f"{d['Flop%']:.1f}",
                f"{d['WTSD%']:.1f}",
                _pct(d["W$SD%"]),
                f"[{net_style}]{int(d['Net']):+d}[/{net_style}]",
                f"{d['Net/Hand']:+.2f}",
                stats.initiative_str,
            )

        self.console.print(table)

    def print_players(self, players: Dict[str, PlayerInfo]) -> None:
        """Print each player with the games they were seen in."""
        table = Table(title="Players")
        table.add_column("Player", style="cyan")
        table.add_column("Hands", justify="right")
        table.add_column("Games")

        for player in sorted(players.values(), key=lambda p: (-p.hands, p.name)):
            games = ", ".join(f"{g} ({s.hands})" for g, s in player.games.items())
            table.add_row(player.name, str(player.hands), games)

        self.console.print(table)

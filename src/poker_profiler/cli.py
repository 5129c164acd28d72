"""Poker Profiler CLI - Typer-based command line interface."""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from poker_profiler import config

app = typer.Typer(
    name="poker-profiler",
    help="Per-player poker statistics from parsed hand histories",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else config.LOG_LEVEL
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_hands(file: Path) -> List:
    from poker_profiler.parser.hand_loader import HandLoader

    console.print(f"Loading [cyan]{file.name}[/cyan]...")
    try:
        hands = HandLoader().load_file(file)
    except (OSError, ValueError) as e:
        console.print(f"[red]Error loading file:[/red] {e}")
        raise typer.Exit(1)

    if not hands:
        console.print("[yellow]No hands found in the file.[/yellow]")
        raise typer.Exit(1)
    return hands


def _calculate(hands: List):
    from poker_profiler.analysis.calculator import StatsCalculator

    calc = StatsCalculator()
    try:
        calc.calculate(hands)
    except ValueError as e:
        console.print(f"[red]Invalid hand:[/red] {e}")
        raise typer.Exit(1)
    return calc


@app.command()
def report(
    file: Path = typer.Argument(..., help="Path to a JSON file of parsed hands",
                                exists=True, readable=True),
    player: Optional[str] = typer.Option(None, "--player", "-p",
                                         help="Only report this player"),
    min_hands: int = typer.Option(config.MIN_HANDS, "--min-hands",
                                  help="Skip players with fewer hands"),
    long: bool = typer.Option(False, "--long",
                              help="Show the detailed report for each player and game"),
    checks_in_af: bool = typer.Option(config.AF_INCLUDE_CHECKS, "--checks-in-af",
                                      help="Count checks as passive actions in AF"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Show statistics for every player in a hand file."""
    from poker_profiler.formatters.table import TableFormatter
    from poker_profiler.formatters.text import TextFormatter

    _setup_logging(verbose)
    calc = _calculate(_load_hands(file))

    stats_list = calc.player_games(min_hands=min_hands)
    if player:
        stats_list = [s for s in stats_list if s.player == player]
        if not stats_list:
            console.print(f"[yellow]No data for player {player}.[/yellow]")
            raise typer.Exit(1)

    if long:
        fmt = TextFormatter()
        for stats in stats_list:
            console.print(fmt.format_report(stats, include_checks=checks_in_af),
                          markup=False, highlight=False)
    else:
        TableFormatter(console).print_player_games(stats_list, include_checks=checks_in_af)


@app.command()
def players(
    file: Path = typer.Argument(..., help="Path to a JSON file of parsed hands",
                                exists=True, readable=True),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """List the players in a hand file and the games they played."""
    from poker_profiler.formatters.table import TableFormatter

    _setup_logging(verbose)
    calc = _calculate(_load_hands(file))
    console.print(f"[green]{calc.hand_count} hands, {len(calc.players)} players.[/green]")
    TableFormatter(console).print_players(calc.players)


@app.command()
def hands(
    file: Path = typer.Argument(..., help="Path to a JSON file of parsed hands",
                                exists=True, readable=True),
    player: Optional[str] = typer.Option(None, "--player", "-p",
                                         help="Only show hands this player was seated in"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Print each hand in a file with its seats and actions."""
    from poker_profiler.formatters.text import TextFormatter

    _setup_logging(verbose)
    loaded = _load_hands(file)
    if player:
        loaded = [h for h in loaded if h.seat_by_name(player) is not None]
        if not loaded:
            console.print(f"[yellow]No hands for player {player}.[/yellow]")
            raise typer.Exit(1)

    fmt = TextFormatter()
    for hand in loaded:
        console.print(fmt.format_hand(hand), markup=False, highlight=False)
        console.print()


if __name__ == "__main__":
    app()

"""Per-player, per-game statistics accumulated from played hands."""

import math
from typing import Dict, List, Optional, Tuple

from poker_profiler.models.action import ActionType, PlayerAction
from poker_profiler.models.game import Game
from poker_profiler.models.hand import Hand, Seat
from poker_profiler.evaluation.evaluator import HandEvaluator, HandRank, evaluator_for


class PlayerGameStats:
    """Running statistics for one player in one game.

    Counters are only changed by :meth:`add`, which folds a single hand into
    them. Everything else is derived on demand from the counters.
    """

    def __init__(self, player: str, game: Game,
                 max_streets: Optional[int] = None,
                 evaluator: Optional[HandEvaluator] = None):
        self.player = player
        self.game = game
        self.max_streets = game.max_streets if max_streets is None else max_streets
        self.evaluator = evaluator or evaluator_for(game.type)

        self._hands = 0
        self._hands_won = 0
        self._won = 0
        self._pip = 0
        self._rake = 0

        self._rank_won: Dict[HandRank, int] = {r: 0 for r in HandRank}
        self._rank_lost: Dict[HandRank, int] = {r: 0 for r in HandRank}
        # amount won - pip by rank
        self._rank_amount: Dict[HandRank, int] = {r: 0 for r in HandRank}

        self._street_inits: List[int] = [0] * self.max_streets
        self._streets_seen: List[int] = [0] * self.max_streets
        self._action_counts: Dict[ActionType, int] = {t: 0 for t in ActionType}

        self._vpip = 0
        self._pfr = 0
        self._showdowns_seen = 0
        self._hands_won_showdown = 0
        self._check_fold = 0
        self._check_call = 0
        self._check_raise = 0

    # ------------------------------------------------------------------
    # ingestion
    # ------------------------------------------------------------------

    def add(self, hand: Hand, seat: Seat) -> None:
        """Add this hand, played from this seat, to the statistics."""
        self._check_hand(hand, seat)
        # evaluated up front so a bad showdown leaves the counters untouched
        rank = (self.evaluator.rank(hand.board, seat.final_hole_cards)
                if seat.showdown else None)

        self._hands += 1
        self._pip += seat.pip

        if seat.showdown:
            self._showdowns_seen += 1
            if seat.won > 0:
                self._hands_won_showdown += 1

        if seat.won > 0:
            self._hands_won += 1
            self._won += seat.won
            if hand.rake > 0:
                # split pot shares the rake
                winners = len(hand.winners)
                if winners > 0:
                    self._rake += hand.rake // winners

        if rank is not None:
            if seat.won > 0:
                self._rank_won[rank] += 1
            else:
                self._rank_lost[rank] += 1
            self._rank_amount[rank] += seat.won - seat.pip

        has_vpip, has_pfr = self._add_streets(hand, seat)
        if has_vpip:
            self._vpip += 1
        if has_pfr:
            self._pfr += 1

    def _check_hand(self, hand: Hand, seat: Seat) -> None:
        if not hand.has_seat(seat):
            raise ValueError(
                f"Seat {seat.number} ({seat.name}) is not part of hand {hand.hand_id}")
        if hand.game.type != self.game.type:
            raise ValueError(
                f"Hand {hand.hand_id} is {hand.game.type.value}, "
                f"expected {self.game.type.value}")
        if len(hand.streets) > self.max_streets:
            raise ValueError(
                f"Hand {hand.hand_id} has {len(hand.streets)} streets, "
                f"{self.game.type.value} allows {self.max_streets}")

    def _add_streets(self, hand: Hand, seat: Seat) -> Tuple[bool, bool]:
        """Update street and action counters.

        Stops at the street where the player folds. Returns whether the
        player voluntarily put money in the pot and whether they raised
        preflop.
        """
        has_vpip = False
        has_pfr = False

        for street_no, street in enumerate(hand.streets):
            self._streets_seen[street_no] += 1

            init: Optional[PlayerAction] = None
            has_checked = False

            for action in street:
                if action.seat == seat.number:
                    kind = action.action_type
                    self._action_counts[kind] += 1

                    if has_checked:
                        if kind == ActionType.FOLD:
                            self._check_fold += 1
                        elif kind == ActionType.CALL:
                            self._check_call += 1
                        elif kind == ActionType.RAISE:
                            self._check_raise += 1

                    if street_no == 0 and kind == ActionType.RAISE:
                        has_pfr = True

                    if kind == ActionType.CHECK:
                        has_checked = True

                    if kind.moves_money_in and action.amount > 0:
                        has_vpip = True

                    if kind == ActionType.FOLD:
                        return has_vpip, has_pfr

                if action.action_type.is_aggressive:
                    init = action

            if init is not None and init.seat == seat.number:
                self._street_inits[street_no] += 1

        return has_vpip, has_pfr

    # ------------------------------------------------------------------
    # raw counters
    # ------------------------------------------------------------------

    @property
    def hands(self) -> int:
        return self._hands

    @property
    def hands_won(self) -> int:
        return self._hands_won

    @property
    def won(self) -> int:
        """Total amount won (not net of what was put in)."""
        return self._won

    @property
    def pip(self) -> int:
        """Total amount put in pots."""
        return self._pip

    @property
    def rake(self) -> int:
        """Rake this player contributed as a winner."""
        return self._rake

    @property
    def showdowns_seen(self) -> int:
        return self._showdowns_seen

    @property
    def hands_won_showdown(self) -> int:
        return self._hands_won_showdown

    @property
    def vpip_count(self) -> int:
        return self._vpip

    @property
    def pfr_count(self) -> int:
        return self._pfr

    @property
    def check_fold(self) -> int:
        return self._check_fold

    @property
    def check_call(self) -> int:
        return self._check_call

    @property
    def check_raise(self) -> int:
        return self._check_raise

    @property
    def street_inits(self) -> Tuple[int, ...]:
        return tuple(self._street_inits)

    @property
    def streets_seen(self) -> Tuple[int, ...]:
        return tuple(self._streets_seen)

    @property
    def action_counts(self) -> Dict[ActionType, int]:
        return dict(self._action_counts)

    def action_count(self, action_type: ActionType) -> int:
        return self._action_counts[action_type]

    def rank_won(self, rank: HandRank) -> int:
        return self._rank_won[rank]

    def rank_lost(self, rank: HandRank) -> int:
        return self._rank_lost[rank]

    def rank_amount(self, rank: HandRank) -> int:
        return self._rank_amount[rank]

    # ------------------------------------------------------------------
    # derived metrics
    # ------------------------------------------------------------------

    @property
    def street_initiatives(self) -> List[float]:
        """Initiative taken as a percentage of times each street was seen.

        NaN for streets never seen.
        """
        return [inits * 100 / seen if seen else math.nan
                for inits, seen in zip(self._street_inits, self._streets_seen)]

    @property
    def initiative_str(self) -> str:
        return "-".join(f"{i:2.0f}" for i in self.street_initiatives)

    @property
    def flops_seen_pct(self) -> float:
        """Second street seen as a percentage of hands."""
        if self._hands and len(self._streets_seen) > 1:
            return self._streets_seen[1] * 100 / self._hands
        return 0.0

    @property
    def showdowns_seen_pct(self) -> float:
        return self._showdowns_seen * 100 / self._hands if self._hands else 0.0

    @property
    def showdown_win_pct(self) -> float:
        """Showdowns won as a percentage of showdowns, NaN without any."""
        if self._showdowns_seen:
            return self._hands_won_showdown * 100 / self._showdowns_seen
        return math.nan

    @property
    def hands_won_pct(self) -> float:
        return self._hands_won * 100 / self._hands if self._hands else 0.0

    @property
    def pfr(self) -> float:
        return self._pfr * 100 / self._hands if self._hands else 0.0

    @property
    def vpip(self) -> float:
        return self._vpip * 100 / self._hands if self._hands else 0.0

    @property
    def check_x_counts(self) -> Tuple[int, int, int]:
        """(check-fold, check-call, check-raise)."""
        return self._check_fold, self._check_call, self._check_raise

    @property
    def check_x_str(self) -> str:
        return "-".join(str(n) for n in self.check_x_counts)

    @property
    def check_x_ratio(self) -> str:
        """Check-fold, check-call and check-raise as a percentage of checks."""
        checks = self._action_counts[ActionType.CHECK]
        if not checks:
            return ""
        return "-".join(f"{n * 100 / checks:2.0f}" for n in self.check_x_counts)

    def aggression_factor(self, include_checks: bool = False) -> float:
        """(bets + raises) / calls, optionally counting checks as passive.

        NaN if there are no passive actions.
        """
        aggressive = (self._action_counts[ActionType.BET]
                      + self._action_counts[ActionType.RAISE])
        passive = self._action_counts[ActionType.CALL]
        if include_checks:
            passive += self._action_counts[ActionType.CHECK]
        return aggressive / passive if passive else math.nan

    @property
    def net_amount(self) -> int:
        return self._won - self._pip

    @property
    def net_per_hand(self) -> float:
        return self.net_amount / self._hands if self._hands else 0.0

    def summary_dict(self, include_checks: bool = False) -> Dict[str, float]:
        return {
            "Hands": self._hands,
            "VPIP": self.vpip,
            "PFR": self.pfr,
            "AF": self.aggression_factor(include_checks),
            "Flop%": self.flops_seen_pct,
            "WTSD%": self.showdowns_seen_pct,
            "W$SD%": self.showdown_win_pct,
            "Won%": self.hands_won_pct,
            "Net": self.net_amount,
            "Net/Hand": self.net_per_hand,
        }

    # ------------------------------------------------------------------
    # reports
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"PlayerGameStats[player={self.player} game={self.game} hands={self._hands}]"

    def to_long_string(self, include_checks: bool = False) -> str:
        lines = [
            f"Hands:  {self._hands}  Hands Won:  {self._hands_won}",
            f"Amount won:  {self._won}  Put in pot:  {self._pip}  Rake:  {self._rake}",
            f"Check-x count: {self.check_x_str}",
            f"Check-x ratio: {self.check_x_ratio}",
            f"Initiatives: {self.initiative_str}",
            f"Show downs:  {self._showdowns_seen}",
            f"Show down wins:  {self._hands_won_showdown}",
            f"Flops seen:  {self.flops_seen_pct:.1f}%",
            f"Show downs seen:  {self.showdowns_seen_pct:.1f}%",
            f"Show downs won:  {self.showdown_win_pct:.1f}%",
            f"Hands won:  {self.hands_won_pct:.1f}%",
            f"PFR:  {self.pfr:.1f}%",
            f"AF:  {self.aggression_factor(include_checks):.2f}",
            f"VPIP:  {self.vpip:.1f}%",
            f"Net amount:  {self.net_amount}  Per hand:  {self.net_per_hand:.2f}",
            "Actions:",
        ]
        for kind, count in self._action_counts.items():
            if count > 0:
                lines.append(f"  {kind.display_name} times: {count}")
        lines.append("Showdown ranks:")
        for rank in HandRank:
            lines.append(
                f"  {rank.display_name} times won {self._rank_won[rank]}"
                f" times lost {self._rank_lost[rank]}"
                f" amount {self._rank_amount[rank]}")
        return "\n".join(lines) + "\n"


class PlayerInfo:
    """A player and their statistics for every game they were seen in."""

    def __init__(self, name: str):
        self.name = name
        self.games: Dict[Game, PlayerGameStats] = {}

    def game_stats(self, game: Game) -> PlayerGameStats:
        if game not in self.games:
            self.games[game] = PlayerGameStats(self.name, game,
                                               max_streets=game.max_streets)
        return self.games[game]

    @property
    def hands(self) -> int:
        return sum(g.hands for g in self.games.values())

    def __str__(self) -> str:
        return f"PlayerInfo[name={self.name} games={len(self.games)} hands={self.hands}]"

"""Load already-parsed hands from JSON."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from poker_profiler.models.action import ActionType, PlayerAction
from poker_profiler.models.card import Card
from poker_profiler.models.game import Game, GameType, LimitType
from poker_profiler.models.hand import Hand, Seat

logger = logging.getLogger(__name__)


class HandFormatError(ValueError):
    """A hand in the input could not be turned into a Hand."""

    def __init__(self, hand_id: Any, message: str):
        super().__init__(f"Hand {hand_id}: {message}")
        self.hand_id = hand_id


class HandLoader:
    """Build Hand objects from JSON documents.

    The document is either a list of hands or an object with a "hands" list.
    """

    def load_file(self, path: Union[str, Path]) -> List[Hand]:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        hands = self.load_dict(data)
        logger.info("Loaded %d hands from %s", len(hands), path)
        return hands

    def load_string(self, text: str) -> List[Hand]:
        return self.load_dict(json.loads(text))

    def load_dict(self, data: Any) -> List[Hand]:
        if isinstance(data, dict):
            data = data.get("hands", [])
        if not isinstance(data, list):
            raise HandFormatError(None, "expected a list of hands")
        return [self.parse_hand(h, index) for index, h in enumerate(data)]

    def parse_hand(self, data: Dict[str, Any], index: int = 0) -> Hand:
        hand_id = data.get("id", index) if isinstance(data, dict) else index
        try:
            game = self._parse_game(data.get("game", {}))
            seats = [self._parse_seat(s) for s in data["seats"]]
            names = {s.number: s.name for s in seats}
            streets = [
                [self._parse_action(a, names) for a in street]
                for street in data.get("streets", [])
            ]
            hand = Hand(
                hand_id=str(hand_id),
                game=game,
                table_name=data.get("table", ""),
                seats=seats,
                board=[Card.parse(c) for c in data.get("board", [])],
                rake=int(data.get("rake", 0)),
                streets=streets,
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise HandFormatError(hand_id, f"{type(e).__name__}: {e}") from e

        if len(hand.streets) > game.max_streets:
            raise HandFormatError(
                hand_id, f"{len(hand.streets)} streets for {game.type.value}")
        return hand

    def _parse_game(self, data: Dict[str, Any]) -> Game:
        return Game(
            type=GameType(data.get("type", GameType.HOLDEM.value)),
            limit=LimitType(data.get("limit", LimitType.NO_LIMIT.value)),
            currency=data.get("currency", ""),
            small_blind=int(data.get("small_blind", 0)),
            big_blind=int(data.get("big_blind", 0)),
            max_players=int(data.get("max_players", 0)),
        )

    def _parse_seat(self, data: Dict[str, Any]) -> Seat:
        showdown = bool(data.get("showdown", False))
        if showdown and not data.get("hole_cards"):
            raise ValueError(f"seat {data['seat']} shows down without hole cards")
        return Seat(
            number=int(data["seat"]),
            name=data["name"],
            chips=int(data.get("chips", 0)),
            pip=int(data.get("pip", 0)),
            won=int(data.get("won", 0)),
            showdown=showdown,
            final_hole_cards=[Card.parse(c) for c in data.get("hole_cards", [])],
        )

    def _parse_action(self, data: Dict[str, Any], names: Dict[int, str]) -> PlayerAction:
        seat = int(data["seat"])
        if seat not in names:
            raise ValueError(f"action for unknown seat {seat}")
        return PlayerAction(
            player_name=names[seat],
            seat=seat,
            action_type=ActionType(data["action"]),
            amount=int(data.get("amount", 0)),
            all_in=bool(data.get("all_in", False)),
        )

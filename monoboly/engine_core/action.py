"""
Actions - Transition requests as data.

The session directory receives Actions, runs them through the reducer
against one game at a time, and keeps the successful ones as history.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ActionType(Enum):
    """Types of actions in the system."""
    JOIN = "join"
    DEAL = "deal"
    DRAW_CARDS = "draw_cards"
    CHOOSE_CARD = "choose_card"
    PLACE_CARD_BANK = "place_card_bank"


@dataclass
class ActionPayload:
    """
    Payload for an action - contains the action parameters.

    Different action types use different fields; DEAL uses none.
    """
    player_name: str | None = None
    card_id: Any | None = None


@dataclass
class Action:
    """
    A complete action to be applied to a game.

    Actions are:
    - Kept in session history once applied
    - Applied atomically by the reducer
    """
    action_type: ActionType
    payload: ActionPayload = field(default_factory=ActionPayload)
    timestamp: float | None = None

    @classmethod
    def join(cls, player_name: str) -> Action:
        """Factory for join action."""
        return cls(
            action_type=ActionType.JOIN,
            payload=ActionPayload(player_name=player_name),
        )

    @classmethod
    def deal(cls) -> Action:
        """Factory for deal action."""
        return cls(action_type=ActionType.DEAL)

    @classmethod
    def draw_cards(cls, player_name: str) -> Action:
        """Factory for draw action."""
        return cls(
            action_type=ActionType.DRAW_CARDS,
            payload=ActionPayload(player_name=player_name),
        )

    @classmethod
    def choose_card(cls, player_name: str, card_id: Any) -> Action:
        """Factory for choose action."""
        return cls(
            action_type=ActionType.CHOOSE_CARD,
            payload=ActionPayload(player_name=player_name, card_id=card_id),
        )

    @classmethod
    def place_card_bank(cls, player_name: str) -> Action:
        """Factory for bank placement action."""
        return cls(
            action_type=ActionType.PLACE_CARD_BANK,
            payload=ActionPayload(player_name=player_name),
        )

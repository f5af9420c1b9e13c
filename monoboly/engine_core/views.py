"""
Views - Read-only projections of a game, as Pydantic models.

GameStateView is what every seat may see: roster, started flag and the
current turn. Hands and the deck are hidden information and never appear
in it. PlayerStateView is one player's private view of their own seat.
"""

from __future__ import annotations
from typing import Optional, TYPE_CHECKING

from pydantic import BaseModel, Field

from .cards import Card, CardKind

if TYPE_CHECKING:
    from .game import Player
    from .turn import Turn


class CardView(BaseModel):
    """Card information for display."""
    id: int
    kind: CardKind
    name: str
    value: int = 0
    colors: list[str] = Field(default_factory=list)

    model_config = {"from_attributes": True}

    @classmethod
    def from_card(cls, card: Card) -> CardView:
        return cls.model_validate(card)


def _cards(cards: Optional[list[Card]]) -> Optional[list[CardView]]:
    if cards is None:
        return None
    return [CardView.from_card(c) for c in cards]


class PlayerView(BaseModel):
    """A seat at the table as everyone sees it."""
    name: str
    bank: Optional[list[CardView]] = None

    @classmethod
    def from_player(cls, player: Player) -> PlayerView:
        return cls(name=player.name, bank=_cards(player.bank))


class TurnView(BaseModel):
    """The current turn."""
    player: Optional[str] = Field(None, description="Name of the turn owner")
    drawn_cards: list[CardView] = Field(default_factory=list)
    chosen_card: Optional[CardView] = None

    @classmethod
    def from_turn(cls, turn: Turn) -> TurnView:
        return cls(
            player=turn.player.name if turn.player else None,
            drawn_cards=_cards(turn.drawn_cards),
            chosen_card=CardView.from_card(turn.chosen_card) if turn.chosen_card else None,
        )


class GameStateView(BaseModel):
    """Public state of a game."""
    game_name: str
    players: list[PlayerView] = Field(default_factory=list)
    started: bool = False
    current_turn: TurnView = Field(default_factory=TurnView)


class PlayerStateView(BaseModel):
    """One player's own view: their bank, their hand, and whether to act."""
    name: str
    bank: Optional[list[CardView]] = None
    hand: list[CardView] = Field(default_factory=list)
    my_turn: bool = False

"""
Turn - Whose turn it is and what they have done so far.

A turn is created fresh for its owner with nothing drawn and nothing
staged. Like the rest of the engine state it is never mutated in place:
updates return a new Turn.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .cards import Card

if TYPE_CHECKING:
    from .game import Player


# Cards taken from the deck by one draw
DRAW_COUNT = 2


@dataclass
class Turn:
    """
    The current turn.

    player is None until the first deal.
    drawn_cards holds 0, 1 or DRAW_COUNT cards.
    chosen_card is the card staged for placement, if any.
    """
    player: Player | None = None
    drawn_cards: list[Card] = field(default_factory=list)
    chosen_card: Card | None = None

    @classmethod
    def new(cls, player: Player | None) -> Turn:
        """Start a fresh turn for player."""
        return cls(player=player)

    @property
    def has_drawn(self) -> bool:
        """One draw per turn: any recorded card means the draw happened."""
        return len(self.drawn_cards) > 0

    def is_owner(self, player: Player) -> bool:
        """Check if player owns this turn."""
        return self.player is not None and self.player == player

    def with_drawn(self, cards: list[Card]) -> Turn:
        """Return new turn with drawn cards recorded."""
        return Turn(player=self.player, drawn_cards=list(cards), chosen_card=self.chosen_card)

    def with_chosen(self, card: Card | None) -> Turn:
        """Return new turn with card staged (or cleared when None)."""
        return Turn(player=self.player, drawn_cards=self.drawn_cards, chosen_card=card)

    def with_player(self, player: Player) -> Turn:
        """Return new turn holding the owner's latest Player record."""
        return Turn(player=player, drawn_cards=self.drawn_cards, chosen_card=self.chosen_card)

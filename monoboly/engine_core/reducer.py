"""
Reducer - Applies actions to a game.

Design principles:
- Pure function: (game, action) -> ActionResult
- Rule violations come back as failed results, never exceptions
- Delegates every rule to the transition functions in game.py
"""

from __future__ import annotations
import random
from dataclasses import dataclass, field

from . import game as rules
from .action import Action, ActionType
from .game import Game, Player
from .result import ActionResult, ErrorCode


@dataclass
class Reducer:
    """
    Reducer applies actions to a game.

    Stateless apart from the random source used when dealing.
    """
    rng: random.Random = field(default_factory=random.Random)

    def apply(self, game: Game, action: Action) -> ActionResult:
        """
        Apply an action to the game.

        Returns ActionResult with new game or error.
        """
        handler = self._get_handler(action.action_type)
        if not handler:
            return ActionResult.failure(
                ErrorCode.UNKNOWN_ACTION,
                f"No handler for action type: {action.action_type}",
            )
        return handler(game, action)

    def _get_handler(self, action_type: ActionType):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.JOIN: self._handle_join,
            ActionType.DEAL: self._handle_deal,
            ActionType.DRAW_CARDS: self._handle_draw_cards,
            ActionType.CHOOSE_CARD: self._handle_choose_card,
            ActionType.PLACE_CARD_BANK: self._handle_place_card_bank,
        }
        return handlers.get(action_type)

    def _handle_join(self, game: Game, action: Action) -> ActionResult:
        return rules.join(game, _player(action))

    def _handle_deal(self, game: Game, action: Action) -> ActionResult:
        new_game = rules.deal(game, self.rng)
        return ActionResult.success_with_state(
            new_game,
            changes=[
                f"Dealt {len(new_game.players)} hand(s); "
                f"{new_game.current_turn.player.name} goes first"
            ],
        )

    def _handle_draw_cards(self, game: Game, action: Action) -> ActionResult:
        """Drawing never fails; a refused draw returns the game unchanged."""
        player = _player(action)
        new_game = rules.draw_cards(game, player)
        if new_game is game:
            return ActionResult.success_with_state(game)

        drawn = len(new_game.current_turn.drawn_cards)
        return ActionResult.success_with_state(
            new_game,
            changes=[f"{player.name} drew {drawn} card(s)"],
        )

    def _handle_choose_card(self, game: Game, action: Action) -> ActionResult:
        return rules.choose_card(game, _player(action), action.payload.card_id)

    def _handle_place_card_bank(self, game: Game, action: Action) -> ActionResult:
        return rules.place_card_bank(game, _player(action))


def _player(action: Action) -> Player:
    return Player(name=action.payload.player_name)


def apply_action(game: Game, action: Action, rng: random.Random | None = None) -> ActionResult:
    """
    Convenience function to apply an action.

    Creates a Reducer and applies the action.
    """
    reducer = Reducer(rng=rng) if rng is not None else Reducer()
    return reducer.apply(game, action)

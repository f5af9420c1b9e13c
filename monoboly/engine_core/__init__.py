"""
Engine Core - Game state and the rules that move it forward.

The engine is the runtime that:
1. Builds the deck
2. Holds a Game
3. Applies transitions (join, deal, draw, choose, bank)
4. Projects public and per-player views
"""

from .cards import Card, CardKind, DECK_SIZE, standard_deck, shuffle, new_shuffled_deck
from .turn import Turn, DRAW_COUNT
from .result import ActionResult, ErrorCode
from .game import (
    Game,
    Player,
    HAND_SIZE,
    new_game,
    join,
    deal,
    draw_cards,
    choose_card,
    place_card_bank,
    get_hand,
    find_player,
    find_card,
    playing,
    game_state,
    player_state,
)
from .views import CardView, PlayerView, TurnView, GameStateView, PlayerStateView
from .action import Action, ActionType, ActionPayload
from .reducer import Reducer, apply_action
from .action_generator import legal_actions

__all__ = [
    "Card",
    "CardKind",
    "DECK_SIZE",
    "standard_deck",
    "shuffle",
    "new_shuffled_deck",
    "Turn",
    "DRAW_COUNT",
    "ActionResult",
    "ErrorCode",
    "Game",
    "Player",
    "HAND_SIZE",
    "new_game",
    "join",
    "deal",
    "draw_cards",
    "choose_card",
    "place_card_bank",
    "get_hand",
    "find_player",
    "find_card",
    "playing",
    "game_state",
    "player_state",
    "CardView",
    "PlayerView",
    "TurnView",
    "GameStateView",
    "PlayerStateView",
    "Action",
    "ActionType",
    "ActionPayload",
    "Reducer",
    "apply_action",
    "legal_actions",
]

"""
Action Generator - Lists the actions a player may take right now.

Used by the CLI to drive a game and by tests as an oracle: every action
returned here applies successfully.
"""

from __future__ import annotations

from .action import Action
from .game import Game, Player, get_hand, playing


def legal_actions(game: Game, player_name: str) -> list[Action]:
    """
    Generate the useful legal actions for player_name.

    Before the start: deal. After it, only the turn owner has moves:
    draw first, then choose a hand card, then bank the chosen one.
    """
    player = Player(name=player_name)
    if not playing(game, player):
        return []

    if not game.started:
        return [Action.deal()]

    turn = game.current_turn
    if not turn.is_owner(player):
        return []

    if not turn.has_drawn:
        return [Action.draw_cards(player_name)]

    actions = []
    if turn.chosen_card is not None:
        actions.append(Action.place_card_bank(player_name))

    for card in get_hand(game, player):
        if card != turn.chosen_card:
            actions.append(Action.choose_card(player_name, card.id))

    return actions

"""
Monoboly CLI - Command-line harness for the engine.

Usage:
    monoboly deck                          List the standard deck
    monoboly demo [--players N] [--seed S] Play one scripted turn
"""

import argparse
import logging
import random
import sys
from collections import Counter

from .settings import get_settings


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Monoboly - Card game session engine",
        prog="monoboly",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("deck", help="List the standard deck")

    demo_parser = subparsers.add_parser("demo", help="Play one scripted turn")
    demo_parser.add_argument("--players", type=int, default=2, help="Number of players")
    demo_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    args = parser.parse_args(argv)

    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    if args.command == "deck":
        cmd_deck(args)
    elif args.command == "demo":
        cmd_demo(args, settings)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_deck(args):
    """Print the standard deck grouped by kind."""
    from .engine_core.cards import standard_deck

    deck = standard_deck()
    for kind, cards in _group_by_kind(deck).items():
        print(f"{kind.value} ({len(cards)})")
        for name, count in Counter(c.name for c in cards).items():
            value = next(c.value for c in cards if c.name == name)
            print(f"  {count} x {name} [{value}M]")
    print(f"Total: {len(deck)}")


def _group_by_kind(deck):
    groups = {}
    for card in deck:
        groups.setdefault(card.kind, []).append(card)
    return groups


def cmd_demo(args, settings):
    """Start a game, deal, and have the first player bank a drawn card."""
    from .session import GameDirectory

    if args.players < 1:
        print("Error: need at least one player")
        sys.exit(1)

    seed = args.seed if args.seed is not None else settings.seed
    directory = GameDirectory(settings=settings, rng=random.Random(seed))

    game = directory.start_game(None, "player1")
    for i in range(2, args.players + 1):
        directory.join(game.name, f"player{i}")

    directory.deal_hand(game.name)
    owner = directory.game_state(game.name).current_turn.player
    print(f"Game: {game.name}")
    print(f"First turn: {owner}")

    result = directory.draw_cards(game.name, owner)
    drawn = result.new_state.current_turn.drawn_cards
    if not drawn:
        print("Deck is empty, nothing to bank")
        sys.exit(1)

    result = directory.choose_card(game.name, owner, drawn[0].id)
    if result.success:
        result = directory.place_card_bank(game.name, owner)
    if not result.success:
        print(f"Error: {result.error}")
        sys.exit(1)

    print(directory.game_state(game.name).model_dump_json(indent=2))
    print(directory.player_state(game.name, owner).model_dump_json(indent=2))


if __name__ == "__main__":
    main()

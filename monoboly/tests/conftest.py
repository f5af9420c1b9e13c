"""
Pytest fixtures for Monoboly tests.
"""

import random

import pytest

from ..engine_core.cards import Card, CardKind
from ..engine_core.game import Game, Player, new_game, join, deal
from ..session import GameDirectory
from ..settings import Settings


def make_cards(count: int, start: int = 1) -> list[Card]:
    """Plain money cards with sequential ids."""
    return [
        Card(id=i, kind=CardKind.MONEY, name=f"{i}M", value=1)
        for i in range(start, start + count)
    ]


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def player1() -> Player:
    return Player(name="player1")


@pytest.fixture
def player2() -> Player:
    return Player(name="player2")


@pytest.fixture
def fresh_game(player1, rng) -> Game:
    """A new game with a full shuffled deck and one player."""
    return new_game("test_game", player1, rng=rng)


@pytest.fixture
def small_game(player1, player2) -> Game:
    """A two-player game, not started, over a stacked 20-card deck."""
    game = new_game("small_game", player1, deck=make_cards(20))
    return join(game, player2).new_state


@pytest.fixture
def dealt_game(small_game, rng) -> Game:
    """small_game after the deal."""
    return deal(small_game, rng)


@pytest.fixture
def turn_owner(dealt_game) -> Player:
    return dealt_game.current_turn.player


@pytest.fixture
def other_player(dealt_game, turn_owner) -> Player:
    return next(p for p in dealt_game.players if p != turn_owner)


@pytest.fixture
def directory() -> GameDirectory:
    """A directory with a fixed seed and default settings."""
    return GameDirectory(settings=Settings(seed=42), rng=random.Random(42))

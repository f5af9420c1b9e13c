"""
Game - The aggregate state of one session and its transitions.

Every transition is a plain function: (game, ...) -> new game, or an
ActionResult wrapping one. The input game is never mutated; lists and
dicts are copied before they change, so a rejected action leaves the
caller's state exactly as it was.

Card conservation: a card is always in exactly one of the deck, a hand,
a bank, or the discard pile.

Rule order matters for the error a caller sees:
- choose_card: nothing drawn, then wrong player, then unknown card
- place_card_bank: nothing chosen, then wrong player
"""

from __future__ import annotations
import random
from dataclasses import dataclass, field

from .cards import Card, new_shuffled_deck
from .result import ActionResult, ErrorCode
from .turn import DRAW_COUNT, Turn
from .views import GameStateView, PlayerStateView, PlayerView, TurnView, CardView


# Cards dealt to each player at the start
HAND_SIZE = 5


@dataclass(eq=False)
class Player:
    """
    A seat in the game.

    Identity is by name: a Player with a grown bank is still the same
    player. bank stays None until the first card is banked.
    """
    name: str
    bank: list[Card] | None = None

    def __hash__(self):
        return hash(self.name)

    def __eq__(self, other):
        if not isinstance(other, Player):
            return False
        return self.name == other.name

    def add_to_bank(self, card: Card) -> Player:
        """Return new player with card appended to the bank."""
        return Player(name=self.name, bank=(self.bank or []) + [card])


@dataclass
class Game:
    """
    Complete state of one game.

    players keeps join order; hands has exactly one entry per player.
    """
    name: str
    players: list[Player] = field(default_factory=list)
    hands: dict[str, list[Card]] = field(default_factory=dict)
    discard_pile: list[Card] = field(default_factory=list)
    deck: list[Card] = field(default_factory=list)
    started: bool = False
    current_turn: Turn = field(default_factory=Turn)

    def _copy_with(self, **kwargs) -> Game:
        """Create a copy with some fields replaced."""
        return Game(
            name=kwargs.get("name", self.name),
            players=kwargs.get("players", self.players),
            hands=kwargs.get("hands", self.hands),
            discard_pile=kwargs.get("discard_pile", self.discard_pile),
            deck=kwargs.get("deck", self.deck),
            started=kwargs.get("started", self.started),
            current_turn=kwargs.get("current_turn", self.current_turn),
        )

    def with_hand(self, player: Player, cards: list[Card]) -> Game:
        """Return new game with player's hand replaced."""
        new_hands = self.hands.copy()
        new_hands[player.name] = cards
        return self._copy_with(hands=new_hands)

    def card_count(self) -> int:
        """Cards across every zone; constant for the life of a game."""
        return (
            len(self.deck)
            + sum(len(hand) for hand in self.hands.values())
            + sum(len(p.bank or []) for p in self.players)
            + len(self.discard_pile)
        )


def new_game(
    name: str,
    player: Player,
    deck: list[Card] | None = None,
    rng: random.Random | None = None,
) -> Game:
    """
    Create a game with its founding player.

    Args:
        name: Unique game name
        player: Founding player
        deck: Card sequence to play with (a fresh shuffled deck if omitted)
        rng: Random source for the shuffle
    """
    return Game(
        name=name,
        players=[player],
        hands={player.name: []},
        discard_pile=[],
        deck=list(deck) if deck is not None else new_shuffled_deck(rng),
        started=False,
        current_turn=Turn.new(None),
    )


def join(game: Game, player: Player) -> ActionResult:
    """
    Add a player before the game starts.

    Joining twice is a no-op, even after the start.
    """
    if playing(game, player):
        return ActionResult.success_with_state(game)

    if game.started:
        return ActionResult.failure(ErrorCode.GAME_STARTED)

    new_game_state = game._copy_with(players=game.players + [player]).with_hand(player, [])
    return ActionResult.success_with_state(
        new_game_state,
        changes=[f"{player.name} joined {game.name}"],
    )


def deal(game: Game, rng: random.Random | None = None) -> Game:
    """
    Deal HAND_SIZE cards to every player in join order and start the game.

    Replaces any existing hands. Players dealt last get short hands if
    the deck runs out. The first turn goes to a random player.
    """
    deck = game.deck
    hands = game.hands.copy()
    for player in game.players:
        hands[player.name], deck = deck[:HAND_SIZE], deck[HAND_SIZE:]

    first = (rng or random).choice(game.players)
    return game._copy_with(
        hands=hands,
        deck=deck,
        started=True,
        current_turn=Turn.new(first),
    )


def draw_cards(game: Game, player: Player) -> Game:
    """
    Draw DRAW_COUNT cards into the turn owner's hand.

    Not your turn, or already drawn this turn: the game comes back
    unchanged. A short deck gives a short draw.
    """
    turn = game.current_turn
    if not turn.is_owner(player) or turn.has_drawn:
        return game

    cards, deck = game.deck[:DRAW_COUNT], game.deck[DRAW_COUNT:]
    hand = get_hand(game, player) + cards
    return game.with_hand(player, hand)._copy_with(
        deck=deck,
        current_turn=turn.with_drawn(cards),
    )


def choose_card(game: Game, player: Player, card_id) -> ActionResult:
    """Stage a card from the turn owner's hand for placement."""
    turn = game.current_turn
    if not turn.has_drawn:
        return ActionResult.failure(ErrorCode.DRAW_CARDS_REQUIRED)

    if not turn.is_owner(player):
        return ActionResult.failure(ErrorCode.NOT_YOUR_TURN)

    card = find_card(game, player, card_id)
    if card is None:
        return ActionResult.failure(
            ErrorCode.CARD_NOT_FOUND,
            f"Card {card_id} is not in {player.name}'s hand.",
        )

    return ActionResult.success_with_state(
        game._copy_with(current_turn=turn.with_chosen(card)),
        changes=[f"{player.name} chose {card.name}"],
    )


def place_card_bank(game: Game, player: Player) -> ActionResult:
    """
    Move the chosen card from the turn owner's hand into their bank.

    The turn does not advance.
    """
    turn = game.current_turn
    card = turn.chosen_card
    if card is None:
        return ActionResult.failure(ErrorCode.CHOOSE_CARD_REQUIRED)

    if not turn.is_owner(player):
        return ActionResult.failure(ErrorCode.NOT_YOUR_TURN)

    owner = find_player(game, player).add_to_bank(card)
    new_players = [owner if p == player else p for p in game.players]
    new_hand = [c for c in get_hand(game, player) if c.id != card.id]

    new_game_state = game.with_hand(player, new_hand)._copy_with(
        players=new_players,
        current_turn=turn.with_chosen(None).with_player(owner),
    )
    return ActionResult.success_with_state(
        new_game_state,
        changes=[f"{player.name} banked {card.name} ({card.value}M)"],
    )


# =============================================================================
# Lookups
# =============================================================================

def get_hand(game: Game, player: Player) -> list[Card]:
    """The player's hand. KeyError if the player never joined."""
    return game.hands[player.name]


def find_player(game: Game, player: Player) -> Player | None:
    """The game's own record of player (with its bank), or None."""
    for p in game.players:
        if p.name == player.name:
            return p
    return None


def find_card(game: Game, player: Player, card_id) -> Card | None:
    """The card in player's hand with card_id, or None."""
    for card in get_hand(game, player):
        if card.id == card_id:
            return card
    return None


def playing(game: Game, player: Player) -> bool:
    """Check if player has joined."""
    return find_player(game, player) is not None


# =============================================================================
# Projections
# =============================================================================

def game_state(game: Game) -> GameStateView:
    """Public state: no hands, no deck."""
    return GameStateView(
        game_name=game.name,
        players=[PlayerView.from_player(p) for p in game.players],
        started=game.started,
        current_turn=TurnView.from_turn(game.current_turn),
    )


def player_state(game: Game, player: Player) -> PlayerStateView | None:
    """One player's own view, or None if they have not joined."""
    found = find_player(game, player)
    if found is None:
        return None

    return PlayerStateView(
        name=found.name,
        bank=[CardView.from_card(c) for c in found.bank] if found.bank is not None else None,
        hand=[CardView.from_card(c) for c in get_hand(game, found)],
        my_turn=game.current_turn.is_owner(found),
    )

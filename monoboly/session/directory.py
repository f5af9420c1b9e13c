"""
Game Directory - Finds the live game behind a name.

LIFECYCLE:
1. A player starts a game under a name (or a generated one)
2. Other players join by name
3. Every transition is applied to that one game, one at a time
4. The game is ended explicitly or swept up once it is stale

CONCURRENCY:
- The registry is guarded by one lock; registering a name is an atomic
  test-and-insert, so two callers can never own the same name
- Each session has its own lock; transitions against it are applied in
  arrival order and the new game is published in one assignment
- Different sessions share nothing and never wait on each other

No persistence - games live in memory only.
"""

from __future__ import annotations
import logging
import random
import threading
import time
from dataclasses import dataclass, field

from ..engine_core.action import Action
from ..engine_core.cards import Card
from ..engine_core.game import Game, Player, new_game
from ..engine_core.reducer import Reducer
from ..engine_core.result import ActionResult
from ..engine_core.views import GameStateView, PlayerStateView
from ..engine_core import game as rules
from ..settings import Settings, get_settings
from .names import generate_name

logger = logging.getLogger(__name__)


class DirectoryError(Exception):
    """Base class for directory misuse."""


class GameNameTakenError(DirectoryError):
    """A live game already has this name."""

    def __init__(self, name: str):
        super().__init__(f"A game named {name!r} is already running")
        self.name = name


class GameNotFoundError(DirectoryError):
    """No live game has this name."""

    def __init__(self, name: str):
        super().__init__(f"No game named {name!r}")
        self.name = name


@dataclass
class GameSession:
    """
    One live game.

    game is only replaced while lock is held. history keeps the actions
    that were applied successfully, in order.
    """
    name: str
    game: Game
    created_at: float
    rng: random.Random
    history: list[Action] = field(default_factory=list)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


class GameDirectory:
    """
    Maps game names to live sessions.

    Responsibilities:
    - Register games under unique names
    - Serialize transitions per game
    - Clean up ended and stale games
    """

    # Attempts at finding a free generated name
    NAME_ATTEMPTS = 20

    def __init__(self, settings: Settings | None = None, rng: random.Random | None = None):
        self.settings = settings or get_settings()
        self._rng = rng or random.Random(self.settings.seed)
        self._sessions: dict[str, GameSession] = {}
        self._lock = threading.Lock()

    # =========================================================================
    # Registry
    # =========================================================================

    def start_game(
        self,
        name: str | None,
        player_name: str,
        deck: list[Card] | None = None,
    ) -> Game:
        """
        Register a new game with its founding player.

        Args:
            name: Game name; a free one is generated when None
            player_name: Founding player
            deck: Card sequence to use instead of a fresh shuffled deck

        Raises:
            GameNameTakenError: name is already live
        """
        with self._lock:
            if name is None:
                name = self._free_name()
            elif name in self._sessions:
                raise GameNameTakenError(name)

            rng = random.Random(self._rng.getrandbits(64))
            game = new_game(name, Player(name=player_name), deck=deck, rng=rng)
            self._sessions[name] = GameSession(
                name=name,
                game=game,
                created_at=time.time(),
                rng=rng,
            )

        logger.info("Started game %s for %s", name, player_name)
        return game

    def _free_name(self) -> str:
        for _ in range(self.NAME_ATTEMPTS):
            candidate = generate_name(self._rng)
            if candidate not in self._sessions:
                return candidate
        raise DirectoryError("Could not find a free game name")

    def lookup(self, name: str) -> GameSession | None:
        """Get a live session by name."""
        with self._lock:
            return self._sessions.get(name)

    def _get(self, name: str) -> GameSession:
        session = self.lookup(name)
        if session is None:
            raise GameNotFoundError(name)
        return session

    def end_game(self, name: str) -> bool:
        """Remove a game. Returns False if it was not live."""
        with self._lock:
            session = self._sessions.pop(name, None)
        if session is None:
            return False
        logger.info("Ended game %s after %d action(s)", name, len(session.history))
        return True

    def list_games(self) -> list[str]:
        """Names of live games."""
        with self._lock:
            return list(self._sessions)

    def cleanup_stale_games(self, max_age_seconds: int | None = None) -> list[str]:
        """
        End games older than max_age_seconds (settings default).

        Returns the names that were removed.
        """
        if max_age_seconds is None:
            max_age_seconds = self.settings.session_max_age
        cutoff = time.time() - max_age_seconds

        with self._lock:
            stale = [
                name for name, session in self._sessions.items()
                if session.created_at < cutoff
            ]

        removed = [name for name in stale if self.end_game(name)]
        if removed:
            logger.info("Cleaned up %d stale game(s)", len(removed))
        return removed

    # =========================================================================
    # Transitions
    # =========================================================================

    def apply(self, name: str, action: Action) -> ActionResult:
        """
        Apply one action to the named game.

        Runs under the session lock; on success the new game replaces the
        old one and the action is added to history.
        """
        session = self._get(name)
        with session.lock:
            result = Reducer(rng=session.rng).apply(session.game, action)
            if result.success:
                action.timestamp = time.time()
                session.game = result.new_state
                session.history.append(action)
            else:
                logger.debug(
                    "Rejected %s in %s: %s",
                    action.action_type,
                    name,
                    result.error_code,
                )
        for change in result.state_changes:
            logger.info("[%s] %s", name, change)
        return result

    def join(self, name: str, player_name: str) -> ActionResult:
        return self.apply(name, Action.join(player_name))

    def deal_hand(self, name: str) -> ActionResult:
        return self.apply(name, Action.deal())

    def draw_cards(self, name: str, player_name: str) -> ActionResult:
        return self.apply(name, Action.draw_cards(player_name))

    def choose_card(self, name: str, player_name: str, card_id) -> ActionResult:
        return self.apply(name, Action.choose_card(player_name, card_id))

    def place_card_bank(self, name: str, player_name: str) -> ActionResult:
        return self.apply(name, Action.place_card_bank(player_name))

    # =========================================================================
    # Reads
    # =========================================================================

    def game(self, name: str) -> Game:
        """Current game snapshot. Games are never mutated, so it stays valid."""
        session = self._get(name)
        with session.lock:
            return session.game

    def history(self, name: str) -> list[Action]:
        session = self._get(name)
        with session.lock:
            return list(session.history)

    def game_state(self, name: str) -> GameStateView:
        return rules.game_state(self.game(name))

    def player_state(self, name: str, player_name: str) -> PlayerStateView | None:
        return rules.player_state(self.game(name), Player(name=player_name))

    def get_hand(self, name: str, player_name: str) -> list[Card]:
        """The player's hand. KeyError if they never joined."""
        return rules.get_hand(self.game(name), Player(name=player_name))

    def playing(self, name: str, player_name: str) -> bool:
        return rules.playing(self.game(name), Player(name=player_name))

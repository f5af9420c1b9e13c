"""
Results - What a transition hands back to its caller.

Rule violations are not exceptions. A transition that cannot be applied
returns a failed ActionResult carrying an ErrorCode and a message, and the
caller's game is left as it was.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Why a transition was rejected."""
    GAME_STARTED = "game_started"
    DRAW_CARDS_REQUIRED = "draw_cards"
    NOT_YOUR_TURN = "not_your_turn"
    CHOOSE_CARD_REQUIRED = "choose_card"
    CARD_NOT_FOUND = "card_not_found"
    UNKNOWN_ACTION = "unknown_action"


ERROR_MESSAGES = {
    ErrorCode.GAME_STARTED: "Oops! This game has already started.",
    ErrorCode.DRAW_CARDS_REQUIRED: "Draw your cards before choosing one.",
    ErrorCode.NOT_YOUR_TURN: "It is not your turn.",
    ErrorCode.CHOOSE_CARD_REQUIRED: "Choose a card before placing it.",
    ErrorCode.CARD_NOT_FOUND: "That card is not in your hand.",
    ErrorCode.UNKNOWN_ACTION: "Unknown action.",
}


@dataclass
class ActionResult:
    """
    Result of applying a transition.

    Contains:
    - Whether it succeeded
    - New game (if succeeded)
    - Error code and message (if failed)
    - Human-readable changes (for logs and the CLI)
    """
    success: bool
    new_state: Any | None = None  # Game
    error: str | None = None
    error_code: ErrorCode | None = None

    state_changes: list[str] = field(default_factory=list)

    @classmethod
    def failure(cls, error_code: ErrorCode, error: str | None = None) -> ActionResult:
        """Create a failure result."""
        return cls(
            success=False,
            error=error or ERROR_MESSAGES[error_code],
            error_code=error_code,
        )

    @classmethod
    def success_with_state(
        cls,
        state: Any,
        changes: list[str] | None = None,
    ) -> ActionResult:
        """Create a success result with new state."""
        return cls(success=True, new_state=state, state_changes=changes or [])

"""
Session Module - Live games, looked up by name.

A session is one game in progress:
- Registered under a unique name when the first player starts it
- Holds the current Game
- Applies transitions one at a time
- Removed when the game ends or goes stale

Sessions are in-memory only. Nothing is persisted.
"""

from .directory import (
    GameDirectory,
    GameSession,
    DirectoryError,
    GameNameTakenError,
    GameNotFoundError,
)
from .names import generate_name

__all__ = [
    "GameDirectory",
    "GameSession",
    "DirectoryError",
    "GameNameTakenError",
    "GameNotFoundError",
    "generate_name",
]

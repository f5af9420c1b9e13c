"""Environment-level configuration.

Things that depend on where the engine runs (seeding, session expiry,
log verbosity) live here, away from the game rules.
"""

import logging
import os
from dataclasses import dataclass


DEFAULT_LOG_LEVEL = "INFO"


def _int_or_none(value):
    if value is None or value == "":
        return None
    return int(value)


def _log_level(value):
    """Upper-cased level name; unknown names fall back to the default."""
    level = (value or DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


@dataclass
class Settings:
    """Environment / deployment settings."""

    seed: int | None = None
    session_max_age: int = 3600
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables."""
        return cls(
            seed=_int_or_none(os.getenv("MONOBOLY_SEED")),
            session_max_age=int(os.getenv("MONOBOLY_SESSION_MAX_AGE", "3600")),
            log_level=_log_level(os.getenv("MONOBOLY_LOG_LEVEL")),
        )


def get_settings() -> Settings:
    """Convenience accessor for environment settings."""
    return Settings.from_env()

"""Random, human-friendly game names like "sly-boardwalk-4821"."""

from __future__ import annotations
import random

ADJECTIVES = [
    "bold", "brisk", "clever", "crafty", "daring", "eager", "lucky", "mighty",
    "nimble", "plucky", "quick", "shrewd", "sly", "steady", "swift", "wily",
]

NOUNS = [
    "baron", "boardwalk", "broker", "deal", "hotel", "landlord", "mogul",
    "railroad", "rent", "tycoon", "utility", "avenue", "banker", "house",
]


def generate_name(rng: random.Random | None = None) -> str:
    """A random game name; collisions are possible and left to the caller."""
    rng = rng or random
    return f"{rng.choice(ADJECTIVES)}-{rng.choice(NOUNS)}-{rng.randint(1000, 9999)}"

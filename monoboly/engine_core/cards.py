"""
Cards - The standard Monoboly Deal card set and deck helpers.

The standard set has 106 cards:
- 20 money cards
- 34 action cards
- 28 property cards
- 11 property wildcards
- 13 rent cards

Card ids are assigned in set order (1..106) so the unshuffled deck is
reproducible. Shuffling takes an injected random source.
"""

from __future__ import annotations
import random
from dataclasses import dataclass, field
from enum import Enum


DECK_SIZE = 106


class CardKind(Enum):
    """Kinds of card in the standard set."""
    MONEY = "money"
    ACTION = "action"
    PROPERTY = "property"
    PROPERTY_WILDCARD = "property_wildcard"
    RENT = "rent"


@dataclass(frozen=True, eq=False)
class Card:
    """
    A single card.

    Identity is by id: two cards with the same name and value are
    still different cards.
    """
    id: int
    kind: CardKind
    name: str
    value: int = 0
    colors: tuple[str, ...] = field(default_factory=tuple)

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if not isinstance(other, Card):
            return False
        return self.id == other.id


# (name, value, count)
MONEY_CARDS = [
    ("1M", 1, 6),
    ("2M", 2, 5),
    ("3M", 3, 3),
    ("4M", 4, 3),
    ("5M", 5, 2),
    ("10M", 10, 1),
]

ACTION_CARDS = [
    ("Deal Breaker", 5, 2),
    ("Just Say No", 4, 3),
    ("Pass Go", 1, 10),
    ("Forced Deal", 3, 3),
    ("Sly Deal", 3, 3),
    ("Debt Collector", 3, 3),
    ("It's My Birthday", 2, 3),
    ("Double The Rent", 1, 2),
    ("House", 3, 3),
    ("Hotel", 4, 2),
]

# color -> (value, property names)
PROPERTY_CARDS = {
    "brown": (1, ["Mediterranean Avenue", "Baltic Avenue"]),
    "light_blue": (1, ["Oriental Avenue", "Vermont Avenue", "Connecticut Avenue"]),
    "pink": (2, ["St. Charles Place", "States Avenue", "Virginia Avenue"]),
    "orange": (2, ["St. James Place", "Tennessee Avenue", "New York Avenue"]),
    "red": (3, ["Kentucky Avenue", "Indiana Avenue", "Illinois Avenue"]),
    "yellow": (3, ["Atlantic Avenue", "Ventnor Avenue", "Marvin Gardens"]),
    "green": (4, ["Pacific Avenue", "North Carolina Avenue", "Pennsylvania Avenue"]),
    "dark_blue": (4, ["Park Place", "Boardwalk"]),
    "railroad": (2, [
        "Reading Railroad",
        "Pennsylvania Railroad",
        "B. & O. Railroad",
        "Short Line",
    ]),
    "utility": (2, ["Electric Company", "Water Works"]),
}

# (colors, value, count)
PROPERTY_WILDCARDS = [
    (("any",), 0, 2),
    (("dark_blue", "green"), 4, 1),
    (("green", "railroad"), 4, 1),
    (("light_blue", "railroad"), 4, 1),
    (("light_blue", "brown"), 1, 1),
    (("pink", "orange"), 2, 2),
    (("railroad", "utility"), 2, 1),
    (("red", "yellow"), 3, 2),
]

RENT_CARDS = [
    (("any",), 3, 3),
    (("dark_blue", "green"), 1, 2),
    (("red", "yellow"), 1, 2),
    (("pink", "orange"), 1, 2),
    (("light_blue", "brown"), 1, 2),
    (("railroad", "utility"), 1, 2),
]


def _color_label(colors: tuple[str, ...]) -> str:
    return "/".join(c.replace("_", " ").title() for c in colors)


def standard_deck() -> list[Card]:
    """Build the 106-card standard set in a fixed order."""
    entries: list[tuple[CardKind, str, int, tuple[str, ...]]] = []

    for name, value, count in MONEY_CARDS:
        entries.extend([(CardKind.MONEY, name, value, ())] * count)

    for name, value, count in ACTION_CARDS:
        entries.extend([(CardKind.ACTION, name, value, ())] * count)

    for color, (value, names) in PROPERTY_CARDS.items():
        for name in names:
            entries.append((CardKind.PROPERTY, name, value, (color,)))

    for colors, value, count in PROPERTY_WILDCARDS:
        name = f"Property Wildcard ({_color_label(colors)})"
        entries.extend([(CardKind.PROPERTY_WILDCARD, name, value, colors)] * count)

    for colors, value, count in RENT_CARDS:
        name = f"Rent ({_color_label(colors)})"
        entries.extend([(CardKind.RENT, name, value, colors)] * count)

    return [
        Card(id=i, kind=kind, name=name, value=value, colors=colors)
        for i, (kind, name, value, colors) in enumerate(entries, start=1)
    ]


def shuffle(cards: list[Card], rng: random.Random | None = None) -> list[Card]:
    """Return a shuffled copy of cards."""
    shuffled = list(cards)
    (rng or random).shuffle(shuffled)
    return shuffled


def new_shuffled_deck(rng: random.Random | None = None) -> list[Card]:
    """A fresh standard deck in random order."""
    return shuffle(standard_deck(), rng)

"""
Tests for the card set and deck helpers.
"""

import random
from collections import Counter

from ..engine_core.cards import (
    Card,
    CardKind,
    DECK_SIZE,
    standard_deck,
    shuffle,
    new_shuffled_deck,
)


class TestStandardDeck:
    """Tests for the 106-card standard set."""

    def test_deck_size(self):
        """The standard set has 106 cards."""
        assert len(standard_deck()) == DECK_SIZE == 106

    def test_ids_unique(self):
        """No two cards share an id."""
        ids = [c.id for c in standard_deck()]
        assert len(set(ids)) == len(ids)

    def test_kind_counts(self):
        """Money, action, property, wildcard and rent counts match the set."""
        counts = Counter(c.kind for c in standard_deck())
        assert counts[CardKind.MONEY] == 20
        assert counts[CardKind.ACTION] == 34
        assert counts[CardKind.PROPERTY] == 28
        assert counts[CardKind.PROPERTY_WILDCARD] == 11
        assert counts[CardKind.RENT] == 13

    def test_money_total(self):
        """Money cards are worth 57M in total."""
        money = [c for c in standard_deck() if c.kind == CardKind.MONEY]
        assert sum(c.value for c in money) == 57

    def test_properties_have_colors(self):
        """Every property card belongs to exactly one color."""
        for card in standard_deck():
            if card.kind == CardKind.PROPERTY:
                assert len(card.colors) == 1

    def test_order_is_stable(self):
        """Two unshuffled decks are identical card for card."""
        first = standard_deck()
        second = standard_deck()
        assert [c.id for c in first] == [c.id for c in second]
        assert [c.name for c in first] == [c.name for c in second]


class TestCardIdentity:
    """Cards compare by id only."""

    def test_same_attributes_different_ids(self):
        a = Card(id=1, kind=CardKind.MONEY, name="1M", value=1)
        b = Card(id=2, kind=CardKind.MONEY, name="1M", value=1)
        assert a != b

    def test_same_id(self):
        a = Card(id=7, kind=CardKind.MONEY, name="1M", value=1)
        b = Card(id=7, kind=CardKind.ACTION, name="Pass Go", value=1)
        assert a == b
        assert len({a, b}) == 1


class TestShuffle:
    """Tests for shuffling."""

    def test_shuffle_is_permutation(self):
        """Shuffling keeps every card exactly once."""
        deck = standard_deck()
        shuffled = shuffle(deck, random.Random(3))
        assert sorted(c.id for c in shuffled) == [c.id for c in deck]

    def test_shuffle_does_not_touch_input(self):
        deck = standard_deck()
        ids = [c.id for c in deck]
        shuffle(deck, random.Random(3))
        assert [c.id for c in deck] == ids

    def test_seeded_shuffle_repeats(self):
        """The same seed gives the same order."""
        first = new_shuffled_deck(random.Random(99))
        second = new_shuffled_deck(random.Random(99))
        assert [c.id for c in first] == [c.id for c in second]

    def test_new_shuffled_deck_size(self):
        assert len(new_shuffled_deck()) == DECK_SIZE

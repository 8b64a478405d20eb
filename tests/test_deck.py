"""Tests for the Deck class."""

import random

import pytest

from holdem_equity.models.card import Card, Rank, Suit
from holdem_equity.simulation.deck import Deck, DeckExhaustedError


class TestDeck:
    """Tests for the Deck class."""

    def test_deck_initialization(self):
        """Test that a new deck has 52 cards."""
        deck = Deck()
        assert len(deck) == 52
        assert len(set(deck.cards)) == 52

    def test_deck_shuffle(self):
        """Test that shuffling changes the order."""
        deck1 = Deck(rng=random.Random(1))
        deck2 = Deck()
        deck1.shuffle()

        # It's possible but extremely unlikely for two shuffled decks to be the same
        assert deck1.cards != deck2.cards
        assert set(deck1.cards) == set(deck2.cards)

    def test_seeded_shuffle_is_reproducible(self):
        deck1 = Deck(rng=random.Random(42))
        deck2 = Deck(rng=random.Random(42))
        deck1.shuffle()
        deck2.shuffle()
        assert deck1.cards == deck2.cards

    def test_deal_cards(self):
        """Test dealing cards from the deck."""
        deck = Deck()
        dealt = deck.deal(5)
        assert len(dealt) == 5
        assert len(deck) == 47
        assert not set(dealt) & set(deck.cards)

    def test_deal_one(self):
        """Test dealing a single card."""
        deck = Deck()
        card = deck.deal_one()
        assert card is not None
        assert deck.remaining == 51

    def test_deal_from_top(self):
        cards = Card.parse_many("As Kd 7c")
        deck = Deck(cards=cards)
        assert deck.deal_one() == Card.parse("As")
        assert deck.deal(2) == Card.parse_many("Kd 7c")

    def test_deal_too_many(self):
        """Test dealing more cards than available."""
        deck = Deck()
        with pytest.raises(DeckExhaustedError, match="Need 53, have 52"):
            deck.deal(53)

    def test_exhausted_is_value_error(self):
        deck = Deck(cards=[])
        with pytest.raises(ValueError):
            deck.deal_one()

    def test_search_removes_matches(self):
        """Search returns every matching card in deck order and removes them."""
        deck = Deck()
        aces = deck.search(lambda c: c.rank == Rank.ACE)
        assert len(aces) == 4
        assert [c.suit for c in aces] == list(Suit)
        assert len(deck) == 48
        assert all(c.rank != Rank.ACE for c in deck.cards)

    def test_search_without_match(self):
        deck = Deck(cards=Card.parse_many("2c 3c"))
        assert deck.search(lambda c: c.suit == Suit.HEARTS) == []
        assert len(deck) == 2

    def test_reset(self):
        """Test resetting the deck."""
        deck = Deck()
        deck.deal(10)
        deck.reset()
        assert len(deck) == 52

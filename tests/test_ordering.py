"""Tests for rank, suit and card ordering."""

import pytest

from holdem_equity.models.card import Card, Rank, Suit
from holdem_equity.models.ordering import POKER_ORDER, RankOrder


class TestRankOrder:
    """Tests for RankOrder comparisons."""

    def test_ace_high(self):
        """With the Ace highest it beats the King, and the Two is lowest."""
        order = RankOrder(Rank.ACE)
        assert order.compare_ranks(Rank.ACE, Rank.KING) > 0
        assert order.compare_ranks(Rank.TWO, Rank.THREE) < 0
        assert order.sort_ranks(Rank)[0] == Rank.ACE
        assert order.sort_ranks(Rank)[-1] == Rank.TWO

    def test_king_high(self):
        """With the King highest ranks keep their natural values."""
        order = RankOrder(Rank.KING)
        assert order.sort_ranks(Rank)[0] == Rank.KING
        assert order.sort_ranks(Rank)[-1] == Rank.ACE
        assert all(order.rank_key(r) == r.value + 13 for r in Rank)

    def test_two_high(self):
        """With the Two highest, Ace and Two are lifted above the King."""
        order = RankOrder(Rank.TWO)
        ranked = order.sort_ranks(Rank)
        assert ranked[:3] == [Rank.TWO, Rank.ACE, Rank.KING]
        assert ranked[-1] == Rank.THREE

    def test_rank_equality(self):
        assert POKER_ORDER.compare_ranks(Rank.SEVEN, Rank.SEVEN) == 0

    def test_default_suit_order(self):
        assert POKER_ORDER.compare_suits(Suit.SPADES, Suit.HEARTS) > 0
        assert POKER_ORDER.compare_suits(Suit.DIAMONDS, Suit.CLUBS) > 0
        assert POKER_ORDER.compare_suits(Suit.CLUBS, Suit.SPADES) < 0

    def test_custom_suit_order(self):
        order = RankOrder(Rank.ACE, (Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES))
        assert order.compare_suits(Suit.CLUBS, Suit.SPADES) > 0
        assert order.suit_key(Suit.CLUBS) == 4
        assert order.suit_key(Suit.SPADES) == 1

    def test_duplicate_suit_rejected(self):
        with pytest.raises(ValueError, match="SPADES is duplicated"):
            RankOrder(Rank.ACE, (Suit.SPADES, Suit.SPADES, Suit.HEARTS, Suit.CLUBS))

    def test_incomplete_suit_order_rejected(self):
        with pytest.raises(ValueError):
            RankOrder(Rank.ACE, (Suit.SPADES, Suit.HEARTS))


class TestCardOrdering:
    """Tests for comparing and sorting cards."""

    def test_rank_decides_first(self):
        assert POKER_ORDER.compare_cards(Card.parse("Ac"), Card.parse("Ks")) > 0

    def test_suit_breaks_ties(self):
        assert POKER_ORDER.compare_cards(Card.parse("Qs"), Card.parse("Qh")) > 0
        assert POKER_ORDER.compare_cards(Card.parse("Qc"), Card.parse("Qd")) < 0

    def test_same_card_is_equal(self):
        assert POKER_ORDER.compare_cards(Card.parse("5d"), Card.parse("5d")) == 0

    def test_sort_cards(self):
        cards = Card.parse_many("2c Ah Kd Ks")
        assert POKER_ORDER.sort_cards(cards) == Card.parse_many("Ah Ks Kd 2c")
        assert POKER_ORDER.sort_cards(cards, descending=False) == Card.parse_many("2c Kd Ks Ah")

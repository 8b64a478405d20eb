"""Tests for card, rank and suit models."""

import pytest

from holdem_equity.models.card import Card, Rank, Suit, SuitColor


class TestRank:
    """Tests for the Rank enum."""

    def test_int_round_trip(self):
        """Every value from 1 to 13 maps to a rank with that value."""
        for value in range(1, 14):
            assert Rank.from_int(value).value == value

    @pytest.mark.parametrize("value", [0, 14, -1])
    def test_out_of_range_rejected(self, value):
        with pytest.raises(ValueError, match="out of range"):
            Rank.from_int(value)

    def test_chars(self):
        assert Rank.ACE.char == "A"
        assert Rank.TEN.char == "T"
        assert Rank.KING.char == "K"
        assert Rank.from_char("q") == Rank.QUEEN
        assert Rank.from_char("10") == Rank.TEN

    def test_unknown_char(self):
        with pytest.raises(ValueError):
            Rank.from_char("X")

    def test_predicates(self):
        assert Rank.ACE.is_ace
        assert not Rank.KING.is_ace
        assert Rank.JACK.is_picture_card
        assert Rank.KING.is_picture_card
        assert not Rank.ACE.is_picture_card
        assert not Rank.TEN.is_picture_card


class TestSuit:
    """Tests for the Suit enum."""

    def test_colors(self):
        assert Suit.SPADES.color == SuitColor.BLACK
        assert Suit.CLUBS.color == SuitColor.BLACK
        assert Suit.HEARTS.color == SuitColor.RED
        assert Suit.DIAMONDS.color == SuitColor.RED

    def test_from_symbol(self):
        assert Suit.from_symbol("h") == Suit.HEARTS
        assert Suit.from_symbol("♠") == Suit.SPADES
        assert Suit.from_symbol("D") == Suit.DIAMONDS

    def test_unknown_symbol(self):
        with pytest.raises(ValueError):
            Suit.from_symbol("x")


class TestCard:
    """Tests for the Card class."""

    def test_parse(self):
        card = Card.parse("Ah")
        assert card.rank == Rank.ACE
        assert card.suit == Suit.HEARTS
        assert Card.parse("10s") == Card(Rank.TEN, Suit.SPADES)

    def test_parse_invalid(self):
        with pytest.raises(ValueError):
            Card.parse("Ahh")

    def test_parse_many(self):
        cards = Card.parse_many("Ah Kd, 7c")
        assert cards == [
            Card(Rank.ACE, Suit.HEARTS),
            Card(Rank.KING, Suit.DIAMONDS),
            Card(Rank.SEVEN, Suit.CLUBS),
        ]

    def test_repr_and_str(self):
        card = Card(Rank.ACE, Suit.SPADES)
        assert repr(card) == "As"
        assert str(card) == "A♠"
        assert card.to_short() == "As"

    def test_equality_and_hash(self):
        a = Card(Rank.NINE, Suit.CLUBS)
        b = Card.parse("9c")
        assert a == b
        assert hash(a) == hash(b)
        assert a != Card(Rank.NINE, Suit.HEARTS)
        assert len({a, b}) == 1

    def test_full_deck(self):
        deck = Card.full_deck()
        assert len(deck) == 52
        assert len(set(deck)) == 52
        for suit in Suit:
            assert sum(1 for c in deck if c.suit == suit) == 13

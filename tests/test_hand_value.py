"""Tests for hand values and the evaluator facade."""

import itertools

import pytest

from holdem_equity.models.card import Card, Rank
from holdem_equity.simulation.evaluator import (
    BestFiveHand, HandCategory, HandEvaluator, HandValue
)


def value(text: str) -> HandValue:
    return HandEvaluator.value_of(Card.parse_many(text))


class TestHandValue:
    """Tests for the total order of hand values."""

    def test_category_dominates(self):
        assert value("2h 2d 3c 4s 6h") > value("Ah Kd Qc Js 9h")
        assert value("2h 3h 4h 5h 7h") > value("Ah Kd Qc Js Th")

    def test_ranks_break_ties(self):
        assert value("Ah Ad Kc 4s 2h") > value("Ah Ad Qc Js 9h")
        assert value("Kh Kd 9c 9s 2h") < value("Kh Kd Tc Ts 2h")

    def test_kicker(self):
        assert value("Ah Ad Kc 4s 3h") > value("Ac As Kh 4d 2c")

    def test_suits_do_not_matter(self):
        assert value("Ah Kh Qh Jh 9c") == value("As Ks Qs Js 9d")

    def test_wheel_is_lowest_straight(self):
        assert value("Ah 2d 3c 4s 5h") < value("2d 3c 4s 5h 6c")
        assert value("Ah 2d 3c 4s 5h") == value("As 2c 3d 4h 5s")

    def test_total_order(self):
        """Antisymmetry and transitivity over a mixed set of hands."""
        values = [
            value("Ah Jd 8c 4s 2h"),
            value("Th Td 8c 4s 2h"),
            value("Jh Jd 4c 4s Ah"),
            value("9h 8d 7c 6s 5h"),
            value("Ah 9h 7h 4h 2h"),
            value("Kh Kd Kc 9s 9h"),
            value("7h 7d 7c 7s Kh"),
        ]
        assert values == sorted(values)
        for a, b in itertools.permutations(values, 2):
            assert (a < b) != (b < a)
        for a, b, c in itertools.combinations(values, 3):
            assert a < b < c

    def test_hashable(self):
        assert len({value("Ah Kh Qh Jh 9c"), value("As Ks Qs Js 9d")}) == 1

    def test_needs_five_ranks(self):
        with pytest.raises(ValueError):
            HandValue(HandCategory.PAIR, (Rank.ACE, Rank.ACE))

    def test_str(self):
        assert str(value("Ah Ad Kc Ks 9h")) == "Two Pair [A A K K 9]"


class TestHandEvaluator:
    """Tests for the evaluator facade."""

    def test_evaluate(self):
        best = HandEvaluator.evaluate(Card.parse_many("Ah Kh Qh Jh Th 2c 3d"))
        assert isinstance(best, BestFiveHand)
        assert best.category == HandCategory.ROYAL_FLUSH

    def test_evaluate_short_pool(self):
        assert HandEvaluator.evaluate(Card.parse_many("Ah Kh")) is None
        with pytest.raises(ValueError):
            HandEvaluator.value_of(Card.parse_many("Ah Kh"))

    def test_compare(self):
        assert HandEvaluator.compare(Card.parse_many("Ah Ad 2c 3s 7h"),
                                     Card.parse_many("Kh Kd 2d 3h 7c")) == 1
        assert HandEvaluator.compare(Card.parse_many("Kh Kd 2d 3h 7c"),
                                     Card.parse_many("Ah Ad 2c 3s 7h")) == -1
        assert HandEvaluator.compare(Card.parse_many("Ah Kd 9c 5s 3h"),
                                     Card.parse_many("Ac Kh 9d 5c 3s")) == 0

    def test_get_winners_two_pair_beats_pair(self):
        board = Card.parse_many("Ad Kd 2c 7h 9s")
        players = {
            1: Card.parse_many("As Ks"),
            2: Card.parse_many("Kh Qh"),
        }
        assert HandEvaluator.get_winners(board, players) == [1]
        assert str(HandEvaluator.value_of(players[1] + board)) == "Two Pair [A A K K 9]"
        assert str(HandEvaluator.value_of(players[2] + board)) == "Pair [K K A Q 9]"

    def test_get_winners_split_pot(self):
        """The board plays for everyone: all seats tie."""
        board = Card.parse_many("Ah Kh Qh Jh Th")
        players = {
            1: Card.parse_many("2c 3d"),
            2: Card.parse_many("4c 5d"),
            3: Card.parse_many("6c 7d"),
        }
        assert HandEvaluator.get_winners(board, players) == [1, 2, 3]

    def test_get_winners_empty(self):
        assert HandEvaluator.get_winners(Card.parse_many("Ah Kh Qh Jh Th"), {}) == []

    def test_rank_name(self):
        assert HandEvaluator.get_rank_name(HandCategory.FULL_HOUSE) == "Full House"
        assert HandEvaluator.get_rank_name(HandCategory.HIGH_CARD) == "High Card"

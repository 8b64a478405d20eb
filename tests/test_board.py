"""Tests for dealing a board street by street."""

import random

import pytest

from holdem_equity.models.card import Card
from holdem_equity.models.simulation import Phase
from holdem_equity.simulation.board import Board
from holdem_equity.simulation.deck import Deck, DeckExhaustedError


def stacked_board(text: str) -> Board:
    return Board(deck=Deck(cards=Card.parse_many(text)))


class TestPhase:
    """Tests for the Phase enum."""

    def test_order_and_next(self):
        assert [p.order for p in Phase] == [0, 1, 2, 3]
        assert Phase.PREFLOP.next == Phase.FLOP
        assert Phase.TURN.next == Phase.RIVER
        assert Phase.RIVER.next is None

    def test_cards_to_deal(self):
        assert sum(p.cards_to_deal for p in Phase) == 5


class TestBoard:
    """Tests for the Board class."""

    def test_new_board(self):
        board = Board(rng=random.Random(3))
        assert board.current_phase == Phase.PREFLOP
        assert board.cards == []
        assert len(board.deck) == 52

    def test_deal_phases(self):
        board = stacked_board("Ah Kh Qh Jh Th 9h")
        assert board.deal_next_card() == Phase.FLOP
        assert board.flop == Card.parse_many("Ah Kh Qh")
        assert board.deal_next_card() == Phase.TURN
        assert board.turn == Card.parse("Jh")
        assert board.deal_next_card() == Phase.RIVER
        assert board.river == Card.parse("Th")
        assert board.cards == Card.parse_many("Ah Kh Qh Jh Th")

    def test_river_is_final(self):
        """Dealing past the river changes nothing."""
        board = stacked_board("Ah Kh Qh Jh Th 9h")
        board.deal_until(Phase.RIVER)
        assert board.deal_next_card() == Phase.RIVER
        assert len(board.cards) == 5
        assert len(board.deck) == 1

    def test_deal_until_is_idempotent(self):
        board = stacked_board("Ah Kh Qh Jh Th")
        board.deal_until(Phase.FLOP)
        board.deal_until(Phase.FLOP)
        board.deal_until(Phase.PREFLOP)
        assert board.current_phase == Phase.FLOP
        assert len(board.cards) == 3

    def test_deal_starting_hands(self):
        """Each player gets two consecutive cards from the top."""
        board = stacked_board("As Ks Kh Qd 2c")
        hands = board.deal_starting_hands(2)
        assert [h.summary() for h in hands] == ["AKs", "KQo"]
        assert len(board.deck) == 1

    def test_full_table_fits(self):
        board = Board(rng=random.Random(5))
        hands = board.deal_starting_hands(23)
        board.deal_until(Phase.RIVER)
        dealt = [c for h in hands for c in h.cards] + board.cards
        assert len(set(dealt)) == 51

    def test_exhausted_deck(self):
        board = stacked_board("Ah Kh")
        with pytest.raises(DeckExhaustedError):
            board.deal_next_card()

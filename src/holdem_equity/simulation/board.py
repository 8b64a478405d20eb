"""Community cards dealt street by street."""

import random
from typing import List, Optional

from holdem_equity.models.card import Card
from holdem_equity.models.simulation import Phase
from holdem_equity.models.starting_hand import StartingHand
from holdem_equity.simulation.deck import Deck


class Board:
    """Dealer of one deal: hole cards first, then flop, turn and river.

    Phases only move forward and dealt cards are never taken back.
    """

    def __init__(self, deck: Optional[Deck] = None, rng: Optional[random.Random] = None):
        """Create a board.

        Args:
            deck: Pre-arranged deck, dealt as is. When omitted a fresh
                52-card deck is shuffled with ``rng``.
            rng: Random source for the fresh deck.
        """
        if deck is None:
            deck = Deck(rng=rng)
            deck.shuffle()
        self.deck = deck
        self.flop: Optional[List[Card]] = None
        self.turn: Optional[Card] = None
        self.river: Optional[Card] = None

    @property
    def cards(self) -> List[Card]:
        """Community cards dealt so far."""
        cards = list(self.flop or [])
        if self.turn is not None:
            cards.append(self.turn)
        if self.river is not None:
            cards.append(self.river)
        return cards

    @property
    def current_phase(self) -> Phase:
        if self.flop is None:
            return Phase.PREFLOP
        if self.turn is None:
            return Phase.FLOP
        if self.river is None:
            return Phase.TURN
        return Phase.RIVER

    def deal_starting_hands(self, num_of_players: int) -> List[StartingHand]:
        """Deal two cards to each player, one player at a time."""
        hands = []
        for _ in range(num_of_players):
            first, second = self.deck.deal(2)
            hands.append(StartingHand(first, second))
        return hands

    def deal_next_card(self) -> Phase:
        """Advance one phase and return the new phase. No-op on the river."""
        phase = self.current_phase
        if phase == Phase.PREFLOP:
            self.flop = self.deck.deal(Phase.FLOP.cards_to_deal)
        elif phase == Phase.FLOP:
            self.turn = self.deck.deal_one()
        elif phase == Phase.TURN:
            self.river = self.deck.deal_one()
        return self.current_phase

    def deal_until(self, until: Phase) -> None:
        """Deal until ``until`` is reached. Phases already passed are left alone."""
        while self.current_phase.order < until.order:
            self.deal_next_card()

    def __repr__(self) -> str:
        return f"Board({self.current_phase.value}: {' '.join(repr(c) for c in self.cards)})"

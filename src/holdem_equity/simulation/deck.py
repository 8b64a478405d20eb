"""Deck management for poker simulation."""

import random
from typing import Callable, List, Optional

from holdem_equity.models.card import Card


class DeckExhaustedError(ValueError):
    """Raised when more cards are dealt than the deck holds."""


class Deck:
    """A deck of cards, dealt from the top.

    Without explicit ``cards`` the deck holds the standard 52 cards.
    """

    def __init__(self, cards: Optional[List[Card]] = None,
                 rng: Optional[random.Random] = None):
        """Initialize a new deck.

        Args:
            cards: Cards in dealing order; the first one is dealt next.
            rng: Random source for shuffling. Defaults to a private instance.
        """
        self._initial_cards = list(cards) if cards is not None else Card.full_deck()
        self._rng = rng or random.Random()
        self.cards: List[Card] = []
        self._reset()

    def _reset(self):
        """Reset the deck to its initial cards."""
        self.cards = list(self._initial_cards)

    def shuffle(self):
        """Shuffle the deck in place."""
        self._rng.shuffle(self.cards)

    def deal(self, count: int = 1) -> List[Card]:
        """Deal cards from the top of the deck.

        Args:
            count: Number of cards to deal.

        Returns:
            List of dealt cards.
        """
        if count > len(self.cards):
            raise DeckExhaustedError(
                f"Not enough cards in deck. Need {count}, have {len(self.cards)}"
            )

        dealt = self.cards[:count]
        del self.cards[:count]
        return dealt

    def deal_one(self) -> Card:
        """Deal a single card from the top of the deck.

        Returns:
            The dealt card.
        """
        return self.deal(1)[0]

    def search(self, condition: Callable[[Card], bool]) -> List[Card]:
        """Remove all cards matching ``condition`` and return them in deck order."""
        found: List[Card] = []
        kept: List[Card] = []
        for card in self.cards:
            (found if condition(card) else kept).append(card)
        self.cards = kept
        return found

    def reset(self):
        """Reset and shuffle the deck."""
        self._reset()
        self.shuffle()

    @property
    def remaining(self) -> int:
        """Get the number of remaining cards."""
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self.cards)})"

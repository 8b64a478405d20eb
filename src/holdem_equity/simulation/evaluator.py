"""Hand evaluation for poker simulation."""

from typing import Dict, List, Optional, Sequence

from holdem_equity.models.card import Card
from holdem_equity.simulation.detectors import find_best_five_hand
from holdem_equity.simulation.hand_value import BestFiveHand, HandCategory, HandValue
from holdem_equity.simulation.multiset import CardMultiset

__all__ = ["BestFiveHand", "HandCategory", "HandEvaluator", "HandValue"]


class HandEvaluator:
    """Evaluates poker hands."""

    @staticmethod
    def evaluate(cards: Sequence[Card]) -> Optional[BestFiveHand]:
        """Find the best five-card hand among up to seven cards.

        Args:
            cards: List of cards (up to 7).

        Returns:
            The best hand, or None if fewer than 5 cards were given.
        """
        return find_best_five_hand(CardMultiset(cards))

    @staticmethod
    def value_of(cards: Sequence[Card]) -> HandValue:
        """Like evaluate, but for pools known to hold at least 5 cards."""
        best = HandEvaluator.evaluate(cards)
        if best is None:
            raise ValueError(f"At least 5 cards are needed to make a hand, got {len(cards)}")
        return best.value()

    @staticmethod
    def compare(cards1: Sequence[Card], cards2: Sequence[Card]) -> int:
        """Compare two hands.

        Args:
            cards1: First hand.
            cards2: Second hand.

        Returns:
            1 if cards1 wins, -1 if cards2 wins, 0 if tie.
        """
        value1 = HandEvaluator.value_of(cards1)
        value2 = HandEvaluator.value_of(cards2)

        if value1 > value2:
            return 1
        if value1 < value2:
            return -1
        return 0

    @staticmethod
    def get_winners(board: Sequence[Card],
                    player_cards: Dict[int, Sequence[Card]]) -> List[int]:
        """Get the winning seat(s) from a group of players.

        Args:
            board: Community cards.
            player_cards: Mapping from seat to player's hole cards.

        Returns:
            List of winning seat numbers (may be multiple for ties).
        """
        if not player_cards:
            return []

        values = {
            seat: HandEvaluator.value_of([*cards, *board])
            for seat, cards in player_cards.items()
        }
        best = max(values.values())
        return [seat for seat, value in values.items() if value == best]

    @staticmethod
    def get_rank_name(category: HandCategory) -> str:
        """Get a human-readable name for a hand category."""
        return category.label

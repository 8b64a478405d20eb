"""Configurable ordering of ranks, suits and cards."""

from typing import Dict, Iterable, List, Sequence, Tuple

from holdem_equity.models.card import Card, Rank, Suit


DEFAULT_SUIT_ORDER = (Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS)


class RankOrder:
    """Compares ranks, suits and cards on a flexible scale.

    ``highest_rank`` is the highest rank that is still lifted above the
    King: every rank at or below it gets ``rank + 13`` as its key. With
    ``Rank.ACE`` the Ace becomes the strongest rank, with ``Rank.KING``
    ranks keep their natural order.

    ``suit_order`` lists the suits strongest first. Suits only break ties
    between cards of equal rank and carry no poker meaning.
    """

    def __init__(self, highest_rank: Rank = Rank.ACE,
                 suit_order: Sequence[Suit] = DEFAULT_SUIT_ORDER):
        if len(suit_order) != len(Suit):
            raise ValueError(f"Suit order must list all {len(Suit)} suits, got {len(suit_order)}")

        strengths: Dict[Suit, int] = {}
        for i, suit in enumerate(suit_order):
            if suit in strengths:
                raise ValueError(f"{suit.name} is duplicated in suit order")
            strengths[suit] = len(suit_order) - i

        self.highest_rank = highest_rank
        self.suit_order = tuple(suit_order)
        self._suit_strengths = strengths
        self._rank_keys = {
            rank: rank.value + Rank.KING.value if rank.value <= highest_rank.value else rank.value
            for rank in Rank
        }

    def rank_key(self, rank: Rank) -> int:
        return self._rank_keys[rank]

    def suit_key(self, suit: Suit) -> int:
        return self._suit_strengths[suit]

    def card_key(self, card: Card) -> Tuple[int, int]:
        return self._rank_keys[card.rank], self._suit_strengths[card.suit]

    def compare_ranks(self, a: Rank, b: Rank) -> int:
        """Return a positive number if ``a`` is greater, negative if lower, 0 if equal."""
        return self.rank_key(a) - self.rank_key(b)

    def compare_suits(self, a: Suit, b: Suit) -> int:
        return self.suit_key(a) - self.suit_key(b)

    def compare_cards(self, a: Card, b: Card) -> int:
        """Compare by rank first, then by suit."""
        by_rank = self.compare_ranks(a.rank, b.rank)
        if by_rank:
            return by_rank
        return self.compare_suits(a.suit, b.suit)

    def sort_ranks(self, ranks: Iterable[Rank], descending: bool = True) -> List[Rank]:
        return sorted(ranks, key=self.rank_key, reverse=descending)

    def sort_cards(self, cards: Iterable[Card], descending: bool = True) -> List[Card]:
        return sorted(cards, key=self.card_key, reverse=descending)

    def __repr__(self) -> str:
        suits = "".join(s.value for s in self.suit_order)
        return f"RankOrder(highest_rank={self.highest_rank.name}, suit_order={suits})"


# Ace high, spades > hearts > diamonds > clubs.
POKER_ORDER = RankOrder(Rank.ACE)

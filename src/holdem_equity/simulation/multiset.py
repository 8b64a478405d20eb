"""Statistics over the pool of cards a player can build a hand from."""

from collections import Counter
from typing import Iterable, List, Optional, Sequence, Tuple

from holdem_equity.models.card import Card, Rank, Suit
from holdem_equity.models.ordering import POKER_ORDER, RankOrder
from holdem_equity.models.starting_hand import StartingHand

MAX_CARDS = 7


def _rank_bit(rank: Rank) -> int:
    return 1 << (rank.value - 1)


def _window_ranks(head: Rank) -> Tuple[Rank, ...]:
    """Ranks of the straight headed by ``head``, head first.

    The Ace heads the Broadway straight and closes the 5-high wheel.
    """
    top = 14 if head.is_ace else head.value
    return tuple(Rank.ACE if v in (1, 14) else Rank(v) for v in range(top, top - 5, -1))


# Ten straight windows from Ace-high down to the wheel.
STRAIGHT_HEADS: Tuple[Rank, ...] = (Rank.ACE,) + tuple(Rank(v) for v in range(13, 4, -1))
STRAIGHT_WINDOWS: Tuple[Tuple[Rank, int], ...] = tuple(
    (head, sum(_rank_bit(r) for r in _window_ranks(head))) for head in STRAIGHT_HEADS
)


def straight_ranks(head: Rank) -> Tuple[Rank, ...]:
    """Ranks forming the straight headed by ``head``, in descending order."""
    if head not in STRAIGHT_HEADS:
        raise ValueError(f"No straight is headed by {head.name}")
    return _window_ranks(head)


class CardMultiset:
    """Rank, suit and straight statistics of up to seven cards.

    Everything is computed once at construction; instances are read-only.
    """

    def __init__(self, cards: Sequence[Card], order: RankOrder = POKER_ORDER):
        if len(cards) > MAX_CARDS:
            raise ValueError(
                f"The maximum number of cards in a multiset is {MAX_CARDS}, got {len(cards)}"
            )
        self.order = order
        self._cards = tuple(order.sort_cards(cards))
        self._rank_counts = Counter(c.rank for c in self._cards)
        self._suit_counts = Counter(c.suit for c in self._cards)

        mask = 0
        for rank in self._rank_counts:
            mask |= _rank_bit(rank)
        self._mask = mask

        heads: List[Rank] = []
        draws: List[Rank] = []
        for head, window in STRAIGHT_WINDOWS:
            missing = window & ~mask
            if not missing:
                heads.append(head)
            elif missing & (missing - 1) == 0:
                draws.append(Rank(missing.bit_length()))
        # Windows run from the Ace-high down, so heads are already descending.
        self._heads_of_straight = tuple(heads)
        self._straight_draw_ranks = tuple(order.sort_ranks(set(draws)))

    @classmethod
    def from_starting_hand_and_board(cls, hand: StartingHand,
                                     board_cards: Iterable[Card]) -> "CardMultiset":
        return cls([*hand.cards, *board_cards])

    @property
    def cards(self) -> Tuple[Card, ...]:
        """All cards sorted in descending order."""
        return self._cards

    @property
    def rank_mask(self) -> int:
        """13-bit mask with bit ``rank - 1`` set for every present rank."""
        return self._mask

    def __len__(self) -> int:
        return len(self._cards)

    def rank_count(self, rank: Rank) -> int:
        return self._rank_counts.get(rank, 0)

    def suit_count(self, suit: Suit) -> int:
        return self._suit_counts.get(suit, 0)

    def _ranks_with_count(self, count: int) -> List[Rank]:
        return self.order.sort_ranks(r for r, n in self._rank_counts.items() if n == count)

    def ranks_of_pairs(self) -> List[Rank]:
        """Ranks held exactly twice, higher rank first."""
        return self._ranks_with_count(2)

    def ranks_of_sets(self) -> List[Rank]:
        """Ranks held exactly three times, higher rank first."""
        return self._ranks_with_count(3)

    def rank_of_quads(self) -> Optional[Rank]:
        quads = self._ranks_with_count(4)
        return quads[0] if quads else None

    def suit_of_flush(self) -> Optional[Suit]:
        """Suit held at least five times, if any."""
        for suit, n in self._suit_counts.items():
            if n >= 5:
                return suit
        return None

    def is_flush_draw(self) -> bool:
        """Whether some suit is held at least four times."""
        return any(n >= 4 for n in self._suit_counts.values())

    def head_ranks_of_straight(self) -> List[Rank]:
        """Head ranks of every completed straight, highest first."""
        return list(self._heads_of_straight)

    def straight_draw_ranks(self) -> List[Rank]:
        """Ranks that would complete a straight with one more card, highest first."""
        return list(self._straight_draw_ranks)

    def __repr__(self) -> str:
        return f"CardMultiset({' '.join(repr(c) for c in self._cards)})"

"""Hand categories, best five-card hands and their total order."""

from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering
from typing import Tuple

from holdem_equity.models.card import Card, Rank
from holdem_equity.models.ordering import POKER_ORDER


class HandCategory(IntEnum):
    """Hand categories from worst to best."""
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").title()


@total_ordering
@dataclass(frozen=True, eq=False)
class HandValue:
    """Comparable summary of a best five-card hand.

    Hands compare by category first, then by the five ranks in the order
    the detector laid them out, Ace high.
    """
    category: HandCategory
    ranks: Tuple[Rank, Rank, Rank, Rank, Rank]

    def __post_init__(self):
        if len(self.ranks) != 5:
            raise ValueError(f"HandValue needs exactly 5 ranks, got {len(self.ranks)}")

    def sort_key(self) -> Tuple[int, ...]:
        return (int(self.category), *(POKER_ORDER.rank_key(r) for r in self.ranks))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HandValue):
            return NotImplemented
        return self.category == other.category and self.ranks == other.ranks

    def __lt__(self, other: "HandValue") -> bool:
        if not isinstance(other, HandValue):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __hash__(self) -> int:
        return hash((self.category, self.ranks))

    def __str__(self) -> str:
        return f"{self.category.label} [{' '.join(r.char for r in self.ranks)}]"


@dataclass(frozen=True)
class BestFiveHand:
    """Five cards forming the best hand of a category.

    Cards keep the detector's layout: the cards defining the category
    first, kickers last.
    """
    cards: Tuple[Card, Card, Card, Card, Card]
    category: HandCategory

    def __post_init__(self):
        if len(self.cards) != 5:
            raise ValueError(f"BestFiveHand needs exactly 5 cards, got {len(self.cards)}")

    def value(self) -> HandValue:
        return HandValue(self.category, tuple(c.rank for c in self.cards))

    def __str__(self) -> str:
        return f"{self.category.label}: {' '.join(str(c) for c in self.cards)}"

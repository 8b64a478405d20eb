"""Two-card starting hand dealt to a player."""

from typing import Iterable, Tuple

from holdem_equity.models.card import Card, Rank, Suit
from holdem_equity.models.ordering import POKER_ORDER


class StartingHand:
    """A player's two hole cards, higher card first.

    The card order is canonical under POKER_ORDER, so the same two cards
    always make equal hands with equal hashes regardless of deal order.
    """

    __slots__ = ("higher_card", "lower_card")

    def __init__(self, a: Card, b: Card):
        if a == b:
            raise ValueError(f"Starting hand needs two different cards, got {a!r} twice")
        if POKER_ORDER.compare_cards(a, b) > 0:
            self.higher_card, self.lower_card = a, b
        else:
            self.higher_card, self.lower_card = b, a

    @classmethod
    def parse(cls, s: str) -> "StartingHand":
        """Parse hole cards like 'AsKs' or 'As Ks'."""
        s = s.replace(" ", "").replace(",", "")
        if len(s) != 4:
            raise ValueError(f"Cannot parse starting hand: {s}")
        return cls(Card.parse(s[:2]), Card.parse(s[2:]))

    @property
    def cards(self) -> Tuple[Card, Card]:
        return self.higher_card, self.lower_card

    def has_rank_of(self, rank: Rank) -> bool:
        return self.higher_card.rank == rank or self.lower_card.rank == rank

    def has_any_rank_of(self, ranks: Iterable[Rank]) -> bool:
        return any(self.has_rank_of(r) for r in ranks)

    def has_suit_of(self, suit: Suit) -> bool:
        return self.higher_card.suit == suit or self.lower_card.suit == suit

    @property
    def is_suited(self) -> bool:
        return self.higher_card.suit == self.lower_card.suit

    def is_suited_in(self, suit: Suit) -> bool:
        return self.is_suited and self.has_suit_of(suit)

    @property
    def is_pair(self) -> bool:
        return self.higher_card.rank == self.lower_card.rank

    def is_pair_of(self, rank: Rank) -> bool:
        return self.is_pair and self.has_rank_of(rank)

    @property
    def is_connector(self) -> bool:
        # An Ace connects both to the King and to the Two.
        high, low = self.higher_card.rank, self.lower_card.rank
        if high.is_ace:
            return low in (Rank.KING, Rank.TWO)
        return low.value == high.value - 1

    @property
    def is_suited_connector(self) -> bool:
        return self.is_suited and self.is_connector

    @property
    def is_one_gapper(self) -> bool:
        high, low = self.higher_card.rank, self.lower_card.rank
        if high.is_ace:
            return low in (Rank.QUEEN, Rank.THREE)
        return low.value == high.value - 2

    @property
    def is_suited_one_gapper(self) -> bool:
        return self.is_suited and self.is_one_gapper

    def summary(self) -> str:
        """Shape of the hand without suits: 'AKs', 'AKo' or '77'."""
        if self.is_pair:
            suffix = ""
        elif self.is_suited:
            suffix = "s"
        else:
            suffix = "o"
        return f"{self.higher_card.rank.char}{self.lower_card.rank.char}{suffix}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StartingHand):
            return NotImplemented
        return self.higher_card == other.higher_card and self.lower_card == other.lower_card

    def __hash__(self) -> int:
        return hash((self.higher_card, self.lower_card))

    def __repr__(self) -> str:
        return f"StartingHand({self.higher_card!r}, {self.lower_card!r})"

    def __str__(self) -> str:
        return f"[{self.higher_card} {self.lower_card}]"

"""Card, Rank, and Suit models."""

from enum import Enum, IntEnum
from typing import List


class SuitColor(str, Enum):
    BLACK = "black"
    RED = "red"


class Suit(str, Enum):
    SPADES = "s"
    HEARTS = "h"
    DIAMONDS = "d"
    CLUBS = "c"

    @classmethod
    def from_symbol(cls, s: str) -> "Suit":
        mapping = {
            "h": cls.HEARTS, "Hearts": cls.HEARTS, "♥": cls.HEARTS,
            "d": cls.DIAMONDS, "Diamonds": cls.DIAMONDS, "♦": cls.DIAMONDS,
            "c": cls.CLUBS, "Clubs": cls.CLUBS, "♣": cls.CLUBS,
            "s": cls.SPADES, "Spades": cls.SPADES, "♠": cls.SPADES,
        }
        if s in mapping:
            return mapping[s]
        if s.lower() in mapping:
            return mapping[s.lower()]
        raise ValueError(f"Unknown suit: {s}")

    @property
    def symbol(self) -> str:
        return {"h": "♥", "d": "♦", "c": "♣", "s": "♠"}[self.value]

    @property
    def color(self) -> SuitColor:
        if self in (Suit.SPADES, Suit.CLUBS):
            return SuitColor.BLACK
        return SuitColor.RED


class Rank(IntEnum):
    """Card rank with its canonical value, Ace being 1.

    The integer value carries no poker strength; compare ranks through a
    RankOrder.
    """
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def char(self) -> str:
        return _RANK_CHARS[self.value]

    @property
    def is_ace(self) -> bool:
        return self is Rank.ACE

    @property
    def is_picture_card(self) -> bool:
        return self in (Rank.JACK, Rank.QUEEN, Rank.KING)

    @classmethod
    def from_int(cls, value: int) -> "Rank":
        if not 1 <= value <= 13:
            raise ValueError(f"Rank value is out of range: {value}")
        return cls(value)

    @classmethod
    def from_char(cls, c: str) -> "Rank":
        for r in cls:
            if r.char == c.upper():
                return r
        if c == "10":
            return cls.TEN
        raise ValueError(f"Unknown rank: {c}")


_RANK_CHARS = {
    1: "A", 2: "2", 3: "3", 4: "4", 5: "5", 6: "6", 7: "7",
    8: "8", 9: "9", 10: "T", 11: "J", 12: "Q", 13: "K",
}


class Card:
    """A single playing card."""

    __slots__ = ("rank", "suit")

    def __init__(self, rank: Rank, suit: Suit):
        self.rank = rank
        self.suit = suit

    @classmethod
    def parse(cls, s: str) -> "Card":
        """Parse a card string like 'Ah', 'Ts', '2c'."""
        s = s.strip()
        if len(s) == 2:
            return cls(Rank.from_char(s[0]), Suit.from_symbol(s[1]))
        elif len(s) == 3 and s[:2] == "10":
            return cls(Rank.TEN, Suit.from_symbol(s[2]))
        raise ValueError(f"Cannot parse card: {s}")

    @classmethod
    def parse_many(cls, s: str) -> List["Card"]:
        """Parse whitespace or comma separated cards like 'Ah Kd, 7c'."""
        return [cls.parse(token) for token in s.replace(",", " ").split()]

    @classmethod
    def full_deck(cls) -> List["Card"]:
        """All 52 cards, suit by suit."""
        return [cls(rank, suit) for suit in Suit for rank in Rank]

    def __repr__(self) -> str:
        return f"{self.rank.char}{self.suit.value}"

    def __str__(self) -> str:
        return f"{self.rank.char}{self.suit.symbol}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank and self.suit == other.suit

    def __hash__(self) -> int:
        return hash((self.rank, self.suit))

    def to_short(self) -> str:
        """Return short string like 'Ah'."""
        return f"{self.rank.char}{self.suit.value}"

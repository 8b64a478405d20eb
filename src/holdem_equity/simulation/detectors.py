"""Category detectors, one per hand category.

Each detector tries to build the best five-card hand of its own category
and returns None when the cards do not make it. A multiset usually
satisfies several detectors at once (a full house also holds three of a
kind), so callers must try them strongest first and stop at the first hit;
``find_best_five_hand`` does exactly that.
"""

from typing import Callable, List, Optional, Sequence, Tuple

from holdem_equity.models.card import Card, Rank
from holdem_equity.simulation.hand_value import BestFiveHand, HandCategory
from holdem_equity.simulation.multiset import CardMultiset, straight_ranks

Detector = Callable[[CardMultiset], Optional[BestFiveHand]]


def _of_rank(cards: Sequence[Card], rank: Rank) -> List[Card]:
    return [c for c in cards if c.rank == rank]


def _not_of_ranks(cards: Sequence[Card], *ranks: Rank) -> List[Card]:
    return [c for c in cards if c.rank not in ranks]


def _build(cards: Sequence[Card], category: HandCategory) -> BestFiveHand:
    return BestFiveHand(tuple(cards[:5]), category)


def royal_flush(hand: CardMultiset) -> Optional[BestFiveHand]:
    best = straight_flush(hand)
    if best is None or not best.cards[0].rank.is_ace:
        return None
    return BestFiveHand(best.cards, HandCategory.ROYAL_FLUSH)


def straight_flush(hand: CardMultiset) -> Optional[BestFiveHand]:
    suit = hand.suit_of_flush()
    if len(hand) < 5 or suit is None:
        return None
    suited = [c for c in hand.cards if c.suit == suit]
    for head in hand.head_ranks_of_straight():
        run: List[Card] = []
        for rank in straight_ranks(head):
            match = _of_rank(suited, rank)
            if not match:
                break
            run.append(match[0])
        if len(run) == 5:
            return _build(run, HandCategory.STRAIGHT_FLUSH)
    return None


def four_of_a_kind(hand: CardMultiset) -> Optional[BestFiveHand]:
    rank = hand.rank_of_quads()
    if len(hand) < 5 or rank is None:
        return None
    cards = _of_rank(hand.cards, rank) + _not_of_ranks(hand.cards, rank)[:1]
    return _build(cards, HandCategory.FOUR_OF_A_KIND)


def full_house(hand: CardMultiset) -> Optional[BestFiveHand]:
    sets = hand.ranks_of_sets()
    pairs = hand.ranks_of_pairs()
    if len(hand) < 5 or not sets:
        return None
    if len(sets) < 2 and not pairs:
        return None

    # With two sets the lower one only lends two of its cards.
    rank_of_set = sets[0]
    rank_of_pair = sets[1] if len(sets) > 1 else pairs[0]
    cards = _of_rank(hand.cards, rank_of_set) + _of_rank(hand.cards, rank_of_pair)[:2]
    return _build(cards, HandCategory.FULL_HOUSE)


def flush(hand: CardMultiset) -> Optional[BestFiveHand]:
    suit = hand.suit_of_flush()
    if len(hand) < 5 or suit is None:
        return None
    return _build([c for c in hand.cards if c.suit == suit], HandCategory.FLUSH)


def straight(hand: CardMultiset) -> Optional[BestFiveHand]:
    heads = hand.head_ranks_of_straight()
    if len(hand) < 5 or not heads:
        return None
    cards = [_of_rank(hand.cards, rank)[0] for rank in straight_ranks(heads[0])]
    return _build(cards, HandCategory.STRAIGHT)


def three_of_a_kind(hand: CardMultiset) -> Optional[BestFiveHand]:
    sets = hand.ranks_of_sets()
    if len(hand) < 5 or not sets:
        return None
    rank = sets[0]
    cards = _of_rank(hand.cards, rank) + _not_of_ranks(hand.cards, rank)[:2]
    return _build(cards, HandCategory.THREE_OF_A_KIND)


def two_pair(hand: CardMultiset) -> Optional[BestFiveHand]:
    pairs = hand.ranks_of_pairs()
    if len(hand) < 5 or len(pairs) < 2:
        return None
    higher, lower = pairs[0], pairs[1]
    cards = (_of_rank(hand.cards, higher)
             + _of_rank(hand.cards, lower)
             + _not_of_ranks(hand.cards, higher, lower)[:1])
    return _build(cards, HandCategory.TWO_PAIR)


def pair(hand: CardMultiset) -> Optional[BestFiveHand]:
    pairs = hand.ranks_of_pairs()
    if len(hand) < 5 or not pairs:
        return None
    rank = pairs[0]
    cards = _of_rank(hand.cards, rank) + _not_of_ranks(hand.cards, rank)[:3]
    return _build(cards, HandCategory.PAIR)


def high_card(hand: CardMultiset) -> Optional[BestFiveHand]:
    if len(hand) < 5:
        return None
    return _build(hand.cards, HandCategory.HIGH_CARD)


# Strongest first.
CASCADE: Tuple[Tuple[HandCategory, Detector], ...] = (
    (HandCategory.ROYAL_FLUSH, royal_flush),
    (HandCategory.STRAIGHT_FLUSH, straight_flush),
    (HandCategory.FOUR_OF_A_KIND, four_of_a_kind),
    (HandCategory.FULL_HOUSE, full_house),
    (HandCategory.FLUSH, flush),
    (HandCategory.STRAIGHT, straight),
    (HandCategory.THREE_OF_A_KIND, three_of_a_kind),
    (HandCategory.TWO_PAIR, two_pair),
    (HandCategory.PAIR, pair),
    (HandCategory.HIGH_CARD, high_card),
)


def find_best_five_hand(hand: CardMultiset) -> Optional[BestFiveHand]:
    """Return the hand of the strongest matching category, or None under 5 cards."""
    for _, detect in CASCADE:
        best = detect(hand)
        if best is not None:
            return best
    return None

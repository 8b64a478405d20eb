"""Rules of thumb deciding which hands keep playing before the showdown."""

from typing import Sequence

from holdem_equity.models.card import Card, Rank
from holdem_equity.models.ordering import POKER_ORDER
from holdem_equity.models.starting_hand import StartingHand
from holdem_equity.simulation.detectors import find_best_five_hand
from holdem_equity.simulation.hand_value import HandCategory
from holdem_equity.simulation.multiset import CardMultiset

# Minimum pre-flop score of a hand that sees the flop.
PREFLOP_TARGET_SCORE = 3


def card_rank_score(rank: Rank) -> int:
    if rank in (Rank.ACE, Rank.KING):
        return 3
    if rank in (Rank.QUEEN, Rank.JACK, Rank.TEN):
        return 2
    if Rank.SIX <= rank <= Rank.NINE:
        return 1
    return 0


def starting_hand_score(hand: StartingHand) -> int:
    score = sum(card_rank_score(c.rank) for c in hand.cards)
    if hand.is_pair:
        score += 3
    if hand.is_suited:
        score += 1
    if hand.is_connector:
        score += 1
    return score


def evaluate_starting_hand(hand: StartingHand) -> bool:
    """Whether the hand is worth playing to the flop."""
    return starting_hand_score(hand) >= PREFLOP_TARGET_SCORE


def evaluate_flop_hand(hand: StartingHand, flop: Sequence[Card]) -> bool:
    """Whether the hand is worth playing past the flop.

    Keeps two overcards, strong draws, one overcard with a straight draw,
    and anything that already makes a pair or better.
    """
    greatest_flop_rank = max(flop, key=POKER_ORDER.card_key).rank
    over_card_count = sum(
        1 for c in hand.cards if POKER_ORDER.compare_ranks(c.rank, greatest_flop_rank) >= 0
    )
    if over_card_count >= 2:
        return True

    total = CardMultiset.from_starting_hand_and_board(hand, flop)
    draws = total.straight_draw_ranks()
    if len(draws) >= 2 or total.is_flush_draw():
        return True
    if over_card_count == 1 and len(draws) == 1:
        return True

    best = find_best_five_hand(total)
    return best is not None and best.category != HandCategory.HIGH_CARD

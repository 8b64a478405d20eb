"""Data models for the hold'em equity simulator."""

from holdem_equity.models.card import Card, Rank, Suit, SuitColor
from holdem_equity.models.ordering import POKER_ORDER, RankOrder
from holdem_equity.models.starting_hand import StartingHand
from holdem_equity.models.simulation import (
    Phase, TrialOutcome, TrialRecord, SimulationConfig
)

__all__ = [
    "Card", "Rank", "Suit", "SuitColor",
    "POKER_ORDER", "RankOrder",
    "StartingHand",
    "Phase", "TrialOutcome", "TrialRecord", "SimulationConfig",
]

"""Hand evaluation and Monte Carlo simulation."""

from holdem_equity.simulation.deck import Deck, DeckExhaustedError
from holdem_equity.simulation.board import Board
from holdem_equity.simulation.multiset import CardMultiset
from holdem_equity.simulation.evaluator import BestFiveHand, HandCategory, HandEvaluator, HandValue
from holdem_equity.simulation.aggregator import AggregationResult, Aggregator
from holdem_equity.simulation.engine import SimulationEngine, SimulationError

__all__ = [
    "Deck", "DeckExhaustedError", "Board", "CardMultiset",
    "BestFiveHand", "HandCategory", "HandEvaluator", "HandValue",
    "AggregationResult", "Aggregator", "SimulationEngine", "SimulationError",
]

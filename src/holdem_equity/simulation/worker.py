"""Monte Carlo worker running independent trials."""

import logging
import random
from typing import List, Optional

from holdem_equity.models.simulation import Phase, SimulationConfig, TrialOutcome, TrialRecord
from holdem_equity.models.starting_hand import StartingHand
from holdem_equity.simulation.board import Board
from holdem_equity.simulation.channel import ResultChannel
from holdem_equity.simulation.heuristics import evaluate_flop_hand, evaluate_starting_hand
from holdem_equity.simulation.multiset import CardMultiset
from holdem_equity.simulation.detectors import find_best_five_hand

logger = logging.getLogger(__name__)


def play_trial(board: Board, num_of_players: int,
               use_heuristics: bool = True) -> List[TrialRecord]:
    """Play one deal to the end and report every player's outcome.

    Args:
        board: A board that has not dealt any card yet.
        num_of_players: Number of starting hands to deal.
        use_heuristics: Drop weak hands before the flop and on the flop.

    Returns:
        Exactly one record per dealt starting hand.
    """
    records: List[TrialRecord] = []
    hands = board.deal_starting_hands(num_of_players)

    if use_heuristics:
        playing = [h for h in hands if evaluate_starting_hand(h)]
        records.extend(
            TrialRecord(h, TrialOutcome.PREFLOP_DROP) for h in hands if h not in playing
        )
        if len(playing) <= 1:
            records.extend(TrialRecord(h, TrialOutcome.PREFLOP_WIN) for h in playing)
            return records
        hands = playing

    board.deal_until(Phase.FLOP)
    if use_heuristics:
        flop = board.cards
        kept = [h for h in hands if evaluate_flop_hand(h, flop)]
        # Nobody likes the flop: everyone checks it down.
        if kept:
            records.extend(
                TrialRecord(h, TrialOutcome.FLOP_DROP) for h in hands if h not in kept
            )
            hands = kept
        if len(hands) == 1:
            records.append(TrialRecord(hands[0], TrialOutcome.FLOP_WIN))
            return records

    board.deal_until(Phase.RIVER)
    records.extend(show_down(hands, board))
    return records


def show_down(hands: List[StartingHand], board: Board) -> List[TrialRecord]:
    """Compare the remaining hands. Every hand holding the top value wins or ties."""
    bests = []
    for hand in hands:
        best = find_best_five_hand(CardMultiset.from_starting_hand_and_board(hand, board.cards))
        if best is None:
            raise ValueError(f"Showdown needs at least 5 cards, board has {len(board.cards)}")
        bests.append((hand, best))

    top = max(best.value() for _, best in bests)
    winner_count = sum(1 for _, best in bests if best.value() == top)
    win = TrialOutcome.SHOWDOWN_WIN if winner_count == 1 else TrialOutcome.SHOWDOWN_TIE

    return [
        TrialRecord(hand, win if best.value() == top else TrialOutcome.SHOWDOWN_LOSE,
                    best.category)
        for hand, best in bests
    ]


class SimulationWorker:
    """Runs a fixed number of trials and streams their records to a channel.

    Nothing is shared with other workers except the channel: each worker
    owns its random source, decks and boards.
    """

    def __init__(self, worker_id: int, config: SimulationConfig,
                 channel: ResultChannel[TrialRecord],
                 rng: Optional[random.Random] = None):
        self.worker_id = worker_id
        self.config = config
        self.channel = channel
        self.rng = rng or random.Random()
        self.trials_done = 0
        self.records_sent = 0
        self.records_dropped = 0
        self.error: Optional[BaseException] = None

    def run_trial(self) -> List[TrialRecord]:
        board = Board(rng=self.rng)
        records = play_trial(board, self.config.player_count, self.config.use_heuristics)
        for record in records:
            if self.channel.send(record):
                self.records_sent += 1
            else:
                self.records_dropped += 1
        self.trials_done += 1
        return records

    def run(self) -> None:
        """Run all trials, then signal the channel. Failures are kept in ``error``."""
        logger.debug("Worker %d starting %d trials", self.worker_id, self.config.trials_per_worker)
        try:
            for _ in range(self.config.trials_per_worker):
                self.run_trial()
        except Exception as e:
            self.error = e
            logger.exception("Worker %d failed after %d trials", self.worker_id, self.trials_done)
        finally:
            self.channel.finish()
        if self.records_dropped:
            logger.debug("Worker %d: %d records dropped by closed channel",
                         self.worker_id, self.records_dropped)
        logger.debug("Worker %d finished %d trials", self.worker_id, self.trials_done)

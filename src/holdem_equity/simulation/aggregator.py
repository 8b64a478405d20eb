"""Folding of trial records into per starting-hand statistics."""

import logging
import queue
from collections import Counter
from typing import Callable, Dict, Iterable, List, Optional

from holdem_equity.models.ordering import POKER_ORDER
from holdem_equity.models.simulation import TrialOutcome, TrialRecord
from holdem_equity.models.starting_hand import StartingHand
from holdem_equity.simulation.channel import FINISHED, ResultChannel
from holdem_equity.simulation.hand_value import HandCategory

logger = logging.getLogger(__name__)


class AggregationResult:
    """Counters of one starting-hand shape such as 'AKs' or '77'."""

    def __init__(self, example_hand: StartingHand):
        self.example_hand = example_hand
        self.outcome_counts: Counter = Counter()
        self.category_counts: Counter = Counter()

    @property
    def hand_summary(self) -> str:
        return self.example_hand.summary()

    def count_up(self, record: TrialRecord) -> None:
        self.outcome_counts[record.outcome] += 1
        if record.category is not None:
            self.category_counts[record.category] += 1

    def outcome_count(self, outcome: TrialOutcome) -> int:
        return self.outcome_counts.get(outcome, 0)

    def category_count(self, category: HandCategory) -> int:
        return self.category_counts.get(category, 0)

    @property
    def actual_count(self) -> int:
        return sum(self.outcome_counts.values())

    @property
    def adjusted_count(self) -> int:
        """Count scaled so shapes with different combo numbers compare.

        A pair has 6 combos, a suited hand 4 and an offsuit hand 12.
        """
        if self.example_hand.is_pair:
            factor = 2
        elif self.example_hand.is_suited:
            factor = 3
        else:
            factor = 1
        return self.actual_count * factor

    @property
    def win_count(self) -> int:
        return sum(n for outcome, n in self.outcome_counts.items() if outcome.is_win)

    @property
    def tie_count(self) -> int:
        return self.outcome_count(TrialOutcome.SHOWDOWN_TIE)

    @property
    def win_rate(self) -> float:
        if not self.actual_count:
            return 0.0
        return self.win_count / self.actual_count

    def to_row(self) -> Dict[str, object]:
        row: Dict[str, object] = {
            "hand": self.hand_summary,
            "actual": self.actual_count,
            "adjusted": self.adjusted_count,
            "win_rate": round(self.win_rate, 6),
        }
        for outcome in TrialOutcome:
            row[outcome.value] = self.outcome_count(outcome)
        for category in HandCategory:
            row[category.name.lower()] = self.category_count(category)
        return row

    def __repr__(self) -> str:
        return f"AggregationResult({self.hand_summary}, n={self.actual_count})"


class Aggregator:
    """Single consumer combining the records of all workers.

    Folding only adds to counters, so the result does not depend on the
    order records arrive in.
    """

    def __init__(self):
        self.results: Dict[str, AggregationResult] = {}
        self.total_records = 0

    def fold(self, record: TrialRecord) -> None:
        key = record.summary
        result = self.results.get(key)
        if result is None:
            result = self.results[key] = AggregationResult(record.starting_hand)
        result.count_up(record)
        self.total_records += 1

    def fold_all(self, records: Iterable[TrialRecord]) -> None:
        for record in records:
            self.fold(record)

    def consume(self, channel: ResultChannel[TrialRecord], producer_count: int,
                poll_interval: float = 0.5,
                on_record: Optional[Callable[[TrialRecord], None]] = None) -> int:
        """Fold records from ``channel`` until every producer has finished.

        Returns:
            Number of records folded.
        """
        finished = 0
        folded = 0
        while finished < producer_count:
            try:
                item = channel.receive(timeout=poll_interval)
            except queue.Empty:
                continue
            if item is FINISHED:
                finished += 1
                logger.debug("%d of %d producers finished", finished, producer_count)
                continue
            self.fold(item)
            folded += 1
            if on_record is not None:
                on_record(item)
        return folded

    def get(self, summary: str) -> Optional[AggregationResult]:
        return self.results.get(summary)

    def sorted_results(self, sort_by: str = "hand") -> List[AggregationResult]:
        """Results ordered by 'hand' (strongest shape first), 'count' or 'win_rate'."""
        results = list(self.results.values())
        if sort_by == "count":
            return sorted(results, key=lambda r: (-r.actual_count, r.hand_summary))
        if sort_by == "win_rate":
            return sorted(results, key=lambda r: (-r.win_rate, r.hand_summary))
        if sort_by == "hand":
            return sorted(results, key=_shape_sort_key)
        raise ValueError(f"Unknown sort key: {sort_by}")

    def __len__(self) -> int:
        return len(self.results)


def _shape_sort_key(result: AggregationResult):
    hand = result.example_hand
    return (
        not hand.is_pair,
        -POKER_ORDER.rank_key(hand.higher_card.rank),
        -POKER_ORDER.rank_key(hand.lower_card.rank),
        not hand.is_suited,
    )

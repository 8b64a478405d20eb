"""Monte Carlo simulation engine: a worker pool feeding one aggregator."""

import logging
import random
import threading
import time
from typing import Callable, List, Optional

from holdem_equity import config as settings
from holdem_equity.models.simulation import SimulationConfig, TrialRecord
from holdem_equity.simulation.aggregator import Aggregator
from holdem_equity.simulation.channel import ResultChannel
from holdem_equity.simulation.worker import SimulationWorker

logger = logging.getLogger(__name__)


class SimulationError(RuntimeError):
    """Raised when a worker could not finish its trials."""


class SimulationEngine:
    """Runs independent workers in threads and folds their records.

    Workers share nothing but the result channel; the aggregator is the
    only place where their results meet.
    """

    def __init__(self, config: SimulationConfig,
                 poll_interval: Optional[float] = None):
        """Initialize the simulation engine.

        Args:
            config: The simulation configuration.
            poll_interval: Seconds the aggregator waits on the channel per read.

        Raises:
            ValueError: The configuration cannot be simulated.
        """
        config.validate()
        self.config = config
        self.poll_interval = settings.CHANNEL_POLL_INTERVAL if poll_interval is None else poll_interval
        self.channel: Optional[ResultChannel[TrialRecord]] = None
        self.workers: List[SimulationWorker] = []
        self.aggregator = Aggregator()
        self.elapsed: float = 0.0

    def _worker_rng(self, index: int) -> random.Random:
        if self.config.seed is None:
            return random.Random()
        return random.Random(self.config.seed + index)

    def run(self, on_record: Optional[Callable[[TrialRecord], None]] = None) -> Aggregator:
        """Run every worker to completion and return the aggregated results.

        Every call is a fresh run: repeated calls return new aggregators.

        Raises:
            SimulationError: A worker failed; the partial results are discarded.
        """
        # Fresh channel, workers and aggregator per run.
        self.channel = ResultChannel()
        self.workers = [
            SimulationWorker(i, self.config, self.channel, self._worker_rng(i))
            for i in range(self.config.worker_count)
        ]
        self.aggregator = Aggregator()

        logger.info(
            "Simulating %d trials of %d players on %d workers",
            self.config.total_trials, self.config.player_count, self.config.worker_count,
        )
        started = time.perf_counter()
        threads = [
            threading.Thread(target=w.run, name=f"holdem-worker-{w.worker_id}", daemon=True)
            for w in self.workers
        ]
        for t in threads:
            t.start()

        try:
            folded = self.aggregator.consume(
                self.channel, len(self.workers), self.poll_interval, on_record
            )
        finally:
            self.channel.close()
            for t in threads:
                t.join()
            # Drop anything a worker queued while the first close was draining.
            self.channel.close()
        self.elapsed = time.perf_counter() - started

        failed = [w for w in self.workers if w.error is not None]
        if failed:
            first = failed[0]
            raise SimulationError(
                f"{len(failed)} of {len(self.workers)} workers failed; "
                f"worker {first.worker_id}: {first.error}"
            ) from first.error

        logger.info(
            "Folded %d records into %d starting hands in %.2fs",
            folded, len(self.aggregator), self.elapsed,
        )
        return self.aggregator

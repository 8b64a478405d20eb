"""Simulation data models for Monte Carlo trials."""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from holdem_equity.models.starting_hand import StartingHand

if TYPE_CHECKING:
    from holdem_equity.simulation.evaluator import HandCategory

# Two hole cards per player plus five community cards must fit in a deck.
DECK_SIZE = 52
COMMUNITY_CARD_COUNT = 5
MAX_PLAYERS = (DECK_SIZE - COMMUNITY_CARD_COUNT) // 2


class Phase(str, Enum):
    """Dealing phase of the board."""
    PREFLOP = "preflop"
    FLOP = "flop"
    TURN = "turn"
    RIVER = "river"

    @property
    def order(self) -> int:
        return ["preflop", "flop", "turn", "river"].index(self.value)

    @property
    def cards_to_deal(self) -> int:
        """Number of community cards dealt when entering this phase."""
        return {"preflop": 0, "flop": 3, "turn": 1, "river": 1}[self.value]

    @property
    def next(self) -> Optional["Phase"]:
        phases = list(Phase)
        if self.order + 1 < len(phases):
            return phases[self.order + 1]
        return None


class TrialOutcome(str, Enum):
    """What happened to one starting hand in one trial."""
    PREFLOP_DROP = "preflop_drop"
    PREFLOP_WIN = "preflop_win"
    FLOP_DROP = "flop_drop"
    FLOP_WIN = "flop_win"
    SHOWDOWN_WIN = "showdown_win"
    SHOWDOWN_TIE = "showdown_tie"
    SHOWDOWN_LOSE = "showdown_lose"

    @property
    def is_win(self) -> bool:
        return self in (TrialOutcome.PREFLOP_WIN, TrialOutcome.FLOP_WIN,
                        TrialOutcome.SHOWDOWN_WIN)

    @property
    def is_showdown(self) -> bool:
        return self in (TrialOutcome.SHOWDOWN_WIN, TrialOutcome.SHOWDOWN_TIE,
                        TrialOutcome.SHOWDOWN_LOSE)


@dataclass(frozen=True)
class TrialRecord:
    """One outcome of one player in one trial."""
    starting_hand: StartingHand
    outcome: TrialOutcome
    # Only set for hands that reached the showdown.
    category: Optional["HandCategory"] = None

    @property
    def summary(self) -> str:
        return self.starting_hand.summary()


@dataclass
class SimulationConfig:
    """Simulation run configuration."""
    player_count: int = 6
    worker_count: int = 8
    trials_per_worker: int = 20_000
    use_heuristics: bool = True
    seed: Optional[int] = None

    @classmethod
    def from_env(cls) -> "SimulationConfig":
        """Build a configuration from environment defaults."""
        from holdem_equity import config
        return cls(
            player_count=config.DEFAULT_PLAYERS,
            worker_count=config.DEFAULT_WORKERS,
            trials_per_worker=config.DEFAULT_TRIALS_PER_WORKER,
            use_heuristics=config.USE_HEURISTICS,
            seed=config.SEED,
        )

    @property
    def total_trials(self) -> int:
        return self.worker_count * self.trials_per_worker

    def validate(self) -> None:
        """Raise ValueError if the configuration cannot be simulated."""
        if not 2 <= self.player_count <= MAX_PLAYERS:
            raise ValueError(
                f"Player count must be between 2 and {MAX_PLAYERS}, got {self.player_count}"
            )
        if self.worker_count < 1:
            raise ValueError(f"Worker count must be at least 1, got {self.worker_count}")
        if self.trials_per_worker < 0:
            raise ValueError(f"Trial count must not be negative, got {self.trials_per_worker}")

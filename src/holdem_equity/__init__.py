"""Texas Hold'em hand evaluation and Monte Carlo starting-hand simulation."""

__version__ = "0.1.0"

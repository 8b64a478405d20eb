"""Export of simulation results."""

from holdem_equity.export.aggregate import AggregateExporter

__all__ = ["AggregateExporter"]

"""Output formatting for terminal and tables."""

from holdem_equity.formatters.table import TableFormatter

__all__ = ["TableFormatter"]

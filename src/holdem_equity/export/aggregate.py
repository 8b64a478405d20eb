"""CSV exporter for aggregated simulation results."""

from pathlib import Path
from typing import List, Union

import pandas as pd

from holdem_equity.models.simulation import TrialOutcome
from holdem_equity.simulation.aggregator import Aggregator
from holdem_equity.simulation.evaluator import HandCategory


def column_names() -> List[str]:
    """Columns of the exported table, in order."""
    return (
        ["hand", "actual", "adjusted", "win_rate"]
        + [o.value for o in TrialOutcome]
        + [c.name.lower() for c in HandCategory]
    )


class AggregateExporter:
    """Exports aggregated results as a DataFrame or CSV file."""

    @staticmethod
    def to_dataframe(aggregator: Aggregator, sort_by: str = "hand") -> pd.DataFrame:
        """One row per starting-hand shape; zero counts are kept."""
        rows = [r.to_row() for r in aggregator.sorted_results(sort_by)]
        return pd.DataFrame(rows, columns=column_names())

    @staticmethod
    def to_csv(aggregator: Aggregator, sort_by: str = "hand") -> str:
        return AggregateExporter.to_dataframe(aggregator, sort_by).to_csv(index=False)

    @staticmethod
    def write_csv(aggregator: Aggregator, path: Union[str, Path],
                  sort_by: str = "hand") -> Path:
        """Write the table to ``path`` and return it."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        AggregateExporter.to_dataframe(aggregator, sort_by).to_csv(path, index=False)
        return path
